from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from config_io import ConfigError
from maze_carver import MIN_VIABLE_EXTENT
from models import (
    GameConfig,
    MazeConfig,
    PlayerConfig,
    RenderConfig,
    SessionConfig,
    WindowConfig,
)
from utils import as_color, deep_get

logger = logging.getLogger(__name__)

RENDER_MODES = ("flat", "gradient", "ascii", "texture")
COLOR_MODES = ("multicolor", "gray")
TEXTURE_KEYS = ("wall", "floor", "player", "door")


def _int_setting(cfg: Dict[str, Any], path: str, default: int, minimum: int) -> int:
    """Read an integer at ``path``; fail fast when it is malformed or too small."""
    raw = deep_get(cfg, path, default)
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"{path} must be an integer, got {raw!r}")
    if value < minimum:
        raise ConfigError(f"{path} must be >= {minimum}, got {value}")
    return value


def _choice(raw: Any, allowed: tuple, default: str, path: str) -> str:
    if isinstance(raw, str) and raw.strip().lower() in allowed:
        return raw.strip().lower()
    if raw is not None:
        logger.debug("ignoring %s=%r, using %s", path, raw, default)
    return default


def _parse_textures(raw: Any) -> Dict[str, str]:
    """Keep only known texture slots that name a path."""
    if not isinstance(raw, dict):
        return {}
    return {
        key: str(raw[key]).strip()
        for key in TEXTURE_KEYS
        if isinstance(raw.get(key), str) and raw[key].strip()
    }


def parse_window_config(cfg: Dict[str, Any]) -> WindowConfig:
    return WindowConfig(
        width=_int_setting(cfg, "window.width", 800, 100),
        height=_int_setting(cfg, "window.height", 800, 100),
        title=str(deep_get(cfg, "window.title", "Maze Game")),
        bg=as_color(deep_get(cfg, "window.bg", [0, 0, 0]), (0, 0, 0)),
    )


def parse_maze_config(cfg: Dict[str, Any], window: WindowConfig) -> MazeConfig:
    """Parse maze sizing and goal placement settings.

    The tile size defaults to the window width divided by the grid size, the
    same geometry the goal step is derived from.

    Raises:
        ConfigError: If the grid cannot hold a viable maze.
    """
    grid_size = _int_setting(cfg, "maze.grid_size", 25, MIN_VIABLE_EXTENT)
    base_size = _int_setting(cfg, "maze.base_size", 20, 0)
    size_increment = _int_setting(cfg, "maze.size_increment", 5, 0)
    if min(base_size + size_increment, grid_size) < MIN_VIABLE_EXTENT:
        raise ConfigError(
            f"level 1 extent {base_size + size_increment} is below {MIN_VIABLE_EXTENT}"
        )

    tile_size = _int_setting(
        cfg, "maze.tile_size", max(1, window.width // grid_size), 1
    )

    seed_raw = deep_get(cfg, "maze.seed", None)
    seed: Optional[int] = None
    if seed_raw is not None:
        try:
            seed = int(seed_raw)
        except (TypeError, ValueError):
            raise ConfigError(f"maze.seed must be an integer or null, got {seed_raw!r}")

    return MazeConfig(
        grid_size=grid_size,
        base_size=base_size,
        size_increment=size_increment,
        random_goal_every=_int_setting(cfg, "maze.random_goal_every", 10, 1),
        door_distance_factor=_int_setting(cfg, "maze.door_distance_factor", 1, 0),
        tile_size=tile_size,
        snap_goal_to_room=bool(deep_get(cfg, "maze.snap_goal_to_room", True)),
        seed=seed,
    )


def parse_session_config(cfg: Dict[str, Any]) -> SessionConfig:
    return SessionConfig(
        time_limit_s=_int_setting(cfg, "session.time_limit_s", 25, 1),
        start_level=_int_setting(cfg, "session.start_level", 1, 1),
        fps=_int_setting(cfg, "session.fps", 8, 1),
    )


def parse_player_config(cfg: Dict[str, Any]) -> PlayerConfig:
    """Parse player settings from config data.

    Args:
        cfg: Full config dict.

    Returns:
        PlayerConfig with defaults applied.
    """
    return PlayerConfig(
        color=as_color(deep_get(cfg, "player.color", [235, 200, 60]), (235, 200, 60)),
        one_move_per_tick=bool(deep_get(cfg, "player.one_move_per_tick", False)),
    )


def parse_render_config(cfg: Dict[str, Any]) -> RenderConfig:
    font_raw = deep_get(cfg, "render.font", None)
    return RenderConfig(
        mode=_choice(deep_get(cfg, "render.mode", None), RENDER_MODES, "flat", "render.mode"),
        color_mode=_choice(
            deep_get(cfg, "render.color", None), COLOR_MODES, "multicolor", "render.color"
        ),
        show_grid=bool(deep_get(cfg, "render.show_grid", False)),
        wall_color=as_color(deep_get(cfg, "render.wall_color", [70, 60, 90]), (70, 60, 90)),
        floor_color=as_color(
            deep_get(cfg, "render.floor_color", [200, 190, 170]), (200, 190, 170)
        ),
        goal_color=as_color(deep_get(cfg, "render.goal_color", [150, 90, 40]), (150, 90, 40)),
        grid_color=as_color(
            deep_get(cfg, "render.grid_color", [126, 126, 126]), (126, 126, 126)
        ),
        textures=_parse_textures(deep_get(cfg, "render.textures", {})),
        font=str(font_raw) if isinstance(font_raw, str) and font_raw.strip() else None,
        font_size=_int_setting(cfg, "render.font_size", 24, 6),
    )


def parse_game_config(cfg: Dict[str, Any]) -> GameConfig:
    """Parse a full config dict (as loaded from JSON) into a GameConfig."""
    window = parse_window_config(cfg)
    render = parse_render_config(cfg)
    return GameConfig(
        window=window,
        maze=parse_maze_config(cfg, window),
        session=parse_session_config(cfg),
        player=parse_player_config(cfg),
        render=render,
        log_level=str(cfg.get("log_level", "INFO")).upper(),
    )
