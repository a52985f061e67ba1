from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from game_types import Color, Coord
from grid import Grid


@dataclass(frozen=True)
class LevelContext:
    """Everything generated for one level. Replaced wholesale on level-up."""

    level: int
    extent: int
    start: Coord
    goal: Coord
    grid: Grid


@dataclass(frozen=True)
class WindowConfig:
    width: int
    height: int
    title: str
    bg: Color


@dataclass(frozen=True)
class MazeConfig:
    grid_size: int
    base_size: int
    size_increment: int
    random_goal_every: int
    door_distance_factor: int
    tile_size: int
    snap_goal_to_room: bool
    seed: Optional[int]


@dataclass(frozen=True)
class SessionConfig:
    time_limit_s: int
    start_level: int
    fps: int

    @property
    def time_limit_ms(self) -> int:
        return self.time_limit_s * 1000


@dataclass
class PlayerConfig:
    color: Color
    one_move_per_tick: bool


@dataclass(frozen=True)
class RenderConfig:
    mode: str  # flat|gradient|ascii|texture
    color_mode: str  # multicolor|gray
    show_grid: bool
    wall_color: Color
    floor_color: Color
    goal_color: Color
    grid_color: Color
    textures: Dict[str, str] = field(default_factory=dict)
    font: Optional[str] = None
    font_size: int = 24


@dataclass(frozen=True)
class GameConfig:
    window: WindowConfig
    maze: MazeConfig
    session: SessionConfig
    player: PlayerConfig
    render: RenderConfig
    log_level: str
