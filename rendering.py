from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple

import pygame

from game_types import Color, Direction
from grid import Grid
from models import LevelContext, RenderConfig
from player import Player
from utils import apply_color_mode

logger = logging.getLogger(__name__)

# Counter-clockwise degrees for a sprite drawn facing right.
FACING_ANGLES: Dict[Direction, float] = {
    Direction.RIGHT: 0.0,
    Direction.UP: 90.0,
    Direction.LEFT: 180.0,
    Direction.DOWN: -90.0,
}

ASCII_GLYPHS = {"wall": "#", "door": "D", "player": "@"}


def load_font(path: Optional[str], size: int, base_dir: Path) -> pygame.font.Font:
    """Load a TTF font, falling back to pygame's default font."""
    if path:
        font_path = Path(path)
        if not font_path.is_absolute():
            font_path = base_dir / font_path
        try:
            return pygame.font.Font(font_path.as_posix(), size)
        except (OSError, pygame.error) as e:
            logger.warning("font %s unavailable, using default: %s", font_path, e)
    return pygame.font.Font(None, size)


def load_textures(
    paths: Dict[str, str], base_dir: Path, tile_size: int
) -> Dict[str, pygame.Surface]:
    """Load and scale tile textures; slots that fail to load are left out."""
    textures: Dict[str, pygame.Surface] = {}
    for key, raw in paths.items():
        img_path = Path(raw)
        if not img_path.is_absolute():
            img_path = base_dir / img_path
        try:
            image = pygame.image.load(img_path.as_posix())
        except (FileNotFoundError, pygame.error) as e:
            logger.warning("texture %s (%s) unavailable: %s", key, img_path, e)
            continue
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        textures[key] = pygame.transform.smoothscale(image, (tile_size, tile_size))
    return textures


def tile_rect(x: int, y: int, tile_size: int) -> pygame.Rect:
    return pygame.Rect(x * tile_size, y * tile_size, tile_size, tile_size)


def _vertical_gradient_surface(
    size: Tuple[int, int], top: Color, bottom: Color
) -> pygame.Surface:
    """Create a vertical gradient surface from top to bottom."""
    w, h = size
    grad = pygame.Surface((w, h), pygame.SRCALPHA)

    def lerp(a: int, b: int, t: float) -> int:
        return int(a + (b - a) * t)

    for y in range(h):
        t = y / max(1, h - 1)
        color = (
            lerp(top[0], bottom[0], t),
            lerp(top[1], bottom[1], t),
            lerp(top[2], bottom[2], t),
        )
        grad.fill(color, pygame.Rect(0, y, w, 1))
    return grad


def _gradient_for(color: Color, tile_size: int) -> pygame.Surface:
    def clamp(v: int) -> int:
        return max(0, min(255, v))

    top = (
        clamp(int(color[0] * 1.05)),
        clamp(int(color[1] * 1.05)),
        clamp(int(color[2] * 1.05)),
    )
    bottom = (
        clamp(int(color[0] * 0.55)),
        clamp(int(color[1] * 0.55)),
        clamp(int(color[2] * 0.55)),
    )
    return _vertical_gradient_surface((tile_size, tile_size), top, bottom)


class GameRenderer:
    """Draws the maze, door, player and HUD for one session frame."""

    def __init__(
        self,
        window_w: int,
        window_h: int,
        tile_size: int,
        render_cfg: RenderConfig,
        base_dir: Path,
    ) -> None:
        self.window_w = window_w
        self.window_h = window_h
        self.tile_size = tile_size
        self.cfg = render_cfg
        self.hud_font = load_font(render_cfg.font, render_cfg.font_size, base_dir)
        self.banner_font = load_font(render_cfg.font, render_cfg.font_size * 2, base_dir)
        self.tile_font = pygame.font.SysFont("monospace", max(12, int(tile_size * 0.8)))
        self.textures = load_textures(render_cfg.textures, base_dir, tile_size)
        self._gradients: Dict[Color, pygame.Surface] = {}

    @property
    def has_textures(self) -> bool:
        return bool(self.textures)

    def _gradient(self, color: Color) -> pygame.Surface:
        grad = self._gradients.get(color)
        if grad is None:
            grad = _gradient_for(color, self.tile_size)
            self._gradients[color] = grad
        return grad

    def draw_tile(
        self,
        surf: pygame.Surface,
        slot: str,
        rect: pygame.Rect,
        color: Color,
        mode: str,
        color_mode: str,
    ) -> None:
        """Draw one tile for a texture slot (wall|floor|door) in the given mode."""
        color = apply_color_mode(color, color_mode)
        if mode == "texture" and slot in self.textures:
            surf.blit(self.textures[slot], rect)
            return
        if mode == "gradient":
            surf.blit(self._gradient(color), rect)
            return
        if mode == "ascii":
            glyph = ASCII_GLYPHS.get(slot)
            if glyph:
                text = self.tile_font.render(glyph, True, color)
                surf.blit(text, text.get_rect(center=rect.center))
            return
        pygame.draw.rect(surf, color, rect)

    def draw_maze(self, surf: pygame.Surface, grid: Grid, mode: str, color_mode: str) -> None:
        for y in range(grid.height):
            for x in range(grid.width):
                rect = tile_rect(x, y, self.tile_size)
                if grid.is_open(x, y):
                    self.draw_tile(surf, "floor", rect, self.cfg.floor_color, mode, color_mode)
                else:
                    self.draw_tile(surf, "wall", rect, self.cfg.wall_color, mode, color_mode)

    def draw_player(
        self, surf: pygame.Surface, player: Player, color: Color, mode: str, color_mode: str
    ) -> None:
        rect = tile_rect(player.x, player.y, self.tile_size)
        color = apply_color_mode(color, color_mode)
        sprite = self.textures.get("player")
        if mode == "texture" and sprite is not None:
            rotated = pygame.transform.rotate(sprite, FACING_ANGLES[player.facing])
            surf.blit(rotated, rotated.get_rect(center=rect.center))
            return
        if mode == "ascii":
            text = self.tile_font.render(ASCII_GLYPHS["player"], True, color)
            surf.blit(text, text.get_rect(center=rect.center))
            return
        pygame.draw.circle(surf, color, rect.center, int(self.tile_size * 0.38))

    def draw_grid_lines(self, surf: pygame.Surface, grid: Grid, color_mode: str) -> None:
        """Draw the debug grid overlay."""
        color = apply_color_mode(self.cfg.grid_color, color_mode)
        ts = self.tile_size
        for x in range(grid.width + 1):
            pygame.draw.line(surf, color, (x * ts, 0), (x * ts, grid.height * ts), 1)
        for y in range(grid.height + 1):
            pygame.draw.line(surf, color, (0, y * ts), (grid.width * ts, y * ts), 1)

    def draw_hud(
        self, surf: pygame.Surface, level: int, remaining_ms: int, mode: str, color_mode: str
    ) -> None:
        """Draw the level / time bar across the top of the window."""
        bar_height = self.hud_font.get_height() + 12
        bar = pygame.Surface((surf.get_width(), bar_height), pygame.SRCALPHA)
        bar.fill((0, 0, 0, 200))
        surf.blit(bar, (0, 0))

        color_label = "Gray" if color_mode == "gray" else "Multicolor"
        txt = (
            f"Level: {level} | Time: {remaining_ms // 1000} | Mode (T): {mode.title()} "
            f"| Color (C): {color_label} | ESC: quit"
        )
        surf.blit(self.hud_font.render(txt, True, (255, 255, 255)), (10, 6))

    def draw_game_over(self, surf: pygame.Surface, level: int) -> None:
        dim = pygame.Surface((self.window_w, self.window_h), pygame.SRCALPHA)
        dim.fill((0, 0, 0, 190))
        surf.blit(dim, (0, 0))

        title = self.banner_font.render("Game Over! Time's up!", True, (255, 120, 120))
        surf.blit(title, title.get_rect(center=(self.window_w // 2, self.window_h // 2 - 20)))
        sub = self.hud_font.render(
            f"You reached level {level}. Press ESC to quit.", True, (255, 255, 255)
        )
        surf.blit(sub, sub.get_rect(center=(self.window_w // 2, self.window_h // 2 + 30)))

    def draw_frame(
        self,
        surf: pygame.Surface,
        bg: Color,
        context: LevelContext,
        player: Player,
        player_color: Color,
        remaining_ms: int,
        render_mode: str,
        color_mode: str,
        game_over: bool = False,
    ) -> None:
        """Draw a full frame onto ``surf`` without presenting it."""
        mode = render_mode
        if mode == "texture" and not self.has_textures:
            mode = "flat"

        surf.fill(apply_color_mode(bg, color_mode))
        self.draw_maze(surf, context.grid, mode, color_mode)
        door_rect = tile_rect(context.goal[0], context.goal[1], self.tile_size)
        self.draw_tile(surf, "door", door_rect, self.cfg.goal_color, mode, color_mode)
        self.draw_player(surf, player, player_color, mode, color_mode)
        if self.cfg.show_grid:
            self.draw_grid_lines(surf, context.grid, color_mode)
        self.draw_hud(surf, context.level, remaining_ms, mode, color_mode)
        if game_over:
            self.draw_game_over(surf, context.level)

    def render_frame(self, screen: pygame.Surface, **kwargs) -> None:
        """Draw and present a full frame."""
        self.draw_frame(screen, **kwargs)
        pygame.display.flip()
