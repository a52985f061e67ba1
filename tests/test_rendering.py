import random

import pygame
import pytest

from conftest import make_maze_cfg
from level_builder import build_level
from models import RenderConfig
from player import Player
from rendering import GameRenderer, tile_rect

TILE = 40
WALL = (70, 60, 90)
FLOOR = (200, 190, 170)
GOAL = (150, 90, 40)
PLAYER = (235, 200, 60)


def render_cfg(**overrides):
    values = dict(
        mode="flat",
        color_mode="multicolor",
        show_grid=False,
        wall_color=WALL,
        floor_color=FLOOR,
        goal_color=GOAL,
        grid_color=(126, 126, 126),
    )
    values.update(overrides)
    return RenderConfig(**values)


@pytest.fixture(autouse=True)
def pygame_session():
    pygame.init()
    yield
    pygame.quit()


def _pixel(surf, x, y):
    return tuple(surf.get_at(tile_rect(x, y, TILE).center))[:3]


def _draw(renderer, mode="flat", color_mode="multicolor", game_over=False):
    context = build_level(1, make_maze_cfg(tile_size=TILE), random.Random(5))
    surf = pygame.Surface((25 * TILE, 25 * TILE))
    player = Player(context.start)
    renderer.draw_frame(
        surf,
        bg=(0, 0, 0),
        context=context,
        player=player,
        player_color=PLAYER,
        remaining_ms=12_500,
        render_mode=mode,
        color_mode=color_mode,
        game_over=game_over,
    )
    return surf, context


def test_flat_frame_draws_cells_door_and_player(tmp_path):
    renderer = GameRenderer(25 * TILE, 25 * TILE, TILE, render_cfg(), tmp_path)
    surf, context = _draw(renderer)

    assert _pixel(surf, 24, 24) == WALL
    assert _pixel(surf, *context.goal) == GOAL
    assert _pixel(surf, *context.start) == PLAYER
    open_floor = next(
        cell for cell in context.grid.open_cells() if cell not in (context.goal, context.start)
    )
    assert _pixel(surf, *open_floor) == FLOOR


def test_gray_mode_desaturates(tmp_path):
    renderer = GameRenderer(25 * TILE, 25 * TILE, TILE, render_cfg(), tmp_path)
    surf, _ = _draw(renderer, color_mode="gray")
    r, g, b = _pixel(surf, 24, 24)
    assert r == g == b


def test_missing_textures_fall_back_to_flat(tmp_path):
    cfg = render_cfg(mode="texture", textures={"wall": "missing/wall.png"})
    renderer = GameRenderer(25 * TILE, 25 * TILE, TILE, cfg, tmp_path)

    assert not renderer.has_textures
    surf, _ = _draw(renderer, mode="texture")
    assert _pixel(surf, 24, 24) == WALL


def test_loaded_texture_is_used(tmp_path):
    image = pygame.Surface((8, 8))
    image.fill((10, 200, 30))
    pygame.image.save(image, str(tmp_path / "wall.png"))

    cfg = render_cfg(mode="texture", textures={"wall": "wall.png"})
    renderer = GameRenderer(25 * TILE, 25 * TILE, TILE, cfg, tmp_path)
    surf, _ = _draw(renderer, mode="texture")

    assert renderer.has_textures
    assert _pixel(surf, 24, 24) == (10, 200, 30)


def test_missing_font_uses_default(tmp_path):
    renderer = GameRenderer(
        25 * TILE, 25 * TILE, TILE, render_cfg(font="nope.ttf"), tmp_path
    )
    assert renderer.hud_font.get_height() > 0


@pytest.mark.parametrize("mode", ["gradient", "ascii"])
def test_other_modes_render_with_game_over_banner(tmp_path, mode):
    renderer = GameRenderer(25 * TILE, 25 * TILE, TILE, render_cfg(show_grid=True), tmp_path)
    surf, _ = _draw(renderer, mode=mode, game_over=True)
    assert surf.get_size() == (25 * TILE, 25 * TILE)
