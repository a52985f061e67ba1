from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import FrozenSet, Optional

import pygame

from config_io import load_json_config
from config_parsing import RENDER_MODES, parse_game_config
from game_types import Direction
from models import GameConfig
from rendering import GameRenderer
from session import Controls, GameSession, SessionEvent

logger = logging.getLogger(__name__)

KEYMAP = {
    Direction.UP: (pygame.K_UP, pygame.K_w),
    Direction.DOWN: (pygame.K_DOWN, pygame.K_s),
    Direction.LEFT: (pygame.K_LEFT, pygame.K_a),
    Direction.RIGHT: (pygame.K_RIGHT, pygame.K_d),
}


def pressed_directions(keys: pygame.key.ScancodeWrapper) -> FrozenSet[Direction]:
    """Map the current keyboard state to the set of held directions."""
    return frozenset(
        direction for direction, codes in KEYMAP.items() if any(keys[c] for c in codes)
    )


class Game:
    """Top-level game orchestration (pygame setup, loop, input, render)."""

    def __init__(self, cfg_path: Path, seed: Optional[int] = None) -> None:
        self.cfg_path = cfg_path
        self.base_dir = cfg_path.parent
        self.cfg: GameConfig = parse_game_config(load_json_config(cfg_path))

        if seed is None:
            seed = self.cfg.maze.seed
        self.rng = random.Random(seed)
        logger.debug("maze rng seed=%s", seed)

        self.render_mode = self.cfg.render.mode
        self.color_mode = self.cfg.render.color_mode

        self._init_pygame()
        self.renderer = GameRenderer(
            self.window_w,
            self.window_h,
            self.cfg.maze.tile_size,
            self.cfg.render,
            self.base_dir,
        )
        self.session = GameSession(
            self.cfg.maze,
            self.cfg.session,
            self.rng,
            now_ms=pygame.time.get_ticks(),
            one_move_per_tick=self.cfg.player.one_move_per_tick,
        )

    # ----------------------------
    # Initialization
    # ----------------------------

    def _init_pygame(self) -> None:
        """Initialize pygame and create window + clock."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.cfg.window.width, self.cfg.window.height))
        self.window_w, self.window_h = self.screen.get_size()
        pygame.display.set_caption(self.cfg.window.title)
        self.clock = pygame.time.Clock()

    # ----------------------------
    # Events / loop
    # ----------------------------

    def _handle_keydown(self, key: int) -> bool:
        """Handle KEYDOWN events.

        Returns:
            False if the game should exit, True otherwise.
        """
        if key == pygame.K_ESCAPE:
            return False
        if key == pygame.K_t:
            self._toggle_render_mode()
        if key == pygame.K_c:
            self._toggle_color_mode()
        return True

    def _toggle_render_mode(self) -> None:
        """Cycle through the render modes, skipping texture when none loaded."""
        order = [m for m in RENDER_MODES if m != "texture" or self.renderer.has_textures]
        try:
            idx = order.index(self.render_mode)
        except ValueError:
            idx = -1
        self.render_mode = order[(idx + 1) % len(order)]

    def _toggle_color_mode(self) -> None:
        self.color_mode = "gray" if self.color_mode == "multicolor" else "multicolor"

    def _handle_events(self) -> bool:
        """Process pygame events.

        Returns:
            False if the game should exit, True otherwise.
        """
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                return False
            if e.type == pygame.KEYDOWN:
                if not self._handle_keydown(e.key):
                    return False
        return True

    def _render(self) -> None:
        self.renderer.render_frame(
            self.screen,
            bg=self.cfg.window.bg,
            context=self.session.context,
            player=self.session.player,
            player_color=self.cfg.player.color,
            remaining_ms=self.session.remaining_ms,
            render_mode=self.render_mode,
            color_mode=self.color_mode,
            game_over=self.session.is_over,
        )

    def run(self) -> None:
        """Run the main loop until the window is closed.

        After a time-out the session stops ticking and the game-over banner
        stays up until the player quits.
        """
        running = True
        while running:
            self.clock.tick(self.cfg.session.fps)
            running = self._handle_events()

            controls = Controls(
                pressed=pressed_directions(pygame.key.get_pressed()),
                quit=not running,
            )
            event = self.session.tick(controls, pygame.time.get_ticks())
            if event is SessionEvent.QUIT:
                break

            self._render()

        pygame.quit()
