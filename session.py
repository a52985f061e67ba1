from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import FrozenSet, Optional

from game_types import MOVE_ORDER, Direction
from level_builder import build_level
from models import LevelContext, MazeConfig, SessionConfig
from player import Player

logger = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = auto()
    LEVEL_COMPLETE = auto()
    GAME_OVER = auto()


class SessionEvent(Enum):
    LEVEL_COMPLETE = auto()
    GAME_OVER = auto()
    QUIT = auto()


@dataclass(frozen=True)
class Controls:
    """Input sampled once per tick."""

    pressed: FrozenSet[Direction] = field(default_factory=frozenset)
    quit: bool = False


class GameSession:
    """Owns the current level, the player and the level clock.

    ``tick`` applies, in order: quit, time limit, moves, goal check. The
    caller supplies the clock as a monotonic millisecond timestamp so that
    the outcome of a tick depends only on its arguments.
    """

    def __init__(
        self,
        maze_cfg: MazeConfig,
        session_cfg: SessionConfig,
        rng: random.Random,
        now_ms: int = 0,
        one_move_per_tick: bool = False,
    ) -> None:
        self.maze_cfg = maze_cfg
        self.session_cfg = session_cfg
        self.rng = rng
        self.one_move_per_tick = one_move_per_tick

        self.context: LevelContext = build_level(session_cfg.start_level, maze_cfg, rng)
        self.player = Player(self.context.start)
        self.state = GameState.PLAYING
        self.closed = False
        self.level_started_ms = now_ms
        self.elapsed_ms = 0

    @property
    def level(self) -> int:
        return self.context.level

    @property
    def time_limit_ms(self) -> int:
        return self.session_cfg.time_limit_ms

    @property
    def remaining_ms(self) -> int:
        return max(0, self.time_limit_ms - self.elapsed_ms)

    @property
    def is_over(self) -> bool:
        return self.closed or self.state is GameState.GAME_OVER

    def tick(self, controls: Controls, now_ms: int) -> Optional[SessionEvent]:
        """Advance one frame.

        Returns:
            The event produced by this tick, if any.
        """
        if self.is_over:
            return None

        if controls.quit:
            self.closed = True
            return SessionEvent.QUIT

        self.elapsed_ms = now_ms - self.level_started_ms
        if self.elapsed_ms >= self.time_limit_ms:
            self.state = GameState.GAME_OVER
            logger.info("Game Over! Time's up! Reached level %s", self.level)
            return SessionEvent.GAME_OVER

        self._apply_moves(controls.pressed)

        if self.player.pos == self.context.goal:
            self._advance_level(now_ms)
            return SessionEvent.LEVEL_COMPLETE
        return None

    def _apply_moves(self, pressed: FrozenSet[Direction]) -> None:
        """Apply pressed directions in MOVE_ORDER, each gated on its own.

        Holding two axes can therefore move the player diagonally in one
        tick unless ``one_move_per_tick`` is set.
        """
        for direction in MOVE_ORDER:
            if direction not in pressed:
                continue
            moved = self.player.try_move(direction, self.context.grid)
            if moved and self.one_move_per_tick:
                return

    def _advance_level(self, now_ms: int) -> None:
        self.state = GameState.LEVEL_COMPLETE
        next_level = self.level + 1
        logger.info("Congratulations! You have successfully reached level %s!", next_level)

        new_context = build_level(next_level, self.maze_cfg, self.rng)
        self.context = new_context
        self.player.reset(new_context.start)
        self.level_started_ms = now_ms
        self.elapsed_ms = 0
        self.state = GameState.PLAYING
