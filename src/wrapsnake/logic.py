from __future__ import annotations

import logging
import random

from .clock import GameClock
from .config import Settings
from .food import has_free_cell, place_food
from .grid import Grid
from .snake import SnakeBody
from .state import Cell, Direction, GameStatus

logger = logging.getLogger(__name__)


class SnakeGame:
    """Owns the whole game: snake, food, score, timers and status.

    The driver calls ``tick`` once per frame with a millisecond timestamp and
    whatever the player asked for, then reads the observers to draw. Nothing
    else mutates the game.
    """

    def __init__(self, settings: Settings | None = None, rng: random.Random | None = None):
        self.settings = (settings or Settings()).validate()
        self.rng = rng if rng is not None else random.Random(self.settings.seed)
        self.grid = Grid(self.settings.grid_width, self.settings.grid_height)
        self.snake = SnakeBody(self.grid)
        self.clock = GameClock(self.settings.initial_move_ms, self.settings.min_move_ms)

        self._status = GameStatus.PAUSED
        self._score = 0
        self._high_score = 0
        self._baseline_score = 0
        self._requested: Direction | None = None
        self._food: Cell | None = None
        self._redraw = True

        self.request_restart()

    # --- Observers ---
    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def score(self) -> int:
        return self._score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def food_cell(self) -> Cell | None:
        """Current food, or None once the snake covers the whole board."""
        return self._food

    @property
    def move_period(self) -> int:
        return self.clock.period_ms

    def snake_cells(self) -> list[Cell]:
        """Occupied cells, tail first."""
        return self.snake.cells()

    def consume_redraw(self) -> bool:
        """Return whether anything visible changed since the last call, and clear the flag."""
        dirty, self._redraw = self._redraw, False
        return dirty

    # --- Commands ---
    def request_restart(self) -> None:
        self.snake.reset(self.grid.center)
        self.clock.reset()
        self._score = 0
        self._baseline_score = 0
        self._requested = None
        self._food = place_food(self.grid, self.snake, self.rng)
        self._set_status(GameStatus.PAUSED)
        self._redraw = True
        logger.info("game reset (high score %d)", self._high_score)

    def tick(self, now_ms: int, requested: Direction | None = None, any_key: bool = False) -> None:
        if self._status is GameStatus.PAUSED:
            self._handle_paused(now_ms, requested, any_key)
        elif self._status is GameStatus.RUNNING:
            if requested is not None:
                self._requested = requested
            if self._handle_move(now_ms):
                self._handle_escalation(now_ms)
        # GAME_OVER: frozen until request_restart().

    # --- Tick steps ---
    def _handle_paused(self, now_ms: int, requested: Direction | None, any_key: bool) -> None:
        if not any_key and requested is None:
            return
        if requested is not None:
            self._requested = requested
        self.clock.start(now_ms)
        self._set_status(GameStatus.RUNNING)

    def _handle_move(self, now_ms: int) -> bool:
        """Perform a movement tick if one is due. Returns False once the game is over."""
        if not self.clock.move_due(now_ms):
            return True

        cell, direction = self.snake.next_head_cell(self._requested)
        if self.snake.occupies(cell):
            logger.info("snake hit itself at %s, final score %d", cell, self._score)
            self._set_status(GameStatus.GAME_OVER)
            return False

        self.snake.turn(direction)
        if cell == self._food:
            if not self._eat(cell, now_ms):
                return False
        else:
            self.snake.slide(cell)
        self.clock.mark_moved(now_ms)
        self._redraw = True
        return True

    def _eat(self, cell: Cell, now_ms: int) -> bool:
        """Grow onto the food and score it. Returns False if that filled the board."""
        self.snake.advance_head(cell)
        self._score += 1
        if self._score > self._high_score:
            self._high_score = self._score

        if not has_free_cell(self.grid, self.snake):
            logger.info("snake covers the whole %r, final score %d", self.grid, self._score)
            self._food = None
            self._set_status(GameStatus.GAME_OVER)
            return False

        self._food = place_food(self.grid, self.snake, self.rng)
        self.clock.speed_up(self.settings.food_speedup_ms)
        self.clock.mark_checked(now_ms)
        logger.debug("ate food at %s: score %d, period %dms", cell, self._score, self.clock.period_ms)
        return True

    def _handle_escalation(self, now_ms: int) -> None:
        if not self.clock.escalation_due(now_ms, self.settings.escalation_ms):
            return
        self.clock.mark_checked(now_ms)
        if self._score > self._baseline_score:
            self._baseline_score = self._score
            return
        # No progress: faster and longer.
        self.clock.speed_up(self.settings.stagnation_speedup_ms)
        self.snake.grow_tail()
        self._redraw = True
        logger.info(
            "no score for %dms: period now %dms, length %d",
            self.settings.escalation_ms,
            self.clock.period_ms,
            len(self.snake),
        )

    def _set_status(self, status: GameStatus) -> None:
        if status is not self._status:
            logger.debug("status %s -> %s", self._status.name, status.name)
            self._status = status
            self._redraw = True

    def __repr__(self):
        return (
            f"<SnakeGame status={self._status.name}, score={self._score}, "
            f"length={len(self.snake)}, period={self.clock.period_ms}ms>"
        )
