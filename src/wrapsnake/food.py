from __future__ import annotations

import logging
import random

from .grid import Grid
from .snake import SnakeBody
from .state import Cell

logger = logging.getLogger(__name__)


class GridFullError(RuntimeError):
    """Raised when the snake covers every cell and food has nowhere to go."""


def has_free_cell(grid: Grid, snake: SnakeBody) -> bool:
    # A freshly grown tail shares its cell, so count cells, not segments.
    return len(snake.distinct_cells()) < grid.area


def place_food(grid: Grid, snake: SnakeBody, rng: random.Random) -> Cell:
    """Pick a uniformly random cell the snake does not occupy.

    Rejection sampling. Callers check ``has_free_cell`` first; a full board
    raises instead of looping forever.
    """
    if not has_free_cell(grid, snake):
        raise GridFullError(f"no free cell left on {grid!r} for food")

    attempts = 1
    cell = grid.random_cell(rng)
    while snake.occupies(cell):
        attempts += 1
        cell = grid.random_cell(rng)
    logger.debug("food placed at %s after %d draw(s)", cell, attempts)
    return cell
