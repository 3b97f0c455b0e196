from __future__ import annotations

from enum import Enum

Cell = tuple[int, int]
# (x, y); y grows downward like screen coordinates.


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def is_opposite(self, other: Direction) -> bool:
        return add_vectors(self.value, other.value) == (0, 0)


class GameStatus(Enum):
    PAUSED = "paused"
    RUNNING = "running"
    GAME_OVER = "game_over"
