from __future__ import annotations

import random

from .state import Cell, Direction, add_vectors


class Grid:
    """Fixed-size toroidal board: stepping off one edge re-enters on the opposite one."""

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> Cell:
        return (self.width // 2, self.height // 2)

    def wrap(self, cell: Cell) -> Cell:
        x, y = cell
        return ((x + self.width) % self.width, (y + self.height) % self.height)

    def step(self, cell: Cell, direction: Direction) -> Cell:
        return self.wrap(add_vectors(cell, direction.value))

    def random_cell(self, rng: random.Random) -> Cell:
        return (rng.randint(0, self.width - 1), rng.randint(0, self.height - 1))

    def __repr__(self):
        return f"Grid({self.width}x{self.height})"
