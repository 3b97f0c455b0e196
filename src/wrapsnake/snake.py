from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from .grid import Grid
from .state import Cell, Direction


class SnakeBody:
    """Chain of occupied cells, stored tail first so the head is ``body[-1]``.

    Growth at the head (eating), slide (head in, tail out) and growth at the
    tail (stagnation penalty) are all O(1) deque operations. Only ``occupies``
    walks the whole chain.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.body: deque[Cell] = deque()
        self.direction = Direction.UP
        self.reset(grid.center)

    def reset(self, center: Cell) -> None:
        self.body = deque([self.grid.wrap(center)])
        self.direction = Direction.UP

    @property
    def head(self) -> Cell:
        return self.body[-1]

    @property
    def tail(self) -> Cell:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.body)

    def cells(self) -> list[Cell]:
        return list(self.body)

    def distinct_cells(self) -> set[Cell]:
        return set(self.body)

    def occupies(self, cell: Cell) -> bool:
        for segment in self.body:
            if segment == cell:
                return True
        return False

    def next_head_cell(self, requested: Direction | None) -> tuple[Cell, Direction]:
        direction = self.direction
        if requested is not None and not requested.is_opposite(self.direction):
            direction = requested
        return self.grid.step(self.head, direction), direction

    def turn(self, direction: Direction) -> None:
        self.direction = direction

    def advance_head(self, cell: Cell) -> None:
        self.body.append(cell)

    def slide(self, cell: Cell) -> None:
        self.body.append(cell)
        self.body.popleft()

    def grow_tail(self) -> None:
        self.body.appendleft(self.body[0])

    def __repr__(self):
        return f"SnakeBody(len={len(self.body)}, head={self.head}, direction={self.direction.name})"
