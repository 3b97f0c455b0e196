"""
Tests for the board geometry and the snake body.
"""

import pytest

from wrapsnake.grid import Grid
from wrapsnake.snake import SnakeBody
from wrapsnake.state import Direction


class TestGrid:
    """Tests for Grid wrap-around arithmetic."""

    def test_center(self):
        """Center is integer half of each dimension."""
        assert Grid(32, 24).center == (16, 12)

    @pytest.mark.parametrize("direction", list(Direction))
    def test_step_stays_on_board_from_every_edge_cell(self, direction):
        """A single step from any cell lands on the board."""
        grid = Grid(5, 4)
        for x in range(grid.width):
            for y in range(grid.height):
                nx, ny = grid.step((x, y), direction)
                assert 0 <= nx < grid.width and 0 <= ny < grid.height

    def test_right_edge_wraps_to_left(self):
        """Moving right off the last column re-enters at column 0."""
        grid = Grid(32, 24)
        assert grid.step((31, 7), Direction.RIGHT) == (0, 7)

    def test_top_edge_wraps_to_bottom(self):
        """Moving up off row 0 re-enters at the last row."""
        grid = Grid(32, 24)
        assert grid.step((3, 0), Direction.UP) == (3, 23)

    def test_wrap_far_out_of_range(self):
        """Coordinates several boards away still normalize."""
        grid = Grid(10, 10)
        assert grid.wrap((-25, 37)) == (5, 7)

    def test_rejects_empty_grid(self):
        """A zero-sized grid is a configuration error."""
        with pytest.raises(ValueError):
            Grid(0, 10)


class TestSnakeBody:
    """Tests for SnakeBody growth, slide and direction handling."""

    def make_snake(self):
        return SnakeBody(Grid(32, 24))

    def test_reset_creates_single_segment_at_center(self):
        """A new snake is one segment at the center, heading up."""
        snake = self.make_snake()
        assert snake.cells() == [(16, 12)]
        assert snake.head == snake.tail
        assert snake.direction is Direction.UP

    def test_slide_keeps_length(self):
        """Ordinary moves keep the length constant."""
        snake = self.make_snake()
        snake.advance_head((17, 12))
        before = len(snake)
        snake.slide((18, 12))
        assert len(snake) == before
        assert snake.cells() == [(17, 12), (18, 12)]

    def test_slide_on_single_segment_moves_it(self):
        """Length 1: the only segment is replaced by the new head."""
        snake = self.make_snake()
        snake.slide((16, 11))
        assert snake.cells() == [(16, 11)]

    def test_advance_head_grows_by_one_at_the_front(self):
        """Eating adds a head segment and leaves the tail where it was."""
        snake = self.make_snake()
        snake.advance_head((16, 11))
        assert len(snake) == 2
        assert snake.tail == (16, 12)
        assert snake.head == (16, 11)

    def test_grow_tail_duplicates_tail_cell(self):
        """Tail growth adds a segment on the tail's own cell."""
        snake = self.make_snake()
        snake.advance_head((16, 11))
        snake.grow_tail()
        assert snake.cells() == [(16, 12), (16, 12), (16, 11)]
        assert snake.distinct_cells() == {(16, 12), (16, 11)}

    def test_grown_tail_stays_put_for_one_move(self):
        """After tail growth, the next slide leaves the old tail cell occupied."""
        snake = self.make_snake()
        snake.grow_tail()
        snake.slide((16, 11))
        assert snake.cells() == [(16, 12), (16, 11)]

    def test_occupies(self):
        """occupies() sees every segment and nothing else."""
        snake = self.make_snake()
        snake.advance_head((16, 11))
        assert snake.occupies((16, 12))
        assert snake.occupies((16, 11))
        assert not snake.occupies((16, 10))

    def test_next_head_cell_is_pure(self):
        """Computing the next cell does not move or turn the snake."""
        snake = self.make_snake()
        cell, direction = snake.next_head_cell(Direction.LEFT)
        assert (cell, direction) == ((15, 12), Direction.LEFT)
        assert snake.cells() == [(16, 12)]
        assert snake.direction is Direction.UP

    def test_reversal_is_ignored(self):
        """A 180 degree turn request keeps the current direction."""
        snake = self.make_snake()
        snake.turn(Direction.RIGHT)
        cell, direction = snake.next_head_cell(Direction.LEFT)
        assert direction is Direction.RIGHT
        assert cell == (17, 12)

    def test_no_request_keeps_direction(self):
        """Without a request the snake keeps going the same way."""
        snake = self.make_snake()
        assert snake.next_head_cell(None) == ((16, 11), Direction.UP)
