import random

import pytest

from maze_game.generator import MazeData
from maze_game.grid import Cell, Direction, create_empty_grid, freeze_grid, neighbor


class NoShuffleRandom(random.Random):
    """Random source whose shuffle keeps the input order (N, S, E, W)."""

    def shuffle(self, x):
        pass


def open_between(grid, a: Cell, b: Cell):
    """Remove the wall between two adjacent cells on both sides."""
    for direction in Direction:
        if neighbor(a, direction) == b:
            setattr(grid[a.y][a.x], direction.wall, False)
            setattr(grid[b.y][b.x], direction.opposite_wall, False)
            return grid
    raise ValueError(f"{a} and {b} are not adjacent")


@pytest.fixture
def no_shuffle_rng():
    return NoShuffleRandom(0)


@pytest.fixture
def corridor_maze():
    """A 1x3 corridor, start on the left and goal on the right."""
    grid = create_empty_grid(1, 3)
    open_between(grid, Cell(0, 0), Cell(0, 1))
    open_between(grid, Cell(0, 1), Cell(0, 2))
    return MazeData(
        grid=freeze_grid(grid), start=Cell(0, 0), end=Cell(0, 2), rows=1, cols=3, level=1
    )


@pytest.fixture
def walled_off_grid():
    """3x3 grid, everything open except the wall between (0, 0) and (0, 1)."""
    grid = create_empty_grid(3, 3)
    for y in range(3):
        for x in range(3):
            if x + 1 < 3 and (y, x) != (0, 0):
                open_between(grid, Cell(y, x), Cell(y, x + 1))
            if y + 1 < 3:
                open_between(grid, Cell(y, x), Cell(y + 1, x))
    return grid
