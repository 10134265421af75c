from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Cell(NamedTuple):
    """A grid square addressed by row ``y`` and column ``x``."""

    y: int
    x: int


class Direction(Enum):
    """The four compass moves: (dy, dx, wall attribute, opposite wall attribute)."""

    NORTH = (-1, 0, "north", "south")
    SOUTH = (1, 0, "south", "north")
    EAST = (0, 1, "east", "west")
    WEST = (0, -1, "west", "east")

    @property
    def dy(self) -> int:
        return self.value[0]

    @property
    def dx(self) -> int:
        return self.value[1]

    @property
    def wall(self) -> str:
        return self.value[2]

    @property
    def opposite_wall(self) -> str:
        return self.value[3]


@dataclass
class CellWalls:
    """Wall flags of one cell. True means the wall is present."""

    north: bool = True
    south: bool = True
    east: bool = True
    west: bool = True


@dataclass(frozen=True)
class FrozenCellWalls:
    """Read-only wall flags of a finished maze."""

    north: bool = True
    south: bool = True
    east: bool = True
    west: bool = True


Grid = list[list[CellWalls]]
FrozenGrid = tuple[tuple[FrozenCellWalls, ...], ...]


def freeze_grid(grid: Grid) -> FrozenGrid:
    """Copy a carved grid into immutable, hashable rows of FrozenCellWalls."""
    return tuple(
        tuple(
            FrozenCellWalls(walls.north, walls.south, walls.east, walls.west)
            for walls in row
        )
        for row in grid
    )


def create_empty_grid(rows: int, cols: int) -> Grid:
    """
    Create a ``rows`` x ``cols`` grid where every cell is fully walled.

    Raises
    ------
        ValueError: If either dimension is less than 1.
    """
    if rows < 1 or cols < 1:
        raise ValueError(
            f"Maze dimensions must be at least 1x1, got {rows}x{cols}."
        )
    return [[CellWalls() for _ in range(cols)] for _ in range(rows)]


def is_valid_cell(y: int, x: int, rows: int, cols: int) -> bool:
    return 0 <= y < rows and 0 <= x < cols


def neighbor(cell: Cell, direction: Direction) -> Cell:
    """Return the cell one step away in ``direction`` (may lie off the grid)."""
    return Cell(cell.y + direction.dy, cell.x + direction.dx)


def count_passages(grid) -> int:
    """Count open wall pairs, each passage once (south and east sides only)."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    passages = 0
    for y in range(rows):
        for x in range(cols):
            if y + 1 < rows and not grid[y][x].south:
                passages += 1
            if x + 1 < cols and not grid[y][x].east:
                passages += 1
    return passages
