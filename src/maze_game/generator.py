import random
from dataclasses import dataclass

from maze_game.endpoints import (
    EndpointSelector,
    FarthestPointSelector,
    selector_for_level,
)
from maze_game.grid import (
    Cell,
    Direction,
    FrozenGrid,
    Grid,
    create_empty_grid,
    freeze_grid,
    is_valid_cell,
    neighbor,
)

MIN_LEVEL = 1
MAX_LEVEL = 5

# level -> (long side, short side)
MAZE_SIZES: dict[int, tuple[int, int]] = {
    1: (5, 3),
    2: (6, 4),
    3: (7, 5),
    4: (8, 5),
    5: (9, 6),
}

ORIENTATIONS = ("landscape", "portrait")


@dataclass(frozen=True)
class MazeData:
    """A finished maze. Walls are frozen, so the whole object is hashable."""

    grid: FrozenGrid
    start: Cell
    end: Cell
    rows: int
    cols: int
    level: int | None = None

    @property
    def label(self) -> str:
        return f"{self.cols} x {self.rows}"


def clamp_level(level: int) -> int:
    return max(MIN_LEVEL, min(MAX_LEVEL, level))


def get_maze_size(level: int, orientation: str = "landscape") -> tuple[int, int]:
    """
    Map a level to concrete ``(rows, cols)``.

    Out-of-range levels are clamped to the nearest tier. Landscape mazes are
    wider than tall, portrait mazes the other way round.
    """
    if orientation not in ORIENTATIONS:
        raise ValueError(
            f"Unknown orientation {orientation!r}, expected one of {', '.join(ORIENTATIONS)}."
        )
    large, small = MAZE_SIZES[clamp_level(level)]
    if orientation == "portrait":
        return large, small
    return small, large


def carve_maze(
    rows: int, cols: int, rng: random.Random, origin: Cell | None = None
) -> Grid:
    """
    Carve a perfect maze with an iterative randomized depth-first search.

    Args:
        rows (int): Number of cell rows.
        cols (int): Number of cell columns.
        rng (random.Random): Source of all randomness (direction order, origin).
        origin (Cell, optional): Cell to start carving from. Defaults to a
                                 random cell.

    Returns
    -------
        list: ``rows`` lists of ``cols`` CellWalls forming a spanning tree.
    """
    grid = create_empty_grid(rows, cols)

    if origin is None:
        origin = Cell(rng.randrange(rows), rng.randrange(cols))
    elif not is_valid_cell(origin.y, origin.x, rows, cols):
        raise ValueError(f"Origin {origin} lies outside a {rows}x{cols} maze.")

    visited = [[False for _ in range(cols)] for _ in range(rows)]

    # Explicit stack instead of recursion (stores Cells)
    stack = [origin]
    visited[origin.y][origin.x] = True

    while stack:
        current = stack[-1]

        directions = list(Direction)
        rng.shuffle(directions)

        for direction in directions:
            nxt = neighbor(current, direction)
            if is_valid_cell(nxt.y, nxt.x, rows, cols) and not visited[nxt.y][nxt.x]:
                # Remove the wall on both sides
                setattr(grid[current.y][current.x], direction.wall, False)
                setattr(grid[nxt.y][nxt.x], direction.opposite_wall, False)

                visited[nxt.y][nxt.x] = True
                stack.append(nxt)
                break
        else:
            stack.pop()  # Backtrack

    return grid


def _resolve_rng(rng: random.Random | None, seed: int | None) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed)


def generate_maze_for_size(
    rows: int,
    cols: int,
    rng: random.Random | None = None,
    seed: int | None = None,
    selector: EndpointSelector | None = None,
    level: int | None = None,
) -> MazeData:
    """
    Carve a ``rows`` x ``cols`` maze and choose its start and end.

    Pass either ``rng`` or ``seed`` for reproducible mazes; with neither a
    fresh unseeded generator is used. ``selector`` defaults to the
    farthest-point strategy.
    """
    rng = _resolve_rng(rng, seed)
    if selector is None:
        selector = FarthestPointSelector()

    grid = carve_maze(rows, cols, rng)
    start, end = selector.select(grid, rng)

    return MazeData(
        grid=freeze_grid(grid),
        start=start,
        end=end,
        rows=rows,
        cols=cols,
        level=level,
    )


def generate_maze(
    level: int,
    rng: random.Random | None = None,
    seed: int | None = None,
    orientation: str = "landscape",
    selector: EndpointSelector | None = None,
) -> MazeData:
    """
    Generate the maze for a level (1-5, clamped).

    The level picks both the size and, unless ``selector`` is given, the
    endpoint strategy (see ``selector_for_level``).
    """
    level = clamp_level(level)
    rows, cols = get_maze_size(level, orientation)
    if selector is None:
        selector = selector_for_level(level)
    return generate_maze_for_size(
        rows, cols, rng=rng, seed=seed, selector=selector, level=level
    )
