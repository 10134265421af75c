import random
from collections import deque
from typing import Protocol, runtime_checkable

from maze_game.grid import Cell, Direction, is_valid_cell, neighbor


@runtime_checkable
class EndpointSelector(Protocol):
    """Chooses start and end cells on a carved grid."""

    @property
    def name(self) -> str: ...

    def select(self, grid, rng: random.Random) -> tuple[Cell, Cell]: ...


def _corners(rows: int, cols: int) -> list[Cell]:
    return [
        Cell(0, 0),
        Cell(rows - 1, cols - 1),
        Cell(0, cols - 1),
        Cell(rows - 1, 0),
    ]


def bfs_distances(grid, start: Cell) -> dict[Cell, int]:
    """
    Breadth-first search over open passages.

    Args:
        grid: The carved maze grid (``grid[y][x]`` wall flags).
        start (Cell): The cell to measure distances from.

    Returns
    -------
        dict: Maps every reachable cell to its shortest-path distance from start.
              Insertion order is BFS discovery order.
    """
    rows, cols = len(grid), len(grid[0])
    distances = {start: 0}
    queue = deque([start])

    while queue:
        current = queue.popleft()
        walls = grid[current.y][current.x]

        for direction in Direction:
            nxt = neighbor(current, direction)
            if (
                is_valid_cell(nxt.y, nxt.x, rows, cols)
                and nxt not in distances
                and not getattr(walls, direction.wall)
            ):
                distances[nxt] = distances[current] + 1
                queue.append(nxt)

    return distances


def find_farthest_cell(grid, start: Cell) -> Cell:
    """
    Find a cell at maximum BFS distance from ``start``.

    Ties go to the first cell dequeued at the greatest distance: the running
    maximum only moves when a strictly larger distance shows up.
    """
    farthest = start
    max_distance = 0
    for cell, distance in bfs_distances(grid, start).items():
        if distance > max_distance:
            max_distance = distance
            farthest = cell
    return farthest


class FarthestPointSelector:
    """Start in a random corner, end at the cell farthest from it."""

    name = "farthest"

    def select(self, grid, rng: random.Random) -> tuple[Cell, Cell]:
        rows, cols = len(grid), len(grid[0])
        start = rng.choice(_corners(rows, cols))
        return start, find_farthest_cell(grid, start)

    def __repr__(self) -> str:
        return "FarthestPointSelector()"


class FixedPairSelector:
    """
    Pick start and end from a fixed table of opposite corners.

    With ``include_midpoints`` the table also holds the opposite edge midpoints
    (top/bottom and left/right). No search is run, so the pair is only as
    interesting as the table.
    """

    def __init__(self, include_midpoints: bool = False):
        self.include_midpoints = include_midpoints

    @property
    def name(self) -> str:
        return "fixed-midpoints" if self.include_midpoints else "fixed"

    def pairs(self, rows: int, cols: int) -> list[tuple[Cell, Cell]]:
        top_left, bottom_right, top_right, bottom_left = _corners(rows, cols)
        candidates = [(top_left, bottom_right), (top_right, bottom_left)]
        if self.include_midpoints:
            candidates += [
                (Cell(0, cols // 2), Cell(rows - 1, cols // 2)),
                (Cell(rows // 2, 0), Cell(rows // 2, cols - 1)),
            ]
        # 1-wide grids collapse some pairs onto a single cell
        return [(a, b) for a, b in candidates if a != b]

    def select(self, grid, rng: random.Random) -> tuple[Cell, Cell]:
        rows, cols = len(grid), len(grid[0])
        pairs = self.pairs(rows, cols)
        if not pairs:
            return Cell(0, 0), Cell(0, 0)
        start, end = rng.choice(pairs)
        if rng.random() < 0.5:
            start, end = end, start
        return start, end

    def __repr__(self) -> str:
        return f"FixedPairSelector(include_midpoints={self.include_midpoints})"


SELECTOR_NAMES = ("farthest", "fixed", "fixed-midpoints")


def get_selector(name: str) -> EndpointSelector:
    """Build a selector from its command-line name."""
    if name == "farthest":
        return FarthestPointSelector()
    if name == "fixed":
        return FixedPairSelector()
    if name == "fixed-midpoints":
        return FixedPairSelector(include_midpoints=True)
    raise ValueError(
        f"Unknown endpoint selector {name!r}, expected one of {', '.join(SELECTOR_NAMES)}."
    )


def selector_for_level(level: int) -> EndpointSelector:
    """
    Endpoint policy per difficulty tier.

    Level 1 uses opposite corners, level 2 adds edge midpoints, and levels 3
    and up place the goal at the farthest cell from a random corner.
    """
    if level <= 1:
        return FixedPairSelector()
    if level == 2:
        return FixedPairSelector(include_midpoints=True)
    return FarthestPointSelector()
