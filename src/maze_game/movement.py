from collections import deque

from maze_game.grid import Cell, Direction, is_valid_cell, neighbor

DIRECTION_WORDS = {
    Direction.NORTH: "up",
    Direction.SOUTH: "down",
    Direction.EAST: "right",
    Direction.WEST: "left",
}


def direction_between(from_cell: Cell, to_cell: Cell) -> Direction | None:
    """Return the direction leading from one cell to an adjacent one, else None."""
    for direction in Direction:
        if neighbor(from_cell, direction) == to_cell:
            return direction
    return None


def can_move_between(from_cell: Cell, to_cell: Cell, grid) -> bool:
    """
    Check whether a single step between two cells is legal.

    Non-adjacent or off-grid cells give False rather than an error, since drag
    gestures can offer arbitrary pairs.
    """
    rows, cols = len(grid), len(grid[0])
    if not (
        is_valid_cell(from_cell.y, from_cell.x, rows, cols)
        and is_valid_cell(to_cell.y, to_cell.x, rows, cols)
    ):
        return False

    direction = direction_between(from_cell, to_cell)
    if direction is None:
        return False
    return not getattr(grid[from_cell.y][from_cell.x], direction.wall)


def find_path_to_target(start: Cell, target: Cell, grid) -> list[Cell] | None:
    """
    Find the shortest route from ``start`` to ``target`` through open passages.

    Args:
        start (Cell): Current player position.
        target (Cell): Cell the player wants to reach.
        grid: The maze grid.

    Returns
    -------
        list: The cells to walk through, excluding start and ending at target.
              An empty list if start is already the target, None if the target
              is off the grid or unreachable.
    """
    rows, cols = len(grid), len(grid[0])
    if not (
        is_valid_cell(target.y, target.x, rows, cols)
        and is_valid_cell(start.y, start.x, rows, cols)
    ):
        return None

    queue = deque([(start, [])])  # (current_position, path_so_far)
    visited = {start}

    while queue:
        current, path = queue.popleft()

        if current == target:
            return path

        for direction in Direction:
            nxt = neighbor(current, direction)
            if nxt not in visited and can_move_between(current, nxt, grid):
                visited.add(nxt)
                queue.append((nxt, path + [nxt]))

    return None


def is_valid_path(start: Cell, steps: list[Cell], grid) -> bool:
    """True if every consecutive pair along ``[start, *steps]`` is a legal move."""
    previous = start
    for cell in steps:
        if not can_move_between(previous, cell, grid):
            return False
        previous = cell
    return True


def extend_drawn_path(path: list[Cell], cell: Cell, grid) -> list[Cell]:
    """
    Apply one drag sample to a path being drawn by the player.

    Dragging back onto a cell already on the path cuts the path back to it.
    A new cell is appended only when it is adjacent to the tail and no wall
    blocks the way; any other sample leaves the path as it was.
    """
    if not path:
        return []

    if cell == path[-1]:
        return list(path)

    if cell in path:
        return path[: path.index(cell) + 1]

    if can_move_between(path[-1], cell, grid):
        return [*path, cell]

    return list(path)


def path_to_directions(start: Cell, steps: list[Cell]) -> list[str]:
    """Convert a path into a list of "up", "down", "left", "right" moves."""
    directions = []
    previous = start
    for cell in steps:
        direction = direction_between(previous, cell)
        if direction is None:
            raise ValueError(f"{previous} and {cell} are not adjacent.")
        directions.append(DIRECTION_WORDS[direction])
        previous = cell
    return directions


def is_won(position: Cell, maze) -> bool:
    return position == maze.end


def star_rating(move_count: int, rows: int, cols: int) -> int:
    """Three stars for a run within rows + cols moves, two within four more, else one."""
    base_moves = rows + cols
    if move_count <= base_moves:
        return 3
    if move_count <= base_moves + 4:
        return 2
    return 1
