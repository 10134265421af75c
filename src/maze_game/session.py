from maze_game.generator import MazeData
from maze_game.grid import Cell, Direction, neighbor
from maze_game.movement import (
    can_move_between,
    extend_drawn_path,
    find_path_to_target,
    is_won,
    star_rating,
)


class PlaySession:
    """
    Player state for one maze: where the icon is, how many moves it took,
    and the path currently being drawn.

    The maze itself is never modified; asking for a new maze means building a
    new session.
    """

    def __init__(self, maze: MazeData):
        self.maze = maze
        self.position: Cell = maze.start
        self.move_count = 0
        self.drawn_path: list[Cell] = []
        self.is_drawing = False

    @property
    def has_won(self) -> bool:
        return is_won(self.position, self.maze)

    @property
    def stars(self) -> int | None:
        if not self.has_won:
            return None
        return star_rating(self.move_count, self.maze.rows, self.maze.cols)

    def step(self, direction: Direction) -> bool:
        """Move one cell. Returns False (and does nothing) if a wall is in the way."""
        if self.has_won:
            return False
        target = neighbor(self.position, direction)
        if not can_move_between(self.position, target, self.maze.grid):
            return False
        self.position = target
        self.move_count += 1
        return True

    def travel_to(self, target: Cell) -> list[Cell] | None:
        """Tap-to-move: walk the shortest route to ``target`` in one go."""
        if self.has_won:
            return None
        path = find_path_to_target(self.position, target, self.maze.grid)
        if not path:
            return path
        self.position = path[-1]
        self.move_count += len(path)
        return path

    # Drawing a path: begin on the icon, extend cell by cell, commit on release.

    def begin_drag(self, cell: Cell | None = None) -> bool:
        if self.has_won or (cell is not None and cell != self.position):
            self.is_drawing = False
            self.drawn_path = []
            return False
        self.is_drawing = True
        self.drawn_path = [self.position]
        return True

    def drag_to(self, cell: Cell) -> list[Cell]:
        if self.is_drawing:
            self.drawn_path = extend_drawn_path(self.drawn_path, cell, self.maze.grid)
        return self.drawn_path

    def end_drag(self) -> list[Cell]:
        """Commit the drawn path. Returns the cells moved through (without the start)."""
        steps = self.drawn_path[1:] if self.is_drawing else []
        self.is_drawing = False
        self.drawn_path = []
        if steps:
            self.position = steps[-1]
            self.move_count += len(steps)
        return steps
