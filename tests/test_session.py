import random

from maze_game.generator import generate_maze
from maze_game.grid import Cell, Direction
from maze_game.movement import find_path_to_target
from maze_game.session import PlaySession


def test_new_session_starts_idle_at_start(corridor_maze):
    session = PlaySession(corridor_maze)
    assert session.position == Cell(0, 0)
    assert session.move_count == 0
    assert not session.has_won
    assert session.stars is None


def test_step_moves_and_wins(corridor_maze):
    session = PlaySession(corridor_maze)

    assert session.step(Direction.EAST)
    assert session.position == Cell(0, 1)
    assert not session.has_won

    assert session.step(Direction.EAST)
    assert session.position == Cell(0, 2)
    assert session.has_won
    assert session.move_count == 2
    assert session.stars == 3


def test_step_into_wall_is_rejected(corridor_maze):
    session = PlaySession(corridor_maze)
    for direction in (Direction.WEST, Direction.NORTH, Direction.SOUTH):
        assert not session.step(direction)
    assert session.position == Cell(0, 0)
    assert session.move_count == 0


def test_no_moves_after_winning(corridor_maze):
    session = PlaySession(corridor_maze)
    session.travel_to(Cell(0, 2))

    assert not session.step(Direction.WEST)
    assert session.travel_to(Cell(0, 0)) is None
    assert not session.begin_drag()
    assert session.position == Cell(0, 2)


def test_travel_to_counts_every_step(corridor_maze):
    session = PlaySession(corridor_maze)
    assert session.travel_to(Cell(0, 2)) == [Cell(0, 1), Cell(0, 2)]
    assert session.move_count == 2
    assert session.has_won


def test_travel_to_unreachable_or_current_cell(corridor_maze):
    session = PlaySession(corridor_maze)
    assert session.travel_to(Cell(4, 4)) is None
    assert session.travel_to(Cell(0, 0)) == []
    assert session.position == Cell(0, 0)
    assert session.move_count == 0


def test_drag_must_begin_on_icon(corridor_maze):
    session = PlaySession(corridor_maze)
    assert not session.begin_drag(Cell(0, 1))
    assert session.drag_to(Cell(0, 1)) == []
    assert session.end_drag() == []
    assert session.position == Cell(0, 0)


def test_drawn_path_with_backtrack(corridor_maze):
    session = PlaySession(corridor_maze)
    assert session.begin_drag(Cell(0, 0))

    assert session.drag_to(Cell(0, 1)) == [Cell(0, 0), Cell(0, 1)]
    assert session.drag_to(Cell(0, 0)) == [Cell(0, 0)]
    session.drag_to(Cell(0, 1))
    session.drag_to(Cell(1, 1))  # Off the grid, ignored
    assert session.drag_to(Cell(0, 2)) == [Cell(0, 0), Cell(0, 1), Cell(0, 2)]

    assert session.end_drag() == [Cell(0, 1), Cell(0, 2)]
    assert session.position == Cell(0, 2)
    assert session.move_count == 2
    assert session.drawn_path == []
    assert not session.is_drawing
    assert session.has_won


def test_empty_drag_does_not_move(corridor_maze):
    session = PlaySession(corridor_maze)
    session.begin_drag()
    assert session.end_drag() == []
    assert session.move_count == 0


def test_solving_a_generated_maze():
    maze = generate_maze(4, rng=random.Random(8))
    session = PlaySession(maze)
    path = find_path_to_target(maze.start, maze.end, maze.grid)

    assert session.travel_to(maze.end) == path
    assert session.has_won
    assert session.move_count == len(path)
    assert session.stars in (1, 2, 3)


def test_sessions_do_not_modify_the_maze(corridor_maze):
    grid_before = [[(c.north, c.south, c.east, c.west) for c in row] for row in corridor_maze.grid]
    session = PlaySession(corridor_maze)
    session.step(Direction.EAST)
    session.travel_to(Cell(0, 2))
    grid_after = [[(c.north, c.south, c.east, c.west) for c in row] for row in corridor_maze.grid]
    assert grid_before == grid_after
