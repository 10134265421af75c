import random

import click

from maze_game.config import load_settings
from maze_game.generator import MAX_LEVEL, MIN_LEVEL, ORIENTATIONS, clamp_level, generate_maze
from maze_game.grid import Cell, Direction
from maze_game.movement import find_path_to_target, path_to_directions
from maze_game.render import print_maze, render_maze
from maze_game.session import PlaySession

STEP_KEYS = {
    "w": Direction.NORTH,
    "up": Direction.NORTH,
    "s": Direction.SOUTH,
    "down": Direction.SOUTH,
    "d": Direction.EAST,
    "right": Direction.EAST,
    "a": Direction.WEST,
    "left": Direction.WEST,
}

HELP_TEXT = """Commands:
  w/a/s/d (or up/left/down/right)  move one cell
  go Y X                           walk to row Y, column X by the shortest route
  draw Y X [Y X ...]               draw a path cell by cell from your position
  hint                             show the way to the goal
  new                              new maze, same level
  level N                          switch to level N (1-5)
  quit                             leave the game"""


def _parse_cells(numbers: list[str]) -> list[Cell]:
    """Turn ["1", "2", "3", "4"] into [Cell(1, 2), Cell(3, 4)]."""
    if not numbers or len(numbers) % 2:
        raise ValueError("expected pairs of row and column numbers")
    values = [int(n) for n in numbers]
    return [Cell(values[i], values[i + 1]) for i in range(0, len(values), 2)]


def _new_session(level: int, rng: random.Random, orientation: str) -> PlaySession:
    maze = generate_maze(level, rng=rng, orientation=orientation)
    click.echo(
        f"\nLevel {click.style(str(maze.level), fg='bright_blue')}: "
        f"{click.style(maze.label, fg='cyan')} maze"
    )
    return PlaySession(maze)


def _show(session: PlaySession, path: list[Cell] | None = None) -> None:
    click.echo()
    print_maze(render_maze(session.maze, path=path, position=session.position))
    click.echo(f"Moves: {click.style(str(session.move_count), fg='cyan')}")


def _reject(message: str) -> None:
    click.echo(click.style(message, fg="red"))


@click.command(name="play")
@click.option("--level", type=int, default=None, help="Level 1-5 (clamped)")
@click.option("--seed", type=int, default=None, help="Random seed for reproducible mazes")
@click.option(
    "--orientation",
    type=click.Choice(ORIENTATIONS),
    default=None,
    help="Landscape mazes are wider than tall, portrait mazes taller than wide",
)
def play_command(level, seed, orientation) -> None:
    """Play mazes in the terminal.

    Steer the '@' from S to E. Defaults for level, seed and orientation are
    read from ``MAZE_LEVEL``, ``MAZE_SEED`` and ``MAZE_ORIENTATION`` (a local
    ``.env`` file is honoured), command-line options win.
    """
    settings = load_settings()
    level = clamp_level(settings.level if level is None else level)
    seed = settings.seed if seed is None else seed
    orientation = orientation or settings.orientation
    if orientation not in ORIENTATIONS:
        click.echo(
            click.style(
                f"Unknown orientation {orientation!r}, using landscape.", fg="yellow"
            )
        )
        orientation = "landscape"

    # One generator for the whole run so "new" mazes differ but stay reproducible
    rng = random.Random(seed)

    click.echo(click.style(HELP_TEXT, fg="bright_black"))
    session = _new_session(level, rng, orientation)
    _show(session)

    while True:
        command = click.prompt("Move", default="", show_default=False).strip().lower()
        if not command:
            continue
        words = command.split()
        verb, args = words[0], words[1:]

        if verb in ("quit", "q", "exit"):
            click.echo("Bye!")
            return

        if verb in ("help", "?"):
            click.echo(HELP_TEXT)
            continue

        if verb == "new":
            session = _new_session(session.maze.level, rng, orientation)
            _show(session)
            continue

        if verb == "level":
            try:
                new_level = int(args[0])
            except (IndexError, ValueError):
                _reject(f"Usage: level N (N between {MIN_LEVEL} and {MAX_LEVEL})")
                continue
            session = _new_session(clamp_level(new_level), rng, orientation)
            _show(session)
            continue

        if verb == "hint":
            path = find_path_to_target(session.position, session.maze.end, session.maze.grid)
            if path:
                _show(session, path=path)
                click.echo(
                    click.style(
                        ",".join(path_to_directions(session.position, path)), fg="yellow"
                    )
                )
            continue

        if verb in STEP_KEYS:
            if not session.step(STEP_KEYS[verb]):
                _reject("Bump! A wall is in the way.")
                continue
        elif verb in ("go", "draw"):
            try:
                cells = _parse_cells(args)
            except ValueError:
                _reject(f"Usage: {verb} Y X" + (" [Y X ...]" if verb == "draw" else ""))
                continue

            if verb == "go":
                if len(cells) != 1:
                    _reject("Usage: go Y X")
                    continue
                if session.travel_to(cells[0]) is None:
                    _reject("You can't get there from here.")
                    continue
            else:
                if not session.begin_drag():
                    continue
                for cell in cells:
                    if session.drag_to(cell)[-1] != cell:
                        _reject(f"Path blocked at {cell.y} {cell.x}.")
                        break
                session.end_drag()
        else:
            _reject(f"Unknown command {verb!r}, type 'help' for the list.")
            continue

        _show(session)

        if session.has_won:
            stars = session.stars
            click.echo(
                click.style("Amazing! ", fg="green", bold=True)
                + click.style("★" * stars + "☆" * (3 - stars), fg="yellow")
                + f" {session.maze.label} in {session.move_count} moves"
            )
            if not click.confirm("Play a new maze?", default=True):
                click.echo("Bye!")
                return
            session = _new_session(session.maze.level, rng, orientation)
            _show(session)


if __name__ == "__main__":
    play_command()
