import sys

import click

from maze_game.config import load_settings
from maze_game.endpoints import SELECTOR_NAMES, get_selector
from maze_game.generator import ORIENTATIONS, MazeData, generate_maze
from maze_game.grid import Cell
from maze_game.movement import find_path_to_target, path_to_directions

WALL = "#"
OPEN = " "
PATH = "."
START = "S"
END = "E"
PLAYER = "@"


def render_maze(
    maze: MazeData,
    path: list[Cell] | None = None,
    position: Cell | None = None,
) -> list[str]:
    """
    Render a maze as ASCII art.

    Args:
        maze (MazeData): The maze to draw.
        path (list, optional): Cells to mark with '.', walls between them included.
                               The path begins next to ``position``, or next
                               to the start when no position is given.
        position (Cell, optional): Where to draw the player icon '@'.

    Returns
    -------
        list: One string per text row. Cell (y, x) sits at text position
              (2*y + 1, 2*x + 1); the characters between cells are walls '#'
              or openings ' '.
    """
    # Text grid dimensions (including walls)
    text_height = 2 * maze.rows + 1
    text_width = 2 * maze.cols + 1
    canvas = [[WALL for _ in range(text_width)] for _ in range(text_height)]

    for y, row in enumerate(maze.grid):
        for x, walls in enumerate(row):
            canvas[2 * y + 1][2 * x + 1] = OPEN
            if not walls.east and x + 1 < maze.cols:
                canvas[2 * y + 1][2 * x + 2] = OPEN
            if not walls.south and y + 1 < maze.rows:
                canvas[2 * y + 2][2 * x + 1] = OPEN

    if path:
        previous = maze.start if position is None else position
        for cell in path:
            # Mark the opening between the two cells, then the cell itself
            canvas[previous.y + cell.y + 1][previous.x + cell.x + 1] = PATH
            canvas[2 * cell.y + 1][2 * cell.x + 1] = PATH
            previous = cell

    canvas[2 * maze.start.y + 1][2 * maze.start.x + 1] = START
    canvas[2 * maze.end.y + 1][2 * maze.end.x + 1] = END
    if position is not None:
        canvas[2 * position.y + 1][2 * position.x + 1] = PLAYER

    return ["".join(row) for row in canvas]


def print_maze(maze_list: list[str]):
    """Prints the rendered maze with a legend."""
    for row in maze_list:
        click.echo(row)
    click.echo(f"{START} = start, {END} = goal")


@click.command(name="generate-example")
@click.argument("level", type=int)
@click.option("--seed", type=int, help="Random seed for reproducible maze generation")
@click.option(
    "--orientation",
    type=click.Choice(ORIENTATIONS),
    default=None,
    help="Landscape mazes are wider than tall, portrait mazes taller than wide",
)
@click.option(
    "--endpoints",
    type=click.Choice(("auto",) + SELECTOR_NAMES),
    default="auto",
    help="How start and goal are chosen (auto picks per level)",
)
@click.option("--solve", is_flag=True, help="Also print the shortest solution")
def generate_maze_command(level, seed, orientation, endpoints, solve):
    """Generate the maze for LEVEL (1-5) and print it as ASCII."""
    settings = load_settings()
    if seed is None:
        seed = settings.seed
    if orientation is None:
        orientation = settings.orientation

    try:
        selector = None if endpoints == "auto" else get_selector(endpoints)
        maze = generate_maze(level, seed=seed, orientation=orientation, selector=selector)
    except ValueError as e:
        click.echo(click.style(f"Error: {e}", fg="red", bold=True))
        sys.exit(1)

    seed_text = "random" if seed is None else str(seed)
    click.echo(
        f"\nLevel {click.style(str(maze.level), fg='bright_blue')}: "
        f"{click.style(maze.label, fg='cyan')} maze (seed: {click.style(seed_text, fg='cyan')})\n"
    )
    print_maze(render_maze(maze))

    if solve:
        click.echo("\nSolving maze...\n")
        solution = find_path_to_target(maze.start, maze.end, maze.grid)
        if solution is None:
            click.echo(click.style("Could not solve maze.", fg="red"))
            return
        click.echo("\n".join(render_maze(maze, path=solution)))
        click.echo(
            f"\n{len(solution)} moves: "
            + click.style(",".join(path_to_directions(maze.start, solution)), fg="green")
        )


if __name__ == "__main__":
    generate_maze_command()
