import click

from maze_game.play_cli import play_command
from maze_game.render import generate_maze_command


@click.group()
def cli():
    """Maze Game - Generate perfect mazes and play them in the terminal."""
    pass


cli.add_command(generate_maze_command)
cli.add_command(play_command)
