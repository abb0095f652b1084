import click
from dotenv import load_dotenv

from grid_maze_search.coord import MazeCoord
from grid_maze_search.generator import generate_maze_command
from grid_maze_search.interactive_cli import run_interactive_command
from grid_maze_search.maze import Maze, MazeError
from grid_maze_search.solver import solve_maze_command

__all__ = ["Maze", "MazeCoord", "MazeError", "cli"]


@click.group()
def cli():
    """Grid Maze Search - Find a path through a wall/free grid maze."""
    # Pick up MAZE_* defaults from a local .env file, if there is one
    load_dotenv()


cli.add_command(generate_maze_command)
cli.add_command(solve_maze_command)
cli.add_command(run_interactive_command)
