import sys

import click

from grid_maze_search.maze import Maze
from grid_maze_search.text_format import (
    WALL_CHAR,
    MazeFormatError,
    path_to_directions,
    read_maze,
    render_maze,
)


def solve_maze(maze: Maze):
    """
    Searches a maze and draws the result.

    Args:
        maze (Maze): The maze to search.

    Returns
    -------
        list: A list of strings representing the maze with the solution path
              marked by '.', or None if there is no path.
    """
    if not maze.search():
        return None
    return render_maze(maze)


def echo_directions(maze: Maze):
    """Print the maze's current path as comma-separated direction words."""
    directions = path_to_directions(maze.get_path())
    click.echo("\nDirections:")
    click.echo(click.style(",".join(directions), fg="cyan"))


@click.command(name="solve")
@click.argument("maze_file", type=click.File("r"))
@click.option(
    "--wall-char",
    type=str,
    default=WALL_CHAR,
    show_default=True,
    envvar="MAZE_WALL_CHAR",
    help="Character that marks a wall in the maze file (env: MAZE_WALL_CHAR)",
)
@click.option(
    "--directions",
    is_flag=True,
    help="Also print the solution as a list of up/down/left/right steps",
)
def solve_maze_command(maze_file, wall_char, directions):
    """Solve an ASCII maze read from MAZE_FILE ('-' for stdin).

    Cells marked 'S' and 'E' are the entry and exit; without them the first
    two openings on the border are used.
    """
    if len(wall_char) != 1:
        raise click.BadParameter("must be a single character", param_hint="--wall-char")

    try:
        maze = read_maze(maze_file, wall_char)
    except MazeFormatError as e:
        click.echo(click.style(f"Error reading maze: {e}", fg="red", bold=True))
        sys.exit(2)

    click.echo(
        f"Searching a {click.style(f'{maze.num_rows()}x{maze.num_cols()}', fg='cyan')} "
        f"maze from {click.style(str(maze.get_entry_loc()), fg='cyan')} "
        f"to {click.style(str(maze.get_exit_loc()), fg='cyan')}\n"
    )

    solution = solve_maze(maze)
    if solution is None:
        click.echo(click.style("No path found.", fg="red"))
        sys.exit(1)

    click.echo(click.style("\n".join(solution), fg="green"))
    if directions:
        echo_directions(maze)
