import random
import sys

import click

from grid_maze_search.coord import MazeCoord
from grid_maze_search.maze import Maze
from grid_maze_search.solver import echo_directions, solve_maze
from grid_maze_search.text_format import render_maze


def generate_walls(width: int, height: int, seed: int | None = None):
    """
    Generates the wall grid of a perfect maze with an entrance and exit.

    Args:
        width (int): The number of cells wide the maze should be.
        height (int): The number of cells high the maze should be.
        seed (int, optional): Random seed for reproducible maze generation. Defaults to None.

    Returns
    -------
        tuple: (walls, entry, exit) where walls is a list of rows of booleans
               (True = wall) of size (2 * height + 1) x (2 * width + 1).
               Returns None if width or height is less than 1.
    """
    if width < 1 or height < 1:
        return None

    rng = random.Random(seed)

    # Maze grid dimensions (including walls)
    grid_width = 2 * width + 1
    grid_height = 2 * height + 1

    walls = [[Maze.WALL for _ in range(grid_width)] for _ in range(grid_height)]

    # Visited cells, in cell coordinates rather than grid coordinates
    visited = [[False for _ in range(width)] for _ in range(height)]

    # Cell (r, c) corresponds to grid position (2*r + 1, 2*c + 1)
    start_cell_row, start_cell_col = (
        rng.randint(0, height - 1),
        rng.randint(0, width - 1),
    )
    visited[start_cell_row][start_cell_col] = True
    stack = [(start_cell_row, start_cell_col)]
    walls[2 * start_cell_row + 1][2 * start_cell_col + 1] = Maze.FREE

    while stack:
        current_cell_row, current_cell_col = stack[-1]

        neighbors = []
        for dr, dc in [(-1, 0), (1, 0), (0, 1), (0, -1)]:  # N, S, E, W
            next_cell_row, next_cell_col = current_cell_row + dr, current_cell_col + dc

            if 0 <= next_cell_row < height and 0 <= next_cell_col < width:
                if not visited[next_cell_row][next_cell_col]:
                    neighbors.append(((next_cell_row, next_cell_col), (dr, dc)))

        if neighbors:
            (next_cell_row, next_cell_col), (dr, dc) = rng.choice(neighbors)

            # Knock down the wall between the two cells
            walls[2 * current_cell_row + 1 + dr][2 * current_cell_col + 1 + dc] = (
                Maze.FREE
            )
            walls[2 * next_cell_row + 1][2 * next_cell_col + 1] = Maze.FREE

            visited[next_cell_row][next_cell_col] = True
            stack.append((next_cell_row, next_cell_col))
        else:
            stack.pop()  # Backtrack

    # Entrance above the top-left cell, exit below the bottom-right cell
    entry = MazeCoord(0, 1)
    exit_loc = MazeCoord(grid_height - 1, grid_width - 2)
    walls[entry.row][entry.col] = Maze.FREE
    walls[exit_loc.row][exit_loc.col] = Maze.FREE

    return walls, entry, exit_loc


def generate_maze(width: int, height: int, seed: int | None = None) -> Maze | None:
    """Generate a perfect maze and wrap it in a ``Maze``, or None for bad sizes."""
    generated = generate_walls(width, height, seed)
    if generated is None:
        return None
    walls, entry, exit_loc = generated
    return Maze(walls, entry, exit_loc)


def print_maze(maze_list: list[str]):
    """Prints the maze list to the console."""
    click.echo("START")
    click.echo(r" v")
    for row in maze_list:
        click.echo(row)
    click.echo(" " * (len(maze_list[0]) - 2) + "^")
    click.echo(" " * (len(maze_list[0]) - 6) + "FINISH")


@click.command(name="generate")
@click.argument("width", type=int)
@click.argument("height", type=int)
@click.option(
    "--seed",
    type=int,
    envvar="MAZE_SEED",
    help="Random seed for reproducible maze generation (env: MAZE_SEED)",
)
@click.option(
    "--directions",
    is_flag=True,
    help="Also print the solution as a list of up/down/left/right steps",
)
def generate_maze_command(width, height, seed, directions):
    """Generate a maze with entrance and exit, then solve it."""
    click.echo(f"\nGenerating a {click.style(f'{width}x{height}', fg='cyan')} maze...\n")
    maze = generate_maze(width, height, seed)

    if maze is None:
        click.echo(
            click.style(
                "Error: Maze width and height must be at least 1.", fg="red", bold=True
            ),
            err=True,
        )
        sys.exit(1)

    print_maze(render_maze(maze, show_path=False))

    click.echo("\nSolving maze...\n")
    solution = solve_maze(maze)
    if solution is None:
        click.echo(click.style("Could not solve maze.", fg="red"))
    else:
        click.echo(click.style("\n".join(solution), fg="green"))
        if directions:
            echo_directions(maze)


# Allow running the module directly as a script
if __name__ == "__main__":
    generate_maze_command()
