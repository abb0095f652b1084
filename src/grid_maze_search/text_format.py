from typing import Iterable, List, Optional, Sequence, Tuple

from grid_maze_search.coord import MazeCoord
from grid_maze_search.maze import Maze, MazeError

WALL_CHAR = "#"
FREE_CHAR = " "
PATH_CHAR = "."
ENTRY_CHAR = "S"
EXIT_CHAR = "E"

# Step (row, col) -> direction word
STEP_NAMES = {(-1, 0): "up", (1, 0): "down", (0, -1): "left", (0, 1): "right"}


class MazeFormatError(MazeError):
    """Raised when text cannot be read as a maze."""


def parse_maze(
    lines: Iterable[str], wall_char: str = WALL_CHAR
) -> Tuple[List[List[bool]], MazeCoord, MazeCoord]:
    """
    Read an ASCII maze into a wall grid plus entry and exit locations.

    Args:
        lines: The maze rows. ``wall_char`` marks a wall, anything else is free.
        wall_char: Character used for walls.

    Returns
    -------
        tuple: (walls, entry, exit). The entry and exit are the cells marked
               'S' and 'E' if both appear exactly once, otherwise the first two
               openings on the border.

    Raises:
        MazeFormatError: If the rows are empty or ragged, or no entry and exit
                         can be found.
    """
    rows = [line.rstrip("\r\n") for line in lines]
    while rows and not rows[-1].strip():
        rows.pop()

    if not rows:
        raise MazeFormatError("Maze text is empty.")

    width = len(rows[0])
    for row_index, row in enumerate(rows):
        if len(row) != width:
            raise MazeFormatError(
                f"Row {row_index} has {len(row)} characters, expected {width}."
            )

    walls = [[char == wall_char for char in row] for row in rows]

    entry = _find_marker(rows, ENTRY_CHAR)
    exit_loc = _find_marker(rows, EXIT_CHAR)
    if entry is None or exit_loc is None:
        entry, exit_loc = _find_border_openings(walls)

    return walls, entry, exit_loc


def read_maze(lines: Iterable[str], wall_char: str = WALL_CHAR) -> Maze:
    """Parse ASCII maze lines and build a ``Maze`` from them."""
    walls, entry, exit_loc = parse_maze(lines, wall_char)
    return Maze(walls, entry, exit_loc)


def render_maze(maze: Maze, show_path: bool = True) -> List[str]:
    """
    Draw a maze as ASCII lines.

    Walls are '#', free cells are ' ' and, if ``show_path`` is set, every cell
    of the maze's current path is '.'.
    """
    on_path = set(maze.get_path()) if show_path else set()

    lines = []
    for r in range(maze.num_rows()):
        chars = []
        for c in range(maze.num_cols()):
            coord = MazeCoord(r, c)
            if maze.has_wall_at(coord):
                chars.append(WALL_CHAR)
            elif coord in on_path:
                chars.append(PATH_CHAR)
            else:
                chars.append(FREE_CHAR)
        lines.append("".join(chars))
    return lines


def path_to_directions(path: Sequence[MazeCoord]) -> List[str]:
    """
    Convert a path into a list of "up", "down", "left" and "right" steps.

    Raises:
        ValueError: If two consecutive coordinates are not adjacent.
    """
    directions = []
    for current, following in zip(path, path[1:]):
        step = (following.row - current.row, following.col - current.col)
        if step not in STEP_NAMES:
            raise ValueError(f"{current} and {following} are not adjacent.")
        directions.append(STEP_NAMES[step])
    return directions


def _find_marker(rows: List[str], marker: str) -> Optional[MazeCoord]:
    found = [
        MazeCoord(r, c)
        for r, row in enumerate(rows)
        for c, char in enumerate(row)
        if char == marker
    ]
    return found[0] if len(found) == 1 else None


def _find_border_openings(walls: List[List[bool]]) -> Tuple[MazeCoord, MazeCoord]:
    height = len(walls)
    width = len(walls[0])

    openings: List[MazeCoord] = []

    def check(r: int, c: int) -> None:
        coord = MazeCoord(r, c)
        if not walls[r][c] and coord not in openings:
            openings.append(coord)

    # Top/bottom borders
    for c in range(width):
        check(0, c)
        check(height - 1, c)
    # Left/right borders (corners already checked)
    for r in range(1, height - 1):
        check(r, 0)
        check(r, width - 1)

    if len(openings) < 2:
        raise MazeFormatError(
            "Could not find an entry and an exit: mark them with "
            f"'{ENTRY_CHAR}' and '{EXIT_CHAR}' or leave two openings on the border."
        )
    return openings[0], openings[1]
