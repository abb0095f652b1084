from typing import List, Sequence, Tuple

from grid_maze_search.coord import MazeCoord

# Neighbour offsets (row, col) in the order they are explored: N, S, W, E
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class MazeError(ValueError):
    """Raised when a maze is built from an invalid grid or coordinates."""


class Maze:
    """
    A rectangular grid maze that can find a path from its entry to its exit.

    The wall grid has no outer border: the search treats everything outside
    ``[0, num_rows()) x [0, num_cols())`` as a wall. ``maze_data[row][col]`` is
    ``True`` (``Maze.WALL``) for a wall and ``False`` (``Maze.FREE``) for a free
    cell. Movement is restricted to the four compass directions.
    """

    FREE = False
    WALL = True

    def __init__(
        self,
        maze_data: Sequence[Sequence[bool]],
        entry_loc: MazeCoord,
        exit_loc: MazeCoord,
    ):
        """
        Build a maze from a wall grid.

        Args:
            maze_data: Rectangular grid of booleans, first index is the row.
                       The grid is copied, so later changes to it are not seen.
            entry_loc: Where the path starts (not necessarily on an edge)
            exit_loc: Where the path ends (not necessarily on an edge)

        Raises:
            MazeError: If the grid is empty or ragged, or entry/exit lie
                       outside it.
        """
        if not maze_data or not maze_data[0]:
            raise MazeError("Maze data must have at least one row and one column.")

        width = len(maze_data[0])
        for row_index, row in enumerate(maze_data):
            if len(row) != width:
                raise MazeError(
                    f"Maze data is not rectangular: row {row_index} has {len(row)} "
                    f"columns, expected {width}."
                )

        self._maze_data: Tuple[Tuple[bool, ...], ...] = tuple(
            tuple(bool(cell) for cell in row) for row in maze_data
        )

        for name, loc in (("entry", entry_loc), ("exit", exit_loc)):
            if not self._in_bounds(loc.row, loc.col):
                raise MazeError(
                    f"The {name} location {loc} is outside the "
                    f"{self.num_rows()}x{self.num_cols()} maze."
                )

        self._entry_loc = entry_loc
        self._exit_loc = exit_loc
        self._path: List[MazeCoord] = []
        self._searched = False

    def num_rows(self) -> int:
        return len(self._maze_data)

    def num_cols(self) -> int:
        return len(self._maze_data[0])

    def has_wall_at(self, loc: MazeCoord) -> bool:
        """Return True iff there is a wall at ``loc``."""
        if not self._in_bounds(loc.row, loc.col):
            raise IndexError(
                f"Coordinate {loc} out of bounds for a "
                f"{self.num_rows()}x{self.num_cols()} maze"
            )
        return self._maze_data[loc.row][loc.col]

    def get_entry_loc(self) -> MazeCoord:
        return self._entry_loc

    def get_exit_loc(self) -> MazeCoord:
        return self._exit_loc

    def get_path(self) -> List[MazeCoord]:
        """
        Return the path found by ``search``.

        The first element is the entry location and the last is the exit
        location. The list is empty before ``search`` runs or when there is no
        path. A new list is returned on every call.
        """
        return list(self._path)

    def search(self) -> bool:
        """
        Find a path through the maze if there is one.

        Only the first call does any work; later calls report the stored
        result. The path is available through ``get_path``.

        Returns:
            Whether a path was found.
        """
        if not self._searched:
            self._path = self._depth_first_path()
            self._searched = True
        return len(self._path) > 0

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.num_rows() and 0 <= col < self.num_cols()

    def _can_enter(self, row: int, col: int, visited: List[List[bool]]) -> bool:
        return (
            self._in_bounds(row, col)
            and self._maze_data[row][col] != self.WALL
            and not visited[row][col]
        )

    def _depth_first_path(self) -> List[MazeCoord]:
        """
        Backtracking depth-first search from the entry to the exit.

        Each stack frame holds a cell and the index of the next direction to
        try from it, so the cells on the stack are always the current partial
        path. Neighbours are tried in ``DIRECTIONS`` order and the first one
        that reaches the exit wins.

        A cell whose four neighbours have all been tried stays marked after it
        is popped: nothing reachable from it leads to the exit without going
        through a cell that is still on the stack, so it can never be part of
        the first path found.
        """
        visited = [[False] * self.num_cols() for _ in range(self.num_rows())]

        start = self._entry_loc
        if not self._can_enter(start.row, start.col, visited):
            return []
        if start == self._exit_loc:
            return [self._exit_loc]

        visited[start.row][start.col] = True
        stack: List[List] = [[start, 0]]

        while stack:
            frame = stack[-1]
            current, next_direction = frame

            if next_direction == len(DIRECTIONS):
                stack.pop()  # Dead end, backtrack
                continue
            frame[1] = next_direction + 1

            dr, dc = DIRECTIONS[next_direction]
            next_row, next_col = current.row + dr, current.col + dc
            if not self._can_enter(next_row, next_col, visited):
                continue

            if next_row == self._exit_loc.row and next_col == self._exit_loc.col:
                return [cell for cell, _ in stack] + [self._exit_loc]

            visited[next_row][next_col] = True
            stack.append([MazeCoord(next_row, next_col), 0])

        return []
