from dataclasses import dataclass


@dataclass(frozen=True)
class MazeCoord:
    """Immutable row/column position in a maze.

    A coordinate knows nothing about the extent of any maze, so it can be
    created freely and compared by value.
    """

    row: int
    col: int

    def __str__(self) -> str:
        return f"MazeCoord[row={self.row},col={self.col}]"
