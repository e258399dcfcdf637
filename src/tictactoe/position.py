"""
A position on the board

(placed in its own module as both the board and the game need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# (columns, rows). Cells are numbered row by row: index = row * columns + col
BOARD_DIMENSIONS = (3, 3)
BOARD_SIZE = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> Position:
        """Index 0 - 8 gets converted to (0, 0) - (2, 2), reading the board row by row."""
        row, col = divmod(index, BOARD_DIMENSIONS[0])
        return cls(row, col)

    def to_index(self) -> int:
        return self.row * BOARD_DIMENSIONS[0] + self.col

    def is_within_bounds(self) -> bool:
        return (0 <= self.col < BOARD_DIMENSIONS[0]) and (
            0 <= self.row < BOARD_DIMENSIONS[1]
        )


def is_valid_index(index: object) -> bool:
    """Only plain integers 0 - 8 address a cell (bools are ints in Python, but never a position)."""
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return Position.from_index(index).is_within_bounds()


def describe_cell(index: int) -> str:
    """Human readable name of a cell, for error messages: 'Cell 5 (row 1, col 2)'"""
    position = Position.from_index(index)
    return f"Cell {index} (row {position.row}, col {position.col})"
