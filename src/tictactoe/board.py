"""The Game board holds the marks placed so far and knows which lines they complete."""

from dataclasses import dataclass, replace
from typing import Optional, Self

from src.core.exceptions import CellOccupiedError, GameStateError
from src.core.shared_types import Player
from src.tictactoe.position import BOARD_DIMENSIONS, BOARD_SIZE, Position, describe_cell

Cell = Optional[Player]
Line = tuple[int, int, int]

EMPTY_SYMBOL = "."
ROW_SEPARATOR = "/"
SYMBOL_TO_CELL: dict[str, Cell] = {
    EMPTY_SYMBOL: None,
    Player.X.value: Player.X,
    Player.O.value: Player.O,
}


def _build_winning_lines() -> list[Line]:
    """Rows, then columns, then the two diagonals (top-left to bottom-right first)."""
    num_cols, num_rows = BOARD_DIMENSIONS
    rows = [
        tuple(Position(row, col).to_index() for col in range(num_cols))
        for row in range(num_rows)
    ]
    columns = [
        tuple(Position(row, col).to_index() for row in range(num_rows))
        for col in range(num_cols)
    ]
    diagonals = [
        tuple(Position(i, i).to_index() for i in range(num_rows)),
        tuple(Position(i, num_cols - 1 - i).to_index() for i in range(num_rows)),
    ]
    return rows + columns + diagonals


# (0, 1, 2), (3, 4, 5), (6, 7, 8), (0, 3, 6), (1, 4, 7), (2, 5, 8), (0, 4, 8), (2, 4, 6)
WINNING_LINES: list[Line] = _build_winning_lines()


@dataclass(frozen=True)
class Board:
    cells: tuple[Cell, ...]

    def __post_init__(self) -> None:
        # any sequence is accepted, the stored cells are always a tuple
        object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != BOARD_SIZE:
            raise GameStateError(
                f"A board has exactly {BOARD_SIZE} cells, got {len(self.cells)}."
            )

    @classmethod
    def empty(cls) -> Self:
        return cls((None,) * BOARD_SIZE)

    @classmethod
    def from_string(cls, encoded: str) -> Self:
        """Construct a board from its textual form.

        Rows are separated by slashes and read top to bottom, each row left to right:
        'XO./.X./..O'
        means:
        * X on cells 0 and 4
        * O on cells 1 and 8
        * every '.' is an empty cell
        """
        num_cols, num_rows = BOARD_DIMENSIONS
        encoded_rows = encoded.split(ROW_SEPARATOR)
        if len(encoded_rows) != num_rows:
            raise GameStateError(
                f"Board string {encoded!r} must contain {num_rows} rows separated by {ROW_SEPARATOR!r}."
            )

        cells: list[Cell] = []
        for encoded_row in encoded_rows:
            if len(encoded_row) != num_cols:
                raise GameStateError(
                    f"Row {encoded_row!r} in {encoded!r} must contain exactly {num_cols} cells."
                )
            for character in encoded_row:
                if character not in SYMBOL_TO_CELL:
                    raise GameStateError(
                        f"Unknown symbol {character!r} in board string {encoded!r}."
                    )
                cells.append(SYMBOL_TO_CELL[character])
        return cls(tuple(cells))

    def to_string(self) -> str:
        num_cols, num_rows = BOARD_DIMENSIONS
        symbols = [EMPTY_SYMBOL if cell is None else cell.value for cell in self.cells]
        return ROW_SEPARATOR.join(
            "".join(symbols[row * num_cols : (row + 1) * num_cols])
            for row in range(num_rows)
        )

    def cell(self, position: int) -> Cell:
        return self.cells[position]

    def is_occupied(self, position: int) -> bool:
        return self.cells[position] is not None

    def place_mark(self, position: int, player: Player) -> Self:
        """A new board with the mark added. A mark is never overwritten or removed."""
        if self.is_occupied(position):
            raise CellOccupiedError(
                f"{describe_cell(position)} is already occupied by {self.cells[position]}."
            )
        cells = list(self.cells)
        cells[position] = player
        return replace(self, cells=tuple(cells))

    def empty_positions(self) -> list[int]:
        return [position for position, cell in enumerate(self.cells) if cell is None]

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def count(self, player: Player) -> int:
        """Tally the marks a player has on the board"""
        return sum(1 for cell in self.cells if cell == player)

    def winners(self) -> set[Player]:
        """Every player owning a complete line. More than one means the board is not reachable in a real game."""
        return {
            player
            for line in WINNING_LINES
            if (player := self._line_owner(line)) is not None
        }

    def winner(self) -> Optional[Player]:
        line = self.winning_line()
        return self.cells[line[0]] if line else None

    def winning_line(self) -> Optional[Line]:
        """First completed line, checked in the order of WINNING_LINES."""
        return next(
            (line for line in WINNING_LINES if self._line_owner(line) is not None),
            None,
        )

    def _line_owner(self, line: Line) -> Optional[Player]:
        """The player holding all cells of the line, if any"""
        first, *rest = (self.cells[position] for position in line)
        if first is None:
            return None
        return first if all(cell == first for cell in rest) else None
