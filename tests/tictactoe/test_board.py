"""Unit tests for /src/tictactoe/board.py"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.exceptions import CellOccupiedError, GameStateError
from src.core.shared_types import Player
from src.tictactoe.board import WINNING_LINES, Board

EMPTY_BOARD = "/".join(["..."] * 3)


def test_winning_lines() -> None:
    """Rows, columns, then both diagonals"""
    assert WINNING_LINES == [
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        (0, 4, 8),
        (2, 4, 6),
    ]


# -- CREATION LOGIC --
def test_empty_board() -> None:
    board = Board.empty()
    assert board.cells == (None,) * 9
    assert board.empty_positions() == list(range(9))
    assert not board.is_full()


@pytest.mark.parametrize("num_cells", [0, 8, 10])
def test_board_must_have_nine_cells(num_cells: int) -> None:
    with pytest.raises(GameStateError):
        _ = Board([None] * num_cells)


def test_from_string() -> None:
    board = Board.from_string("XO./.X./..O")
    assert board.cells == (
        Player.X,
        Player.O,
        None,
        None,
        Player.X,
        None,
        None,
        None,
        Player.O,
    )


@pytest.mark.parametrize(
    "encoded",
    [EMPTY_BOARD, "XO./.X./..O", "XOX/OXO/OXO", "X../.../..."],
)
def test_string_roundtrip(encoded: str) -> None:
    assert Board.from_string(encoded).to_string() == encoded


@pytest.mark.parametrize(
    "encoded",
    [
        "",
        ".........",  # no row separators
        "..././...",  # short row
        "..../.../...",  # long row
        ".../.../.../...",  # too many rows
        "x../.../...",  # lower case symbol
        "-../.../...",
    ],
)
def test_from_string_invalid(encoded: str) -> None:
    with pytest.raises(GameStateError):
        _ = Board.from_string(encoded)


# -- PLACING MARKS --
@pytest.mark.parametrize("position", range(9))
@pytest.mark.parametrize("player", [Player.X, Player.O])
def test_place_mark(position: int, player: Player) -> None:
    board = Board.empty().place_mark(position, player)
    assert board.cell(position) == player
    assert board.is_occupied(position)
    assert position not in board.empty_positions()


def test_place_mark_on_occupied_cell() -> None:
    """A mark is never overwritten, not even by the same player"""
    board = Board.from_string("X../.../...")
    with pytest.raises(CellOccupiedError):
        board.place_mark(0, Player.O)
    with pytest.raises(CellOccupiedError, match=r"Cell 0 \(row 0, col 0\)"):
        board.place_mark(0, Player.X)
    assert board.cell(0) == Player.X


def test_place_mark_returns_new_board() -> None:
    """The board the mark was placed on keeps its cells"""
    board = Board.empty()
    after = board.place_mark(4, Player.X)
    assert board == Board.empty()
    assert after.to_string() == ".../.X./..."


def test_board_cannot_be_changed_in_place() -> None:
    board = Board.from_string("X../.../...")
    with pytest.raises(FrozenInstanceError):
        board.cells = (None,) * 9  # type: ignore[misc]
    with pytest.raises(TypeError):
        board.cells[1] = Player.X  # type: ignore[index]
    assert board.to_string() == "X../.../..."


def test_board_is_hashable() -> None:
    assert hash(Board.from_string("XO./.../...")) == hash(Board.from_string("XO./.../..."))


def test_count() -> None:
    board = Board.from_string("XOX/.O./X..")
    assert board.count(Player.X) == 3
    assert board.count(Player.O) == 2


def test_is_full() -> None:
    assert Board.from_string("XOX/XOO/OXX").is_full()
    assert not Board.from_string("XOX/XOO/OX.").is_full()


# -- LINES --
@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("player", [Player.X, Player.O])
def test_winner_on_every_line(line: tuple[int, int, int], player: Player) -> None:
    board = Board.empty()
    for position in line:
        board = board.place_mark(position, player)
    assert board.winner() == player
    assert board.winning_line() == line
    assert board.winners() == {player}


@pytest.mark.parametrize(
    "encoded",
    [EMPTY_BOARD, "XX./OO./...", "XOX/XOO/OXX", "XO./OX./..."],
)
def test_no_winner(encoded: str) -> None:
    board = Board.from_string(encoded)
    assert board.winner() is None
    assert board.winning_line() is None
    assert board.winners() == set()


def test_first_completed_line_is_reported() -> None:
    """The final mark can complete two lines at once. The row is found before the column."""
    board = Board.from_string("XXX/XO./XO.")
    assert board.winning_line() == (0, 1, 2)
    assert board.winner() == Player.X


def test_both_players_own_a_line() -> None:
    """Not reachable in a real game, but the board can still report it"""
    board = Board.from_string("XXX/OOO/...")
    assert board.winners() == {Player.X, Player.O}
