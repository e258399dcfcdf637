"""Errors raised by the domain layer. All of them are recoverable by the caller."""


class TicTacToeError(Exception):
    """Base class for every error raised in this project."""


class GameStateError(TicTacToeError):
    """The board or game state itself is malformed (not a reachable tic-tac-toe position)."""


class MoveError(TicTacToeError):
    """A move was rejected. The state it was attempted on is left untouched."""


class InvalidPositionError(MoveError):
    """The position is not an integer from 0 to 8."""


class CellOccupiedError(MoveError):
    """The addressed cell already holds a mark."""


class GameOverError(MoveError):
    """The game already ended in a win or a draw."""
