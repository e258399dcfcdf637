"""
Type definitions used across layers
"""

from enum import StrEnum
from typing import Self


class Player(StrEnum):
    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> "Player":
        return Player.O if self == Player.X else Player.X


class Outcome(StrEnum):
    ONGOING = "ongoing"
    X_WON = "x won"
    O_WON = "o won"
    DRAW = "draw"

    @classmethod
    def winner(cls, player: Player) -> Self:
        """The outcome where the given player has completed a line."""
        return cls.X_WON if player == Player.X else cls.O_WON

    @property
    def is_terminal(self) -> bool:
        """No further moves are accepted once the game reached one of these."""
        return self != Outcome.ONGOING
