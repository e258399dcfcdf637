"""
Boundary layer data model(s).

A caller (test harness, CLI, future UI) can hand a game across a layer boundary with the model defined here,
without depending on the Board / GameState classes of the domain layer.
"""

from dataclasses import dataclass

# Type aliases to make GameModel easier to read
BoardString = str
PlayerSymbol = str


@dataclass
class GameModel:
    """Transport-safe representation of a tic-tac-toe game."""

    board: BoardString  # ex. 'XO./.X./..O'
    player: PlayerSymbol
    outcome: str
