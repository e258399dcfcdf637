"""
The GameState class is the entrypoint into the domain layer.
It owns the board and the player whose turn it is, and turns a move into the next state plus the outcome of the game.
"""

from dataclasses import dataclass, replace
from typing import Optional, Self

from src.core.exceptions import (
    CellOccupiedError,
    GameOverError,
    GameStateError,
    InvalidPositionError,
)
from src.core.models import GameModel
from src.core.shared_types import Outcome, Player
from src.tictactoe.board import Board
from src.tictactoe.position import BOARD_SIZE, describe_cell, is_valid_index


def determine_outcome(board: Board) -> Outcome:
    """A completed line beats a full board: the last mark can fill the board AND win."""
    winner = board.winner()
    if winner is not None:
        return Outcome.winner(winner)
    if board.is_full():
        return Outcome.DRAW
    return Outcome.ONGOING


@dataclass(frozen=True)
class GameState:
    """
    Immutable value: every accepted move returns a new GameState.
    Only states reachable by legal play can be constructed.

    NOTE once the game is over, `player` stays on the player who made the final move.
    """

    board: Board
    player: Player

    def __post_init__(self) -> None:
        if not isinstance(self.player, Player):
            raise GameStateError(f"Invalid player: {self.player!r}.")

        encoded = self.board.to_string()
        x_count = self.board.count(Player.X)
        o_count = self.board.count(Player.O)
        if x_count - o_count not in (0, 1):
            raise GameStateError(
                f"X moves first and players alternate, but board {encoded!r} has {x_count} X and {o_count} O marks."
            )

        if len(self.board.winners()) > 1:
            raise GameStateError(f"Both players own a line on board {encoded!r}.")

        last_mover = Player.X if x_count > o_count else Player.O
        winner = self.board.winner()
        if winner is not None and winner != last_mover:
            raise GameStateError(
                f"{winner} owns a line on board {encoded!r}, but {last_mover} moved last."
            )

        # while ongoing: the side to move. After the game ended: whoever made the final move.
        expected_player = (
            last_mover if determine_outcome(self.board).is_terminal else last_mover.opponent
        )
        if self.player != expected_player:
            raise GameStateError(
                f"Board {encoded!r} requires {expected_player} as player, got {self.player}."
            )

    @classmethod
    def new(cls) -> Self:
        """Empty board, X moves first."""
        return cls(board=Board.empty(), player=Player.X)

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Build a GameState from its transport model. The recorded outcome must match the board."""
        board = Board.from_string(model.board)

        player_symbols = [player.value for player in Player]
        if model.player not in player_symbols:
            raise GameStateError(
                f"Invalid player: {model.player!r}. \nPick one from {','.join(player_symbols)}"
            )

        outcome = determine_outcome(board)
        if model.outcome != outcome.value:
            raise GameStateError(
                f"Board {model.board!r} is {outcome.value!r}, not {model.outcome!r}."
            )

        return cls(board=board, player=Player(model.player))

    def to_model(self) -> GameModel:
        """Encode back into a format the caller uses"""
        return GameModel(
            board=self.board.to_string(),
            player=self.player.value,
            outcome=self.outcome.value,
        )

    @property
    def outcome(self) -> Outcome:
        return determine_outcome(self.board)

    @property
    def winner(self) -> Optional[Player]:
        return self.board.winner()

    @property
    def move_count(self) -> int:
        return BOARD_SIZE - len(self.board.empty_positions())

    def legal_moves(self) -> list[int]:
        """Empty cells, as long as the game is still going."""
        if self.outcome.is_terminal:
            return []
        return self.board.empty_positions()

    def apply_move(self, position: int) -> tuple[Self, Outcome]:
        """
        Place the active player's mark on the cell at 'position'
        -----

        1. position must address a cell (0 - 8)
        2. that cell must be empty
        3. the game must still be going
        4. place the mark on a new board (this state is left untouched)
        5. determine the outcome: win, then draw, then ongoing
        6. hand the turn to the opponent, unless the game just ended
        """
        self._assert_valid_position(position)
        self._assert_cell_empty(position)
        self._assert_game_in_progress()

        board = self.board.place_mark(position, self.player)

        outcome = determine_outcome(board)
        next_player = self.player if outcome.is_terminal else self.player.opponent
        return replace(self, board=board, player=next_player), outcome

    # -- PRIVATE HELPERS ---
    def _assert_valid_position(self, position: int) -> None:
        if not is_valid_index(position):
            raise InvalidPositionError(
                f"Position {position!r} does not address a cell. Pick an integer from 0 to {BOARD_SIZE - 1}."
            )

    def _assert_cell_empty(self, position: int) -> None:
        if self.board.is_occupied(position):
            raise CellOccupiedError(
                f"{describe_cell(position)} is already occupied by {self.board.cell(position)}."
            )

    def _assert_game_in_progress(self) -> None:
        outcome = self.outcome
        if outcome.is_terminal:
            raise GameOverError(f"Game is over. outcome: {outcome.value}")
