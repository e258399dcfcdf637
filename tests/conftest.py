"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.core.shared_types import Outcome
from src.tictactoe.game import GameState

PlayFn = Callable[[list[int]], tuple[GameState, list[Outcome]]]


@pytest.fixture
def play() -> PlayFn:
    """Call the inner function with a list of positions. Every move is applied in order, starting from a new game."""

    def _play(positions: list[int]) -> tuple[GameState, list[Outcome]]:
        state = GameState.new()
        outcomes: list[Outcome] = []
        for position in positions:
            state, outcome = state.apply_move(position)
            outcomes.append(outcome)
        return state, outcomes

    return _play
