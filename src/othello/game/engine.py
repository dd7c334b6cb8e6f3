"""
Value-style API over GameState.

Every function leaves its input untouched and returns a fresh state, so a
caller can keep earlier states around or run the same sequence on
independent instances.
"""
from typing import Optional, Tuple

from .board import Score
from .game import GameState, PassNotice


def initialize() -> GameState:
    """Standard starting position with Black to move."""
    return GameState()


def reset() -> GameState:
    return initialize()


def is_legal_move(state: GameState, row: int, col: int) -> bool:
    """False once the game is over or while a move awaits advance_turn."""
    if state.game_over or state.turn_pending:
        return False
    return state.is_legal_move(row, col)


def apply_move(state: GameState, row: int, col: int) -> GameState:
    """Return a copy of state with the move applied but the turn not yet advanced."""
    new_state = state.copy()
    new_state.apply_move(row, col)
    return new_state


def advance_turn(state: GameState) -> Tuple[GameState, Optional[PassNotice]]:
    new_state = state.copy()
    notice = new_state.advance_turn()
    return new_state, notice


def play(state: GameState, row: int, col: int) -> Tuple[GameState, Optional[PassNotice]]:
    """apply_move and advance_turn as a single call."""
    new_state = state.copy()
    notice = new_state.play(row, col)
    return new_state, notice


def score(state: GameState) -> Score:
    return state.get_score()
