"""
Othello game module.
This package contains the rules engine for Othello.
"""

from .board import Board, Player, Score, EMPTY, DRAW, DIRECTIONS
from .game import GameState, PassNotice, Phase
from .exceptions import (
    MoveRejected,
    InvalidCoordinateError,
    IllegalMoveError,
    GameOverError,
    TurnPendingError,
)
from . import engine

__all__ = [
    'Board', 'Player', 'Score', 'EMPTY', 'DRAW', 'DIRECTIONS',
    'GameState', 'PassNotice', 'Phase',
    'MoveRejected', 'InvalidCoordinateError', 'IllegalMoveError',
    'GameOverError', 'TurnPendingError', 'engine',
]
