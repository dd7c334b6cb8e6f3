"""
Rejections raised by the Othello engine.

A rejected operation never changes the game state.
"""


class MoveRejected(ValueError):
    """Base class for every rejected engine operation."""


class InvalidCoordinateError(MoveRejected):
    """The (row, col) pair lies outside the 8x8 board."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Invalid coordinate ({row}, {col})")
        self.row = row
        self.col = col


class IllegalMoveError(MoveRejected):
    """The cell is occupied or the move would flip nothing."""

    def __init__(self, row: int, col: int, player):
        super().__init__(f"Illegal move ({row}, {col}) for {player.display_name}")
        self.row = row
        self.col = col
        self.player = player


class GameOverError(MoveRejected):
    """The game has already ended."""

    def __init__(self):
        super().__init__("Game over")


class TurnPendingError(MoveRejected):
    """A move was applied but the turn has not been advanced yet."""

    def __init__(self):
        super().__init__("Turn must be advanced before the next move")
