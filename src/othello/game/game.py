"""
Othello game module.
Handles turn order, passes and game termination on top of the Board.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union
import numpy as np

from .board import Board, DRAW, Player, Score
from .exceptions import GameOverError, IllegalMoveError, MoveRejected, TurnPendingError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PassNotice:
    """Transient notification that a player had no legal move and was skipped."""
    player: Player

    @property
    def message(self) -> str:
        return f"{self.player.display_name} has no valid moves and passes."


class Phase(Enum):
    AWAITING_MOVE = "awaiting_move"
    PASS_NOTICE = "pass_notice"
    GAME_OVER = "game_over"


class GameState:
    """
    A single Othello game: the board, the player to move, and the terminal flag.

    Moves go through apply_move followed by advance_turn, or through play which
    does both in one call. A state that is game over accepts no further moves.
    """

    def __init__(self, size: int = 8):
        """
        Initialize a new game in the standard starting position.

        Args:
            size: Size of the board (only 8 is supported)
        """
        self.board = Board(size)
        self.size = size
        self.current_player = Player.BLACK  # Black moves first
        self.game_over = False
        self.winner: Optional[Union[Player, int]] = None
        self.pass_notice: Optional[PassNotice] = None
        self._turn_pending = False

    @classmethod
    def from_board(cls, board: Board, current_player: Player = Player.BLACK) -> 'GameState':
        """
        Create a game from an arbitrary position.

        The turn is settled immediately: if current_player cannot move the turn
        passes, and if neither side can move the game is over.
        """
        state = cls(board.size)
        state.board = board.copy()
        state.current_player = Player(current_player)
        state._hand_turn_to(state.current_player)
        return state

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board(self.size)
        self.current_player = Player.BLACK
        self.game_over = False
        self.winner = None
        self.pass_notice = None
        self._turn_pending = False

    @property
    def turn_pending(self) -> bool:
        """True between apply_move and the advance_turn that must follow it."""
        return self._turn_pending

    @property
    def phase(self) -> Phase:
        if self.game_over:
            return Phase.GAME_OVER
        if self.pass_notice is not None:
            return Phase.PASS_NOTICE
        return Phase.AWAITING_MOVE

    def is_legal_move(self, row: int, col: int, player: Optional[Player] = None) -> bool:
        """Check a move for player, defaulting to the player to move."""
        if player is None:
            player = self.current_player
        return self.board.is_valid_move(row, col, player)

    def get_valid_moves(self) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of (row, col) tuples, empty once the game is over
        """
        if self.game_over:
            return []
        return self.board.get_valid_moves(self.current_player)

    def apply_move(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Place a disc for the current player and flip the captured discs.

        The turn is not switched; advance_turn must be called next.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            The flipped (row, col) squares

        Raises:
            GameOverError: the game has ended
            TurnPendingError: the previous move has not been followed by advance_turn
            InvalidCoordinateError: (row, col) is off the board
            IllegalMoveError: the square is occupied or flips nothing
        """
        if self.game_over:
            raise GameOverError()
        if self._turn_pending:
            raise TurnPendingError()

        flipped = self.board.get_flipped_pieces(row, col, self.current_player)
        if not flipped:
            raise IllegalMoveError(row, col, self.current_player)

        self.board.place(row, col, self.current_player)
        self.pass_notice = None
        self._turn_pending = True
        logger.debug("%s plays (%d, %d), flipping %d",
                     self.current_player.display_name, row, col, len(flipped))
        return flipped

    def advance_turn(self) -> Optional[PassNotice]:
        """
        Hand the turn to the next player able to move.

        The opponent of the player who just moved is tried first; a player with
        no valid move is skipped and reported in the returned PassNotice. If no
        player can move the game is over. Without a preceding apply_move this
        is a no-op.

        Returns:
            PassNotice naming the skipped player, or None
        """
        if self.game_over or not self._turn_pending:
            return None
        self._turn_pending = False
        return self._hand_turn_to(self.current_player.opponent)

    def _hand_turn_to(self, candidate: Player) -> Optional[PassNotice]:
        notice = None
        for _ in range(len(Player)):
            if self.board.has_any_valid_move(candidate):
                self.current_player = candidate
                self.pass_notice = notice
                if notice is not None:
                    logger.debug(notice.message)
                return notice
            if notice is None:
                notice = PassNotice(candidate)
            candidate = candidate.opponent

        self._finish()
        return None

    def _finish(self) -> None:
        self.game_over = True
        self.pass_notice = None
        score = self.get_score()
        self.winner = score.winner
        logger.info("Game over - Black: %d, White: %d", score.black, score.white)

    def play(self, row: int, col: int) -> Optional[PassNotice]:
        """
        Apply a move and advance the turn as one step.

        Raises:
            MoveRejected: if the move is rejected; the state is unchanged
        """
        self.apply_move(row, col)
        return self.advance_turn()

    def make_move(self, row: int, col: int) -> bool:
        """
        Make a move on the board.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was valid and made, False otherwise
        """
        try:
            self.play(row, col)
        except MoveRejected as e:
            logger.debug("Move rejected: %s", e)
            return False
        return True

    def acknowledge_pass(self) -> None:
        """Clear the pending pass notice once it has been shown."""
        self.pass_notice = None

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self.game_over

    def get_winner(self) -> Optional[Union[Player, int]]:
        """
        Get the winner of the game.

        Returns:
            Player.BLACK, Player.WHITE, or DRAW (0), None if game not over
        """
        return self.winner if self.game_over else None

    def get_score(self) -> Score:
        """
        Get the current score (black, white).

        Returns:
            Score recomputed from the board
        """
        return self.board.get_score()

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array representing the board state
        """
        return self.board.get_board_state()

    def get_current_player(self) -> Player:
        return self.current_player

    def result_message(self) -> str:
        """Text describing the final result; empty while the game is running."""
        if not self.game_over:
            return ""
        if self.winner == DRAW:
            return "It's a draw!"
        return f"{self.winner.display_name} wins!"

    def copy(self) -> 'GameState':
        """Create a deep copy of the game."""
        new_game = GameState(self.size)
        new_game.board = self.board.copy()
        new_game.current_player = self.current_player
        new_game.game_over = self.game_over
        new_game.winner = self.winner
        new_game.pass_notice = self.pass_notice
        new_game._turn_pending = self._turn_pending
        return new_game

    def __str__(self) -> str:
        """String representation of the game state."""
        result = str(self.board)
        if self.game_over:
            result += f"\nGame over! {self.result_message()}"
        else:
            result += f"\nCurrent player: {self.current_player.display_name}"
        return result
