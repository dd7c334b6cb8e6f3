"""
Board module for Othello.
Handles the grid of disc states, capture computation, move validation and scoring.
"""
from enum import IntEnum
from typing import Dict, List, NamedTuple, Optional, Tuple, Union
import numpy as np

from .exceptions import InvalidCoordinateError

# Cell value of an empty square
EMPTY = 0
# Winner value of a drawn game
DRAW = 0


class Player(IntEnum):
    """The two sides. Black moves first."""
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> 'Player':
        return Player(3 - self.value)

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


class Score(NamedTuple):
    """Disc counts (black, white), always derived from a board."""
    black: int
    white: int

    @property
    def total(self) -> int:
        return self.black + self.white

    @property
    def winner(self) -> Union[Player, int]:
        """Player.BLACK, Player.WHITE, or DRAW for equal counts."""
        if self.black > self.white:
            return Player.BLACK
        if self.white > self.black:
            return Player.WHITE
        return DRAW

    def for_player(self, player: Player) -> int:
        return self.black if player == Player.BLACK else self.white


# Row/column offsets of the 8 lines radiating from a square
DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1),
              (0, -1),           (0, 1),
              (1, -1),  (1, 0),  (1, 1)]

DEFAULT_SYMBOLS = {EMPTY: '.', Player.BLACK: 'B', Player.WHITE: 'W'}


class Board:
    """
    Represents the Othello board as an 8x8 numpy array of cell states.
    Every query takes the player explicitly; the board has no notion of whose turn it is.
    """

    # Board dimensions
    SIZE = 8
    BOARD_SIZE = SIZE * SIZE

    def __init__(self, size: int = 8):
        """Initialize a board with the standard starting cross."""
        if size != 8:
            raise ValueError("Only 8x8 board is supported")

        self.size = size
        self._board = np.zeros((size, size), dtype=np.int8)
        mid = size // 2
        self._board[mid - 1, mid - 1] = Player.WHITE
        self._board[mid - 1, mid] = Player.BLACK
        self._board[mid, mid - 1] = Player.BLACK
        self._board[mid, mid] = Player.WHITE

    @classmethod
    def empty(cls) -> 'Board':
        """Create a board with no discs on it."""
        board = cls()
        board._board.fill(EMPTY)
        return board

    @classmethod
    def from_array(cls, cells) -> 'Board':
        """
        Build a board from any 8x8 array-like of cell values.

        Args:
            cells: nested sequence or numpy array holding EMPTY, 1 (black) or 2 (white)

        Returns:
            A new Board owning a copy of the cells
        """
        raw = np.asarray(cells)
        if raw.shape != (cls.SIZE, cls.SIZE):
            raise ValueError(f"Expected an 8x8 grid, got shape {raw.shape}")
        if not np.issubdtype(raw.dtype, np.integer) or \
                not np.isin(raw, (EMPTY, int(Player.BLACK), int(Player.WHITE))).all():
            raise ValueError("Cells must be 0 (empty), 1 (black) or 2 (white)")
        board = cls()
        board._board = raw.astype(np.int8)
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board(self.size)
        new_board._board = self._board.copy()
        return new_board

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.SIZE and 0 <= col < self.SIZE

    def _check_coordinates(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise InvalidCoordinateError(row, col)

    def get_cell(self, row: int, col: int) -> int:
        """Return EMPTY or the Player occupying (row, col)."""
        self._check_coordinates(row, col)
        value = int(self._board[row, col])
        return Player(value) if value != EMPTY else EMPTY

    def get_flipped_pieces(self, row: int, col: int, player: Player) -> List[Tuple[int, int]]:
        """
        Get the list of opponent discs that would be flipped if player placed a disc at (row, col).

        Args:
            row: Row of the target square (0-based)
            col: Column of the target square (0-based)
            player: The player placing the disc

        Returns:
            List of (row, col) tuples, empty if the square is occupied or nothing is flanked
        """
        self._check_coordinates(row, col)
        if self._board[row, col] != EMPTY:
            return []

        opponent = Player(player).opponent
        flipped = []

        for dr, dc in DIRECTIONS:
            line = []
            r, c = row + dr, col + dc
            # Walk over the opponent's discs; only a closing disc of our own confirms the line
            while 0 <= r < self.SIZE and 0 <= c < self.SIZE:
                cell = self._board[r, c]
                if cell == opponent:
                    line.append((r, c))
                elif cell == player:
                    flipped.extend(line)
                    break
                else:
                    break
                r += dr
                c += dc

        return flipped

    def is_valid_move(self, row: int, col: int, player: Player) -> bool:
        """Check if placing a disc at (row, col) flips at least one opponent disc."""
        return len(self.get_flipped_pieces(row, col, player)) > 0

    def get_valid_moves(self, player: Player) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the given player.

        Returns:
            List of (row, col) tuples in row-major order
        """
        return [(i, j)
                for i in range(self.SIZE)
                for j in range(self.SIZE)
                if self.is_valid_move(i, j, player)]

    def has_any_valid_move(self, player: Player) -> bool:
        """Check if the player has any valid moves."""
        for i in range(self.SIZE):
            for j in range(self.SIZE):
                if self.is_valid_move(i, j, player):
                    return True
        return False

    def valid_moves_mask(self, player: Player) -> np.ndarray:
        """Boolean 8x8 array marking the squares where player may move."""
        mask = np.zeros((self.SIZE, self.SIZE), dtype=bool)
        for r, c in self.get_valid_moves(player):
            mask[r, c] = True
        return mask

    def place(self, row: int, col: int, player: Player) -> List[Tuple[int, int]]:
        """
        Place a disc for player and flip every captured disc.

        The caller is responsible for checking legality first; an empty capture
        list leaves the board untouched.

        Returns:
            The flipped (row, col) squares
        """
        flipped = self.get_flipped_pieces(row, col, player)
        if not flipped:
            return []

        self._board[row, col] = player
        for r, c in flipped:
            self._board[r, c] = player
        return flipped

    def is_full(self) -> bool:
        return not (self._board == EMPTY).any()

    def get_score(self) -> Score:
        """
        Get the current score.

        Returns:
            Score of (black_count, white_count)
        """
        black_count = int(np.count_nonzero(self._board == Player.BLACK))
        white_count = int(np.count_nonzero(self._board == Player.WHITE))
        return Score(black_count, white_count)

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D numpy array representing the board state
        """
        return self._board.copy()

    def render(self, symbols: Optional[Dict[int, str]] = None,
               hints: Optional[Player] = None, hint_symbol: str = '*') -> str:
        """
        Render the grid as text with row and column indices.

        Args:
            symbols: Mapping of EMPTY / Player values to single characters
            hints: If given, mark the valid moves of this player with hint_symbol
        """
        symbols = symbols or DEFAULT_SYMBOLS
        mask = self.valid_moves_mask(hints) if hints is not None else None
        rows = ['  ' + ' '.join(str(j) for j in range(self.SIZE))]
        for i in range(self.SIZE):
            cells = []
            for j in range(self.SIZE):
                if mask is not None and mask[i, j]:
                    cells.append(hint_symbol)
                else:
                    cells.append(symbols[int(self._board[i, j])])
            rows.append(f"{i} " + ' '.join(cells))
        return "\n".join(rows)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self._board, other._board))

    def __str__(self) -> str:
        """Return a string representation of the board."""
        symbols = DEFAULT_SYMBOLS
        rows = []
        for i in range(self.SIZE):
            row = [symbols[int(self._board[i, j])] for j in range(self.SIZE)]
            rows.append(' '.join(row))

        black_count, white_count = self.get_score()
        rows.append(f"Score - Black: {black_count}, White: {white_count}")
        return "\n".join(rows)
