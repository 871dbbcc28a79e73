"""
Connect Four board model.

Board: 6 rows x 7 columns, numpy int8 array
Row 0 is the TOP of the board, row 5 the BOTTOM (pieces fall downwards).
Cells: 0 = empty, 1 = Red, -1 = Yellow

Win detection scans every occupied cell in row-major order and tests the
window of four starting at that cell in each direction, in the order
horizontal, diagonal-up, diagonal-down, vertical. The first window found
decides the result, which also fixes the outcome of the (normally
unreachable) position where both pieces have four in a row.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

import numpy as np

from connect4_minimax.game.errors import InvalidColumnError


ROW_COUNT = 6
COLUMN_COUNT = 7
WIN_LENGTH = 4
EMPTY = 0

HORIZONTAL = (0, 1)
DIAGONAL_UP = (-1, 1)
DIAGONAL_DOWN = (1, 1)
VERTICAL = (1, 0)
DIRECTIONS: Tuple[Tuple[int, int], ...] = (HORIZONTAL, DIAGONAL_UP, DIAGONAL_DOWN, VERTICAL)


class Piece(IntEnum):
    """The two piece colours. Values are the cell values stored on the board."""

    RED = 1
    YELLOW = -1

    def opponent(self) -> "Piece":
        return Piece(-self.value)

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def symbol(self) -> str:
        return "🔴" if self is Piece.RED else "🟡"


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class GameResult:
    """Outcome of a board snapshot. Never stored on the board itself."""

    status: GameStatus
    winner: Optional[Piece] = None

    @classmethod
    def win(cls, piece: Piece) -> "GameResult":
        return cls(GameStatus.WIN, Piece(piece))

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    def __str__(self) -> str:
        if self.status is GameStatus.WIN:
            return f"{self.winner.label} wins!"
        if self.status is GameStatus.DRAW:
            return "Draw"
        return "In progress"


IN_PROGRESS = GameResult(GameStatus.IN_PROGRESS)
DRAW = GameResult(GameStatus.DRAW)


def window_coords(row: int, col: int, direction: Tuple[int, int]) -> List[Tuple[int, int]]:
    """
    Coordinates of the window of up to WIN_LENGTH cells starting at (row, col).

    The window is clipped at the board edges, so it may be shorter than
    WIN_LENGTH near the right, top or bottom border.
    """
    dr, dc = direction
    coords = []
    r, c = row, col
    while len(coords) < WIN_LENGTH and 0 <= r < ROW_COUNT and 0 <= c < COLUMN_COUNT:
        coords.append((r, c))
        r += dr
        c += dc
    return coords


def _build_window_index() -> np.ndarray:
    # Flat indices of every full-length window, in result scan order.
    windows = []
    for row in range(ROW_COUNT):
        for col in range(COLUMN_COUNT):
            for direction in DIRECTIONS:
                coords = window_coords(row, col, direction)
                if len(coords) == WIN_LENGTH:
                    windows.append([r * COLUMN_COUNT + c for r, c in coords])
    return np.array(windows, dtype=np.intp)


WINDOW_INDEX = _build_window_index()


class ConnectFour:
    """
    Connect Four rules over numpy board states.

    The class holds no board of its own: every method takes the state it
    works on, so search code can pass around cheap independent copies while
    the turn controller keeps the one live board.
    """

    def __init__(self):
        self.row_count = ROW_COUNT
        self.column_count = COLUMN_COUNT
        self.win_length = WIN_LENGTH
        self.action_size = COLUMN_COUNT
        self.center_column = COLUMN_COUNT // 2

    def __repr__(self):
        return f"ConnectFour({self.row_count}x{self.column_count}, win={self.win_length})"

    def get_initial_state(self) -> np.ndarray:
        """Returns an empty (rows, cols) board."""
        return np.zeros((self.row_count, self.column_count), dtype=np.int8)

    def _check_column(self, col) -> int:
        if isinstance(col, (bool, np.bool_)) or not isinstance(col, (int, np.integer)):
            raise InvalidColumnError(col, self.column_count)
        if col < 0 or col >= self.column_count:
            raise InvalidColumnError(col, self.column_count)
        return int(col)

    def get_lowest_empty_row(self, state: np.ndarray, col: int) -> Optional[int]:
        """
        Row a piece dropped into ``col`` would land on, or None if the column is full.

        Scans from the top: the destination is the first empty cell that is
        either on the bottom row or has a piece directly below it.

        Raises:
            InvalidColumnError: if ``col`` is not a column of the board
        """
        col = self._check_column(col)
        for row in range(self.row_count):
            is_bottom_row = row == self.row_count - 1
            if is_bottom_row or state[row + 1, col] != EMPTY:
                if state[row, col] == EMPTY:
                    return row
        return None

    def can_play(self, state: np.ndarray, col: int) -> bool:
        return self.get_lowest_empty_row(state, col) is not None

    def get_valid_moves(self, state: np.ndarray) -> np.ndarray:
        """Binary mask of length column_count, 1 where a piece can be dropped."""
        return np.array(
            [self.can_play(state, col) for col in range(self.column_count)],
            dtype=np.uint8,
        )

    def get_playable_columns(self, state: np.ndarray) -> List[int]:
        """Playable columns in ascending order."""
        return [col for col in range(self.column_count) if self.can_play(state, col)]

    def place_piece(self, state: np.ndarray, col: int, piece: Piece) -> Optional[int]:
        """
        Drop ``piece`` into ``col`` in place.

        Only ``state`` is modified. A full column is a no-op.

        Returns:
            The row the piece landed on, or None if the column was full
        """
        row = self.get_lowest_empty_row(state, col)
        if row is not None:
            state[row, col] = int(piece)
        return row

    def get_next_state(self, state: np.ndarray, col: int, piece: Piece) -> np.ndarray:
        """Copy of ``state`` with ``piece`` dropped into ``col``."""
        next_state = state.copy()
        self.place_piece(next_state, col, piece)
        return next_state

    def get_window(self, state: np.ndarray, row: int, col: int, direction: Tuple[int, int]) -> np.ndarray:
        """Cells of the (clipped) window starting at (row, col)."""
        coords = window_coords(row, col, direction)
        return np.array([state[r, c] for r, c in coords], dtype=state.dtype)

    def count_in_window(self, state: np.ndarray, cell: int, row: int, col: int, direction: Tuple[int, int]) -> int:
        """Number of cells equal to ``cell`` in the window starting at (row, col)."""
        return int(np.count_nonzero(self.get_window(state, row, col, direction) == int(cell)))

    def is_winning_line(self, state: np.ndarray, piece: Piece, row: int, col: int, direction: Tuple[int, int]) -> bool:
        """
        True iff the four cells starting exactly at (row, col) all hold ``piece``.

        A longer run is reported at each of its four-cell sub-windows.
        """
        return self.count_in_window(state, piece, row, col, direction) == self.win_length

    def has_won_at(self, state: np.ndarray, piece: Piece, row: int, col: int) -> bool:
        return any(
            self.is_winning_line(state, piece, row, col, direction)
            for direction in DIRECTIONS
        )

    def get_result(self, state: np.ndarray) -> GameResult:
        """
        Result of the given board.

        Every full-length window is checked in scan order (row, column,
        then direction); the first one filled with a single piece wins.
        Without a win the game is a draw once no empty cell remains.
        """
        cells = state.ravel()[WINDOW_INDEX]
        first = cells[:, :1]
        complete = (first[:, 0] != EMPTY) & np.all(cells == first, axis=1)
        winning = np.flatnonzero(complete)
        if winning.size:
            return GameResult.win(int(cells[winning[0], 0]))

        if np.any(state == EMPTY):
            return IN_PROGRESS
        return DRAW

    def is_gravity_consistent(self, state: np.ndarray) -> bool:
        """True if no piece sits directly above an empty cell."""
        occupied = state != EMPTY
        floating = occupied[:-1, :] & ~occupied[1:, :]
        return not bool(np.any(floating))
