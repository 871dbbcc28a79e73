"""
Connect Four game model: board rules, results and errors.
"""

from connect4_minimax.game.connect_four import (
    COLUMN_COUNT,
    DIRECTIONS,
    DRAW,
    EMPTY,
    IN_PROGRESS,
    ROW_COUNT,
    WIN_LENGTH,
    ConnectFour,
    GameResult,
    GameStatus,
    Piece,
)
from connect4_minimax.game.errors import (
    ConnectFourError,
    InvalidColumnError,
    MalformedInputError,
    NoPlayableColumnError,
)

__all__ = [
    'COLUMN_COUNT',
    'DIRECTIONS',
    'DRAW',
    'EMPTY',
    'IN_PROGRESS',
    'ROW_COUNT',
    'WIN_LENGTH',
    'ConnectFour',
    'GameResult',
    'GameStatus',
    'Piece',
    'ConnectFourError',
    'InvalidColumnError',
    'MalformedInputError',
    'NoPlayableColumnError',
]
