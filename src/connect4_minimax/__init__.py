"""
Connect Four with a minimax / alpha-beta computer player.

Modules:
    game     - Board model, results and errors
    engine   - Heuristic evaluation and minimax search
    play     - Players, turn controller, rendering and matches
    config   - Default search, evaluation and play settings
    cli      - Terminal entry point
"""

from connect4_minimax.game import ConnectFour, GameResult, GameStatus, Piece
from connect4_minimax.engine import MinimaxEngine, SearchStrategy, evaluate

__version__ = "0.1"

__all__ = [
    'ConnectFour',
    'GameResult',
    'GameStatus',
    'Piece',
    'MinimaxEngine',
    'SearchStrategy',
    'evaluate',
]
