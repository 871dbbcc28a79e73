"""
Search engine for Connect Four.

This module contains the computer player's thinking:
- Static heuristic evaluation of a board
- Depth-limited minimax search
- Alpha-beta pruning over the same tree
"""

from connect4_minimax.engine.evaluator import evaluate, score_window, window_counts
from connect4_minimax.engine.minimax import (
    NO_MOVE,
    MinimaxEngine,
    MoveValue,
    PieceMap,
    SearchResult,
    SearchStrategy,
    minimax,
    minimax_alpha_beta,
)

__all__ = [
    'evaluate',
    'score_window',
    'window_counts',
    'NO_MOVE',
    'MinimaxEngine',
    'MoveValue',
    'PieceMap',
    'SearchResult',
    'SearchStrategy',
    'minimax',
    'minimax_alpha_beta',
]
