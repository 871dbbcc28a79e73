"""
Playing Connect Four: players, the turn controller, rendering and matches.
"""

from connect4_minimax.play.arena import MatchStats, run_match
from connect4_minimax.play.controller import GameController
from connect4_minimax.play.players import (
    HumanPlayer,
    Player,
    PlayerMode,
    RandomPlayer,
    SearchPlayer,
    create_player,
    parse_column,
)
from connect4_minimax.play.render import print_board, render_board

__all__ = [
    'MatchStats',
    'run_match',
    'GameController',
    'HumanPlayer',
    'Player',
    'PlayerMode',
    'RandomPlayer',
    'SearchPlayer',
    'create_player',
    'parse_column',
    'print_board',
    'render_board',
]
