"""
Unit tests for computer-vs-computer matches.
"""

import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from connect4_minimax.engine.minimax import SearchStrategy
from connect4_minimax.game.connect_four import Piece
from connect4_minimax.play.arena import MatchStats, run_match
from connect4_minimax.play.players import HumanPlayer, RandomPlayer, SearchPlayer


RED = Piece.RED
YELLOW = Piece.YELLOW


class TestMatchStats:
    def test_record(self):
        stats = MatchStats()
        stats.record(RED, 10)
        stats.record(None, 42)
        stats.record(YELLOW, 8)
        stats.record(RED, 7)

        assert stats.wins == {RED: 2, YELLOW: 1}
        assert stats.draws == 1
        assert stats.total == 4
        assert stats.total_moves == 67

    def test_win_rate_counts_draws_as_half(self):
        stats = MatchStats()
        stats.record(RED, 7)
        stats.record(None, 42)

        assert stats.win_rate(RED) == 0.75
        assert stats.win_rate(YELLOW) == 0.25

    def test_empty(self):
        assert MatchStats().win_rate(RED) == 0.0

    def test_summary(self):
        stats = MatchStats()
        stats.record(YELLOW, 9)

        assert stats.summary() == "Red: 0  Yellow: 1  Draws: 0  (games: 1)"


class TestRunMatch:
    def test_random_match(self):
        stats = run_match(RandomPlayer(RED, seed=1), RandomPlayer(YELLOW, seed=2), 6, progress=False)

        assert stats.total == 6
        assert 7 * 6 <= stats.total_moves <= 42 * 6

    def test_search_beats_random(self):
        search = SearchPlayer(RED, strategy=SearchStrategy.ALPHA_BETA, depth=2)
        stats = run_match(search, RandomPlayer(YELLOW, seed=0), 4, progress=False)

        assert stats.total == 4
        assert stats.wins[RED] > stats.wins[YELLOW]

    def test_rejects_humans(self):
        with pytest.raises(ValueError):
            run_match(HumanPlayer(RED), RandomPlayer(YELLOW), 1, progress=False)

    def test_rejects_zero_games(self):
        with pytest.raises(ValueError):
            run_match(RandomPlayer(RED), RandomPlayer(YELLOW), 0, progress=False)
