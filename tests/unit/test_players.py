"""
Unit tests for move selection policies.

Tests verify:
1. Human input is parsed 1-based and bad input is asked again
2. Random players only pick playable columns and honour their seed
3. Search players pick the engine's column and keep its statistics
4. Every policy refuses to move on a full board
"""

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from connect4_minimax.engine.minimax import SearchStrategy
from connect4_minimax.game.connect_four import ConnectFour, Piece
from connect4_minimax.game.errors import (
    InvalidColumnError,
    MalformedInputError,
    NoPlayableColumnError,
)
from connect4_minimax.play.players import (
    HumanPlayer,
    PlayerMode,
    RandomPlayer,
    SearchPlayer,
    create_player,
    parse_column,
)


RED = Piece.RED
YELLOW = Piece.YELLOW


def scripted_input(*lines):
    """Stand-in for input() that replays ``lines`` and records the prompts."""
    answers = iter(lines)
    prompts = []

    def prompt(message):
        prompts.append(message)
        return next(answers)

    prompt.prompts = prompts
    return prompt


def draw_board():
    state = np.zeros((6, 7), dtype=np.int8)
    for row in range(6):
        for col in range(7):
            state[row, col] = RED if ((col // 2) + row) % 2 == 0 else YELLOW
    return state


def fill_column(game, state, col):
    for i in range(game.row_count):
        game.place_piece(state, col, RED if i % 2 == 0 else YELLOW)


class TestParseColumn:
    @pytest.mark.parametrize("raw,expected", [("1", 0), ("4", 3), ("7", 6), (" 5 \n", 4)])
    def test_one_based(self, raw, expected):
        assert parse_column(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "3.5", "four"])
    def test_malformed(self, raw):
        with pytest.raises(MalformedInputError):
            parse_column(raw)

    @pytest.mark.parametrize("raw", ["0", "8", "-2"])
    def test_out_of_range(self, raw):
        with pytest.raises(InvalidColumnError):
            parse_column(raw)


class TestHumanPlayer:
    def test_reads_column(self):
        game = ConnectFour()
        player = HumanPlayer(RED, prompt=scripted_input("4"), output=lambda msg: None)

        assert player.choose_column(game, game.get_initial_state(), YELLOW) == 3

    def test_asks_again_on_bad_input(self):
        game = ConnectFour()
        messages = []
        prompt = scripted_input("abc", "0", "9", "2")
        player = HumanPlayer(YELLOW, prompt=prompt, output=messages.append)

        assert player.choose_column(game, game.get_initial_state(), RED) == 1
        assert len(prompt.prompts) == 4
        assert len(messages) == 3
        assert "Invalid input" in messages[0]
        assert "Invalid column" in messages[1]

    def test_asks_again_on_full_column(self):
        game = ConnectFour()
        state = game.get_initial_state()
        fill_column(game, state, 0)
        messages = []
        player = HumanPlayer(RED, prompt=scripted_input("1", "2"), output=messages.append)

        assert player.choose_column(game, state, YELLOW) == 1
        assert messages == ["❌ Column 1 is full! Pick another one"]

    def test_full_board(self):
        player = HumanPlayer(RED, prompt=scripted_input(), output=lambda msg: None)

        with pytest.raises(NoPlayableColumnError):
            player.choose_column(ConnectFour(), draw_board(), YELLOW)

    def test_defaults_to_console(self, monkeypatch):
        monkeypatch.setattr('builtins.input', lambda message: "7")
        player = HumanPlayer(RED)

        assert player.choose_column(ConnectFour(), ConnectFour().get_initial_state(), YELLOW) == 6


class TestRandomPlayer:
    def test_seed_is_reproducible(self):
        game = ConnectFour()
        state = game.get_initial_state()
        a = RandomPlayer(RED, seed=42)
        b = RandomPlayer(RED, seed=42)

        assert [a.choose_column(game, state, YELLOW) for _ in range(20)] == \
               [b.choose_column(game, state, YELLOW) for _ in range(20)]

    def test_only_playable_columns(self):
        game = ConnectFour()
        state = game.get_initial_state()
        for col in (0, 2, 4, 6):
            fill_column(game, state, col)
        player = RandomPlayer(YELLOW, seed=1)

        picks = {player.choose_column(game, state, RED) for _ in range(50)}

        assert picks <= {1, 3, 5}

    def test_single_open_column(self):
        state = draw_board()
        state[0, 5] = 0
        player = RandomPlayer(RED, seed=0)

        assert player.choose_column(ConnectFour(), state, YELLOW) == 5

    def test_full_board(self):
        with pytest.raises(NoPlayableColumnError):
            RandomPlayer(RED, seed=0).choose_column(ConnectFour(), draw_board(), YELLOW)


class TestSearchPlayer:
    def test_takes_win(self):
        game = ConnectFour()
        state = game.get_initial_state()
        for col in range(3):
            game.place_piece(state, col, YELLOW)
            game.place_piece(state, col, RED)
        player = SearchPlayer(YELLOW, strategy=SearchStrategy.ALPHA_BETA, depth=2)

        assert player.choose_column(game, state, RED) == 3
        assert player.last_result.best_move == 3
        assert player.last_result.nodes_searched > 0

    def test_full_board(self):
        player = SearchPlayer(RED, depth=2)

        with pytest.raises(NoPlayableColumnError):
            player.choose_column(ConnectFour(), draw_board(), YELLOW)
        assert player.last_result is None

    def test_name(self):
        player = SearchPlayer(RED, strategy=SearchStrategy.MINIMAX, depth=3)

        assert player.name == "Red (minimax, depth 3)"


class TestCreatePlayer:
    def test_human(self):
        player = create_player(RED, 'human', prompt=scripted_input("1"))

        assert isinstance(player, HumanPlayer)
        assert player.mode is PlayerMode.HUMAN

    def test_random(self):
        player = create_player(YELLOW, PlayerMode.RANDOM, seed=3)

        assert isinstance(player, RandomPlayer)
        assert player.piece is YELLOW

    def test_search_defaults(self):
        player = create_player(RED, 'search')

        assert isinstance(player, SearchPlayer)
        assert player.engine.strategy is SearchStrategy.ALPHA_BETA
        assert player.engine.max_depth == 4

    def test_search_options(self):
        player = create_player(RED, 'search', strategy='minimax', depth=2)

        assert player.engine.strategy is SearchStrategy.MINIMAX
        assert player.engine.max_depth == 2

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            create_player(RED, 'psychic')
