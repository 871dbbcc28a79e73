"""
Move selection policies for Connect Four players.

Every player owns one piece for the whole game and answers a single
question: which column to play on a given board. Players read the board
but never modify it.
"""

import logging
from enum import Enum
from typing import Callable, Optional

import numpy as np

from connect4_minimax.config import SEARCH_CONFIG
from connect4_minimax.engine.minimax import NO_MOVE, MinimaxEngine, SearchStrategy
from connect4_minimax.game.connect_four import COLUMN_COUNT, ConnectFour, Piece
from connect4_minimax.game.errors import (
    InvalidColumnError,
    MalformedInputError,
    NoPlayableColumnError,
)

logger = logging.getLogger(__name__)


class PlayerMode(Enum):
    HUMAN = "human"
    RANDOM = "random"
    SEARCH = "search"


def parse_column(raw: str, column_count: int = COLUMN_COUNT) -> int:
    """
    Convert a 1-based column typed by a human into a 0-based column index.

    Raises:
        MalformedInputError: if ``raw`` is not an integer
        InvalidColumnError: if the column is not on the board
    """
    text = raw.strip()
    try:
        number = int(text)
    except ValueError:
        raise MalformedInputError(raw) from None

    column = number - 1
    if column < 0 or column >= column_count:
        raise InvalidColumnError(column, column_count)
    return column


class Player:
    """Base class for players."""

    mode: PlayerMode

    def __init__(self, piece: Piece):
        self.piece = Piece(piece)

    def __repr__(self):
        return f"{type(self).__name__}({self.piece.label})"

    @property
    def name(self) -> str:
        return f"{self.piece.label} ({self.mode.value})"

    def choose_column(self, game: ConnectFour, state: np.ndarray, opponent: Piece) -> int:
        """Return a 0-based column for the given board."""
        raise NotImplementedError


class HumanPlayer(Player):
    """
    Player that asks a person for a column.

    Malformed input, out-of-range columns and full columns are reported
    through ``output`` and the person is asked again.
    """

    mode = PlayerMode.HUMAN

    def __init__(
        self,
        piece: Piece,
        prompt: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ):
        super().__init__(piece)
        self.prompt = prompt if prompt is not None else input
        self.output = output if output is not None else print

    def prompt_for_column(self) -> str:
        return self.prompt(f"{self.piece.symbol} What column would you like to play? ")

    def choose_column(self, game: ConnectFour, state: np.ndarray, opponent: Piece) -> int:
        if not game.get_playable_columns(state):
            raise NoPlayableColumnError("The board is full")

        while True:
            raw = self.prompt_for_column()
            try:
                column = parse_column(raw, game.column_count)
            except MalformedInputError:
                self.output(f"❌ Invalid input! Enter a number 1-{game.column_count}")
                continue
            except InvalidColumnError:
                self.output(f"❌ Invalid column! Choose a column from 1 to {game.column_count}")
                continue

            if not game.can_play(state, column):
                self.output(f"❌ Column {column + 1} is full! Pick another one")
                continue
            return column


class RandomPlayer(Player):
    """Player that drops its piece into a uniformly random playable column."""

    mode = PlayerMode.RANDOM

    def __init__(self, piece: Piece, seed: Optional[int] = None):
        super().__init__(piece)
        self._rng = np.random.default_rng(seed)

    def choose_column(self, game: ConnectFour, state: np.ndarray, opponent: Piece) -> int:
        if not game.get_playable_columns(state):
            raise NoPlayableColumnError("The board is full")

        # Draw over all columns and redraw while the column is full
        while True:
            column = int(self._rng.integers(game.column_count))
            if game.can_play(state, column):
                return column
            logger.debug("%s drew full column %d, redrawing", self.piece.label, column)


class SearchPlayer(Player):
    """Player backed by the minimax / alpha-beta engine."""

    mode = PlayerMode.SEARCH

    def __init__(
        self,
        piece: Piece,
        strategy: SearchStrategy = SearchStrategy(SEARCH_CONFIG['strategy']),
        depth: int = SEARCH_CONFIG['max_depth'],
        game: Optional[ConnectFour] = None,
    ):
        super().__init__(piece)
        self.engine = MinimaxEngine(game=game, strategy=strategy, max_depth=depth)
        self.last_result = None

    @property
    def name(self) -> str:
        return f"{self.piece.label} ({self.engine.strategy.value}, depth {self.engine.max_depth})"

    def choose_column(self, game: ConnectFour, state: np.ndarray, opponent: Piece) -> int:
        result = self.engine.search(state, self.piece, opponent)
        if result.best_move == NO_MOVE:
            raise NoPlayableColumnError("The board is full")

        self.last_result = result
        logger.info(
            "%s plays column %d (score %s, %d nodes)",
            self.name, result.best_move, result.score, result.nodes_searched,
        )
        return result.best_move


def create_player(
    piece: Piece,
    mode,
    strategy=None,
    depth: Optional[int] = None,
    seed: Optional[int] = None,
    prompt: Optional[Callable[[str], str]] = None,
    output: Optional[Callable[[str], None]] = None,
) -> Player:
    """
    Build a player from its configuration.

    Args:
        piece: Piece owned by the player
        mode: PlayerMode or its value ('human', 'random', 'search')
        strategy: SearchStrategy for search players (config default if None)
        depth: Search depth for search players (config default if None)
        seed: RNG seed for random players
        prompt: Line reader for human players
        output: Message sink for human players
    """
    mode = PlayerMode(mode)

    if mode is PlayerMode.HUMAN:
        return HumanPlayer(piece, prompt=prompt, output=output)
    if mode is PlayerMode.RANDOM:
        return RandomPlayer(piece, seed=seed)

    strategy = SearchStrategy(strategy if strategy is not None else SEARCH_CONFIG['strategy'])
    depth = depth if depth is not None else SEARCH_CONFIG['max_depth']
    return SearchPlayer(piece, strategy=strategy, depth=depth)
