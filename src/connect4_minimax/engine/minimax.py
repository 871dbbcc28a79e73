"""
Minimax search engine for Connect Four.

Two tree walks share the same terminal test and child generation:

- Plain minimax: expands every playable column down to the depth limit
- Alpha-beta: the same walk, skipping siblings once alpha >= beta

Pruning never changes the answer. For any board, depth and piece map both
walks return the same root value and the same root column.

Algorithm overview:

    def minimax(board, depth, maximizing, column):
        if depth == 0 or result(board) is not IN_PROGRESS:
            return column, evaluate(board, maximizing_piece, minimizing_piece)

        best = None
        for col, child in child_boards(board, piece_to_move):
            value = minimax(child, depth - 1, not maximizing, col).value
            if best is None or (value > best.value if maximizing else value < best.value):
                best = (col, value)
        return best

Every child is a fresh copy of its parent, so no two branches ever share a
board and the caller's board is never touched. Ties keep the first child
in column order (strict comparison), which makes the chosen column
reproducible.
"""

import logging
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, NamedTuple, Optional, Tuple

import numpy as np

from connect4_minimax.config import SEARCH_CONFIG
from connect4_minimax.engine.evaluator import evaluate
from connect4_minimax.game.connect_four import ConnectFour, GameStatus, Piece

logger = logging.getLogger(__name__)

NO_MOVE = -1


class SearchStrategy(Enum):
    MINIMAX = "minimax"
    ALPHA_BETA = "alphabeta"


class PieceMap(NamedTuple):
    """Which piece each side of the search tree plays."""
    maximizing: Piece
    minimizing: Piece


class MoveValue(NamedTuple):
    """Column chosen at a node and the value backed up to it."""
    column: int
    value: float


@dataclass
class SearchResult:
    """Result of a top-level search."""
    best_move: int
    score: float
    depth: int
    strategy: SearchStrategy
    nodes_searched: int
    time_ms: int


class MinimaxEngine:
    """
    Depth-limited minimax / alpha-beta search.

    The engine keeps only statistics for the most recent search; nothing
    carries over from one top-level call to the next.
    """

    def __init__(
        self,
        game: Optional[ConnectFour] = None,
        strategy: SearchStrategy = SearchStrategy(SEARCH_CONFIG['strategy']),
        max_depth: int = SEARCH_CONFIG['max_depth'],
        evaluator: Callable[[np.ndarray, Piece, Piece], float] = evaluate,
    ):
        """
        Args:
            game: Board rules (a fresh ConnectFour if omitted)
            strategy: Plain minimax or alpha-beta
            max_depth: Default search depth in plies
            evaluator: Static evaluation (state, piece, opponent) -> score
        """
        if max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")

        self.game = game if game is not None else ConnectFour()
        self.strategy = SearchStrategy(strategy)
        self.max_depth = max_depth
        self.evaluator = evaluator

        self.nodes_searched = 0

    def __repr__(self):
        return f"MinimaxEngine(strategy={self.strategy.value}, max_depth={self.max_depth})"

    def search(
        self,
        state: np.ndarray,
        piece: Piece,
        opponent: Piece,
        depth: Optional[int] = None,
    ) -> SearchResult:
        """
        Choose a column for ``piece`` to play on ``state``.

        Args:
            state: Current board (not modified)
            piece: Piece about to move; the maximizing side
            opponent: The other piece; the minimizing side
            depth: Override the engine's max_depth

        Returns:
            SearchResult whose best_move is -1 only if no column is playable
        """
        depth = self.max_depth if depth is None else depth
        piece_map = PieceMap(maximizing=Piece(piece), minimizing=Piece(opponent))

        self.nodes_searched = 0
        start = time.perf_counter()

        if self.strategy is SearchStrategy.ALPHA_BETA:
            best = self.minimax_alpha_beta(state, depth, -math.inf, math.inf, True, piece_map)
        else:
            best = self.minimax(state, depth, True, piece_map)

        elapsed_ms = int((time.perf_counter() - start) * 1000)
        logger.debug(
            "%s depth=%d picked column %d (value %s) after %d nodes in %d ms",
            self.strategy.value, depth, best.column, best.value, self.nodes_searched, elapsed_ms,
        )

        return SearchResult(
            best_move=best.column,
            score=best.value,
            depth=depth,
            strategy=self.strategy,
            nodes_searched=self.nodes_searched,
            time_ms=elapsed_ms,
        )

    def get_child_states(self, state: np.ndarray, piece: Piece) -> List[Tuple[int, np.ndarray]]:
        """One independent copy per playable column, with ``piece`` dropped in it."""
        children = []
        for col in range(self.game.column_count):
            if self.game.can_play(state, col):
                children.append((col, self.game.get_next_state(state, col, piece)))
        return children

    def _is_terminal(self, state: np.ndarray, depth: int) -> bool:
        return depth == 0 or self.game.get_result(state).status is not GameStatus.IN_PROGRESS

    def _evaluate(self, state: np.ndarray, piece_map: PieceMap) -> float:
        return self.evaluator(state, piece_map.maximizing, piece_map.minimizing)

    def minimax(
        self,
        state: np.ndarray,
        depth: int,
        maximizing: bool,
        piece_map: PieceMap,
        column: int = NO_MOVE,
    ) -> MoveValue:
        """
        Plain minimax.

        Args:
            state: Board at this node
            depth: Remaining plies
            maximizing: True if piece_map.maximizing moves at this node
            piece_map: Pieces of the maximizing and minimizing sides
            column: Column that produced this board (-1 at the root)

        Returns:
            MoveValue of the best child at this node, or (column, static
            value) at a terminal node or a node without children
        """
        self.nodes_searched += 1

        if self._is_terminal(state, depth):
            return MoveValue(column, self._evaluate(state, piece_map))

        piece = piece_map.maximizing if maximizing else piece_map.minimizing
        children = self.get_child_states(state, piece)
        if not children:
            return MoveValue(column, self._evaluate(state, piece_map))

        best: Optional[MoveValue] = None
        for col, child in children:
            value = self.minimax(child, depth - 1, not maximizing, piece_map, col).value
            if best is None:
                best = MoveValue(col, value)
            elif maximizing and value > best.value:
                best = MoveValue(col, value)
            elif not maximizing and value < best.value:
                best = MoveValue(col, value)

        return best

    def minimax_alpha_beta(
        self,
        state: np.ndarray,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
        piece_map: PieceMap,
        column: int = NO_MOVE,
    ) -> MoveValue:
        """
        Minimax with alpha-beta pruning.

        Args:
            state: Board at this node
            depth: Remaining plies
            alpha: Best value the maximizing side can already guarantee
            beta: Best value the minimizing side can already guarantee
            maximizing: True if piece_map.maximizing moves at this node
            piece_map: Pieces of the maximizing and minimizing sides
            column: Column that produced this board (-1 at the root)

        Returns:
            MoveValue; equal to minimax() at the root
        """
        self.nodes_searched += 1

        if self._is_terminal(state, depth):
            return MoveValue(column, self._evaluate(state, piece_map))

        piece = piece_map.maximizing if maximizing else piece_map.minimizing
        children = self.get_child_states(state, piece)
        if not children:
            return MoveValue(column, self._evaluate(state, piece_map))

        if maximizing:
            best = MoveValue(children[0][0], -math.inf)
            for col, child in children:
                value = self.minimax_alpha_beta(child, depth - 1, alpha, beta, False, piece_map, col).value
                if value > best.value:
                    best = MoveValue(col, value)
                alpha = max(alpha, best.value)
                if alpha >= beta:
                    break
        else:
            best = MoveValue(children[0][0], math.inf)
            for col, child in children:
                value = self.minimax_alpha_beta(child, depth - 1, alpha, beta, True, piece_map, col).value
                if value < best.value:
                    best = MoveValue(col, value)
                beta = min(beta, best.value)
                if beta <= alpha:
                    break

        return best


def minimax(
    state: np.ndarray,
    depth: int,
    maximizing: bool,
    piece_map: PieceMap,
    column: int = NO_MOVE,
) -> MoveValue:
    """Plain minimax with a throwaway engine."""
    engine = MinimaxEngine(strategy=SearchStrategy.MINIMAX, max_depth=depth)
    return engine.minimax(state, depth, maximizing, piece_map, column)


def minimax_alpha_beta(
    state: np.ndarray,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    piece_map: PieceMap,
    column: int = NO_MOVE,
) -> MoveValue:
    """Alpha-beta minimax with a throwaway engine."""
    engine = MinimaxEngine(strategy=SearchStrategy.ALPHA_BETA, max_depth=depth)
    return engine.minimax_alpha_beta(state, depth, alpha, beta, maximizing, piece_map, column)
