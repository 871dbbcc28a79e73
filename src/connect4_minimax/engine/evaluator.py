"""
Static position evaluation for Connect Four.

The evaluator scores a board from one piece's point of view without any
look-ahead and without knowing whose turn it is:

    score = center term + sum over every window of four of score_window()

Each window is scored twice, once for the attacking side and once for the
defending side, and the two contributions are added:

    own pieces        opponent pieces     score
    4                 -                   +win_score
    3 (+1 empty)      -                   +three_score
    2 (+2 empty)      -                   +two_score
    -                 4                   -win_score
    -                 3 (+1 empty)        -three_score
    -                 2 (+2 empty)        -two_score

Windows clipped by the board edge hold fewer than four cells and never
score, so only the 69 full-length windows are looked at.

The center term rewards each own piece in the middle column and penalises
each opponent piece there by the same weight, which keeps
evaluate(b, A, B) == -evaluate(b, B, A).
"""

from typing import Tuple

import numpy as np

from connect4_minimax.config import EVAL_CONFIG
from connect4_minimax.game.connect_four import COLUMN_COUNT, EMPTY, WINDOW_INDEX, Piece


CENTER_WEIGHT = EVAL_CONFIG['center_weight']
WIN_SCORE = EVAL_CONFIG['win_score']
THREE_SCORE = EVAL_CONFIG['three_score']
TWO_SCORE = EVAL_CONFIG['two_score']


def score_window(own: int, opp: int, empty: int) -> int:
    """Score a single window of four from its piece counts."""
    score = 0

    if own == 4:
        score += WIN_SCORE
    elif own == 3 and empty == 1:
        score += THREE_SCORE
    elif own == 2 and empty == 2:
        score += TWO_SCORE

    if opp == 4:
        score -= WIN_SCORE
    elif opp == 3 and empty == 1:
        score -= THREE_SCORE
    elif opp == 2 and empty == 2:
        score -= TWO_SCORE

    return score


def _build_score_table() -> np.ndarray:
    # table[own, opp] for a full window; the remaining cells are empty.
    table = np.zeros((5, 5), dtype=np.int64)
    for own in range(5):
        for opp in range(5 - own):
            table[own, opp] = score_window(own, opp, 4 - own - opp)
    return table


SCORE_TABLE = _build_score_table()


def window_counts(state: np.ndarray, piece: Piece, opponent: Piece) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Per-window counts of own pieces, opponent pieces and empty cells.

    Returns:
        Three int arrays, one entry per full-length window
    """
    cells = state.ravel()[WINDOW_INDEX]
    own = np.count_nonzero(cells == int(piece), axis=1)
    opp = np.count_nonzero(cells == int(opponent), axis=1)
    empty = np.count_nonzero(cells == EMPTY, axis=1)
    return own, opp, empty


def evaluate(state: np.ndarray, piece: Piece, opponent: Piece) -> int:
    """
    Heuristic score of ``state`` for ``piece`` playing against ``opponent``.

    Positive scores favour ``piece``. A completed four dominates every
    other term, so won and lost positions sit far outside the range of
    ordinary positions.

    Args:
        state: Board state (rows, cols)
        piece: Side the score is computed for
        opponent: The other side

    Returns:
        Integer score
    """
    center = state[:, COLUMN_COUNT // 2]
    score = CENTER_WEIGHT * int(np.count_nonzero(center == int(piece)))
    score -= CENTER_WEIGHT * int(np.count_nonzero(center == int(opponent)))

    own, opp, _ = window_counts(state, piece, opponent)
    score += int(SCORE_TABLE[own, opp].sum())

    return score
