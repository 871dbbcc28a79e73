"""Text rendering of a Connect Four board."""

import numpy as np

from connect4_minimax.game.connect_four import EMPTY, Piece

EMPTY_SYMBOL = "⚫"


def cell_symbol(cell: int) -> str:
    if cell == EMPTY:
        return EMPTY_SYMBOL
    return Piece(int(cell)).symbol


def render_board(state: np.ndarray) -> str:
    """
    Bordered grid, top row first, with 1-based column numbers underneath.

    Each cell is three columns wide (glyph plus separator), so the borders
    span 3 * column_count + 1 characters.
    """
    column_count = state.shape[1]
    border = "—" * (column_count * 3 + 1)

    lines = [border]
    for row in state:
        lines.append("|" + "|".join(cell_symbol(cell) for cell in row) + "|")
    lines.append(border)
    lines.append(" " + " ".join(f"{col + 1:>2}" for col in range(column_count)))
    return "\n".join(lines)


def print_board(state: np.ndarray) -> None:
    print(render_board(state))
    print()
