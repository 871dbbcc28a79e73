"""
Exceptions raised by the Connect Four board model and its callers.

A full column is not an error: ``get_lowest_empty_row`` and
``place_piece`` signal it by returning ``None``.
"""


class ConnectFourError(Exception):
    """Base class for all Connect Four errors."""


class InvalidColumnError(ConnectFourError, ValueError):
    """Column index outside the board."""

    def __init__(self, column, column_count: int = 7):
        self.column = column
        self.column_count = column_count
        super().__init__(
            f"Column {column!r} is out of range (expected 0 to {column_count - 1})"
        )


class MalformedInputError(ConnectFourError, ValueError):
    """Human input that is not a column number at all."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Expected a column number, got {raw!r}")


class NoPlayableColumnError(ConnectFourError):
    """A move was requested on a board with no open column."""
