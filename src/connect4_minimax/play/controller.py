"""
Turn controller: owns the live board and alternates the two players.
"""

import logging
from typing import Callable, Optional

import numpy as np

from connect4_minimax.game.connect_four import ConnectFour, GameResult, GameStatus
from connect4_minimax.game.errors import InvalidColumnError
from connect4_minimax.play.players import Player

logger = logging.getLogger(__name__)


class GameController:
    """
    Runs one game between two players.

    The first player moves first. The board held here is the only live
    board; players and the search engine only ever see it read-only or
    work on copies.
    """

    def __init__(
        self,
        first: Player,
        second: Player,
        game: Optional[ConnectFour] = None,
        renderer: Optional[Callable[[np.ndarray], None]] = None,
    ):
        if first.piece == second.piece:
            raise ValueError(f"Both players use {first.piece.label}; pieces must differ")

        self.game = game if game is not None else ConnectFour()
        self.players = (first, second)
        self.renderer = renderer
        self.board = self.game.get_initial_state()
        self.turn = 0
        self.move_count = 0

    @property
    def current_player(self) -> Player:
        return self.players[self.turn]

    def opponent_of(self, player: Player) -> Player:
        return self.players[1] if player is self.players[0] else self.players[0]

    def get_result(self) -> GameResult:
        return self.game.get_result(self.board)

    def play_turn(self) -> Optional[int]:
        """
        Ask the current player for a column and apply it.

        A full column leaves the turn with the same player, who is asked
        again on the next call.

        Returns:
            Row the piece landed on, or None if the chosen column was full

        Raises:
            InvalidColumnError: if the player returned a column off the board
        """
        player = self.current_player
        opponent = self.opponent_of(player)

        # Players get a copy so a misbehaving policy cannot touch the live board
        column = player.choose_column(self.game, self.board.copy(), opponent.piece)
        if not 0 <= column < self.game.column_count:
            raise InvalidColumnError(column, self.game.column_count)

        row = self.game.place_piece(self.board, column, player.piece)
        if row is None:
            logger.warning("%s chose full column %d, asking again", player.name, column)
            return None

        assert self.game.is_gravity_consistent(self.board), "piece placed above an empty cell"

        logger.debug("%s -> column %d, row %d", player.name, column, row)
        self.move_count += 1
        self.turn = 1 - self.turn
        return row

    def play(self) -> GameResult:
        """Play until the board is won or full and return the result."""
        result = self.get_result()
        while result.status is GameStatus.IN_PROGRESS:
            row = self.play_turn()
            if row is not None and self.renderer is not None:
                self.renderer(self.board)
            result = self.get_result()

        logger.info("Game over after %d moves: %s", self.move_count, result)
        return result
