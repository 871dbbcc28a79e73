"""
Computer-vs-computer matches.

Plays a series of games between two players and tallies the outcome per
piece. By default the players take turns moving first, so neither side
keeps the first-move advantage for the whole match.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from tqdm import tqdm

from connect4_minimax.game.connect_four import ConnectFour, GameStatus, Piece
from connect4_minimax.play.controller import GameController
from connect4_minimax.play.players import HumanPlayer, Player


@dataclass
class MatchStats:
    """Outcome counts of a match."""
    wins: Dict[Piece, int] = field(default_factory=lambda: {Piece.RED: 0, Piece.YELLOW: 0})
    draws: int = 0
    total_moves: int = 0

    @property
    def total(self) -> int:
        return sum(self.wins.values()) + self.draws

    def record(self, winner: Optional[Piece], moves: int) -> None:
        if winner is None:
            self.draws += 1
        else:
            self.wins[winner] += 1
        self.total_moves += moves

    def win_rate(self, piece: Piece) -> float:
        """Score of ``piece`` with draws counted as half a win."""
        if self.total == 0:
            return 0.0
        return (self.wins[piece] + 0.5 * self.draws) / self.total

    def summary(self) -> str:
        return (
            f"Red: {self.wins[Piece.RED]}  Yellow: {self.wins[Piece.YELLOW]}  "
            f"Draws: {self.draws}  (games: {self.total})"
        )


def run_match(
    first: Player,
    second: Player,
    num_games: int,
    alternate_start: bool = True,
    progress: bool = True,
    game: Optional[ConnectFour] = None,
) -> MatchStats:
    """
    Play ``num_games`` games between two computer players.

    Args:
        first: Player that moves first in game 1
        second: The other player
        num_games: Number of games to play
        alternate_start: Swap who moves first after every game
        progress: Show a tqdm progress bar

    Returns:
        MatchStats with wins per piece and draws
    """
    if num_games < 1:
        raise ValueError(f"num_games must be >= 1, got {num_games}")
    if isinstance(first, HumanPlayer) or isinstance(second, HumanPlayer):
        raise ValueError("Matches are for computer players only")

    game = game if game is not None else ConnectFour()
    stats = MatchStats()

    iterator = tqdm(range(num_games), desc="Match") if progress else range(num_games)

    for i in iterator:
        if alternate_start and i % 2 == 1:
            controller = GameController(second, first, game=game)
        else:
            controller = GameController(first, second, game=game)

        result = controller.play()
        winner = result.winner if result.status is GameStatus.WIN else None
        stats.record(winner, controller.move_count)

    return stats
