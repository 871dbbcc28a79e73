"""
Command-line entry point: play Connect Four in the terminal.

    connect4-minimax                                  # you (Red) vs alpha-beta (Yellow)
    connect4-minimax --red alphabeta --yellow human   # the computer moves first
    connect4-minimax --red random --yellow minimax --games 20 --depth 3
"""

import argparse
import logging
import sys
from typing import List, Optional

from connect4_minimax.config import PLAY_CONFIG, SEARCH_CONFIG
from connect4_minimax.engine.minimax import SearchStrategy
from connect4_minimax.game.connect_four import ConnectFour, Piece
from connect4_minimax.play.arena import run_match
from connect4_minimax.play.controller import GameController
from connect4_minimax.play.players import Player, PlayerMode, create_player
from connect4_minimax.play.render import print_board

PLAYER_CHOICES = ('human', 'random', 'minimax', 'alphabeta')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Connect Four against a minimax engine")
    parser.add_argument('--red', choices=PLAYER_CHOICES, default=PLAY_CONFIG['red'],
                        help="Red player (moves first)")
    parser.add_argument('--yellow', choices=PLAYER_CHOICES, default=PLAY_CONFIG['yellow'],
                        help="Yellow player")
    parser.add_argument('--depth', type=int, default=SEARCH_CONFIG['max_depth'],
                        help="Search depth for computer players")
    parser.add_argument('--red-depth', type=int, default=None,
                        help="Search depth for Red (overrides --depth)")
    parser.add_argument('--yellow-depth', type=int, default=None,
                        help="Search depth for Yellow (overrides --depth)")
    parser.add_argument('--seed', type=int, default=PLAY_CONFIG['seed'],
                        help="Seed for random players")
    parser.add_argument('--games', type=int, nargs='?', const=PLAY_CONFIG['num_games'], default=None,
                        help=f"Play a match of N games between computer players "
                             f"(N defaults to {PLAY_CONFIG['num_games']})")
    parser.add_argument('--quiet', action='store_true',
                        help="Do not print the board after each move")
    parser.add_argument('--log-level', default='WARNING',
                        choices=('DEBUG', 'INFO', 'WARNING', 'ERROR'),
                        help="Logging verbosity")
    return parser


def make_player(kind: str, piece: Piece, depth: int, seed: Optional[int]) -> Player:
    """Translate a --red/--yellow choice into a player."""
    if kind == 'human':
        return create_player(piece, PlayerMode.HUMAN)
    if kind == 'random':
        return create_player(piece, PlayerMode.RANDOM, seed=seed)
    return create_player(piece, PlayerMode.SEARCH, strategy=SearchStrategy(kind), depth=depth)


def play_interactive(red: Player, yellow: Player, quiet: bool = False) -> int:
    game = ConnectFour()
    renderer = None if quiet else print_board

    print("=" * 60)
    print(f"🎮 Connect Four: {red.name} vs {yellow.name}")
    print(f"   Enter a column number (1-{game.column_count}) to drop your piece")
    print("=" * 60)

    controller = GameController(red, yellow, game=game, renderer=renderer)
    if renderer is not None:
        renderer(controller.board)

    try:
        result = controller.play()
    except (KeyboardInterrupt, EOFError):
        print("\n👋 Thanks for playing!")
        return 130

    if quiet:
        print_board(controller.board)
    print(str(result))
    return 0


def play_match(red: Player, yellow: Player, num_games: int, quiet: bool = False) -> int:
    print(f"🥊 {red.name} vs {yellow.name}: {num_games} games")
    stats = run_match(red, yellow, num_games, progress=not quiet)

    print("=" * 60)
    print(stats.summary())
    print(f"Red score:    {stats.win_rate(Piece.RED):.1%}")
    print(f"Yellow score: {stats.win_rate(Piece.YELLOW):.1%}")
    print(f"Average game length: {stats.total_moves / stats.total:.1f} moves")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    red_depth = args.red_depth if args.red_depth is not None else args.depth
    yellow_depth = args.yellow_depth if args.yellow_depth is not None else args.depth
    if min(red_depth, yellow_depth) < 1:
        parser.error("search depth must be at least 1")

    # Distinct seeds keep two random players from mirroring each other
    yellow_seed = None if args.seed is None else args.seed + 1
    red = make_player(args.red, Piece.RED, red_depth, args.seed)
    yellow = make_player(args.yellow, Piece.YELLOW, yellow_depth, yellow_seed)

    has_human = 'human' in (args.red, args.yellow)
    if args.games is not None:
        if has_human:
            parser.error("--games needs two computer players")
        if args.games < 1:
            parser.error("--games must be at least 1")
        return play_match(red, yellow, args.games, quiet=args.quiet)

    return play_interactive(red, yellow, quiet=args.quiet)


if __name__ == "__main__":
    sys.exit(main())
