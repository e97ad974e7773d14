from __future__ import annotations

import argparse
import logging
import random
from typing import List, Optional

from .config import check_max_piece, debug_enabled, default_max_piece
from .side import Side, parse_side
from .spawn import new_game, spawn_random_tile


def _parse_moves(text: str) -> List[Side]:
    # One letter per move: U/D/L/R or N/E/S/W, separators ignored.
    return [parse_side(ch) for ch in text if ch not in ' ,']


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Replay a sequence of tilts and print the board after each one')
    parser.add_argument('--size', type=int, default=4, help='Board size (NxN), at least 2')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for tile spawns')
    parser.add_argument('--moves', default='', help='Tilts to apply, e.g. "UULRD" or "N,E,S,W"')
    parser.add_argument('--max-piece', type=int, default=None, help='Winning tile value (default: TWENTY48_MAX_PIECE or 2048)')
    parser.add_argument('--no-spawn', action='store_true', help='Do not spawn a tile after a tilt that changed the board')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose or debug_enabled() else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        moves = _parse_moves(args.moves)
    except ValueError as exc:
        parser.error(str(exc))
    if args.size < 2:
        parser.error(f'--size must be at least 2, got {args.size}')
    try:
        max_piece = default_max_piece() if args.max_piece is None else check_max_piece(args.max_piece, '--max-piece')
    except ValueError as exc:
        parser.error(str(exc))

    rng = random.Random(args.seed)
    state = new_game(args.size, seed=rng.randrange(2 ** 32), max_piece=max_piece)
    print('Initial board:')
    print(state)
    for side in moves:
        if state.game_over():
            break
        before = state.values()
        points = state.tilt(side)
        changed = state.values() != before
        if changed and not args.no_spawn:
            spawn_random_tile(state, rng)
        print(f'Tilt {side}: +{points}' + ('' if changed else ' (no change)'))
        print(state)
    print('Game over.' if state.game_over() else 'Game in progress.')
    print(f'Final score: {state.score}')
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
