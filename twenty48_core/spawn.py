from __future__ import annotations

import logging
import random
from typing import List, Optional

from .grid import Coord
from .state import GameState

logger = logging.getLogger(__name__)

FOUR_PROBABILITY = 0.1


def empty_coords(state: GameState) -> List[Coord]:
    return [(x, y) for y in range(state.size) for x in range(state.size) if state.tile(x, y) is None]


def spawn_random_tile(state: GameState, rng: random.Random) -> Optional[Coord]:
    """Places a 2 (or, one time in ten, a 4) on a random empty cell. Returns its coordinate, or None on a full board."""
    empties = empty_coords(state)
    if not empties:
        return None
    coord = rng.choice(empties)
    value = 4 if rng.random() < FOUR_PROBABILITY else 2
    state.add_tile(value, *coord)
    logger.debug('spawned %d at %s', value, coord)
    return coord


def new_game(size: int = 4, seed: Optional[int] = None, max_piece: Optional[int] = None) -> GameState:
    """Creates a board with two spawned tiles. The same seed always deals the same opening."""
    rng = random.Random(seed)
    state = GameState(size, max_piece=max_piece)
    spawn_random_tile(state, rng)
    spawn_random_tile(state, rng)
    return state
