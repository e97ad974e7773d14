from __future__ import annotations

# Facade module that re-exports the rule engine's public surface.
# Single-responsibility modules live under twenty48_core/*.

from twenty48_core.errors import (
    InvalidSize,
    InvalidTileValue,
    OccupiedCell,
    OutOfBounds,
    Twenty48Error,
)
from twenty48_core.tile import Tile, is_tile_value
from twenty48_core.grid import Coord, Grid
from twenty48_core.side import Side, parse_side
from twenty48_core.perspective import line_coord, line_coords
from twenty48_core.tilt import tilt_line, tilt_grid, reset_merged
from twenty48_core.moves import neighbors, adjacent_match_exists, legal_sides
from twenty48_core.state import GameState
from twenty48_core.spawn import new_game, spawn_random_tile
from twenty48_core.config import DEFAULT_MAX_PIECE

MAX_PIECE = DEFAULT_MAX_PIECE

__all__ = [
    'Coord',
    'GameState',
    'Grid',
    'InvalidSize',
    'InvalidTileValue',
    'MAX_PIECE',
    'OccupiedCell',
    'OutOfBounds',
    'Side',
    'Tile',
    'Twenty48Error',
    'adjacent_match_exists',
    'is_tile_value',
    'legal_sides',
    'line_coord',
    'line_coords',
    'neighbors',
    'new_game',
    'parse_side',
    'reset_merged',
    'spawn_random_tile',
    'tilt_grid',
    'tilt_line',
]

if __name__ == '__main__':
    from twenty48_core.cli import main

    raise SystemExit(main())
