"""
Rules of the 2048 sliding-tile puzzle.

Modules:
- errors.py: OutOfBounds, OccupiedCell, InvalidSize, InvalidTileValue
- tile.py: Tile
- grid.py: Grid, Coord
- side.py: Side, parse_side
- perspective.py: (side, line, position) -> (x, y) mapping
- tilt.py: tilt_line, tilt_grid
- moves.py: move availability helpers
- state.py: GameState
- spawn.py: seeded random tile placement
- cli.py: move replay for debugging
"""
