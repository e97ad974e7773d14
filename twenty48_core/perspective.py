from __future__ import annotations

from typing import List

from .grid import Coord
from .side import Side


def line_coord(side: Side, size: int, line: int, pos: int) -> Coord:
    """Maps (line, position) to board (x, y) for a tilt toward side.

    Position 0 is the far edge and position size - 1 the edge the tiles move
    toward. Lines are columns for NORTH/SOUTH and rows for EAST/WEST.
    """
    far = size - 1 - pos
    if side is Side.NORTH:
        return line, pos
    if side is Side.SOUTH:
        return line, far
    if side is Side.EAST:
        return pos, line
    if side is Side.WEST:
        return far, line
    raise ValueError(f'Unknown direction: {side!r}')


def line_coords(side: Side, size: int, line: int) -> List[Coord]:
    return [line_coord(side, size, line, pos) for pos in range(size)]
