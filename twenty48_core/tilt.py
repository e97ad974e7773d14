from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from .grid import Grid
from .perspective import line_coords
from .side import Side
from .tile import Tile

logger = logging.getLogger(__name__)

Line = List[Optional[Tile]]


def tilt_line(line: Sequence[Optional[Tile]]) -> Tuple[Line, int]:
    """
    Slides and merges one line toward its last index, the target edge.
    Returns (new_line, points) where points is the sum of the values created by merges.

    The scan runs from the target edge inward. Each tile either merges into the
    tile written just before it (equal value, and that tile has not merged yet)
    or is written at the cursor, which then steps one cell away from the edge.
    A merged tile is never a merge target again, so in a run of equal tiles only
    the two nearest the edge combine.
    """
    size = len(line)
    out: Line = [None] * size
    cursor = size - 1
    points = 0
    for tile in reversed(line):
        if tile is None:
            continue
        if cursor < size - 1:
            last = out[cursor + 1]
            if last is not None and last.can_merge_with(tile):
                out[cursor + 1] = last.merge(tile)
                points += out[cursor + 1].value
                continue
        out[cursor] = tile
        cursor -= 1
    return out, points


def reset_merged(grid: Grid) -> None:
    """Clears the merge flag on every tile, ahead of a new tilt."""
    for (x, y), tile in list(grid.tiles()):
        if tile.merged:
            grid.set(x, y, tile.reset())


def tilt_grid(grid: Grid, side: Side) -> int:
    """Applies tilt_line to every line of the grid for side, in place. Returns the points earned."""
    points = 0
    moved = 0
    for line in range(grid.size):
        coords = line_coords(side, grid.size, line)
        before = [grid.get(x, y) for (x, y) in coords]
        after, gained = tilt_line(before)
        if after != before:
            moved += 1
            for (x, y), tile in zip(coords, after):
                grid.set(x, y, tile)
        points += gained
    logger.debug('tilt %s: %d line(s) changed, +%d points', side, moved, points)
    return points
