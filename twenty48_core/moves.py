from __future__ import annotations

from typing import TYPE_CHECKING, List

from .grid import Coord, Grid
from .side import Side

if TYPE_CHECKING:
    from .state import GameState


def neighbors(size: int, coord: Coord) -> List[Coord]:
    """Gets the orthogonal neighbors of a coordinate that lie on the board. No wrap-around."""
    x, y = coord
    candidates = [(x, y + 1), (x + 1, y), (x, y - 1), (x - 1, y)]
    return [(nx, ny) for (nx, ny) in candidates if 0 <= nx < size and 0 <= ny < size]


def empty_cell_exists(grid: Grid) -> bool:
    return any(grid.get(x, y) is None for (x, y) in grid.coords())


def adjacent_match_exists(grid: Grid) -> bool:
    """True iff two orthogonally adjacent tiles hold the same value."""
    for (x, y), tile in grid.tiles():
        # Right and upper neighbours cover every pair once.
        for nx, ny in ((x + 1, y), (x, y + 1)):
            if nx >= grid.size or ny >= grid.size:
                continue
            other = grid.get(nx, ny)
            if other is not None and other.value == tile.value:
                return True
    return False


def legal_sides(state: 'GameState') -> List[Side]:
    """Sides whose tilt would change the board, probed on copies of state."""
    result: List[Side] = []
    for side in Side:
        probe = state.copy()
        probe.tilt(side)
        if probe.values() != state.values():
            result.append(side)
    return result
