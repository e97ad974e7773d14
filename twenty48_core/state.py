from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence, Tuple, Union

from .config import check_max_piece, default_max_piece
from .errors import OccupiedCell
from .grid import Coord, Grid
from .moves import adjacent_match_exists, empty_cell_exists
from .side import Side, parse_side
from .tile import Tile
from .tilt import reset_merged, tilt_grid

logger = logging.getLogger(__name__)


class GameState:
    """
    The state of one game: a board, the score, and the winning tile value.

    Coordinates are (x, y) with (0, 0) at the lower-left corner. The grid is
    owned by this object; values() and tile() hand out immutable data only.
    """

    def __init__(self, size: int, max_piece: Optional[int] = None) -> None:
        self._grid = Grid(size)
        self._score = 0
        self.max_piece = default_max_piece() if max_piece is None else check_max_piece(max_piece)

    @classmethod
    def from_layout(
        cls,
        layout: Mapping[Coord, int],
        score: int = 0,
        size: Optional[int] = None,
        max_piece: Optional[int] = None,
    ) -> 'GameState':
        """Builds a state from an explicit (x, y) -> value mapping. Size defaults to the smallest board holding every coordinate."""
        if size is None:
            size = max([max(x, y) + 1 for (x, y) in layout] + [2])
        state = cls(size, max_piece=max_piece)
        for (x, y), value in layout.items():
            if value:
                state.add_tile(value, x, y)
        state._set_initial_score(score)
        return state

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        score: int = 0,
        max_piece: Optional[int] = None,
    ) -> 'GameState':
        """Builds a state from rows listed top to bottom as they appear on screen, 0 for empty."""
        size = len(rows)
        layout = {}
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f'row {r} has {len(row)} cells, expected {size}')
            for x, value in enumerate(row):
                layout[(x, size - 1 - r)] = value
        return cls.from_layout(layout, score=score, size=size, max_piece=max_piece)

    def _set_initial_score(self, score: int) -> None:
        if score < 0:
            raise ValueError(f'score must be non-negative, got {score}')
        self._score = score

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def score(self) -> int:
        return self._score

    def tile(self, x: int, y: int) -> Optional[Tile]:
        return self._grid.get(x, y)

    def values(self) -> Tuple[Tuple[int, ...], ...]:
        return self._grid.values()

    def clear(self) -> None:
        """Empties the board and resets the score."""
        self._grid.clear()
        self._score = 0

    def add_tile(self, tile: Union[Tile, int], x: int, y: int) -> None:
        if not isinstance(tile, Tile):
            tile = Tile(tile)
        if self._grid.get(x, y) is not None:
            raise OccupiedCell(x, y)
        self._grid.set(x, y, tile)

    def tilt(self, side: Union[Side, str]) -> int:
        """Tilts the whole board toward side and returns the points earned. A tilt that moves nothing is legal."""
        side = parse_side(side)
        reset_merged(self._grid)
        points = tilt_grid(self._grid, side)
        self._score += points
        logger.debug('score %d after tilt %s', self._score, side)
        return points

    def empty_space_exists(self) -> bool:
        return empty_cell_exists(self._grid)

    def max_tile_exists(self) -> bool:
        return any(tile.value >= self.max_piece for _, tile in self._grid.tiles())

    def at_least_one_move_exists(self) -> bool:
        return self.empty_space_exists() or adjacent_match_exists(self._grid)

    def game_over(self) -> bool:
        return self.max_tile_exists() or not self.at_least_one_move_exists()

    def copy(self) -> 'GameState':
        other = type(self)(self.size, max_piece=self.max_piece)
        other._grid = self._grid.copy()
        other._score = self._score
        return other

    def __str__(self) -> str:
        over = 'over' if self.game_over() else 'not over'
        return f'\n[\n{self._grid.pretty()}\n] {self._score} (game is {over}) \n'

    def __repr__(self) -> str:
        return f'GameState(size={self.size}, score={self._score}, values={self.values()!r})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self._score == other._score and self.values() == other.values()

    # Mutable, so not hashable.
    __hash__ = None  # type: ignore[assignment]
