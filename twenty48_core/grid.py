from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import InvalidSize, OutOfBounds
from .tile import Tile

Coord = Tuple[int, int]  # (x, y), (0, 0) is the lower-left corner


@dataclass
class Grid:
    """Fixed-size square storage of optional tiles. Holds no motion or merge logic."""
    size: int
    cells: List[Optional[Tile]] = field(default_factory=list, repr=False)  # row-major from y == 0

    def __post_init__(self) -> None:
        if not isinstance(self.size, int) or self.size < 2:
            raise InvalidSize(self.size)
        if not self.cells:
            self.cells = [None] * (self.size * self.size)
        elif len(self.cells) != self.size * self.size:
            raise ValueError(f'expected {self.size * self.size} cells, got {len(self.cells)}')

    def index(self, x: int, y: int) -> int:
        """Calculates the 1D index for a coordinate, rejecting anything off the board."""
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise OutOfBounds(x, y, self.size)
        return y * self.size + x

    def get(self, x: int, y: int) -> Optional[Tile]:
        return self.cells[self.index(x, y)]

    def set(self, x: int, y: int, tile: Optional[Tile]) -> None:
        self.cells[self.index(x, y)] = tile

    def clear(self) -> None:
        self.cells = [None] * (self.size * self.size)

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates, bottom row first."""
        for y in range(self.size):
            for x in range(self.size):
                yield (x, y)

    def tiles(self) -> Iterator[Tuple[Coord, Tile]]:
        for coord in self.coords():
            tile = self.get(*coord)
            if tile is not None:
                yield coord, tile

    def values(self) -> Tuple[Tuple[int, ...], ...]:
        """Snapshot of tile values as rows listed top to bottom, 0 for an empty cell."""
        return tuple(
            tuple(self._value_at(x, y) for x in range(self.size))
            for y in reversed(range(self.size))
        )

    def copy(self) -> 'Grid':
        # Tiles are immutable, so a shallow copy of the cell list is independent.
        return Grid(self.size, list(self.cells))

    def pretty(self) -> str:
        """Generates a human-readable string of the board, top row first."""
        lines: List[str] = []
        for y in reversed(range(self.size)):
            row: List[str] = []
            for x in range(self.size):
                tile = self.get(x, y)
                row.append('|    ' if tile is None else f'|{tile.value:4d}')
            lines.append(''.join(row) + '|')
        return '\n'.join(lines)

    def _value_at(self, x: int, y: int) -> int:
        tile = self.get(x, y)
        return 0 if tile is None else tile.value
