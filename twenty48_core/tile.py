from __future__ import annotations

from dataclasses import dataclass, replace

from .errors import InvalidTileValue


def is_tile_value(value: int) -> bool:
    """True iff value is a power of two no smaller than 2."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 2 and value & (value - 1) == 0


@dataclass(frozen=True)
class Tile:
    """A numbered tile. The merged flag marks a tile produced by a merge during the current tilt."""
    value: int
    merged: bool = False

    def __post_init__(self) -> None:
        if not is_tile_value(self.value):
            raise InvalidTileValue(self.value)

    def merge(self, other: 'Tile') -> 'Tile':
        """Combines two equal tiles into a new tile of double value, flagged as merged."""
        if other.value != self.value:
            raise ValueError(f'cannot merge {self.value} with {other.value}')
        return Tile(self.value * 2, merged=True)

    def can_merge_with(self, other: 'Tile') -> bool:
        return not self.merged and not other.merged and self.value == other.value

    def reset(self) -> 'Tile':
        return self if not self.merged else replace(self, merged=False)
