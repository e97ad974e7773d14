from __future__ import annotations

from enum import Enum
from typing import Dict, Union


class Side(Enum):
    """The four tilt directions, named after the board edge the tiles move toward."""
    NORTH = 'north'
    EAST = 'east'
    SOUTH = 'south'
    WEST = 'west'

    def __str__(self) -> str:
        return self.name


_ALIASES: Dict[str, Side] = {
    'n': Side.NORTH, 'north': Side.NORTH, 'u': Side.NORTH, 'up': Side.NORTH,
    'e': Side.EAST, 'east': Side.EAST, 'r': Side.EAST, 'right': Side.EAST,
    's': Side.SOUTH, 'south': Side.SOUTH, 'd': Side.SOUTH, 'down': Side.SOUTH,
    'w': Side.WEST, 'west': Side.WEST, 'l': Side.WEST, 'left': Side.WEST,
}


def parse_side(side: Union[Side, str]) -> Side:
    """Accepts a Side or a direction name such as 'up', 'N', 'left'."""
    if isinstance(side, Side):
        return side
    try:
        return _ALIASES[str(side).strip().lower()]
    except KeyError:
        raise ValueError(f'Unknown direction: {side!r}') from None
