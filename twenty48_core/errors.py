from __future__ import annotations


class Twenty48Error(Exception):
    """Base class for rule-engine errors."""


class OutOfBounds(Twenty48Error, IndexError):
    """A coordinate lies outside the board."""

    def __init__(self, x: int, y: int, size: int) -> None:
        super().__init__(f'({x}, {y}) is outside a {size}x{size} board')
        self.x = x
        self.y = y
        self.size = size


class OccupiedCell(Twenty48Error, ValueError):
    """A tile was added onto a cell that already holds one."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f'cell ({x}, {y}) is already occupied')
        self.x = x
        self.y = y


class InvalidSize(Twenty48Error, ValueError):
    def __init__(self, size: int) -> None:
        super().__init__(f'board size must be at least 2, got {size}')
        self.size = size


class InvalidTileValue(Twenty48Error, ValueError):
    def __init__(self, value: int) -> None:
        super().__init__(f'tile value must be a power of two >= 2, got {value!r}')
        self.value = value
