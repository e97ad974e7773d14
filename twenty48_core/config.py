from __future__ import annotations

import os

from .tile import is_tile_value

DEFAULT_MAX_PIECE = 2048


def _truthy(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def check_max_piece(value: int, source: str = 'max_piece') -> int:
    """Rejects winning values that no tile could hold."""
    if not is_tile_value(value):
        raise ValueError(f'{source} must be a power of two >= 2, got {value!r}')
    return value


def default_max_piece() -> int:
    """Winning tile value, overridable through TWENTY48_MAX_PIECE."""
    raw = os.getenv('TWENTY48_MAX_PIECE')
    if not raw:
        return DEFAULT_MAX_PIECE
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'TWENTY48_MAX_PIECE must be an integer, got {raw!r}') from None
    return check_max_piece(value, 'TWENTY48_MAX_PIECE')


def debug_enabled() -> bool:
    return _truthy(os.getenv('TWENTY48_DEBUG', '0'))
