"""Mapping of mouse clicks on the text screen to calculator keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# (top, bottom) screen rows of each key row; the top row holds the f legend
_ROWS = ((8, 10), (12, 14), (16, 18), (20, 22))
_FIRST_COLUMN = 7
_COLUMN_PITCH = 7
_COLUMN_WIDTH = 5
_COLUMNS = 10

_ENTER_POSITION = 26
_ENTER_COLUMN = 6
_ENTER_GAP_ROW = 19
_NO_SECOND_POSITION = 36
_F_POSITION = 32


@dataclass(frozen=True)
class MouseHit:
    """The key under a click, and what it does to the f prefix.

    ``position`` is 0 when no key was hit. ``second`` is True when the click
    selects the f function, False when it clears it, None when it leaves the
    prefix alone.
    """

    position: int
    second: Optional[bool] = None


def _row(y: int) -> Optional[int]:
    for index, (top, bottom) in enumerate(_ROWS):
        if top <= y <= bottom:
            return index
    return None


def _column(x: int) -> Optional[int]:
    for number in range(1, _COLUMNS + 1):
        left = _FIRST_COLUMN + (number - 1) * _COLUMN_PITCH
        if left <= x < left + _COLUMN_WIDTH:
            return number
    return None


def mouse_position(x: int, y: int) -> MouseHit:
    """Translate a click at text column ``x``, row ``y`` (1-based) to a key."""
    row, column = _row(y), _column(x)
    second = True if any(y == top for top, _ in _ROWS) else None
    position = row * 10 + column if row is not None and column is not None else 0
    if column == _ENTER_COLUMN and y == _ENTER_GAP_ROW:
        position = _ENTER_POSITION
    if position == _NO_SECOND_POSITION:
        second = False
    if position == _F_POSITION and y == _ROWS[3][0]:
        position = 0
    return MouseHit(position, second)