"""Keyboard cursor movement and the keyboard shortcuts of the calculator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

ROWS = 4
COLUMNS = 10


class Direction(Enum):
    """A cursor move on the key grid."""

    NOMOVE = 0
    UP = 1
    DOWN = 2
    LEFT = 3
    RIGHT = 4


_STEPS = {
    Direction.NOMOVE: (0, 0),
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


def move_cursor(position: int, direction: Direction) -> int:
    """Return the key position after moving, wrapping round at the edges."""
    if not 1 <= position <= ROWS * COLUMNS:
        raise ValueError(f"No button at position {position}")
    row, column = divmod(position - 1, COLUMNS)
    row_step, column_step = _STEPS[direction]
    row = (row + row_step) % ROWS
    column = (column + column_step) % COLUMNS
    return row * COLUMNS + column + 1


@dataclass(frozen=True)
class KeyAction:
    """What a key typed on the keyboard asks the calculator to do.

    For PRESS, ``second`` forces the f prefix on or off before ``button`` is
    pressed, or leaves it alone when None.
    """

    class Kind(Enum):
        PRESS = "press"
        PRESS_AT_CURSOR = "press at cursor"
        MOVE = "move"
        QUIT = "quit"
        HELP = "help"
        TOGGLE_STACK = "toggle stack"
        SHOW_MEMORY = "show memory"

    kind: KeyAction.Kind
    button: int = 0
    second: Optional[bool] = None
    direction: Direction = Direction.NOMOVE


def _press(button: int, second: Optional[bool] = None) -> KeyAction:
    return KeyAction(KeyAction.Kind.PRESS, button=button, second=second)


def _move(direction: Direction) -> KeyAction:
    return KeyAction(KeyAction.Kind.MOVE, direction=direction)


_DIGIT_BUTTONS = {
    "0": 37, "1": 27, "2": 28, "3": 29, "4": 17,
    "5": 18, "6": 19, "7": 7, "8": 8, "9": 9,
}

_KEYS: dict[str, KeyAction] = {
    "\r": _press(26),
    "\n": _press(26),
    "\x1b": KeyAction(KeyAction.Kind.QUIT),
    " ": KeyAction(KeyAction.Kind.PRESS_AT_CURSOR),
    "*": _press(20),
    "+": _press(40),
    "-": _press(30),
    ".": _press(38),
    "/": _press(10),
    **{key: _press(button) for key, button in _DIGIT_BUTTONS.items()},
    "e": _press(16, False),
    "f": _press(32),
    "h": KeyAction(KeyAction.Kind.HELP),
    "k": KeyAction(KeyAction.Kind.TOGGLE_STACK),
    "l": _press(26, True),
    "m": KeyAction(KeyAction.Kind.SHOW_MEMORY),
    "p": _press(6, True),
    "r": _press(35, False),
    "s": _press(34, False),
    "t": _press(23, False),
    "KEY_UP": _move(Direction.UP),
    "KEY_DOWN": _move(Direction.DOWN),
    "KEY_LEFT": _move(Direction.LEFT),
    "KEY_RIGHT": _move(Direction.RIGHT),
}


def action_for_key(key: str) -> Optional[KeyAction]:
    """Return the action for a typed character or arrow-key name, or None."""
    return _KEYS.get(key)