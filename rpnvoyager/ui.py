"""Text-mode front end: the key pad, the display, help and register windows."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Optional, Protocol, Union

from rpnvoyager.buttons import BUTTON_COUNT, label_for, press
from rpnvoyager.calculator import Calculator, CalculatorError
from rpnvoyager.datalog import LOGFILE, VERSION, DataLog
from rpnvoyager.display import (
    format_badges,
    format_exponent,
    format_lcd,
    format_registers,
    format_stack,
)
from rpnvoyager.mouse import MouseHit, mouse_position
from rpnvoyager.navigation import COLUMNS, KeyAction, action_for_key, move_cursor

SCREEN_ROWS = 25
SCREEN_COLUMNS = 80
OFFSET_ROW = 8
OFFSET_COL = 7
PITCH_ROW = 4
PITCH_COL = 7
START_POSITION = 26

_ENTER_POSITION = 26
_ENTER_LOWER_HALF = 36
_F_POSITION = 32
_CURSOR = "◄"
_TITLE = " R P N - V O Y A G E R "
_CLEAR_LABEL = "┌──────CLEAR──────┐"
_CONTINUE = " - press any key to continue"

Key = Union[str, MouseHit]


class Screen(Protocol):
    """Where frames are drawn and keys come from."""

    def draw(self, lines: list[str]) -> None: ...

    def get_key(self) -> Key: ...


def help_text(version: str) -> list[str]:
    """Return the lines of the help window."""
    return [
        f"   RPNV {version} is an RPN calc inspired by HP Voyager calc",
        "",
        "           -> See README and LICENSE documents <-",
        "",
        "                         INSTRUCTIONS",
        "",
        "      Use arrow keys and SPACE bar to select the button",
        "            or use the mouse and the left button",
        "",
        "         Some shortcuts from keyboard are available:",
        "     All numbers + - / * . ENTER key can be used",
        "     T --> roTaTe stack R↓    K --> toggle show stack",
        "     L --> recall last X      M --> show registers",
        "     S --> STOre in register  R --> ReCaLl from register",
        "     P --> π                  F --> second function",
        "     E --> EEX add 10^ exp.",
        "",
        "      A data.log file is created with all calc buttons",
        "      pressed, their meaning, stack plus errors if any",
        "",
        "         Not all functions have been implemented yet",
    ]


def button_origin(row: int, col: int) -> tuple[int, int]:
    """Return the screen (row, column), 1-based, of a key's top-left corner."""
    return OFFSET_ROW + (row - 1) * PITCH_ROW, OFFSET_COL + (col - 1) * PITCH_COL


def _grid_of(position: int) -> tuple[int, int]:
    row, col = divmod(position - 1, COLUMNS)
    return row + 1, col + 1


class _Canvas:
    """A 25 by 80 character screen addressed with 1-based coordinates."""

    def __init__(self) -> None:
        self._rows = [[" "] * SCREEN_COLUMNS for _ in range(SCREEN_ROWS)]

    def put(self, row: int, col: int, text: str) -> None:
        if not 1 <= row <= SCREEN_ROWS:
            return
        cells = self._rows[row - 1]
        for offset, char in enumerate(text):
            index = col - 1 + offset
            if 0 <= index < SCREEN_COLUMNS:
                cells[index] = char

    def fill(self, top: int, left: int, bottom: int, right: int) -> None:
        for row in range(top, bottom + 1):
            self.put(row, left, " " * (right - left + 1))

    def lines(self) -> list[str]:
        return ["".join(cells) for cells in self._rows]


class CalculatorApp:
    """The interactive calculator: keys in, frames out, presses logged."""

    def __init__(self, screen: Screen, log: Optional[DataLog] = None) -> None:
        self.screen = screen
        self.log = log
        self.calc = Calculator()
        self.cursor = START_POSITION

    # drawing

    def _draw_border(self, canvas: _Canvas) -> None:
        canvas.put(7, 3, "┌" + "─" * 74 + "┐")
        canvas.put(24, 3, "╘" + "═" * 74 + "╛")
        for row in range(8, 24):
            canvas.put(row, 3, "│")
            canvas.put(row, 78, "│")
        canvas.put(24, 8, _TITLE)

    def _draw_keys(self, canvas: _Canvas) -> None:
        for position in range(1, BUTTON_COUNT + 1):
            if position == _ENTER_LOWER_HALF:
                continue
            top, left = button_origin(*_grid_of(position))
            if position == _ENTER_POSITION:
                canvas.put(top, left, "LASTx")
                for offset, letter in enumerate("ENTER", start=1):
                    canvas.put(top + offset, left, "  " + letter)
            elif position == _F_POSITION:
                canvas.put(top + 1, left, "  f")
            else:
                for row, second in ((top, True), (top + 1, False)):
                    label = label_for(position, second)
                    canvas.put(row, left, label if len(label) >= 5 else " " + label)

    def _draw_cursor(self, canvas: _Canvas) -> None:
        top, left = button_origin(*_grid_of(self.cursor))
        canvas.put(top + 1, left + 5, _CURSOR)
        canvas.put(top + 2, left + 5, _CURSOR)

    def _canvas(self) -> _Canvas:
        canvas = _Canvas()
        self._draw_border(canvas)
        canvas.put(15, 21, _CLEAR_LABEL)
        self._draw_keys(canvas)
        self._draw_cursor(canvas)
        canvas.put(4, 18, format_lcd(self.calc))
        exponent = format_exponent(self.calc)
        if exponent:
            canvas.put(4, 35, exponent)
        canvas.put(5, 15, format_badges(self.calc))
        if self.calc.show_stack:
            for row, line in enumerate(format_stack(self.calc), start=2):
                canvas.put(row, 45, line)
        return canvas

    def _render(self) -> None:
        self.screen.draw(self._canvas().lines())
        self.calc.number_hit = False

    def _notify(self, message: str) -> None:
        canvas = self._canvas()
        col = max(1, 40 - len(message) // 2 - 14)
        canvas.put(25, col, message + _CONTINUE)
        self.screen.draw(canvas.lines())
        self.screen.get_key()

    def _show_help(self) -> None:
        canvas = _Canvas()
        for row, line in enumerate(help_text(VERSION), start=2):
            canvas.put(row, 11, line)
        self.screen.draw(canvas.lines())
        self.screen.get_key()

    def _show_memory(self) -> None:
        canvas = self._canvas()
        canvas.fill(8, 21, 23, 60)
        canvas.put(9, 32, "Registers content:")
        for row, line in enumerate(format_registers(self.calc), start=11):
            canvas.put(row, 27, line)
        canvas.put(22, 28, "Press any key to continue")
        self.screen.draw(canvas.lines())
        self.screen.get_key()

    # input

    def hit(self, position: int) -> None:
        """Press the key at ``position``, report any refusal and log the press."""
        second = self.calc.second_f
        wants_help = False
        try:
            wants_help = press(self.calc, position)
        except CalculatorError as err:
            self._notify(str(err))
        if self.log is not None and 1 <= position <= BUTTON_COUNT:
            self.log.record(position, label_for(position, second), self.calc)
        if wants_help:
            self._show_help()

    def handle_key(self, key: Key) -> bool:
        """Act on a typed key or a mouse click; return False to quit."""
        if isinstance(key, MouseHit):
            if key.second is not None:
                self.calc.second_f = key.second
            self.hit(key.position)
            self._render()
            return True
        action = action_for_key(key)
        if action is None:
            return True
        kind = action.kind
        if kind is KeyAction.Kind.QUIT:
            return False
        if kind is KeyAction.Kind.PRESS:
            if action.second is not None:
                self.calc.second_f = action.second
            self.hit(action.button)
        elif kind is KeyAction.Kind.PRESS_AT_CURSOR:
            self.hit(self.cursor)
        elif kind is KeyAction.Kind.MOVE:
            self.cursor = move_cursor(self.cursor, action.direction)
        elif kind is KeyAction.Kind.HELP:
            self._show_help()
        elif kind is KeyAction.Kind.TOGGLE_STACK:
            self.calc.show_stack = not self.calc.show_stack
        elif kind is KeyAction.Kind.SHOW_MEMORY:
            self._show_memory()
        self._render()
        return True

    def run(self) -> None:
        """Draw the calculator and handle keys until ESC is pressed."""
        self._render()
        while self.handle_key(self.screen.get_key()):
            pass


class _CursesScreen:
    """A Screen drawn with curses, with arrow keys and left clicks."""

    def __init__(self, window: Any, curses_module: Any) -> None:
        self._window = window
        self._curses = curses_module
        try:
            curses_module.curs_set(0)
        except curses_module.error:
            pass
        window.keypad(True)
        self._clicks = curses_module.BUTTON1_CLICKED | curses_module.BUTTON1_PRESSED
        curses_module.mousemask(self._clicks)
        self._special = {
            curses_module.KEY_UP: "KEY_UP",
            curses_module.KEY_DOWN: "KEY_DOWN",
            curses_module.KEY_LEFT: "KEY_LEFT",
            curses_module.KEY_RIGHT: "KEY_RIGHT",
            curses_module.KEY_ENTER: "\r",
        }

    def draw(self, lines: list[str]) -> None:
        self._window.erase()
        height, width = self._window.getmaxyx()
        for index, line in enumerate(lines[:height]):
            try:
                self._window.addstr(index, 0, line[: max(0, width - 1)])
            except self._curses.error:
                pass
        self._window.refresh()

    def get_key(self) -> Key:
        while True:
            key = self._window.get_wch()
            if isinstance(key, str):
                return key
            if key == self._curses.KEY_MOUSE:
                try:
                    _, x, y, _, state = self._curses.getmouse()
                except self._curses.error:
                    continue
                if state & self._clicks:
                    return mouse_position(x + 1, y + 1)
                continue
            name = self._special.get(key)
            if name is not None:
                return name


def main(argv: Optional[list[str]] = None) -> int:
    """Start the interactive calculator in the terminal."""
    parser = argparse.ArgumentParser(
        prog="rpnvoyager", description="RPN scientific calculator for the terminal."
    )
    parser.add_argument("--log", default=LOGFILE, help="file recording every key pressed")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    args = parser.parse_args(argv)
    try:
        import curses
    except ImportError:
        print("rpnvoyager: this terminal has no curses support", file=sys.stderr)
        return 1
    import locale

    locale.setlocale(locale.LC_ALL, "")
    with DataLog(args.log) as log:
        curses.wrapper(lambda window: CalculatorApp(_CursesScreen(window, curses), log).run())
    return 0


if __name__ == "__main__":
    sys.exit(main())