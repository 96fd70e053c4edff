"""Text shown on the calculator's display, stack panel and register window."""

from __future__ import annotations

import math

from rpnvoyager.calculator import MAX_DIGITS, Calculator, DisplayMode

_SMALL = 1.0e-12
_LARGE = 1.0e12
_PANEL_WIDTH = MAX_DIGITS * 2 + 1

STACK_LABELS = ("     T:", "     Z:", "     Y:", "     X:", "Last X:")


def _fits_fixed(value: float) -> bool:
    return _SMALL < abs(value) < _LARGE or value == 0.0


def _fixed(value: float, places: int, point: bool) -> str:
    if point:
        return f"{value: #.{places}f}"
    return f"{value: .{places}f}"


def _scientific(value: float, places: int) -> str:
    return f"{value: .{places}E}"


def _engineering(value: float, places: int) -> str:
    mantissa = value
    power = 0
    if math.isfinite(value):
        if abs(mantissa) > 1.0:
            while mantissa > 1.0e3:
                mantissa /= 1.0e3
                power += 1
        else:
            while abs(mantissa) < 1.0 and mantissa != 0.0:
                mantissa *= 1.0e3
                power -= 1
    return f"{mantissa: .{places}f}E{power * 3:03d}"


def format_lcd(calc: Calculator) -> str:
    """Return the number shown on the LCD for the X register.

    While a number is being keyed in it is shown with the digits entered so
    far; the caller clears ``number_hit`` once the text has been shown.
    """
    x = calc.x
    if calc.number_hit or calc.exponent_entry:
        return _fixed(x, calc.decimal_digits, calc.decimal)
    places = calc.display_digits
    if calc.display_mode is DisplayMode.SCI:
        return _scientific(x, places)
    if calc.display_mode is DisplayMode.ENG:
        return _engineering(x, places)
    if _fits_fixed(x):
        return _fixed(x, places, calc.decimal)
    return _scientific(x, places)


def format_exponent(calc: Calculator) -> str:
    """Return the exponent being keyed in after EEX, or an empty string."""
    if not calc.exponent_entry:
        return ""
    return f"E{calc.exponent:+04d}"


def format_badges(calc: Calculator) -> str:
    """Return the badge line: f prefix, STO, RCL, angle unit and display mode."""
    second = "f" if calc.second_f else " "
    store = "STO" if calc.store_hit else "   "
    recall = "RCL" if calc.recall_hit else "   "
    return (
        f"  {second} {store} {recall} "
        f"{calc.angle_mode.label}   {calc.display_mode.label}"
    )


def _panel_number(value: float, exponent_places: int) -> str:
    if abs(value) > _LARGE or abs(value) < _SMALL:
        return f"{value:.{exponent_places}E}"
    return f"{value:0{_PANEL_WIDTH}.{MAX_DIGITS}f}"


def format_stack(calc: Calculator) -> list[str]:
    """Return the stack panel lines, T down to X, then last X."""
    values = (*reversed(calc.stack), calc.last_x)
    return [
        label + _panel_number(value, MAX_DIGITS - 1)
        for label, value in zip(STACK_LABELS, values)
    ]


def format_registers(calc: Calculator) -> list[str]:
    """Return one line per numbered register."""
    return [
        f"{index}: {_panel_number(value, MAX_DIGITS)}"
        for index, value in enumerate(calc.memory)
    ]