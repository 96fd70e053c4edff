"""What each of the calculator's forty keys does, with and without the f prefix."""

from __future__ import annotations

import math
from typing import Callable, Optional

from rpnvoyager.calculator import Calculator, CalculatorError, DisplayMode
from rpnvoyager.mathfuncs import (
    AngleMode,
    deg_to_rad,
    factorial,
    fract_part,
    h_to_hms,
    hms_to_h,
    int_part,
    rad_to_deg,
)

BUTTON_COUNT = 40
HELP_BUTTON = 31

_BASE_LABELS = (
    "√x", "e^x", "10^x", "y^x", "1/x", "CHS", "7", "8", "9", "÷",
    "%", "GTO", "SIN", "COS", "TAN", "EEX", "4", "5", "6", "*",
    "R/S", "SST", "R↓", "x↔y", "CLx", "ENTER", "1", "2", "3", "-",
    "ON", "2ndF", "P/R", "STO", "RCL", "ENTER", "0", ".", "Σ+", "+",
)

_SECOND_LABELS = (
    "x²", "LN", "LOG", "→H.MS", "→H", "π", "FIX", "SCI", "ENG", "x≤y",
    "→R", "→P", "SIN-1", "COS-1", "TAN-1", "x!", "DEG", "RAD", "GRD", "x=0",
    "PSE", "BST", "PRGM", "REG", "PREFX", "Lastx", "x,r", "y,r", "L.R.", "→RAD",
    "HELP", "2ndF", "MEM", "INT", "FRC", "Lastx", "x", "s", "Σ-", "→DEG",
)

_NOT_IMPLEMENTED = "Not yet implemented"
_NEGATIVE = "Negative number!"
_OUT_OF_DOMAIN = "number outside function domain"

Handler = Callable[[Calculator], Optional[bool]]


def label_for(position: int, second: bool) -> str:
    """Return the legend of a key, or of its f function when ``second`` is set."""
    if not 1 <= position <= BUTTON_COUNT:
        raise ValueError(f"No button at position {position}")
    labels = _SECOND_LABELS if second else _BASE_LABELS
    return labels[position - 1]


# arithmetic that yields inf or nan where the floating-point hardware would


def _safe(fn: Callable[..., float], *args: float) -> float:
    try:
        return fn(*args)
    except OverflowError:
        return math.inf
    except ValueError:
        return math.nan


def _div(a: float, b: float) -> float:
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        odd = exponent.is_integer() and int(exponent) % 2 == 1
        return -math.inf if base < 0.0 and odd else math.inf
    except ValueError:
        if base == 0.0 and exponent < 0.0:
            return math.inf
        return math.nan


def _log(v: float) -> float:
    return -math.inf if v == 0.0 else _safe(math.log, v)


def _log10(v: float) -> float:
    return -math.inf if v == 0.0 else _safe(math.log10, v)


# shared pieces of key behaviour


def _clear_pending(calc: Calculator) -> None:
    calc.store_hit = False
    calc.recall_hit = False


def _flush_exponent(calc: Calculator) -> None:
    if calc.exponent_entry:
        calc.apply_exponent()


def _finish(calc: Calculator) -> None:
    calc.enter_hit = False
    calc.func_hit = True
    calc.second_f = False


def _unary(calc: Calculator, fn: Callable[[float], float]) -> None:
    calc.last_x = calc.x
    calc.x = fn(calc.x)
    _finish(calc)


def _binary(calc: Calculator, fn: Callable[[float, float], float]) -> None:
    calc.last_x = calc.x
    calc.x = fn(calc.y, calc.x)
    calc.pull_stack()
    _finish(calc)


def _unimplemented(calc: Calculator) -> None:
    calc.second_f = False
    raise CalculatorError(_NOT_IMPLEMENTED)


def _arith_key(
    fn: Callable[[float, float], float],
    second: Callable[[Calculator], None],
) -> Handler:
    def handler(calc: Calculator) -> None:
        _clear_pending(calc)
        if calc.second_f:
            second(calc)
            return
        _flush_exponent(calc)
        _binary(calc, fn)

    return handler


def _convert_key(fn: Callable[[float], float]) -> Callable[[Calculator], None]:
    def action(calc: Calculator) -> None:
        _unary(calc, fn)

    return action


# digit keys


def _enter_digit(calc: Calculator, digit: int) -> None:
    if calc.store_hit:
        calc.store_memory(digit)
    elif calc.recall_hit:
        calc.recall_memory(digit)
    elif calc.exponent_entry:
        calc.add_exponent_digit(digit)
    elif calc.display_mode_hit:
        calc.display_digits = digit
        calc.display_mode_hit = False
    else:
        try:
            calc.add_digit(float(digit))
        finally:
            calc.number_hit = True


def _digit_key(digit: int, second: Callable[[Calculator], None]) -> Handler:
    def handler(calc: Calculator) -> None:
        if calc.second_f:
            second(calc)
        else:
            _enter_digit(calc, digit)

    return handler


def _display_mode(mode: DisplayMode) -> Callable[[Calculator], None]:
    def action(calc: Calculator) -> None:
        calc.second_f = False
        calc.display_mode = mode
        calc.display_mode_hit = True
        calc.func_hit = True

    return action


def _angle_mode(mode: AngleMode) -> Callable[[Calculator], None]:
    def action(calc: Calculator) -> None:
        calc.angle_mode = mode
        calc.second_f = False

    return action


def _statistic(compute: Callable[[Calculator], None]) -> Callable[[Calculator], None]:
    def action(calc: Calculator) -> None:
        previous_x = calc.x
        compute(calc)
        calc.last_x = previous_x
        calc.enter_hit = True
        calc.func_hit = False
        calc.second_f = False

    return action


# the remaining keys, one function each


def _sqrt_square(calc: Calculator) -> None:
    _clear_pending(calc)
    _flush_exponent(calc)
    if calc.second_f:
        _unary(calc, lambda v: v * v)
    elif calc.x >= 0.0:
        _unary(calc, math.sqrt)
    else:
        raise CalculatorError(_NEGATIVE)


def _log_key(
    forward: Callable[[float], float], inverse: Callable[[float], float]
) -> Handler:
    def handler(calc: Calculator) -> None:
        _clear_pending(calc)
        _flush_exponent(calc)
        if not calc.second_f:
            _unary(calc, forward)
        elif calc.x >= 0.0:
            _unary(calc, inverse)
        else:
            calc.second_f = False
            raise CalculatorError(_NEGATIVE)

    return handler


def _power_hms(calc: Calculator) -> None:
    _clear_pending(calc)
    if calc.second_f:
        _unary(calc, h_to_hms)
    else:
        _flush_exponent(calc)
        _binary(calc, _power)


def _reciprocal_h(calc: Calculator) -> None:
    _clear_pending(calc)
    if calc.second_f:
        _unary(calc, hms_to_h)
    else:
        _flush_exponent(calc)
        _unary(calc, lambda v: _div(1.0, v))


def _chs_pi(calc: Calculator) -> None:
    _clear_pending(calc)
    if calc.second_f:
        calc.push_stack()
        calc.x = math.pi
        _finish(calc)
        return
    if calc.exponent_entry:
        calc.exponent *= -1
    else:
        calc.x = calc.x * -1.0
    if not calc.func_hit and not calc.enter_hit:
        calc.number_hit = True


def _percent_rect(calc: Calculator) -> None:
    _clear_pending(calc)
    calc.last_x = calc.x
    if calc.second_f:
        calc.convert_angle(1)
        calc.polar_to_rect()
    else:
        calc.x = calc.y / 100.0 * calc.x
        calc.pull_stack()
    _finish(calc)


def _goto_polar(calc: Calculator) -> None:
    _clear_pending(calc)
    if not calc.second_f:
        raise CalculatorError(_NOT_IMPLEMENTED)
    calc.last_x = calc.x
    calc.rect_to_polar()
    calc.back_convert_angle(1)
    _finish(calc)


def _trig_key(
    forward: Callable[[float], float], inverse: Callable[[float], float]
) -> Handler:
    def handler(calc: Calculator) -> None:
        _clear_pending(calc)
        _flush_exponent(calc)
        if not calc.second_f:
            calc.last_x = calc.x
            calc.convert_angle(0)
            calc.x = _safe(forward, calc.x)
            _finish(calc)
        elif -1.0 <= calc.x <= 1.0:
            calc.last_x = calc.x
            calc.x = inverse(calc.x)
            calc.back_convert_angle(0)
            _finish(calc)
        else:
            calc.second_f = False
            raise CalculatorError(_OUT_OF_DOMAIN)

    return handler


def _tan_atan(calc: Calculator) -> None:
    _clear_pending(calc)
    _flush_exponent(calc)
    calc.last_x = calc.x
    if calc.second_f:
        calc.x = math.atan(calc.x)
        calc.back_convert_angle(0)
    else:
        calc.convert_angle(0)
        calc.x = _safe(math.tan, calc.x)
    _finish(calc)


def _eex_factorial(calc: Calculator) -> None:
    _clear_pending(calc)
    if not calc.second_f:
        if not calc.exponent_entry:
            if calc.func_hit or calc.x == 0.0:
                calc.last_x = calc.x
                calc.x = 1.0
            calc.exponent_entry = True
        return
    _flush_exponent(calc)
    if calc.x < 0.0:
        calc.second_f = False
        raise CalculatorError(_NEGATIVE)
    calc.x = factorial(calc.x) if calc.x > 0.0 else 1.0
    _finish(calc)


def _not_implemented(calc: Calculator) -> None:
    raise CalculatorError(_NOT_IMPLEMENTED)


def _rotate(calc: Calculator) -> None:
    _clear_pending(calc)
    if calc.second_f:
        _unimplemented(calc)
    _flush_exponent(calc)
    calc.rotate_stack()


def _swap_clear(calc: Calculator) -> None:
    _clear_pending(calc)
    if calc.second_f:
        calc.clear_memory()
        calc.second_f = False
    else:
        _flush_exponent(calc)
        calc.swap_xy()


def _clear_x(calc: Calculator) -> None:
    _clear_pending(calc)
    if calc.second_f:
        _unimplemented(calc)
    calc.x = 0.0
    calc.decimal = False
    calc.enter_hit = False
    calc.func_hit = True


def _enter_lastx(calc: Calculator) -> None:
    _clear_pending(calc)
    if calc.second_f:
        calc.push_stack()
        calc.x = calc.last_x
        _finish(calc)
        return
    _flush_exponent(calc)
    calc.func_hit = False
    calc.push_stack()
    calc.enter_hit = True


def _on_help(calc: Calculator) -> bool:
    if not calc.second_f:
        return False
    calc.second_f = False
    return True


def _toggle_second(calc: Calculator) -> None:
    _clear_pending(calc)
    calc.second_f = not calc.second_f


def _store_int(calc: Calculator) -> None:
    if calc.second_f:
        _unary(calc, int_part)
        return
    _flush_exponent(calc)
    if calc.store_hit:
        calc.store_hit = False
    else:
        calc.store_hit = True
        calc.recall_hit = False


def _recall_frac(calc: Calculator) -> None:
    if calc.second_f:
        _unary(calc, fract_part)
        return
    _flush_exponent(calc)
    if calc.recall_hit:
        calc.recall_hit = False
    else:
        calc.recall_hit = True
        calc.store_hit = False


def _point_stddev(calc: Calculator) -> None:
    _clear_pending(calc)
    if calc.second_f:
        _statistic(Calculator.stddev_x_y)(calc)
        return
    calc.exponent_entry = False
    if calc.enter_hit or calc.func_hit:
        if not calc.enter_hit:
            calc.push_stack()
        calc.x = 0.0
        calc.digits = 1
        calc.decimal_digits = 0
        calc.enter_hit = False
        calc.func_hit = False
    calc.decimal = True
    calc.number_hit = True


def _sigma(calc: Calculator) -> None:
    _clear_pending(calc)
    calc.last_x = calc.x
    if calc.second_f:
        calc.sigma_minus()
    else:
        calc.sigma_plus()
    calc.enter_hit = True
    calc.func_hit = False
    calc.second_f = False


_HANDLERS: dict[int, Handler] = {
    1: _sqrt_square,
    2: _log_key(lambda v: _safe(math.exp, v), _log),
    3: _log_key(lambda v: _power(10.0, v), _log10),
    4: _power_hms,
    5: _reciprocal_h,
    6: _chs_pi,
    7: _digit_key(7, _display_mode(DisplayMode.FIX)),
    8: _digit_key(8, _display_mode(DisplayMode.SCI)),
    9: _digit_key(9, _display_mode(DisplayMode.ENG)),
    10: _arith_key(_div, _unimplemented),
    11: _percent_rect,
    12: _goto_polar,
    13: _trig_key(math.sin, math.asin),
    14: _trig_key(math.cos, math.acos),
    15: _tan_atan,
    16: _eex_factorial,
    17: _digit_key(4, _angle_mode(AngleMode.DEG)),
    18: _digit_key(5, _angle_mode(AngleMode.RAD)),
    19: _digit_key(6, _angle_mode(AngleMode.GRD)),
    20: _arith_key(lambda y, x: y * x, _unimplemented),
    21: _not_implemented,
    22: _not_implemented,
    23: _rotate,
    24: _swap_clear,
    25: _clear_x,
    26: _enter_lastx,
    27: _digit_key(1, _unimplemented),
    28: _digit_key(2, _unimplemented),
    29: _digit_key(3, _unimplemented),
    30: _arith_key(lambda y, x: y - x, _convert_key(deg_to_rad)),
    31: _on_help,
    32: _toggle_second,
    33: _not_implemented,
    34: _store_int,
    35: _recall_frac,
    36: _enter_lastx,
    37: _digit_key(0, _statistic(Calculator.mean_x_y)),
    38: _point_stddev,
    39: _sigma,
    40: _arith_key(lambda y, x: y + x, _convert_key(rad_to_deg)),
}


def press(calc: Calculator, position: int) -> bool:
    """Press the key at ``position`` (1-40) on ``calc``.

    Positions without a key do nothing. Returns True when the key asks for
    the help screen. Raises CalculatorError with the message to show when
    the key is refused.
    """
    handler = _HANDLERS.get(position)
    if handler is None:
        return False
    return bool(handler(calc))