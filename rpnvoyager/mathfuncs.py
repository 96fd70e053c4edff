"""Numeric helpers behind the calculator's scientific functions."""

from __future__ import annotations

import math
from enum import Enum

_SPOUGE_A = 12


class AngleMode(Enum):
    """Unit used for angles by the trigonometric functions."""

    DEG = 0
    RAD = 1
    GRD = 2

    @property
    def label(self) -> str:
        return self.name


def _spouge_coefficients(a: int) -> tuple[float, ...]:
    coefficients = [math.sqrt(2.0 * math.pi)]
    k1_factorial = 1.0  # (k-1)! * (-1)^k, with 0! == 1
    for k in range(1, a):
        coefficients.append(math.exp(a - k) * math.pow(a - k, k - 0.5) / k1_factorial)
        k1_factorial *= -k
    return tuple(coefficients)


_COEFFICIENTS = _spouge_coefficients(_SPOUGE_A)


def factorial(z: float) -> float:
    """Return z! as gamma(z + 1), using Spouge's approximation."""
    a = _SPOUGE_A
    accm = _COEFFICIENTS[0] + sum(
        c / (z + k) for k, c in enumerate(_COEFFICIENTS[1:], start=1)
    )
    scale = math.exp(-(z + a))
    try:
        growth = math.pow(z + a, z + 0.5)
    except OverflowError:
        growth = math.inf
    return accm * (scale * growth)


def h_to_hms(hours: float) -> float:
    """Convert decimal hours to the H.MMSS notation."""
    whole_hours = float(math.trunc(hours))
    minutes = (hours - whole_hours) * 60.0
    whole_minutes = float(math.trunc(minutes))
    seconds = (minutes - whole_minutes) * 60.0
    return whole_hours + whole_minutes / 100.0 + seconds / 10000.0


def hms_to_h(hms: float) -> float:
    """Convert H.MMSS notation back to decimal hours."""
    whole_hours = float(math.trunc(hms))
    minutes_seconds = (hms - whole_hours) * 100.0
    minutes = float(math.trunc(minutes_seconds))
    seconds = minutes_seconds - minutes
    total_minutes = minutes + seconds * 100.0 / 60.0
    return whole_hours + total_minutes / 60.0


def rad_to_deg(n: float) -> float:
    """Convert radians to degrees."""
    return n / math.pi * 180.0


def deg_to_rad(n: float) -> float:
    """Convert degrees to radians."""
    return n * math.pi / 180.0


def to_radians(value: float, mode: AngleMode) -> float:
    """Convert an angle expressed in ``mode`` units to radians."""
    if mode is AngleMode.DEG:
        return deg_to_rad(value)
    if mode is AngleMode.GRD:
        return value * math.pi / 200.0
    return value


def from_radians(value: float, mode: AngleMode) -> float:
    """Convert an angle in radians to ``mode`` units."""
    if mode is AngleMode.DEG:
        return rad_to_deg(value)
    if mode is AngleMode.GRD:
        return value / math.pi * 200.0
    return value


def int_part(x: float) -> float:
    """Integer part of x, truncated toward zero."""
    return math.modf(x)[1]


def fract_part(x: float) -> float:
    """Fractional part of x, carrying the sign of x."""
    return math.modf(x)[0]