"""Calculator state: the four-level stack, registers and number entry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from rpnvoyager.mathfuncs import AngleMode, from_radians, to_radians

MAX_DIGITS = 12
STACK_SIZE = 4
REGISTER_COUNT = 10


class CalculatorError(Exception):
    """An operation the calculator refuses, with the message it shows."""


class DisplayMode(Enum):
    """How the X register is shown on the display."""

    FIX = 0
    SCI = 1
    ENG = 2

    @property
    def label(self) -> str:
        return self.name


def _divide(a: float, b: float) -> float:
    """Floating division that yields inf or nan instead of raising."""
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _sqrt(v: float) -> float:
    """Square root that yields nan for negative input instead of raising."""
    return math.sqrt(v) if v >= 0.0 else math.nan


@dataclass
class Calculator:
    """Registers, memory and entry flags of an RPN calculator."""

    stack: list[float] = field(default_factory=lambda: [0.0] * STACK_SIZE)
    last_x: float = 0.0
    memory: list[float] = field(default_factory=lambda: [0.0] * REGISTER_COUNT)
    angle_mode: AngleMode = AngleMode.DEG
    display_mode: DisplayMode = DisplayMode.FIX
    display_digits: int = 9
    digits: int = 0
    decimal_digits: int = 0
    exponent: int = 0
    decimal: bool = False
    exponent_entry: bool = False
    enter_hit: bool = False
    func_hit: bool = False
    store_hit: bool = False
    recall_hit: bool = False
    display_mode_hit: bool = False
    number_hit: bool = False
    second_f: bool = False
    show_stack: bool = False

    @property
    def x(self) -> float:
        return self.stack[0]

    @x.setter
    def x(self, value: float) -> None:
        self.stack[0] = value

    @property
    def y(self) -> float:
        return self.stack[1]

    @y.setter
    def y(self, value: float) -> None:
        self.stack[1] = value

    # stack handling

    def push_stack(self) -> None:
        """Lift the stack: X is copied into Y, and T is lost."""
        self.stack[1:] = self.stack[:-1]

    def pull_stack(self) -> None:
        """Drop Z into Y and T into Z after a two-operand operation."""
        self.stack[1:] = [*self.stack[2:], 0.0]

    def rotate_stack(self) -> None:
        """Roll the stack down; X moves to T."""
        self.stack.append(self.stack.pop(0))

    def swap_xy(self) -> None:
        """Exchange X and Y."""
        self.stack[0], self.stack[1] = self.stack[1], self.stack[0]

    # registers

    def _check_register(self, register: int) -> None:
        if not 0 <= register < REGISTER_COUNT:
            raise CalculatorError(f"No register {register}")

    def store_memory(self, register: int) -> None:
        """Copy X into a numbered register."""
        self._check_register(register)
        self.memory[register] = self.stack[0]
        self.store_hit = False
        self.func_hit = True

    def recall_memory(self, register: int) -> None:
        """Lift the stack and place a register's value into X."""
        self._check_register(register)
        self.push_stack()
        self.stack[0] = self.memory[register]
        self.recall_hit = False
        self.func_hit = True

    def clear_memory(self) -> None:
        """Zero every register, the stack and last X."""
        self.memory = [0.0] * REGISTER_COUNT
        self.stack = [0.0] * STACK_SIZE
        self.last_x = 0.0

    # number entry

    def apply_exponent(self) -> None:
        """Scale X by the entered power of ten and leave exponent entry."""
        value = self.stack[0]
        for _ in range(abs(self.exponent)):
            value = value * 10.0 if self.exponent > 0 else value / 10.0
        self.stack[0] = value
        self.exponent = 0
        self.exponent_entry = False

    def add_exponent_digit(self, digit: int) -> None:
        """Shift the exponent one place left, dropping hundreds, and add a digit."""
        hundreds = int(self.exponent / 100)
        self.exponent = (self.exponent - hundreds * 100) * 10 + digit

    def add_digit(self, digit: float) -> None:
        """Enter one digit into X, starting a new number where needed."""
        if self.enter_hit or self.func_hit:
            if self.func_hit and not self.enter_hit:
                self.push_stack()
            self.stack[0] = float(digit)
            self.digits = 1
            self.decimal_digits = 0
            self.decimal = False
            if self.enter_hit:
                self.enter_hit = False
            else:
                self.func_hit = False
            return
        if self.digits >= MAX_DIGITS:
            raise CalculatorError("Too many digits")
        sign = -1 if self.stack[0] < 0.0 else 1
        if not self.decimal:
            self.stack[0] = self.stack[0] * 10.0 + sign * digit
        else:
            self.decimal_digits += 1
            num = float(digit)
            for _ in range(self.decimal_digits):
                num /= 10.0
            self.stack[0] = self.stack[0] + sign * num
        self.digits += 1

    # statistics

    def sigma_plus(self) -> None:
        """Accumulate the point (X, Y) into registers 0-4; X shows n."""
        x, y = self.stack[0], self.stack[1]
        self.memory[0] += 1.0
        self.memory[1] += x
        self.memory[2] += x * x
        self.memory[3] += y
        self.memory[4] += y * y
        self.stack[0] = self.memory[0]

    def sigma_minus(self) -> None:
        """Remove the point (X, Y) from registers 0-4; X shows n."""
        x, y = self.stack[0], self.stack[1]
        self.memory[0] -= 1.0
        self.memory[1] -= x
        self.memory[2] -= x * x
        self.memory[3] -= y
        self.memory[4] -= y * y
        self.stack[0] = self.memory[0]

    def _require_samples(self) -> float:
        n = self.memory[0]
        if n == 0.0:
            raise CalculatorError("Error 2: n=0")
        return n

    def mean_x_y(self) -> None:
        """Put the mean of x into X and the mean of y into Y."""
        n = self._require_samples()
        self.push_stack()
        self.push_stack()
        self.stack[0] = self.memory[1] / n
        self.stack[1] = self.memory[3] / n

    def stddev_x_y(self) -> None:
        """Put the sample standard deviations of x and y into X and Y."""
        n = self._require_samples()
        m = self.memory
        self.push_stack()
        self.push_stack()
        denominator = n * (n - 1.0)
        self.stack[0] = _sqrt(_divide(n * m[2] - m[1] * m[1], denominator))
        self.stack[1] = _sqrt(_divide(n * m[4] - m[3] * m[3], denominator))

    # coordinates and angles

    def rect_to_polar(self) -> None:
        """Turn (X, Y) = (x, y) into (radius, angle in radians)."""
        x, y = self.stack[0], self.stack[1]
        self.stack[0] = math.sqrt(x * x + y * y)
        self.stack[1] = math.atan(_divide(y, x))

    def polar_to_rect(self) -> None:
        """Turn (X, Y) = (radius, angle in radians) into (x, y)."""
        r, t = self.stack[0], self.stack[1]
        self.stack[0] = r * math.cos(t)
        self.stack[1] = r * math.sin(t)

    def convert_angle(self, index: int) -> None:
        """Convert a stack level from the current angle unit to radians."""
        self.stack[index] = to_radians(self.stack[index], self.angle_mode)

    def back_convert_angle(self, index: int) -> None:
        """Convert a stack level from radians to the current angle unit."""
        self.stack[index] = from_radians(self.stack[index], self.angle_mode)