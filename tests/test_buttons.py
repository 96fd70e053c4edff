import math
import statistics

import pytest

from rpnvoyager.buttons import label_for, press
from rpnvoyager.calculator import Calculator, CalculatorError, DisplayMode
from rpnvoyager.mathfuncs import AngleMode

KEYS = {
    "0": 37, "1": 27, "2": 28, "3": 29, "4": 17,
    "5": 18, "6": 19, "7": 7, "8": 8, "9": 9, ".": 38,
}
ENTER, PLUS, MINUS, TIMES, DIVIDE = 26, 40, 30, 20, 10
SECOND, STO, RCL, CLX, CHS, EEX = 32, 34, 35, 25, 6, 16


def type_number(calc, text):
    for char in text:
        press(calc, KEYS[char])


def second(calc, position):
    press(calc, SECOND)
    return press(calc, position)


def test_labels_from_keyboard_legends():
    assert label_for(1, False) == "√x"
    assert label_for(1, True) == "x²"
    assert label_for(26, False) == "ENTER"
    assert label_for(36, True) == "Lastx"


@pytest.mark.parametrize("position", [0, 41, -3])
def test_label_out_of_range(position):
    with pytest.raises(ValueError):
        label_for(position, False)


def test_typing_integer():
    calc = Calculator()
    type_number(calc, "123")
    assert calc.x == 123.0
    assert calc.number_hit


def test_typing_decimal():
    calc = Calculator()
    type_number(calc, "1.5")
    assert calc.x == pytest.approx(1.5)
    assert calc.decimal


def test_addition_sequence():
    calc = Calculator()
    type_number(calc, "12")
    press(calc, ENTER)
    type_number(calc, "3")
    press(calc, PLUS)
    assert calc.x == 12.0 + 3.0
    assert calc.y == 0.0
    assert calc.last_x == 3.0


@pytest.mark.parametrize(
    "key, expected",
    [(MINUS, 7.0 - 2.0), (TIMES, 7.0 * 2.0), (DIVIDE, 7.0 / 2.0)],
)
def test_binary_operand_order(key, expected):
    calc = Calculator()
    calc.stack = [2.0, 7.0, 5.0, 9.0]
    press(calc, key)
    assert calc.x == pytest.approx(expected)
    assert calc.stack[1:] == [5.0, 9.0, 0.0]


def test_percent():
    calc = Calculator()
    calc.stack = [5.0, 200.0, 0.0, 0.0]
    press(calc, 11)
    assert calc.x == pytest.approx(200.0 / 100.0 * 5.0)


def test_power():
    calc = Calculator()
    calc.stack = [10.0, 2.0, 0.0, 0.0]
    press(calc, 4)
    assert calc.x == math.pow(2.0, 10.0)


def test_sqrt_and_last_x():
    calc = Calculator()
    calc.x = 16.0
    press(calc, 1)
    assert calc.x == math.sqrt(16.0)
    assert calc.last_x == 16.0
    assert calc.func_hit


def test_sqrt_negative_refused():
    calc = Calculator()
    calc.x = -4.0
    with pytest.raises(CalculatorError, match="Negative"):
        press(calc, 1)
    assert calc.x == -4.0


def test_square_with_second():
    calc = Calculator()
    calc.x = 3.0
    second(calc, 1)
    assert calc.x == 3.0 * 3.0
    assert not calc.second_f


def test_ln_negative_resets_second():
    calc = Calculator()
    calc.x = -1.0
    with pytest.raises(CalculatorError):
        second(calc, 2)
    assert not calc.second_f


def test_ln_of_zero_is_minus_infinity():
    calc = Calculator()
    second(calc, 2)
    assert calc.x == -math.inf


def test_exp_and_log10():
    calc = Calculator()
    calc.x = 2.0
    press(calc, 2)
    assert calc.x == pytest.approx(math.exp(2.0))
    calc.x = 1000.0
    second(calc, 3)
    assert calc.x == pytest.approx(math.log10(1000.0))


def test_reciprocal_of_zero():
    calc = Calculator()
    press(calc, 5)
    assert calc.x == math.inf


def test_chs_keeps_sign_for_following_digits():
    calc = Calculator()
    type_number(calc, "5")
    press(calc, CHS)
    type_number(calc, "3")
    assert calc.x == -53.0


def test_pi_lifts_stack():
    calc = Calculator()
    calc.x = 7.0
    second(calc, CHS)
    assert calc.x == math.pi
    assert calc.y == 7.0


def test_exponent_entry():
    calc = Calculator()
    type_number(calc, "2")
    press(calc, EEX)
    type_number(calc, "3")
    assert calc.exponent == 3
    press(calc, ENTER)
    assert calc.x == pytest.approx(2e3)
    assert not calc.exponent_entry


def test_negative_exponent_entry():
    calc = Calculator()
    type_number(calc, "5")
    press(calc, EEX)
    type_number(calc, "2")
    press(calc, CHS)
    press(calc, ENTER)
    assert calc.x == pytest.approx(5e-2)


def test_store_and_recall():
    calc = Calculator()
    type_number(calc, "4")
    press(calc, STO)
    assert calc.store_hit
    type_number(calc, "3")
    assert calc.memory[3] == 4.0
    press(calc, CLX)
    assert calc.x == 0.0
    press(calc, RCL)
    type_number(calc, "3")
    assert calc.x == 4.0
    assert not calc.recall_hit


def test_store_toggles_and_recall_cancels_store():
    calc = Calculator()
    press(calc, STO)
    press(calc, STO)
    assert not calc.store_hit
    press(calc, STO)
    press(calc, RCL)
    assert calc.recall_hit and not calc.store_hit


def test_rotate_and_swap():
    calc = Calculator()
    calc.stack = [1.0, 2.0, 3.0, 4.0]
    press(calc, 23)
    assert calc.stack == [2.0, 3.0, 4.0, 1.0]
    press(calc, 24)
    assert calc.stack == [3.0, 2.0, 4.0, 1.0]


def test_clear_registers():
    calc = Calculator()
    calc.stack = [1.0, 2.0, 3.0, 4.0]
    calc.memory[5] = 9.0
    calc.last_x = 2.0
    second(calc, 24)
    assert calc.stack == [0.0] * 4
    assert calc.memory == [0.0] * 10
    assert calc.last_x == 0.0


def test_last_x_recall():
    calc = Calculator()
    calc.stack = [3.0, 12.0, 0.0, 0.0]
    press(calc, PLUS)
    second(calc, ENTER)
    assert calc.x == 3.0
    assert calc.y == 12.0 + 3.0


def test_display_mode_and_digits():
    calc = Calculator()
    second(calc, 8)
    assert calc.display_mode is DisplayMode.SCI
    assert calc.display_mode_hit
    type_number(calc, "4")
    assert calc.display_digits == 4
    assert not calc.display_mode_hit


@pytest.mark.parametrize(
    "position, mode",
    [(17, AngleMode.DEG), (18, AngleMode.RAD), (19, AngleMode.GRD)],
)
def test_angle_modes(position, mode):
    calc = Calculator(angle_mode=AngleMode.RAD if mode is AngleMode.DEG else AngleMode.DEG)
    second(calc, position)
    assert calc.angle_mode is mode


def test_sine_in_degrees():
    calc = Calculator()
    calc.x = 30.0
    press(calc, 13)
    assert calc.x == pytest.approx(math.sin(math.radians(30.0)))


def test_arcsine_outside_domain():
    calc = Calculator()
    calc.x = 2.0
    with pytest.raises(CalculatorError, match="domain"):
        second(calc, 13)
    assert not calc.second_f


def test_tan_atan_round_trip():
    calc = Calculator()
    calc.x = 40.0
    press(calc, 15)
    second(calc, 15)
    assert calc.x == pytest.approx(40.0)


def test_cos_acos_round_trip_gradians():
    calc = Calculator(angle_mode=AngleMode.GRD)
    calc.x = 50.0
    press(calc, 14)
    second(calc, 14)
    assert calc.x == pytest.approx(50.0)


def test_radian_degree_round_trip():
    calc = Calculator()
    calc.x = 123.0
    second(calc, 30)
    assert calc.x == pytest.approx(math.radians(123.0))
    second(calc, 40)
    assert calc.x == pytest.approx(123.0)


def test_hms_round_trip():
    calc = Calculator()
    calc.x = 2.75
    second(calc, 4)
    second(calc, 5)
    assert calc.x == pytest.approx(2.75)


def test_factorial():
    calc = Calculator()
    calc.x = 5.0
    second(calc, EEX)
    assert calc.x == pytest.approx(math.factorial(5), rel=1e-9)


def test_factorial_of_zero_and_negative():
    calc = Calculator()
    second(calc, EEX)
    assert calc.x == 1.0
    calc.x = -2.0
    with pytest.raises(CalculatorError):
        second(calc, EEX)


def test_int_and_frac():
    calc = Calculator()
    calc.x = -3.25
    second(calc, STO)
    assert calc.x == math.modf(-3.25)[1]
    calc.x = -3.25
    second(calc, RCL)
    assert calc.x == math.modf(-3.25)[0]


def test_statistics_mean_and_stddev():
    points = [(2.0, 10.0), (4.0, 20.0), (9.0, 15.0)]
    calc = Calculator()
    for x, y in points:
        calc.stack = [x, y, 0.0, 0.0]
        press(calc, 39)
    assert calc.x == float(len(points))
    second(calc, 37)
    assert calc.x == pytest.approx(statistics.mean(p[0] for p in points))
    assert calc.y == pytest.approx(statistics.mean(p[1] for p in points))
    second(calc, 38)
    assert calc.x == pytest.approx(statistics.stdev(p[0] for p in points))
    assert calc.y == pytest.approx(statistics.stdev(p[1] for p in points))


def test_sigma_minus_undoes_sigma_plus():
    calc = Calculator()
    calc.stack = [3.0, 4.0, 0.0, 0.0]
    press(calc, 39)
    calc.stack = [3.0, 4.0, 0.0, 0.0]
    second(calc, 39)
    assert calc.memory[:5] == [0.0] * 5


def test_mean_without_samples_keeps_second():
    calc = Calculator()
    with pytest.raises(CalculatorError, match="n=0"):
        second(calc, 37)
    assert calc.second_f


def test_polar_rect_round_trip():
    calc = Calculator(angle_mode=AngleMode.RAD)
    calc.stack = [2.0, 0.5, 0.0, 0.0]
    second(calc, 11)
    assert calc.x == pytest.approx(2.0 * math.cos(0.5))
    second(calc, 12)
    assert calc.x == pytest.approx(2.0)
    assert calc.y == pytest.approx(0.5)


@pytest.mark.parametrize("position", [21, 22, 33])
def test_unimplemented_keys(position):
    with pytest.raises(CalculatorError, match="Not yet implemented"):
        press(Calculator(), position)


def test_help_requested_only_with_second():
    calc = Calculator()
    assert press(calc, 31) is False
    assert second(calc, 31) is True
    assert not calc.second_f


def test_unknown_position_does_nothing():
    calc = Calculator()
    calc.stack = [1.0, 2.0, 3.0, 4.0]
    assert press(calc, 0) is False
    assert calc.stack == [1.0, 2.0, 3.0, 4.0]


def test_too_many_digits():
    calc = Calculator()
    type_number(calc, "1" * 12)
    calc.number_hit = False
    with pytest.raises(CalculatorError, match="Too many digits"):
        type_number(calc, "1")
    assert calc.x == float("1" * 12)
    assert calc.number_hit


def test_point_after_function_lifts_stack():
    calc = Calculator()
    calc.x = 9.0
    press(calc, 1)
    type_number(calc, ".5")
    assert calc.y == math.sqrt(9.0)
    assert calc.x == pytest.approx(0.5)