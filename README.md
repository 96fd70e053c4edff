# rpnvoyager

A Reverse Polish Notation calculator for the terminal, laid out like the
classic Voyager-series pocket calculators. It has a four-level stack
(X, Y, Z, T), a Last X register and ten memory registers (0–9). It offers
scientific, trigonometric and statistical functions. You can choose the
FIX, SCI or ENG display mode and the DEG, RAD or GRD angle mode.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Running the calculator

```
rpnvoyager
rpnvoyager --log session.log
rpnvoyager --version
```

The screen is drawn with `curses`. On a Python without `curses`, the
command prints a message and exits with status 1.

The calculator shows a grid of 40 buttons in four rows of ten. Each button
has a primary function and a second function printed above it. Press the
`f` button first to get the second function.

### Keys

| Key              | Action                                   |
|------------------|------------------------------------------|
| Arrow keys       | Move the button cursor (wraps at edges)  |
| Space            | Press the button under the cursor        |
| Enter            | ENTER                                    |
| `0`–`9`, `.`     | Digit entry                              |
| `+` `-` `*` `/`  | Arithmetic on Y and X                    |
| `e`              | EEX (enter a power-of-ten exponent)      |
| `f`              | Toggle the second function               |
| `s` / `r`        | STO / RCL, followed by a register digit  |
| `t`              | Roll the stack down                      |
| `l`              | Recall Last X                            |
| `p`              | Push π                                   |
| `k`              | Show or hide the full stack              |
| `m`              | Show the memory registers                |
| `h`              | Help screen                              |
| Esc              | Quit                                     |

A left click on a button presses it. A click on the label row above a button
selects its second function.

Refused operations show a message on the bottom line, such as
`Negative number!` or `number outside function domain`. Press any key to
continue.

### Display modes

`f` then `7`, `8` or `9` selects FIX, SCI or ENG. The next digit key sets the
number of decimal places, which is 9 by default. `f` then `4`, `5` or `6`
selects DEG, RAD or GRD for the trigonometric and polar/rectangular
conversions.

### Statistics

`Σ+` adds the pair in X and Y to the summation registers and `Σ-` removes
it. Register 0 holds n, 1 holds Σx, 2 holds Σx², 3 holds Σy and 4 holds
Σy². With `f` then `0` you get the means of x and y, and with `f` then `.`
you get their sample standard deviations. Both report `Error 2: n=0` when
no points have been entered.

### Log file

Each button press is written to `data.log` in the working directory, or to
the file given with `--log`. The file starts with a dated header. Each
record holds the button number, the legend of the function used, X, Y, Z,
T and Last X. The file ends with the line `END LOG FILE`.

## What it does not do

Programming is not available. R/S, SST, P/R, GTO, the conditional tests and
the other keys used for it answer `Not yet implemented`. So do the linear
regression (`x,r`, `y,r`, `L.R.`) and the other unfinished second functions.

## Using it as a library

The calculator state and the button logic do not depend on the terminal:

```python
from rpnvoyager.calculator import Calculator, CalculatorError
from rpnvoyager.buttons import press, label_for
from rpnvoyager.display import format_lcd, format_stack

calc = Calculator()
press(calc, 27)   # 1
press(calc, 26)   # ENTER
press(calc, 28)   # 2
press(calc, 40)   # +
print(format_lcd(calc))
print(format_stack(calc))
print(label_for(40, False), label_for(40, True))
```

`press` raises `CalculatorError` with the message to show when a key is
refused. It returns `True` when the key asks for the help screen.

Other modules:

- `rpnvoyager.mathfuncs`: `factorial` (Spouge's approximation of the gamma
  function), `h_to_hms`, `hms_to_h`, `deg_to_rad`, `rad_to_deg`,
  `to_radians`, `from_radians`, `int_part`, `fract_part` and `AngleMode`.
- `rpnvoyager.display`: `format_lcd`, `format_exponent`, `format_badges`,
  `format_stack` and `format_registers` give the text shown on screen.
- `rpnvoyager.datalog`: `DataLog` is a context manager that writes the
  button log. `header` and `format_entry` give its lines.
- `rpnvoyager.mouse`: `mouse_position` maps a click on the text screen to a
  `MouseHit`.
- `rpnvoyager.navigation`: `move_cursor` and `action_for_key` handle cursor
  movement and keyboard shortcuts.
- `rpnvoyager.ui`: `CalculatorApp` runs the calculator on any screen object
  with `draw(lines)` and `get_key()` methods. `main` is the command.