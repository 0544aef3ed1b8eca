# tcalc

A keypad calculator that works on one chosen kind of number at a time:

- fixed-width integers: `uint8_t`, `int`, `int64_t`, `size_t`. Results wrap
  around on overflow, and division truncates toward zero.
- floating point: `float` (rounded to single precision) and `double`.
  Division by zero gives an infinity or NaN.
- exact fractions: `Rational`.

The calculator keeps a current value and one memory cell. It refuses some
operations by raising `tcalc.calculator.CalculatorError`. The message is
meant to be shown to the user:

- `Division by zero` (integers and fractions)
- `Zero power to zero`
- `Integer negative power` (integer types)
- `Fractional power is not supported` (fractions)

## Installing

```
pip install .
```

## Running

```
tcalc [--type {uint8_t,int,int64_t,size_t,double,float,Rational}]
```

`tcalc` reads keys from standard input, one line at a time. It starts on
`double` unless `--type` says otherwise. A line holds keys separated by
whitespace. After each line it prints the display as
`memory | formula | input`, with `-` for an empty field. An error is shown
as `error: <message>` in the input field.

Keys:

| key | action |
| --- | --- |
| a number such as `12`, `12.5`, `1/2` | typed digit by digit; `.` and `/` inside it press the extra key |
| `+` | addition |
| `-` or `−` | subtraction |
| `*` or `×` | multiplication |
| `/` or `÷` | division |
| `^` | power |
| `=` | evaluate |
| `C` | clear the input and the formula |
| `MS` | save the input to memory |
| `MR` | load the memory into the input |
| `MC` | blank the memory mark |
| `+-` or `±` | change sign |
| `<` or `⌫` | delete the last typed character |
| `.` | the extra key |

`type NAME` on a line of its own switches to another number type. Each type
keeps its own state, which comes back when you switch to it again.

A negative number is entered by typing it and then pressing `+-`. `MC`
blanks only the displayed memory mark. `MR` still loads the saved value.

Example:

```
$ tcalc
12.5 + 3.2 =
- | 12.5 + 3.2 = | 15.7
type Rational
- | - | -
1/2 * 3 =
- | 1 / 2 × 3 = | 3 / 2
```

## Using it from Python

```python
from tcalc.calculator import Calculator, CalculatorError
from tcalc.enums import ControllerType
from tcalc.numeric import number_type
from tcalc.rational import Rational

calc = Calculator(number_type(ControllerType.RATIONAL))
calc.set(Rational(1, 2))
calc.mul(Rational(3, 1))
calc.pow(Rational(2, 1))
print(calc.number)  # 9 / 4
calc.save()

try:
    calc.div(Rational(0, 1))
except CalculatorError as error:
    print(error)  # Division by zero
```

Integer types keep the width of their names:

```python
calc = Calculator(number_type(ControllerType.UINT8_T))
calc.set(250)
calc.add(10)
print(calc.number)  # 4
```

`Rational` is an immutable fraction. It is always kept in lowest terms with a
positive denominator. `Rational.parse("3 / 4")` reads `n` or `n / d` from the
start of a string. `str()` prints a fraction as `3 / 4`, or as a whole number
when the denominator is 1.

`tcalc.numeric.NumberType` describes a number type. Its `coerce`, `parse` and
`format` methods convert a value into the type, read it from text and render
it for display.

`tcalc.power` provides `integer_pow` and `rational_pow`.

## Keypad model

- `tcalc.controller.Controller` turns key presses into calculator calls and
  keeps a bound `View` up to date. The key presses are `press_digit`,
  `process_operation` and `process_control`.
- `tcalc.mainwindow.MainWindow` is such a view. It holds the input, formula
  and memory text and whether the input is an error. It also holds the label
  of the extra key. It forwards its key presses to the callbacks that a
  controller installs.
- `tcalc.app.Application` keeps one controller per `ControllerType`. It
  rebinds the window on `select`, or when `MainWindow.select_controller` is
  given a type label.

Operations are the members of `Operation`: `ADDITION`, `SUBTRACTION`,
`MULTIPLICATION`, `DIVISION`, `POWER`.

Control keys are the members of `ControlKey`: `EQUALS`, `CLEAR`, `MEM_SAVE`,
`MEM_LOAD`, `MEM_CLEAR`, `PLUS_MINUS`, `BACKSPACE`, `EXTRA_KEY`.

The extra key has a different label for each kind of number:

- `.` for floating point
- `/` for fractions
- none (`None`) for integers

## What it does not do

There is no graphical window. `MainWindow` is a plain object that holds display
state, and the only front end is the line-based `tcalc` command.

## Tests

```
pip install .[test]
pytest
```