import io

import pytest

from tcalc.app import Application, main
from tcalc.enums import ControlKey, ControllerType, Operation
from tcalc.mainwindow import MainWindow

OPERATIONS = {
    "+": Operation.ADDITION,
    "-": Operation.SUBTRACTION,
    "/": Operation.DIVISION,
    "*": Operation.MULTIPLICATION,
    "^": Operation.POWER,
}
SYMBOLS = {"+": "+", "-": "−", "/": "÷", "*": "×", "^": "^"}
CONTROLS = {"C": ControlKey.CLEAR, "=": ControlKey.EQUALS, "+-": ControlKey.PLUS_MINUS}


@pytest.fixture
def window():
    win = MainWindow()
    Application(win)
    return win


def push(window, label):
    if label in (".", "/"):
        window.press_control(ControlKey.EXTRA_KEY)
    elif label in CONTROLS:
        window.press_control(CONTROLS[label])
    elif label.isdigit():
        window.press_digit(int(label))


def input_number(window, number):
    digits = number[1:] if number.startswith("-") else number
    for char in digits:
        push(window, char)
    if number.startswith("-"):
        push(window, "+-")


def run_operation(window, type_label, operand_1, operation, operand_2):
    window.select_controller(type_label)
    push(window, "C")
    input_number(window, operand_1)
    window.press_operation(OPERATIONS[operation])
    input_number(window, operand_2)
    push(window, "=")


def expected_formula(operand_1, operation, operand_2):
    return f"{operand_1} {SYMBOLS[operation]} {operand_2} ="


@pytest.mark.parametrize(
    "type_label, key",
    [
        ("double", "."),
        ("float", "."),
        ("Rational", "/"),
        ("int", None),
        ("uint8_t", None),
        ("int64_t", None),
        ("size_t", None),
    ],
)
def test_extra_button(window, type_label, key):
    window.select_controller(type_label)
    assert window.extra_key == key


@pytest.mark.parametrize(
    "type_label, operand_1, operation, operand_2, result",
    [
        ("int", "1000", "-", "8000", "-7000"),
        ("uint8_t", "12", "+", "5", "17"),
        ("size_t", "12409098124", "*", "157", "1948228405468"),
        ("int64_t", "8764861823467", "/", "-357", "-24551433679"),
        ("int64_t", "2", "^", "57", "144115188075855872"),
        ("double", "12.5", "+", "3.2", "15.7"),
        ("float", "2.51", "-", "765.27", "-762.76"),
        ("double", "10", "^", "10", "1e+10"),
        ("float", "10", "/", "100", "0.1"),
        ("double", "-15.04", "*", "-875.3", "13164.5"),
        ("Rational", "1 / 2", "*", "3", "3 / 2"),
        ("Rational", "1 / 2", "/", "3", "1 / 6"),
        ("Rational", "6 / 5", "^", "3", "216 / 125"),
        ("Rational", "3", "/", "27", "1 / 9"),
        ("Rational", "4 / 757", "+", "21347 / 5874", "16183175 / 4446618"),
        ("Rational", "5 / 2", "-", "1 / 2", "2"),
        ("Rational", "5 / 17", "^", "-1", "17 / 5"),
    ],
)
def test_interface_operations(window, type_label, operand_1, operation, operand_2, result):
    run_operation(window, type_label, operand_1, operation, operand_2)
    assert window.formula_text == expected_formula(operand_1, operation, operand_2)
    assert window.input_text == result
    assert window.input_is_error is False


def test_interface_rational_reduces_operands(window):
    run_operation(window, "Rational", "2 / 2", "-", "3 / 3")
    assert window.formula_text == "1 − 1 ="
    assert window.input_text == "0"


@pytest.mark.parametrize(
    "type_label, operand_1, operation, operand_2, message",
    [
        ("int", "-214", "/", "0", "Division by zero"),
        ("uint8_t", "3", "/", "0", "Division by zero"),
        ("size_t", "59823468762", "/", "0", "Division by zero"),
        ("int64_t", "-135678756123789", "/", "0", "Division by zero"),
        ("Rational", "2/4", "/", "0", "Division by zero"),
        ("int", "0", "^", "0", "Zero power to zero"),
        ("uint8_t", "0", "^", "0", "Zero power to zero"),
        ("size_t", "0", "^", "0", "Zero power to zero"),
        ("int64_t", "0", "^", "0", "Zero power to zero"),
        ("Rational", "0", "^", "0", "Zero power to zero"),
        ("Rational", "1 / 2", "^", "2 / 3", "Fractional power is not supported"),
        ("Rational", "1 / 2", "^", "3 / 2", "Fractional power is not supported"),
        ("int", "-21412", "^", "-15", "Integer negative power"),
        ("int64_t", "876987293847", "^", "-6", "Integer negative power"),
    ],
)
def test_interface_errors(window, type_label, operand_1, operation, operand_2, message):
    window.select_controller(type_label)
    input_number(window, operand_1)
    window.press_operation(OPERATIONS[operation])
    input_number(window, operand_2)
    push(window, "=")
    assert window.input_text == message
    assert window.input_is_error is True
    push(window, "C")
    assert window.input_is_error is False
    assert window.input_text == "0"


def test_switching_types_keeps_each_state(window):
    input_number(window, "5")
    window.select_controller("int")
    assert window.input_text == ""
    input_number(window, "42")
    window.select_controller("double")
    assert window.input_text == "5"
    assert window.extra_key == "."


def test_select_binds_given_controller():
    window = MainWindow()
    app = Application(window)
    app.select(ControllerType.RATIONAL)
    assert window.extra_key == "/"
    assert set(app.controllers) == set(ControllerType)


def test_main_default_double(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("12.5 + 3.2 =\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["- | 12.5 + 3.2 = | 15.7"]


def test_main_type_switch_and_memory(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("type int\n7 / 2 =\nMS\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "- | - | -",
        "- | 7 ÷ 2 = | 3",
        "M | 7 ÷ 2 = | 3",
    ]


def test_main_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 / 0 =\n"))
    assert main(["--type", "int"]) == 0
    assert capsys.readouterr().out.splitlines() == ["- | 1 ÷  | error: Division by zero"]


def test_main_unknown_key(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4 ? \n"))
    assert main(["--type", "Rational"]) == 0
    captured = capsys.readouterr()
    assert "unknown key: ?" in captured.err
    assert captured.out.splitlines() == ["- | - | 4"]


def test_main_rejects_unknown_type():
    with pytest.raises(SystemExit):
        main(["--type", "complex"])