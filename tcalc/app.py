"""The calculator application and its line-based command interface."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, Optional, Sequence

from .controller import Controller
from .enums import ControlKey, ControllerType, Operation
from .mainwindow import MainWindow
from .numeric import number_type


class Application:
    """One controller per number type, all sharing one window.

    The window starts on ``double``; choosing a type in the window binds
    that type's controller, which keeps its own state between switches.
    """

    def __init__(self, window: MainWindow) -> None:
        self.window = window
        self.controllers = {
            controller_type: Controller(number_type(controller_type))
            for controller_type in ControllerType
        }
        window.controller_callback = self.select
        self.select(ControllerType.DOUBLE)

    def select(self, controller_type: ControllerType) -> None:
        self.controllers[controller_type].bind(self.window)


def _operation(operation: Operation) -> Callable[[MainWindow], None]:
    return lambda window: window.press_operation(operation)


def _control(key: ControlKey) -> Callable[[MainWindow], None]:
    return lambda window: window.press_control(key)


_KEYS: dict[str, Callable[[MainWindow], None]] = {
    "+": _operation(Operation.ADDITION),
    "-": _operation(Operation.SUBTRACTION),
    "−": _operation(Operation.SUBTRACTION),
    "*": _operation(Operation.MULTIPLICATION),
    "×": _operation(Operation.MULTIPLICATION),
    "/": _operation(Operation.DIVISION),
    "÷": _operation(Operation.DIVISION),
    "^": _operation(Operation.POWER),
    "=": _control(ControlKey.EQUALS),
    "C": _control(ControlKey.CLEAR),
    "MS": _control(ControlKey.MEM_SAVE),
    "MR": _control(ControlKey.MEM_LOAD),
    "MC": MainWindow.clear_memory,
    "+-": _control(ControlKey.PLUS_MINUS),
    "±": _control(ControlKey.PLUS_MINUS),
    "<": _control(ControlKey.BACKSPACE),
    "⌫": _control(ControlKey.BACKSPACE),
    ".": _control(ControlKey.EXTRA_KEY),
}

_NUMBER = re.compile(r"[0-9][0-9./]*")


def _press(window: MainWindow, word: str) -> bool:
    action = _KEYS.get(word)
    if action is not None:
        action(window)
        return True
    if _NUMBER.fullmatch(word) is None:
        return False
    for char in word:
        if char.isdigit():
            window.press_digit(int(char))
        else:
            window.press_control(ControlKey.EXTRA_KEY)
    return True


def _render(window: MainWindow) -> str:
    shown = window.input_text or "-"
    if window.input_is_error:
        shown = f"error: {shown}"
    return " | ".join([window.mem_text or "-", window.formula_text or "-", shown])


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read keys from standard input, one line at a time, and print the display."""
    labels = [controller_type.value for controller_type in ControllerType]
    parser = argparse.ArgumentParser(
        prog="tcalc",
        description=(
            "Calculator reading whitespace-separated keys per line. "
            "'type NAME' switches the number type."
        ),
    )
    parser.add_argument("--type", default=ControllerType.DOUBLE.value, choices=labels)
    args = parser.parse_args(argv)

    window = MainWindow()
    Application(window)
    window.select_controller(args.type)

    for line in sys.stdin:
        words = line.split()
        if not words:
            continue
        if words[0] == "type":
            if len(words) == 2 and words[1] in labels:
                window.select_controller(words[1])
            else:
                print(f"usage: type {{{','.join(labels)}}}", file=sys.stderr)
        else:
            for word in words:
                if not _press(window, word):
                    print(f"unknown key: {word}", file=sys.stderr)
        print(_render(window))
    return 0


if __name__ == "__main__":
    sys.exit(main())