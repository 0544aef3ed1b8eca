"""Turns key presses into calculator operations and keeps a view up to date."""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from .calculator import Calculator, CalculatorError
from .enums import ControlKey, Operation
from .numeric import Number, NumberType

_Action = Callable[[Calculator, Number], None]

_OPERATIONS: dict[Operation, tuple[str, _Action]] = {
    Operation.ADDITION: (" + ", Calculator.add),
    Operation.SUBTRACTION: (" − ", Calculator.sub),
    Operation.MULTIPLICATION: (" × ", Calculator.mul),
    Operation.DIVISION: (" ÷ ", Calculator.div),
    Operation.POWER: (" ^ ", Calculator.pow),
}


class View(Protocol):
    """What a controller needs from the display it drives."""

    digit_callback: Optional[Callable[[int], None]]
    operation_callback: Optional[Callable[[Operation], None]]
    control_callback: Optional[Callable[[ControlKey], None]]

    def set_input_text(self, text: str) -> None: ...

    def set_error_text(self, text: str) -> None: ...

    def set_formula_text(self, text: str) -> None: ...

    def set_mem_text(self, text: str) -> None: ...

    def set_extra_key(self, key: Optional[str]) -> None: ...


class Controller:
    """Calculator logic for one number type, attachable to a view.

    The controller remembers what it last showed, so a view bound again later
    gets the same input, formula and memory marker back.
    """

    def __init__(self, number_type: NumberType) -> None:
        self._type = number_type
        self._calculator = Calculator(number_type)
        self._operation: Optional[_Action] = None
        self._operation_name = ""
        self._active: Number = number_type.coerce(0)
        self._input = ""
        self._input_as_number = True
        self._memory: Optional[Number] = None
        self._view: Optional[View] = None
        self._text = ""
        self._formula = ""
        self._mem_text = ""

    @property
    def extra_key(self) -> Optional[str]:
        """Label of the extra key: ``"."``, ``"/"`` or None for integer types."""
        if self._type.kind == "integer":
            return None
        if self._type.kind == "rational":
            return "/"
        return "."

    def bind(self, view: Optional[View]) -> None:
        """Take over ``view``: route its keys here and show this controller's state."""
        self._view = view
        if view is None:
            return
        view.digit_callback = self.press_digit
        view.operation_callback = self.process_operation
        view.control_callback = self.process_control
        view.set_input_text(self._text)
        view.set_formula_text(self._formula)
        view.set_mem_text(self._mem_text)
        view.set_extra_key(self.extra_key)

    def press_digit(self, digit: int) -> None:
        self._add_char(str(digit))

    def process_operation(self, operation: Operation) -> None:
        name, action = _OPERATIONS[operation]
        if self._operation is None:
            self._calculator.set(self._active)
        self._operation_name = name
        self._operation = action
        self._input = ""
        self._show_formula(self._format(self._calculator.number) + name)

    def process_control(self, key: ControlKey) -> None:
        match key:
            case ControlKey.EQUALS:
                self._equals()
            case ControlKey.CLEAR:
                self._set_input_number(self._type.coerce(0))
                self._show_formula("")
                self._operation = None
            case ControlKey.MEM_SAVE:
                self._memory = self._active
                self._show_mem("M")
            case ControlKey.MEM_LOAD:
                if self._memory is None:
                    return
                self._set_input_number(self._memory)
                self._show_formula("")
            case ControlKey.MEM_CLEAR:
                self._memory = None
                self._show_mem("")
            case ControlKey.PLUS_MINUS:
                self._negate()
            case ControlKey.BACKSPACE:
                if self._input:
                    self._set_input_string(self._input[:-1])
            case ControlKey.EXTRA_KEY:
                self._extra_action()

    def _equals(self) -> None:
        if self._operation is None:
            return
        formula = (
            self._format(self._calculator.number)
            + self._operation_name
            + self._format(self._active)
            + " ="
        )
        try:
            self._operation(self._calculator, self._active)
        except CalculatorError as error:
            self._show_error(str(error))
            return
        self._show_formula(formula)
        self._set_input_number(self._calculator.number)
        self._operation = None

    def _negate(self) -> None:
        if self._input_as_number:
            self._set_input_number(self._type.coerce(-self._active))
        elif self._input:
            if self._input.startswith("-"):
                self._set_input_string(self._input[1:])
            else:
                self._set_input_string("-" + self._input)

    def _extra_action(self) -> None:
        if self._type.kind == "integer":
            return
        if self._type.kind == "rational":
            if not self._input or "/" in self._input:
                return
            self._add_char("/")
        else:
            if "." in self._input:
                return
            self._add_char(".")

    def _format(self, value: Number) -> str:
        return self._type.format(value)

    def _add_char(self, char: str) -> None:
        self._set_input_string(self._input + char)

    def _set_input_string(self, text: str) -> None:
        self._input_as_number = False
        self._input = text
        self._active = self._type.parse(text)
        self._show_input(text)

    def _set_input_number(self, value: Number) -> None:
        self._input_as_number = True
        self._input = ""
        self._active = value
        self._show_input(self._format(value))

    def _show_input(self, text: str) -> None:
        if self._view is None:
            return
        self._view.set_input_text(text)
        self._text = text

    def _show_error(self, text: str) -> None:
        if self._view is None:
            return
        self._view.set_error_text(text)

    def _show_formula(self, text: str) -> None:
        if self._view is None:
            return
        self._view.set_formula_text(text)
        self._formula = text

    def _show_mem(self, text: str) -> None:
        if self._view is None:
            return
        self._view.set_mem_text(text)
        self._mem_text = text