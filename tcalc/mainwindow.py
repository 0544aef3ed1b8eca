"""The calculator's window: what it shows and which keys it forwards."""

from __future__ import annotations

from typing import Callable, Optional

from .enums import ControlKey, ControllerType, Operation


class MainWindow:
    """Display state and key routing of the calculator window.

    Keys are forwarded to the callbacks installed by whoever drives the
    window; a key with no callback does nothing.
    """

    def __init__(self) -> None:
        self.input_text = "0"
        self.input_is_error = False
        self.formula_text = ""
        self.mem_text = ""
        self.extra_key: Optional[str] = None
        self.digit_callback: Optional[Callable[[int], None]] = None
        self.operation_callback: Optional[Callable[[Operation], None]] = None
        self.control_callback: Optional[Callable[[ControlKey], None]] = None
        self.controller_callback: Optional[Callable[[ControllerType], None]] = None

    def set_input_text(self, text: str) -> None:
        self.input_is_error = False
        self.input_text = text

    def set_error_text(self, text: str) -> None:
        self.input_is_error = True
        self.input_text = text

    def set_formula_text(self, text: str) -> None:
        self.formula_text = text

    def set_mem_text(self, text: str) -> None:
        self.mem_text = text

    def set_extra_key(self, key: Optional[str]) -> None:
        """Show the extra key with label ``key``, or hide it when ``key`` is None."""
        self.extra_key = key

    def press_digit(self, digit: int) -> None:
        if not 0 <= digit <= 9:
            raise ValueError(f"no key for digit {digit!r}")
        if self.digit_callback is not None:
            self.digit_callback(digit)

    def press_operation(self, operation: Operation) -> None:
        if self.operation_callback is not None:
            self.operation_callback(operation)

    def press_control(self, key: ControlKey) -> None:
        if self.control_callback is not None:
            self.control_callback(key)

    def clear_memory(self) -> None:
        """The memory-clear key: blank the memory marker in the window itself."""
        self.mem_text = ""

    def select_controller(self, label: str) -> None:
        """Switch number type by its label; unknown labels are ignored."""
        try:
            controller_type = ControllerType.from_label(label)
        except ValueError:
            return
        if self.controller_callback is not None:
            self.controller_callback(controller_type)