"""Custom exceptions for the promptcalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class InvalidInputError(CalculatorError):
    """
    Raised for unusable input.

    Covers non-numeric arguments to the arithmetic operations, unrecognized
    on/off switches and log levels in the environment config, and operand
    text that fails to parse when strict operand mode is on.
    """

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason


class SessionClosedError(CalculatorError):
    """Raised when reading from a session that has already been closed."""

    def __init__(self, prompt: str | None = None) -> None:
        super().__init__("Session is closed", prompt)
        self.prompt = prompt
