"""Input validation functions with strict type checking."""

from typing import TypeVar

from promptcalc.exceptions import InvalidInputError

T = TypeVar("T", int, float)

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})
FALSY_VALUES = frozenset({"", "0", "false", "no", "off"})


def validate_number(value: T) -> T:
    """
    Validate that a value is a real number.

    NaN and infinities are accepted: they are legitimate IEEE 754 values that
    the arithmetic operations propagate.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is not an int or float (bool is rejected)
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    return value


def validate_flag(value: str) -> bool:
    """
    Interpret a textual on/off switch.

    Args:
        value: Text such as "1", "true", "off" (case-insensitive)

    Returns:
        The boolean the text stands for

    Raises:
        InvalidInputError: If the text is not a recognized switch value
    """
    normalized = value.strip().lower()
    if normalized in TRUTHY_VALUES:
        return True
    if normalized in FALSY_VALUES:
        return False
    raise InvalidInputError(value, "Expected a boolean switch")
