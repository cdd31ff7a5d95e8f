"""Core arithmetic operations."""

from promptcalc.exceptions import DivisionByZeroError
from promptcalc.validators import validate_number


def add(a: float, b: float) -> float:
    """
    Add two numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Args:
        a: First operand
        b: Second operand

    Returns:
        Sum of a and b

    Raises:
        InvalidInputError: If inputs are not numbers
    """
    validate_number(a)
    validate_number(b)

    return a + b


def subtract(a: float, b: float) -> float:
    """
    Subtract b from a.

    Properties:
        - Anti-commutative: subtract(a, b) == -subtract(b, a)
        - Identity: subtract(a, 0) == a

    Args:
        a: Minuend
        b: Subtrahend

    Returns:
        Difference of a and b

    Raises:
        InvalidInputError: If inputs are not numbers
    """
    validate_number(a)
    validate_number(b)

    return a - b


def multiply(a: float, b: float) -> float:
    """
    Multiply two numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a

    Args:
        a: First factor
        b: Second factor

    Returns:
        Product of a and b

    Raises:
        InvalidInputError: If inputs are not numbers
    """
    validate_number(a)
    validate_number(b)

    return a * b


def divide(a: float, b: float) -> float:
    """
    Divide a by b.

    Division by zero always raises, whatever the numerator, so callers
    never see a non-finite value produced by a zero divisor.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        InvalidInputError: If inputs are not numbers
        DivisionByZeroError: If b is zero
    """
    validate_number(a)
    validate_number(b)

    if b == 0:
        raise DivisionByZeroError(a)

    return a / b
