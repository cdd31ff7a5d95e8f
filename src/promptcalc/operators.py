"""Closed set of operator symbols and their dispatch."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from promptcalc.operations import add, divide, multiply, subtract

if TYPE_CHECKING:
    from collections.abc import Callable

UNRECOGNIZED_OPERATOR_RESULT = "Not a proper operand !"


class Operator(enum.Enum):
    """An operator symbol, or UNRECOGNIZED for anything outside the set."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    UNRECOGNIZED = None

    @classmethod
    def from_symbol(cls, token: str) -> Operator:
        """Resolve a raw token; surrounding whitespace is ignored."""
        symbol = token.strip()
        for member in cls:
            if member.value == symbol:
                return member
        return cls.UNRECOGNIZED

    @property
    def recognized(self) -> bool:
        return self is not Operator.UNRECOGNIZED

    def apply(self, a: float, b: float) -> float | str:
        """
        Run the arithmetic operation this symbol selects.

        Returns:
            The numeric result, or UNRECOGNIZED_OPERATOR_RESULT for
            UNRECOGNIZED

        Raises:
            DivisionByZeroError: For DIVIDE with b == 0
        """
        if self is Operator.UNRECOGNIZED:
            return UNRECOGNIZED_OPERATOR_RESULT
        return _OPERATIONS[self](a, b)


_OPERATIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
}
