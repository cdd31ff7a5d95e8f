"""A single calculation and its printed form."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal

from promptcalc.operands import OperandParse
from promptcalc.operators import Operator

RESULT_PREFIX = "✅ Result:"

# Integral values below this print positionally, as JavaScript numbers do.
INTEGRAL_DISPLAY_LIMIT = 1e21


def format_number(value: float) -> str:
    """
    Render a float the way the result line shows it.

    Example:
        >>> format_number(5.0)
        '5'
        >>> format_number(1e20)
        '100000000000000000000'
        >>> format_number(0.5)
        '0.5'
        >>> format_number(float("nan"))
        'NaN'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < INTEGRAL_DISPLAY_LIMIT:
        if value == 0:
            return "0"
        # Shortest round-trip digits, zero padded: 1.2345678901234567e19 prints
        # 12345678901234567000, not the exact binary value.
        return format(Decimal(repr(value)).to_integral_value(), "f")
    return repr(value)


@dataclass(frozen=True)
class Calculation:
    """Immutable record of one prompt-compute-print cycle."""

    left: OperandParse
    right: OperandParse
    token: str
    operator: Operator
    result: float | str

    @property
    def formatted_result(self) -> str:
        if isinstance(self.result, str):
            return self.result
        return format_number(self.result)

    def __str__(self) -> str:
        return (
            f"{RESULT_PREFIX} {self.left.text} {self.token} {self.right.text}"
            f" = {self.formatted_result}"
        )


def calculate(left: OperandParse, token: str, right: OperandParse) -> Calculation:
    """
    Dispatch the operator token over two parsed operands.

    Failed parses contribute their NaN value. The token is echoed stripped.

    Raises:
        DivisionByZeroError: If the token selects division and right is zero
    """
    operator = Operator.from_symbol(token)
    result = operator.apply(left.value, right.value)
    return Calculation(
        left=left,
        right=right,
        token=token.strip(),
        operator=operator,
        result=result,
    )
