"""Parsing of user-supplied operand text."""

from __future__ import annotations

import math
from dataclasses import dataclass

from promptcalc.exceptions import InvalidInputError


@dataclass(frozen=True)
class OperandParse:
    """Outcome of parsing one operand: a value, or NaN plus the reason it failed."""

    text: str
    value: float
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.reason is None

    def unwrap(self) -> float:
        """
        Return the parsed value, refusing failed parses.

        Raises:
            InvalidInputError: If the text was not a number
        """
        if self.reason is not None:
            raise InvalidInputError(self.text, self.reason)
        return self.value


def parse_operand(text: str) -> OperandParse:
    """
    Parse operand text as a float.

    Surrounding whitespace is ignored. Anything ``float()`` accepts is a
    number, including "nan" and "inf". Failure never raises: the result
    holds NaN so that lenient callers can let it flow through arithmetic.
    """
    stripped = text.strip()
    if not stripped:
        return OperandParse(stripped, math.nan, "Empty operand")
    try:
        return OperandParse(stripped, float(stripped))
    except ValueError:
        return OperandParse(stripped, math.nan, "Not a number")
