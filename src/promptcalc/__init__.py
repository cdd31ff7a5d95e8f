"""
Interactive two-operand calculator.

One run prompts for two values and an operator symbol, prints a single
result line and closes the session.
"""

from promptcalc.config import SessionConfig
from promptcalc.core import Calculation, calculate, format_number
from promptcalc.driver import Outcome, run_calculation
from promptcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
    SessionClosedError,
)
from promptcalc.operands import OperandParse, parse_operand
from promptcalc.operations import add, divide, multiply, subtract
from promptcalc.operators import UNRECOGNIZED_OPERATOR_RESULT, Operator
from promptcalc.session import ConsoleSession, Session
from promptcalc.validators import validate_flag, validate_number

__all__ = [
    "UNRECOGNIZED_OPERATOR_RESULT",
    "Calculation",
    "CalculatorError",
    "ConsoleSession",
    "DivisionByZeroError",
    "InvalidInputError",
    "OperandParse",
    "Operator",
    "Outcome",
    "Session",
    "SessionClosedError",
    "SessionConfig",
    "add",
    "calculate",
    "divide",
    "format_number",
    "multiply",
    "parse_operand",
    "run_calculation",
    "subtract",
    "validate_flag",
    "validate_number",
]

__version__ = "0.1.0"
