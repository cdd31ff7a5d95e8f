"""The interactive driver: one prompt-compute-print cycle per session."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

from promptcalc.config import SessionConfig
from promptcalc.core import calculate
from promptcalc.exceptions import CalculatorError, InvalidInputError
from promptcalc.operands import parse_operand

if TYPE_CHECKING:
    from promptcalc.session import Session

logger = logging.getLogger(__name__)

PROMPT_FIRST_OPERAND = "Enter a value ?"
PROMPT_SECOND_OPERAND = "Enter a second value ?"
PROMPT_OPERATOR = "Enter an operand ?"


class Outcome(enum.IntEnum):
    """How a session ended; the value is the process exit status."""

    SUCCESS = 0
    COMPUTATION_FAILED = 1
    UNRECOGNIZED_OPERATOR = 2


def run_calculation(session: Session, config: SessionConfig | None = None) -> Outcome:
    """
    Run exactly one calculation cycle and close the session.

    The three prompts are always issued once each, in order. Computation
    errors are logged rather than raised; the session is closed on every
    exit path, including unexpected exceptions.

    Args:
        session: Handle to read answers from and write output to
        config: Session settings (defaults when omitted)

    Returns:
        The session outcome
    """
    config = config or SessionConfig()

    with session:
        session.emit(config.banner)

        left = parse_operand(session.ask(PROMPT_FIRST_OPERAND))
        right = parse_operand(session.ask(PROMPT_SECOND_OPERAND))
        token = session.ask(PROMPT_OPERATOR)

        if config.strict_operands:
            failed = False
            for operand in (left, right):
                try:
                    operand.unwrap()
                except InvalidInputError as e:
                    logger.error("Invalid operand %r: %s", e.value, e.reason)
                    failed = True
            if failed:
                return Outcome.COMPUTATION_FAILED

        try:
            calculation = calculate(left, token, right)
        except CalculatorError as e:
            logger.error("Calculation failed: %s", e)
            return Outcome.COMPUTATION_FAILED

        logger.debug("Dispatched %r to %s", calculation.token, calculation.operator.name)
        session.emit(str(calculation))

        if not calculation.operator.recognized:
            return Outcome.UNRECOGNIZED_OPERATOR
        return Outcome.SUCCESS
