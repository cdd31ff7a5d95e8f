"""Environment-driven settings for a calculator session."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from promptcalc.exceptions import InvalidInputError
from promptcalc.validators import validate_flag

if TYPE_CHECKING:
    from collections.abc import Mapping

ENV_PREFIX = "PROMPTCALC_"

DEFAULT_BANNER = "🧮 Welcome to the Calculator!"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class SessionConfig:
    """Settings for one run of the interactive driver."""

    banner: str = DEFAULT_BANNER
    strict_operands: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self) -> None:
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise InvalidInputError(self.log_level, "Unknown log level")
        object.__setattr__(self, "log_level", level)

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SessionConfig:
        """
        Build a config from PROMPTCALC_* variables.

        Args:
            environ: Mapping to read instead of os.environ

        Raises:
            InvalidInputError: If a variable holds an unusable value
        """
        env = os.environ if environ is None else environ
        return cls(
            banner=env.get(f"{ENV_PREFIX}BANNER", DEFAULT_BANNER),
            strict_operands=validate_flag(env.get(f"{ENV_PREFIX}STRICT_OPERANDS", "")),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
