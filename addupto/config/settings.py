"""
Application Settings

Environment configuration for terminal presentation. Benchmark semantics
never depend on the environment.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum


class NumericMode(str, Enum):
    """Numeric representation used by the summation strategies."""
    EXACT = "exact"  # arbitrary-precision int
    FLOAT = "float"  # IEEE-754 double


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class Settings:
    """Application settings from environment."""

    color: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        log_level = os.getenv("ADDUPTO_LOG_LEVEL", "WARNING").strip().upper()
        if log_level not in LOG_LEVELS:
            logging.getLogger(__name__).warning(
                f"Ignoring unknown ADDUPTO_LOG_LEVEL '{log_level}', using WARNING"
            )
            log_level = "WARNING"
        return cls(
            color="NO_COLOR" not in os.environ,
            log_level=log_level,
        )
