"""
Configuration Package

Benchmark configuration and environment settings.
"""

from .benchmark_config import (
    DEFAULT_TESTED_VALUES,
    BenchmarkConfig,
    ConfigurationError,
    load_config,
    parse_values,
)
from .settings import NumericMode, Settings

__all__ = [
    "DEFAULT_TESTED_VALUES",
    "BenchmarkConfig",
    "ConfigurationError",
    "NumericMode",
    "Settings",
    "load_config",
    "parse_values",
]
