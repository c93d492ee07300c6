"""
Benchmark Configuration

The tested-value list and numeric mode, injected into the runner.
Loadable from a YAML file or a comma-separated string.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Tuple, Union

import yaml

from .settings import NumericMode

DEFAULT_TESTED_VALUES: Tuple[int, ...] = (
    1,
    10,
    100,
    1_000,
    10_000,
    100_000,
    1_000_000,
    10_000_000,
    100_000_000,
    1_000_000_000,
    9_000_000_000,
)


class ConfigurationError(ValueError):
    """Raised for an invalid tested-value list or numeric mode."""


def _coerce_mode(mode: Union[str, NumericMode]) -> NumericMode:
    if isinstance(mode, NumericMode):
        return mode
    try:
        return NumericMode(str(mode).strip().lower())
    except ValueError:
        choices = ", ".join(m.value for m in NumericMode)
        raise ConfigurationError(f"Unknown numeric mode '{mode}' (expected one of: {choices})") from None


@dataclass(frozen=True)
class BenchmarkConfig:
    """Configuration for a benchmark run."""
    values: Tuple[int, ...] = DEFAULT_TESTED_VALUES
    numeric_mode: NumericMode = NumericMode.EXACT

    def __post_init__(self):
        values = tuple(self.values)
        if not values:
            raise ConfigurationError("At least one tested value must be provided")
        for v in values:
            # bool is an int subclass but never a meaningful upper bound
            if isinstance(v, bool) or not isinstance(v, int):
                raise ConfigurationError(f"Tested value must be an integer, got {v!r}")
            if v < 0:
                raise ConfigurationError(f"Tested value must be non-negative, got {v}")
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "numeric_mode", _coerce_mode(self.numeric_mode))

    @classmethod
    def from_yaml(cls, path: Path) -> "BenchmarkConfig":
        """
        Load a configuration file of the form::

            values: [1, 10, 100]
            numeric_mode: exact   # optional
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError) as e:
            raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {path}")
        if "values" not in data:
            raise ConfigurationError(f"Config file has no 'values' list: {path}")

        raw_values = data["values"]
        if not isinstance(raw_values, list):
            raise ConfigurationError("'values' must be a list of integers")

        return cls(
            values=tuple(raw_values),
            numeric_mode=data.get("numeric_mode", NumericMode.EXACT),
        )

    def with_mode(self, mode: Union[str, NumericMode]) -> "BenchmarkConfig":
        return BenchmarkConfig(values=self.values, numeric_mode=_coerce_mode(mode))


def parse_values(text: str) -> Tuple[int, ...]:
    """Parse '1,10,1_000' into a tuple of ints."""
    items: Iterable[str] = (part.strip() for part in text.split(","))
    values = []
    for item in items:
        if not item:
            continue
        try:
            values.append(int(item))
        except ValueError:
            raise ConfigurationError(f"Not an integer: '{item}'") from None
    return tuple(values)


def load_config(source: Any = None) -> BenchmarkConfig:
    """Build a config from a YAML path, or the defaults when ``source`` is None."""
    if source is None:
        return BenchmarkConfig()
    return BenchmarkConfig.from_yaml(Path(source))
