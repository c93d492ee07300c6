from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Any

from ..timing import Measurement

FORMULA = "Formula"
ITERATIVE = "Iterative"


@dataclass
class ComparisonRecord:
    """Iterative vs. formula comparison for one tested value."""
    value: int
    iterative: Measurement
    formula: Measurement

    # Derived by the runner
    time_difference: float = 0.0  # iterative - formula, seconds
    faster_method: str = ITERATIVE
    consistent: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)


@dataclass
class BenchmarkSummary:
    """Complete benchmark summary."""
    timestamp: str
    duration: float
    numeric_mode: str
    total_values: int

    consistent_count: int = 0
    mismatch_count: int = 0
    formula_wins: int = 0
    iterative_wins: int = 0

    # Seconds summed over every tested value
    total_time_iterative: float = 0.0
    total_time_formula: float = 0.0

    # Largest value whose results were still consistent
    largest_consistent: Optional[int] = None

    records: List[ComparisonRecord] = field(default_factory=list)

    @property
    def mismatched_values(self) -> List[int]:
        return [r.value for r in self.records if not r.consistent]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "timestamp": self.timestamp,
            "duration": self.duration,
            "numeric_mode": self.numeric_mode,
            "total_values": self.total_values,
            "consistent_count": self.consistent_count,
            "mismatch_count": self.mismatch_count,
            "formula_wins": self.formula_wins,
            "iterative_wins": self.iterative_wins,
            "total_time_iterative": self.total_time_iterative,
            "total_time_formula": self.total_time_formula,
            "largest_consistent": self.largest_consistent,
            "mismatched_values": self.mismatched_values,
            "records": [r.to_dict() for r in self.records],
        }
