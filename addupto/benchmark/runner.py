"""
Benchmark Runner

Times the iterative and closed-form summations for every tested value,
in list order, and collects the comparisons into ComparisonRecord objects.
The runner never prints; callers receive records through ``on_record``.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from ..config import BenchmarkConfig
from ..strategies import Strategy, strategies_for
from ..timing import Measurement, measure

from .models import FORMULA, ITERATIVE, BenchmarkSummary, ComparisonRecord

Timer = Callable[..., Measurement]


def faster_method(iterative_time: float, formula_time: float) -> str:
    """Label the faster method; ties go to the iterative strategy."""
    return FORMULA if iterative_time - formula_time > 0 else ITERATIVE


class BenchmarkRunner:
    """
    Executes the iterative vs. formula comparison over a configured list
    of tested values.

    Strategies and the timer are injectable so that alternative (or
    deliberately broken) implementations can be compared.
    """

    def __init__(
        self,
        config: Optional[BenchmarkConfig] = None,
        iterative: Optional[Strategy] = None,
        formula: Optional[Strategy] = None,
        timer: Timer = measure,
    ):
        self.config = config or BenchmarkConfig()
        default_iterative, default_formula = strategies_for(self.config.numeric_mode)
        self.iterative = iterative or default_iterative
        self.formula = formula or default_formula
        self.timer = timer
        self.logger = logging.getLogger("Benchmark")
        self.records: List[ComparisonRecord] = []

    def compare(self, n: int) -> ComparisonRecord:
        """Time both strategies for ``n`` (iterative first) and compare them."""
        iterative = self.timer(self.iterative, n)
        formula = self.timer(self.formula, n)

        diff = iterative.elapsed - formula.elapsed
        record = ComparisonRecord(
            value=n,
            iterative=iterative,
            formula=formula,
            time_difference=diff,
            faster_method=faster_method(iterative.elapsed, formula.elapsed),
            consistent=iterative.result == formula.result,
        )

        self.logger.debug(
            f"n={n}: iterative {iterative.elapsed:.6f}s, formula {formula.elapsed:.6f}s"
        )
        if not record.consistent:
            self.logger.warning(
                f"n={n}: results differ (iterative={iterative.result}, formula={formula.result})"
            )
        return record

    def run(self, on_record: Optional[Callable[[ComparisonRecord], None]] = None) -> List[ComparisonRecord]:
        """Run every tested value to completion, in order. Replaces earlier records."""
        self.records = []
        for n in self.config.values:
            record = self.compare(n)
            self.records.append(record)
            if on_record is not None:
                on_record(record)
        return list(self.records)

    def aggregate_results(self, duration: float) -> BenchmarkSummary:
        """Aggregate all collected records into a summary."""
        summary = BenchmarkSummary(
            timestamp=datetime.now().isoformat(),
            duration=duration,
            numeric_mode=self.config.numeric_mode.value,
            total_values=len(self.records),
            records=list(self.records),
        )

        for r in self.records:
            if r.consistent:
                summary.consistent_count += 1
                if summary.largest_consistent is None or r.value > summary.largest_consistent:
                    summary.largest_consistent = r.value
            else:
                summary.mismatch_count += 1

            if r.faster_method == FORMULA:
                summary.formula_wins += 1
            else:
                summary.iterative_wins += 1

            summary.total_time_iterative += r.iterative.elapsed
            summary.total_time_formula += r.formula.elapsed

        return summary
