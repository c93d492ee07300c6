"""
Benchmark Package

Iterative vs. closed-form summation benchmark: runner, records and reports.
"""

from .models import BenchmarkSummary, ComparisonRecord, FORMULA, ITERATIVE
from .reporting import ReportGenerator
from .runner import BenchmarkRunner, faster_method

__all__ = [
    "BenchmarkSummary",
    "ComparisonRecord",
    "BenchmarkRunner",
    "ReportGenerator",
    "FORMULA",
    "ITERATIVE",
    "faster_method",
]
