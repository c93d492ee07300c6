"""
addupto

Benchmark of two equivalent summations of 1..n: an iterative scan and
the closed form n(n + 1) / 2.
"""

from .strategies import sum_formula, sum_iterative
from .timing import Measurement, measure

__version__ = "1.0.0"

__all__ = [
    "Measurement",
    "measure",
    "sum_formula",
    "sum_iterative",
]
