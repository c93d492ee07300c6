"""
Summation Strategies

Two equivalent ways to compute 1 + 2 + ... + n:

    - iterative: running total over a linear scan of [1, n]
    - formula:   closed form n(n + 1) / 2

Each strategy exists in an exact (arbitrary-precision int) flavour and a
float flavour that reproduces IEEE-754 double arithmetic.
"""

from typing import Callable, Tuple, Union

from .config.settings import NumericMode

Number = Union[int, float]
Strategy = Callable[[int], Number]


def sum_iterative(n: int) -> int:
    """Sum 1..n by accumulating a running total."""
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def sum_formula(n: int) -> int:
    """Sum 1..n with n(n + 1) / 2. n(n + 1) is always even so // is exact."""
    return n * (n + 1) // 2


def sum_iterative_float(n: int) -> float:
    total = 0.0
    for i in range(1, n + 1):
        total += i
    return total


def sum_formula_float(n: int) -> float:
    # Every operand is a double, so n(n + 1) rounds before the division.
    x = float(n)
    return x * (x + 1) / 2


def strategies_for(mode: NumericMode) -> Tuple[Strategy, Strategy]:
    """Return the (iterative, formula) pair for a numeric mode."""
    if mode is NumericMode.FLOAT:
        return sum_iterative_float, sum_formula_float
    return sum_iterative, sum_formula
