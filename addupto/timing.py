"""
Timing Helper

Wall-clock measurement of a single computation.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True)
class Measurement:
    """Elapsed seconds and return value of one timed invocation."""
    elapsed: float
    result: Any


def measure(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Measurement:
    """
    Run ``func`` once and return how long it took together with its result.

    Exceptions raised by ``func`` propagate unchanged; nothing is retried.
    """
    start = time.perf_counter()
    result = func(*args, **kwargs)
    elapsed = time.perf_counter() - start
    return Measurement(elapsed=max(elapsed, 0.0), result=result)
