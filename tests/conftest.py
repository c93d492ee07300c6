"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for the summation benchmark.

Usage:
    pytest tests/                    # Run all tests
    pytest tests/ -v                 # Verbose output
    pytest tests/ --quick            # Skip slow tests
"""

import itertools
import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from addupto.config import BenchmarkConfig
from addupto.timing import Measurement


# =============================================================================
# Custom Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: marks tests as slow")


def pytest_addoption(parser):
    """Add custom command line options"""
    parser.addoption(
        "--quick",
        action="store_true",
        default=False,
        help="Skip slow tests",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests if --quick is specified"""
    if config.getoption("--quick"):
        skip_slow = pytest.mark.skip(reason="Skipped with --quick")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def small_config() -> BenchmarkConfig:
    """Values small enough to keep the iterative loop instant"""
    return BenchmarkConfig(values=(0, 1, 10, 100))


@pytest.fixture
def tmp_output(tmp_path) -> Path:
    return tmp_path / "benchmark_output"


@pytest.fixture
def scripted_timer() -> Callable[[Iterable[float]], Callable[..., Measurement]]:
    """
    Factory for a timer that runs the computation but reports durations
    from a fixed sequence instead of the clock.
    """

    def _make(durations: Iterable[float]):
        it = itertools.cycle(list(durations))

        def timer(func, *args, **kwargs):
            return Measurement(elapsed=next(it), result=func(*args, **kwargs))

        return timer

    return _make
