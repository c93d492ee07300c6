#!/usr/bin/env python3
"""
Sum 1..n Benchmark

Times an iterative summation against the closed form n(n + 1) / 2 for
each tested value, printing the time difference, the faster method and
whether both results agree.

Usage:
    python bin/benchmark.py
    python bin/benchmark.py --values 1,10,100 --no-color
    python bin/benchmark.py --config benchmarks/values.yaml --output results/benchmark
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from addupto.cli import run


if __name__ == "__main__":
    sys.exit(run())
