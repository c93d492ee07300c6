"""
Display Module

Terminal formatting and colorized output for benchmark results.
Kept apart from the runner so comparisons can be tested without
capturing formatted text.
"""

from __future__ import annotations

from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .benchmark.models import BenchmarkSummary, ComparisonRecord


# =============================================================================
# Terminal Colors
# =============================================================================

class Colors:
    """ANSI color codes for terminal output."""
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    GRAY = "\033[90m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: str, enabled: bool = True) -> str:
    """Apply color to text."""
    if not enabled:
        return text
    return f"{color}{text}{Colors.RESET}"


def format_number(value) -> str:
    """Render integral floats without a trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# =============================================================================
# Record Formatting
# =============================================================================

def format_header(record: ComparisonRecord, color: bool = True) -> str:
    return colored(f"TESTED VALUE: {record.value}", Colors.CYAN, color)


def format_time_difference(record: ComparisonRecord) -> str:
    return (
        f"Time Difference: {abs(record.time_difference):.6f} seconds "
        f"({record.faster_method} is faster)"
    )


def format_consistency(record: ComparisonRecord, color: bool = True) -> str:
    if record.consistent:
        return colored(
            f"Results are consistent: {format_number(record.iterative.result)}",
            Colors.GREEN, color,
        )
    return colored(
        f"WARNING: Results different! "
        f"Iterative: {format_number(record.iterative.result)}, "
        f"Formula: {format_number(record.formula.result)}",
        Colors.RED, color,
    )


def format_record(record: ComparisonRecord, color: bool = True) -> List[str]:
    """Lines of the output block for one tested value, blank line first."""
    return [
        "",
        format_header(record, color),
        format_time_difference(record),
        format_consistency(record, color),
    ]


def print_record(record: ComparisonRecord, color: bool = True) -> None:
    print("\n".join(format_record(record, color)))


# =============================================================================
# Summary
# =============================================================================

def print_success(msg: str, color: bool = True) -> None:
    print(f"  {colored('✓', Colors.GREEN, color)} {msg}")


def print_error(msg: str, color: bool = True) -> None:
    print(f"  {colored('✗', Colors.RED, color)} {msg}")


def print_summary(summary: BenchmarkSummary, color: bool = True) -> None:
    """Compact summary printed after the per-value blocks."""
    line = "=" * 60
    print(f"\n{colored(line, Colors.CYAN, color)}")
    print(colored(" Summary", Colors.CYAN + Colors.BOLD, color))
    print(colored(line, Colors.CYAN, color))

    status_color = Colors.GREEN if summary.mismatch_count == 0 else Colors.YELLOW
    consistent = f"{summary.consistent_count}/{summary.total_values}"
    print(f"  Numeric mode : {summary.numeric_mode}")
    print(f"  Consistent   : {colored(consistent, status_color, color)}")
    print(f"  Formula wins : {summary.formula_wins}")
    print(f"  Iterative    : {summary.total_time_iterative:.6f}s total")
    print(f"  Formula      : {summary.total_time_formula:.6f}s total")
    if summary.mismatch_count:
        values = ", ".join(str(v) for v in summary.mismatched_values)
        print(f"  Mismatches   : {colored(values, Colors.RED, color)}")
