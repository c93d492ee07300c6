"""
Benchmark Report Generation

Produces JSON and Markdown reports from BenchmarkSummary objects.
"""
from __future__ import annotations

import json
from pathlib import Path

from .models import BenchmarkSummary


class ReportGenerator:
    """Generates JSON and Markdown benchmark reports."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def save_json(self, summary: BenchmarkSummary) -> Path:
        """Write full results as JSON."""
        path = self.output_dir / "benchmark_results.json"
        with open(path, "w") as f:
            json.dump(summary.to_dict(), f, indent=2)
        return path

    def generate_markdown(self, summary: BenchmarkSummary) -> Path:
        """Generate a Markdown report with one row per tested value."""
        path = self.output_dir / "benchmark_report.md"

        lines = [
            "# Sum 1..n Benchmark Report",
            "",
            f"**Timestamp:** {summary.timestamp}",
            f"**Duration:** {summary.duration:.1f}s",
            f"**Numeric Mode:** {summary.numeric_mode}",
            f"**Tested Values:** {summary.total_values}",
            f"**Consistent:** {summary.consistent_count} / {summary.total_values}",
            "",
            "## Executive Summary",
            "",
            f"- **Formula faster:** {summary.formula_wins}",
            f"- **Iterative faster:** {summary.iterative_wins}",
            f"- **Total iterative time:** {summary.total_time_iterative:.6f}s",
            f"- **Total formula time:** {summary.total_time_formula:.6f}s",
        ]

        if summary.largest_consistent is not None:
            lines.append(f"- **Largest consistent value:** {summary.largest_consistent}")
        if summary.mismatch_count:
            mismatched = ", ".join(str(v) for v in summary.mismatched_values)
            lines.append(f"- **Mismatched values:** {mismatched}")

        lines.extend([
            "",
            "## Results by Tested Value",
            "",
            "| n | Iterative (s) | Formula (s) | Difference (s) | Faster | Consistent |",
            "|---|---------------|-------------|----------------|--------|------------|",
        ])
        for r in summary.records:
            verdict = "yes" if r.consistent else f"**no** ({r.iterative.result} vs {r.formula.result})"
            lines.append(
                f"| {r.value} | {r.iterative.elapsed:.6f} | {r.formula.elapsed:.6f} | "
                f"{abs(r.time_difference):.6f} | {r.faster_method} | {verdict} |"
            )

        with open(path, "w") as f:
            f.write("\n".join(lines) + "\n")

        return path
