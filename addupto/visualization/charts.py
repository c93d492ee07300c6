"""
Timing Charts

Static PNG chart of elapsed time per strategy against the tested value.
"""

import logging
from pathlib import Path
from typing import Optional

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt

from ..benchmark.models import BenchmarkSummary

COLORS = {
    "ITERATIVE": "#e74c3c",
    "FORMULA": "#3498db",
}


class TimingChartGenerator:
    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def plot_timings(self, summary: BenchmarkSummary, path: Path) -> Optional[Path]:
        """Log-log line chart of elapsed seconds per strategy; None if nothing is plottable."""
        # log scales cannot show n = 0 or zero durations
        points = [
            r for r in summary.records
            if r.value > 0 and r.iterative.elapsed > 0 and r.formula.elapsed > 0
        ]
        if not points:
            self.logger.info("No positive timings to plot")
            return None

        values = [r.value for r in points]

        fig, ax = plt.subplots(figsize=(7, 4))
        ax.plot(values, [r.iterative.elapsed for r in points], marker="o",
                color=COLORS["ITERATIVE"], label="Iterative")
        ax.plot(values, [r.formula.elapsed for r in points], marker="s",
                color=COLORS["FORMULA"], label="Formula")

        for r in points:
            if not r.consistent:
                ax.axvline(r.value, color="#95a5a6", linestyle=":", alpha=0.7)

        ax.set_xscale("log")
        ax.set_yscale("log")
        ax.set_xlabel("n")
        ax.set_ylabel("Elapsed (s)")
        ax.set_title(f"Sum 1..n timings ({summary.numeric_mode})")
        ax.grid(True, linestyle="--", alpha=0.5)
        ax.legend()

        path = Path(path)
        fig.savefig(path, format="png", bbox_inches="tight", dpi=100)
        plt.close(fig)
        return path
