"""
Visualization Package
"""

from .charts import TimingChartGenerator

__all__ = ["TimingChartGenerator"]
