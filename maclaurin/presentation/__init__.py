"""Presentation — форматирование статистики и графики результата прохода."""

from .charts import (
    ChartData,
    ChartPanel,
    ChartSeries,
    ChartTheme,
    SweepChartView,
    build_chart_data,
)
from .formatting import (
    StatsCard,
    format_error_tooltip,
    format_exponential,
    format_fixed,
    format_location,
    format_max_error,
    format_step,
    format_value_tooltip,
)

__all__ = [
    # Charts
    "ChartTheme",
    "ChartSeries",
    "ChartPanel",
    "ChartData",
    "SweepChartView",
    "build_chart_data",
    # Formatting
    "StatsCard",
    "format_exponential",
    "format_fixed",
    "format_max_error",
    "format_location",
    "format_step",
    "format_value_tooltip",
    "format_error_tooltip",
]
