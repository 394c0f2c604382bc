"""Performance statistics and chart series."""

from .kpis import BANKROLL_GROWTH_MULTIPLIER, calculate_kpis, format_kpi_context
from .charts import cumulative_profit, result_distribution

__all__ = [
    "BANKROLL_GROWTH_MULTIPLIER",
    "calculate_kpis",
    "format_kpi_context",
    "cumulative_profit",
    "result_distribution",
]
