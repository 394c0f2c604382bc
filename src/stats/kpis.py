"""KPI aggregation over betting records."""

from typing import Iterable

from src.models.schemas import BetRecord, KPIMetrics, OutcomeKind


# Display figure only: profit scaled as if 1 unit were 5% of the bankroll
BANKROLL_GROWTH_MULTIPLIER = 5


def calculate_kpis(records: Iterable[BetRecord]) -> KPIMetrics:
    """Calculate summary metrics for a record collection.

    Win rate only counts resolved bets (WIN and LOSS); average odds use every
    record, VOID and PENDING included.

    Args:
        records: Records to aggregate (may be empty)

    Returns:
        KPIMetrics with every figure rounded to 2 decimals
    """
    records = list(records)
    total_bets = len(records)
    if total_bets == 0:
        return KPIMetrics()

    total_profit = sum(r.profit_units for r in records)
    total_staked = sum(r.units for r in records)

    wins = sum(1 for r in records if r.result == OutcomeKind.WIN)
    losses = sum(1 for r in records if r.result == OutcomeKind.LOSS)
    resolved = wins + losses
    win_rate = wins / resolved * 100 if resolved > 0 else 0.0

    avg_odds = sum(r.odds for r in records) / total_bets
    roi = total_profit / total_staked * 100 if total_staked > 0 else 0.0

    return KPIMetrics(
        total_profit=round(total_profit, 2),
        total_bets=total_bets,
        win_rate=round(win_rate, 2),
        avg_odds=round(avg_odds, 2),
        roi=round(roi, 2),
        current_bankroll_growth=round(total_profit * BANKROLL_GROWTH_MULTIPLIER, 2),
    )


def format_kpi_context(kpis: KPIMetrics) -> str:
    """Format KPIs as the portfolio context line for AI analysis."""
    return (
        f"Total Profit: {kpis.total_profit}, "
        f"ROI: {kpis.roi}%, "
        f"WinRate: {kpis.win_rate}%"
    )
