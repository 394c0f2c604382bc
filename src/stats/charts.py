"""Chart series for the dashboard."""

from datetime import date
from typing import Iterable

from src.models.schemas import BetRecord, OutcomeKind, ProfitPoint, ResultSlice
from src.utils.filters import normalize_date


# Slices shown in the distribution chart, in display order
DISTRIBUTION_LABELS = {
    OutcomeKind.WIN: "Green (Win)",
    OutcomeKind.LOSS: "Red (Loss)",
    OutcomeKind.VOID: "Void",
}

DISTRIBUTION_COLORS = {
    OutcomeKind.WIN: "#10b981",
    OutcomeKind.LOSS: "#ef4444",
    OutcomeKind.VOID: "#94a3b8",
}


def _date_sort_key(record: BetRecord) -> tuple[int, date]:
    """Sort key for record dates; unparseable dates come first."""
    try:
        return (1, date.fromisoformat(normalize_date(record.date)[:10]))
    except ValueError:
        return (0, date.min)


def cumulative_profit(records: Iterable[BetRecord]) -> list[ProfitPoint]:
    """Running profit total ordered by date (bankroll evolution chart)."""
    ordered = sorted(records, key=_date_sort_key)

    points = []
    running = 0.0
    for index, record in enumerate(ordered):
        running += record.profit_units
        points.append(ProfitPoint(index=index, date=record.date, profit=round(running, 2)))
    return points


def result_distribution(records: Iterable[BetRecord]) -> list[ResultSlice]:
    """Count WIN / LOSS / VOID records, skipping empty slices."""
    counts = {kind: 0 for kind in DISTRIBUTION_LABELS}
    for record in records:
        if record.result in counts:
            counts[record.result] += 1

    return [
        ResultSlice(
            name=DISTRIBUTION_LABELS[kind],
            result=kind,
            value=count,
            color=DISTRIBUTION_COLORS[kind],
        )
        for kind, count in counts.items()
        if count > 0
    ]
