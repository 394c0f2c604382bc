"""Dashboard filters over betting records."""

from typing import Iterable

from src.models.schemas import BetRecord, FilterState


ALL = "all"


def normalize_date(raw: str) -> str:
    """Normalize a sheet date to YYYY-MM-DD for comparison.

    "2023-10-25T12:00:00" -> "2023-10-25"
    "1/2/23"             -> "2023-02-01"  (DD/MM/YY; two-digit years are 20xx)

    Anything else is returned unchanged (trimmed).
    """
    value = (raw or "").strip()

    if "T" in value:
        value = value.split("T", 1)[0]

    if "/" in value:
        parts = value.split("/")
        if len(parts) == 3:
            day = parts[0].strip().rjust(2, "0")
            month = parts[1].strip().rjust(2, "0")
            year = parts[2].strip()
            if len(year) == 2:
                year = "20" + year
            value = f"{year}-{month}-{day}"

    return value


def _date_filter_active(value: str) -> bool:
    return bool(value) and value != ALL


def matches_filters(record: BetRecord, state: FilterState) -> bool:
    """Check a single record against every active filter."""
    if state.competition != ALL and record.competition != state.competition:
        return False
    if state.tipster != ALL and record.tipster != state.tipster:
        return False
    if state.result != ALL and record.result.value != state.result:
        return False
    if _date_filter_active(state.date) and normalize_date(record.date) != state.date:
        return False
    return True


def filter_records(records: Iterable[BetRecord], state: FilterState) -> list[BetRecord]:
    """Return the records matching the filter state, in input order."""
    return [r for r in records if matches_filters(r, state)]


def filter_options(records: Iterable[BetRecord]) -> dict[str, list[str]]:
    """Distinct competitions and tipsters for the filter dropdowns."""
    records = list(records)
    return {
        "competitions": sorted({r.competition for r in records if r.competition}),
        "tipsters": sorted({r.tipster for r in records if r.tipster}),
    }
