"""Pydantic schemas for betting records and derived views."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class OutcomeKind(str, Enum):
    """Outcome of a bet."""
    WIN = "WIN"
    LOSS = "LOSS"
    VOID = "VOID"
    PENDING = "PENDING"


class BetRecord(BaseModel):
    """One wagering event as read from the spreadsheet."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    id: str
    date: str = ""  # free form: ISO, DD/MM/YYYY, ...
    competition: str = ""
    tipster: str = ""
    home: str = ""
    away: str = ""
    market: str = ""
    units: float = 0.0
    odds: float = 0.0
    result: OutcomeKind = OutcomeKind.PENDING
    profit_units: float = 0.0
    profit_percent: float = 0.0


class KPIMetrics(BaseModel):
    """Summary statistics over a record collection."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    total_profit: float = 0.0
    total_bets: int = 0
    win_rate: float = 0.0  # percent, WIN / (WIN + LOSS)
    avg_odds: float = 0.0
    roi: float = 0.0  # percent
    current_bankroll_growth: float = 0.0


class FilterState(BaseModel):
    """Filters selected in the dashboard."""
    competition: str = "all"
    tipster: str = "all"
    result: str = "all"
    date: str = ""  # YYYY-MM-DD, "" or "all" means unfiltered


class ProfitPoint(BaseModel):
    """One point of the cumulative profit curve."""
    index: int
    date: str
    profit: float


class ResultSlice(BaseModel):
    """One slice of the result distribution chart."""
    name: str
    result: OutcomeKind
    value: int
    color: str = ""  # hex fill for the chart


class Page(BaseModel):
    """A page of records for the table."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    items: list[BetRecord] = Field(default_factory=list)
    page: int = 1
    page_size: int = 20
    total_items: int = 0
    total_pages: int = 0


class SourceInfo(BaseModel):
    """Where the current snapshot came from."""
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    source: str = "empty"  # empty, sheet or demo
    sheet_url: str = ""
    generation: int = 0
    loaded_at: Optional[datetime] = None
    last_error: Optional[str] = None
    total_records: int = 0
    applied: Optional[bool] = None  # set by load requests only
