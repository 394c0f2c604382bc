"""Pydantic models for data structures."""

from .schemas import (
    OutcomeKind,
    BetRecord,
    KPIMetrics,
    FilterState,
    ProfitPoint,
    ResultSlice,
    Page,
    SourceInfo,
)

__all__ = [
    "OutcomeKind",
    "BetRecord",
    "KPIMetrics",
    "FilterState",
    "ProfitPoint",
    "ResultSlice",
    "Page",
    "SourceInfo",
]
