"""API clients for external data sources."""

from .sheets import (
    SheetError,
    SheetsClient,
    TransportFailure,
    UnresolvableIdentifier,
    VacantSource,
    build_export_url,
    extract_spreadsheet_id,
)

__all__ = [
    "SheetError",
    "SheetsClient",
    "TransportFailure",
    "UnresolvableIdentifier",
    "VacantSource",
    "build_export_url",
    "extract_spreadsheet_id",
]
