"""Utility functions."""

from .filters import filter_options, filter_records, matches_filters, normalize_date
from .pager import PAGE_SIZE, build_page, clamp_page, paginate, total_pages
from .export import export_records_to_csv

__all__ = [
    "filter_options",
    "filter_records",
    "matches_filters",
    "normalize_date",
    "PAGE_SIZE",
    "build_page",
    "clamp_page",
    "paginate",
    "total_pages",
    "export_records_to_csv",
]
