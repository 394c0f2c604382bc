"""Record store and demo data."""

from .mock import generate_mock_data
from .store import DashboardView, RecordStore, get_store

__all__ = ["generate_mock_data", "DashboardView", "RecordStore", "get_store"]
