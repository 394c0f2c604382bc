"""Record store holding the dashboard's current data snapshot."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from rich.console import Console

from config import get_settings
from src.api.sheets import SheetError, SheetsClient, VacantSource, extract_spreadsheet_id
from src.models.schemas import (
    BetRecord,
    FilterState,
    KPIMetrics,
    Page,
    ProfitPoint,
    ResultSlice,
)
from src.stats import calculate_kpis, cumulative_profit, result_distribution
from src.utils.filters import filter_options, filter_records
from src.utils.pager import build_page

from .mock import generate_mock_data


console = Console(stderr=True)


@dataclass
class DashboardView:
    """Everything the dashboard shows for one filter selection."""
    filters: FilterState
    records: list[BetRecord]  # filtered, in source order
    kpis: KPIMetrics
    page: Page
    cumulative: list[ProfitPoint] = field(default_factory=list)
    distribution: list[ResultSlice] = field(default_factory=list)
    competitions: list[str] = field(default_factory=list)
    tipsters: list[str] = field(default_factory=list)


class RecordStore:
    """Owns the loaded record collection.

    A load replaces the whole snapshot. Every load takes a new generation
    number, and a sheet response is only applied if no other load started
    after it, so a slow response cannot overwrite newer data.
    """

    def __init__(self, client_factory: Optional[Callable[[], SheetsClient]] = None):
        self.settings = get_settings()
        self._client_factory = client_factory or self._default_client
        self._records: tuple[BetRecord, ...] = ()
        self._generation = 0

        self.source = "empty"  # empty, sheet or demo
        self.sheet_url = ""
        self.last_error: Optional[str] = None
        self.loaded_at: Optional[datetime] = None

    def _default_client(self) -> SheetsClient:
        return SheetsClient(
            base_url=self.settings.sheets_export_base_url,
            timeout=self.settings.fetch_timeout,
        )

    @property
    def records(self) -> tuple[BetRecord, ...]:
        """Current snapshot."""
        return self._records

    @property
    def generation(self) -> int:
        """Number of the latest load started."""
        return self._generation

    def _replace(self, records: list[BetRecord], source: str, sheet_url: str = ""):
        self._records = tuple(records)
        self.source = source
        self.sheet_url = sheet_url
        self.last_error = None
        self.loaded_at = datetime.now()

    async def load_sheet(self, url: str) -> bool:
        """Fetch and parse a shared spreadsheet into the store.

        An invalid link is rejected before it takes a generation, so it never
        cancels a load already in flight.

        Returns:
            True if the snapshot was replaced, False if a newer load started
            while this one was in flight (its data or its error is discarded)

        Raises:
            SheetError: the link is invalid, the sheet is unreachable or empty
        """
        try:
            extract_spreadsheet_id(url)
        except SheetError as e:
            self.last_error = str(e)
            console.print(f"[red]Invalid spreadsheet link: {e}[/red]")
            raise

        self._generation += 1
        generation = self._generation

        console.print(f"[yellow]Loading spreadsheet...[/yellow] [dim]{url}[/dim]")
        client = self._client_factory()
        try:
            records = await client.fetch_records(url)
            if not records:
                raise VacantSource("Spreadsheet empty or invalid format.")
        except SheetError as e:
            if generation != self._generation:
                console.print(f"[dim]Discarding stale spreadsheet error: {e}[/dim]")
                return False
            self.last_error = str(e)
            console.print(f"[red]Failed to load spreadsheet: {e}[/red]")
            raise
        finally:
            await client.close()

        if generation != self._generation:
            console.print("[dim]Discarding stale spreadsheet response[/dim]")
            return False

        self._replace(records, "sheet", sheet_url=url)
        console.print(f"[green]Loaded {len(records)} records[/green]")
        return True

    def load_demo(self, seed: Optional[int] = None) -> list[BetRecord]:
        """Replace the snapshot with generated demo records."""
        self._generation += 1
        records = generate_mock_data(seed=seed)
        self._replace(records, "demo")
        return records

    def clear(self):
        """Disconnect from the current sheet and drop all records."""
        self._generation += 1
        self._records = ()
        self.source = "empty"
        self.sheet_url = ""
        self.last_error = None
        self.loaded_at = None

    def get_record(self, record_id: str) -> Optional[BetRecord]:
        """Find a record by ID in the current snapshot."""
        return next((r for r in self._records if r.id == record_id), None)

    def view(self, filters: Optional[FilterState] = None, page: int = 1) -> DashboardView:
        """Derive the filtered view, KPIs, table page and chart series."""
        filters = filters or FilterState()
        filtered = filter_records(self._records, filters)
        options = filter_options(self._records)

        return DashboardView(
            filters=filters,
            records=filtered,
            kpis=calculate_kpis(filtered),
            page=build_page(filtered, page, self.settings.page_size),
            cumulative=cumulative_profit(filtered),
            distribution=result_distribution(filtered),
            competitions=options["competitions"],
            tipsters=options["tipsters"],
        )


# Singleton instance
_store: Optional[RecordStore] = None


def get_store() -> RecordStore:
    """Get record store instance (singleton)."""
    global _store
    if _store is None:
        _store = RecordStore()
    return _store
