"""Google Sheets CSV export client."""

import re

import httpx

from src.models.schemas import BetRecord
from src.parsing import parse_csv_data


class SheetError(Exception):
    """Base error for loading a spreadsheet."""


class UnresolvableIdentifier(SheetError):
    """The URL does not contain a spreadsheet ID."""


class TransportFailure(SheetError):
    """The export endpoint could not be reached or refused the request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class VacantSource(SheetError):
    """The spreadsheet has no usable data rows."""


SPREADSHEET_ID_PATTERN = re.compile(r"/d/([a-zA-Z0-9_-]+)")
GID_PATTERN = re.compile(r"[?#&]gid=([0-9]+)")


def extract_spreadsheet_id(url: str) -> str:
    """Extract the document ID from a shared spreadsheet link."""
    match = SPREADSHEET_ID_PATTERN.search(url or "")
    if not match:
        raise UnresolvableIdentifier(
            "Spreadsheet ID not found. Make sure you are using a valid Google Sheets link."
        )
    return match.group(1)


def build_export_url(url: str, base_url: str = "https://docs.google.com/spreadsheets/d") -> str:
    """Build the CSV export URL for a shared link, keeping the tab (gid) if present."""
    spreadsheet_id = extract_spreadsheet_id(url)
    export_url = f"{base_url.rstrip('/')}/{spreadsheet_id}/export?format=csv"

    gid_match = GID_PATTERN.search(url)
    if gid_match:
        export_url += f"&gid={gid_match.group(1)}"

    return export_url


class SheetsClient:
    """Client for the Google Sheets CSV export endpoint."""

    def __init__(
        self,
        base_url: str = "https://docs.google.com/spreadsheets/d",
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client."""
        await self._client.aclose()

    async def fetch_csv(self, url: str) -> str:
        """Download the CSV export for a shared spreadsheet link.

        Raises:
            UnresolvableIdentifier: the link has no spreadsheet ID (no request is made)
            TransportFailure: network error or non-success status
        """
        export_url = build_export_url(url, self.base_url)

        try:
            response = await self._client.get(export_url)
        except httpx.HTTPError as e:
            raise TransportFailure(f"Could not reach the spreadsheet: {e}") from e

        if not response.is_success:
            raise TransportFailure(
                f"Could not access the spreadsheet (Error {response.status_code}). "
                'Check that it is shared as "Public" or "Anyone with the link".',
                status_code=response.status_code,
            )

        return response.text

    async def fetch_records(self, url: str) -> list[BetRecord]:
        """Download and parse a shared spreadsheet."""
        text = await self.fetch_csv(url)
        return parse_csv_data(text)
