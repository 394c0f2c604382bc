"""Table pagination."""

import math
from typing import Sequence, TypeVar

from src.models.schemas import BetRecord, Page


PAGE_SIZE = 20

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, page_size: int = PAGE_SIZE) -> list[T]:
    """Slice one page (1-based) out of a sequence. The page is not clamped."""
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages needed for count items."""
    return math.ceil(count / page_size) if count > 0 else 0


def clamp_page(page: int, pages: int) -> int:
    """Keep a requested page within [1, pages]."""
    return max(1, min(page, max(pages, 1)))


def build_page(records: Sequence[BetRecord], page: int, page_size: int = PAGE_SIZE) -> Page:
    """Build the table page for a record list, clamping the page number."""
    pages = total_pages(len(records), page_size)
    page = clamp_page(page, pages)
    return Page(
        items=paginate(records, page, page_size),
        page=page,
        page_size=page_size,
        total_items=len(records),
        total_pages=pages,
    )
