"""Tests for the filter engine and pagination."""

from src.models.schemas import BetRecord, FilterState, OutcomeKind
from src.utils import (
    build_page,
    clamp_page,
    filter_options,
    filter_records,
    normalize_date,
    paginate,
    total_pages,
)


def sample_records() -> list[BetRecord]:
    return [
        BetRecord(id="row-1", date="2023-10-25T12:00:00", competition="La Liga", tipster="Pedro",
                  result=OutcomeKind.WIN, profit_units=1.0),
        BetRecord(id="row-2", date="25/10/2023", competition="NBA", tipster="Bot",
                  result=OutcomeKind.LOSS, profit_units=-1.0),
        BetRecord(id="row-3", date="1/2/23", competition="La Liga", tipster="Bot",
                  result=OutcomeKind.VOID),
        BetRecord(id="row-4", date="2023-02-01", competition="", tipster="Pedro",
                  result=OutcomeKind.PENDING),
    ]


def test_normalize_date():
    """ISO timestamps and DD/MM/YYYY dates normalize to YYYY-MM-DD."""
    print("\n=== Testing Date Normalization ===")

    assert normalize_date("2023-10-25T12:00:00") == "2023-10-25"
    assert normalize_date("1/2/23") == "2023-02-01"
    assert normalize_date("25/10/2023") == "2023-10-25"
    assert normalize_date(" 2023-10-25 ") == "2023-10-25"
    assert normalize_date("5/3/2024") == "2024-03-05"
    assert normalize_date("10/2023") == "10/2023"
    assert normalize_date("Oct 25") == "Oct 25"
    assert normalize_date("") == ""
    print("[OK] Date normalization PASSED")


def test_all_filters_return_everything():
    """Default filter state is the identity."""
    records = sample_records()
    assert filter_records(records, FilterState()) == records
    assert filter_records(records, FilterState(date="all")) == records
    assert filter_records([], FilterState()) == []


def test_filter_by_competition_and_tipster():
    """Filters are exact matches combined with AND."""
    print("\n=== Testing Filter Engine ===")

    records = sample_records()

    la_liga = filter_records(records, FilterState(competition="La Liga"))
    assert [r.id for r in la_liga] == ["row-1", "row-3"]

    bot = filter_records(records, FilterState(tipster="Bot"))
    assert [r.id for r in bot] == ["row-2", "row-3"]

    both = filter_records(records, FilterState(competition="La Liga", tipster="Bot"))
    assert [r.id for r in both] == ["row-3"]

    assert filter_records(records, FilterState(competition="la liga")) == []
    print("[OK] Filter engine PASSED")


def test_filter_by_result():
    """Result filter matches the outcome name exactly."""
    records = sample_records()

    assert [r.id for r in filter_records(records, FilterState(result="WIN"))] == ["row-1"]
    assert [r.id for r in filter_records(records, FilterState(result="LOSS"))] == ["row-2"]
    assert [r.id for r in filter_records(records, FilterState(result="PENDING"))] == ["row-4"]
    assert filter_records(records, FilterState(result="loss")) == []
    assert FilterState(result="loss").result == "loss"


def test_filter_by_exact_date():
    """Dates match after normalization, across formats."""
    records = sample_records()

    oct_25 = filter_records(records, FilterState(date="2023-10-25"))
    assert [r.id for r in oct_25] == ["row-1", "row-2"]

    feb_1 = filter_records(records, FilterState(date="2023-02-01"))
    assert [r.id for r in feb_1] == ["row-3", "row-4"]

    assert filter_records(records, FilterState(date="2023-10-26")) == []


def test_filter_options():
    """Dropdown options are sorted, distinct and skip empty values."""
    options = filter_options(sample_records())
    assert options["competitions"] == ["La Liga", "NBA"]
    assert options["tipsters"] == ["Bot", "Pedro"]


def test_paginate():
    """Pages of 20 items, 1-based."""
    print("\n=== Testing Pager ===")

    items = list(range(45))
    assert paginate(items, 1) == list(range(20))
    assert paginate(items, 3) == [40, 41, 42, 43, 44]
    assert paginate(items, 4) == []
    assert paginate(items, 2, page_size=10) == list(range(10, 20))

    assert total_pages(45) == 3
    assert total_pages(40) == 2
    assert total_pages(0) == 0

    assert clamp_page(0, 3) == 1
    assert clamp_page(9, 3) == 3
    assert clamp_page(5, 0) == 1
    print("[OK] Pager PASSED")


def test_build_page_clamps():
    """build_page keeps the page number within range."""
    records = [BetRecord(id=f"row-{i}") for i in range(1, 26)]

    page = build_page(records, 7)
    assert page.page == 2
    assert page.total_pages == 2
    assert page.total_items == 25
    assert [r.id for r in page.items] == [f"row-{i}" for i in range(21, 26)]

    empty = build_page([], 3)
    assert empty.page == 1
    assert empty.items == []
    assert empty.total_pages == 0


if __name__ == "__main__":
    print("=" * 50)
    print("Filter Test Suite")
    print("=" * 50)

    test_normalize_date()
    test_all_filters_return_everything()
    test_filter_by_competition_and_tipster()
    test_filter_by_result()
    test_filter_by_exact_date()
    test_filter_options()
    test_paginate()
    test_build_page_clamps()

    print("\n" + "=" * 50)
    print("All tests PASSED!")
    print("=" * 50)
