"""Tests for CSV tokenizing, record parsing and result classification."""

from src.models.schemas import OutcomeKind
from src.parsing import classify_result, clean_value, parse_csv_data, parse_number, split_csv_line


HEADER = "Date,Competition,Tipster,Home,Away,Market,Units,Odds,Result,Profit,Profit %"


def test_split_csv_line():
    """Test quoted fields and escaped quotes."""
    print("\n=== Testing CSV Tokenizer ===")

    assert split_csv_line('a,"b,c",d') == ["a", "b,c", "d"]
    assert split_csv_line('a,"b""c",d') == ["a", 'b"c', "d"]
    assert split_csv_line(" a , b ,c ") == ["a", "b", "c"]
    assert split_csv_line("a,,c,") == ["a", "", "c", ""]
    assert split_csv_line("") == [""]

    # Unterminated quote swallows the rest of the line
    assert split_csv_line('a,"b,c') == ["a", "b,c"]
    print("[OK] CSV tokenizer PASSED")


def test_clean_and_parse_number():
    """Test value cleanup and tolerant number parsing."""
    print("\n=== Testing Number Parsing ===")

    assert clean_value('"Premier League"') == "Premier League"
    assert clean_value(None) == ""
    assert parse_number("1,5") == 1.5
    assert parse_number("2.25") == 2.25
    assert parse_number("-1") == -1.0
    assert parse_number("abc") == 0.0
    assert parse_number("") == 0.0
    assert parse_number("3u") == 3.0
    assert parse_number("1e999") == 0.0
    print("[OK] Number parsing PASSED")


def test_parse_full_row_with_comma_decimal():
    """A header plus one complete row gives exactly one record."""
    print("\n=== Testing Record Parser ===")

    csv_text = "\n".join([
        HEADER,
        '2023-10-25,Premier League,Pedro,Arsenal,Chelsea,Over 2.5,1,"1,5",Green ✅,"0,5",50%',
    ])
    records = parse_csv_data(csv_text)

    assert len(records) == 1
    bet = records[0]
    print(f"Parsed: {bet}")
    assert bet.id == "row-1"
    assert bet.date == "2023-10-25"
    assert bet.competition == "Premier League"
    assert bet.tipster == "Pedro"
    assert bet.home == "Arsenal"
    assert bet.away == "Chelsea"
    assert bet.market == "Over 2.5"
    assert bet.units == 1.0
    assert bet.odds == 1.5
    assert bet.result == OutcomeKind.WIN
    assert bet.profit_units == 0.5
    assert bet.profit_percent == 50.0
    print("[OK] Record parser PASSED")


def test_short_rows_are_dropped():
    """Rows with fewer than 5 fields are skipped silently."""
    records = parse_csv_data(HEADER + "\n2023-01-01,La Liga,Pedro")
    assert records == []

    csv_text = "\n".join([
        HEADER,
        "2023-01-01,La Liga,Pedro",
        "2023-01-02,La Liga,Pedro,Real,Barca",
    ])
    records = parse_csv_data(csv_text)
    assert len(records) == 1
    assert records[0].id == "row-2"
    # Missing numeric columns read as 0, so the result is VOID
    assert records[0].odds == 0.0
    assert records[0].result == OutcomeKind.VOID
    print("[OK] Short rows PASSED")


def test_blank_lines_and_crlf():
    """Blank lines are removed before numbering rows; CRLF is accepted."""
    csv_text = HEADER + "\r\n\r\n" + "01/02/2023,NBA,Bot,A,B,ML,2,1.9,red,-2,-100%\r\n   \r\n"
    records = parse_csv_data(csv_text)

    assert len(records) == 1
    assert records[0].id == "row-1"
    assert records[0].result == OutcomeKind.LOSS
    assert records[0].profit_units == -2.0
    assert records[0].profit_percent == -100.0


def test_header_only_or_empty():
    """No data rows means no records."""
    assert parse_csv_data("") == []
    assert parse_csv_data(HEADER) == []
    assert parse_csv_data("\n\n" + HEADER + "\n\n") == []


def test_unparsable_numbers_keep_row():
    """Non-numeric cells default to 0 without dropping the row."""
    csv_text = HEADER + "\n2023-01-01,NBA,Bot,A,B,ML,n/a,??,,x,y"
    records = parse_csv_data(csv_text)

    assert len(records) == 1
    assert records[0].units == 0.0
    assert records[0].odds == 0.0
    assert records[0].profit_units == 0.0
    assert records[0].result == OutcomeKind.VOID


def test_classify_result():
    """Labels win over profit within each category, in WIN, LOSS, VOID order."""
    print("\n=== Testing Result Classifier ===")

    assert classify_result("Green ✅", -5) == OutcomeKind.WIN
    assert classify_result("", -5) == OutcomeKind.LOSS
    assert classify_result("", 0) == OutcomeKind.VOID
    assert classify_result("mystery", 0) == OutcomeKind.VOID
    assert classify_result("mystery", 5) == OutcomeKind.WIN

    assert classify_result("  WIN ", 0) == OutcomeKind.WIN
    assert classify_result("Red ❌", 0) == OutcomeKind.LOSS
    assert classify_result("loss", 3) == OutcomeKind.WIN  # positive profit beats a loss label
    assert classify_result("push", -1) == OutcomeKind.LOSS
    assert classify_result("Void ⚪", 0) == OutcomeKind.VOID
    assert classify_result("pending", float("nan")) == OutcomeKind.PENDING
    print("[OK] Result classifier PASSED")


if __name__ == "__main__":
    print("=" * 50)
    print("Parsing Test Suite")
    print("=" * 50)

    test_split_csv_line()
    test_clean_and_parse_number()
    test_parse_full_row_with_comma_decimal()
    test_short_rows_are_dropped()
    test_blank_lines_and_crlf()
    test_header_only_or_empty()
    test_unparsable_numbers_keep_row()
    test_classify_result()

    print("\n" + "=" * 50)
    print("All tests PASSED!")
    print("=" * 50)
