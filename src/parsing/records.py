"""Parse spreadsheet CSV exports into BetRecords."""

import math
import re

from src.models.schemas import BetRecord

from .classifier import classify_result
from .tokenizer import split_csv_line


# Column positions in the sheet export
COL_DATE = 0
COL_COMPETITION = 1
COL_TIPSTER = 2
COL_HOME = 3
COL_AWAY = 4
COL_MARKET = 5
COL_UNITS = 6
COL_ODDS = 7
COL_RESULT = 8
COL_PROFIT = 9
COL_PROFIT_PERCENT = 10

MIN_COLUMNS = 5  # Shorter rows are dropped

_LINE_BREAK = re.compile(r"\r?\n")
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def clean_value(value: str | None) -> str:
    """Trim a field and strip one layer of surrounding quotes."""
    if not value:
        return ""
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value.strip()


def parse_number(value: str | None) -> float:
    """Parse a number that may use a comma as decimal separator.

    Only the leading numeric part is read ("2.5u" is 2.5). Anything without
    one, or anything that overflows, reads as 0.
    """
    text = clean_value(value).replace(",", ".", 1)
    match = _NUMBER_PREFIX.match(text)
    if not match:
        return 0.0
    number = float(match.group())
    if not math.isfinite(number):
        return 0.0
    return number


def _field(values: list[str], index: int, default: str = "") -> str:
    return values[index] if index < len(values) else default


def parse_row(values: list[str], row_index: int) -> BetRecord | None:
    """Build a BetRecord from tokenized fields, or None if the row is too short."""
    if len(values) < MIN_COLUMNS:
        return None

    profit = parse_number(_field(values, COL_PROFIT, "0"))
    profit_percent = parse_number(_field(values, COL_PROFIT_PERCENT, "0").replace("%", "", 1))

    return BetRecord(
        id=f"row-{row_index}",
        date=clean_value(_field(values, COL_DATE)),
        competition=clean_value(_field(values, COL_COMPETITION)),
        tipster=clean_value(_field(values, COL_TIPSTER)),
        home=clean_value(_field(values, COL_HOME)),
        away=clean_value(_field(values, COL_AWAY)),
        market=clean_value(_field(values, COL_MARKET)),
        units=parse_number(_field(values, COL_UNITS, "0")),
        odds=parse_number(_field(values, COL_ODDS, "0")),
        result=classify_result(clean_value(_field(values, COL_RESULT)), profit),
        profit_units=profit,
        profit_percent=profit_percent,
    )


def parse_csv_data(csv_text: str) -> list[BetRecord]:
    """Parse a full CSV export (header + data rows).

    The first non-blank line is the header and is always skipped. Rows with
    fewer than 5 fields are dropped without error, and numeric cells that
    cannot be parsed read as 0.

    Args:
        csv_text: Raw CSV body as downloaded from the sheet

    Returns:
        Records in source row order
    """
    lines = [line for line in _LINE_BREAK.split(csv_text) if line.strip()]
    if len(lines) < 2:
        return []

    records = []
    for i in range(1, len(lines)):
        record = parse_row(split_csv_line(lines[i]), i)
        if record is not None:
            records.append(record)
    return records
