"""Spreadsheet CSV parsing."""

from .tokenizer import split_csv_line
from .classifier import classify_result
from .records import clean_value, parse_number, parse_row, parse_csv_data

__all__ = [
    "split_csv_line",
    "classify_result",
    "clean_value",
    "parse_number",
    "parse_row",
    "parse_csv_data",
]
