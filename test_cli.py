"""Tests for the console report and CSV export."""

import asyncio

import pandas as pd
import pytest

from main import main, parse_args
from src.data import generate_mock_data
from src.utils import export_records_to_csv


def test_export_records_to_csv(tmp_path):
    """Exported CSV has one row per record and the source columns."""
    print("\n=== Testing CSV Export ===")

    records = generate_mock_data(count=12, seed=4)
    path = export_records_to_csv(records, str(tmp_path / "out"))

    assert path.exists()
    assert path.name.startswith("records_")
    df = pd.read_csv(path)
    assert len(df) == 12
    assert list(df.columns) == [
        "id", "date", "competition", "tipster", "home", "away", "market",
        "units", "odds", "result", "profit_units", "profit_percent",
    ]
    assert df["id"].tolist()[0] == "bet-0"
    assert set(df["result"]) <= {"WIN", "LOSS", "VOID"}
    print("[OK] CSV export PASSED")


def test_export_empty(tmp_path):
    """An empty selection still writes a header-only file."""
    path = export_records_to_csv([], str(tmp_path))
    assert path.read_text().strip().startswith("id,date,competition")


def test_cli_demo_report_with_export(tmp_path, capsys):
    """Demo report prints KPIs and exports the filtered records."""
    args = parse_args(["--demo", "--seed", "5", "--result", "LOSS", "--export", str(tmp_path)])
    exit_code = asyncio.run(main(args))

    assert exit_code == 0
    output = capsys.readouterr().out
    assert "Performance" in output
    assert "Using demo data" in output

    files = list(tmp_path.glob("records_*.csv"))
    assert len(files) == 1
    df = pd.read_csv(files[0])
    assert (df["result"] == "LOSS").all()


def test_cli_invalid_sheet_url():
    """An invalid link ends with exit code 1 without any request."""
    args = parse_args(["https://example.com/not-a-sheet"])
    assert asyncio.run(main(args)) == 1


def test_parse_args_defaults():
    args = parse_args([])
    assert args.sheet_url is None
    assert args.page == 1
    assert args.result == "all"
    assert args.export is None

    args = parse_args(["--export"])
    assert args.export == ""


def test_parse_args_result_choices():
    """Result filter takes outcome names exactly as they are stored."""
    assert parse_args(["--result", "VOID"]).result == "VOID"
    with pytest.raises(SystemExit):
        parse_args(["--result", "void"])
