"""Export utilities for saving betting records."""

from datetime import datetime
from pathlib import Path
from typing import Iterable

import pandas as pd

from src.models.schemas import BetRecord


def export_records_to_csv(
    records: Iterable[BetRecord],
    output_dir: str = "output",
) -> Path:
    """Export records to a CSV file.

    Args:
        records: BetRecords to write (typically the filtered view)
        output_dir: Directory to save the CSV file

    Returns:
        Path to the created CSV file
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    data = [
        {
            "id": r.id,
            "date": r.date,
            "competition": r.competition,
            "tipster": r.tipster,
            "home": r.home,
            "away": r.away,
            "market": r.market,
            "units": r.units,
            "odds": r.odds,
            "result": r.result.value,
            "profit_units": r.profit_units,
            "profit_percent": r.profit_percent,
        }
        for r in records
    ]

    df = pd.DataFrame(data, columns=[
        "id", "date", "competition", "tipster", "home", "away", "market",
        "units", "odds", "result", "profit_units", "profit_percent",
    ])

    # Generate filename with timestamp
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    filename = output_path / f"records_{timestamp}.csv"

    df.to_csv(filename, index=False)

    return filename
