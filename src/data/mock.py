"""Demo data for running the dashboard without a spreadsheet."""

import random
from datetime import date, timedelta

from src.models.schemas import BetRecord, OutcomeKind


TIPSTERS = ["Analista Pedro", "Machine Learning Bot", "Estrategia Corners"]
COMPETITIONS = ["Premier League", "Brasileirão Série A", "La Liga", "NBA", "Champions League"]
MARKETS = ["Over 2.5 Goals", "Home Win", "Asian Handicap -0.5", "BTTS Yes", "Corner Over 9.5"]

BASE_DATE = date(2023, 1, 1)


def generate_mock_data(count: int = 150, seed: int | None = None) -> list[BetRecord]:
    """Generate realistic-looking flat-stake records.

    Roughly 55% wins with about one in ten bets voided, one bet per day
    starting 2023-01-01.

    Args:
        count: Number of records
        seed: Random seed for reproducible data

    Returns:
        List of BetRecords
    """
    rng = random.Random(seed)
    records = []

    for i in range(count):
        is_win = rng.random() > 0.45
        is_void = rng.random() > 0.9

        result = OutcomeKind.WIN if is_win else OutcomeKind.LOSS
        if is_void:
            result = OutcomeKind.VOID

        odds = round(1.5 + rng.random() * 2.0, 2)
        units = 1.0

        if result == OutcomeKind.WIN:
            profit = odds * units - units
        elif result == OutcomeKind.LOSS:
            profit = -units
        else:
            profit = 0.0

        records.append(BetRecord(
            id=f"bet-{i}",
            date=(BASE_DATE + timedelta(days=i)).isoformat(),
            competition=rng.choice(COMPETITIONS),
            tipster=rng.choice(TIPSTERS),
            home="Team A",
            away="Team B",
            market=rng.choice(MARKETS),
            units=units,
            odds=odds,
            result=result,
            profit_units=round(profit, 2),
            profit_percent=round(profit * 100, 2),
        ))

    return records
