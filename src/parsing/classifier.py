"""Result classification from free-text labels and profit."""

from src.models.schemas import OutcomeKind


WIN_MARKERS = ("win", "green", "✅")
LOSS_MARKERS = ("loss", "red", "❌")
VOID_MARKERS = ("void", "push", "⚪")


def _has_marker(label: str, markers: tuple[str, ...]) -> bool:
    return any(marker in label for marker in markers)


def classify_result(label: str, profit: float) -> OutcomeKind:
    """Classify a bet outcome.

    Each category checks the label first and then the profit sign before
    moving on, so a "green" label with negative profit is still a WIN while
    an empty label with negative profit is a LOSS.

    Args:
        label: Result text from the sheet ("Green ✅", "red", "push", ...)
        profit: Parsed net profit in units

    Returns:
        OutcomeKind for the row
    """
    normalized = (label or "").lower().strip()

    if _has_marker(normalized, WIN_MARKERS):
        return OutcomeKind.WIN
    if profit > 0:
        return OutcomeKind.WIN
    if _has_marker(normalized, LOSS_MARKERS):
        return OutcomeKind.LOSS
    if profit < 0:
        return OutcomeKind.LOSS
    if _has_marker(normalized, VOID_MARKERS):
        return OutcomeKind.VOID
    if profit == 0:
        return OutcomeKind.VOID
    return OutcomeKind.PENDING
