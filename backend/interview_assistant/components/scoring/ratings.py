"""Shared rating scale helpers: half-up rounding and qualitative labels."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence, Tuple

# Ordered (minimum average, label); the first threshold met wins.
RATING_THRESHOLDS: Tuple[Tuple[float, str], ...] = (
    (2.5, "Strong"),
    (1.5, "Adequate"),
)
FALLBACK_RATING = "Concern"

RATING_SCALE_MIN = 1
RATING_SCALE_MAX = 3


def round_half_up(value: float, places: int = 0) -> float:
    """Round halves up, not to even.

    ``round(12.5)`` is 12 in Python; the hiring team's historical reports were
    produced with 13, so every percentage and average goes through here.
    """
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)


def rating_label(average: float) -> str:
    for minimum, label in RATING_THRESHOLDS:
        if average >= minimum:
            return label
    return FALLBACK_RATING


def coerce_rating(value, *, low: int = RATING_SCALE_MIN, high: int = RATING_SCALE_MAX) -> Optional[int]:
    """Return an integer rating within ``[low, high]`` or None when unrated."""
    if value is None or isinstance(value, bool):
        return None
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return None
    if not numeric.is_integer():
        return None
    rating = int(numeric)
    if rating < low or rating > high:
        return None
    return rating


def mean(values: Sequence[float], places: int = 2) -> Optional[float]:
    if not values:
        return None
    return round_half_up(sum(values) / len(values), places)
