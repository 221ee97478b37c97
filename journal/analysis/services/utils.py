"""
Analysis utility functions.

Pure calculation helpers used across analysis modules.

Day boundaries are UTC calendar days: naive datetimes are taken to be UTC
(which is how MongoDB stores them), aware datetimes are converted to UTC
before the date is read.
"""

import math
from datetime import date, datetime, time, timezone, timedelta
from numbers import Number
from typing import Any, Dict, Iterable, List, Optional

from journal.analysis.models import SymptomValueType

DATE_KEY_FORMAT = "%Y-%m-%d"


def round_half_up(value: float, digits: int = 2) -> float:
    """Round with ties going up, e.g. 0.125 -> 0.13 and -2.5 -> -2 (digits=0)."""
    factor = 10 ** digits
    rounded = math.floor(value * factor + 0.5) / factor
    return int(rounded) if digits == 0 else rounded


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Number):
        return False
    try:
        return math.isfinite(value)
    except TypeError:
        return False


def numeric_stats(values: Iterable[Any]) -> Dict[str, float]:
    """
    Calculate min, max, and average for numeric values.

    Args:
        values: Candidate values; non-numeric and NaN entries are ignored

    Returns:
        dict with min, max and average (rounded to 2 decimals), all zero
        when there is nothing numeric
    """
    valid = [v for v in values if _is_number(v)]

    if not valid:
        return {"min": 0, "max": 0, "average": 0}

    return {
        "min": min(valid),
        "max": max(valid),
        "average": round_half_up(sum(valid) / len(valid), 2),
    }


def mean(values: List[float]) -> float:
    """Unrounded arithmetic mean; 0 for an empty list."""
    if not values:
        return 0
    return sum(values) / len(values)


def median(values: Iterable[float]) -> float:
    """Median of a list of numbers; 0 for an empty list."""
    ordered = sorted(values)

    if not ordered:
        return 0

    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return round_half_up((ordered[mid - 1] + ordered[mid]) / 2, 2)
    return ordered[mid]


def standard_deviation(values: List[float], mean_value: float) -> float:
    """Population standard deviation around a precomputed mean."""
    if not values:
        return 0

    variance = sum((v - mean_value) ** 2 for v in values) / len(values)
    return round_half_up(math.sqrt(variance), 2)


def _has_numeric_severity(value: Any) -> bool:
    return severity_of(value) is not None


def symptom_value_type(values: Iterable[Any]) -> SymptomValueType:
    """
    Determine the type of a symptom based on its observed values.

    Boolean if every non-null value is a bool, numeric if every non-null
    value is a number or carries a numeric severity, categorical otherwise.
    """
    valid = [v for v in values if v is not None]

    if not valid:
        return SymptomValueType.CATEGORICAL

    if all(isinstance(v, bool) for v in valid):
        return SymptomValueType.BOOLEAN

    if all(_has_numeric_severity(v) for v in valid):
        return SymptomValueType.NUMERIC

    return SymptomValueType.CATEGORICAL


def unique_values(values: Iterable[Any]) -> List[Any]:
    """Distinct non-null values in first-seen order."""
    seen: List[Any] = []
    for value in values:
        if value is not None and value not in seen:
            seen.append(value)
    return seen


def severity_of(value: Any) -> Optional[float]:
    """
    Extract severity from a symptom value.

    Handles both bare numbers (legacy documents) and symptom objects
    ``{"severity": n}``.

    Returns:
        The severity, or None when it is missing or not a finite number
    """
    if _is_number(value):
        return value

    if isinstance(value, dict):
        severity = value.get("severity")
    else:
        severity = getattr(value, "severity", None)

    if _is_number(severity):
        return severity
    return None


# ─────────────────────────────────────────────────────────────────
# Dates
# ─────────────────────────────────────────────────────────────────


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(instant: datetime) -> datetime:
    """Attach UTC to naive datetimes, convert aware ones to UTC."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def utc_day(instant: datetime) -> date:
    return as_utc(instant).date()


def date_key(instant) -> str:
    """Format the UTC calendar day of an instant (or a plain date) as YYYY-MM-DD."""
    if not isinstance(instant, datetime):
        return instant.strftime(DATE_KEY_FORMAT)
    return utc_day(instant).strftime(DATE_KEY_FORMAT)


def parse_day_key(key: str) -> date:
    return datetime.strptime(key, DATE_KEY_FORMAT).date()


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max, tzinfo=timezone.utc)


def days_between(earlier: date, later: date) -> int:
    return (later - earlier).days


def iter_days(first: date, last: date) -> Iterable[date]:
    """Every calendar day from first to last, inclusive."""
    current = first
    while current <= last:
        yield current
        current += timedelta(days=1)
