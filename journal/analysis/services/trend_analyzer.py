"""
Symptom trend analysis.

Builds a per-day time series for one symptom and summary statistics over
the window.
"""

from datetime import datetime, timedelta
from typing import Dict, List, Optional

from journal.checkin.models import CheckInRecord
from journal.analysis.constants import DEFAULT_TREND_DAYS
from journal.analysis.models import DateRange, TrendAnalysis, TrendDataPoint, TrendStatistics
from journal.analysis.services.utils import (
    as_utc,
    date_key,
    median,
    numeric_stats,
    round_half_up,
    severity_of,
    standard_deviation,
    utc_now,
)


def analyze_symptom_trend(
    checkins: List[CheckInRecord],
    symptom: str,
    days: int = DEFAULT_TREND_DAYS,
    now: Optional[datetime] = None
) -> Optional[TrendAnalysis]:
    """
    Analyze trend data for a specific symptom over time.

    Args:
        checkins: Check-ins already limited to [now - days, now]
        symptom: Symptom name
        days: Window length used for the reported date range
        now: Reference instant (defaults to current UTC time)

    Returns:
        TrendAnalysis with daily averages and statistics, or None when no
        check-in carries a usable value for the symptom
    """
    if not checkins:
        return None

    by_day: Dict[str, List[float]] = {}
    all_values: List[float] = []

    for checkin in sorted(checkins, key=lambda c: as_utc(c.timestamp)):
        severity = severity_of(checkin.symptoms.get(symptom))
        if severity is None:
            continue
        by_day.setdefault(date_key(checkin.timestamp), []).append(severity)
        all_values.append(severity)

    if not all_values:
        return None

    data_points = [
        TrendDataPoint(
            date=day,
            value=round_half_up(sum(values) / len(values), 2),
            count=len(values),
        )
        for day, values in sorted(by_day.items())
    ]

    stats = numeric_stats(all_values)
    end = now or utc_now()

    return TrendAnalysis(
        symptom=symptom,
        dateRange=DateRange(
            start=date_key(end - timedelta(days=days)),
            end=date_key(end),
        ),
        dataPoints=data_points,
        statistics=TrendStatistics(
            average=stats["average"],
            min=stats["min"],
            max=stats["max"],
            median=median(all_values),
            standardDeviation=standard_deviation(all_values, stats["average"]),
        ),
    )
