"""
Quick stats: period-over-period comparison.

Compares the current window of N days (ending today) with the N days
immediately before it: check-in counts, top symptoms, overall severity and
how the latest check-in sits against the window average.
"""

import logging
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from journal.checkin.models import CheckInRecord
from journal.analysis.constants import (
    DEFAULT_QUICK_STATS_DAYS,
    LATEST_VS_AVERAGE_BAND,
    QUICK_STATS_SEVERITY_DIGITS,
    TOP_SYMPTOMS_LIMIT,
    TREND_PERCENT_THRESHOLD,
)
from journal.analysis.models import (
    AverageSeverityComparison,
    CheckInCountComparison,
    LatestCheckInData,
    LatestComparison,
    LatestSymptomComparison,
    PeriodWindow,
    QuickStats,
    TimePeriod,
    TopSymptom,
    TrendDirection,
)
from journal.analysis.services.symptom_aggregator import collect_severities
from journal.analysis.services.utils import (
    as_utc,
    date_key,
    end_of_day,
    mean,
    round_half_up,
    severity_of,
    start_of_day,
    utc_day,
    utc_now,
)

logger = logging.getLogger(__name__)


def classify_trend(current_avg: Optional[float], previous_avg: Optional[float]) -> TrendDirection:
    """
    Classify a change in average severity.

    A drop of more than 10% is improving, a rise of more than 10% is
    worsening, anything else (or no previous average) is stable.
    """
    if current_avg is None or not previous_avg:
        return TrendDirection.STABLE

    percent_change = (current_avg - previous_avg) / previous_avg * 100

    if percent_change < -TREND_PERCENT_THRESHOLD:
        return TrendDirection.IMPROVING
    if percent_change > TREND_PERCENT_THRESHOLD:
        return TrendDirection.WORSENING
    return TrendDirection.STABLE


def period_windows(
    days: int = DEFAULT_QUICK_STATS_DAYS,
    now: Optional[datetime] = None
) -> PeriodWindow:
    """
    Compute the inclusive UTC bounds of the current and previous windows.

    Current is [today - days + 1, today]; previous is the block of the same
    length ending the day before current starts.
    """
    today = utc_day(now or utc_now())
    current_first = today - timedelta(days=days - 1)
    previous_last = current_first - timedelta(days=1)
    previous_first = previous_last - timedelta(days=days - 1)

    return PeriodWindow(
        currentStart=start_of_day(current_first),
        currentEnd=end_of_day(today),
        previousStart=start_of_day(previous_first),
        previousEnd=end_of_day(previous_last),
        days=days,
    )


def top_symptoms(
    current: Dict[str, List[float]],
    previous: Dict[str, List[float]],
    limit: int = TOP_SYMPTOMS_LIMIT,
    digits: int = QUICK_STATS_SEVERITY_DIGITS
) -> List[TopSymptom]:
    """
    Most frequent symptoms of the current window with their trend.

    Args:
        current: Symptom name -> severities in the current window
        previous: Symptom name -> severities in the previous window
        limit: Number of symptoms to return
        digits: Rounding of the reported average severity
    """
    results: List[TopSymptom] = []

    for name, values in current.items():
        avg = round_half_up(mean(values), digits)
        previous_values = previous.get(name)
        previous_avg = mean(previous_values) if previous_values else None

        results.append(TopSymptom(
            name=name,
            frequency=len(values),
            avgSeverity=avg,
            trend=classify_trend(avg, previous_avg),
        ))

    results.sort(key=lambda s: s.frequency, reverse=True)
    return results[:limit]


def _overall_average(symptom_map: Dict[str, List[float]]) -> float:
    flat = [v for values in symptom_map.values() for v in values]
    return round_half_up(mean(flat), 2) if flat else 0


def _latest_checkin(
    checkins: List[CheckInRecord],
    current_map: Dict[str, List[float]]
) -> Optional[LatestCheckInData]:
    if not checkins:
        return None

    latest = max(checkins, key=lambda c: as_utc(c.timestamp))
    comparisons: List[LatestSymptomComparison] = []

    for name, value in latest.symptom_items():
        severity = severity_of(value)
        window_values = current_map.get(name)
        if severity is None or not window_values:
            continue

        average = round_half_up(mean(window_values), 1)
        difference = severity - average

        if difference > LATEST_VS_AVERAGE_BAND:
            trend = LatestComparison.ABOVE
        elif difference < -LATEST_VS_AVERAGE_BAND:
            trend = LatestComparison.BELOW
        else:
            trend = LatestComparison.EQUAL

        comparisons.append(LatestSymptomComparison(
            name=name,
            latestValue=severity,
            averageValue=average,
            trend=trend,
        ))

    if not comparisons:
        return None

    return LatestCheckInData(timestamp=latest.timestamp, symptoms=comparisons)


def _within(checkins: List[CheckInRecord], start: datetime, end: datetime) -> List[CheckInRecord]:
    return [c for c in checkins if start <= as_utc(c.timestamp) <= end]


def compare_periods(
    current_checkins: List[CheckInRecord],
    previous_checkins: List[CheckInRecord],
    days: int = DEFAULT_QUICK_STATS_DAYS,
    now: Optional[datetime] = None,
    severity_digits: int = QUICK_STATS_SEVERITY_DIGITS
) -> QuickStats:
    """
    Calculate quick statistics for a period-over-period comparison.

    Args:
        current_checkins: Check-ins of the current window (a superset is
            fine, records outside the window are ignored)
        previous_checkins: Check-ins of the previous window (same rule)
        days: Length of each window in days
        now: Reference instant (defaults to current UTC time)
        severity_digits: Rounding of each top symptom's average severity

    Returns:
        QuickStats comparing the two windows
    """
    window = period_windows(days, now)
    current = _within(current_checkins, window.currentStart, window.currentEnd)
    previous = _within(previous_checkins, window.previousStart, window.previousEnd)

    current_count = len(current)
    previous_count = len(previous)
    change = current_count - previous_count
    percent_change = round_half_up(change / previous_count * 100, 1) if previous_count else 0

    current_map = collect_severities(current)
    previous_map = collect_severities(previous)

    current_avg = _overall_average(current_map)
    previous_avg = _overall_average(previous_map)

    logger.debug(
        f"Quick stats over {days} days: {current_count} current vs "
        f"{previous_count} previous check-ins"
    )

    return QuickStats(
        period={
            "current": TimePeriod(
                start=date_key(window.currentStart),
                end=date_key(window.currentEnd),
                days=days,
            ),
            "previous": TimePeriod(
                start=date_key(window.previousStart),
                end=date_key(window.previousEnd),
                days=days,
            ),
        },
        checkInCount=CheckInCountComparison(
            current=current_count,
            previous=previous_count,
            change=change,
            percentChange=percent_change,
        ),
        topSymptoms=top_symptoms(current_map, previous_map, digits=severity_digits),
        averageSeverity=AverageSeverityComparison(
            current=current_avg,
            previous=previous_avg,
            change=round_half_up(current_avg - previous_avg, 2),
            trend=classify_trend(current_avg, previous_avg),
        ),
        latestCheckIn=_latest_checkin(current, current_map),
    )
