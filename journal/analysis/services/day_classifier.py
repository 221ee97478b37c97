"""
Good/bad day classification.

Labels every day of a range by symptom burden. Days without a check-in are
interpolated from the nearest logged days, leaning towards "bad" when the
neighbours disagree.
"""

from datetime import date, datetime
from typing import Callable, Dict, List, Optional, Tuple

from journal.checkin.models import CheckInRecord
from journal.analysis.constants import BAD_DAY_AVG_SEVERITY, BAD_DAY_MAX_SEVERITY
from journal.analysis.models import DayQuality, DayQualityEntry, GoodBadDayAnalysis
from journal.analysis.services.utils import (
    date_key,
    iter_days,
    mean,
    round_half_up,
    severity_of,
    utc_day,
)


def is_bad_day(max_severity: float, avg_severity: float) -> bool:
    """Bad day if any symptom reaches 7 or the day's average reaches 6."""
    return max_severity >= BAD_DAY_MAX_SEVERITY or avg_severity >= BAD_DAY_AVG_SEVERITY


def _classify_logged_day(day: str, checkins: List[CheckInRecord]) -> DayQualityEntry:
    severities: List[float] = []
    names = set()

    for checkin in checkins:
        for name, value in checkin.symptom_items():
            names.add(name)
            severity = severity_of(value)
            if severity is not None:
                severities.append(severity)

    max_severity = max(severities) if severities else 0
    avg_severity = mean(severities)

    return DayQualityEntry(
        date=day,
        quality=DayQuality.BAD if is_bad_day(max_severity, avg_severity) else DayQuality.GOOD,
        avgSeverity=round_half_up(avg_severity, 1),
        maxSeverity=max_severity,
        symptomCount=len(names),
        hasCheckIn=True,
    )


def interpolate_quality(
    before: Optional[DayQualityEntry],
    after: Optional[DayQualityEntry]
) -> DayQuality:
    """
    Quality for a day without a check-in, from its nearest logged neighbours.

    Both neighbours: bad if either is bad. One neighbour: copy it.
    None: good.
    """
    neighbours = [n for n in (before, after) if n is not None]
    if any(n.quality == DayQuality.BAD for n in neighbours):
        return DayQuality.INTERPOLATED_BAD
    return DayQuality.INTERPOLATED_GOOD


def _fill_missing_days(entries: List[DayQualityEntry]) -> None:
    """Interpolate every day without a check-in, in two linear passes."""
    previous_logged: List[Optional[DayQualityEntry]] = []
    last: Optional[DayQualityEntry] = None
    for entry in entries:
        previous_logged.append(last)
        if entry.hasCheckIn:
            last = entry

    following: Optional[DayQualityEntry] = None
    for index in range(len(entries) - 1, -1, -1):
        entry = entries[index]
        if entry.hasCheckIn:
            following = entry
        else:
            entry.quality = interpolate_quality(previous_logged[index], following)


def _is_good(entry: DayQualityEntry) -> bool:
    return "good" in entry.quality.value


def _is_bad(entry: DayQualityEntry) -> bool:
    return "bad" in entry.quality.value


def average_gap(entries: List[DayQualityEntry], predicate: Callable[[DayQualityEntry], bool]) -> float:
    """Mean distance in days between consecutive matching days; 0 if fewer than two."""
    indices = [i for i, entry in enumerate(entries) if predicate(entry)]

    if len(indices) < 2:
        return 0

    total = indices[-1] - indices[0]
    return round_half_up(total / (len(indices) - 1), 1)


def bad_day_streaks(entries: List[DayQualityEntry]) -> Tuple[float, int]:
    """
    Runs of consecutive bad days.

    Returns:
        tuple of (average run length rounded to 1 decimal, longest run)
    """
    runs: List[int] = []
    running = 0

    for entry in entries:
        if _is_bad(entry):
            running += 1
        elif running:
            runs.append(running)
            running = 0

    if running:
        runs.append(running)

    if not runs:
        return 0, 0

    return round_half_up(sum(runs) / len(runs), 1), max(runs)


def classify_days(
    checkins: List[CheckInRecord],
    start_date: datetime,
    end_date: datetime
) -> GoodBadDayAnalysis:
    """
    Analyze good vs bad days with interpolation for missing days.

    Args:
        checkins: Check-ins within [start_date, end_date]
        start_date: First instant of the range
        end_date: Last instant of the range

    Returns:
        GoodBadDayAnalysis with one entry per UTC day of the range
    """
    by_day: Dict[str, List[CheckInRecord]] = {}
    for checkin in checkins:
        by_day.setdefault(date_key(checkin.timestamp), []).append(checkin)

    first: date = utc_day(start_date)
    last: date = utc_day(end_date)

    entries: List[DayQualityEntry] = []
    for day in iter_days(first, last):
        key = date_key(day)
        if key in by_day:
            entries.append(_classify_logged_day(key, by_day[key]))
        else:
            entries.append(DayQualityEntry(date=key, quality=DayQuality.GOOD, hasCheckIn=False))

    _fill_missing_days(entries)

    avg_streak, longest_streak = bad_day_streaks(entries)

    return GoodBadDayAnalysis(
        totalGoodDays=sum(1 for e in entries if _is_good(e)),
        totalBadDays=sum(1 for e in entries if _is_bad(e)),
        avgTimeBetweenGoodDays=average_gap(entries, _is_good),
        avgTimeBetweenBadDays=average_gap(entries, _is_bad),
        avgBadDayStreakLength=avg_streak,
        longestBadDayStreak=longest_streak,
        dailyQuality=entries,
    )
