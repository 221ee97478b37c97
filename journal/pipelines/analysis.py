"""
Check-in analytics pipeline functions.

Stateless orchestration: validate parameters, read check-ins from the store,
then run the in-memory analytics. Store errors propagate unchanged.
"""

import logging
import math
from datetime import datetime, timedelta
from typing import Optional, Union

from bson import ObjectId

from common.utils.exceptions import ValidationException
from journal.config import settings
from journal.checkin.services.checkin_store import CheckInStore
from journal.analysis.constants import (
    CONTEXT_SEVERITY_DIGITS,
    CONTEXT_TREND_DAYS,
    DEFAULT_QUICK_STATS_DAYS,
    DEFAULT_TREND_DAYS,
)
from journal.analysis.models import (
    CheckInContext,
    DoctorSummary,
    QuickStats,
    StreakAnalysis,
    SymptomsAnalysis,
    TrendAnalysis,
)
from journal.analysis.services.context_builder import build_checkin_context
from journal.analysis.services.period_comparator import compare_periods, period_windows
from journal.analysis.services.streak_calculator import calculate_streak
from journal.analysis.services.summary_composer import compose_doctor_summary
from journal.analysis.services.symptom_aggregator import aggregate_symptoms
from journal.analysis.services.trend_analyzer import analyze_symptom_trend
from journal.analysis.services.utils import as_utc, end_of_day, start_of_day, utc_now

logger = logging.getLogger(__name__)

DateInput = Union[str, datetime, None]


async def get_symptoms_analysis_pipeline(
    checkin_store: CheckInStore,
    user_id: str
) -> SymptomsAnalysis:
    """
    Aggregate symptom statistics over a user's full history.

    Args:
        checkin_store: For data retrieval
        user_id: Current user's ID

    Returns:
        SymptomsAnalysis, most frequent symptom first
    """
    _validate_user_id(user_id)

    checkins = await checkin_store.find_all_for_user(user_id)
    analysis = aggregate_symptoms(checkins)

    logger.info(f"Symptoms analysis for user {user_id}: {len(analysis.symptoms)} symptoms")
    return analysis


async def get_streak_pipeline(
    checkin_store: CheckInStore,
    user_id: str,
    now: Optional[datetime] = None
) -> StreakAnalysis:
    """
    Get streak statistics.

    Args:
        checkin_store: For data retrieval
        user_id: Current user's ID
        now: Reference instant (defaults to current UTC time)

    Returns:
        StreakAnalysis
    """
    _validate_user_id(user_id)

    now = now or utc_now()
    checkins = await checkin_store.find_all_for_user(user_id)
    streak = calculate_streak(checkins, now)

    logger.info(f"Streak for user {user_id}: current={streak.currentStreak}, longest={streak.longestStreak}")
    return streak


async def get_symptom_trend_pipeline(
    checkin_store: CheckInStore,
    user_id: str,
    symptom: str,
    days: int = DEFAULT_TREND_DAYS,
    now: Optional[datetime] = None
) -> Optional[TrendAnalysis]:
    """
    Get the time series of one symptom over the last N days.

    Args:
        checkin_store: For data retrieval
        user_id: Current user's ID
        symptom: Symptom name
        days: Number of days to look back
        now: Reference instant (defaults to current UTC time)

    Returns:
        TrendAnalysis, or None when the symptom has no data in the window
    """
    _validate_user_id(user_id)
    _validate_days(days)

    if not symptom or not symptom.strip():
        raise ValidationException(message="Symptom name is required", code="VALIDATION_ERROR")

    end = now or utc_now()
    start = end - timedelta(days=days)

    checkins = await checkin_store.find_for_user_in_range(user_id, start, end)
    trend = analyze_symptom_trend(checkins, symptom.strip(), days, end)

    logger.info(
        f"Trend for user {user_id}, symptom {symptom.strip()!r} over {days} days: "
        f"{len(trend.dataPoints) if trend else 0} data points"
    )
    return trend


async def get_quick_stats_pipeline(
    checkin_store: CheckInStore,
    user_id: str,
    days: int = DEFAULT_QUICK_STATS_DAYS,
    now: Optional[datetime] = None
) -> QuickStats:
    """
    Compare the last N days with the N days before.

    Args:
        checkin_store: For data retrieval
        user_id: Current user's ID
        days: Length of each window
        now: Reference instant (defaults to current UTC time)

    Returns:
        QuickStats
    """
    _validate_user_id(user_id)
    _validate_days(days)

    now = now or utc_now()
    window = period_windows(days, now)

    current = await checkin_store.find_for_user_in_range(
        user_id, window.currentStart, window.currentEnd
    )
    previous = await checkin_store.find_for_user_in_range(
        user_id, window.previousStart, window.previousEnd
    )

    stats = compare_periods(current, previous, days, now)

    logger.info(
        f"Quick stats for user {user_id} over {days} days: "
        f"{stats.checkInCount.current} vs {stats.checkInCount.previous} check-ins"
    )
    return stats


async def get_doctor_summary_pipeline(
    checkin_store: CheckInStore,
    user_id: str,
    start_date: DateInput = None,
    end_date: DateInput = None,
    flagged_only: bool = False,
    now: Optional[datetime] = None
) -> DoctorSummary:
    """
    Generate the doctor summary for a period.

    Args:
        checkin_store: For data retrieval
        user_id: Current user's ID
        start_date: Period start (datetime or ISO string); defaults to
            DEFAULT_SUMMARY_DAYS before the end
        end_date: Period end (datetime or ISO string); defaults to now.
            A date-only string means the end of that day.
        flagged_only: Only include check-ins flagged for the doctor
        now: Reference instant (defaults to current UTC time)

    Returns:
        DoctorSummary

    Raises:
        ValidationException: Unparseable dates, start after end, or a
            range longer than MAX_SUMMARY_DAYS
    """
    _validate_user_id(user_id)

    end = _parse_date(end_date, "endDate", end_of_day) or now or utc_now()
    start = _parse_date(start_date, "startDate", start_of_day) or (
        end - timedelta(days=settings.DEFAULT_SUMMARY_DAYS)
    )

    if as_utc(start) > as_utc(end):
        raise ValidationException(
            message="startDate must not be after endDate",
            code="INVALID_DATE_RANGE"
        )

    if math.ceil((as_utc(end) - as_utc(start)) / timedelta(days=1)) > settings.MAX_SUMMARY_DAYS:
        raise ValidationException(
            message=f"Summary range must not exceed {settings.MAX_SUMMARY_DAYS} days",
            code="INVALID_DATE_RANGE"
        )

    checkins = await checkin_store.find_for_user_in_range(
        user_id, start, end, flagged_only=flagged_only
    )

    summary = compose_doctor_summary(checkins, start, end)

    logger.info(
        f"Doctor summary for user {user_id}: {summary.overview.totalCheckins} check-ins "
        f"over {summary.period.totalDays} days (flagged_only={flagged_only})"
    )
    return summary


async def get_checkin_context_pipeline(
    checkin_store: CheckInStore,
    user_id: str,
    now: Optional[datetime] = None
) -> CheckInContext:
    """
    Get the pre-check-in guidance payload.

    Reads the user's history once; the latest check-in, the recent symptom
    trends and the streak are all derived from it.

    Args:
        checkin_store: For data retrieval
        user_id: Current user's ID
        now: Reference instant (defaults to current UTC time)

    Returns:
        CheckInContext
    """
    _validate_user_id(user_id)

    now = now or utc_now()
    checkins = await checkin_store.find_all_for_user(user_id)
    latest = max(checkins, key=lambda c: as_utc(c.timestamp)) if checkins else None

    quick_stats = compare_periods(
        checkins, checkins, CONTEXT_TREND_DAYS, now, severity_digits=CONTEXT_SEVERITY_DIGITS
    )
    streak = calculate_streak(checkins, now)

    context = build_checkin_context(latest, quick_stats, streak, now)

    logger.info(f"Check-in context for user {user_id}: {len(checkins)} check-ins, streak {streak.currentStreak}")
    return context


# ─────────────────────────────────────────────────────────────────
# Parameter validation
# ─────────────────────────────────────────────────────────────────


def _validate_user_id(user_id: str) -> None:
    if not ObjectId.is_valid(user_id):
        raise ValidationException(message="Invalid user ID", code="INVALID_USER_ID")


def _validate_days(days: int) -> None:
    if isinstance(days, bool) or not isinstance(days, int) or not 1 <= days <= settings.MAX_WINDOW_DAYS:
        raise ValidationException(
            message=f"days must be between 1 and {settings.MAX_WINDOW_DAYS}",
            code="INVALID_WINDOW"
        )


def _parse_date(value: DateInput, field: str, day_bound) -> Optional[datetime]:
    """Parse a datetime or ISO string; date-only strings snap to day_bound."""
    if value is None or isinstance(value, datetime):
        return value

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        raise ValidationException(
            message=f"{field} must be an ISO 8601 date",
            code="VALIDATION_ERROR",
            details={"field": field}
        )

    if len(value.strip()) == 10:
        return day_bound(parsed.date())
    return parsed
