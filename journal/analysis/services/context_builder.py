"""
Pre-check-in context.

Gives the user a short reminder of their last check-in, their recent
symptom trends and their streak before they log a new entry.
"""

from datetime import datetime
from typing import List, Optional

from journal.checkin.models import CheckInRecord
from journal.analysis.models import (
    CheckInContext,
    LastCheckInContext,
    LastCheckInSymptom,
    QuickStats,
    StreakAnalysis,
    StreakInfo,
    TopSymptom,
)
from journal.analysis.services.streak_calculator import streak_message
from journal.analysis.services.utils import as_utc, severity_of, utc_now


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'} ago"


def format_time_ago(instant: datetime, now: Optional[datetime] = None) -> str:
    """Relative time string, e.g. "12 hours ago" or "yesterday"."""
    elapsed = (now or utc_now()) - as_utc(instant)
    minutes = int(elapsed.total_seconds() // 60)
    hours = minutes // 60
    days = hours // 24

    if minutes < 1:
        return "just now"
    if minutes < 60:
        return _plural(minutes, "minute")
    if hours < 24:
        return _plural(hours, "hour")
    if days == 1:
        return "yesterday"
    return f"{days} days ago"


def last_checkin_symptoms(checkin: CheckInRecord) -> List[LastCheckInSymptom]:
    """Symptoms of a check-in with a usable severity, most severe first."""
    symptoms = [
        LastCheckInSymptom(name=name, severity=severity)
        for name, severity in ((n, severity_of(v)) for n, v in checkin.symptom_items())
        if severity is not None
    ]
    symptoms.sort(key=lambda s: s.severity, reverse=True)
    return symptoms


def suggested_topics(recent_symptoms: List[TopSymptom]) -> List[str]:
    """Prompts for the check-in, tailored to returning vs new users."""
    topics = ["Rate symptoms 1-10"]

    if recent_symptoms:
        topics += ["Activities today", "Any triggers"]
    else:
        topics += ["How you're feeling", "Activities", "Triggers"]

    return topics


def build_checkin_context(
    last_checkin: Optional[CheckInRecord],
    quick_stats: QuickStats,
    streak: StreakAnalysis,
    now: Optional[datetime] = None
) -> CheckInContext:
    """
    Assemble the pre-check-in guidance payload.

    Args:
        last_checkin: The user's most recent check-in, if any
        quick_stats: Period comparison whose top symptoms are shown as
            recent trends
        streak: Streak analysis of the user's history
        now: Reference instant (defaults to current UTC time)

    Returns:
        CheckInContext. The streak message is only set for streaks of
        three days or more.
    """
    last_context: Optional[LastCheckInContext] = None

    if last_checkin is not None:
        symptoms = last_checkin_symptoms(last_checkin)
        if symptoms:
            last_context = LastCheckInContext(
                timestamp=as_utc(last_checkin.timestamp).isoformat(),
                timeAgo=format_time_ago(last_checkin.timestamp, now),
                symptoms=symptoms,
            )

    recent = list(quick_stats.topSymptoms)

    return CheckInContext(
        lastCheckIn=last_context,
        recentSymptoms=recent,
        streak=StreakInfo(
            current=streak.currentStreak,
            message=streak_message(streak.currentStreak),
        ),
        suggestedTopics=suggested_topics(recent),
    )
