"""
Check-in streak calculation.

Tracks how consistently a user logs check-ins.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from journal.checkin.models import CheckInRecord
from journal.analysis.constants import STREAK_MESSAGE_MIN_DAYS, STREAK_MESSAGE_TIERS
from journal.analysis.models import StreakAnalysis
from journal.analysis.services.utils import (
    date_key,
    days_between,
    parse_day_key,
    utc_day,
    utc_now,
)


def calculate_streak(
    checkins: List[CheckInRecord],
    now: Optional[datetime] = None
) -> StreakAnalysis:
    """
    Calculate streak statistics from a user's check-in history.

    Args:
        checkins: Check-ins in any order and date range
        now: Reference instant (defaults to current UTC time)

    Returns:
        StreakAnalysis with current/longest streak, active days and span

    Algorithm:
        1. Collect the distinct UTC days holding at least one check-in
        2. Current streak counts back from yesterday, so a missing
           check-in today does not break it
        3. Longest streak is the longest run of consecutive days
    """
    if not checkins:
        return StreakAnalysis()

    active = {date_key(c.timestamp) for c in checkins}
    sorted_days = sorted(active)

    first = parse_day_key(sorted_days[0])
    last = parse_day_key(sorted_days[-1])

    today = utc_day(now or utc_now())
    check_day = today - timedelta(days=1)

    current_streak = 0
    streak_start: Optional[str] = None

    while date_key(check_day) in active:
        current_streak += 1
        streak_start = date_key(check_day)
        check_day -= timedelta(days=1)

    longest = 1
    running = 1
    for previous, current in zip(sorted_days, sorted_days[1:]):
        if days_between(parse_day_key(previous), parse_day_key(current)) == 1:
            running += 1
        else:
            running = 1
        longest = max(longest, running)

    return StreakAnalysis(
        currentStreak=current_streak,
        longestStreak=longest,
        activeDays=len(sorted_days),
        totalDays=days_between(first, last) + 1,
        streakStartDate=streak_start,
        lastLogDate=sorted_days[-1],
    )


def streak_message(current_streak: int) -> Optional[str]:
    """
    Motivational message for a streak.

    Returns:
        Message text, or None below the minimum streak length
    """
    if current_streak < STREAK_MESSAGE_MIN_DAYS:
        return None

    for minimum, template in STREAK_MESSAGE_TIERS:
        if current_streak >= minimum:
            return template.format(days=current_streak)

    return None
