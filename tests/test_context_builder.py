"""Unit tests for the pre-check-in context."""

from datetime import timedelta

import pytest

from journal.analysis.models import StreakAnalysis
from journal.analysis.services.context_builder import (
    build_checkin_context,
    format_time_ago,
    last_checkin_symptoms,
    suggested_topics,
)
from journal.analysis.services.period_comparator import compare_periods

from tests.conftest import NOW, make_checkin, days_ago


@pytest.fixture
def recent_checkins():
    return [
        make_checkin(days_ago(1), {"headache": 4, "nausea": 7}),
        make_checkin(days_ago(2), {"headache": 5}),
    ]


class TestFormatTimeAgo:
    @pytest.mark.parametrize("elapsed,expected", [
        (timedelta(seconds=30), "just now"),
        (timedelta(minutes=1), "1 minute ago"),
        (timedelta(minutes=45), "45 minutes ago"),
        (timedelta(hours=1), "1 hour ago"),
        (timedelta(hours=12), "12 hours ago"),
        (timedelta(hours=30), "yesterday"),
        (timedelta(days=3, hours=2), "3 days ago"),
    ])
    def test_relative_time(self, elapsed, expected):
        assert format_time_ago(NOW - elapsed, NOW) == expected


class TestBuildCheckinContext:
    def test_streak_below_three_has_no_message(self, recent_checkins):
        quick_stats = compare_periods(recent_checkins, recent_checkins, 14, NOW)

        context = build_checkin_context(
            recent_checkins[0], quick_stats, StreakAnalysis(currentStreak=2), NOW
        )

        assert context.streak.current == 2
        assert context.streak.message is None

    def test_streak_of_three_has_message(self, recent_checkins):
        quick_stats = compare_periods(recent_checkins, recent_checkins, 14, NOW)

        context = build_checkin_context(
            recent_checkins[0], quick_stats, StreakAnalysis(currentStreak=3), NOW
        )

        assert context.streak.message == "3-day streak! Keep it going!"

    def test_last_checkin_summary(self, recent_checkins):
        quick_stats = compare_periods(recent_checkins, recent_checkins, 14, NOW)

        context = build_checkin_context(recent_checkins[0], quick_stats, StreakAnalysis(), NOW)

        assert context.lastCheckIn.timestamp == "2026-03-14T12:00:00+00:00"
        assert context.lastCheckIn.timeAgo == "yesterday"
        assert [(s.name, s.severity) for s in context.lastCheckIn.symptoms] == [
            ("nausea", 7),
            ("headache", 4),
        ]

    def test_recent_symptoms_come_from_quick_stats(self, recent_checkins):
        quick_stats = compare_periods(recent_checkins, recent_checkins, 14, NOW)

        context = build_checkin_context(recent_checkins[0], quick_stats, StreakAnalysis(), NOW)

        assert context.recentSymptoms == quick_stats.topSymptoms
        assert context.suggestedTopics == ["Rate symptoms 1-10", "Activities today", "Any triggers"]

    def test_new_user(self):
        quick_stats = compare_periods([], [], 14, NOW)

        context = build_checkin_context(None, quick_stats, StreakAnalysis(), NOW)

        assert context.lastCheckIn is None
        assert context.recentSymptoms == []
        assert context.streak.current == 0
        assert context.suggestedTopics == [
            "Rate symptoms 1-10", "How you're feeling", "Activities", "Triggers",
        ]

    def test_last_checkin_without_severities_is_omitted(self):
        checkin = make_checkin(days_ago(1), {"rash": "red"})
        quick_stats = compare_periods([checkin], [checkin], 14, NOW)

        context = build_checkin_context(checkin, quick_stats, StreakAnalysis(), NOW)

        assert context.lastCheckIn is None


def test_last_checkin_symptoms_skip_invalid():
    checkin = make_checkin(days_ago(1), {"headache": 3, "rash": "red", "fever": True})

    assert [s.name for s in last_checkin_symptoms(checkin)] == ["headache"]


def test_suggested_topics_for_new_user():
    assert suggested_topics([])[0] == "Rate symptoms 1-10"
