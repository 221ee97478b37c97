"""Unit tests for good/bad day classification."""

from datetime import date, datetime, timezone

from journal.analysis.models import DayQuality, DayQualityEntry
from journal.analysis.services.day_classifier import (
    average_gap,
    bad_day_streaks,
    classify_days,
    is_bad_day,
)
from journal.analysis.services.utils import end_of_day, start_of_day

from tests.conftest import make_checkin


def _on(day, symptoms, hour=12):
    return make_checkin(datetime(2026, 3, day, hour, tzinfo=timezone.utc), symptoms)


def _range(first_day, last_day):
    return start_of_day(date(2026, 3, first_day)), end_of_day(date(2026, 3, last_day))


def _entry(day, quality, has_checkin=True):
    return DayQualityEntry(date=f"2026-03-{day:02d}", quality=quality, hasCheckIn=has_checkin)


class TestIsBadDay:
    def test_single_severe_symptom(self):
        assert is_bad_day(8, 8) is True

    def test_high_average(self):
        assert is_bad_day(6, 6) is True

    def test_mild_day(self):
        assert is_bad_day(6, 5.9) is False


class TestClassifyDays:
    def test_severity_eight_is_bad(self):
        result = classify_days([_on(1, {"headache": 8})], *_range(1, 1))

        entry = result.dailyQuality[0]
        assert entry.quality == DayQuality.BAD
        assert entry.maxSeverity == 8
        assert entry.hasCheckIn is True

    def test_two_moderate_symptoms_are_bad(self):
        result = classify_days([_on(1, {"headache": 6, "nausea": 6})], *_range(1, 1))

        entry = result.dailyQuality[0]
        assert entry.quality == DayQuality.BAD
        assert entry.avgSeverity == 6
        assert entry.symptomCount == 2

    def test_checkins_on_same_day_are_pooled(self):
        checkins = [
            _on(1, {"headache": 2}, hour=8),
            _on(1, {"headache": 4, "fatigue": 3}, hour=20),
        ]

        entry = classify_days(checkins, *_range(1, 1)).dailyQuality[0]

        assert entry.quality == DayQuality.GOOD
        assert entry.avgSeverity == 3
        assert entry.maxSeverity == 4
        assert entry.symptomCount == 2

    def test_missing_day_between_good_days(self):
        checkins = [_on(1, {"headache": 2}), _on(3, {"headache": 3})]

        qualities = [e.quality for e in classify_days(checkins, *_range(1, 3)).dailyQuality]

        assert qualities == [DayQuality.GOOD, DayQuality.INTERPOLATED_GOOD, DayQuality.GOOD]

    def test_missing_day_next_to_bad_day_leans_bad(self):
        checkins = [_on(1, {"headache": 9}), _on(3, {"headache": 2})]

        result = classify_days(checkins, *_range(1, 3))

        assert result.dailyQuality[1].quality == DayQuality.INTERPOLATED_BAD
        assert result.dailyQuality[1].hasCheckIn is False

    def test_edge_days_copy_single_neighbour(self):
        checkins = [_on(2, {"headache": 9})]

        qualities = [e.quality for e in classify_days(checkins, *_range(1, 3)).dailyQuality]

        assert qualities == [DayQuality.INTERPOLATED_BAD, DayQuality.BAD, DayQuality.INTERPOLATED_BAD]

    def test_no_checkins_all_interpolated_good(self):
        result = classify_days([], *_range(1, 4))

        assert len(result.dailyQuality) == 4
        assert all(e.quality == DayQuality.INTERPOLATED_GOOD for e in result.dailyQuality)
        assert result.totalGoodDays == 4
        assert result.totalBadDays == 0
        assert result.longestBadDayStreak == 0

    def test_totals_gaps_and_streaks(self):
        checkins = [
            _on(1, {"headache": 3}),
            _on(3, {"headache": 8}),
            _on(5, {"headache": 2}),
        ]

        result = classify_days(checkins, *_range(1, 5))

        assert [e.date for e in result.dailyQuality] == [
            "2026-03-01", "2026-03-02", "2026-03-03", "2026-03-04", "2026-03-05",
        ]
        assert result.totalGoodDays == 2
        assert result.totalBadDays == 3
        assert result.avgTimeBetweenGoodDays == 4
        assert result.avgTimeBetweenBadDays == 1
        assert result.avgBadDayStreakLength == 3
        assert result.longestBadDayStreak == 3

    def test_wide_range_interpolates_from_distant_neighbours(self):
        start = start_of_day(date(2000, 1, 1))
        end = end_of_day(date(2026, 1, 1))
        checkins = [
            make_checkin(datetime(2000, 1, 1, 12, tzinfo=timezone.utc), {"headache": 2}),
            make_checkin(datetime(2026, 1, 1, 12, tzinfo=timezone.utc), {"headache": 9}),
        ]

        result = classify_days(checkins, start, end)

        assert len(result.dailyQuality) == 9498
        assert result.totalGoodDays == 1
        assert result.totalBadDays == 9497
        assert result.longestBadDayStreak == 9497

    def test_repeated_calls_are_equal(self):
        checkins = [_on(1, {"headache": 3}), _on(4, {"headache": 8})]

        assert classify_days(checkins, *_range(1, 6)) == classify_days(checkins, *_range(1, 6))

    def test_every_day_classified_once(self):
        checkins = [_on(d, {"headache": d}) for d in (2, 5, 9)]

        result = classify_days(checkins, *_range(1, 10))

        assert len(result.dailyQuality) == 10
        assert result.totalGoodDays + result.totalBadDays == 10


class TestStreakHelpers:
    def test_bad_day_streaks(self):
        entries = [
            _entry(1, DayQuality.BAD),
            _entry(2, DayQuality.INTERPOLATED_BAD, has_checkin=False),
            _entry(3, DayQuality.GOOD),
            _entry(4, DayQuality.BAD),
            _entry(5, DayQuality.GOOD),
        ]

        assert bad_day_streaks(entries) == (1.5, 2)

    def test_streak_running_to_end_of_range(self):
        entries = [_entry(1, DayQuality.GOOD), _entry(2, DayQuality.BAD), _entry(3, DayQuality.BAD)]

        assert bad_day_streaks(entries) == (2, 2)

    def test_average_gap_needs_two_days(self):
        entries = [_entry(1, DayQuality.BAD), _entry(2, DayQuality.GOOD)]

        assert average_gap(entries, lambda e: e.quality == DayQuality.BAD) == 0
