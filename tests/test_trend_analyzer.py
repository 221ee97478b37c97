"""Unit tests for symptom trend analysis."""

from journal.analysis.services.trend_analyzer import analyze_symptom_trend

from tests.conftest import NOW, make_checkin, days_ago


class TestAnalyzeSymptomTrend:
    def test_no_checkins_returns_none(self):
        assert analyze_symptom_trend([], "headache", 14, NOW) is None

    def test_symptom_never_reported_returns_none(self):
        checkins = [make_checkin(days_ago(1), {"nausea": 4})]

        assert analyze_symptom_trend(checkins, "headache", 14, NOW) is None

    def test_only_invalid_values_returns_none(self):
        checkins = [
            make_checkin(days_ago(1), {"headache": {"severity": "bad"}}),
            make_checkin(days_ago(2), {"headache": None}),
        ]

        assert analyze_symptom_trend(checkins, "headache", 14, NOW) is None

    def test_daily_averages_sorted_by_date(self):
        checkins = [
            make_checkin(days_ago(1, hour=9), {"headache": 4}),
            make_checkin(days_ago(1, hour=18), {"headache": 7}),
            make_checkin(days_ago(3), {"headache": 2}),
            make_checkin(days_ago(2), {"nausea": 9}),
        ]

        result = analyze_symptom_trend(checkins, "headache", 14, NOW)

        assert [(p.date, p.value, p.count) for p in result.dataPoints] == [
            ("2026-03-12", 2, 1),
            ("2026-03-14", 5.5, 2),
        ]

    def test_statistics_over_all_values(self):
        checkins = [
            make_checkin(days_ago(1, hour=9), {"headache": 4}),
            make_checkin(days_ago(1, hour=18), {"headache": 7}),
            make_checkin(days_ago(3), {"headache": 2}),
            make_checkin(days_ago(4), {"headache": 3}),
        ]

        stats = analyze_symptom_trend(checkins, "headache", 14, NOW).statistics

        assert stats.min == 2
        assert stats.max == 7
        assert stats.average == 4
        assert stats.median == 3.5
        assert stats.standardDeviation == 1.87

    def test_accepts_bare_numeric_values(self):
        checkins = [make_checkin(days_ago(1), {"headache": 6.5})]

        result = analyze_symptom_trend(checkins, "headache", 14, NOW)

        assert result.dataPoints[0].value == 6.5

    def test_date_range_reflects_window(self):
        checkins = [make_checkin(days_ago(1), {"headache": 6})]

        result = analyze_symptom_trend(checkins, "headache", 14, NOW)

        assert result.symptom == "headache"
        assert result.dateRange.start == "2026-03-01"
        assert result.dateRange.end == "2026-03-15"
