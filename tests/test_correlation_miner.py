"""Unit tests for activity/trigger correlation mining."""

from journal.analysis.models import ItemType
from journal.analysis.services.correlation_miner import mine_correlations

from tests.conftest import make_checkin, days_ago


class TestMineCorrelations:
    def test_always_together_is_full_strength(self):
        checkins = [
            make_checkin(days_ago(d), {"headache": 5}, activities=["running"])
            for d in (1, 2, 3)
        ]

        correlations = mine_correlations(checkins)

        assert len(correlations) == 1
        entry = correlations[0]
        assert entry.item == "running"
        assert entry.itemType == ItemType.ACTIVITY
        assert entry.symptom == "headache"
        assert entry.coOccurrenceCount == 3
        assert entry.totalItemOccurrences == 3
        assert entry.correlationStrength == 100

    def test_below_minimum_support_is_dropped(self):
        checkins = [
            make_checkin(days_ago(d), {"headache": 5}, triggers=["stress"])
            for d in (1, 2)
        ]

        assert mine_correlations(checkins) == []

    def test_strength_threshold_is_inclusive(self):
        checkins = [
            make_checkin(days_ago(d), {"nausea": 4} if d <= 3 else {}, triggers=["dairy"])
            for d in range(1, 11)
        ]

        correlations = mine_correlations(checkins)

        assert [(c.item, c.correlationStrength) for c in correlations] == [("dairy", 30)]

    def test_weak_association_is_dropped(self):
        checkins = [
            make_checkin(days_ago(d), {"nausea": 4} if d <= 3 else {}, triggers=["dairy"])
            for d in range(1, 12)
        ]

        # 3 of 11 -> 27
        assert mine_correlations(checkins) == []

    def test_activity_and_trigger_with_same_name_are_distinct(self):
        checkins = [
            make_checkin(days_ago(d), {"headache": 6}, activities=["coffee"], triggers=["coffee"])
            for d in (1, 2, 3)
        ]
        checkins.append(make_checkin(days_ago(4), {}, triggers=["coffee"]))

        correlations = mine_correlations(checkins)

        by_type = {c.itemType: c for c in correlations}
        assert by_type[ItemType.ACTIVITY].correlationStrength == 100
        assert by_type[ItemType.TRIGGER].correlationStrength == 75
        assert [c.itemType for c in correlations] == [ItemType.ACTIVITY, ItemType.TRIGGER]

    def test_names_with_colons_are_kept_intact(self):
        checkins = [
            make_checkin(days_ago(d), {"headache": 6}, activities=["gym: legs"])
            for d in (1, 2, 3)
        ]

        assert mine_correlations(checkins)[0].item == "gym: legs"

    def test_repeated_token_counts_once_per_checkin(self):
        checkins = [
            make_checkin(days_ago(d), {"headache": 6}, activities=["walk", "walk"])
            for d in (1, 2, 3)
        ]

        entry = mine_correlations(checkins)[0]

        assert entry.totalItemOccurrences == 3
        assert entry.coOccurrenceCount == 3

    def test_repeated_calls_are_equal(self):
        checkins = [
            make_checkin(days_ago(d), {"headache": 6, "nausea": 2}, activities=["coffee"], triggers=["stress"])
            for d in (1, 2, 3, 4)
        ]

        first = mine_correlations(checkins)

        assert len(first) == 4
        assert mine_correlations(checkins) == first

    def test_custom_thresholds(self):
        checkins = [make_checkin(days_ago(1), {"headache": 6}, activities=["walk"])]

        assert len(mine_correlations(checkins, min_support=1, min_strength=100)) == 1

    def test_empty(self):
        assert mine_correlations([]) == []
