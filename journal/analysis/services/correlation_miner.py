"""
Activity/trigger correlation mining.

Counts how often each activity or trigger is reported together with each
symptom. Pairs are kept when they clear a minimum support (co-occurrence
count) and a minimum confidence (share of the item's occurrences). This is
a heuristic for surfacing patterns, not a statistical test.
"""

from typing import Dict, List, Tuple

from journal.checkin.models import CheckInRecord
from journal.analysis.constants import CORRELATION_MIN_STRENGTH, CORRELATION_MIN_SUPPORT
from journal.analysis.models import CorrelationEntry, ItemType
from journal.analysis.services.utils import round_half_up

ItemKey = Tuple[ItemType, str]


def mine_correlations(
    checkins: List[CheckInRecord],
    min_support: int = CORRELATION_MIN_SUPPORT,
    min_strength: int = CORRELATION_MIN_STRENGTH
) -> List[CorrelationEntry]:
    """
    Analyze correlations between symptoms and activities/triggers.

    Args:
        checkins: Check-ins within the analysed range
        min_support: Minimum number of co-occurrences
        min_strength: Minimum correlation strength (0-100)

    Returns:
        Correlation entries, strongest first
    """
    item_counts: Dict[ItemKey, int] = {}
    pair_counts: Dict[Tuple[ItemKey, str], int] = {}

    for checkin in checkins:
        symptom_names = list(checkin.symptoms.keys())
        items = [(ItemType.ACTIVITY, a) for a in checkin.activities]
        items += [(ItemType.TRIGGER, t) for t in checkin.triggers]

        for item in items:
            item_counts[item] = item_counts.get(item, 0) + 1
            for symptom in symptom_names:
                pair = (item, symptom)
                pair_counts[pair] = pair_counts.get(pair, 0) + 1

    correlations: List[CorrelationEntry] = []

    for ((item_type, item), symptom), co_occurrences in pair_counts.items():
        total = item_counts[(item_type, item)]
        strength = round_half_up(co_occurrences / total * 100, 0)

        if co_occurrences >= min_support and strength >= min_strength:
            correlations.append(CorrelationEntry(
                item=item,
                itemType=item_type,
                symptom=symptom,
                coOccurrenceCount=co_occurrences,
                totalItemOccurrences=total,
                correlationStrength=strength,
            ))

    correlations.sort(key=lambda c: c.correlationStrength, reverse=True)
    return correlations
