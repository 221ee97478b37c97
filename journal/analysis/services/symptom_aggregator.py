"""
Symptom aggregation.

Groups check-ins by symptom name and computes per-symptom statistics.
"""

import logging
from typing import Any, Dict, Iterable, List

from journal.checkin.models import CheckInRecord
from journal.analysis.models import SymptomStat, SymptomsAnalysis, SymptomValueType
from journal.analysis.services.utils import (
    numeric_stats,
    round_half_up,
    severity_of,
    symptom_value_type,
    unique_values,
)

logger = logging.getLogger(__name__)


def _bucket_values(checkins: Iterable[CheckInRecord]) -> Dict[str, List[Any]]:
    buckets: Dict[str, List[Any]] = {}
    for checkin in checkins:
        for name, value in checkin.symptom_items():
            buckets.setdefault(name, []).append(value)
    return buckets


def collect_severities(checkins: Iterable[CheckInRecord]) -> Dict[str, List[float]]:
    """
    Map each symptom name to the valid severities reported for it.

    Values without a usable severity are skipped. Names keep first-seen order.
    """
    severities: Dict[str, List[float]] = {}
    for checkin in checkins:
        for name, value in checkin.symptom_items():
            severity = severity_of(value)
            if severity is not None:
                severities.setdefault(name, []).append(severity)
    return severities


def aggregate_symptoms(checkins: List[CheckInRecord]) -> SymptomsAnalysis:
    """
    Analyze symptoms across a set of check-ins.

    Args:
        checkins: Check-ins for one user, in any order

    Returns:
        SymptomsAnalysis with one SymptomStat per symptom name, most
        frequent first
    """
    total = len(checkins)

    if total == 0:
        return SymptomsAnalysis(symptoms=[], totalCheckins=0)

    stats: List[SymptomStat] = []

    for name, values in _bucket_values(checkins).items():
        count = len(values)
        value_type = symptom_value_type(values)

        stat = SymptomStat(
            name=name,
            count=count,
            percentage=round_half_up(count / total * 100, 1),
            type=value_type,
        )

        if value_type == SymptomValueType.NUMERIC:
            numbers = numeric_stats(severity_of(v) for v in values)
            stat.min = numbers["min"]
            stat.max = numbers["max"]
            stat.average = numbers["average"]
        elif value_type == SymptomValueType.CATEGORICAL:
            stat.values = unique_values(values)

        stats.append(stat)

    stats.sort(key=lambda s: s.count, reverse=True)

    logger.debug(f"Aggregated {len(stats)} symptoms over {total} check-ins")
    return SymptomsAnalysis(symptoms=stats, totalCheckins=total)
