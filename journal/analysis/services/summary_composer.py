"""
Doctor summary composition.

Combines symptom statistics, good/bad day analysis, correlations and the
flagged entries of a period into one report.
"""

import logging
import math
from datetime import datetime, timedelta
from typing import Dict, List

from journal.checkin.models import CheckInRecord
from journal.analysis.constants import HALF_SPLIT_CHANGE_THRESHOLD
from journal.analysis.models import (
    DoctorSummary,
    FlaggedEntry,
    SummaryOverview,
    SummaryPeriod,
    SymptomSummaryEntry,
    TrendDirection,
)
from journal.analysis.services.correlation_miner import mine_correlations
from journal.analysis.services.day_classifier import classify_days
from journal.analysis.services.utils import as_utc, date_key, mean, round_half_up, severity_of

logger = logging.getLogger(__name__)


def half_split_trend(severities: List[float]) -> TrendDirection:
    """
    Compare the first half of a chronological series with the second half.

    An absolute change of at least 0.6 severity points counts as a trend.
    """
    midpoint = len(severities) // 2
    first_half = severities[:midpoint]
    second_half = severities[midpoint:]

    if not first_half or not second_half:
        return TrendDirection.STABLE

    change = mean(second_half) - mean(first_half)

    if abs(change) >= HALF_SPLIT_CHANGE_THRESHOLD:
        return TrendDirection.WORSENING if change > 0 else TrendDirection.IMPROVING
    return TrendDirection.STABLE


def summarize_symptoms(checkins: List[CheckInRecord]) -> List[SymptomSummaryEntry]:
    """
    Per-symptom severity statistics and date range.

    Args:
        checkins: Check-ins sorted by timestamp ascending

    Returns:
        Summary entries, most frequent (by share of logged days) first
    """
    all_days = {date_key(c.timestamp) for c in checkins}
    severities: Dict[str, List[float]] = {}
    reported: Dict[str, List[datetime]] = {}

    for checkin in checkins:
        for name, value in checkin.symptom_items():
            severity = severity_of(value)
            if severity is None:
                continue
            severities.setdefault(name, []).append(severity)
            reported.setdefault(name, []).append(as_utc(checkin.timestamp))

    summary: List[SymptomSummaryEntry] = []

    for name, values in severities.items():
        timestamps = reported[name]
        symptom_days = {date_key(t) for t in timestamps}

        summary.append(SymptomSummaryEntry(
            symptom=name,
            count=len(values),
            minSeverity=min(values),
            maxSeverity=max(values),
            avgSeverity=round_half_up(mean(values), 1),
            firstReported=date_key(min(timestamps)),
            lastReported=date_key(max(timestamps)),
            trend=half_split_trend(values),
            frequency=round_half_up(len(symptom_days) / len(all_days) * 100, 1),
        ))

    summary.sort(key=lambda s: s.frequency, reverse=True)
    return summary


def flagged_entries(checkins: List[CheckInRecord]) -> List[FlaggedEntry]:
    """Plain projection of the check-ins flagged for the doctor."""
    return [
        FlaggedEntry(
            timestamp=as_utc(c.timestamp).isoformat(),
            symptoms=dict(c.symptoms),
            activities=list(c.activities),
            triggers=list(c.triggers),
            notes=c.notes,
            rawTranscript=c.rawTranscript,
        )
        for c in checkins
        if c.flaggedForDoctor
    ]


def compose_doctor_summary(
    checkins: List[CheckInRecord],
    start_date: datetime,
    end_date: datetime
) -> DoctorSummary:
    """
    Generate a doctor summary for a time period.

    Args:
        checkins: Check-ins within [start_date, end_date], optionally only
            the flagged ones
        start_date: Start of the period
        end_date: End of the period

    Returns:
        DoctorSummary with overview, symptom summary, good/bad days,
        correlations and flagged entries
    """
    start = as_utc(start_date)
    end = as_utc(end_date)
    ordered = sorted(checkins, key=lambda c: as_utc(c.timestamp))

    total_days = math.ceil((end - start) / timedelta(days=1))
    unique_symptoms = {name for c in ordered for name in c.symptoms}
    days_with_checkins = {date_key(c.timestamp) for c in ordered}
    flagged = flagged_entries(ordered)

    logger.debug(
        f"Composing doctor summary over {total_days} days from {len(ordered)} check-ins"
    )

    return DoctorSummary(
        period=SummaryPeriod(
            startDate=start.isoformat(),
            endDate=end.isoformat(),
            totalDays=total_days,
        ),
        overview=SummaryOverview(
            totalCheckins=len(ordered),
            flaggedCheckins=len(flagged),
            uniqueSymptoms=len(unique_symptoms),
            daysWithCheckins=len(days_with_checkins),
        ),
        symptomSummary=summarize_symptoms(ordered),
        goodBadDayAnalysis=classify_days(ordered, start, end),
        correlations=mine_correlations(ordered),
        flaggedEntries=flagged,
    )
