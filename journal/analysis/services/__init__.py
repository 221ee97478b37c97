"""Analysis services."""

from journal.analysis.services.symptom_aggregator import aggregate_symptoms, collect_severities
from journal.analysis.services.streak_calculator import calculate_streak, streak_message
from journal.analysis.services.trend_analyzer import analyze_symptom_trend
from journal.analysis.services.period_comparator import (
    classify_trend,
    compare_periods,
    period_windows,
)
from journal.analysis.services.day_classifier import classify_days
from journal.analysis.services.correlation_miner import mine_correlations
from journal.analysis.services.summary_composer import compose_doctor_summary
from journal.analysis.services.context_builder import build_checkin_context

__all__ = [
    "aggregate_symptoms",
    "collect_severities",
    "calculate_streak",
    "streak_message",
    "analyze_symptom_trend",
    "classify_trend",
    "compare_periods",
    "period_windows",
    "classify_days",
    "mine_correlations",
    "compose_doctor_summary",
    "build_checkin_context",
]
