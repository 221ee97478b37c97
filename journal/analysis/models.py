"""
Pydantic models for analytics results.

Defines the derived structures returned by the analysis services. They are
built fresh for every call and never persisted.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, Field


class SymptomValueType(str, Enum):
    """Symptom value type classification."""
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    BOOLEAN = "boolean"


class TrendDirection(str, Enum):
    IMPROVING = "improving"
    WORSENING = "worsening"
    STABLE = "stable"


class LatestComparison(str, Enum):
    ABOVE = "above"
    BELOW = "below"
    EQUAL = "equal"


class DayQuality(str, Enum):
    GOOD = "good"
    BAD = "bad"
    INTERPOLATED_GOOD = "interpolated_good"
    INTERPOLATED_BAD = "interpolated_bad"


class ItemType(str, Enum):
    ACTIVITY = "activity"
    TRIGGER = "trigger"


# ─────────────────────────────────────────────────────────────────
# Symptoms
# ─────────────────────────────────────────────────────────────────


class SymptomStat(BaseModel):
    """Statistics for a single symptom."""
    name: str
    count: int
    percentage: float
    type: SymptomValueType
    min: Optional[float] = None
    max: Optional[float] = None
    average: Optional[float] = None
    values: Optional[List[Any]] = None


class SymptomsAnalysis(BaseModel):
    """Symptom statistics across a set of check-ins."""
    symptoms: List[SymptomStat] = []
    totalCheckins: int = 0


# ─────────────────────────────────────────────────────────────────
# Streaks
# ─────────────────────────────────────────────────────────────────


class StreakAnalysis(BaseModel):
    """Check-in streak statistics."""
    currentStreak: int = 0
    longestStreak: int = 0
    activeDays: int = 0
    totalDays: int = 0
    streakStartDate: Optional[str] = None
    lastLogDate: Optional[str] = None


# ─────────────────────────────────────────────────────────────────
# Trends
# ─────────────────────────────────────────────────────────────────


class TrendDataPoint(BaseModel):
    """Daily average for one symptom."""
    date: str
    value: float
    count: int


class TrendStatistics(BaseModel):
    average: float
    min: float
    max: float
    median: float
    standardDeviation: float


class DateRange(BaseModel):
    start: str
    end: str


class TrendAnalysis(BaseModel):
    """Time series and statistics for one symptom."""
    symptom: str
    dateRange: DateRange
    dataPoints: List[TrendDataPoint]
    statistics: TrendStatistics


# ─────────────────────────────────────────────────────────────────
# Quick stats (period comparison)
# ─────────────────────────────────────────────────────────────────


class TimePeriod(BaseModel):
    start: str
    end: str
    days: int


class PeriodWindow(BaseModel):
    """Query bounds for the current and previous comparison windows."""
    currentStart: datetime
    currentEnd: datetime
    previousStart: datetime
    previousEnd: datetime
    days: int


class CheckInCountComparison(BaseModel):
    current: int
    previous: int
    change: int
    percentChange: float


class TopSymptom(BaseModel):
    name: str
    frequency: int
    avgSeverity: Optional[float] = None
    trend: TrendDirection = TrendDirection.STABLE


class AverageSeverityComparison(BaseModel):
    current: float
    previous: float
    change: float
    trend: TrendDirection


class LatestSymptomComparison(BaseModel):
    name: str
    latestValue: float
    averageValue: float
    trend: LatestComparison


class LatestCheckInData(BaseModel):
    timestamp: datetime
    symptoms: List[LatestSymptomComparison]


class QuickStats(BaseModel):
    """Current period compared to the previous period of the same length."""
    period: Dict[str, TimePeriod]
    checkInCount: CheckInCountComparison
    topSymptoms: List[TopSymptom]
    averageSeverity: AverageSeverityComparison
    latestCheckIn: Optional[LatestCheckInData] = None


# ─────────────────────────────────────────────────────────────────
# Good/bad days and correlations
# ─────────────────────────────────────────────────────────────────


class DayQualityEntry(BaseModel):
    date: str
    quality: DayQuality
    avgSeverity: float = 0
    maxSeverity: float = 0
    symptomCount: int = 0
    hasCheckIn: bool = False


class GoodBadDayAnalysis(BaseModel):
    totalGoodDays: int = 0
    totalBadDays: int = 0
    avgTimeBetweenGoodDays: float = 0
    avgTimeBetweenBadDays: float = 0
    avgBadDayStreakLength: float = 0
    longestBadDayStreak: int = 0
    dailyQuality: List[DayQualityEntry] = []


class CorrelationEntry(BaseModel):
    """
    Co-occurrence of an activity or trigger with a symptom.

    correlationStrength is the share (0-100) of the item's occurrences that
    also reported the symptom. It is a support/confidence heuristic, not a
    causal or significance claim.
    """
    item: str
    itemType: ItemType
    symptom: str
    coOccurrenceCount: int
    totalItemOccurrences: int
    correlationStrength: int


# ─────────────────────────────────────────────────────────────────
# Doctor summary
# ─────────────────────────────────────────────────────────────────


class SymptomSummaryEntry(BaseModel):
    symptom: str
    count: int
    minSeverity: float
    maxSeverity: float
    avgSeverity: float
    firstReported: str
    lastReported: str
    trend: TrendDirection
    frequency: float  # Percentage of days with this symptom


class FlaggedEntry(BaseModel):
    timestamp: str
    symptoms: Dict[str, Any]
    activities: List[str]
    triggers: List[str]
    notes: str
    rawTranscript: Optional[str] = None


class SummaryPeriod(BaseModel):
    startDate: str
    endDate: str
    totalDays: int


class SummaryOverview(BaseModel):
    totalCheckins: int
    flaggedCheckins: int
    uniqueSymptoms: int
    daysWithCheckins: int


class DoctorSummary(BaseModel):
    """Complete doctor summary for a time period."""
    period: SummaryPeriod
    overview: SummaryOverview
    symptomSummary: List[SymptomSummaryEntry]
    goodBadDayAnalysis: GoodBadDayAnalysis
    correlations: List[CorrelationEntry]
    flaggedEntries: List[FlaggedEntry]


# ─────────────────────────────────────────────────────────────────
# Check-in context
# ─────────────────────────────────────────────────────────────────


class LastCheckInSymptom(BaseModel):
    name: str
    severity: float


class LastCheckInContext(BaseModel):
    timestamp: str
    timeAgo: str
    symptoms: List[LastCheckInSymptom]


class StreakInfo(BaseModel):
    current: int
    message: Optional[str] = None


class CheckInContext(BaseModel):
    """Pre-check-in guidance payload."""
    lastCheckIn: Optional[LastCheckInContext] = None
    recentSymptoms: List[TopSymptom] = Field(default_factory=list)
    streak: StreakInfo
    suggestedTopics: List[str] = Field(default_factory=list)
