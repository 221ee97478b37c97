"""
Analytics thresholds and window defaults.

Every tunable number used by the analysis services lives here so that
callers and tests refer to the same named values.
"""

# ─────────────────────────────────────────────────────────────────
# Windows (days)
# ─────────────────────────────────────────────────────────────────

DEFAULT_TREND_DAYS = 14
DEFAULT_QUICK_STATS_DAYS = 7
CONTEXT_TREND_DAYS = 14

# Decimals of the average severity in the recent-symptoms list
QUICK_STATS_SEVERITY_DIGITS = 2
CONTEXT_SEVERITY_DIGITS = 1

# ─────────────────────────────────────────────────────────────────
# Trend classification
# ─────────────────────────────────────────────────────────────────

# Period-over-period rule: percent change beyond +/- this value
TREND_PERCENT_THRESHOLD = 10.0

# First-half vs second-half rule used by the doctor summary (absolute change)
HALF_SPLIT_CHANGE_THRESHOLD = 0.6

# Latest check-in vs window average: band treated as "equal"
LATEST_VS_AVERAGE_BAND = 0.5

TOP_SYMPTOMS_LIMIT = 5

# ─────────────────────────────────────────────────────────────────
# Good/bad days
# ─────────────────────────────────────────────────────────────────

BAD_DAY_MAX_SEVERITY = 7
BAD_DAY_AVG_SEVERITY = 6

# ─────────────────────────────────────────────────────────────────
# Correlations
# ─────────────────────────────────────────────────────────────────

CORRELATION_MIN_SUPPORT = 3
CORRELATION_MIN_STRENGTH = 30

# ─────────────────────────────────────────────────────────────────
# Streaks
# ─────────────────────────────────────────────────────────────────

STREAK_MESSAGE_MIN_DAYS = 3

# (minimum streak, message template), checked top-down
STREAK_MESSAGE_TIERS = [
    (30, "{days}-day streak! Incredible dedication!"),
    (14, "{days}-day streak! Amazing consistency!"),
    (7, "{days}-day streak! You're on a roll!"),
    (STREAK_MESSAGE_MIN_DAYS, "{days}-day streak! Keep it going!"),
]
