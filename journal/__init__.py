"""
Symptom journal analytics.

Turns a user's check-in history into streaks, period comparisons,
good/bad day classification, correlations and doctor summaries.
"""
