"""
Check-in Analytics

Derives streaks, symptom trends, period comparisons, good/bad day
classification, correlations and doctor summaries from check-in history.
All computations are synchronous and work on already-fetched records.
"""
