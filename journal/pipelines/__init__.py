"""
Pipeline functions.

Stateless orchestration between the check-in store and the analytics.
"""
