"""
Check-in records

Read-only access to stored check-ins, normalised for the analytics.
"""

from journal.checkin.models import CheckInRecord
from journal.checkin.services.checkin_store import CheckInStore

__all__ = [
    "CheckInRecord",
    "CheckInStore",
]
