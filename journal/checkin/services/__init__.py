"""Check-in services."""

from journal.checkin.services.checkin_store import CheckInStore

__all__ = [
    "CheckInStore",
]
