"""
Service wiring for the symptom journal.

Provides dependency injection for analytics-related services.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from journal.config import settings
from journal.checkin.services.checkin_store import CheckInStore


_checkin_store: Optional[CheckInStore] = None


def init_analysis_services(db: AsyncIOMotorDatabase) -> None:
    """
    Initialize analytics services with database connection.

    Called once at application startup.

    Args:
        db: MongoDB database connection
    """
    global _checkin_store

    _checkin_store = CheckInStore(
        db=db,
        collection_name=settings.CHECKINS_COLLECTION
    )


def get_checkin_store() -> CheckInStore:
    """Get check-in store instance."""
    if _checkin_store is None:
        raise RuntimeError("Analysis services not initialized. Call init_analysis_services first.")
    return _checkin_store
