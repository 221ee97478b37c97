"""
Check-in store.

Read-only access to stored check-ins for the analytics pipelines.
"""

import logging
from datetime import datetime
from typing import List, Dict, Any

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from journal.checkin.models import CheckInRecord

logger = logging.getLogger(__name__)


class CheckInStore:
    """
    Fetches check-ins and normalises them into CheckInRecord values.
    Reads only - no writes and no analytics.

    Database errors are not caught here; they propagate to the caller.
    """

    DEFAULT_COLLECTION = "checkins"

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        collection_name: str = DEFAULT_COLLECTION
    ):
        """
        Initialize CheckInStore.

        Args:
            db: MongoDB database connection
            collection_name: Name of the check-ins collection
        """
        self._db = db
        self._checkins_collection = db[collection_name]

    async def find_all_for_user(self, user_id: str) -> List[CheckInRecord]:
        """
        Get every check-in of a user.

        Args:
            user_id: MongoDB user ID

        Returns:
            List of records sorted by timestamp ascending
        """
        return await self._find({"userId": ObjectId(user_id)})

    async def find_for_user_in_range(
        self,
        user_id: str,
        start: datetime,
        end: datetime,
        flagged_only: bool = False
    ) -> List[CheckInRecord]:
        """
        Get a user's check-ins with start <= timestamp <= end.

        Args:
            user_id: MongoDB user ID
            start: Inclusive lower bound
            end: Inclusive upper bound
            flagged_only: Only return check-ins flagged for the doctor

        Returns:
            List of records sorted by timestamp ascending
        """
        query: Dict[str, Any] = {
            "userId": ObjectId(user_id),
            "timestamp": {"$gte": start, "$lte": end},
        }

        if flagged_only:
            query["flaggedForDoctor"] = True

        return await self._find(query)

    async def _find(self, query: Dict[str, Any]) -> List[CheckInRecord]:
        cursor = self._checkins_collection.find(query)
        cursor = cursor.sort("timestamp", 1)
        docs = await cursor.to_list(length=None)

        records = [
            CheckInRecord.from_document(doc)
            for doc in docs
            if isinstance(doc.get("timestamp"), datetime)
        ]

        skipped = len(docs) - len(records)
        if skipped:
            logger.warning(f"Skipped {skipped} check-in documents without a timestamp")

        logger.debug(f"Loaded {len(records)} check-ins for query on {list(query.keys())}")
        return records
