"""Shared test fixtures for symptom journal tests."""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId

from journal.checkin.models import CheckInRecord


NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


def make_checkin(
    timestamp,
    symptoms=None,
    activities=None,
    triggers=None,
    flagged=False,
    notes="",
    user_id=None,
    raw_transcript=None,
):
    """Build a CheckInRecord; plain ints in ``symptoms`` become {"severity": n}."""
    if symptoms is not None:
        symptoms = {
            name: {"severity": value} if isinstance(value, int) and not isinstance(value, bool) else value
            for name, value in symptoms.items()
        }
    return CheckInRecord(
        id=str(ObjectId()),
        userId=user_id or str(ObjectId()),
        timestamp=timestamp,
        symptoms=symptoms,
        activities=activities,
        triggers=triggers,
        notes=notes,
        flaggedForDoctor=flagged,
        rawTranscript=raw_transcript,
    )


def days_ago(days, hour=12):
    """Instant `days` days before NOW at the given UTC hour."""
    return (NOW - timedelta(days=days)).replace(hour=hour, minute=0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def sample_user_id():
    return str(ObjectId())


@pytest.fixture
def mock_cursor():
    cursor = MagicMock()
    cursor.sort = MagicMock(return_value=cursor)
    cursor.to_list = AsyncMock(return_value=[])
    return cursor


@pytest.fixture
def mock_collection(mock_cursor):
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. find_one stays an AsyncMock.
    collection.find = MagicMock(return_value=mock_cursor)
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def mock_store():
    store = MagicMock()
    store.find_all_for_user = AsyncMock(return_value=[])
    store.find_for_user_in_range = AsyncMock(return_value=[])
    return store
