"""
Utilities module - Common exception types for API boundaries.
"""

from common.utils.exceptions import (
    APIException,
    ValidationException,
)

__all__ = [
    "APIException",
    "ValidationException",
]
