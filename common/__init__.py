"""
Common library for reusable infrastructure components.

- database: Async MongoDB connection manager (Motor)
- utils: Standard API exceptions
- config: Base settings class
"""

from common.database import MongoDB
from common.utils import APIException, ValidationException
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Utils
    "APIException",
    "ValidationException",
    # Config
    "BaseAppSettings",
]
