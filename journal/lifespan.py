"""
Startup and shutdown of the analytics services.

The hosting application enters this context once; it connects the main
database, wires the services and closes the connection on exit.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from common.database import MongoDB
from journal.config import Settings, configure_logging, settings as default_settings
from journal.dependencies import init_analysis_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def analytics_lifespan(app_settings: Optional[Settings] = None) -> AsyncIterator[MongoDB]:
    """
    Connect to MongoDB and initialise the analytics services.

    Args:
        app_settings: Settings to use (defaults to the global instance)

    Yields:
        The connected MongoDB instance
    """
    app_settings = app_settings or default_settings
    app_settings.validate_required()
    configure_logging(app_settings.LOG_LEVEL)

    main_db = MongoDB()
    await main_db.connect(
        uri=app_settings.MONGODB_URI,
        database_name=app_settings.MONGODB_DATABASE,
    )

    init_analysis_services(main_db.db)
    logger.info("Analysis services initialized")

    try:
        yield main_db
    finally:
        await main_db.disconnect()
        logger.info("Analysis services shut down")
