"""Application lifespan: startup and shutdown for a host app mounting the services.

Startup configures logging and, when requested, creates the schema.
Shutdown disposes the process-wide SQL engine.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from apex.core.config import get_settings
from apex.core.logging import setup_logging
from apex.infrastructure.persistence.database import dispose_engine, init_models

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit dispose the engine."""
    settings = get_settings()
    setup_logging(settings)
    if settings.create_schema_on_startup:
        await init_models()
    logger.info("%s %s started", settings.app_name, settings.app_version)
    try:
        yield
    finally:
        await dispose_engine()
        logger.info("%s stopped", settings.app_name)
