"""FastAPI application factory.

Creates the application with logging, exception handlers and schema
bootstrapping. Route modules are mounted by the embedding application.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from tenantry.infrastructure.persistence.sqlalchemy import create_tables
from tenantry.presentation.api.dependencies import get_engine
from tenantry.presentation.api.exception_handlers import setup_exception_handlers
from tenantry_config import configure_logging, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    engine = get_engine()
    await create_tables(engine)
    logger.info("%s API started", app.title)
    yield
    await engine.dispose()
    logger.info("%s API stopped", app.title)


def create_app(create_schema: bool = True) -> FastAPI:
    """Build the FastAPI application.

    Parameters
    ----------
    create_schema
        Create missing tables on startup (disable when migrations own the
        schema, or in tests that manage their own engine)
    """
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=API_VERSION,
        debug=settings.debug,
        lifespan=lifespan if create_schema else None,
    )
    setup_exception_handlers(app)

    @app.get("/health", tags=["Health"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    return app
