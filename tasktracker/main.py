"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy import Engine

from .config import ConfigError, Settings, get_settings
from .db import create_db_engine, init_db, ping_db
from .logging_setup import setup_logging
from .routers import pages, tasks

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """Build the application. Settings are read from the environment if not given."""
    if engine is None:
        settings = settings or get_settings()
        engine = create_db_engine(
            settings.database_url,
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_timeout=settings.db_pool_timeout,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Prepare the database on startup, release pooled connections on shutdown."""
        ping_db(engine)
        if settings is not None and settings.db_init_schema:
            init_db(engine)
        logger.info("Database ready")
        yield
        engine.dispose()

    app = FastAPI(
        title="Task Tracker",
        description="Minimal task tracking service",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.engine = engine

    app.include_router(tasks.router)
    app.include_router(pages.router)

    return app


def main():
    """Run the application with uvicorn."""
    import uvicorn

    try:
        settings = get_settings()
    except ConfigError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error("Configuration error: %s", e)
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_file)
    logger.info("Starting on %s:%d", settings.app_host, settings.app_port)

    uvicorn.run(
        create_app(settings),
        host=settings.app_host,
        port=settings.app_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
