"""Users API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the response envelope
    - The connection pool is built in the lifespan, stored on app.state, and
      closed on shutdown (init → serve → close)
    - A failed startup liveness check is logged, never fatal: requests fail
      individually until the database comes back

Design Decisions:
    - create_app() factory: tests build an app without a lifespan-owned pool and
      inject their own through dependency overrides
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from users_api.api.error_handlers import register_error_handlers
from users_api.api.routes import health, users
from users_api.config import Settings, get_settings
from users_api.infrastructure.database import ConnectionPool
from users_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        pool = ConnectionPool.from_url(
            settings.sqlalchemy_url(), pool_size=settings.database_pool_size,
        )
        app.state.pool = pool
        if await pool.health_check():
            logger.info("Connected to database successfully")
        else:
            logger.error("Could not connect to database; serving anyway")
        logger.info(f"Users API listening on port {settings.port}")
        try:
            yield
        finally:
            logger.info("Users API shutting down")
            await pool.close()
            app.state.pool = None

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title="Users API", version="1.0.0", lifespan=build_lifespan(settings),
    )
    app.state.pool = None

    # Routes: explicit registration
    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
