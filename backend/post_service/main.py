"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from post_service.config import get_settings
from post_service.infrastructure.database import build_engine, build_session_factory
from post_service.infrastructure.database.migrator import current_revision, run_migrations
from post_service.infrastructure.logging.log_config import setup_logging
from post_service.presentation.api.errors import register_exception_handlers
from post_service.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — open the database, migrate, close on shutdown."""
    settings = get_settings()
    setup_logging(settings)

    engine = build_engine(settings)

    if settings.run_migrations_on_startup:
        revision = await run_migrations(engine, settings.migrations_location)
    else:
        logger.info("Startup migrations disabled")
        revision = await current_revision(engine)

    app.state.engine = engine
    app.state.database_revision = revision
    app.state.session_factory = build_session_factory(engine)

    yield

    # Shutdown
    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point — serve the app on the configured address."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "post_service.main:app",
        host=settings.server_host,
        port=settings.server_port,
    )


if __name__ == "__main__":
    run()
