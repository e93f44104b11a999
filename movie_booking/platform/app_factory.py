"""
Shared FastAPI App Factory

Every service (and the unified development app) is built here so they share
middleware, exception handlers, tracing, and the health/metrics endpoints.
"""

from collections.abc import AsyncIterator, Callable, Sequence
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from types import ModuleType
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from movie_booking.platform.config.core_setting import settings
from movie_booking.platform.config.di import container
from movie_booking.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engine,
    get_engine,
)
from movie_booking.platform.exception.exception_handlers import register_exception_handlers
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.platform.logging.service_context import set_service_name
from movie_booking.platform.observability.tracing import TracingConfig


RouterSpec = tuple[APIRouter, str, str]  # (router, prefix, tag)


def build_lifespan(
    *, service_name: str, wire_modules: Sequence[ModuleType]
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Startup/shutdown shared by every service: tracing, DI wiring, tables."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        set_service_name(service_name)
        Logger.base.info(f'🚀 [{service_name}] Starting up...')

        tracing = TracingConfig(service_name=service_name)
        tracing.setup()
        Logger.base.info(f'📊 [{service_name}] OpenTelemetry tracing configured')

        container.wire(modules=list(wire_modules))
        Logger.base.info(f'🔌 [{service_name}] Dependency injection wired')

        tracing.instrument_sqlalchemy(engine=get_engine())
        if settings.AUTO_CREATE_TABLES:
            await create_db_and_tables()
            Logger.base.info(f'🗄️  [{service_name}] Database tables ensured')

        Logger.base.info(f'✅ [{service_name}] Ready to serve requests')

        yield

        Logger.base.info(f'🛑 [{service_name}] Shutting down...')

        await container.showtime_client().aclose()
        await dispose_engine()
        Logger.base.info(f'🗄️  [{service_name}] Database engine disposed')

        tracing.shutdown()
        container.unwire()

        Logger.base.info(f'👋 [{service_name}] Shutdown complete')

    return lifespan


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    routers: Sequence[RouterSpec],
    title_suffix: str = '',
    description: str = 'Movie Booking Platform',
    service_name: str = 'movie-booking',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        routers: (router, prefix, tag) triples to mount
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description
        service_name: Service name for tracing, log lines and the health endpoint

    Returns:
        Configured FastAPI application
    """
    set_service_name(service_name)

    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Auto-instrument FastAPI (must be done before mounting routes)
    TracingConfig(service_name=service_name).instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    for router, prefix, tag in routers:
        app.include_router(router, prefix=prefix, tags=[tag])

    _register_common_endpoints(app, service_name=service_name)

    return app


def _register_common_endpoints(app: FastAPI, *, service_name: str) -> None:
    """Register health and metrics endpoints."""

    @app.get('/health')
    async def health_check() -> dict[str, str]:
        """Health check endpoint for container orchestration."""
        return {'status': 'healthy', 'service': service_name}

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
