"""
API Gateway - Main Application
Serves the platform descriptor; requests are routed to the services by the
addresses in configuration.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from movie_booking.platform.app_factory import create_app
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.platform.observability.tracing import TracingConfig
from movie_booking.service.gateway.driving_adapter.http_controller.gateway_controller import (
    router as gateway_router,
)


SERVICE_NAME = 'api-gateway'


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    tracing = TracingConfig(service_name=SERVICE_NAME)
    tracing.setup()
    Logger.base.info(f'🚀 [{SERVICE_NAME}] Ready')

    yield

    tracing.shutdown()
    Logger.base.info(f'👋 [{SERVICE_NAME}] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    routers=[(gateway_router, '', 'gateway')],
    description='API Gateway - service directory',
    service_name=SERVICE_NAME,
)
