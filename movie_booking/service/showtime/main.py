"""
Showtime Service - Main Application
Screenings and their seat inventory.
"""

from movie_booking.platform.app_factory import build_lifespan, create_app
from movie_booking.platform.config.wire_modules import SHOWTIME_WIRE_MODULES
from movie_booking.platform.constant.route_constant import SHOWTIME_BASE
from movie_booking.service.showtime.driving_adapter.http_controller.showtime_controller import (
    router as showtime_router,
)


SERVICE_NAME = 'showtime-service'

app = create_app(
    lifespan=build_lifespan(service_name=SERVICE_NAME, wire_modules=SHOWTIME_WIRE_MODULES),
    routers=[(showtime_router, SHOWTIME_BASE, 'showtime')],
    description='Showtime Service - screenings and seat inventory',
    service_name=SERVICE_NAME,
)
