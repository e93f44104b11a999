"""
Booking Service - Main Application
Create-booking workflow; talks to the showtime service over HTTP.
"""

from movie_booking.platform.app_factory import build_lifespan, create_app
from movie_booking.platform.config.wire_modules import BOOKING_WIRE_MODULES
from movie_booking.platform.constant.route_constant import BOOKING_BASE
from movie_booking.service.booking.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)


SERVICE_NAME = 'booking-service'

app = create_app(
    lifespan=build_lifespan(service_name=SERVICE_NAME, wire_modules=BOOKING_WIRE_MODULES),
    routers=[(booking_router, BOOKING_BASE, 'booking')],
    description='Booking Service - create and read bookings',
    service_name=SERVICE_NAME,
)
