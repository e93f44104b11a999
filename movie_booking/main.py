"""
Unified FastAPI Application

Mounts every service router in one process for local development. The
booking service's showtime client still goes over HTTP, to
SHOWTIME_SERVICE_URL (point it at this app's own address to loop back).

Run: granian movie_booking.main:app --interface asgi --port 9090
"""

from movie_booking.platform.app_factory import build_lifespan, create_app
from movie_booking.platform.config.wire_modules import WIRE_MODULES
from movie_booking.platform.constant.route_constant import (
    ADMIN_MOVIE_BASE,
    BOOKING_BASE,
    CINEMA_BASE,
    MOVIE_BASE,
    SHOWTIME_BASE,
    USER_BASE,
)
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from movie_booking.service.gateway.driving_adapter.http_controller.gateway_controller import (
    router as gateway_router,
)
from movie_booking.service.movie.driving_adapter.http_controller.admin_movie_controller import (
    router as admin_movie_router,
)
from movie_booking.service.movie.driving_adapter.http_controller.cinema_controller import (
    router as cinema_router,
)
from movie_booking.service.movie.driving_adapter.http_controller.movie_controller import (
    router as movie_router,
)
from movie_booking.service.showtime.driving_adapter.http_controller.showtime_controller import (
    router as showtime_router,
)
from movie_booking.service.user.driving_adapter.http_controller.user_controller import (
    router as user_router,
)


SERVICE_NAME = 'movie-booking'

ROUTERS = [
    (gateway_router, '', 'gateway'),
    (user_router, USER_BASE, 'user'),
    (movie_router, MOVIE_BASE, 'movie'),
    (admin_movie_router, ADMIN_MOVIE_BASE, 'movie-admin'),
    (cinema_router, CINEMA_BASE, 'cinema'),
    (showtime_router, SHOWTIME_BASE, 'showtime'),
    (booking_router, BOOKING_BASE, 'booking'),
]

app = create_app(
    lifespan=build_lifespan(service_name=SERVICE_NAME, wire_modules=WIRE_MODULES),
    routers=ROUTERS,
    description='Movie Booking Platform - all services in one process',
    service_name=SERVICE_NAME,
)

Logger.base.info('📊 [Unified Service] FastAPI auto-instrumentation enabled')
