"""
Movie Service - Main Application
Movie catalogue, embedded showtimes, and cinemas.
"""

from movie_booking.platform.app_factory import build_lifespan, create_app
from movie_booking.platform.config.wire_modules import MOVIE_WIRE_MODULES
from movie_booking.platform.constant.route_constant import (
    ADMIN_MOVIE_BASE,
    CINEMA_BASE,
    MOVIE_BASE,
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


SERVICE_NAME = 'movie-service'

app = create_app(
    lifespan=build_lifespan(service_name=SERVICE_NAME, wire_modules=MOVIE_WIRE_MODULES),
    routers=[
        (movie_router, MOVIE_BASE, 'movie'),
        (admin_movie_router, ADMIN_MOVIE_BASE, 'movie-admin'),
        (cinema_router, CINEMA_BASE, 'cinema'),
    ],
    description='Movie Service - catalogue, embedded showtimes, cinemas',
    service_name=SERVICE_NAME,
)
