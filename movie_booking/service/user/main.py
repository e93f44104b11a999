"""
User Service - Main Application
Customer and cinema-admin profiles.
"""

from movie_booking.platform.app_factory import build_lifespan, create_app
from movie_booking.platform.config.wire_modules import USER_WIRE_MODULES
from movie_booking.platform.constant.route_constant import USER_BASE
from movie_booking.service.user.driving_adapter.http_controller.user_controller import (
    router as user_router,
)


SERVICE_NAME = 'user-service'

app = create_app(
    lifespan=build_lifespan(service_name=SERVICE_NAME, wire_modules=USER_WIRE_MODULES),
    routers=[(user_router, USER_BASE, 'user')],
    description='User Service - customer and cinema admin profiles',
    service_name=SERVICE_NAME,
)
