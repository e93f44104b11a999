"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from movie_booking.service.booking.app.command import create_booking_use_case
from movie_booking.service.booking.app.query import get_booking_use_case
from movie_booking.service.movie.app.command import (
    create_cinema_use_case,
    create_movie_use_case,
    delete_movie_use_case,
    manage_movie_showtimes_use_case,
    update_movie_use_case,
)
from movie_booking.service.movie.app.query import get_cinema_use_case, get_movie_use_case
from movie_booking.service.showtime.app.command import (
    adjust_seats_use_case,
    create_showtime_use_case,
    delete_showtime_use_case,
    update_showtime_use_case,
)
from movie_booking.service.showtime.app.query import get_showtime_use_case
from movie_booking.service.user.app.command import (
    create_user_use_case,
    delete_user_use_case,
    update_user_use_case,
)
from movie_booking.service.user.app.query import get_user_use_case


USER_WIRE_MODULES: list[ModuleType] = [
    create_user_use_case,
    update_user_use_case,
    delete_user_use_case,
    get_user_use_case,
]

MOVIE_WIRE_MODULES: list[ModuleType] = [
    create_movie_use_case,
    update_movie_use_case,
    delete_movie_use_case,
    manage_movie_showtimes_use_case,
    create_cinema_use_case,
    get_movie_use_case,
    get_cinema_use_case,
]

SHOWTIME_WIRE_MODULES: list[ModuleType] = [
    create_showtime_use_case,
    update_showtime_use_case,
    delete_showtime_use_case,
    adjust_seats_use_case,
    get_showtime_use_case,
]

BOOKING_WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    get_booking_use_case,
]

WIRE_MODULES: list[ModuleType] = [
    *USER_WIRE_MODULES,
    *MOVIE_WIRE_MODULES,
    *SHOWTIME_WIRE_MODULES,
    *BOOKING_WIRE_MODULES,
]
