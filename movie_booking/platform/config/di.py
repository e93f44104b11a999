"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from movie_booking.platform.config.core_setting import Settings
from movie_booking.platform.database.orm_db_setting import Database
from movie_booking.service.booking.driven_adapter.client.showtime_client_impl import (
    ShowtimeClientImpl,
)
from movie_booking.service.booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from movie_booking.service.booking.driven_adapter.repo.booking_query_repo_impl import (
    BookingQueryRepoImpl,
)
from movie_booking.service.movie.driven_adapter.repo.cinema_repo_impl import CinemaRepoImpl
from movie_booking.service.movie.driven_adapter.repo.movie_command_repo_impl import (
    MovieCommandRepoImpl,
)
from movie_booking.service.movie.driven_adapter.repo.movie_query_repo_impl import (
    MovieQueryRepoImpl,
)
from movie_booking.service.shared_kernel.driven_adapter.system_clock import SystemClock
from movie_booking.service.showtime.driven_adapter.repo.showtime_command_repo_impl import (
    ShowtimeCommandRepoImpl,
)
from movie_booking.service.showtime.driven_adapter.repo.showtime_query_repo_impl import (
    ShowtimeQueryRepoImpl,
)
from movie_booking.service.user.driven_adapter.repo.user_command_repo_impl import (
    UserCommandRepoImpl,
)
from movie_booking.service.user.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Database (uses AsyncEngineManager with settings from config_service)
    database = providers.Singleton(Database)

    # Clock (tests override with a fixed clock)
    clock = providers.Singleton(SystemClock, timezone=config_service.provided.TIMEZONE)

    # Repositories (stateless - use session_factory per-request)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    movie_command_repo = providers.Singleton(
        MovieCommandRepoImpl, session_factory=database.provided.session
    )
    movie_query_repo = providers.Singleton(
        MovieQueryRepoImpl, session_factory=database.provided.session
    )
    cinema_repo = providers.Singleton(CinemaRepoImpl, session_factory=database.provided.session)
    showtime_command_repo = providers.Singleton(
        ShowtimeCommandRepoImpl, session_factory=database.provided.session
    )
    showtime_query_repo = providers.Singleton(
        ShowtimeQueryRepoImpl, session_factory=database.provided.session
    )
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, session_factory=database.provided.session
    )
    booking_query_repo = providers.Singleton(
        BookingQueryRepoImpl, session_factory=database.provided.session
    )

    # Remote showtime service (booking workflow)
    showtime_client = providers.Singleton(
        ShowtimeClientImpl,
        base_url=config_service.provided.SHOWTIME_SERVICE_URL,
        timeout=config_service.provided.SHOWTIME_CLIENT_TIMEOUT,
    )


container = Container()


def cleanup() -> None:
    container.reset_singletons()
