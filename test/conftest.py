"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database (aiosqlite) recreated for every integration test
- A fixed clock injected through the DI container
- An httpx AsyncClient bound to the unified app; the booking workflow's
  showtime client is pointed at the same in-process app

Architecture:
- Unit tests (@pytest.mark.unit): mocks only, no database
- Integration tests: real repositories over SQLite with per-test cleanup
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time (movie_booking.platform.config.core_setting)
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_dir = Path(tempfile.mkdtemp(prefix=f'movie_booking_{worker_id}_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_dir / "test.db"}'
    os.environ['AUTO_CREATE_TABLES'] = 'false'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from datetime import date, datetime, timedelta, timezone  # noqa: E402
from typing import Any  # noqa: E402

from dependency_injector import providers  # noqa: E402
import httpx  # noqa: E402
import pytest  # noqa: E402

from movie_booking.platform.config.di import container  # noqa: E402
from movie_booking.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from movie_booking.platform.database.orm_db_setting import (  # noqa: E402
    create_db_and_tables,
    dispose_engine,
    drop_db_tables,
)
from movie_booking.service.booking.driven_adapter.client.showtime_client_impl import (  # noqa: E402
    ShowtimeClientImpl,
)
from movie_booking.service.shared_kernel.app.interface.i_clock import IClock  # noqa: E402


FIXED_NOW = datetime(2025, 1, 10, 12, 0, tzinfo=timezone.utc)


class FixedClock(IClock):
    """Clock frozen at a given instant."""

    def __init__(self, now: datetime = FIXED_NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now

    def today(self) -> date:
        return self._now.date()


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.append('clean_database')


# =============================================================================
# Clock Fixtures
# =============================================================================
@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def set_clock() -> Callable[[datetime], None]:
    """Move the injected clock to another instant for the rest of the test."""

    def _set_clock(now: datetime) -> None:
        container.clock.override(providers.Object(FixedClock(now)))

    return _set_clock


@pytest.fixture
def today(fixed_clock: FixedClock) -> date:
    return fixed_clock.today()


@pytest.fixture
def show_date(today: date) -> Callable[[int], str]:
    """ISO show date `days` after the fixed today."""

    def _show_date(days: int = 0) -> str:
        return (today + timedelta(days=days)).isoformat()

    return _show_date


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await drop_db_tables()
    await create_db_and_tables()
    yield
    await dispose_engine()


@pytest.fixture
async def client(
    clean_database: None, fixed_clock: FixedClock
) -> AsyncGenerator[httpx.AsyncClient, None]:
    from test_main import app

    transport = httpx.ASGITransport(app=app)
    showtime_client = ShowtimeClientImpl(base_url='http://showtime', transport=transport)

    container.clock.override(providers.Object(fixed_clock))
    container.showtime_client.override(providers.Object(showtime_client))
    container.wire(modules=WIRE_MODULES)

    async with httpx.AsyncClient(transport=transport, base_url='http://test') as test_client:
        yield test_client

    await showtime_client.aclose()
    container.unwire()
    container.showtime_client.reset_override()
    container.clock.reset_override()


# =============================================================================
# Resource Builders (integration)
# =============================================================================
@pytest.fixture
def create_showtime(
    client: httpx.AsyncClient, show_date: Callable[[int], str]
) -> Callable[..., Awaitable[dict[str, Any]]]:
    async def _create(**overrides: Any) -> dict[str, Any]:
        payload = {
            'movieId': 'movie-1',
            'cinemaId': 'cinema-1',
            'screenNumber': 1,
            'showDate': show_date(1),
            'startTime': '19:30',
            'price': 12.5,
            'totalSeats': 100,
            'availableSeats': 100,
        }
        payload.update(overrides)
        response = await client.post('/api/showtimes', json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_movie(client: httpx.AsyncClient) -> Callable[..., Awaitable[dict[str, Any]]]:
    async def _create(**overrides: Any) -> dict[str, Any]:
        payload = {
            'cinemaId': 'cinema-1',
            'title': 'The Batman',
            'director': 'Matt Reeves',
            'genre': 'Action',
            'language': 'English',
            'rating': 'PG-13',
            'duration': 176,
            'description': 'Batman ventures into Gotham City underworld.',
            'releaseDate': '2022-03-04',
            'cast': ['Robert Pattinson', 'Zoe Kravitz'],
        }
        payload.update(overrides)
        response = await client.post('/api/admin/movies', json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def booking_payload() -> Callable[..., dict[str, Any]]:
    def _payload(showtime: dict[str, Any], seats: int, user_id: str = 'user-1') -> dict[str, Any]:
        return {
            'userId': user_id,
            'cinemaId': showtime['cinemaId'],
            'movieId': showtime['movieId'],
            'showtimeId': showtime['id'],
            'seatsBooked': seats,
        }

    return _payload
