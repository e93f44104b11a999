"""
Unit tests for CreateBookingUseCase

Covers the ordered workflow:
1. Request validation before any remote call
2. Showtime lookup (404 when absent)
3. Booking window check against the injected clock
4. Snapshot seat check
5. Remote seat reduction
6. Persist, with one compensating restore when persisting fails
"""

from datetime import date, timedelta
from typing import Any
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from movie_booking.platform.exception.exceptions import (
    DomainError,
    InsufficientSeatsError,
    InvalidDateError,
    NotFoundError,
    RemoteServiceError,
)
from movie_booking.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from movie_booking.service.booking.app.dto.showtime_snapshot import ShowtimeSnapshot
from movie_booking.service.booking.domain.entity.booking_entity import BookingEntity


def _snapshot(*, show_date: date, available_seats: int = 5) -> ShowtimeSnapshot:
    return ShowtimeSnapshot(
        id='showtime-1',
        movie_id='movie-1',
        cinema_id='cinema-1',
        show_date=show_date,
        start_time='19:30',
        price=12.5,
        total_seats=100,
        available_seats=available_seats,
    )


@pytest.fixture
def mock_showtime_client(today: date) -> AsyncMock:
    client = AsyncMock()
    client.get_showtime.return_value = _snapshot(show_date=today + timedelta(days=1))
    client.reduce_seats.return_value = _snapshot(
        show_date=today + timedelta(days=1), available_seats=3
    )
    return client


@pytest.fixture
def mock_booking_command_repo() -> AsyncMock:
    repo = AsyncMock()

    async def _echo(*, booking: BookingEntity) -> BookingEntity:
        return booking

    repo.create.side_effect = _echo
    return repo


@pytest.fixture
def use_case(
    mock_showtime_client: AsyncMock,
    mock_booking_command_repo: AsyncMock,
    fixed_clock: Any,
) -> CreateBookingUseCase:
    return CreateBookingUseCase(
        showtime_client=mock_showtime_client,
        booking_command_repo=mock_booking_command_repo,
        clock=fixed_clock,
    )


@pytest.fixture
def booking_params() -> dict[str, Any]:
    return {
        'user_id': 'user-1',
        'cinema_id': 'cinema-1',
        'movie_id': 'movie-1',
        'showtime_id': 'showtime-1',
        'seats_booked': 2,
    }


@pytest.mark.unit
class TestCreateBookingUseCase:
    @pytest.mark.asyncio
    async def test_success__reduces_then_persists_with_clock_time(
        self,
        use_case: CreateBookingUseCase,
        mock_showtime_client: AsyncMock,
        mock_booking_command_repo: AsyncMock,
        booking_params: dict[str, Any],
        fixed_clock: Any,
    ) -> None:
        booking = await use_case.create_booking(**booking_params)

        mock_showtime_client.reduce_seats.assert_awaited_once_with(
            showtime_id='showtime-1', count=2
        )
        mock_booking_command_repo.create.assert_awaited_once()
        assert booking.seats_booked == 2
        assert booking.showtime_id == 'showtime-1'
        assert booking.booking_time == fixed_clock.now()
        assert booking.id
        mock_showtime_client.restore_seats.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize('days_ahead', [0, 7])
    async def test_success__window_edges_are_bookable(
        self,
        use_case: CreateBookingUseCase,
        mock_showtime_client: AsyncMock,
        booking_params: dict[str, Any],
        today: date,
        days_ahead: int,
    ) -> None:
        mock_showtime_client.get_showtime.return_value = _snapshot(
            show_date=today + timedelta(days=days_ahead)
        )

        booking = await use_case.create_booking(**booking_params)

        assert booking.seats_booked == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize('days_ahead', [-1, 8])
    async def test_fail__show_date_outside_window(
        self,
        use_case: CreateBookingUseCase,
        mock_showtime_client: AsyncMock,
        mock_booking_command_repo: AsyncMock,
        booking_params: dict[str, Any],
        today: date,
        days_ahead: int,
    ) -> None:
        mock_showtime_client.get_showtime.return_value = _snapshot(
            show_date=today + timedelta(days=days_ahead)
        )

        with pytest.raises(InvalidDateError):
            await use_case.create_booking(**booking_params)

        mock_showtime_client.reduce_seats.assert_not_awaited()
        mock_booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fail__showtime_not_found(
        self,
        use_case: CreateBookingUseCase,
        mock_showtime_client: AsyncMock,
        mock_booking_command_repo: AsyncMock,
        booking_params: dict[str, Any],
    ) -> None:
        mock_showtime_client.get_showtime.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.create_booking(**booking_params)

        assert exc_info.value.status_code == 404
        mock_showtime_client.reduce_seats.assert_not_awaited()
        mock_booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fail__snapshot_has_too_few_seats(
        self,
        use_case: CreateBookingUseCase,
        mock_showtime_client: AsyncMock,
        mock_booking_command_repo: AsyncMock,
        booking_params: dict[str, Any],
        today: date,
    ) -> None:
        mock_showtime_client.get_showtime.return_value = _snapshot(
            show_date=today + timedelta(days=1), available_seats=1
        )

        with pytest.raises(InsufficientSeatsError) as exc_info:
            await use_case.create_booking(**booking_params)

        assert exc_info.value.status_code == 409
        mock_showtime_client.reduce_seats.assert_not_awaited()
        mock_booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize('seats', [0, -3])
    async def test_fail__non_positive_seats_rejected_before_lookup(
        self,
        use_case: CreateBookingUseCase,
        mock_showtime_client: AsyncMock,
        booking_params: dict[str, Any],
        seats: int,
    ) -> None:
        booking_params['seats_booked'] = seats

        with pytest.raises(DomainError):
            await use_case.create_booking(**booking_params)

        mock_showtime_client.get_showtime.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fail__reduction_lost_race__no_booking_persisted(
        self,
        use_case: CreateBookingUseCase,
        mock_showtime_client: AsyncMock,
        mock_booking_command_repo: AsyncMock,
        booking_params: dict[str, Any],
    ) -> None:
        mock_showtime_client.reduce_seats.side_effect = InsufficientSeatsError('sold out')

        with pytest.raises(InsufficientSeatsError):
            await use_case.create_booking(**booking_params)

        mock_booking_command_repo.create.assert_not_awaited()
        mock_showtime_client.restore_seats.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fail__showtime_service_down__propagates(
        self,
        use_case: CreateBookingUseCase,
        mock_showtime_client: AsyncMock,
        mock_booking_command_repo: AsyncMock,
        booking_params: dict[str, Any],
    ) -> None:
        mock_showtime_client.reduce_seats.side_effect = RemoteServiceError('timeout')

        with pytest.raises(RemoteServiceError):
            await use_case.create_booking(**booking_params)

        mock_booking_command_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_persist_failure__restores_seats_once_and_reraises(
        self,
        use_case: CreateBookingUseCase,
        mock_showtime_client: AsyncMock,
        mock_booking_command_repo: AsyncMock,
        booking_params: dict[str, Any],
    ) -> None:
        persist_error = OperationalError('INSERT', {}, Exception('disk I/O error'))
        mock_booking_command_repo.create.side_effect = persist_error

        with pytest.raises(OperationalError) as exc_info:
            await use_case.create_booking(**booking_params)

        assert exc_info.value is persist_error
        mock_showtime_client.restore_seats.assert_awaited_once_with(
            showtime_id='showtime-1', count=2
        )

    @pytest.mark.asyncio
    async def test_persist_failure__failed_restore_does_not_mask_original_error(
        self,
        use_case: CreateBookingUseCase,
        mock_showtime_client: AsyncMock,
        mock_booking_command_repo: AsyncMock,
        booking_params: dict[str, Any],
    ) -> None:
        mock_booking_command_repo.create.side_effect = RuntimeError('database gone')
        mock_showtime_client.restore_seats.side_effect = RemoteServiceError('also gone')

        with pytest.raises(RuntimeError, match='database gone'):
            await use_case.create_booking(**booking_params)

        mock_showtime_client.restore_seats.assert_awaited_once()
