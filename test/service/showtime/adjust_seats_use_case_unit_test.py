from unittest.mock import AsyncMock, Mock

import pytest

from movie_booking.platform.exception.exceptions import DomainError, InsufficientSeatsError
from movie_booking.service.showtime.app.command.adjust_seats_use_case import AdjustSeatsUseCase


@pytest.fixture
def mock_showtime_command_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.reduce_seats.return_value = Mock(available_seats=3, total_seats=5)
    repo.restore_seats.return_value = Mock(available_seats=5, total_seats=5)
    return repo


@pytest.fixture
def use_case(mock_showtime_command_repo: AsyncMock) -> AdjustSeatsUseCase:
    return AdjustSeatsUseCase(showtime_command_repo=mock_showtime_command_repo)


@pytest.mark.unit
class TestAdjustSeatsUseCase:
    @pytest.mark.asyncio
    async def test_reduce__delegates_to_atomic_repo_update(
        self, use_case: AdjustSeatsUseCase, mock_showtime_command_repo: AsyncMock
    ) -> None:
        result = await use_case.reduce(showtime_id='showtime-1', count=2)

        mock_showtime_command_repo.reduce_seats.assert_awaited_once_with(
            showtime_id='showtime-1', count=2
        )
        assert result.available_seats == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize('count', [0, -1])
    async def test_non_positive_count_rejected(
        self,
        use_case: AdjustSeatsUseCase,
        mock_showtime_command_repo: AsyncMock,
        count: int,
    ) -> None:
        with pytest.raises(DomainError):
            await use_case.reduce(showtime_id='showtime-1', count=count)
        with pytest.raises(DomainError):
            await use_case.restore(showtime_id='showtime-1', count=count)

        mock_showtime_command_repo.reduce_seats.assert_not_awaited()
        mock_showtime_command_repo.restore_seats.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_reduce__insufficient_seats_propagates(
        self, use_case: AdjustSeatsUseCase, mock_showtime_command_repo: AsyncMock
    ) -> None:
        mock_showtime_command_repo.reduce_seats.side_effect = InsufficientSeatsError('sold out')

        with pytest.raises(InsufficientSeatsError):
            await use_case.reduce(showtime_id='showtime-1', count=10)
