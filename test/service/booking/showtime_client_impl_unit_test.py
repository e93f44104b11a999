from collections.abc import Callable
from datetime import date

import httpx
import orjson
import pytest

from movie_booking.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    InsufficientSeatsError,
    NotFoundError,
    RemoteServiceError,
)
from movie_booking.service.booking.driven_adapter.client.showtime_client_impl import (
    ShowtimeClientImpl,
)


SHOWTIME_JSON = {
    'id': 'showtime-1',
    'movieId': 'movie-1',
    'cinemaId': 'cinema-1',
    'screenNumber': 2,
    'showDate': '2025-01-11',
    'startTime': '19:30',
    'price': 12.5,
    'totalSeats': 100,
    'availableSeats': 40,
}


def _client(handler: Callable[[httpx.Request], httpx.Response]) -> ShowtimeClientImpl:
    return ShowtimeClientImpl(base_url='http://showtime', transport=httpx.MockTransport(handler))


def _respond(status_code: int, payload: object) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, content=orjson.dumps(payload))

    return handler


@pytest.mark.unit
class TestShowtimeClientImpl:
    @pytest.mark.asyncio
    async def test_get_showtime__parses_snapshot(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=orjson.dumps(SHOWTIME_JSON))

        client = _client(handler)
        snapshot = await client.get_showtime(showtime_id='showtime-1')
        await client.aclose()

        assert seen[0].method == 'GET'
        assert seen[0].url.path == '/api/showtimes/showtime-1'
        assert snapshot is not None
        assert snapshot.show_date == date(2025, 1, 11)
        assert snapshot.available_seats == 40
        assert snapshot.movie_id == 'movie-1'

    @pytest.mark.asyncio
    async def test_get_showtime__404_is_none(self) -> None:
        client = _client(_respond(404, {'detail': 'Showtime not found'}))

        assert await client.get_showtime(showtime_id='missing') is None

    @pytest.mark.asyncio
    async def test_reduce_seats__sends_count_as_query(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=orjson.dumps(SHOWTIME_JSON))

        await _client(handler).reduce_seats(showtime_id='showtime-1', count=3)

        assert seen[0].method == 'PUT'
        assert seen[0].url.path == '/api/showtimes/showtime-1/reduce'
        assert seen[0].url.params['count'] == '3'

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ('status_code', 'error'),
        [
            (404, NotFoundError),
            (409, InsufficientSeatsError),
            (400, DomainError),
            (500, RemoteServiceError),
            (503, RemoteServiceError),
        ],
    )
    async def test_reduce_seats__maps_status_codes(
        self, status_code: int, error: type[Exception]
    ) -> None:
        client = _client(_respond(status_code, {'detail': 'nope'}))

        with pytest.raises(error):
            await client.reduce_seats(showtime_id='showtime-1', count=1)

    @pytest.mark.asyncio
    async def test_reduce_seats__409_keeps_remote_detail(self) -> None:
        client = _client(_respond(409, {'detail': 'Not enough seats available'}))

        with pytest.raises(InsufficientSeatsError, match='Not enough seats available'):
            await client.reduce_seats(showtime_id='showtime-1', count=5)

    @pytest.mark.asyncio
    async def test_restore_seats__409_is_plain_conflict(self) -> None:
        client = _client(_respond(409, {'detail': 'would exceed total'}))

        with pytest.raises(ConflictError) as exc_info:
            await client.restore_seats(showtime_id='showtime-1', count=5)

        assert not isinstance(exc_info.value, InsufficientSeatsError)

    @pytest.mark.asyncio
    async def test_transport_error__is_remote_service_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError('connection refused', request=request)

        with pytest.raises(RemoteServiceError):
            await _client(handler).get_showtime(showtime_id='showtime-1')

    @pytest.mark.asyncio
    async def test_showtime_id__percent_escaped(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=orjson.dumps(SHOWTIME_JSON))

        await _client(handler).reduce_seats(showtime_id='a b?c#d', count=1)

        assert seen[0].url.raw_path == b'/api/showtimes/a%20b%3Fc%23d/reduce?count=1'

    @pytest.mark.asyncio
    @pytest.mark.parametrize('showtime_id', ['', '.', '..', 'x/../showtime-1', 'movie/movie-1'])
    async def test_non_segment_showtime_id__not_found_without_request(
        self, showtime_id: str
    ) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, content=orjson.dumps(SHOWTIME_JSON))

        with pytest.raises(NotFoundError):
            await _client(handler).restore_seats(showtime_id=showtime_id, count=1)

        assert seen == []
