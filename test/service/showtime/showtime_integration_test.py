from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import Any

import httpx
import pytest


@pytest.mark.integration
class TestShowtimeApi:
    @pytest.mark.asyncio
    async def test_create_and_get(
        self,
        client: httpx.AsyncClient,
        create_showtime: Callable[..., Awaitable[dict[str, Any]]],
        show_date: Callable[[int], str],
    ) -> None:
        created = await create_showtime(startTime='09:05')

        response = await client.get(f'/api/showtimes/{created["id"]}')

        assert response.status_code == 200
        body = response.json()
        assert body == created
        assert body['startTime'] == '09:05'
        assert body['showDate'] == show_date(1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize('days_ahead', [-1, 8])
    async def test_create_outside_window__400(
        self,
        client: httpx.AsyncClient,
        show_date: Callable[[int], str],
        days_ahead: int,
    ) -> None:
        response = await client.post(
            '/api/showtimes',
            json={
                'movieId': 'movie-1',
                'cinemaId': 'cinema-1',
                'screenNumber': 1,
                'showDate': show_date(days_ahead),
                'startTime': '19:30',
                'price': 10,
                'totalSeats': 10,
                'availableSeats': 10,
            },
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    @pytest.mark.parametrize('field', ['movieId', 'cinemaId'])
    async def test_create_id_longer_than_36__400(
        self,
        client: httpx.AsyncClient,
        show_date: Callable[[int], str],
        field: str,
    ) -> None:
        payload = {
            'movieId': 'movie-1',
            'cinemaId': 'cinema-1',
            'screenNumber': 1,
            'showDate': show_date(1),
            'startTime': '19:30',
            'price': 10,
            'totalSeats': 10,
            'availableSeats': 10,
        }
        payload[field] = 'x' * 37

        response = await client.post('/api/showtimes', json=payload)

        assert response.status_code == 400
        assert (await client.get('/api/showtimes/movie/movie-1')).json() == []

    @pytest.mark.asyncio
    async def test_get_unknown__404(self, client: httpx.AsyncClient) -> None:
        response = await client.get('/api/showtimes/missing')

        assert response.status_code == 404
        assert 'detail' in response.json()

    @pytest.mark.asyncio
    async def test_list_by_movie_and_cinema(
        self,
        client: httpx.AsyncClient,
        create_showtime: Callable[..., Awaitable[dict[str, Any]]],
    ) -> None:
        await create_showtime(movieId='m-1', cinemaId='c-1')
        await create_showtime(movieId='m-1', cinemaId='c-2')
        await create_showtime(movieId='m-2', cinemaId='c-1')

        by_movie = (await client.get('/api/showtimes/movie/m-1')).json()
        by_cinema = (await client.get('/api/showtimes/cinema/c-1')).json()
        empty = (await client.get('/api/showtimes/movie/unknown')).json()

        assert {s['cinemaId'] for s in by_movie} == {'c-1', 'c-2'}
        assert {s['movieId'] for s in by_cinema} == {'m-1', 'm-2'}
        assert empty == []

    @pytest.mark.asyncio
    async def test_update__full_replace(
        self,
        client: httpx.AsyncClient,
        create_showtime: Callable[..., Awaitable[dict[str, Any]]],
        show_date: Callable[[int], str],
    ) -> None:
        created = await create_showtime()
        replacement = {
            'movieId': 'movie-9',
            'cinemaId': 'cinema-9',
            'screenNumber': 7,
            'showDate': show_date(3),
            'startTime': '21:00',
            'price': 20.0,
            'totalSeats': 50,
            'availableSeats': 50,
        }

        response = await client.put(f'/api/showtimes/{created["id"]}', json=replacement)

        assert response.status_code == 200
        assert response.json() == {'id': created['id'], **replacement}

    @pytest.mark.asyncio
    async def test_update_unknown__404(
        self,
        client: httpx.AsyncClient,
        create_showtime: Callable[..., Awaitable[dict[str, Any]]],
    ) -> None:
        created = await create_showtime()
        payload = {k: v for k, v in created.items() if k != 'id'}

        response = await client.put('/api/showtimes/missing', json=payload)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete(
        self,
        client: httpx.AsyncClient,
        create_showtime: Callable[..., Awaitable[dict[str, Any]]],
    ) -> None:
        created = await create_showtime()

        assert (await client.delete(f'/api/showtimes/{created["id"]}')).status_code == 204
        assert (await client.get(f'/api/showtimes/{created["id"]}')).status_code == 404
        assert (await client.delete(f'/api/showtimes/{created["id"]}')).status_code == 404


@pytest.mark.integration
class TestSeatAdjustmentApi:
    @pytest.mark.asyncio
    async def test_reduce(
        self,
        client: httpx.AsyncClient,
        create_showtime: Callable[..., Awaitable[dict[str, Any]]],
    ) -> None:
        created = await create_showtime(totalSeats=5, availableSeats=5)

        response = await client.put(f'/api/showtimes/{created["id"]}/reduce', params={'count': 3})

        assert response.status_code == 200
        assert response.json()['availableSeats'] == 2

    @pytest.mark.asyncio
    async def test_reduce_too_many__409_and_unchanged(
        self,
        client: httpx.AsyncClient,
        create_showtime: Callable[..., Awaitable[dict[str, Any]]],
    ) -> None:
        created = await create_showtime(totalSeats=5, availableSeats=2)

        response = await client.put(f'/api/showtimes/{created["id"]}/reduce', params={'count': 3})

        assert response.status_code == 409
        after = (await client.get(f'/api/showtimes/{created["id"]}')).json()
        assert after['availableSeats'] == 2

    @pytest.mark.asyncio
    async def test_reduce_unknown__404(self, client: httpx.AsyncClient) -> None:
        response = await client.put('/api/showtimes/missing/reduce', params={'count': 1})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_reduce_non_positive__400(
        self,
        client: httpx.AsyncClient,
        create_showtime: Callable[..., Awaitable[dict[str, Any]]],
    ) -> None:
        created = await create_showtime()

        response = await client.put(f'/api/showtimes/{created["id"]}/reduce', params={'count': 0})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_restore__capped_at_total(
        self,
        client: httpx.AsyncClient,
        create_showtime: Callable[..., Awaitable[dict[str, Any]]],
    ) -> None:
        created = await create_showtime(totalSeats=5, availableSeats=3)
        url = f'/api/showtimes/{created["id"]}/restore'

        ok = await client.put(url, params={'count': 2})
        over = await client.put(url, params={'count': 1})

        assert ok.status_code == 200
        assert ok.json()['availableSeats'] == 5
        assert over.status_code == 409
        after = (await client.get(f'/api/showtimes/{created["id"]}')).json()
        assert after['availableSeats'] == 5

    @pytest.mark.asyncio
    async def test_reduce_ignores_booking_window(
        self,
        client: httpx.AsyncClient,
        create_showtime: Callable[..., Awaitable[dict[str, Any]]],
        fixed_clock: Any,
        set_clock: Callable[..., None],
    ) -> None:
        created = await create_showtime(totalSeats=5, availableSeats=5)
        set_clock(fixed_clock.now() + timedelta(days=30))

        response = await client.put(f'/api/showtimes/{created["id"]}/reduce', params={'count': 1})

        assert response.status_code == 200
