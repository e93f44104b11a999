"""
HTTP adapter for the showtime service

Status mapping for calls that must succeed:
    404 -> NotFoundError
    409 -> InsufficientSeatsError (reduce) / ConflictError (restore)
    400 -> DomainError
    anything else, timeouts and connection errors -> RemoteServiceError
"""

from datetime import date
from typing import Any, Optional
from urllib.parse import quote

import httpx
import orjson

from movie_booking.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    InsufficientSeatsError,
    NotFoundError,
    RemoteServiceError,
)
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.platform.observability.tracing import inject_trace_headers
from movie_booking.service.booking.app.dto.showtime_snapshot import ShowtimeSnapshot
from movie_booking.service.booking.app.interface.i_showtime_client import IShowtimeClient


class ShowtimeClientImpl(IShowtimeClient):
    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    @Logger.io
    async def get_showtime(self, *, showtime_id: str) -> Optional[ShowtimeSnapshot]:
        response = await self._send('GET', _showtime_path(showtime_id))
        if response.status_code == 404:
            return None
        self._raise_for_status(response, conflict_error=ConflictError)
        return self._to_snapshot(orjson.loads(response.content))

    @Logger.io
    async def reduce_seats(self, *, showtime_id: str, count: int) -> ShowtimeSnapshot:
        response = await self._send(
            'PUT', _showtime_path(showtime_id, 'reduce'), params={'count': count}
        )
        self._raise_for_status(response, conflict_error=InsufficientSeatsError)
        return self._to_snapshot(orjson.loads(response.content))

    @Logger.io
    async def restore_seats(self, *, showtime_id: str, count: int) -> ShowtimeSnapshot:
        response = await self._send(
            'PUT', _showtime_path(showtime_id, 'restore'), params={'count': count}
        )
        self._raise_for_status(response, conflict_error=ConflictError)
        return self._to_snapshot(orjson.loads(response.content))

    async def _send(
        self, method: str, path: str, *, params: Optional[dict[str, Any]] = None
    ) -> httpx.Response:
        try:
            return await self.client.request(
                method, path, params=params, headers=inject_trace_headers()
            )
        except httpx.HTTPError as e:
            raise RemoteServiceError(f'Showtime service unreachable: {e}') from e

    @staticmethod
    def _raise_for_status(
        response: httpx.Response, *, conflict_error: type[ConflictError]
    ) -> None:
        if response.is_success:
            return

        detail = _error_detail(response)
        match response.status_code:
            case 404:
                raise NotFoundError(detail or 'Showtime not found')
            case 409:
                raise conflict_error(detail or 'Showtime conflict')
            case 400:
                raise DomainError(detail or 'Showtime service rejected the request')
            case _:
                raise RemoteServiceError(
                    f'Showtime service returned {response.status_code}: {detail}'
                )

    @staticmethod
    def _to_snapshot(payload: dict[str, Any]) -> ShowtimeSnapshot:
        return ShowtimeSnapshot(
            id=payload['id'],
            movie_id=payload['movieId'],
            cinema_id=payload['cinemaId'],
            show_date=date.fromisoformat(payload['showDate']),
            start_time=payload['startTime'],
            price=float(payload['price']),
            total_seats=int(payload['totalSeats']),
            available_seats=int(payload['availableSeats']),
        )


def _error_detail(response: httpx.Response) -> str:
    try:
        detail = orjson.loads(response.content).get('detail', '')
    except (orjson.JSONDecodeError, AttributeError):
        return response.text
    return detail if isinstance(detail, str) else str(detail)


def _showtime_path(showtime_id: str, action: str = '') -> str:
    # Ids are single path segments; the remote side decodes %2F before routing
    if showtime_id in ('', '.', '..') or '/' in showtime_id:
        raise NotFoundError('Showtime not found')
    path = f'/api/showtimes/{quote(showtime_id, safe="")}'
    return f'{path}/{action}' if action else path
