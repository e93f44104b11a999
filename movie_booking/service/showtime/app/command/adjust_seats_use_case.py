"""
Seat inventory mutations

reduce() is called by the booking workflow before a booking is persisted;
restore() is its compensating action when persisting fails afterwards.
Neither re-validates the booking window.
"""

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import DomainError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.showtime.app.interface.i_showtime_command_repo import (
    IShowtimeCommandRepo,
)
from movie_booking.service.showtime.domain.entity.showtime_entity import ShowtimeEntity


class AdjustSeatsUseCase:
    def __init__(self, showtime_command_repo: IShowtimeCommandRepo) -> None:
        self.showtime_command_repo = showtime_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        showtime_command_repo: IShowtimeCommandRepo = Depends(
            Provide[Container.showtime_command_repo]
        ),
    ) -> Self:
        return cls(showtime_command_repo=showtime_command_repo)

    @Logger.io
    async def reduce(self, *, showtime_id: str, count: int) -> ShowtimeEntity:
        self._validate_count(count)
        showtime = await self.showtime_command_repo.reduce_seats(
            showtime_id=showtime_id, count=count
        )
        Logger.base.info(
            f'🎟️ [SEATS] Reduced {count} seats of {showtime_id}, '
            f'{showtime.available_seats}/{showtime.total_seats} left'
        )
        return showtime

    @Logger.io
    async def restore(self, *, showtime_id: str, count: int) -> ShowtimeEntity:
        self._validate_count(count)
        showtime = await self.showtime_command_repo.restore_seats(
            showtime_id=showtime_id, count=count
        )
        Logger.base.info(
            f'↩️ [SEATS] Restored {count} seats of {showtime_id}, '
            f'{showtime.available_seats}/{showtime.total_seats} left'
        )
        return showtime

    @staticmethod
    def _validate_count(count: int) -> None:
        if count <= 0:
            raise DomainError('Seat count must be positive')
