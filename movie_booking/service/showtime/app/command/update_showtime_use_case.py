from datetime import date, time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import NotFoundError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.shared_kernel.app.interface.i_clock import IClock
from movie_booking.service.showtime.app.interface.i_showtime_command_repo import (
    IShowtimeCommandRepo,
)
from movie_booking.service.showtime.app.interface.i_showtime_query_repo import (
    IShowtimeQueryRepo,
)
from movie_booking.service.showtime.domain.entity.showtime_entity import ShowtimeEntity


class UpdateShowtimeUseCase:
    def __init__(
        self,
        *,
        showtime_command_repo: IShowtimeCommandRepo,
        showtime_query_repo: IShowtimeQueryRepo,
        clock: IClock,
    ) -> None:
        self.showtime_command_repo = showtime_command_repo
        self.showtime_query_repo = showtime_query_repo
        self.clock = clock

    @classmethod
    @inject
    def depends(
        cls,
        showtime_command_repo: IShowtimeCommandRepo = Depends(
            Provide[Container.showtime_command_repo]
        ),
        showtime_query_repo: IShowtimeQueryRepo = Depends(Provide[Container.showtime_query_repo]),
        clock: IClock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(
            showtime_command_repo=showtime_command_repo,
            showtime_query_repo=showtime_query_repo,
            clock=clock,
        )

    @Logger.io
    async def update(
        self,
        *,
        showtime_id: str,
        movie_id: str,
        cinema_id: str,
        screen_number: int,
        show_date: date,
        start_time: time,
        price: float,
        total_seats: int,
        available_seats: int,
    ) -> ShowtimeEntity:
        existing = await self.showtime_query_repo.get_by_id(showtime_id=showtime_id)
        if not existing:
            raise NotFoundError(f'Showtime not found: {showtime_id}')

        updated = existing.replace_fields(
            movie_id=movie_id,
            cinema_id=cinema_id,
            screen_number=screen_number,
            show_date=show_date,
            start_time=start_time,
            price=price,
            total_seats=total_seats,
            available_seats=available_seats,
            today=self.clock.today(),
        )
        return await self.showtime_command_repo.update(showtime=updated)
