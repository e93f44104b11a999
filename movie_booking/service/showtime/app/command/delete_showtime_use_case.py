from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.showtime.app.interface.i_showtime_command_repo import (
    IShowtimeCommandRepo,
)


class DeleteShowtimeUseCase:
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
    async def delete(self, *, showtime_id: str) -> None:
        await self.showtime_command_repo.delete(showtime_id=showtime_id)
