from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import NotFoundError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.showtime.app.interface.i_showtime_query_repo import (
    IShowtimeQueryRepo,
)
from movie_booking.service.showtime.domain.entity.showtime_entity import ShowtimeEntity


class GetShowtimeUseCase:
    def __init__(self, showtime_query_repo: IShowtimeQueryRepo) -> None:
        self.showtime_query_repo = showtime_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        showtime_query_repo: IShowtimeQueryRepo = Depends(Provide[Container.showtime_query_repo]),
    ) -> Self:
        return cls(showtime_query_repo=showtime_query_repo)

    @Logger.io
    async def get_by_id(self, *, showtime_id: str) -> ShowtimeEntity:
        showtime = await self.showtime_query_repo.get_by_id(showtime_id=showtime_id)
        if not showtime:
            raise NotFoundError(f'Showtime not found: {showtime_id}')
        return showtime

    @Logger.io
    async def list_by_movie(self, *, movie_id: str) -> List[ShowtimeEntity]:
        return await self.showtime_query_repo.list_by_movie(movie_id=movie_id)

    @Logger.io
    async def list_by_cinema(self, *, cinema_id: str) -> List[ShowtimeEntity]:
        return await self.showtime_query_repo.list_by_cinema(cinema_id=cinema_id)
