from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import NotFoundError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.interface.i_cinema_repo import ICinemaRepo
from movie_booking.service.movie.domain.entity.cinema_entity import CinemaEntity


class GetCinemaUseCase:
    def __init__(self, cinema_repo: ICinemaRepo) -> None:
        self.cinema_repo = cinema_repo

    @classmethod
    @inject
    def depends(
        cls,
        cinema_repo: ICinemaRepo = Depends(Provide[Container.cinema_repo]),
    ) -> Self:
        return cls(cinema_repo=cinema_repo)

    @Logger.io
    async def get_by_id(self, *, cinema_id: str) -> CinemaEntity:
        cinema = await self.cinema_repo.get_by_id(cinema_id=cinema_id)
        if not cinema:
            raise NotFoundError(f'Cinema not found: {cinema_id}')
        return cinema

    @Logger.io
    async def list_all(self) -> List[CinemaEntity]:
        return await self.cinema_repo.list_all()
