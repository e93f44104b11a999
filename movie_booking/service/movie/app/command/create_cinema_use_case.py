from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.interface.i_cinema_repo import ICinemaRepo
from movie_booking.service.movie.domain.entity.cinema_entity import CinemaEntity


class CreateCinemaUseCase:
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
    async def create(self, *, name: str, location: str) -> CinemaEntity:
        cinema = CinemaEntity.create(name=name, location=location)
        return await self.cinema_repo.create(cinema=cinema)
