from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.interface.i_movie_command_repo import IMovieCommandRepo


class DeleteMovieUseCase:
    def __init__(self, movie_command_repo: IMovieCommandRepo) -> None:
        self.movie_command_repo = movie_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        movie_command_repo: IMovieCommandRepo = Depends(Provide[Container.movie_command_repo]),
    ) -> Self:
        return cls(movie_command_repo=movie_command_repo)

    @Logger.io
    async def delete(self, *, movie_id: str) -> None:
        await self.movie_command_repo.delete(movie_id=movie_id)
