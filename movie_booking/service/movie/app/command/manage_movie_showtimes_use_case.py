"""
Embedded showtime management

Edits the showtime list stored inside a movie document. The showtime store
is not consulted or updated.
"""

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import NotFoundError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.interface.i_movie_command_repo import IMovieCommandRepo
from movie_booking.service.movie.app.interface.i_movie_query_repo import IMovieQueryRepo
from movie_booking.service.movie.domain.entity.movie_entity import EmbeddedShowtime, MovieEntity


class ManageMovieShowtimesUseCase:
    def __init__(
        self,
        *,
        movie_command_repo: IMovieCommandRepo,
        movie_query_repo: IMovieQueryRepo,
    ) -> None:
        self.movie_command_repo = movie_command_repo
        self.movie_query_repo = movie_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        movie_command_repo: IMovieCommandRepo = Depends(Provide[Container.movie_command_repo]),
        movie_query_repo: IMovieQueryRepo = Depends(Provide[Container.movie_query_repo]),
    ) -> Self:
        return cls(movie_command_repo=movie_command_repo, movie_query_repo=movie_query_repo)

    @Logger.io
    async def add_showtime(self, *, movie_id: str, showtime: EmbeddedShowtime) -> MovieEntity:
        movie = await self._load(movie_id=movie_id)
        if not movie.add_showtime(showtime):
            Logger.base.info(f'⏭️ [MOVIE] Showtime {showtime.id} already on movie {movie_id}')
            return movie
        return await self.movie_command_repo.update(movie=movie)

    @Logger.io
    async def remove_showtime(self, *, movie_id: str, showtime_id: str) -> MovieEntity:
        movie = await self._load(movie_id=movie_id)
        if not movie.remove_showtime(showtime_id):
            return movie
        return await self.movie_command_repo.update(movie=movie)

    async def _load(self, *, movie_id: str) -> MovieEntity:
        movie = await self.movie_query_repo.get_by_id(movie_id=movie_id)
        if not movie:
            raise NotFoundError(f'Movie not found: {movie_id}')
        return movie
