from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import NotFoundError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.interface.i_movie_query_repo import IMovieQueryRepo
from movie_booking.service.movie.domain.entity.movie_entity import EmbeddedShowtime, MovieEntity


class GetMovieUseCase:
    def __init__(self, movie_query_repo: IMovieQueryRepo) -> None:
        self.movie_query_repo = movie_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        movie_query_repo: IMovieQueryRepo = Depends(Provide[Container.movie_query_repo]),
    ) -> Self:
        return cls(movie_query_repo=movie_query_repo)

    @Logger.io
    async def get_by_id(self, *, movie_id: str) -> MovieEntity:
        movie = await self.movie_query_repo.get_by_id(movie_id=movie_id)
        if not movie:
            raise NotFoundError(f'Movie not found: {movie_id}')
        return movie

    @Logger.io
    async def list_all(self) -> List[MovieEntity]:
        return await self.movie_query_repo.list_all()

    @Logger.io
    async def list_by_cinema(self, *, cinema_id: str) -> List[MovieEntity]:
        return await self.movie_query_repo.list_by_cinema(cinema_id=cinema_id)

    @Logger.io
    async def search(self, *, query: str) -> List[MovieEntity]:
        movies = await self.movie_query_repo.search_by_title(query=query)
        Logger.base.info(f'🔍 [SEARCH] "{query}" matched {len(movies)} movies')
        return movies

    @Logger.io
    async def list_showtimes(self, *, movie_id: str) -> List[EmbeddedShowtime]:
        movie = await self.get_by_id(movie_id=movie_id)
        return movie.showtimes
