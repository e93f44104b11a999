from datetime import date
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import NotFoundError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.interface.i_movie_command_repo import IMovieCommandRepo
from movie_booking.service.movie.app.interface.i_movie_query_repo import IMovieQueryRepo
from movie_booking.service.movie.domain.entity.movie_entity import MovieEntity


class UpdateMovieUseCase:
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
    async def update(
        self,
        *,
        movie_id: str,
        cinema_id: str,
        title: str,
        director: str,
        genre: str,
        language: str,
        rating: str,
        duration: int,
        description: str,
        release_date: Optional[date],
        cast: List[str],
        poster_url: Optional[str] = None,
        trailer_url: Optional[str] = None,
    ) -> MovieEntity:
        existing = await self.movie_query_repo.get_by_id(movie_id=movie_id)
        if not existing:
            raise NotFoundError(f'Movie not found: {movie_id}')

        updated = existing.replace_fields(
            cinema_id=cinema_id,
            title=title,
            director=director,
            genre=genre,
            language=language,
            rating=rating,
            duration=duration,
            description=description,
            release_date=release_date,
            cast=cast,
            poster_url=poster_url,
            trailer_url=trailer_url,
        )
        return await self.movie_command_repo.update(movie=updated)
