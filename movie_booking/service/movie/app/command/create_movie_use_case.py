from datetime import date
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.interface.i_movie_command_repo import IMovieCommandRepo
from movie_booking.service.movie.domain.entity.movie_entity import EmbeddedShowtime, MovieEntity


class CreateMovieUseCase:
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
    async def create(
        self,
        *,
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
        showtimes: Optional[List[EmbeddedShowtime]] = None,
    ) -> MovieEntity:
        movie = MovieEntity.create(
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
            showtimes=showtimes,
        )
        created = await self.movie_command_repo.create(movie=movie)
        Logger.base.info(f'🎞️ [MOVIE] Created "{created.title}" ({created.id})')
        return created
