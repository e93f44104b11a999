from typing import AsyncContextManager, Callable

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.platform.exception.exceptions import NotFoundError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.interface.i_movie_command_repo import IMovieCommandRepo
from movie_booking.service.movie.domain.entity.movie_entity import MovieEntity
from movie_booking.service.movie.driven_adapter.model.movie_model import MovieModel
from movie_booking.service.movie.driven_adapter.repo.movie_mapper import (
    model_to_entity,
    showtimes_to_documents,
)


class MovieCommandRepoImpl(IMovieCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, movie: MovieEntity) -> MovieEntity:
        async with self.session_factory() as session:
            movie_model = MovieModel(id=movie.id)
            self._apply(movie_model=movie_model, movie=movie)

            session.add(movie_model)
            await session.commit()
            await session.refresh(movie_model)

            return model_to_entity(movie_model)

    @Logger.io
    async def update(self, *, movie: MovieEntity) -> MovieEntity:
        async with self.session_factory() as session:
            movie_model = await session.get(MovieModel, movie.id)
            if not movie_model:
                raise NotFoundError(f'Movie not found: {movie.id}')

            self._apply(movie_model=movie_model, movie=movie)

            await session.commit()
            await session.refresh(movie_model)

            return model_to_entity(movie_model)

    @Logger.io
    async def delete(self, *, movie_id: str) -> None:
        async with self.session_factory() as session:
            result = await session.execute(delete(MovieModel).where(MovieModel.id == movie_id))
            if result.rowcount == 0:
                raise NotFoundError(f'Movie not found: {movie_id}')
            await session.commit()

    @staticmethod
    def _apply(*, movie_model: MovieModel, movie: MovieEntity) -> None:
        movie_model.cinema_id = movie.cinema_id
        movie_model.title = movie.title
        movie_model.director = movie.director
        movie_model.genre = movie.genre
        movie_model.language = movie.language
        movie_model.rating = movie.rating
        movie_model.duration = movie.duration
        movie_model.description = movie.description
        movie_model.release_date = movie.release_date
        # New list objects so the JSON columns are flagged dirty
        movie_model.cast = list(movie.cast)
        movie_model.poster_url = movie.poster_url
        movie_model.trailer_url = movie.trailer_url
        movie_model.showtimes = showtimes_to_documents(movie.showtimes)
