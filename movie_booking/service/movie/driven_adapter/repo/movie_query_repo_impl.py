from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.interface.i_movie_query_repo import IMovieQueryRepo
from movie_booking.service.movie.domain.entity.movie_entity import MovieEntity
from movie_booking.service.movie.driven_adapter.model.movie_model import MovieModel
from movie_booking.service.movie.driven_adapter.repo.movie_mapper import model_to_entity


class MovieQueryRepoImpl(IMovieQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, movie_id: str) -> Optional[MovieEntity]:
        async with self.session_factory() as session:
            movie_model = await session.get(MovieModel, movie_id)
            return model_to_entity(movie_model) if movie_model else None

    @Logger.io
    async def list_all(self) -> List[MovieEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(MovieModel).order_by(MovieModel.id))
            return [model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def list_by_cinema(self, *, cinema_id: str) -> List[MovieEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(MovieModel).where(MovieModel.cinema_id == cinema_id).order_by(MovieModel.id)
            )
            return [model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def search_by_title(self, *, query: str) -> List[MovieEntity]:
        async with self.session_factory() as session:
            # autoescape makes % and _ in the query match literally
            result = await session.execute(
                select(MovieModel)
                .where(MovieModel.title.icontains(query, autoescape=True))
                .order_by(MovieModel.title)
            )
            return [model_to_entity(model) for model in result.scalars().all()]
