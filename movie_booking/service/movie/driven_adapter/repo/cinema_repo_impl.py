from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.interface.i_cinema_repo import ICinemaRepo
from movie_booking.service.movie.domain.entity.cinema_entity import CinemaEntity
from movie_booking.service.movie.driven_adapter.model.cinema_model import CinemaModel


class CinemaRepoImpl(ICinemaRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, cinema: CinemaEntity) -> CinemaEntity:
        async with self.session_factory() as session:
            cinema_model = CinemaModel(id=cinema.id, name=cinema.name, location=cinema.location)
            session.add(cinema_model)
            await session.commit()
            return cinema

    @Logger.io
    async def get_by_id(self, *, cinema_id: str) -> Optional[CinemaEntity]:
        async with self.session_factory() as session:
            cinema_model = await session.get(CinemaModel, cinema_id)
            return self._model_to_entity(cinema_model) if cinema_model else None

    @Logger.io
    async def list_all(self) -> List[CinemaEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(CinemaModel).order_by(CinemaModel.name))
            return [self._model_to_entity(model) for model in result.scalars().all()]

    def _model_to_entity(self, cinema_model: CinemaModel) -> CinemaEntity:
        return CinemaEntity(
            id=cinema_model.id,
            name=cinema_model.name,
            location=cinema_model.location,
        )
