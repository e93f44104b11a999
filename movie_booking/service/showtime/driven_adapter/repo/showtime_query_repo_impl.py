from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.showtime.app.interface.i_showtime_query_repo import (
    IShowtimeQueryRepo,
)
from movie_booking.service.showtime.domain.entity.showtime_entity import ShowtimeEntity
from movie_booking.service.showtime.driven_adapter.model.showtime_model import ShowtimeModel
from movie_booking.service.showtime.driven_adapter.repo.showtime_mapper import model_to_entity


class ShowtimeQueryRepoImpl(IShowtimeQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, showtime_id: str) -> Optional[ShowtimeEntity]:
        async with self.session_factory() as session:
            showtime_model = await session.get(ShowtimeModel, showtime_id)
            return model_to_entity(showtime_model) if showtime_model else None

    @Logger.io
    async def list_by_movie(self, *, movie_id: str) -> List[ShowtimeEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ShowtimeModel)
                .where(ShowtimeModel.movie_id == movie_id)
                .order_by(ShowtimeModel.show_date, ShowtimeModel.start_time)
            )
            return [model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def list_by_cinema(self, *, cinema_id: str) -> List[ShowtimeEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(ShowtimeModel)
                .where(ShowtimeModel.cinema_id == cinema_id)
                .order_by(ShowtimeModel.show_date, ShowtimeModel.start_time)
            )
            return [model_to_entity(model) for model in result.scalars().all()]
