from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from movie_booking.service.booking.domain.entity.booking_entity import BookingEntity
from movie_booking.service.booking.driven_adapter.model.booking_model import BookingModel
from movie_booking.service.booking.driven_adapter.repo.booking_mapper import model_to_entity


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, booking_id: str) -> Optional[BookingEntity]:
        async with self.session_factory() as session:
            booking_model = await session.get(BookingModel, booking_id)
            return model_to_entity(booking_model) if booking_model else None

    @Logger.io
    async def list_by_user(self, *, user_id: str) -> List[BookingEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.booking_time.desc())
            )
            return [model_to_entity(model) for model in result.scalars().all()]
