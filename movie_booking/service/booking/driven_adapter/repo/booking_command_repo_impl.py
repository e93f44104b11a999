from datetime import timezone
from typing import AsyncContextManager, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from movie_booking.service.booking.domain.entity.booking_entity import BookingEntity
from movie_booking.service.booking.driven_adapter.model.booking_model import BookingModel


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, booking: BookingEntity) -> BookingEntity:
        async with self.session_factory() as session:
            booking_model = BookingModel(
                id=booking.id,
                user_id=booking.user_id,
                cinema_id=booking.cinema_id,
                movie_id=booking.movie_id,
                showtime_id=booking.showtime_id,
                seats_booked=booking.seats_booked,
                booking_time=booking.booking_time.astimezone(timezone.utc),
            )

            session.add(booking_model)
            await session.commit()

            return booking
