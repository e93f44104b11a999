from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import NotFoundError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from movie_booking.service.booking.domain.entity.booking_entity import BookingEntity


class GetBookingUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def get_booking(self, *, booking_id: str) -> BookingEntity:
        booking = await self.booking_query_repo.get_by_id(booking_id=booking_id)

        if not booking:
            raise NotFoundError(f'Booking not found: {booking_id}')

        return booking

    @Logger.io
    async def list_by_user(self, *, user_id: str) -> List[BookingEntity]:
        bookings = await self.booking_query_repo.list_by_user(user_id=user_id)
        Logger.base.info(f'📋 [BOOKING] Found {len(bookings)} bookings for user {user_id}')
        return bookings
