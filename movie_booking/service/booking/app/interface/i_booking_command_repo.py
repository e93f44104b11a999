from abc import ABC, abstractmethod

from movie_booking.service.booking.domain.entity.booking_entity import BookingEntity


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, booking: BookingEntity) -> BookingEntity:
        pass
