from abc import ABC, abstractmethod
from typing import List, Optional

from movie_booking.service.booking.domain.entity.booking_entity import BookingEntity


class IBookingQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, booking_id: str) -> Optional[BookingEntity]:
        pass

    @abstractmethod
    async def list_by_user(self, *, user_id: str) -> List[BookingEntity]:
        pass
