from abc import ABC, abstractmethod
from typing import List, Optional

from movie_booking.service.showtime.domain.entity.showtime_entity import ShowtimeEntity


class IShowtimeQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, showtime_id: str) -> Optional[ShowtimeEntity]:
        pass

    @abstractmethod
    async def list_by_movie(self, *, movie_id: str) -> List[ShowtimeEntity]:
        pass

    @abstractmethod
    async def list_by_cinema(self, *, cinema_id: str) -> List[ShowtimeEntity]:
        pass
