from abc import ABC, abstractmethod
from typing import List, Optional

from movie_booking.service.movie.domain.entity.cinema_entity import CinemaEntity


class ICinemaRepo(ABC):
    @abstractmethod
    async def create(self, *, cinema: CinemaEntity) -> CinemaEntity:
        pass

    @abstractmethod
    async def get_by_id(self, *, cinema_id: str) -> Optional[CinemaEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[CinemaEntity]:
        pass
