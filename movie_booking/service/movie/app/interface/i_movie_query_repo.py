from abc import ABC, abstractmethod
from typing import List, Optional

from movie_booking.service.movie.domain.entity.movie_entity import MovieEntity


class IMovieQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, movie_id: str) -> Optional[MovieEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[MovieEntity]:
        pass

    @abstractmethod
    async def list_by_cinema(self, *, cinema_id: str) -> List[MovieEntity]:
        pass

    @abstractmethod
    async def search_by_title(self, *, query: str) -> List[MovieEntity]:
        """Case-insensitive substring match on the title."""
