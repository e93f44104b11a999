from abc import ABC, abstractmethod

from movie_booking.service.movie.domain.entity.movie_entity import MovieEntity


class IMovieCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, movie: MovieEntity) -> MovieEntity:
        pass

    @abstractmethod
    async def update(self, *, movie: MovieEntity) -> MovieEntity:
        """Overwrite every stored field, embedded showtimes included."""

    @abstractmethod
    async def delete(self, *, movie_id: str) -> None:
        pass
