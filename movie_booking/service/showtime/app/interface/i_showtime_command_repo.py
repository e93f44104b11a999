from abc import ABC, abstractmethod

from movie_booking.service.showtime.domain.entity.showtime_entity import ShowtimeEntity


class IShowtimeCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, showtime: ShowtimeEntity) -> ShowtimeEntity:
        pass

    @abstractmethod
    async def update(self, *, showtime: ShowtimeEntity) -> ShowtimeEntity:
        pass

    @abstractmethod
    async def delete(self, *, showtime_id: str) -> None:
        pass

    @abstractmethod
    async def reduce_seats(self, *, showtime_id: str, count: int) -> ShowtimeEntity:
        """
        Atomically decrement available seats.

        Raises:
            NotFoundError: showtime does not exist
            InsufficientSeatsError: fewer than `count` seats are left
        """

    @abstractmethod
    async def restore_seats(self, *, showtime_id: str, count: int) -> ShowtimeEntity:
        """
        Atomically increment available seats, never above total seats.

        Raises:
            NotFoundError: showtime does not exist
            ConflictError: the increment would exceed total seats
        """
