from abc import ABC, abstractmethod
from typing import Optional

from movie_booking.service.booking.app.dto.showtime_snapshot import ShowtimeSnapshot


class IShowtimeClient(ABC):
    """Remote port to the showtime service."""

    @abstractmethod
    async def get_showtime(self, *, showtime_id: str) -> Optional[ShowtimeSnapshot]:
        """Return None when the showtime does not exist."""

    @abstractmethod
    async def reduce_seats(self, *, showtime_id: str, count: int) -> ShowtimeSnapshot:
        pass

    @abstractmethod
    async def restore_seats(self, *, showtime_id: str, count: int) -> ShowtimeSnapshot:
        pass

    @abstractmethod
    async def aclose(self) -> None:
        pass
