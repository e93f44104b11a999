from datetime import date, time
from typing import List, Optional

import attrs
import uuid_utils

from movie_booking.platform.exception.exceptions import DomainError


@attrs.define
class EmbeddedShowtime:
    """Showtime summary carried inside a movie; not kept in sync with the showtime store."""

    id: str
    screen_number: int
    show_date: date
    start_time: time
    price: float
    total_seats: int
    available_seats: int

    @classmethod
    def create(
        cls,
        *,
        screen_number: int,
        show_date: date,
        start_time: time,
        price: float,
        total_seats: int,
        available_seats: int,
        id: Optional[str] = None,
    ) -> 'EmbeddedShowtime':
        return cls(
            id=id or str(uuid_utils.uuid7()),
            screen_number=screen_number,
            show_date=show_date,
            start_time=start_time,
            price=price,
            total_seats=total_seats,
            available_seats=available_seats,
        )


@attrs.define
class MovieEntity:
    id: str
    cinema_id: str
    title: str
    director: str
    genre: str
    language: str
    rating: str
    duration: int
    description: str
    release_date: Optional[date]
    cast: List[str] = attrs.field(factory=list)
    poster_url: Optional[str] = None
    trailer_url: Optional[str] = None
    showtimes: List[EmbeddedShowtime] = attrs.field(factory=list)

    @classmethod
    def create(
        cls,
        *,
        cinema_id: str,
        title: str,
        director: str,
        genre: str,
        language: str,
        rating: str,
        duration: int,
        description: str,
        release_date: Optional[date],
        cast: List[str],
        poster_url: Optional[str] = None,
        trailer_url: Optional[str] = None,
        showtimes: Optional[List[EmbeddedShowtime]] = None,
    ) -> 'MovieEntity':
        cls.validate_fields(cinema_id=cinema_id, title=title, duration=duration)
        return cls(
            id=str(uuid_utils.uuid7()),
            cinema_id=cinema_id,
            title=title,
            director=director,
            genre=genre,
            language=language,
            rating=rating,
            duration=duration,
            description=description,
            release_date=release_date,
            cast=list(cast),
            poster_url=poster_url,
            trailer_url=trailer_url,
            showtimes=_dedupe(showtimes or []),
        )

    def replace_fields(
        self,
        *,
        cinema_id: str,
        title: str,
        director: str,
        genre: str,
        language: str,
        rating: str,
        duration: int,
        description: str,
        release_date: Optional[date],
        cast: List[str],
        poster_url: Optional[str] = None,
        trailer_url: Optional[str] = None,
    ) -> 'MovieEntity':
        """Replace every descriptive field. Embedded showtimes are kept."""
        self.validate_fields(cinema_id=cinema_id, title=title, duration=duration)
        return attrs.evolve(
            self,
            cinema_id=cinema_id,
            title=title,
            director=director,
            genre=genre,
            language=language,
            rating=rating,
            duration=duration,
            description=description,
            release_date=release_date,
            cast=list(cast),
            poster_url=poster_url,
            trailer_url=trailer_url,
        )

    def add_showtime(self, showtime: EmbeddedShowtime) -> bool:
        """Append unless a showtime with the same id is already present."""
        if any(existing.id == showtime.id for existing in self.showtimes):
            return False
        self.showtimes.append(showtime)
        return True

    def remove_showtime(self, showtime_id: str) -> bool:
        remaining = [s for s in self.showtimes if s.id != showtime_id]
        removed = len(remaining) != len(self.showtimes)
        self.showtimes = remaining
        return removed

    @staticmethod
    def validate_fields(*, cinema_id: str, title: str, duration: int) -> None:
        if not cinema_id.strip():
            raise DomainError('Cinema id is required')
        if not title.strip():
            raise DomainError('Title is required')
        if duration <= 0:
            raise DomainError('Duration must be positive')


def _dedupe(showtimes: List[EmbeddedShowtime]) -> List[EmbeddedShowtime]:
    seen: set[str] = set()
    unique = []
    for showtime in showtimes:
        if showtime.id in seen:
            continue
        seen.add(showtime.id)
        unique.append(showtime)
    return unique
