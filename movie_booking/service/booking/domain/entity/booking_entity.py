from datetime import datetime

import attrs
import uuid_utils

from movie_booking.platform.exception.exceptions import DomainError


@attrs.define
class BookingEntity:
    id: str
    user_id: str
    cinema_id: str
    movie_id: str
    showtime_id: str
    seats_booked: int
    booking_time: datetime

    @classmethod
    def create(
        cls,
        *,
        user_id: str,
        cinema_id: str,
        movie_id: str,
        showtime_id: str,
        seats_booked: int,
        booking_time: datetime,
    ) -> 'BookingEntity':
        cls.validate_request(
            user_id=user_id,
            cinema_id=cinema_id,
            movie_id=movie_id,
            showtime_id=showtime_id,
            seats_booked=seats_booked,
        )
        return cls(
            id=str(uuid_utils.uuid7()),
            user_id=user_id,
            cinema_id=cinema_id,
            movie_id=movie_id,
            showtime_id=showtime_id,
            seats_booked=seats_booked,
            booking_time=booking_time,
        )

    @staticmethod
    def validate_request(
        *,
        user_id: str,
        cinema_id: str,
        movie_id: str,
        showtime_id: str,
        seats_booked: int,
    ) -> None:
        if seats_booked <= 0:
            raise DomainError('Seats booked must be positive')
        for field_name, value in (
            ('User id', user_id),
            ('Cinema id', cinema_id),
            ('Movie id', movie_id),
            ('Showtime id', showtime_id),
        ):
            if not value.strip():
                raise DomainError(f'{field_name} is required')
