from datetime import date, time

import attrs
import uuid_utils

from movie_booking.platform.exception.exceptions import DomainError
from movie_booking.service.shared_kernel.domain.booking_window import validate_show_date


@attrs.define
class ShowtimeEntity:
    """
    One screening of a movie in a cinema.

    Invariant: 0 <= available_seats <= total_seats. Seat counts change only
    through the atomic reduce/restore statements of the repository.
    """

    id: str
    movie_id: str
    cinema_id: str
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
        movie_id: str,
        cinema_id: str,
        screen_number: int,
        show_date: date,
        start_time: time,
        price: float,
        total_seats: int,
        available_seats: int,
        today: date,
    ) -> 'ShowtimeEntity':
        cls.validate_fields(
            movie_id=movie_id,
            cinema_id=cinema_id,
            price=price,
            total_seats=total_seats,
            available_seats=available_seats,
        )
        validate_show_date(show_date=show_date, today=today)
        return cls(
            id=str(uuid_utils.uuid7()),
            movie_id=movie_id,
            cinema_id=cinema_id,
            screen_number=screen_number,
            show_date=show_date,
            start_time=start_time,
            price=price,
            total_seats=total_seats,
            available_seats=available_seats,
        )

    def replace_fields(
        self,
        *,
        movie_id: str,
        cinema_id: str,
        screen_number: int,
        show_date: date,
        start_time: time,
        price: float,
        total_seats: int,
        available_seats: int,
        today: date,
    ) -> 'ShowtimeEntity':
        self.validate_fields(
            movie_id=movie_id,
            cinema_id=cinema_id,
            price=price,
            total_seats=total_seats,
            available_seats=available_seats,
        )
        validate_show_date(show_date=show_date, today=today)
        return attrs.evolve(
            self,
            movie_id=movie_id,
            cinema_id=cinema_id,
            screen_number=screen_number,
            show_date=show_date,
            start_time=start_time,
            price=price,
            total_seats=total_seats,
            available_seats=available_seats,
        )

    @staticmethod
    def validate_fields(
        *,
        movie_id: str,
        cinema_id: str,
        price: float,
        total_seats: int,
        available_seats: int,
    ) -> None:
        if not movie_id.strip():
            raise DomainError('Movie id is required')
        if not cinema_id.strip():
            raise DomainError('Cinema id is required')
        if price <= 0:
            raise DomainError('Price must be positive')
        if total_seats <= 0:
            raise DomainError('Total seats must be positive')
        if available_seats < 0:
            raise DomainError('Available seats cannot be negative')
        if available_seats > total_seats:
            raise DomainError('Available seats cannot exceed total seats')
