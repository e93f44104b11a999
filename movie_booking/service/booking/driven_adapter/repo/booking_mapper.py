from datetime import timezone

from movie_booking.service.booking.domain.entity.booking_entity import BookingEntity
from movie_booking.service.booking.driven_adapter.model.booking_model import BookingModel


def model_to_entity(booking_model: BookingModel) -> BookingEntity:
    booking_time = booking_model.booking_time
    # Drivers without timezone support (SQLite) hand back naive UTC values
    if booking_time.tzinfo is None:
        booking_time = booking_time.replace(tzinfo=timezone.utc)
    return BookingEntity(
        id=booking_model.id,
        user_id=booking_model.user_id,
        cinema_id=booking_model.cinema_id,
        movie_id=booking_model.movie_id,
        showtime_id=booking_model.showtime_id,
        seats_booked=booking_model.seats_booked,
        booking_time=booking_time,
    )
