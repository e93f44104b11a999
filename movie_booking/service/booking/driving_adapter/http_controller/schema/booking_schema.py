from datetime import datetime

from pydantic import ConfigDict

from movie_booking.platform.schema.camel_model import CamelModel, EntityId


class BookingCreateRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'userId': '01936d8f-5e73-7c4e-a9c5-000000000010',
                'cinemaId': '01936d8f-5e73-7c4e-a9c5-000000000002',
                'movieId': '01936d8f-5e73-7c4e-a9c5-000000000001',
                'showtimeId': '01936d8f-5e73-7c4e-a9c5-000000000003',
                'seatsBooked': 2,
            }
        }
    )

    user_id: EntityId
    cinema_id: EntityId
    movie_id: EntityId
    showtime_id: EntityId
    seats_booked: int


class BookingResponse(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': '01936d8f-5e73-7c4e-a9c5-123456789abc',  # UUID7
                'userId': '01936d8f-5e73-7c4e-a9c5-000000000010',
                'cinemaId': '01936d8f-5e73-7c4e-a9c5-000000000002',
                'movieId': '01936d8f-5e73-7c4e-a9c5-000000000001',
                'showtimeId': '01936d8f-5e73-7c4e-a9c5-000000000003',
                'seatsBooked': 2,
                'bookingTime': '2025-01-10T10:30:00Z',
            }
        }
    )

    id: str
    user_id: str
    cinema_id: str
    movie_id: str
    showtime_id: str
    seats_booked: int
    booking_time: datetime
