from datetime import date, time

from pydantic import ConfigDict, field_serializer

from movie_booking.platform.schema.camel_model import CamelModel, EntityId


class ShowtimeRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'movieId': '01936d8f-5e73-7c4e-a9c5-000000000001',
                'cinemaId': '01936d8f-5e73-7c4e-a9c5-000000000002',
                'screenNumber': 3,
                'showDate': '2025-01-12',
                'startTime': '19:30',
                'price': 12.5,
                'totalSeats': 120,
                'availableSeats': 120,
            }
        }
    )

    movie_id: EntityId
    cinema_id: EntityId
    screen_number: int
    show_date: date
    start_time: time
    price: float
    total_seats: int
    available_seats: int


class ShowtimeResponse(CamelModel):
    id: str
    movie_id: str
    cinema_id: str
    screen_number: int
    show_date: date
    start_time: time
    price: float
    total_seats: int
    available_seats: int

    @field_serializer('start_time')
    def serialize_start_time(self, value: time) -> str:
        return value.strftime('%H:%M')
