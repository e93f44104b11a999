from datetime import date, time
from typing import List, Optional

from pydantic import ConfigDict, Field, field_serializer

from movie_booking.platform.schema.camel_model import CamelModel, EntityId


class EmbeddedShowtimeRequest(CamelModel):
    id: Optional[EntityId] = None
    screen_number: int
    show_date: date
    start_time: time
    price: float
    total_seats: int
    available_seats: int


class EmbeddedShowtimeResponse(CamelModel):
    id: str
    screen_number: int
    show_date: date
    start_time: time
    price: float
    total_seats: int
    available_seats: int

    @field_serializer('start_time')
    def serialize_start_time(self, value: time) -> str:
        return value.strftime('%H:%M')


class MovieRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'cinemaId': '01936d8f-5e73-7c4e-a9c5-000000000002',
                'title': 'The Batman',
                'director': 'Matt Reeves',
                'genre': 'Action',
                'language': 'English',
                'rating': 'PG-13',
                'duration': 176,
                'description': 'Batman ventures into Gotham City\'s underworld.',
                'releaseDate': '2022-03-04',
                'cast': ['Robert Pattinson', 'Zoë Kravitz'],
                'posterUrl': 'https://example.com/batman.jpg',
                'trailerUrl': 'https://example.com/batman.mp4',
            }
        }
    )

    cinema_id: EntityId
    title: str = Field(min_length=1)
    director: str = Field(min_length=1)
    genre: str = Field(min_length=1)
    language: str = Field(min_length=1)
    rating: str = Field(min_length=1)
    duration: int = Field(gt=0)
    description: str = ''
    release_date: Optional[date] = None
    cast: List[str] = []
    poster_url: Optional[str] = None
    trailer_url: Optional[str] = None
    showtimes: List[EmbeddedShowtimeRequest] = []


class MovieResponse(CamelModel):
    id: str
    cinema_id: str
    title: str
    director: str
    genre: str
    language: str
    rating: str
    duration: int
    description: str
    release_date: Optional[date] = None
    cast: List[str]
    poster_url: Optional[str] = None
    trailer_url: Optional[str] = None
    showtimes: List[EmbeddedShowtimeResponse]
