from pydantic import Field

from movie_booking.platform.schema.camel_model import CamelModel


class CinemaRequest(CamelModel):
    name: str = Field(min_length=1)
    location: str = ''


class CinemaResponse(CamelModel):
    id: str
    name: str
    location: str
