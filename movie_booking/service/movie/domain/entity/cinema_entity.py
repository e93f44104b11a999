import attrs
import uuid_utils

from movie_booking.platform.exception.exceptions import DomainError


@attrs.define
class CinemaEntity:
    id: str
    name: str
    location: str

    @classmethod
    def create(cls, *, name: str, location: str) -> 'CinemaEntity':
        if not name.strip():
            raise DomainError('Cinema name is required')
        return cls(id=str(uuid_utils.uuid7()), name=name, location=location)
