import attrs

from movie_booking.service.movie.domain.entity.movie_entity import EmbeddedShowtime, MovieEntity
from movie_booking.service.movie.driving_adapter.http_controller.schema.movie_schema import (
    EmbeddedShowtimeRequest,
    EmbeddedShowtimeResponse,
    MovieResponse,
)


def to_embedded_showtime(request: EmbeddedShowtimeRequest) -> EmbeddedShowtime:
    return EmbeddedShowtime.create(
        id=request.id,
        screen_number=request.screen_number,
        show_date=request.show_date,
        start_time=request.start_time,
        price=request.price,
        total_seats=request.total_seats,
        available_seats=request.available_seats,
    )


def to_movie_response(movie: MovieEntity) -> MovieResponse:
    return MovieResponse.model_validate(attrs.asdict(movie))


def to_showtime_response(showtime: EmbeddedShowtime) -> EmbeddedShowtimeResponse:
    return EmbeddedShowtimeResponse.model_validate(attrs.asdict(showtime))
