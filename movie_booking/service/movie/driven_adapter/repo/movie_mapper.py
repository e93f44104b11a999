from datetime import date, time
from typing import Any, Dict, List

from movie_booking.service.movie.domain.entity.movie_entity import EmbeddedShowtime, MovieEntity
from movie_booking.service.movie.driven_adapter.model.movie_model import MovieModel


def showtime_to_document(showtime: EmbeddedShowtime) -> Dict[str, Any]:
    return {
        'id': showtime.id,
        'screen_number': showtime.screen_number,
        'show_date': showtime.show_date.isoformat(),
        'start_time': showtime.start_time.strftime('%H:%M'),
        'price': showtime.price,
        'total_seats': showtime.total_seats,
        'available_seats': showtime.available_seats,
    }


def document_to_showtime(document: Dict[str, Any]) -> EmbeddedShowtime:
    return EmbeddedShowtime(
        id=document['id'],
        screen_number=document['screen_number'],
        show_date=date.fromisoformat(document['show_date']),
        start_time=time.fromisoformat(document['start_time']),
        price=document['price'],
        total_seats=document['total_seats'],
        available_seats=document['available_seats'],
    )


def showtimes_to_documents(showtimes: List[EmbeddedShowtime]) -> List[Dict[str, Any]]:
    return [showtime_to_document(showtime) for showtime in showtimes]


def model_to_entity(movie_model: MovieModel) -> MovieEntity:
    return MovieEntity(
        id=movie_model.id,
        cinema_id=movie_model.cinema_id,
        title=movie_model.title,
        director=movie_model.director,
        genre=movie_model.genre,
        language=movie_model.language,
        rating=movie_model.rating,
        duration=movie_model.duration,
        description=movie_model.description,
        release_date=movie_model.release_date,
        cast=list(movie_model.cast or []),
        poster_url=movie_model.poster_url,
        trailer_url=movie_model.trailer_url,
        showtimes=[document_to_showtime(doc) for doc in movie_model.showtimes or []],
    )
