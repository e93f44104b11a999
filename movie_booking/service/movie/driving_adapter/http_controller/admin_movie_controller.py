from typing import List

from fastapi import APIRouter, Depends, Response, status

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.command.create_movie_use_case import CreateMovieUseCase
from movie_booking.service.movie.app.command.delete_movie_use_case import DeleteMovieUseCase
from movie_booking.service.movie.app.command.manage_movie_showtimes_use_case import (
    ManageMovieShowtimesUseCase,
)
from movie_booking.service.movie.app.command.update_movie_use_case import UpdateMovieUseCase
from movie_booking.service.movie.app.query.get_movie_use_case import GetMovieUseCase
from movie_booking.service.movie.driving_adapter.http_controller.movie_schema_mapper import (
    to_embedded_showtime,
    to_movie_response,
    to_showtime_response,
)
from movie_booking.service.movie.driving_adapter.http_controller.schema.movie_schema import (
    EmbeddedShowtimeRequest,
    EmbeddedShowtimeResponse,
    MovieRequest,
    MovieResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED, response_model=MovieResponse)
@Logger.io
async def create_movie(
    request: MovieRequest,
    use_case: CreateMovieUseCase = Depends(CreateMovieUseCase.depends),
) -> MovieResponse:
    movie = await use_case.create(
        cinema_id=request.cinema_id,
        title=request.title,
        director=request.director,
        genre=request.genre,
        language=request.language,
        rating=request.rating,
        duration=request.duration,
        description=request.description,
        release_date=request.release_date,
        cast=request.cast,
        poster_url=request.poster_url,
        trailer_url=request.trailer_url,
        showtimes=[to_embedded_showtime(s) for s in request.showtimes],
    )
    return to_movie_response(movie)


@router.put('/{movie_id}', response_model=MovieResponse)
@Logger.io
async def update_movie(
    movie_id: str,
    request: MovieRequest,
    use_case: UpdateMovieUseCase = Depends(UpdateMovieUseCase.depends),
) -> MovieResponse:
    movie = await use_case.update(
        movie_id=movie_id,
        cinema_id=request.cinema_id,
        title=request.title,
        director=request.director,
        genre=request.genre,
        language=request.language,
        rating=request.rating,
        duration=request.duration,
        description=request.description,
        release_date=request.release_date,
        cast=request.cast,
        poster_url=request.poster_url,
        trailer_url=request.trailer_url,
    )
    return to_movie_response(movie)


@router.delete('/{movie_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_movie(
    movie_id: str,
    use_case: DeleteMovieUseCase = Depends(DeleteMovieUseCase.depends),
) -> Response:
    await use_case.delete(movie_id=movie_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post('/{movie_id}/showtimes', response_model=MovieResponse)
@Logger.io
async def add_showtime_to_movie(
    movie_id: str,
    request: EmbeddedShowtimeRequest,
    use_case: ManageMovieShowtimesUseCase = Depends(ManageMovieShowtimesUseCase.depends),
) -> MovieResponse:
    movie = await use_case.add_showtime(
        movie_id=movie_id, showtime=to_embedded_showtime(request)
    )
    return to_movie_response(movie)


@router.get('/{movie_id}/showtimes', response_model=List[EmbeddedShowtimeResponse])
@Logger.io
async def list_movie_showtimes(
    movie_id: str,
    use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
) -> List[EmbeddedShowtimeResponse]:
    showtimes = await use_case.list_showtimes(movie_id=movie_id)
    return [to_showtime_response(showtime) for showtime in showtimes]


@router.delete('/{movie_id}/showtimes/{showtime_id}', response_model=MovieResponse)
@Logger.io
async def remove_showtime_from_movie(
    movie_id: str,
    showtime_id: str,
    use_case: ManageMovieShowtimesUseCase = Depends(ManageMovieShowtimesUseCase.depends),
) -> MovieResponse:
    movie = await use_case.remove_showtime(movie_id=movie_id, showtime_id=showtime_id)
    return to_movie_response(movie)
