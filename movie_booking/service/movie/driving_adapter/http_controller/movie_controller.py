from typing import List

from fastapi import APIRouter, Depends, Query

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.query.get_movie_use_case import GetMovieUseCase
from movie_booking.service.movie.driving_adapter.http_controller.movie_schema_mapper import (
    to_movie_response,
)
from movie_booking.service.movie.driving_adapter.http_controller.schema.movie_schema import (
    MovieResponse,
)


router = APIRouter()


@router.get('', response_model=List[MovieResponse])
@Logger.io
async def list_movies(
    use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
) -> List[MovieResponse]:
    return [to_movie_response(movie) for movie in await use_case.list_all()]


# Declared before /{movie_id} so "search" is not captured as an id
@router.get('/search', response_model=List[MovieResponse])
@Logger.io
async def search_movies(
    query: str = Query(..., description='Case-insensitive title substring'),
    use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
) -> List[MovieResponse]:
    return [to_movie_response(movie) for movie in await use_case.search(query=query)]


@router.get('/cinema/{cinema_id}', response_model=List[MovieResponse])
@Logger.io
async def list_movies_by_cinema(
    cinema_id: str,
    use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
) -> List[MovieResponse]:
    return [to_movie_response(m) for m in await use_case.list_by_cinema(cinema_id=cinema_id)]


@router.get('/{movie_id}', response_model=MovieResponse)
@Logger.io
async def get_movie(
    movie_id: str,
    use_case: GetMovieUseCase = Depends(GetMovieUseCase.depends),
) -> MovieResponse:
    return to_movie_response(await use_case.get_by_id(movie_id=movie_id))
