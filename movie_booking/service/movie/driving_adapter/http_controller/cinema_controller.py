from typing import List

import attrs
from fastapi import APIRouter, Depends, status

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.movie.app.command.create_cinema_use_case import CreateCinemaUseCase
from movie_booking.service.movie.app.query.get_cinema_use_case import GetCinemaUseCase
from movie_booking.service.movie.driving_adapter.http_controller.schema.cinema_schema import (
    CinemaRequest,
    CinemaResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED, response_model=CinemaResponse)
@Logger.io
async def create_cinema(
    request: CinemaRequest,
    use_case: CreateCinemaUseCase = Depends(CreateCinemaUseCase.depends),
) -> CinemaResponse:
    cinema = await use_case.create(name=request.name, location=request.location)
    return CinemaResponse.model_validate(attrs.asdict(cinema))


@router.get('', response_model=List[CinemaResponse])
@Logger.io
async def list_cinemas(
    use_case: GetCinemaUseCase = Depends(GetCinemaUseCase.depends),
) -> List[CinemaResponse]:
    return [CinemaResponse.model_validate(attrs.asdict(c)) for c in await use_case.list_all()]


@router.get('/{cinema_id}', response_model=CinemaResponse)
@Logger.io
async def get_cinema(
    cinema_id: str,
    use_case: GetCinemaUseCase = Depends(GetCinemaUseCase.depends),
) -> CinemaResponse:
    cinema = await use_case.get_by_id(cinema_id=cinema_id)
    return CinemaResponse.model_validate(attrs.asdict(cinema))
