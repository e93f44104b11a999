from typing import List

import attrs
from fastapi import APIRouter, Depends, Query, Response, status
from opentelemetry import trace

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.showtime.app.command.adjust_seats_use_case import AdjustSeatsUseCase
from movie_booking.service.showtime.app.command.create_showtime_use_case import (
    CreateShowtimeUseCase,
)
from movie_booking.service.showtime.app.command.delete_showtime_use_case import (
    DeleteShowtimeUseCase,
)
from movie_booking.service.showtime.app.command.update_showtime_use_case import (
    UpdateShowtimeUseCase,
)
from movie_booking.service.showtime.app.query.get_showtime_use_case import GetShowtimeUseCase
from movie_booking.service.showtime.domain.entity.showtime_entity import ShowtimeEntity
from movie_booking.service.showtime.driving_adapter.http_controller.schema.showtime_schema import (
    ShowtimeRequest,
    ShowtimeResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _to_response(showtime: ShowtimeEntity) -> ShowtimeResponse:
    return ShowtimeResponse.model_validate(attrs.asdict(showtime))


@router.post('', status_code=status.HTTP_201_CREATED, response_model=ShowtimeResponse)
@Logger.io
async def create_showtime(
    request: ShowtimeRequest,
    use_case: CreateShowtimeUseCase = Depends(CreateShowtimeUseCase.depends),
) -> ShowtimeResponse:
    showtime = await use_case.create(
        movie_id=request.movie_id,
        cinema_id=request.cinema_id,
        screen_number=request.screen_number,
        show_date=request.show_date,
        start_time=request.start_time,
        price=request.price,
        total_seats=request.total_seats,
        available_seats=request.available_seats,
    )
    return _to_response(showtime)


@router.get('/movie/{movie_id}', response_model=List[ShowtimeResponse])
@Logger.io
async def list_showtimes_by_movie(
    movie_id: str,
    use_case: GetShowtimeUseCase = Depends(GetShowtimeUseCase.depends),
) -> List[ShowtimeResponse]:
    return [_to_response(s) for s in await use_case.list_by_movie(movie_id=movie_id)]


@router.get('/cinema/{cinema_id}', response_model=List[ShowtimeResponse])
@Logger.io
async def list_showtimes_by_cinema(
    cinema_id: str,
    use_case: GetShowtimeUseCase = Depends(GetShowtimeUseCase.depends),
) -> List[ShowtimeResponse]:
    return [_to_response(s) for s in await use_case.list_by_cinema(cinema_id=cinema_id)]


@router.get('/{showtime_id}', response_model=ShowtimeResponse)
@Logger.io
async def get_showtime(
    showtime_id: str,
    use_case: GetShowtimeUseCase = Depends(GetShowtimeUseCase.depends),
) -> ShowtimeResponse:
    return _to_response(await use_case.get_by_id(showtime_id=showtime_id))


@router.put('/{showtime_id}', response_model=ShowtimeResponse)
@Logger.io
async def update_showtime(
    showtime_id: str,
    request: ShowtimeRequest,
    use_case: UpdateShowtimeUseCase = Depends(UpdateShowtimeUseCase.depends),
) -> ShowtimeResponse:
    showtime = await use_case.update(
        showtime_id=showtime_id,
        movie_id=request.movie_id,
        cinema_id=request.cinema_id,
        screen_number=request.screen_number,
        show_date=request.show_date,
        start_time=request.start_time,
        price=request.price,
        total_seats=request.total_seats,
        available_seats=request.available_seats,
    )
    return _to_response(showtime)


@router.put('/{showtime_id}/reduce', response_model=ShowtimeResponse)
@Logger.io
async def reduce_seats(
    showtime_id: str,
    count: int = Query(..., description='Number of seats to take'),
    use_case: AdjustSeatsUseCase = Depends(AdjustSeatsUseCase.depends),
) -> ShowtimeResponse:
    with tracer.start_as_current_span('controller.reduce_seats') as span:
        span.set_attribute('showtime.id', showtime_id)
        span.set_attribute('seats.count', count)
        return _to_response(await use_case.reduce(showtime_id=showtime_id, count=count))


@router.put('/{showtime_id}/restore', response_model=ShowtimeResponse)
@Logger.io
async def restore_seats(
    showtime_id: str,
    count: int = Query(..., description='Number of seats to give back'),
    use_case: AdjustSeatsUseCase = Depends(AdjustSeatsUseCase.depends),
) -> ShowtimeResponse:
    with tracer.start_as_current_span('controller.restore_seats') as span:
        span.set_attribute('showtime.id', showtime_id)
        span.set_attribute('seats.count', count)
        return _to_response(await use_case.restore(showtime_id=showtime_id, count=count))


@router.delete('/{showtime_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_showtime(
    showtime_id: str,
    use_case: DeleteShowtimeUseCase = Depends(DeleteShowtimeUseCase.depends),
) -> Response:
    await use_case.delete(showtime_id=showtime_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
