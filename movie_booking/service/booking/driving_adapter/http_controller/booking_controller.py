from typing import List

import attrs
from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.booking.app.command.create_booking_use_case import CreateBookingUseCase
from movie_booking.service.booking.app.query.get_booking_use_case import GetBookingUseCase
from movie_booking.service.booking.domain.entity.booking_entity import BookingEntity
from movie_booking.service.booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def _to_response(booking: BookingEntity) -> BookingResponse:
    return BookingResponse.model_validate(attrs.asdict(booking))


@router.post('', status_code=status.HTTP_201_CREATED, response_model=BookingResponse)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    booking_use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('showtime_id', request.showtime_id)
        span.set_attribute('user_id', request.user_id)
        span.set_attribute('seats_booked', request.seats_booked)

        booking = await booking_use_case.create_booking(
            user_id=request.user_id,
            cinema_id=request.cinema_id,
            movie_id=request.movie_id,
            showtime_id=request.showtime_id,
            seats_booked=request.seats_booked,
        )

        span.set_attribute('booking.id', booking.id)
        return _to_response(booking)


@router.get('/user/{user_id}', response_model=List[BookingResponse])
@Logger.io
async def list_user_bookings(
    user_id: str,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> List[BookingResponse]:
    return [_to_response(booking) for booking in await use_case.list_by_user(user_id=user_id)]


@router.get('/{booking_id}', response_model=BookingResponse)
@Logger.io
async def get_booking(
    booking_id: str,
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    return _to_response(await use_case.get_booking(booking_id=booking_id))
