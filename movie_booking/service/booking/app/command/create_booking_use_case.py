import time
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import (
    DomainError,
    InsufficientSeatsError,
    InvalidDateError,
    NotFoundError,
)
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.platform.metrics.booking_metrics import metrics
from movie_booking.service.booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from movie_booking.service.booking.app.interface.i_showtime_client import IShowtimeClient
from movie_booking.service.booking.domain.entity.booking_entity import BookingEntity
from movie_booking.service.shared_kernel.app.interface.i_clock import IClock
from movie_booking.service.shared_kernel.domain.booking_window import validate_show_date


class CreateBookingUseCase:
    """
    Create booking use case

    Flow (strictly ordered, no retries):
    1. Validate the request
    2. Fetch the showtime from the showtime service
    3. Check the show date against the booking window
    4. Check the snapshot's available seats
    5. Reduce seats remotely (atomic on the showtime side)
    6. Persist the booking stamped with the clock's now()

    If step 6 fails after step 5 succeeded, one restore-seats call gives the
    seats back and the persist error is re-raised.

    Dependencies:
    - showtime_client: remote showtime service port
    - booking_command_repo: booking persistence
    - clock: source of today/now
    """

    def __init__(
        self,
        *,
        showtime_client: IShowtimeClient,
        booking_command_repo: IBookingCommandRepo,
        clock: IClock,
    ) -> None:
        self.showtime_client = showtime_client
        self.booking_command_repo = booking_command_repo
        self.clock = clock
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        showtime_client: IShowtimeClient = Depends(Provide[Container.showtime_client]),
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        clock: IClock = Depends(Provide[Container.clock]),
    ) -> Self:
        return cls(
            showtime_client=showtime_client,
            booking_command_repo=booking_command_repo,
            clock=clock,
        )

    @Logger.io
    async def create_booking(
        self,
        *,
        user_id: str,
        cinema_id: str,
        movie_id: str,
        showtime_id: str,
        seats_booked: int,
    ) -> BookingEntity:
        started = time.perf_counter()
        result = 'error'
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={
                'showtime.id': showtime_id,
                'user.id': user_id,
                'seats.requested': seats_booked,
            },
        ) as span:
            try:
                booking = await self._create_booking(
                    user_id=user_id,
                    cinema_id=cinema_id,
                    movie_id=movie_id,
                    showtime_id=showtime_id,
                    seats_booked=seats_booked,
                )
                result = 'success'
                span.set_attribute('booking.id', booking.id)
                return booking
            except Exception as e:
                result = _result_label(e)
                span.record_exception(e)
                raise
            finally:
                span.set_attribute('booking.result', result)
                metrics.record_booking(result=result, duration=time.perf_counter() - started)

    async def _create_booking(
        self,
        *,
        user_id: str,
        cinema_id: str,
        movie_id: str,
        showtime_id: str,
        seats_booked: int,
    ) -> BookingEntity:
        BookingEntity.validate_request(
            user_id=user_id,
            cinema_id=cinema_id,
            movie_id=movie_id,
            showtime_id=showtime_id,
            seats_booked=seats_booked,
        )

        showtime = await self.showtime_client.get_showtime(showtime_id=showtime_id)
        if showtime is None:
            raise NotFoundError(f'Showtime not found: {showtime_id}')

        validate_show_date(show_date=showtime.show_date, today=self.clock.today())

        if seats_booked > showtime.available_seats:
            raise InsufficientSeatsError(
                f'Only {showtime.available_seats} seats available for showtime {showtime_id}'
            )

        try:
            await self.showtime_client.reduce_seats(showtime_id=showtime_id, count=seats_booked)
        except Exception as e:
            metrics.seat_reductions.labels(result=_result_label(e)).inc()
            raise
        metrics.seat_reductions.labels(result='success').inc()

        booking = BookingEntity.create(
            user_id=user_id,
            cinema_id=cinema_id,
            movie_id=movie_id,
            showtime_id=showtime_id,
            seats_booked=seats_booked,
            booking_time=self.clock.now(),
        )

        try:
            created = await self.booking_command_repo.create(booking=booking)
        except Exception:
            await self._restore_seats(showtime_id=showtime_id, count=seats_booked)
            raise

        Logger.base.info(
            f'✅ [BOOKING] {created.id}: {seats_booked} seats for showtime {showtime_id}'
        )
        return created

    async def _restore_seats(self, *, showtime_id: str, count: int) -> None:
        Logger.base.warning(
            f'↩️ [BOOKING] Persist failed, restoring {count} seats of showtime {showtime_id}'
        )
        try:
            await self.showtime_client.restore_seats(showtime_id=showtime_id, count=count)
        except Exception as e:
            # The persist error is what the caller sees
            metrics.seat_restorations.labels(result='failed').inc()
            Logger.base.error(
                f'❌ [BOOKING] Could not restore {count} seats of showtime {showtime_id}: {e}'
            )
            return
        metrics.seat_restorations.labels(result='success').inc()


def _result_label(error: Exception) -> str:
    match error:
        case NotFoundError():
            return 'not_found'
        case InvalidDateError():
            return 'invalid_date'
        case InsufficientSeatsError():
            return 'insufficient_seats'
        case DomainError():
            return 'invalid_request'
        case _:
            return 'error'
