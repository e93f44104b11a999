from typing import AsyncContextManager, Callable

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.platform.exception.exceptions import (
    ConflictError,
    InsufficientSeatsError,
    NotFoundError,
)
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.showtime.app.interface.i_showtime_command_repo import (
    IShowtimeCommandRepo,
)
from movie_booking.service.showtime.domain.entity.showtime_entity import ShowtimeEntity
from movie_booking.service.showtime.driven_adapter.model.showtime_model import ShowtimeModel
from movie_booking.service.showtime.driven_adapter.repo.showtime_mapper import model_to_entity


class ShowtimeCommandRepoImpl(IShowtimeCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, showtime: ShowtimeEntity) -> ShowtimeEntity:
        async with self.session_factory() as session:
            showtime_model = ShowtimeModel(
                id=showtime.id,
                movie_id=showtime.movie_id,
                cinema_id=showtime.cinema_id,
                screen_number=showtime.screen_number,
                show_date=showtime.show_date,
                start_time=showtime.start_time,
                price=showtime.price,
                total_seats=showtime.total_seats,
                available_seats=showtime.available_seats,
            )

            session.add(showtime_model)
            await session.commit()
            await session.refresh(showtime_model)

            return model_to_entity(showtime_model)

    @Logger.io
    async def update(self, *, showtime: ShowtimeEntity) -> ShowtimeEntity:
        async with self.session_factory() as session:
            showtime_model = await session.get(ShowtimeModel, showtime.id)
            if not showtime_model:
                raise NotFoundError(f'Showtime not found: {showtime.id}')

            showtime_model.movie_id = showtime.movie_id
            showtime_model.cinema_id = showtime.cinema_id
            showtime_model.screen_number = showtime.screen_number
            showtime_model.show_date = showtime.show_date
            showtime_model.start_time = showtime.start_time
            showtime_model.price = showtime.price
            showtime_model.total_seats = showtime.total_seats
            showtime_model.available_seats = showtime.available_seats

            await session.commit()
            await session.refresh(showtime_model)

            return model_to_entity(showtime_model)

    @Logger.io
    async def delete(self, *, showtime_id: str) -> None:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(ShowtimeModel).where(ShowtimeModel.id == showtime_id)
            )
            if result.rowcount == 0:
                raise NotFoundError(f'Showtime not found: {showtime_id}')
            await session.commit()

    @Logger.io
    async def reduce_seats(self, *, showtime_id: str, count: int) -> ShowtimeEntity:
        async with self.session_factory() as session:
            # Single conditional UPDATE: the availability check and the
            # decrement cannot interleave with another reduction
            result = await session.execute(
                update(ShowtimeModel)
                .where(
                    ShowtimeModel.id == showtime_id,
                    ShowtimeModel.available_seats >= count,
                )
                .values(available_seats=ShowtimeModel.available_seats - count)
                .execution_options(synchronize_session=False)
            )

            if result.rowcount == 0:
                await session.rollback()
                if await session.get(ShowtimeModel, showtime_id) is None:
                    raise NotFoundError(f'Showtime not found: {showtime_id}')
                raise InsufficientSeatsError(
                    f'Not enough seats available for showtime {showtime_id}'
                )

            await session.commit()
            return await self._load(session=session, showtime_id=showtime_id)

    @Logger.io
    async def restore_seats(self, *, showtime_id: str, count: int) -> ShowtimeEntity:
        async with self.session_factory() as session:
            result = await session.execute(
                update(ShowtimeModel)
                .where(
                    ShowtimeModel.id == showtime_id,
                    ShowtimeModel.available_seats + count <= ShowtimeModel.total_seats,
                )
                .values(available_seats=ShowtimeModel.available_seats + count)
                .execution_options(synchronize_session=False)
            )

            if result.rowcount == 0:
                await session.rollback()
                if await session.get(ShowtimeModel, showtime_id) is None:
                    raise NotFoundError(f'Showtime not found: {showtime_id}')
                raise ConflictError(
                    f'Restoring {count} seats would exceed total seats of showtime {showtime_id}'
                )

            await session.commit()
            return await self._load(session=session, showtime_id=showtime_id)

    @staticmethod
    async def _load(*, session: AsyncSession, showtime_id: str) -> ShowtimeEntity:
        result = await session.execute(
            select(ShowtimeModel)
            .where(ShowtimeModel.id == showtime_id)
            .execution_options(populate_existing=True)
        )
        return model_to_entity(result.scalar_one())
