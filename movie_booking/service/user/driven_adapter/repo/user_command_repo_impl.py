from typing import AsyncContextManager, Callable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.platform.exception.exceptions import NotFoundError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.user.app.interface.i_user_command_repo import IUserCommandRepo
from movie_booking.service.user.domain.entity.user_entity import UserEntity
from movie_booking.service.user.driven_adapter.model.user_model import UserModel
from movie_booking.service.user.driven_adapter.repo.user_mapper import model_to_entity


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, user: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                id=user.id,
                name=user.name,
                email=user.email,
                phone=user.phone,
                user_type=user.user_type.value,
                cinema_id=user.cinema_id,
            )

            session.add(user_model)
            await session.commit()
            await session.refresh(user_model)

            return model_to_entity(user_model)

    @Logger.io
    async def update(self, *, user: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.id == user.id))
            user_model = result.scalar_one_or_none()
            if not user_model:
                raise NotFoundError(f'User not found: {user.id}')

            user_model.name = user.name
            user_model.email = user.email
            user_model.phone = user.phone
            user_model.user_type = user.user_type.value
            user_model.cinema_id = user.cinema_id

            await session.commit()
            await session.refresh(user_model)

            return model_to_entity(user_model)

    @Logger.io
    async def delete(self, *, user_id: str) -> None:
        async with self.session_factory() as session:
            result = await session.execute(delete(UserModel).where(UserModel.id == user_id))
            if result.rowcount == 0:
                raise NotFoundError(f'User not found: {user_id}')
            await session.commit()
