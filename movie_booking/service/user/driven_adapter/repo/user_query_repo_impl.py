from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.user.app.interface.i_user_query_repo import IUserQueryRepo
from movie_booking.service.user.domain.entity.user_entity import UserEntity
from movie_booking.service.user.driven_adapter.model.user_model import UserModel
from movie_booking.service.user.driven_adapter.repo.user_mapper import model_to_entity


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, user_id: str) -> Optional[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).where(UserModel.id == user_id))
            user_model = result.scalar_one_or_none()

            if not user_model:
                return None

            return model_to_entity(user_model)

    @Logger.io
    async def list_all(self) -> List[UserEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(UserModel).order_by(UserModel.id))
            return [model_to_entity(user_model) for user_model in result.scalars().all()]
