from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import NotFoundError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.user.app.interface.i_user_query_repo import IUserQueryRepo
from movie_booking.service.user.domain.entity.user_entity import UserEntity


class GetUserUseCase:
    def __init__(self, user_query_repo: IUserQueryRepo) -> None:
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(user_query_repo=user_query_repo)

    @Logger.io
    async def get_by_id(self, *, user_id: str) -> UserEntity:
        user = await self.user_query_repo.get_by_id(user_id=user_id)
        if not user:
            raise NotFoundError(f'User not found: {user_id}')
        return user

    @Logger.io
    async def list_all(self) -> List[UserEntity]:
        return await self.user_query_repo.list_all()
