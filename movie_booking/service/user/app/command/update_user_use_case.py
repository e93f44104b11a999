from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.exception.exceptions import NotFoundError
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.user.app.interface.i_user_command_repo import IUserCommandRepo
from movie_booking.service.user.app.interface.i_user_query_repo import IUserQueryRepo
from movie_booking.service.user.domain.entity.user_entity import UserEntity, UserType


class UpdateUserUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
    ) -> Self:
        return cls(user_command_repo=user_command_repo, user_query_repo=user_query_repo)

    @Logger.io
    async def update(
        self,
        *,
        user_id: str,
        name: str,
        email: str,
        phone: str,
        user_type: UserType,
        cinema_id: Optional[str] = None,
    ) -> UserEntity:
        existing = await self.user_query_repo.get_by_id(user_id=user_id)
        if not existing:
            raise NotFoundError(f'User not found: {user_id}')

        updated = existing.replace_fields(
            name=name,
            email=email,
            phone=phone,
            user_type=user_type,
            cinema_id=cinema_id,
        )
        return await self.user_command_repo.update(user=updated)
