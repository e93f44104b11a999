from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.user.app.interface.i_user_command_repo import IUserCommandRepo
from movie_booking.service.user.domain.entity.user_entity import UserEntity, UserType


class CreateUserUseCase:
    def __init__(self, user_command_repo: IUserCommandRepo) -> None:
        self.user_command_repo = user_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
    ) -> Self:
        return cls(user_command_repo=user_command_repo)

    @Logger.io
    async def create(
        self,
        *,
        name: str,
        email: str,
        phone: str,
        user_type: UserType,
        cinema_id: Optional[str] = None,
    ) -> UserEntity:
        user = UserEntity.create(
            name=name,
            email=email,
            phone=phone,
            user_type=user_type,
            cinema_id=cinema_id,
        )
        return await self.user_command_repo.create(user=user)
