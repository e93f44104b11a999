from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from movie_booking.platform.config.di import Container
from movie_booking.platform.logging.loguru_io import Logger
from movie_booking.service.user.app.interface.i_user_command_repo import IUserCommandRepo


class DeleteUserUseCase:
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
    async def delete(self, *, user_id: str) -> None:
        await self.user_command_repo.delete(user_id=user_id)
        Logger.base.info(f'🗑️ [USER] Deleted user {user_id}')
