from abc import ABC, abstractmethod

from movie_booking.service.user.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, user: UserEntity) -> UserEntity:
        pass

    @abstractmethod
    async def update(self, *, user: UserEntity) -> UserEntity:
        pass

    @abstractmethod
    async def delete(self, *, user_id: str) -> None:
        pass
