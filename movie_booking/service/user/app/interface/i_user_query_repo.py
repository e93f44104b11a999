from abc import ABC, abstractmethod
from typing import List, Optional

from movie_booking.service.user.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, user_id: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[UserEntity]:
        pass
