from enum import StrEnum
from typing import Optional

import attrs
import uuid_utils

from movie_booking.platform.exception.exceptions import DomainError


class UserType(StrEnum):
    CUSTOMER = 'CUSTOMER'
    CINEMA_ADMIN = 'CINEMA_ADMIN'


@attrs.define
class UserEntity:
    id: str
    name: str
    email: str
    phone: str = attrs.field(repr=False)
    user_type: UserType
    cinema_id: Optional[str] = None

    @classmethod
    def create(
        cls,
        *,
        name: str,
        email: str,
        phone: str,
        user_type: UserType,
        cinema_id: Optional[str] = None,
    ) -> 'UserEntity':
        cls.validate_fields(name=name, email=email, phone=phone)
        return cls(
            id=str(uuid_utils.uuid7()),
            name=name,
            email=email,
            phone=phone,
            user_type=user_type,
            cinema_id=cls._owning_cinema(user_type=user_type, cinema_id=cinema_id),
        )

    def replace_fields(
        self,
        *,
        name: str,
        email: str,
        phone: str,
        user_type: UserType,
        cinema_id: Optional[str] = None,
    ) -> 'UserEntity':
        """Full replace of every mutable field; the id is kept."""
        self.validate_fields(name=name, email=email, phone=phone)
        return attrs.evolve(
            self,
            name=name,
            email=email,
            phone=phone,
            user_type=user_type,
            cinema_id=self._owning_cinema(user_type=user_type, cinema_id=cinema_id),
        )

    @staticmethod
    def validate_fields(*, name: str, email: str, phone: str) -> None:
        if not name.strip():
            raise DomainError('Name is required')
        if not email.strip():
            raise DomainError('Email is required')
        if not phone.strip():
            raise DomainError('Phone is required')

    @staticmethod
    def _owning_cinema(*, user_type: UserType, cinema_id: Optional[str]) -> Optional[str]:
        # Only cinema admins belong to a cinema
        return cinema_id if user_type == UserType.CINEMA_ADMIN else None
