from typing import Optional

from pydantic import ConfigDict, EmailStr, Field

from movie_booking.platform.schema.camel_model import CamelModel, EntityId
from movie_booking.service.user.domain.entity.user_entity import UserType


class UserRequest(CamelModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Bruce Wayne',
                'email': 'bruce@example.com',
                'phone': '0912345678',
                'userType': 'CINEMA_ADMIN',
                'cinemaId': '01936d8f-5e73-7c4e-a9c5-123456789abc',
            }
        }
    )

    name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    user_type: UserType
    cinema_id: Optional[EntityId] = None


class UserResponse(CamelModel):
    id: str
    name: str
    email: str
    phone: str
    user_type: UserType
    cinema_id: Optional[str] = None
