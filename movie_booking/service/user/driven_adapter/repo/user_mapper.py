from movie_booking.service.user.domain.entity.user_entity import UserEntity, UserType
from movie_booking.service.user.driven_adapter.model.user_model import UserModel


def model_to_entity(user_model: UserModel) -> UserEntity:
    return UserEntity(
        id=user_model.id,
        name=user_model.name,
        email=user_model.email,
        phone=user_model.phone,
        user_type=UserType(user_model.user_type),
        cinema_id=user_model.cinema_id,
    )
