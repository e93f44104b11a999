import pytest

from movie_booking.platform.exception.exceptions import DomainError
from movie_booking.service.user.domain.entity.user_entity import UserEntity, UserType


@pytest.mark.unit
class TestUserEntity:
    def test_create__customer_drops_cinema_id(self) -> None:
        user = UserEntity.create(
            name='Selina Kyle',
            email='selina@example.com',
            phone='0911000000',
            user_type=UserType.CUSTOMER,
            cinema_id='cinema-1',
        )

        assert user.id
        assert user.cinema_id is None

    def test_create__cinema_admin_keeps_cinema_id(self) -> None:
        user = UserEntity.create(
            name='Bruce Wayne',
            email='bruce@example.com',
            phone='0912345678',
            user_type=UserType.CINEMA_ADMIN,
            cinema_id='cinema-1',
        )

        assert user.cinema_id == 'cinema-1'

    def test_create__blank_name_rejected(self) -> None:
        with pytest.raises(DomainError, match='Name'):
            UserEntity.create(
                name='  ',
                email='bruce@example.com',
                phone='0912345678',
                user_type=UserType.CUSTOMER,
            )

    def test_replace_fields__keeps_id(self) -> None:
        user = UserEntity.create(
            name='Bruce Wayne',
            email='bruce@example.com',
            phone='0912345678',
            user_type=UserType.CINEMA_ADMIN,
            cinema_id='cinema-1',
        )

        updated = user.replace_fields(
            name='Bruce Wayne',
            email='batman@example.com',
            phone='0912345678',
            user_type=UserType.CUSTOMER,
            cinema_id='cinema-1',
        )

        assert updated.id == user.id
        assert updated.email == 'batman@example.com'
        assert updated.cinema_id is None
