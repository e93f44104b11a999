from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from movie_booking.platform.database.orm_db_setting import Base


class UserModel(Base):
    __tablename__ = 'users'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # No uniqueness: the same address may be registered more than once
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    user_type: Mapped[str] = mapped_column(String(20), nullable=False)
    cinema_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)

    def __repr__(self) -> str:
        return f'<UserModel(id={self.id}, email={self.email}, user_type={self.user_type})>'
