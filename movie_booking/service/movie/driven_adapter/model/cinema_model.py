from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from movie_booking.platform.database.orm_db_setting import Base


class CinemaModel(Base):
    __tablename__ = 'cinemas'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False, default='')
