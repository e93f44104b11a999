from datetime import date
from typing import Any, Optional

from sqlalchemy import JSON, Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from movie_booking.platform.database.orm_db_setting import Base


class MovieModel(Base):
    __tablename__ = 'movies'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    cinema_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    director: Mapped[str] = mapped_column(String(255), nullable=False, default='')
    genre: Mapped[str] = mapped_column(String(100), nullable=False, default='')
    language: Mapped[str] = mapped_column(String(100), nullable=False, default='')
    rating: Mapped[str] = mapped_column(String(20), nullable=False, default='')
    duration: Mapped[int] = mapped_column(Integer, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default='')
    release_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    cast: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    poster_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    trailer_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    # Embedded showtime documents (ISO date / HH:MM strings)
    showtimes: Mapped[list[dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f'<MovieModel(id={self.id}, title={self.title}, cinema_id={self.cinema_id})>'
