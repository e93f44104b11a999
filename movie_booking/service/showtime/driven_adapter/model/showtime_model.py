from datetime import date, time

from sqlalchemy import CheckConstraint, Date, Float, Integer, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from movie_booking.platform.database.orm_db_setting import Base


class ShowtimeModel(Base):
    __tablename__ = 'showtimes'
    __table_args__ = (
        CheckConstraint('available_seats >= 0', name='ck_showtime_available_non_negative'),
        CheckConstraint('available_seats <= total_seats', name='ck_showtime_available_le_total'),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    movie_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    cinema_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    screen_number: Mapped[int] = mapped_column(Integer, nullable=False)
    show_date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    total_seats: Mapped[int] = mapped_column(Integer, nullable=False)
    available_seats: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f'<ShowtimeModel(id={self.id}, movie_id={self.movie_id}, '
            f'available_seats={self.available_seats}/{self.total_seats})>'
        )
