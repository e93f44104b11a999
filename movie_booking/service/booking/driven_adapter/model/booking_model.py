from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from movie_booking.platform.database.orm_db_setting import Base


class BookingModel(Base):
    __tablename__ = 'bookings'

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    cinema_id: Mapped[str] = mapped_column(String(36), nullable=False)
    movie_id: Mapped[str] = mapped_column(String(36), nullable=False)
    showtime_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    seats_booked: Mapped[int] = mapped_column(Integer, nullable=False)
    booking_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return (
            f'<BookingModel(id={self.id}, user_id={self.user_id}, '
            f'showtime_id={self.showtime_id}, seats={self.seats_booked})>'
        )
