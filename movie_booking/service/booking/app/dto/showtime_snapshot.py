from datetime import date

import attrs


@attrs.define(frozen=True)
class ShowtimeSnapshot:
    """Point-in-time view of a showtime as returned by the showtime service."""

    id: str
    movie_id: str
    cinema_id: str
    show_date: date
    start_time: str
    price: float
    total_seats: int
    available_seats: int
