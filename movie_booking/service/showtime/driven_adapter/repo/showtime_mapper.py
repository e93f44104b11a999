from movie_booking.service.showtime.domain.entity.showtime_entity import ShowtimeEntity
from movie_booking.service.showtime.driven_adapter.model.showtime_model import ShowtimeModel


def model_to_entity(showtime_model: ShowtimeModel) -> ShowtimeEntity:
    return ShowtimeEntity(
        id=showtime_model.id,
        movie_id=showtime_model.movie_id,
        cinema_id=showtime_model.cinema_id,
        screen_number=showtime_model.screen_number,
        show_date=showtime_model.show_date,
        start_time=showtime_model.start_time,
        price=showtime_model.price,
        total_seats=showtime_model.total_seats,
        available_seats=showtime_model.available_seats,
    )
