from datetime import date, timedelta

from movie_booking.platform.exception.exceptions import InvalidDateError


MAX_DAYS_AHEAD = 7


def validate_show_date(*, show_date: date, today: date) -> None:
    """
    Enforce the booking window [today, today + MAX_DAYS_AHEAD], both ends inclusive.

    Raises:
        InvalidDateError: When the show date is in the past or too far ahead
    """
    if show_date < today:
        raise InvalidDateError('Show date cannot be in the past')

    if show_date > today + timedelta(days=MAX_DAYS_AHEAD):
        raise InvalidDateError(f'Show date must be within the next {MAX_DAYS_AHEAD} days')
