from datetime import date, timedelta

import pytest

from movie_booking.platform.exception.exceptions import DomainError, InvalidDateError
from movie_booking.service.shared_kernel.domain.booking_window import (
    MAX_DAYS_AHEAD,
    validate_show_date,
)


TODAY = date(2025, 1, 10)


@pytest.mark.unit
class TestValidateShowDate:
    @pytest.mark.parametrize('days_ahead', [0, 1, 3, MAX_DAYS_AHEAD])
    def test_dates_inside_window_are_accepted(self, days_ahead: int) -> None:
        validate_show_date(show_date=TODAY + timedelta(days=days_ahead), today=TODAY)

    def test_yesterday_is_rejected_as_past(self) -> None:
        with pytest.raises(InvalidDateError) as exc_info:
            validate_show_date(show_date=TODAY - timedelta(days=1), today=TODAY)

        assert 'past' in exc_info.value.message
        assert exc_info.value.status_code == 400

    def test_day_after_window_is_rejected(self) -> None:
        with pytest.raises(InvalidDateError) as exc_info:
            validate_show_date(
                show_date=TODAY + timedelta(days=MAX_DAYS_AHEAD + 1), today=TODAY
            )

        assert f'{MAX_DAYS_AHEAD} days' in exc_info.value.message

    def test_invalid_date_is_a_domain_error(self) -> None:
        assert issubclass(InvalidDateError, DomainError)
