from datetime import date, datetime
import zoneinfo

from movie_booking.service.shared_kernel.app.interface.i_clock import IClock


class SystemClock(IClock):
    def __init__(self, *, timezone: str = 'UTC') -> None:
        self._tz = zoneinfo.ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self._tz)

    def today(self) -> date:
        return self.now().date()
