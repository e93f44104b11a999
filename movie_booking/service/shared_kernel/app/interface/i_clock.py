from abc import ABC, abstractmethod
from datetime import date, datetime


class IClock(ABC):
    """Source of the current time for date-window checks and booking timestamps."""

    @abstractmethod
    def now(self) -> datetime:
        """Timezone-aware current instant"""
        pass

    @abstractmethod
    def today(self) -> date:
        """Current calendar date in the configured timezone"""
        pass
