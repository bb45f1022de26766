# coworker/application/ports/clock.py

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        ...


class UTCClock(Clock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
