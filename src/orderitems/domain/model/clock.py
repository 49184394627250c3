"""Time source for the domain.

The domain never reads the wall clock itself. Anything that needs to
know "today" is handed a Clock, so tests can pin the date.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from zoneinfo import ZoneInfo


class Clock(ABC):

    @abstractmethod
    def today(self) -> date:
        """Return the current calendar date."""


class SystemClock(Clock):
    """Wall-clock date in a configurable time zone.

    With no zone the host's local time zone is used.
    """

    def __init__(self, zone: ZoneInfo | None = None) -> None:
        self._zone = zone

    @property
    def zone(self) -> ZoneInfo | None:
        return self._zone

    def today(self) -> date:
        return datetime.now(self._zone).date()

    def __repr__(self) -> str:
        return f"SystemClock(zone={self._zone.key if self._zone else 'local'})"
