from __future__ import annotations

import datetime
import functools
from typing import Optional

from elapse.instants.interface import IInstant


@functools.total_ordering
class SystemInstant(IInstant):
    """Instant of the system wall clock, stored as an aware UTC datetime.

    The wall clock is not monotonic: it can be adjusted backwards, in which
    case a later reading may precede an earlier one. Stopwatches using this
    clock then measure a zero duration for the affected interval.
    """

    def __init__(self, value: datetime.datetime) -> None:
        if not isinstance(value, datetime.datetime):
            raise TypeError(
                f"value must be datetime.datetime, not {type(value)}"
            )
        if value.tzinfo is None:
            raise ValueError(
                f"Naive datetime is ambiguous, set tzinfo: {value}"
            )
        self._datetime = value.astimezone(datetime.timezone.utc)

    @classmethod
    def now(cls) -> SystemInstant:
        return cls(datetime.datetime.now(datetime.timezone.utc))

    @property
    def value(self) -> datetime.datetime:
        return self._datetime

    def checked_add(
        self,
        duration: datetime.timedelta
    ) -> Optional[SystemInstant]:
        try:
            return SystemInstant(self._datetime + duration)
        except OverflowError:
            return None

    def checked_sub(
        self,
        duration: datetime.timedelta
    ) -> Optional[SystemInstant]:
        try:
            return SystemInstant(self._datetime - duration)
        except OverflowError:
            return None

    def checked_duration_since(
        self,
        earlier: SystemInstant
    ) -> Optional[datetime.timedelta]:
        if not isinstance(earlier, SystemInstant):
            raise TypeError(
                f"Cannot compare SystemInstant with {type(earlier).__name__}"
            )
        if earlier._datetime > self._datetime:
            return None
        return self._datetime - earlier._datetime

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SystemInstant):
            return NotImplemented
        return self._datetime == other._datetime

    def __lt__(self, other: SystemInstant) -> bool:
        if not isinstance(other, SystemInstant):
            return NotImplemented
        return self._datetime < other._datetime

    def __hash__(self) -> int:
        return hash(self._datetime)

    def __repr__(self) -> str:
        return f"SystemInstant({self._datetime.isoformat()})"
