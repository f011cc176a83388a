from __future__ import annotations

import datetime
import functools
import time
from typing import Final, Optional

from elapse.instants.interface import IInstant


# Clocks are treated as signed 64 bit nanosecond counters
_NS_MIN: Final[int] = -(2 ** 63)
_NS_MAX: Final[int] = 2 ** 63 - 1


def _to_nanoseconds(duration: datetime.timedelta) -> int:
    return (
        (duration.days * 86400 + duration.seconds) * 10 ** 9
        + duration.microseconds * 1000
    )


def _from_nanoseconds(nanoseconds: int) -> datetime.timedelta:
    # timedelta keeps microseconds: round half to even, as timedelta does
    microseconds, remainder = divmod(nanoseconds, 1000)
    if remainder > 500 or (remainder == 500 and microseconds % 2 == 1):
        microseconds += 1
    return datetime.timedelta(microseconds=microseconds)


@functools.total_ordering
class NanosecondInstant(IInstant):
    """Instant stored as an integer count of nanoseconds.

    Subclasses only decide where now() reads the counter from.
    """

    def __init__(self, nanoseconds: int) -> None:
        if not isinstance(nanoseconds, int) or isinstance(nanoseconds, bool):
            raise TypeError(
                f"nanoseconds must be int, not {type(nanoseconds)}"
            )
        if not _NS_MIN <= nanoseconds <= _NS_MAX:
            raise ValueError(
                f"nanoseconds out of range: {nanoseconds}"
            )
        self._nanoseconds = nanoseconds

    @property
    def nanoseconds(self) -> int:
        return self._nanoseconds

    def checked_add(
        self,
        duration: datetime.timedelta
    ) -> Optional[NanosecondInstant]:
        return self._shifted(self._nanoseconds + _to_nanoseconds(duration))

    def checked_sub(
        self,
        duration: datetime.timedelta
    ) -> Optional[NanosecondInstant]:
        return self._shifted(self._nanoseconds - _to_nanoseconds(duration))

    def checked_duration_since(
        self,
        earlier: NanosecondInstant
    ) -> Optional[datetime.timedelta]:
        self._check_same_clock(earlier)
        diff = self._nanoseconds - earlier._nanoseconds
        if diff < 0:
            return None
        return _from_nanoseconds(diff)

    def _shifted(self, nanoseconds: int) -> Optional[NanosecondInstant]:
        if not _NS_MIN <= nanoseconds <= _NS_MAX:
            return None
        return type(self)(nanoseconds)

    def _check_same_clock(self, other: object) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} "
                f"with {type(other).__name__}"
            )

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._nanoseconds == other._nanoseconds

    def __lt__(self, other: NanosecondInstant) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._nanoseconds < other._nanoseconds

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._nanoseconds))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._nanoseconds})"


class MonotonicInstant(NanosecondInstant):
    """Instant of time.monotonic_ns. The default clock of stopwatches."""

    @classmethod
    def now(cls) -> MonotonicInstant:
        return cls(time.monotonic_ns())


class PerfCounterInstant(NanosecondInstant):
    """Instant of time.perf_counter_ns, the highest available resolution."""

    @classmethod
    def now(cls) -> PerfCounterInstant:
        return cls(time.perf_counter_ns())
