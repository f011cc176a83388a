from __future__ import annotations

import datetime
from typing import (Callable, ClassVar, Generic, Optional, Tuple, Type,
                    TypeVar, Union)

from elapse.base.elapse_enums import ClockType
from elapse.guard import Guard
from elapse.instants import (IInstant, MonotonicInstant, PerfCounterInstant,
                             SystemInstant)
from elapse.utils import durations
from elapse.utils.errors import SwStartError, SwStopError


InstantT = TypeVar('InstantT', bound=IInstant)


class StopwatchImpl(Generic[InstantT]):
    """Stopwatch measuring and accumulating elapsed time between starts
    and stops, generic over the clock it reads.

    Internally a stopwatch combines the accumulated elapsed time of the
    finished intervals and the instant which records the latest start.
    While the start is not None, the stopwatch is running. When it stops,
    the time elapsed since the start is added to the elapsed time and the
    start is set to None.

    Every method reading the clock has an ``_at`` counterpart taking the
    instant to use as the current time. Instants preceding the start are
    treated as the start itself, so an interval never counts negatively.

    Parameters
    ----------
    elapsed : datetime.timedelta, optional
        Accumulated elapsed time. [Default: zero]
    start : IInstant, optional
        Start of the running interval. If None, the stopwatch is stopped.
    """
    instant_type: ClassVar[Optional[Type[IInstant]]] = None

    def __init__(
        self,
        elapsed: datetime.timedelta = durations.ZERO,
        start: Optional[InstantT] = None
    ) -> None:
        self._elapsed = durations.validate_duration(elapsed)
        self._start: Optional[InstantT] = start

    @classmethod
    def now(cls) -> InstantT:
        if cls.instant_type is None:
            raise TypeError(
                f"{cls.__name__} has no instant_type. "
                "Use methods taking an instant or a configured stopwatch."
            )
        return cls.instant_type.now()

    @classmethod
    def new_started(cls) -> StopwatchImpl[InstantT]:
        return cls.new_started_at(cls.now())

    @classmethod
    def new_started_at(cls, start: InstantT) -> StopwatchImpl[InstantT]:
        return cls(durations.ZERO, start)

    @classmethod
    def with_elapsed(
        cls,
        elapsed: datetime.timedelta
    ) -> StopwatchImpl[InstantT]:
        return cls(elapsed)

    @classmethod
    def with_elapsed_started(
        cls,
        elapsed: datetime.timedelta
    ) -> StopwatchImpl[InstantT]:
        return cls.with_elapsed_started_at(elapsed, cls.now())

    @classmethod
    def with_elapsed_started_at(
        cls,
        elapsed: datetime.timedelta,
        start: InstantT
    ) -> StopwatchImpl[InstantT]:
        return cls(elapsed, start)

    @classmethod
    def from_raw(
        cls,
        elapsed: datetime.timedelta,
        start: Optional[InstantT]
    ) -> StopwatchImpl[InstantT]:
        """Create a stopwatch from its raw parts.

        Parameters
        ----------
        elapsed : datetime.timedelta
            Accumulated elapsed time, excluding the running interval.
        start : IInstant or None
            Start of the running interval, None if stopped.
        """
        return cls(elapsed, start)

    def to_raw(self) -> Tuple[datetime.timedelta, Optional[InstantT]]:
        return self._elapsed, self._start

    def start_time(self) -> Optional[InstantT]:
        return self._start

    def is_running(self) -> bool:
        return self._start is not None

    def is_stopped(self) -> bool:
        return self._start is None

    def elapsed(self) -> datetime.timedelta:
        return self.elapsed_at(self._now_if_running())

    def elapsed_at(self, anchor: InstantT) -> datetime.timedelta:
        """Return the total time elapsed, measured at anchor.

        The result saturates at the maximum duration instead of
        overflowing.

        Parameters
        ----------
        anchor : IInstant
            Instant regarded as the current time. Ignored if stopped.

        Returns
        -------
        datetime.timedelta
            Total elapsed time
        """
        if self._start is None:
            return self._elapsed
        return durations.saturating_add(
            self._elapsed, anchor.saturating_duration_since(self._start)
        )

    def checked_elapsed(self) -> datetime.timedelta:
        return self.checked_elapsed_at(self._now_if_running())

    def checked_elapsed_at(self, anchor: InstantT) -> datetime.timedelta:
        """Return the total time elapsed, measured at anchor.

        Raises
        ------
        StopwatchOverflowError
            If the total elapsed time is not representable
        """
        if self._start is None:
            return self._elapsed
        return durations.strict_add(
            self._elapsed, anchor.saturating_duration_since(self._start)
        )

    def start(self) -> None:
        self.start_at(self._now_if_stopped())

    def start_at(self, anchor: InstantT) -> None:
        """Start measuring the time elapsed, as if the current time is
        anchor.

        Raises
        ------
        SwStartError
            If the stopwatch is already running
        """
        if self.is_running():
            raise SwStartError()
        self._start = anchor

    def checked_start(self) -> None:
        self.checked_start_at(self._now_if_stopped())

    def checked_start_at(self, anchor: InstantT) -> None:
        # Starting adds no time yet, thus it cannot overflow.
        self.start_at(anchor)

    def stop(self) -> None:
        self.stop_at(self._now_if_running())

    def stop_at(self, anchor: InstantT) -> None:
        """Stop measuring the time elapsed since the last start, as if the
        current time is anchor.

        If anchor precedes the start, the interval counts as zero. The
        elapsed time saturates instead of overflowing.

        Raises
        ------
        SwStopError
            If the stopwatch is already stopped
        """
        if self.is_stopped():
            raise SwStopError()
        self._elapsed = self.elapsed_at(anchor)
        self._start = None

    def checked_stop(self) -> None:
        self.checked_stop_at(self._now_if_running())

    def checked_stop_at(self, anchor: InstantT) -> None:
        """Same as stop_at, but the stopwatch is left unchanged if the
        elapsed time overflows.

        Raises
        ------
        SwStopError
            If the stopwatch is already stopped
        StopwatchOverflowError
            If the elapsed time is not representable
        """
        if self.is_stopped():
            raise SwStopError()
        self._elapsed = self.checked_elapsed_at(anchor)
        self._start = None

    def toggle(self) -> None:
        self.toggle_at(self.now())

    def toggle_at(self, anchor: InstantT) -> None:
        if self.is_running():
            self.stop_at(anchor)
        else:
            self.start_at(anchor)

    def checked_toggle(self) -> None:
        self.checked_toggle_at(self.now())

    def checked_toggle_at(self, anchor: InstantT) -> None:
        if self.is_running():
            self.checked_stop_at(anchor)
        else:
            self.checked_start_at(anchor)

    def reset(self) -> None:
        """Reset the elapsed time to zero.

        A running stopwatch keeps running from the same start, so that the
        elapsed time becomes the time since the start.
        """
        self._elapsed = durations.ZERO

    def reset_in_place(self) -> None:
        self.reset_in_place_at(self._now_if_running())

    def reset_in_place_at(self, start: InstantT) -> None:
        """Reset the elapsed time to zero. A running stopwatch restarts at
        start without being stopped."""
        self.set_in_place_at(durations.ZERO, start)

    def set(self, new: datetime.timedelta) -> None:
        """Overwrite the accumulated elapsed time. The start of a running
        stopwatch is kept."""
        self._elapsed = durations.validate_duration(new)

    def set_in_place(self, new: datetime.timedelta) -> None:
        self.set_in_place_at(new, self._now_if_running())

    def set_in_place_at(
        self,
        new: datetime.timedelta,
        anchor: InstantT
    ) -> None:
        """Overwrite the accumulated elapsed time. A running stopwatch is
        restarted at anchor, so that the total elapsed time at anchor is
        new."""
        self._elapsed = durations.validate_duration(new)
        if self._start is not None:
            self._start = anchor

    def replace(
        self,
        new: datetime.timedelta,
        running: Optional[bool] = None
    ) -> Tuple[datetime.timedelta, bool]:
        return self.replace_at(new, self.now(), running=running)

    def replace_at(
        self,
        new: datetime.timedelta,
        anchor: InstantT,
        running: Optional[bool] = None
    ) -> Tuple[datetime.timedelta, bool]:
        """Set the elapsed time and the running state at once.

        Parameters
        ----------
        new : datetime.timedelta
            New elapsed time at anchor
        anchor : IInstant
            Instant regarded as the current time
        running : bool, optional
            Whether the stopwatch runs afterwards, starting at anchor.
            If None, keep the current state. [Default: None]

        Returns
        -------
        Tuple[datetime.timedelta, bool]
            Total elapsed time at anchor and running state before replacing
        """
        new = durations.validate_duration(new)
        previous = (self.elapsed_at(anchor), self.is_running())
        if running is None:
            running = self.is_running()

        self._elapsed = new
        self._start = anchor if running else None
        return previous

    def guard(self) -> Guard:
        """Start the stopwatch and return a Guard stopping it on release.

        Raises
        ------
        SwGuardError
            If the stopwatch is already running
        """
        return Guard(self)

    def guard_at(self, anchor: InstantT) -> Guard:
        return Guard(self, anchor)

    def saturating_add(self, other: DurationLike) -> StopwatchImpl[InstantT]:
        """Return a stopwatch with other added to the elapsed time. If
        overflow occurred, the elapsed time is set to the maximum
        duration."""
        return self._with_elapsed(
            durations.saturating_add(self._elapsed, _as_duration(other))
        )

    def checked_add(self, other: DurationLike) -> StopwatchImpl[InstantT]:
        """Return a stopwatch with other added to the elapsed time.

        Raises
        ------
        StopwatchOverflowError
            If the elapsed time overflows
        """
        return self._with_elapsed(
            durations.strict_add(self._elapsed, _as_duration(other))
        )

    def unchecked_add(self, other: DurationLike) -> StopwatchImpl[InstantT]:
        # Overflow raises the built-in OverflowError of timedelta
        return self._with_elapsed(self._elapsed + _as_duration(other))

    def saturating_sub(self, other: DurationLike) -> StopwatchImpl[InstantT]:
        return self.saturating_sub_at(other, self._now_if_running())

    def saturating_sub_at(
        self,
        other: DurationLike,
        anchor: InstantT
    ) -> StopwatchImpl[InstantT]:
        """Return a stopwatch with other subtracted from the total elapsed
        time at anchor. If overflow occurred, the elapsed time is set to
        zero.

        A running stopwatch first folds the time elapsed until anchor into
        the elapsed time and restarts at anchor, so the running interval
        can be subtracted from too.
        """
        elapsed, start = self._synced_at(anchor, durations.saturating_add)
        return type(self).from_raw(
            durations.saturating_sub(elapsed, _as_duration(other)), start
        )

    def checked_sub(self, other: DurationLike) -> StopwatchImpl[InstantT]:
        return self.checked_sub_at(other, self._now_if_running())

    def checked_sub_at(
        self,
        other: DurationLike,
        anchor: InstantT
    ) -> StopwatchImpl[InstantT]:
        """Same as saturating_sub_at, but raise StopwatchOverflowError
        instead of clamping."""
        elapsed, start = self._synced_at(anchor, durations.strict_add)
        return type(self).from_raw(
            durations.strict_sub(elapsed, _as_duration(other)), start
        )

    def unchecked_sub(self, other: DurationLike) -> StopwatchImpl[InstantT]:
        return self.unchecked_sub_at(other, self._now_if_running())

    def unchecked_sub_at(
        self,
        other: DurationLike,
        anchor: InstantT
    ) -> StopwatchImpl[InstantT]:
        elapsed, start = self._synced_at(anchor, _plain_add)
        duration = _as_duration(other)
        if duration > elapsed:
            raise OverflowError(
                f"Overflow when subtracting durations: {elapsed} - {duration}"
            )
        return type(self).from_raw(elapsed - duration, start)

    def _with_elapsed(
        self,
        elapsed: datetime.timedelta
    ) -> StopwatchImpl[InstantT]:
        return type(self).from_raw(elapsed, self._start)

    def _synced_at(
        self,
        anchor: InstantT,
        add: Callable[
            [datetime.timedelta, datetime.timedelta], datetime.timedelta]
    ) -> Tuple[datetime.timedelta, Optional[InstantT]]:
        if self._start is None:
            return self._elapsed, None
        since_start = anchor.checked_duration_since(self._start)
        if since_start is None:
            # anchor precedes the start: nothing to fold, keep the start
            return self._elapsed, self._start
        return add(self._elapsed, since_start), anchor

    def _now_if_running(self) -> Optional[InstantT]:
        if self._start is None:
            return None
        return self.now()

    def _now_if_stopped(self) -> Optional[InstantT]:
        if self._start is not None:
            return None
        return self.now()

    def __add__(self, other: DurationLike) -> StopwatchImpl[InstantT]:
        if not isinstance(other, (datetime.timedelta, StopwatchImpl)):
            return NotImplemented
        return self.unchecked_add(other)

    def __sub__(self, other: DurationLike) -> StopwatchImpl[InstantT]:
        if not isinstance(other, (datetime.timedelta, StopwatchImpl)):
            return NotImplemented
        return self.unchecked_sub(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StopwatchImpl):
            return NotImplemented
        return self._elapsed == other._elapsed \
            and self._start == other._start

    def __hash__(self) -> int:
        return hash((self._elapsed, self._start))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(" \
            f"elapsed={self._elapsed!r}, start={self._start!r})"


DurationLike = Union[datetime.timedelta, StopwatchImpl]


def _as_duration(other: DurationLike) -> datetime.timedelta:
    # Only the accumulated elapsed time of another stopwatch is used
    if isinstance(other, StopwatchImpl):
        return other._elapsed
    return durations.validate_duration(other)


def _plain_add(
    lhs: datetime.timedelta,
    rhs: datetime.timedelta
) -> datetime.timedelta:
    return lhs + rhs


class Stopwatch(StopwatchImpl[MonotonicInstant]):
    """Stopwatch reading time.monotonic_ns."""
    instant_type = MonotonicInstant


class PerfStopwatch(StopwatchImpl[PerfCounterInstant]):
    """Stopwatch reading time.perf_counter_ns."""
    instant_type = PerfCounterInstant


class SystemStopwatch(StopwatchImpl[SystemInstant]):
    """Stopwatch reading the system wall clock. See SystemInstant."""
    instant_type = SystemInstant


_CLOCK_TO_STOPWATCH = {
    ClockType.MONOTONIC: Stopwatch,
    ClockType.PERF_COUNTER: PerfStopwatch,
    ClockType.SYSTEM: SystemStopwatch,
}


def stopwatch_class(
    clock: Union[ClockType, str]
) -> Type[StopwatchImpl]:
    """Return the stopwatch class reading the given clock.

    Parameters
    ----------
    clock : ClockType or str
        Clock type, or its value such as "monotonic"

    Returns
    -------
    Type[StopwatchImpl]
    """
    return _CLOCK_TO_STOPWATCH[ClockType(clock)]
