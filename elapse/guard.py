from __future__ import annotations

import datetime
import warnings
from typing import TYPE_CHECKING, Optional

from elapse.instants import IInstant
from elapse.utils.errors import SwGuardError, SwStartError

if TYPE_CHECKING:
    from elapse.stopwatch import StopwatchImpl


class Guard:
    """Running, guarded stopwatch. On release, the stopwatch is stopped
    and the guarded interval is added to its elapsed time.

    Use it as a context manager so that the stopwatch is stopped on every
    exit path of the block.

    Examples
    --------
    >>> sw = Stopwatch()
    >>> with sw.guard():
    ...     do_something()
    >>> sw.is_stopped()
    True

    Parameters
    ----------
    stopwatch : StopwatchImpl
        Stopped stopwatch to guard
    anchor : IInstant, optional
        Instant at which the stopwatch starts. If None, use the current
        time of the stopwatch's clock.

    Raises
    ------
    SwGuardError
        If the stopwatch is already running
    """

    def __init__(
        self,
        stopwatch: StopwatchImpl,
        anchor: Optional[IInstant] = None
    ) -> None:
        try:
            if anchor is None:
                stopwatch.start()
            else:
                stopwatch.start_at(anchor)
        except SwStartError as e:
            raise SwGuardError(e) from e

        self._stopwatch = stopwatch
        self._released = False

    @property
    def stopwatch(self) -> StopwatchImpl:
        return self._stopwatch

    @property
    def is_released(self) -> bool:
        return self._released

    def elapsed(self) -> datetime.timedelta:
        return self._stopwatch.elapsed()

    def elapsed_at(self, anchor: IInstant) -> datetime.timedelta:
        return self._stopwatch.elapsed_at(anchor)

    def release(self) -> None:
        self._release(None)

    def release_at(self, anchor: IInstant) -> None:
        self._release(anchor)

    def _release(self, anchor: Optional[IInstant]) -> None:
        if self._released:
            return
        self._released = True

        if self._stopwatch.is_stopped():
            warnings.warn(
                "Guarded stopwatch was stopped before the guard was "
                "released.",
                RuntimeWarning
            )
            return

        if anchor is None:
            self._stopwatch.stop()
        else:
            self._stopwatch.stop_at(anchor)

    def __enter__(self) -> Guard:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.release()

    def __repr__(self) -> str:
        return f"Guard(stopwatch={self._stopwatch!r}, " \
            f"released={self._released})"
