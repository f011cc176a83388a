from __future__ import annotations

import abc
import datetime
from typing import Optional


class IInstant(metaclass=abc.ABCMeta):
    """Point in time of some clock.

    Stopwatches are agnostic about timekeeping: any subclass can be used as
    the anchor of a stopwatch. Instants are immutable, hashable and ordered
    against instants of the same clock.
    """

    @classmethod
    @abc.abstractmethod
    def now(cls) -> IInstant:
        raise NotImplementedError()

    @abc.abstractmethod
    def checked_add(
        self,
        duration: datetime.timedelta
    ) -> Optional[IInstant]:
        """Return an instant ahead of self by duration, or None if it is
        not representable with the underlying clock."""
        raise NotImplementedError()

    @abc.abstractmethod
    def checked_sub(
        self,
        duration: datetime.timedelta
    ) -> Optional[IInstant]:
        """Return an instant previous to self by duration, or None if it is
        not representable with the underlying clock."""
        raise NotImplementedError()

    @abc.abstractmethod
    def checked_duration_since(
        self,
        earlier: IInstant
    ) -> Optional[datetime.timedelta]:
        """Return the duration elapsed since earlier, or None if earlier is
        ahead of self."""
        raise NotImplementedError()

    def saturating_duration_since(
        self,
        earlier: IInstant
    ) -> datetime.timedelta:
        """Return the duration elapsed since earlier, or zero if earlier is
        ahead of self."""
        duration = self.checked_duration_since(earlier)
        if duration is None:
            return datetime.timedelta(0)
        return duration

    @abc.abstractmethod
    def __eq__(self, other: object) -> bool:
        raise NotImplementedError()

    @abc.abstractmethod
    def __lt__(self, other: IInstant) -> bool:
        raise NotImplementedError()

    @abc.abstractmethod
    def __hash__(self) -> int:
        raise NotImplementedError()
