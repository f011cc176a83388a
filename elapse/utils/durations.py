import datetime
from typing import Optional

from elapse.utils.errors import StopwatchOverflowError


ZERO = datetime.timedelta(0)
MAX = datetime.timedelta.max


def validate_duration(duration: datetime.timedelta) -> datetime.timedelta:
    """Check that duration is usable as an elapsed time.

    Parameters
    ----------
    duration : datetime.timedelta

    Returns
    -------
    datetime.timedelta
        The same duration.

    Raises
    ------
    TypeError
        If duration is not a timedelta
    ValueError
        If duration is negative
    """
    if not isinstance(duration, datetime.timedelta):
        raise TypeError(
            f"Duration must be datetime.timedelta, not {type(duration)}"
        )
    if duration < ZERO:
        raise ValueError(f"Duration must not be negative: {duration}")
    return duration


def checked_add(
    lhs: datetime.timedelta,
    rhs: datetime.timedelta
) -> Optional[datetime.timedelta]:
    try:
        return lhs + rhs
    except OverflowError:
        return None


def checked_sub(
    lhs: datetime.timedelta,
    rhs: datetime.timedelta
) -> Optional[datetime.timedelta]:
    if rhs > lhs:
        return None
    return lhs - rhs


def saturating_add(
    lhs: datetime.timedelta,
    rhs: datetime.timedelta
) -> datetime.timedelta:
    result = checked_add(lhs, rhs)
    if result is None:
        return MAX
    return result


def saturating_sub(
    lhs: datetime.timedelta,
    rhs: datetime.timedelta
) -> datetime.timedelta:
    result = checked_sub(lhs, rhs)
    if result is None:
        return ZERO
    return result


def strict_add(
    lhs: datetime.timedelta,
    rhs: datetime.timedelta
) -> datetime.timedelta:
    """Add durations, raising StopwatchOverflowError on overflow."""
    result = checked_add(lhs, rhs)
    if result is None:
        raise StopwatchOverflowError(
            f"Overflow when adding durations: {lhs} + {rhs}"
        )
    return result


def strict_sub(
    lhs: datetime.timedelta,
    rhs: datetime.timedelta
) -> datetime.timedelta:
    """Subtract durations, raising StopwatchOverflowError when the result
    would be negative."""
    result = checked_sub(lhs, rhs)
    if result is None:
        raise StopwatchOverflowError(
            f"Overflow when subtracting durations: {lhs} - {rhs}"
        )
    return result
