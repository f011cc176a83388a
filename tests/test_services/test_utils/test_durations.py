import datetime

import pytest

from elapse.utils import durations
from elapse.utils.errors import StopwatchOverflowError


SECOND = datetime.timedelta(seconds=1)


@pytest.mark.parametrize("lhs, rhs, checked, saturated", [
    (SECOND, SECOND, 2 * SECOND, 2 * SECOND),
    (durations.MAX, SECOND, None, durations.MAX),
    (durations.MAX, durations.ZERO, durations.MAX, durations.MAX),
])
def test__add(lhs, rhs, checked, saturated):
    assert durations.checked_add(lhs, rhs) == checked
    assert durations.saturating_add(lhs, rhs) == saturated


@pytest.mark.parametrize("lhs, rhs, checked, saturated", [
    (2 * SECOND, SECOND, SECOND, SECOND),
    (SECOND, 2 * SECOND, None, durations.ZERO),
    (SECOND, SECOND, durations.ZERO, durations.ZERO),
])
def test__sub(lhs, rhs, checked, saturated):
    assert durations.checked_sub(lhs, rhs) == checked
    assert durations.saturating_sub(lhs, rhs) == saturated


def test__strict_raises_overflow():
    with pytest.raises(StopwatchOverflowError):
        durations.strict_add(durations.MAX, SECOND)
    with pytest.raises(StopwatchOverflowError):
        durations.strict_sub(durations.ZERO, SECOND)


def test__overflow_error_is_builtin_overflow():
    assert issubclass(StopwatchOverflowError, OverflowError)


@pytest.mark.parametrize("value, error", [
    (-SECOND, ValueError),
    (1, TypeError),
    (None, TypeError),
])
def test__validate_duration(value, error):
    with pytest.raises(error):
        durations.validate_duration(value)
