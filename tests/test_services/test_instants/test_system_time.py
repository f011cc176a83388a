import datetime

import pytest

from elapse.instants import SystemInstant


T0 = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)


def test__now_is_utc():
    assert SystemInstant.now().value.tzinfo == datetime.timezone.utc


def test__timezones_are_normalized():
    jst = datetime.timezone(datetime.timedelta(hours=9))
    assert SystemInstant(T0.astimezone(jst)) == SystemInstant(T0)


def test__naive_datetime_is_rejected():
    with pytest.raises(ValueError):
        SystemInstant(datetime.datetime(2024, 1, 1))


def test__clock_moved_backwards():
    earlier = SystemInstant(T0)
    later = SystemInstant(T0 - datetime.timedelta(seconds=1))
    assert later.checked_duration_since(earlier) is None
    assert later.saturating_duration_since(earlier) == datetime.timedelta(0)
    assert earlier.checked_duration_since(later) \
        == datetime.timedelta(seconds=1)


def test__shift_out_of_range():
    instant = SystemInstant(
        datetime.datetime.max.replace(tzinfo=datetime.timezone.utc))
    assert instant.checked_add(datetime.timedelta(days=1)) is None
    assert instant.checked_sub(datetime.timedelta(days=1)) \
        == SystemInstant(instant.value - datetime.timedelta(days=1))
