import datetime
import pathlib
from unittest import mock

import pydantic
import pytest

from elapse.base.elapse_enums import ClockType
from elapse.setting import StopwatchSetting
from elapse.stopwatch import PerfStopwatch, Stopwatch, SystemStopwatch


def test__default_setting():
    setting = StopwatchSetting()
    assert setting.clock == ClockType.MONOTONIC
    sw = setting.create_stopwatch()
    assert isinstance(sw, Stopwatch)
    assert sw == Stopwatch()


@pytest.mark.parametrize("clock, expected", [
    ("monotonic", Stopwatch),
    ("perf_counter", PerfStopwatch),
    ("system", SystemStopwatch),
    (ClockType.SYSTEM, SystemStopwatch),
])
def test__clock_is_converted(clock, expected):
    setting = StopwatchSetting(clock=clock)
    assert setting.get_stopwatch_class() is expected


def test__create_started_stopwatch():
    setting = StopwatchSetting(elapsed=1.5, started=True)
    with mock.patch("time.monotonic_ns", side_effect=[0, 10 ** 9]):
        sw = setting.create_stopwatch()
        assert sw.is_running()
        assert sw.elapsed() == datetime.timedelta(seconds=2.5)


@pytest.mark.parametrize("kwargs", [
    {"elapsed": -1.},
    {"elapsed": float("inf")},
    {"elapsed": float("nan")},
    {"elapsed": 1e15},
    {"clock": "sundial"},
])
def test__invalid_setting(kwargs):
    with pytest.raises(pydantic.ValidationError):
        StopwatchSetting(**kwargs)


def test__setting_is_frozen():
    setting = StopwatchSetting()
    with pytest.raises((AttributeError, pydantic.ValidationError)):
        setting.started = True


@pytest.mark.parametrize("content", [
    "clock: system\nelapsed: 3\n",
    "stopwatch:\n  clock: system\n  elapsed: 3\n",
])
def test__read_settings_yaml(tmp_path: pathlib.Path, content):
    yaml_file = tmp_path / "stopwatch.yml"
    yaml_file.write_text(content)

    setting = StopwatchSetting.read_settings_yaml(yaml_file)
    assert setting.clock == ClockType.SYSTEM
    sw = setting.create_stopwatch()
    assert isinstance(sw, SystemStopwatch)
    assert sw.elapsed() == datetime.timedelta(seconds=3)


def test__read_empty_settings_yaml(tmp_path: pathlib.Path):
    yaml_file = tmp_path / "stopwatch.yml"
    yaml_file.write_text("")
    assert StopwatchSetting.read_settings_yaml(yaml_file) \
        == StopwatchSetting()


def test__read_settings_yaml_not_mapping(tmp_path: pathlib.Path):
    yaml_file = tmp_path / "stopwatch.yml"
    yaml_file.write_text("- monotonic\n")
    with pytest.raises(ValueError):
        StopwatchSetting.read_settings_yaml(yaml_file)


def test__largest_setting_creates_stopwatch():
    setting = StopwatchSetting(elapsed=8.6e13)
    sw = setting.create_stopwatch()
    assert sw.elapsed() == datetime.timedelta(seconds=8.6e13)
