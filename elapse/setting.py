import datetime
import math
import pathlib
from typing import Type, Union

import pydantic
import pydantic.dataclasses as dc

from elapse import util
from elapse.base.elapse_enums import ClockType
from elapse.stopwatch import StopwatchImpl, stopwatch_class
from elapse.utils import durations


@dc.dataclass(frozen=True)
class StopwatchSetting:
    """
    Settings to create a stopwatch.

    Parameters
    ----------
    clock: ClockType or str
        Clock read by the stopwatch. [Default: ClockType.MONOTONIC]
    elapsed: float
        Initial elapsed time in seconds. [Default: 0.]
    started: bool
        If True, the stopwatch is running when created. [Default: False]
    """
    clock: ClockType = ClockType.MONOTONIC
    elapsed: float = 0.
    started: bool = False

    @pydantic.field_validator("elapsed")
    @classmethod
    def _check_elapsed(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"elapsed must be finite: {v}")
        if v < 0:
            raise ValueError(f"elapsed must not be negative: {v}")
        if v > durations.MAX.total_seconds():
            raise ValueError(f"elapsed is too large: {v}")
        try:
            datetime.timedelta(seconds=v)
        except OverflowError:
            # total_seconds of the maximum rounds up as a float
            raise ValueError(f"elapsed is too large: {v}")
        return v

    @classmethod
    def read_settings_yaml(
        cls,
        settings_yaml: Union[str, pathlib.Path]
    ) -> 'StopwatchSetting':
        """Read settings from a YAML file. Settings may be nested under
        the 'stopwatch' key.
        """
        dict_settings = util.load_yaml_file(pathlib.Path(settings_yaml))
        if 'stopwatch' in dict_settings:
            dict_settings = dict_settings['stopwatch'] or {}
        return cls(**dict_settings)

    def get_stopwatch_class(self) -> Type[StopwatchImpl]:
        return stopwatch_class(self.clock)

    def create_stopwatch(self) -> StopwatchImpl:
        sw_class = self.get_stopwatch_class()
        elapsed = datetime.timedelta(seconds=self.elapsed)
        if self.started:
            return sw_class.with_elapsed_started(elapsed)
        return sw_class.with_elapsed(elapsed)
