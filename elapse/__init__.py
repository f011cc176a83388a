"""
elapse
"""

import toml
from pathlib import Path

from elapse import instants  # NOQA
from elapse import setting  # NOQA
from elapse import stopwatch  # NOQA
from elapse.base.elapse_enums import ClockType  # NOQA
from elapse.guard import Guard  # NOQA
from elapse.instants import (IInstant, MonotonicInstant,  # NOQA
                             PerfCounterInstant, SystemInstant)
from elapse.setting import StopwatchSetting  # NOQA
from elapse.stopwatch import (PerfStopwatch, Stopwatch,  # NOQA
                              StopwatchImpl, SystemStopwatch,
                              stopwatch_class)
from elapse.utils.errors import (StopwatchError,  # NOQA
                                 StopwatchOverflowError, SwGuardError,
                                 SwStartError, SwStopError)


def get_version():
    path = Path(__file__).resolve().parent.parent / 'pyproject.toml'
    if not path.is_file():
        return 'unknown'
    pyproject = toml.loads(path.read_text())
    return pyproject['tool']['poetry']['version']


__version__ = get_version()
