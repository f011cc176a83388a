from .interface import IInstant  # NOQA
from .monotonic import (MonotonicInstant, NanosecondInstant,  # NOQA
                        PerfCounterInstant)
from .system_time import SystemInstant  # NOQA
