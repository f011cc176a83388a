from enum import Enum


class ClockType(Enum):
    MONOTONIC = "monotonic"
    PERF_COUNTER = "perf_counter"
    SYSTEM = "system"
