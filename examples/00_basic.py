"""
Basic Usage of elapse
=====================

elapse measures elapsed time accumulated over several start and stop cycles.
We will cover starting and stopping a stopwatch, measuring a block with a
guard, and checked arithmetic.

"""

###############################################################################
# Import necessary modules including :mod:`elapse`.

import datetime
import time

import elapse


###############################################################################
# Start and stop
# --------------
# A new stopwatch is stopped with zero elapsed time. Time is only accumulated
# while it is running.

sw = elapse.Stopwatch()
sw.start()
time.sleep(0.1)
sw.stop()
time.sleep(0.1)
print(f"Elapsed after one interval: {sw.elapsed()}")


###############################################################################
# Guard
# -----
# A guard starts the stopwatch and stops it when the block is left, even if
# the block raises.

with sw.guard():
    time.sleep(0.1)
print(f"Elapsed after the guarded block: {sw.elapsed()}")

try:
    sw.stop()
except elapse.SwStopError as e:
    print(f"Stopping twice fails: {e}")


###############################################################################
# Explicit instants
# -----------------
# Every method reading the clock has an ``_at`` counterpart, which is useful
# to replay recorded instants.

t0 = elapse.MonotonicInstant.now()
replayed = elapse.Stopwatch.new_started_at(t0)
replayed.stop_at(t0.checked_add(datetime.timedelta(seconds=5)))
print(f"Replayed elapsed time: {replayed.elapsed()}")


###############################################################################
# Arithmetic
# ----------
# Checked arithmetic raises instead of overflowing, saturating arithmetic
# clamps.

full = elapse.Stopwatch.with_elapsed(datetime.timedelta.max)
print(f"Saturated: {full.saturating_add(datetime.timedelta(seconds=1))}")
try:
    full.checked_add(datetime.timedelta(seconds=1))
except elapse.StopwatchOverflowError as e:
    print(f"Overflow: {e}")


###############################################################################
# Settings
# --------
# A stopwatch can also be configured, e.g., from a YAML file with
# :meth:`elapse.StopwatchSetting.read_settings_yaml`.

setting = elapse.StopwatchSetting(clock="system", elapsed=60., started=True)
wall = setting.create_stopwatch()
print(f"{type(wall).__name__} running: {wall.is_running()}")
