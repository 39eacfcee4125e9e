"""
Timing markers for the kernel benchmark runner.

runner.run_operation wraps each timed batch in perf_marker(name). While
recording is enabled, leaving the marker adds the batch's wall time to a
flat tally for that name, and scripts/benchmark.py --profile prints the
tallies next to the per-call table.

Usage:
    from linmath.profiling import enable_profiling, perf_marker, get_profile_results

    enable_profiling()
    with perf_marker("inverse"):
        for _ in range(1000):
            inverse(m)

    get_profile_results()
    # {'inverse': {'count': 1, 'total_ms': 1.9, 'avg_ms': 1.9, 'min_ms': 1.9, 'max_ms': 1.9}}

Recording is off until enable_profiling() is called. With
LINMATH_NO_PROFILING=1 in the environment, or under python -O, it can
never be turned on and every marker is a shared do-nothing object. This is
decided at import time.
"""

import math
import os
import time
from typing import Any, Dict, Optional

_PROFILING_COMPILED_OUT = (
    os.environ.get('LINMATH_NO_PROFILING', '').lower() in ('1', 'true', 'yes')
    or not __debug__
)

_clock = time.perf_counter


class _Tally:
    """Count, total, min and max of the batches recorded under one name."""
    __slots__ = ('count', 'total', 'fastest', 'slowest')

    def __init__(self):
        self.count = 0
        self.total = 0.0
        self.fastest = math.inf
        self.slowest = 0.0

    def add(self, seconds: float) -> None:
        self.count += 1
        self.total += seconds
        if seconds < self.fastest:
            self.fastest = seconds
        if seconds > self.slowest:
            self.slowest = seconds

    def summary(self) -> Dict[str, Any]:
        return {
            'count': self.count,
            'total_ms': round(self.total * 1000.0, 3),
            'avg_ms': round(self.total * 1000.0 / self.count, 3),
            'min_ms': round(self.fastest * 1000.0, 3),
            'max_ms': round(self.slowest * 1000.0, 3),
        }


class _BatchTimer:
    __slots__ = ('_tally', '_started')

    def __init__(self, tally: _Tally):
        self._tally = tally
        self._started = 0.0

    def __enter__(self):
        self._started = _clock()
        return self

    def __exit__(self, *exc_info):
        self._tally.add(_clock() - self._started)
        return False


class _Idle:
    __slots__ = ()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


_IDLE = _Idle()

_recording = False
_tallies: Dict[str, _Tally] = {}


def enable_profiling(enabled: bool = True) -> None:
    """Start (or stop) recording batches. Ignored when compiled out."""
    global _recording
    if not _PROFILING_COMPILED_OUT:
        _recording = enabled


def is_profiling_enabled() -> bool:
    return _recording


def reset_profile() -> None:
    """Forget every recorded batch."""
    _tallies.clear()


def get_profile_results() -> Dict[str, Dict[str, Any]]:
    """
    Per-name batch statistics in first-recorded order.

    Returns:
        {'mul': {'count': 3, 'total_ms': 4.2, 'avg_ms': 1.4,
                 'min_ms': 1.3, 'max_ms': 1.5}, ...}
    """
    return {name: tally.summary() for name, tally in _tallies.items()}


def perf_marker(name: Optional[str] = None):
    """Context manager timing one batch under name."""
    if not _recording:
        return _IDLE
    key = name or "unnamed"
    tally = _tallies.get(key)
    if tally is None:
        tally = _tallies[key] = _Tally()
    return _BatchTimer(tally)
