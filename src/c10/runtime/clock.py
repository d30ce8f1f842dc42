"""Clock sources used by the C10 runtime.

Two kinds of time are read here and they are never mixed:

- *wall time* from the host real-time clock, converted to a
  :class:`~c10.domain.system_time.SystemTime` for display;
- *monotonic time* in nanoseconds, used only by the scheduler to measure how
  long each cycle actually took.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Protocol, runtime_checkable

import time

from c10.domain.duration import Duration
from c10.domain.system_time import NANOSECONDS_PER_SECOND, SystemTime
from c10.infra.exceptions import ClockUnavailableError

RealtimeFn = Callable[[], int]
MonotonicFn = Callable[[], int]


@runtime_checkable
class WallClock(Protocol):
    """Protocol implemented by wall-clock providers."""

    def now(self) -> SystemTime:
        """Return the current wall time as a C10 timestamp."""


@dataclass
class SystemWallClock:
    """Wall clock backed by the host real-time clock.

    Parameters
    ----------
    realtime_fn:
        Injectable function returning nanoseconds since the Unix epoch,
        defaults to :func:`time.time_ns`.
    """

    realtime_fn: RealtimeFn = field(default=time.time_ns)

    def read(self) -> tuple[int, int]:
        """Return the raw ``(seconds, nanoseconds)`` reading."""
        try:
            total_ns = self.realtime_fn()
        except OSError as exc:
            raise ClockUnavailableError(f"real-time clock read failed: {exc}") from exc
        if total_ns < 0:
            raise ClockUnavailableError(f"real-time clock returned a pre-epoch value ({total_ns}ns)")
        return divmod(total_ns, NANOSECONDS_PER_SECOND)

    def now(self) -> SystemTime:
        secs, nsecs = self.read()
        return SystemTime.from_unix(secs, nsecs)


class SteppedWallClock:
    """Deterministic wall clock used for tests.

    Time advances only when :meth:`advance` is called.
    """

    def __init__(self, start: SystemTime | None = None) -> None:
        self._current = start if start is not None else SystemTime(0)

    def now(self) -> SystemTime:
        return self._current

    def advance(self, duration: Duration) -> SystemTime:
        """Advance the clock by ``duration``."""
        self._current = self._current + duration
        return self._current


_system_clock = SystemWallClock()


def sample_now() -> SystemTime:
    """Read the current wall time from the default system clock."""
    return _system_clock.now()
