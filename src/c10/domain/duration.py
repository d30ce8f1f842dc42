"""Fixed-point C10 durations.

A :class:`Duration` is a non-negative count of *ticks*:

- 1 day      = 100 intervals = 1,000,000 ticks
- 1 interval = 100 centivals =    10,000 ticks
- 1 centival = 100 ticks
- 1 tick     = 0.0864 seconds

Tick counts are bounded to an unsigned 64-bit integer (roughly 50 billion
years). Exceeding that bound is a programming error and raises
:class:`~c10.infra.exceptions.TickOverflowError`; values are never wrapped.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from c10.infra.exceptions import TickOverflowError, TickRangeError

TICKS_PER_CENTIVAL = 100
CENTIVALS_PER_INTERVAL = 100
INTERVALS_PER_DAY = 100
TICKS_PER_INTERVAL = TICKS_PER_CENTIVAL * CENTIVALS_PER_INTERVAL
TICKS_PER_DAY = TICKS_PER_INTERVAL * INTERVALS_PER_DAY
DAYS_PER_DECADAY = 10

MAX_TICKS = 2**64 - 1

# 1 tick = 86_400 microseconds = 86_400_000 nanoseconds
MICROSECONDS_PER_TICK = 86_400
NANOSECONDS_PER_TICK = 86_400_000


def _checked(value: int, what: str) -> int:
    if value < 0 or value > MAX_TICKS:
        raise TickOverflowError(f"{what} overflow in Duration.new")
    return value


@dataclass(frozen=True, order=True)
class Duration:
    """A span of C10 time, stored as a whole number of ticks."""

    ticks: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.ticks, int) or isinstance(self.ticks, bool):
            raise TypeError("ticks must be an int")
        _checked(self.ticks, "ticks")

    @classmethod
    def new(cls, intervals: int, centivals: int, ticks: int) -> Duration:
        """Create a duration from intervals, centivals and ticks.

        Each multiplication and addition is range checked against the 64-bit
        tick budget, intervals first, then centivals.

        Raises
        ------
        TickOverflowError
            If a component is negative, or any intermediate tick count does
            not fit in an unsigned 64-bit integer.
        """
        for name, component in (("intervals", intervals), ("centivals", centivals), ("ticks", ticks)):
            if component < 0:
                raise TickOverflowError(f"{name} must be non-negative, got {component}")

        iticks = _checked(intervals * TICKS_PER_INTERVAL, "intervals")
        total = _checked(ticks + iticks, "intervals+ticks")

        cticks = _checked(centivals * TICKS_PER_CENTIVAL, "centivals")
        total = _checked(total + cticks, "centivals+ticks")

        return cls(total)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        """Convert a native duration, truncating to whole ticks.

        Raises
        ------
        TickRangeError
            If ``delta`` is negative or the tick count does not fit in 64 bits.
        """
        micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
        if micros < 0:
            raise TickRangeError(f"{delta!r} is negative")
        return cls._from_ticks_checked(micros // MICROSECONDS_PER_TICK, delta)

    @classmethod
    def from_nanoseconds(cls, nanoseconds: int) -> Duration:
        """Convert a non-negative nanosecond count, truncating to whole ticks."""
        if nanoseconds < 0:
            raise TickRangeError(f"{nanoseconds}ns is negative")
        return cls._from_ticks_checked(nanoseconds // NANOSECONDS_PER_TICK, nanoseconds)

    @classmethod
    def _from_ticks_checked(cls, ticks: int, source: object) -> Duration:
        if ticks > MAX_TICKS:
            raise TickRangeError(f"{source!r} does not fit in a 64-bit tick count")
        return cls(ticks)

    def to_timedelta(self) -> timedelta:
        return timedelta(microseconds=self.ticks * MICROSECONDS_PER_TICK)

    @property
    def days(self) -> int:
        """Whole days contained in this duration."""
        return self.ticks // TICKS_PER_DAY

    def decompose(self) -> tuple[int, int, int]:
        """Return ``(intervals, centivals, ticks)``; intervals are not reduced to a day."""
        return decompose(self)

    def time_components(self) -> tuple[int, int, int]:
        """Extract the interval, centival and tick components of the day position."""
        ints, cents, ticks = decompose(self)
        return ints % INTERVALS_PER_DAY, cents, ticks

    def __str__(self) -> str:
        ints, cents, ticks = self.time_components()
        return f"{ints:02}:{cents:02}:{ticks:02}"


def make_duration(intervals: int, centivals: int, ticks: int) -> Duration:
    """Functional alias of :meth:`Duration.new`."""
    return Duration.new(intervals, centivals, ticks)


def decompose(duration: Duration) -> tuple[int, int, int]:
    """Split a duration into ``(intervals, centivals, ticks)``.

    Centivals and ticks are each in ``[0, 100)``. Intervals are unbounded so
    that the triple always repacks to the original tick total.
    """
    ticks = duration.ticks % TICKS_PER_CENTIVAL
    cents = (duration.ticks // TICKS_PER_CENTIVAL) % CENTIVALS_PER_INTERVAL
    ints = duration.ticks // TICKS_PER_INTERVAL
    return ints, cents, ticks


TICK = Duration.new(0, 0, 1)
CENTIVAL = Duration.new(0, 1, 0)
INTERVAL = Duration.new(1, 0, 0)
DAY = Duration.new(INTERVALS_PER_DAY, 0, 0)
DECADAY = Duration.new(DAYS_PER_DECADAY * INTERVALS_PER_DAY, 0, 0)
