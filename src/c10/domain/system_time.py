"""Absolute C10 timestamps."""

from __future__ import annotations

from dataclasses import dataclass

from c10.infra.exceptions import UnsupportedDateError

from .calendar import CalendarFields, decompose_ticks
from .duration import MAX_TICKS, TICKS_PER_DAY, Duration

NANOSECONDS_PER_SECOND = 1_000_000_000

# 1 tick = 0.0864 seconds, so 625 ticks = 54 seconds.
TICKS_PER_SECOND_NUM = 625
TICKS_PER_SECOND_DEN = 54


def unix_to_ticks(seconds: int, nanoseconds: int = 0) -> int:
    """Convert a Unix ``(seconds, nanoseconds)`` reading to whole ticks.

    The 625/54 ratio is applied to the combined nanosecond total so the
    sub-second part is never rounded separately.
    """
    if not 0 <= nanoseconds < NANOSECONDS_PER_SECOND:
        raise ValueError(f"nanoseconds must be in [0, 1e9), got {nanoseconds}")
    if seconds < 0:
        raise UnsupportedDateError(f"{seconds}s is before the Unix epoch")
    total_ns = seconds * NANOSECONDS_PER_SECOND + nanoseconds
    return total_ns * TICKS_PER_SECOND_NUM // (TICKS_PER_SECOND_DEN * NANOSECONDS_PER_SECOND)


@dataclass(frozen=True, order=True)
class SystemTime:
    """A point in time as a tick count since 1970-01-01T00:00:00Z."""

    ticks: int

    def __post_init__(self) -> None:
        if self.ticks < 0:
            raise UnsupportedDateError(f"{self.ticks} ticks is before the Unix epoch")
        if self.ticks > MAX_TICKS:
            raise UnsupportedDateError(f"{self.ticks} ticks does not fit in 64 bits")

    @classmethod
    def from_unix(cls, seconds: int, nanoseconds: int = 0) -> SystemTime:
        return cls(unix_to_ticks(seconds, nanoseconds))

    @classmethod
    def now(cls) -> SystemTime:
        """Sample the host real-time clock."""
        from c10.runtime.clock import sample_now

        return sample_now()

    def since_epoch(self) -> Duration:
        return Duration(self.ticks)

    def time_components(self) -> tuple[int, int, int]:
        """Return the interval, centival and tick components of the timestamp's day."""
        return Duration(self.ticks % TICKS_PER_DAY).time_components()

    def date_components(self) -> tuple[int, int, int]:
        """Return the year, decaday and day components of the timestamp's date."""
        return self.calendar().date()

    def calendar(self) -> CalendarFields:
        return decompose_ticks(self.ticks)

    def __add__(self, other: object) -> SystemTime:
        if isinstance(other, Duration):
            return SystemTime(self.ticks + other.ticks)
        return NotImplemented

    def __str__(self) -> str:
        return self.calendar().format()
