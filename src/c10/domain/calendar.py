"""Calendar decomposition of absolute C10 timestamps.

An absolute tick count is split into the year it falls in, the decaday and
day within that year (both 1-based), and the interval, centival and tick
within the day.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING

from .duration import DAYS_PER_DECADAY, TICKS_PER_DAY, Duration
from .epochs import year_from_ticks, year_to_ticks

if TYPE_CHECKING:
    from .system_time import SystemTime


@dataclass(frozen=True)
class CalendarFields:
    """Displayable C10 date and time fields."""

    year: int
    decaday: int
    day: int
    interval: int
    centival: int
    tick: int

    def date(self) -> tuple[int, int, int]:
        return self.year, self.decaday, self.day

    def time(self) -> tuple[int, int, int]:
        return self.interval, self.centival, self.tick

    def format(self) -> str:
        """Render as ``YYYY DD.dd HH:CC:TT``."""
        return (
            f"{self.year:04} {self.decaday:02}.{self.day:02} "
            f"{self.interval:02}:{self.centival:02}:{self.tick:02}"
        )

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    def __str__(self) -> str:
        return self.format()


def decompose_ticks(ticks: int) -> CalendarFields:
    """Decompose an absolute tick count measured from the Unix epoch."""
    year = year_from_ticks(ticks)
    into_year = ticks - year_to_ticks(year)
    days_into_year = into_year // TICKS_PER_DAY

    # Years are whole days long, so the offset into the year and the
    # absolute count agree on the position within the day.
    interval, centival, tick = Duration(ticks % TICKS_PER_DAY).time_components()

    return CalendarFields(
        year=year,
        decaday=days_into_year // DAYS_PER_DECADAY + 1,
        day=days_into_year % DAYS_PER_DECADAY + 1,
        interval=interval,
        centival=centival,
        tick=tick,
    )


def decompose_calendar(ts: SystemTime) -> CalendarFields:
    """Decompose a sampled timestamp into its calendar and clock fields."""
    return decompose_ticks(ts.ticks)
