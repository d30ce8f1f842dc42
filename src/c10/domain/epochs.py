"""Conversions between calendar years and Unix-epoch offsets.

Year starts are computed from the Gregorian leap rule and cached once per
process in :data:`EPOCH_INDEX`. The supported span is 1970 through
:data:`MAX_YEAR`; anything outside it raises
:class:`~c10.infra.exceptions.UnsupportedDateError` instead of producing a
wrong year.
"""

from __future__ import annotations

from collections.abc import Sequence

from c10.infra.exceptions import UnsupportedDateError

from .duration import TICKS_PER_DAY

EPOCH_YEAR = 1970
MAX_YEAR = 9999

SECONDS_PER_DAY = 24 * 60 * 60


def is_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap(year) else 365


class EpochIndex:
    """Read-only table of cumulative days since 1970-01-01, indexed by year.

    ``start_days(Y)`` is the number of days between the Unix epoch and
    January 1 of year ``Y``. The table holds one extra entry past
    ``last_year`` so the end of the final supported year is known.
    """

    def __init__(self, first_year: int = EPOCH_YEAR, last_year: int = MAX_YEAR) -> None:
        if last_year < first_year:
            raise ValueError("last_year must not precede first_year")
        self.first_year = first_year
        self.last_year = last_year

        starts = [0]
        for year in range(first_year, last_year + 1):
            starts.append(starts[-1] + days_in_year(year))
        self._starts: tuple[int, ...] = tuple(starts)

    @property
    def starts(self) -> Sequence[int]:
        return self._starts

    def __contains__(self, year: object) -> bool:
        return isinstance(year, int) and self.first_year <= year <= self.last_year

    def start_days(self, year: int) -> int:
        if year not in self:
            raise UnsupportedDateError(
                f"year {year} is outside the supported span {self.first_year}-{self.last_year}"
            )
        return self._starts[year - self.first_year]

    def year_from_days(self, days: int) -> int:
        """Return the greatest year whose start is at or before ``days``."""
        if days < 0:
            raise UnsupportedDateError(f"{days} days is before the Unix epoch")

        # No year is longer than 366 days, so this index never overshoots.
        index = days // 366
        last_index = len(self._starts) - 2
        if index > last_index:
            raise UnsupportedDateError(f"day {days} is past the end of {self.last_year}")
        while self._starts[index + 1] <= days:
            index += 1
            if index > last_index:
                raise UnsupportedDateError(f"day {days} is past the end of {self.last_year}")
        return self.first_year + index


EPOCH_INDEX = EpochIndex()


def year_to_days(year: int) -> int:
    """Days since the Unix epoch for January 1 of ``year``."""
    return EPOCH_INDEX.start_days(year)


def year_to_seconds(year: int) -> int:
    """Seconds after the Unix epoch for January 1 of ``year``."""
    return year_to_days(year) * SECONDS_PER_DAY


def year_to_ticks(year: int) -> int:
    """C10 ticks after the Unix epoch for January 1 of ``year``."""
    return year_to_days(year) * TICKS_PER_DAY


def year_from_seconds(secs: int) -> int:
    """Return the year to which a Unix time (seconds) belongs."""
    if secs < 0:
        raise UnsupportedDateError(f"{secs}s is before the Unix epoch")
    return EPOCH_INDEX.year_from_days(secs // SECONDS_PER_DAY)


def year_from_ticks(ticks: int) -> int:
    """Return the year to which an absolute C10 tick count belongs."""
    if ticks < 0:
        raise UnsupportedDateError(f"{ticks} ticks is before the Unix epoch")
    return EPOCH_INDEX.year_from_days(ticks // TICKS_PER_DAY)
