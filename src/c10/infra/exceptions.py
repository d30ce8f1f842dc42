"""
Custom exceptions for C10 operations.

Every error raised by the conversion engine or the scheduler derives from
:class:`C10Error`. The arithmetic errors also derive from the matching builtin
so callers that only know ``OverflowError``/``ValueError`` still catch them.
"""


class C10Error(Exception):
    """Base exception for all C10 errors."""

    pass


class TickOverflowError(C10Error, OverflowError):
    """Raised when a duration cannot be represented as an unsigned 64-bit tick count."""

    pass


class TickRangeError(C10Error, ValueError):
    """Raised when a native duration does not convert to a representable tick count."""

    pass


class UnsupportedDateError(C10Error, ValueError):
    """Raised when a year or timestamp falls outside the supported calendar span."""

    pass


class ClockUnavailableError(C10Error):
    """Raised when the host real-time clock cannot be read."""

    pass


class NegativeSleepError(C10Error):
    """Raised when the scheduler computes a sleep shorter than zero."""

    def __init__(self, sleep_ns: int, period_ns: int, average_drift_ns: int) -> None:
        self.sleep_ns = sleep_ns
        self.period_ns = period_ns
        self.average_drift_ns = average_drift_ns
        super().__init__(
            f"computed sleep of {sleep_ns}ns is negative "
            f"(period={period_ns}ns, average_drift={average_drift_ns}ns); "
            "the update period is too short for the observed drift"
        )
