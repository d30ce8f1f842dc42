"""Drift-compensated pacing for the render loop.

The :class:`DriftCompensatedScheduler` invokes an action once per nominal
period. A plain ``sleep(period)`` loop runs slow: every sleep overshoots by
some scheduler overhead plus noise, and the render itself takes time. The
scheduler measures what each cycle really took on a monotonic clock and
shortens the next sleep by the moving average of recent drift.

Key guarantees:

- Each cycle boundary advances by the *measured* elapsed time, never by the
  nominal period, so phase follows the monotonic clock.
- Drift is ``elapsed - period`` (positive when the cycle ran long) and is
  averaged over a fixed window, see :class:`~c10.runtime.drift.DriftHistory`.
- The correction only cancels a systematic bias; it does not chase absolute
  phase error against a fixed origin.
- A negative computed sleep raises :class:`NegativeSleepError` unless
  ``clamp_negative_sleep`` is set, in which case the cycle does not sleep.
- Exceptions from the action propagate and end the loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

import time

import structlog

from c10.domain.system_time import NANOSECONDS_PER_SECOND
from c10.infra.exceptions import NegativeSleepError

from .clock import MonotonicFn
from .drift import DEFAULT_WINDOW, DriftHistory

SleepFn = Callable[[float], None]
Action = Callable[[], None]

_log = structlog.get_logger(__name__)


def period_from_hz(rate_hz: float) -> int:
    """Nominal period in nanoseconds for an update rate in hertz."""
    if rate_hz <= 0.0:
        raise ValueError("rate_hz must be greater than zero")
    period_ns = int(NANOSECONDS_PER_SECOND // rate_hz)
    if period_ns == 0:
        raise ValueError(f"rate_hz {rate_hz} is faster than one update per nanosecond")
    return period_ns


@dataclass
class DriftCompensatedScheduler:
    """Run ``action`` periodically, correcting for sleep inaccuracy.

    Parameters
    ----------
    action:
        Called once per cycle. Typically samples the wall clock and renders.
    period_ns:
        Nominal cycle length in nanoseconds. Must be positive.
    window:
        Number of recent drift samples averaged for the correction.
    monotonic_fn:
        Injectable monotonic clock in nanoseconds, defaults to
        :func:`time.monotonic_ns`.
    sleep_fn:
        Injectable sleep taking seconds, defaults to :func:`time.sleep`.
    clamp_negative_sleep:
        Sleep zero instead of raising when the correction exceeds the period.
    """

    action: Action
    period_ns: int
    window: int = DEFAULT_WINDOW
    monotonic_fn: MonotonicFn = field(default=time.monotonic_ns)
    sleep_fn: SleepFn = field(default=time.sleep)
    clamp_negative_sleep: bool = False
    _history: DriftHistory = field(init=False)
    _boundary_ns: int | None = field(default=None, init=False)
    _cycles: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.period_ns <= 0:
            raise ValueError("period_ns must be greater than zero")
        self._history = DriftHistory(self.window)

    @property
    def history(self) -> DriftHistory:
        return self._history

    @property
    def cycles(self) -> int:
        return self._cycles

    # Run loop ---------------------------------------------------------------
    def run_forever(self, max_cycles: int | None = None) -> None:
        """Drive the loop until the action raises or ``max_cycles`` have run."""

        _log.info(
            "scheduler_started",
            period_ns=self.period_ns,
            window=self._history.capacity,
            max_cycles=max_cycles,
        )
        while max_cycles is None or self._cycles < max_cycles:
            self.run_once()
        _log.info("scheduler_finished", cycles=self._cycles)

    def run_once(self) -> int:
        """Execute a single cycle and return the sleep applied, in nanoseconds."""

        now = self.monotonic_fn()
        if self._boundary_ns is None:
            # No previous boundary to measure against.
            self._boundary_ns = now
            elapsed = self.period_ns
        else:
            elapsed = now - self._boundary_ns
            self._boundary_ns += elapsed

        drift = elapsed - self.period_ns
        self._history.push(drift)
        average = self._history.average()

        self.action()

        sleep_ns = self.compute_sleep(average)
        self.sleep_fn(sleep_ns / NANOSECONDS_PER_SECOND)
        self._cycles += 1
        return sleep_ns

    def compute_sleep(self, average_drift_ns: int) -> int:
        sleep_ns = self.period_ns - average_drift_ns
        if sleep_ns >= 0:
            return sleep_ns

        if self.clamp_negative_sleep:
            _log.warning(
                "negative_sleep_clamped",
                sleep_ns=sleep_ns,
                period_ns=self.period_ns,
                average_drift_ns=average_drift_ns,
            )
            return 0

        _log.error(
            "negative_sleep",
            sleep_ns=sleep_ns,
            period_ns=self.period_ns,
            average_drift_ns=average_drift_ns,
        )
        raise NegativeSleepError(sleep_ns, self.period_ns, average_drift_ns)
