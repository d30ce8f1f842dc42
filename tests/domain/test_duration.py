from __future__ import annotations

from datetime import timedelta

import pytest

from c10.domain.duration import (
    CENTIVAL,
    DAY,
    DECADAY,
    INTERVAL,
    MAX_TICKS,
    TICK,
    Duration,
    decompose,
    make_duration,
)
from c10.infra.exceptions import C10Error, TickOverflowError, TickRangeError


def test_unit_constants():
    assert TICK.ticks == 1
    assert CENTIVAL.ticks == 100
    assert INTERVAL.ticks == 10_000
    assert DAY.ticks == 1_000_000
    assert DECADAY.ticks == 10_000_000
    assert TICK < CENTIVAL < INTERVAL < DAY < DECADAY


def test_one_interval_displays_as_interval():
    one = make_duration(1, 0, 0)
    assert decompose(one) == (1, 0, 0)
    assert str(one) == "01:00:00"


def test_components_are_normalised():
    assert decompose(make_duration(0, 0, 150)) == (0, 1, 50)
    assert decompose(make_duration(0, 150, 0)) == (1, 50, 0)


@pytest.mark.parametrize(
    "components",
    [(0, 0, 0), (3, 250, 12345), (99, 99, 99), (1_000, 0, 1), (12, 3_456, 789_012)],
)
def test_decompose_repacks_to_same_total(components):
    duration = make_duration(*components)
    ints, cents, ticks = decompose(duration)
    assert 0 <= cents < 100
    assert 0 <= ticks < 100
    assert make_duration(ints, cents, ticks) == duration


def test_intervals_are_not_reduced_to_a_day():
    two_days = make_duration(200, 0, 0)
    assert decompose(two_days) == (200, 0, 0)
    assert two_days.days == 2
    # The display view is the position within a day.
    assert two_days.time_components() == (0, 0, 0)
    assert str(DAY) == "00:00:00"


def test_zero_duration_display():
    assert str(Duration()) == "00:00:00"


@pytest.mark.parametrize(
    "components",
    [
        (2**64 // 10_000 + 1, 0, 0),  # intervals
        (1, 0, MAX_TICKS),  # intervals + ticks
        (0, 2**64 // 100 + 1, 0),  # centivals
        (0, 1, MAX_TICKS - 99),  # centivals + ticks
    ],
)
def test_overflow_is_never_wrapped(components):
    with pytest.raises(TickOverflowError):
        make_duration(*components)


def test_largest_representable_duration():
    assert make_duration(0, 1, MAX_TICKS - 100).ticks == MAX_TICKS


def test_negative_components_rejected():
    with pytest.raises(TickOverflowError):
        make_duration(-1, 0, 0)
    with pytest.raises(TickOverflowError):
        Duration(-5)


def test_overflow_error_is_also_builtin_overflow():
    with pytest.raises(OverflowError):
        make_duration(0, 0, MAX_TICKS + 1)
    assert issubclass(TickOverflowError, C10Error)


def test_from_timedelta():
    assert Duration.from_timedelta(timedelta(days=1)) == DAY
    assert Duration.from_timedelta(timedelta(microseconds=86_400)) == TICK
    assert Duration.from_timedelta(timedelta(microseconds=86_399)) == Duration(0)
    assert Duration.from_timedelta(timedelta(hours=12)) == make_duration(50, 0, 0)


def test_from_timedelta_rejects_negative():
    with pytest.raises(TickRangeError):
        Duration.from_timedelta(timedelta(seconds=-1))


def test_from_nanoseconds_range():
    assert Duration.from_nanoseconds(86_400_000) == TICK
    with pytest.raises(TickRangeError):
        Duration.from_nanoseconds(-1)
    with pytest.raises(TickRangeError):
        Duration.from_nanoseconds((MAX_TICKS + 1) * 86_400_000)


def test_to_timedelta():
    assert DAY.to_timedelta() == timedelta(days=1)
    assert TICK.to_timedelta() == timedelta(microseconds=86_400)


def test_duration_is_immutable():
    with pytest.raises(AttributeError):
        TICK.ticks = 2  # type: ignore[misc]
