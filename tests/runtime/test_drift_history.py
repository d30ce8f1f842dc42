from __future__ import annotations

import pytest

from c10.runtime.drift import DriftHistory


def test_starts_full_of_zeros():
    history = DriftHistory(4)
    assert list(history) == [0, 0, 0, 0]
    assert len(history) == 4
    assert history.average() == 0


def test_push_overwrites_oldest():
    history = DriftHistory(3)
    for sample in (1, 2, 3, 4):
        history.push(sample)
    assert list(history) == [2, 3, 4]
    assert len(history) == 3


def test_average_counts_unfilled_slots():
    history = DriftHistory(4)
    history.push(400)
    assert history.average() == 100


def test_average_truncates_toward_zero():
    history = DriftHistory(4)
    history.push(-5)
    assert history.average() == -1
    history.push(10)
    assert history.average() == 1


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        DriftHistory(0)
    assert DriftHistory(1).capacity == 1
