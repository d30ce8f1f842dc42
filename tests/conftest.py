"""
Global test configuration for the C10 clock.

This module provides global pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

# Ensure the project src directory is importable without relying on external environment.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


class FakeMonotonic:
    """Monotonic nanosecond clock that only moves when told to."""

    def __init__(self, start: int = 0) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ns: int) -> None:
        assert ns >= 0, "monotonic time cannot go backwards"
        self.now += ns


@pytest.fixture
def fake_monotonic() -> FakeMonotonic:
    return FakeMonotonic(start=1_000_000_000)


@pytest.fixture
def sleeps() -> list[float]:
    return []
