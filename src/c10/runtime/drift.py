"""Fixed-capacity ring of per-cycle drift samples."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

DEFAULT_WINDOW = 4


class DriftHistory:
    """Most recent ``capacity`` drift samples, in nanoseconds.

    The ring starts full of zeros and every push evicts the oldest sample, so
    :meth:`average` always divides by ``capacity``. Right after startup this
    under-reports a real bias until the zeros have been pushed out.
    """

    def __init__(self, capacity: int = DEFAULT_WINDOW) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be greater than zero")
        self._samples: deque[int] = deque([0] * capacity, maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._samples.maxlen or 0

    def push(self, drift_ns: int) -> None:
        self._samples.append(drift_ns)

    def average(self) -> int:
        """Arithmetic mean of every slot, truncated toward zero."""
        total = sum(self._samples)
        mean = abs(total) // self.capacity
        return mean if total >= 0 else -mean

    def __iter__(self) -> Iterator[int]:
        return iter(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        return f"DriftHistory({list(self._samples)!r})"
