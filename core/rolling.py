"""Bounded rolling mean over the most recent samples."""

from __future__ import annotations

import math
from collections import deque
from typing import Deque, Iterable

from core.errors import InvalidCapacity


class RollingMean:
    """Fixed-capacity FIFO of samples with an O(1) running mean.

    The running sum is rebuilt from the stored samples every ``capacity``
    admits so floating-point error cannot accumulate without bound.
    Not thread-safe: one writer per instance.
    """

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacity(f"capacity must be a positive integer, got {capacity!r}")
        self.capacity = capacity
        self._samples: Deque[float] = deque()
        self._sum = 0.0
        self._since_resum = 0
        self.total_admitted = 0

    def admit(self, sample: float) -> float:
        x = float(sample)
        if len(self._samples) == self.capacity:
            self._sum -= self._samples.popleft()
        self._samples.append(x)
        self._sum += x
        self.total_admitted += 1
        self._since_resum += 1
        if self._since_resum >= self.capacity:
            self._sum = math.fsum(self._samples)
            self._since_resum = 0
        return self.mean()

    def extend(self, samples: Iterable[float]) -> float:
        for s in samples:
            self.admit(s)
        return self.mean()

    def mean(self) -> float:
        n = len(self._samples)
        return self._sum / n if n else 0.0

    def reset(self) -> None:
        self._samples.clear()
        self._sum = 0.0
        self._since_resum = 0
        self.total_admitted = 0

    @property
    def samples(self) -> tuple[float, ...]:
        return tuple(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __repr__(self) -> str:
        return f"RollingMean(capacity={self.capacity}, n={len(self)}, mean={self.mean():.6g})"
