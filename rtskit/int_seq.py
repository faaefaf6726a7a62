"""A bounded sequence of recent non-negative integers with running statistics."""

import math
from collections import deque

from rtskit.errors import check


class IntSeq:
    """Keeps the last ``capacity`` values pushed."""

    def __init__(self, capacity):
        check(capacity > 0, "capacity must be positive")
        self.capacity = capacity
        self._values = deque(maxlen=capacity)

    def __len__(self):
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def push(self, value):
        """Add a value, dropping the oldest once full."""
        check(value >= 0, "values must not be negative")
        self._values.append(value)

    def std_dev(self):
        """Population standard deviation of the stored values; 0 when empty."""
        count = len(self._values)
        if count == 0:
            return 0.0
        mean = sum(self._values) / count
        variance = sum((v - mean) ** 2 for v in self._values) / count
        return math.sqrt(variance)