"""
history.py — sliding window of recently chosen directions.
"""

from collections import deque
from typing import List

from .grid import DIR_ORDER, Direction


class DirectionHistory:
    """
    Keeps the last `window` directions and a per-direction count table.
    The counts always match the contents of the window: a push that overflows
    the window evicts the oldest entry and decrements its count in the same call.
    """

    def __init__(self, window: int):
        if window < 1:
            raise ValueError("History window must be >= 1")
        self.window = window
        self._recent = deque()
        self._counts = [0] * len(DIR_ORDER)

    def record(self, direction: Direction):
        self._recent.append(direction)
        self._counts[direction.index] += 1
        if len(self._recent) > self.window:
            oldest = self._recent.popleft()
            self._counts[oldest.index] -= 1

    def count(self, direction: Direction) -> int:
        return self._counts[direction.index]

    def counts(self) -> List[int]:
        return list(self._counts)

    def recent(self) -> List[Direction]:
        return list(self._recent)

    def __len__(self):
        return len(self._recent)
