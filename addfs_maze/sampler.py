"""
sampler.py — anti-persistence direction choice.

weight(d) = exp(-beta * count(d)) where count(d) is how often d appears in the
history window. beta = 0 gives uniform selection.
"""

import math
import random
from typing import List, Sequence

from .grid import Direction
from .history import DirectionHistory


class AntiPersistenceSampler:
    def __init__(self, anti_persistence: float, history: DirectionHistory, rng: random.Random):
        self.anti_persistence = anti_persistence
        self.history = history
        self.rng = rng

    def weights(self, candidates: Sequence[Direction]) -> List[float]:
        beta = self.anti_persistence
        return [math.exp(-beta * self.history.count(d)) for d in candidates]

    def choose(self, candidates: Sequence[Direction]) -> Direction:
        """Pick one candidate; consumes a single draw unless there is only one."""
        if not candidates:
            raise ValueError("No candidate directions to sample from")
        if len(candidates) == 1:
            return candidates[0]

        weights = self.weights(candidates)
        r = self.rng.random() * sum(weights)
        acc = 0.0
        for d, w in zip(candidates, weights):
            acc += w
            if r <= acc:
                return d
        # float rounding can leave r just above the final sum
        return candidates[-1]
