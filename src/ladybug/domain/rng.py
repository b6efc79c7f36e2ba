from __future__ import annotations

import math
from typing import Protocol


class RandomSource(Protocol):
    def random(self) -> float:  # returns in [0.0, 1.0)
        ...


def uniform(rng: RandomSource, lo: float, hi: float) -> float:
    """Sample from [lo, hi). Never returns hi, even when rounding would."""
    if hi < lo:
        raise ValueError(f"empty range [{lo}, {hi})")
    if hi == lo:
        return lo
    v = lo + (hi - lo) * rng.random()
    if v >= hi:
        return math.nextafter(hi, lo)
    return v
