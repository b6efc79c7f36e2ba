from __future__ import annotations

import math
from dataclasses import dataclass

from ladybug.domain.constants import GROUND_HEIGHT


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    def __post_init__(self) -> None:
        if not all(math.isfinite(v) for v in (self.x, self.y, self.w, self.h)):
            raise ValueError("rect coordinates must be finite")
        if self.w < 0 or self.h < 0:
            raise ValueError("rect w/h must be >= 0")

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    def inset(self, margin: float) -> Rect:
        # Shrinks on every side; never below zero size.
        w = max(0.0, self.w - 2.0 * margin)
        h = max(0.0, self.h - 2.0 * margin)
        return Rect(x=self.x + margin, y=self.y + margin, w=w, h=h)

    def overlaps(self, other: Rect) -> bool:
        # Open intervals: touching edges do not count.
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float

    @property
    def ground_y(self) -> float:
        return self.height - GROUND_HEIGHT
