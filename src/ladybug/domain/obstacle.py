from __future__ import annotations

import math
from dataclasses import dataclass

from ladybug.domain.constants import (
    OBSTACLE_HEIGHT_RANGE,
    OBSTACLE_HITBOX_INSET,
    OBSTACLE_WIDTH_RANGE,
    OFFSCREEN_MARGIN,
)
from ladybug.domain.geometry import Rect, Vec2
from ladybug.domain.rng import RandomSource, uniform


@dataclass(frozen=True)
class Obstacle:
    pos: Vec2   # top-left
    size: Vec2  # x = width, y = height
    speed: float  # scroll speed at spawn time; never changes afterwards

    def __post_init__(self) -> None:
        if not (math.isfinite(self.size.x) and math.isfinite(self.size.y)):
            raise ValueError("obstacle size must be finite")
        if self.size.x < 0 or self.size.y < 0:
            raise ValueError("obstacle size must be >= 0")

    @classmethod
    def spawn(cls, rng: RandomSource, x: float, ground_y: float, speed: float) -> Obstacle:
        """Random-sized obstacle standing on the ground line."""
        w = uniform(rng, *OBSTACLE_WIDTH_RANGE)
        h = uniform(rng, *OBSTACLE_HEIGHT_RANGE)
        return cls(pos=Vec2(x, ground_y - h), size=Vec2(w, h), speed=speed)

    def update(self, dt: float) -> Obstacle:
        return Obstacle(pos=Vec2(self.pos.x - self.speed * dt, self.pos.y), size=self.size, speed=self.speed)

    def bounds(self) -> Rect:
        return Rect(x=self.pos.x, y=self.pos.y, w=self.size.x, h=self.size.y)

    def collision_rect(self) -> Rect:
        return self.bounds().inset(OBSTACLE_HITBOX_INSET)

    def is_offscreen(self) -> bool:
        return self.pos.x + self.size.x < -OFFSCREEN_MARGIN
