from __future__ import annotations

from dataclasses import dataclass

from ladybug.domain.constants import SPAWN_FLOOR, SPAWN_MAX, SPAWN_MIN
from ladybug.domain.rng import RandomSource, uniform


@dataclass(frozen=True)
class Spawner:
    timer: float          # seconds since the last spawn (or run start)
    next_interval: float  # seconds to wait before the next spawn

    @classmethod
    def fresh(cls, rng: RandomSource) -> Spawner:
        return cls(timer=0.0, next_interval=uniform(rng, SPAWN_MIN, SPAWN_MAX))

    @property
    def due(self) -> bool:
        return self.timer >= self.next_interval

    def advance(self, dt: float) -> Spawner:
        return Spawner(timer=self.timer + dt, next_interval=self.next_interval)

    def rearm(self, rng: RandomSource) -> Spawner:
        # Re-rolls clamp the lower bound; the first interval of a run does not.
        # With the current constants the clamp never bites.
        return Spawner(timer=0.0, next_interval=uniform(rng, max(SPAWN_MIN, SPAWN_FLOOR), SPAWN_MAX))
