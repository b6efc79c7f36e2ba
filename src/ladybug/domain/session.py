from __future__ import annotations

from dataclasses import dataclass

from ladybug.domain.constants import BASE_SPEED
from ladybug.domain.geometry import Viewport
from ladybug.domain.obstacle import Obstacle
from ladybug.domain.player import Player
from ladybug.domain.rng import RandomSource
from ladybug.domain.spawner import Spawner


@dataclass(frozen=True)
class Session:
    """One run: everything that is reset when a new run starts."""

    player: Player
    obstacles: tuple[Obstacle, ...]  # oldest first
    spawner: Spawner
    scroll_speed: float
    score: float


def new_session(rng: RandomSource, viewport: Viewport) -> Session:
    return Session(
        player=Player.spawn(viewport.width, viewport.ground_y),
        obstacles=(),
        spawner=Spawner.fresh(rng),
        scroll_speed=BASE_SPEED,
        score=0.0,
    )
