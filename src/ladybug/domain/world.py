from __future__ import annotations

import logging

from ladybug.domain.constants import SCORE_RATE, SPAWN_OFFSET
from ladybug.domain.difficulty import advance_speed
from ladybug.domain.exceptions import RunEnded
from ladybug.domain.geometry import Viewport
from ladybug.domain.input_state import InputState
from ladybug.domain.obstacle import Obstacle
from ladybug.domain.player import Player
from ladybug.domain.rng import RandomSource
from ladybug.domain.session import Session

logger = logging.getLogger(__name__)


class World:
    def __init__(self, rng: RandomSource) -> None:
        self._rng = rng

    def step(self, session: Session, inp: InputState, dt: float, viewport: Viewport) -> Session:
        ground_y = viewport.ground_y

        # ----- Player -----
        player = session.player.update(dt, ground_y, inp.jump_pressed)

        # ----- Difficulty -----
        speed = advance_speed(session.scroll_speed, dt)

        # ----- Spawning (uses the speed of this tick) -----
        spawner = session.spawner.advance(dt)
        obstacles = list(session.obstacles)
        if spawner.due:
            o = Obstacle.spawn(self._rng, viewport.width + SPAWN_OFFSET, ground_y, speed)
            obstacles.append(o)
            spawner = spawner.rearm(self._rng)
            logger.debug("spawned obstacle x=%.1f w=%.1f h=%.1f speed=%.1f", o.pos.x, o.size.x, o.size.y, speed)

        # ----- Scroll -----
        obstacles = [o.update(dt) for o in obstacles]

        # ----- Collision (before eviction) -----
        crashed = self._player_hits_any(player, obstacles)

        # ----- Evict + score -----
        kept = tuple(o for o in obstacles if not o.is_offscreen())
        score = session.score + speed * dt * SCORE_RATE

        nxt = Session(player=player, obstacles=kept, spawner=spawner, scroll_speed=speed, score=score)
        if crashed:
            raise RunEnded(nxt)
        return nxt

    def _player_hits_any(self, player: Player, obstacles: list[Obstacle]) -> bool:
        hitbox = player.collision_rect()
        return any(o.collision_rect().overlaps(hitbox) for o in obstacles)
