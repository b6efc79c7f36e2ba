from __future__ import annotations

from dataclasses import dataclass

from ladybug.domain.constants import (
    GRAVITY,
    JUMP_VELOCITY,
    PLAYER_HEIGHT,
    PLAYER_HITBOX_INSET,
    PLAYER_WIDTH,
    PLAYER_X_RATIO,
)
from ladybug.domain.geometry import Rect, Vec2


@dataclass(frozen=True)
class Player:
    pos: Vec2  # top-left, screen space
    vel: Vec2  # only y is used; the world scrolls past the player
    on_ground: bool

    @classmethod
    def spawn(cls, screen_w: float, ground_y: float) -> Player:
        return cls(
            pos=Vec2(screen_w * PLAYER_X_RATIO, ground_y - PLAYER_HEIGHT),
            vel=Vec2(0.0, 0.0),
            on_ground=True,
        )

    def update(self, dt: float, ground_y: float, jump_pressed: bool) -> Player:
        vy = self.vel.y
        on_ground = self.on_ground
        if jump_pressed and on_ground:
            vy = JUMP_VELOCITY
            on_ground = False

        # Integrate
        vy += GRAVITY * dt
        y = self.pos.y + vy * dt

        # Ground clamp
        if y + PLAYER_HEIGHT >= ground_y:
            y = ground_y - PLAYER_HEIGHT
            vy = 0.0
            on_ground = True

        return Player(pos=Vec2(self.pos.x, y), vel=Vec2(self.vel.x, vy), on_ground=on_ground)

    def bounds(self) -> Rect:
        return Rect(x=self.pos.x, y=self.pos.y, w=PLAYER_WIDTH, h=PLAYER_HEIGHT)

    def collision_rect(self) -> Rect:
        return self.bounds().inset(PLAYER_HITBOX_INSET)
