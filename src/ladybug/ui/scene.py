"""
Turns the current game state into an ordered list of draw commands.

Pure: no tkinter here, so the output can be asserted on directly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ladybug.domain.constants import GROUND_HEIGHT, PLAYER_HEIGHT, PLAYER_WIDTH
from ladybug.domain.game_flow import FlowState, GameOver, Menu, Playing
from ladybug.domain.geometry import Viewport
from ladybug.domain.obstacle import Obstacle
from ladybug.domain.player import Player

BG = "#f0f5fa"
FAR_BAR = "#c7c7c7"
NEAR_BAR = "#828282"
GROUND = "#d2e6d2"
PLAYER = "#e62937"
OBSTACLE = "#00752c"
INK = "#000000"
DIM = "#505050"
ALERT = "#be2137"


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    w: float
    h: float
    color: str


@dataclass(frozen=True)
class FillCircle:
    cx: float
    cy: float
    r: float
    color: str


@dataclass(frozen=True)
class Text:
    x: float
    y: float  # baseline
    text: str
    size: float  # px
    color: str


DrawCommand = Union[FillRect, FillCircle, Text]


def build_scene(state: FlowState, hi_score: float, viewport: Viewport) -> list[DrawCommand]:
    sw = viewport.width
    gy = viewport.ground_y

    cmds: list[DrawCommand] = [
        FillRect(0.0, 0.0, sw, viewport.height, BG),
        # Parallax suggestion
        FillRect(0.0, gy - 120.0, sw, 20.0, FAR_BAR),
        FillRect(0.0, gy - 60.0, sw, 15.0, NEAR_BAR),
        FillRect(0.0, gy, sw, GROUND_HEIGHT, GROUND),
    ]

    if isinstance(state, Menu):
        cmds += [
            Text(32.0, 80.0, "Ladybug Runner", 48.0, INK),
            Text(32.0, 130.0, "Tap or SPACE to play", 28.0, DIM),
            Text(32.0, 170.0, f"Best: {int(hi_score)}", 24.0, DIM),
        ]
    elif isinstance(state, Playing):
        s = state.session
        for o in s.obstacles:
            cmds += _obstacle(o)
        cmds += _player(s.player)  # last, on top
        cmds += [
            Text(24.0, 32.0, f"Score: {int(s.score)}", 32.0, INK),
            Text(24.0, 64.0, f"Hi: {int(hi_score)}", 24.0, DIM),
        ]
    elif isinstance(state, GameOver):
        cmds += [
            Text(32.0, 80.0, "Game Over!", 48.0, ALERT),
            Text(32.0, 130.0, f"Score: {int(state.session.score)}", 32.0, INK),
            Text(32.0, 170.0, f"Best: {int(hi_score)}", 28.0, DIM),
            Text(32.0, 210.0, "Tap/SPACE to restart | M for Menu", 24.0, DIM),
        ]

    return cmds


def _player(p: Player) -> list[DrawCommand]:
    x, y = p.pos.x, p.pos.y
    return [
        FillRect(x, y, PLAYER_WIDTH, PLAYER_HEIGHT, PLAYER),
        # antennae
        FillCircle(x + 12.0, y + 12.0, 6.0, INK),
        FillCircle(x + 48.0, y + 12.0, 6.0, INK),
    ]


def _obstacle(o: Obstacle) -> list[DrawCommand]:
    x, y = o.pos.x, o.pos.y
    out: list[DrawCommand] = [FillRect(x, y, o.size.x, o.size.y, OBSTACLE)]
    out += [FillCircle(x + 10.0 + 12.0 * i, y + 10.0, 3.0, INK) for i in range(3)]
    return out
