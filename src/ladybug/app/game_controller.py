from __future__ import annotations

import logging

from ladybug.domain.exceptions import RunEnded
from ladybug.domain.game_flow import FlowState, GameOver, Menu, Playing
from ladybug.domain.geometry import Viewport
from ladybug.domain.input_state import InputState
from ladybug.domain.rng import RandomSource
from ladybug.domain.session import Session, new_session
from ladybug.domain.world import World

logger = logging.getLogger(__name__)


class GameController:
    """
    Menu -> Playing -> GameOver state machine.
    Owns the high score, which lives for the whole process.
    """

    def __init__(self, rng: RandomSource) -> None:
        self._rng = rng
        self.world = World(rng)
        self.state: FlowState = Menu()
        self.hi_score = 0.0

    def update(self, dt: float, viewport: Viewport, inp: InputState) -> None:
        state = self.state

        if isinstance(state, Menu):
            if inp.jump_pressed:
                self._start_run(viewport)

        elif isinstance(state, Playing):
            try:
                self.state = Playing(self.world.step(state.session, inp, dt, viewport))
            except RunEnded as e:
                self._end_run(e.session)

        elif isinstance(state, GameOver):
            if inp.menu_pressed:
                logger.info("back to menu")
                self.state = Menu()
            elif inp.jump_pressed:
                self._start_run(viewport)

    def _start_run(self, viewport: Viewport) -> None:
        self.state = Playing(new_session(self._rng, viewport))
        logger.info("run started (best %d)", int(self.hi_score))

    def _end_run(self, session: Session) -> None:
        logger.info("run ended with score %d", int(session.score))
        if session.score > self.hi_score:
            self.hi_score = session.score
            logger.info("new high score: %d", int(self.hi_score))
        self.state = GameOver(session)
