from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ladybug.domain.session import Session


@dataclass(frozen=True)
class Menu:
    pass


@dataclass(frozen=True)
class Playing:
    session: Session


@dataclass(frozen=True)
class GameOver:
    session: Session  # kept for display and discarded on the next transition


# A run's session only exists while playing or on the game-over screen.
FlowState = Union[Menu, Playing, GameOver]
