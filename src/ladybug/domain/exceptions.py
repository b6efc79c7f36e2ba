from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ladybug.domain.session import Session


class RunEnded(Exception):
    """Raised by the world step when the player hits an obstacle.

    Carries the final session (already scored for the fatal tick) so the
    game-over screen can show it.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(f"run ended with score {session.score:.1f}")
        self.session = session
