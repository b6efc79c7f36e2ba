from dataclasses import dataclass


@dataclass(frozen=True)
class InputState:
    jump_pressed: bool = False  # true only on the frame the key/button is pressed
    menu_pressed: bool = False  # same edge semantics; only read on the game-over screen
