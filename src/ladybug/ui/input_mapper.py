from __future__ import annotations

import tkinter as tk

from ladybug.domain.input_state import InputState

# X11 auto-repeat arrives as KeyRelease+KeyPress pairs; a release only
# counts if no press follows within this window.
_RELEASE_GRACE_MS = 30


class TkInputMapper:
    def __init__(self, root: tk.Tk) -> None:
        self._root = root
        self._jump_down = False
        self._jump_pressed_edge = False
        self._menu_pressed_edge = False
        self._release_id: str | None = None

        root.bind("<KeyPress-space>", self._on_space_down)
        root.bind("<KeyRelease-space>", self._on_space_up)
        # Touch screens deliver taps as Button-1 too.
        root.bind("<ButtonPress-1>", self._on_pointer_down)
        root.bind("<KeyPress-m>", self._on_menu_down)
        root.bind("<KeyPress-M>", self._on_menu_down)

        # Helps ensure root gets key events.
        root.focus_set()

    def _on_space_down(self, _evt: tk.Event) -> None:
        if self._release_id is not None:
            # Auto-repeat: the key never really went up.
            self._root.after_cancel(self._release_id)
            self._release_id = None
        elif not self._jump_down:
            self._jump_pressed_edge = True
        self._jump_down = True

    def _on_space_up(self, _evt: tk.Event) -> None:
        if self._release_id is None:
            self._release_id = self._root.after(_RELEASE_GRACE_MS, self._commit_release)

    def _commit_release(self) -> None:
        self._release_id = None
        self._jump_down = False

    def _on_pointer_down(self, _evt: tk.Event) -> None:
        self._jump_pressed_edge = True

    def _on_menu_down(self, _evt: tk.Event) -> None:
        self._menu_pressed_edge = True

    def sample(self) -> InputState:
        # “Pressed this frame” semantics.
        state = InputState(jump_pressed=self._jump_pressed_edge, menu_pressed=self._menu_pressed_edge)
        self._jump_pressed_edge = False
        self._menu_pressed_edge = False
        return state
