from __future__ import annotations

import random
import tkinter as tk

from ladybug.app.config import AppConfig
from ladybug.app.game_controller import GameController
from ladybug.app.game_loop import GameLoop
from ladybug.ui.input_mapper import TkInputMapper
from ladybug.ui.scene import build_scene
from ladybug.ui.tk_canvas_view import TkCanvasView


class GameApp:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()

        self.root = tk.Tk()
        self.root.title(self.config.title)

        self.input = TkInputMapper(self.root)
        self.view = TkCanvasView(self.root, width=self.config.width, height=self.config.height)

        self.rng = random.Random(self.config.seed)
        self.controller = GameController(self.rng)

        # Loop
        self.loop = GameLoop(
            root=self.root,
            render_fn=self._render,
            update_fn=self._update,
            fps=self.config.fps,
        )
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def run(self) -> None:
        self.loop.start()
        self.root.mainloop()

    # ---------- Game loop ----------

    def _update(self, dt: float) -> None:
        # One simulation step per frame; viewport is re-read so resizing is tolerated.
        self.controller.update(dt, self.view.viewport(), self.input.sample())

    def _render(self) -> None:
        c = self.controller
        self.view.render(build_scene(c.state, c.hi_score, self.view.viewport()))

    def _on_close(self) -> None:
        self.loop.stop()
        self.root.destroy()
