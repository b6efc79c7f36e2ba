import tkinter as tk
from collections.abc import Iterable

from ladybug.domain.geometry import Viewport
from ladybug.ui.scene import DrawCommand, FillCircle, FillRect, Text


class TkCanvasView:
    def __init__(self, root: tk.Misc, *, width: int, height: int) -> None:
        self._w = width
        self._h = height

        self.canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0)
        self.canvas.pack(fill="both", expand=True)

    def viewport(self) -> Viewport:
        # Before the first layout pass winfo_* reports 1x1; fall back to the requested size.
        w = self.canvas.winfo_width()
        h = self.canvas.winfo_height()
        if w <= 1 or h <= 1:
            return Viewport(width=float(self._w), height=float(self._h))
        return Viewport(width=float(w), height=float(h))

    def render(self, commands: Iterable[DrawCommand]) -> None:
        # Redraw everything (simple + fine for a handful of shapes)
        self.canvas.delete("all")
        for c in commands:
            if isinstance(c, FillRect):
                self.canvas.create_rectangle(c.x, c.y, c.x + c.w, c.y + c.h, outline="", fill=c.color)
            elif isinstance(c, FillCircle):
                self.canvas.create_oval(c.cx - c.r, c.cy - c.r, c.cx + c.r, c.cy + c.r, outline="", fill=c.color)
            elif isinstance(c, Text):
                # Negative font size = pixels
                self.canvas.create_text(
                    c.x, c.y, anchor="sw", text=c.text, fill=c.color, font=("TkDefaultFont", -int(c.size))
                )
