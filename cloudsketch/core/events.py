from __future__ import annotations

from typing import Optional


class Event:
    pass


class GenerateCumulus(Event):
    pass


class GenerateCirrus(Event):
    pass


class ToggleOrigin(Event):
    """Flip the debug origin cross and redraw the current cloud kind."""

    pass


class Resize(Event):
    """Host viewport changed width; the canvas is resized and the last cloud redrawn."""

    def __init__(self, viewport_width: int):
        self.viewport_width = int(viewport_width)


class SavePng(Event):
    def __init__(self, path: Optional[str] = None):
        self.path = path or "cloud.png"
