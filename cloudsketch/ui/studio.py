from __future__ import annotations

import logging
from typing import Optional

from cloudsketch.core.events import Event, GenerateCirrus, GenerateCumulus, Resize, SavePng, ToggleOrigin
from cloudsketch.core.state import CloudKind, RenderSession
from cloudsketch.render.canvas import RasterCanvas
from cloudsketch.render.export import save_png
from cloudsketch.shared.theme import resolve_theme
from cloudsketch.ui.layout import canvas_size_for_viewport
from cloudsketch.ui.scene import RENDERERS, SceneResult

log = logging.getLogger(__name__)


class CloudStudio:
    """Trigger surface: turns button presses and resizes into render passes."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        session: Optional[RenderSession] = None,
        theme: Optional[dict] = None,
    ):
        self.theme = resolve_theme(theme)
        self.session = session or RenderSession(show_origin=bool(self.theme.get("show_origin")))
        self.canvas = RasterCanvas(width, height)
        self.last_kind = CloudKind.CUMULUS
        self.last_result: Optional[SceneResult] = None

    @classmethod
    def for_viewport(cls, viewport_width: int, **kwargs) -> "CloudStudio":
        theme = resolve_theme(kwargs.get("theme"))
        cw, ch = canvas_size_for_viewport(viewport_width, theme["max_width"])
        return cls(cw, ch, **kwargs)

    @property
    def image(self):
        return self.canvas.image

    def render(self, kind: CloudKind) -> SceneResult:
        self.last_kind = kind
        self.last_result = RENDERERS[kind](self.canvas, self.session, self.theme)
        return self.last_result

    def resize(self, viewport_width: int) -> SceneResult:
        cw, ch = canvas_size_for_viewport(viewport_width, self.theme["max_width"])
        if (cw, ch) != (self.canvas.width, self.canvas.height):
            log.info("canvas resized to %dx%d", cw, ch)
            self.canvas = RasterCanvas(cw, ch)
        return self.render(self.last_kind)

    def handle(self, event: Event):
        if isinstance(event, GenerateCumulus):
            return self.render(CloudKind.CUMULUS)
        if isinstance(event, GenerateCirrus):
            return self.render(CloudKind.CIRRUS)
        if isinstance(event, Resize):
            return self.resize(event.viewport_width)
        if isinstance(event, ToggleOrigin):
            self.session.show_origin = not self.session.show_origin
            return self.render(self.last_kind)
        if isinstance(event, SavePng):
            return save_png(self.canvas.image, event.path)
        raise TypeError(f"unsupported event: {type(event).__name__}")
