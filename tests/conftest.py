from dataclasses import dataclass

import pytest

from cloudsketch.core.state import RenderSession
from cloudsketch.render.canvas import Affine, Canvas
from cloudsketch.shared.color import to_rgba


@dataclass
class Call:
    kind: str
    local: tuple
    transform: Affine
    size: tuple = ()
    colors: tuple = ()
    width: float = 1

    def mapped(self):
        return [self.transform.apply(x, y) for x, y in self.local]


class RecordingCanvas(Canvas):
    """Canvas that records primitives instead of rasterising them."""

    def __init__(self, width=960, height=640):
        super().__init__(width, height)
        self.calls = []

    def line(self, x0, y0, x1, y1, color, width=1):
        self.calls.append(Call("line", ((x0, y0), (x1, y1)), self.transform, colors=(to_rgba(color),), width=width))

    def ellipse(self, cx, cy, w, h, fill, outline=None, width=1):
        self.calls.append(Call("ellipse", ((cx, cy),), self.transform, size=(w, h), colors=(to_rgba(fill),)))

    def polyline(self, points, colors, width=1):
        self.calls.append(
            Call("polyline", tuple(points), self.transform, colors=tuple(to_rgba(c) for c in colors), width=width)
        )

    def of_kind(self, kind):
        return [c for c in self.calls if c.kind == kind]


@pytest.fixture
def recording_canvas():
    return RecordingCanvas(960, 640)


@pytest.fixture
def session():
    return RenderSession.starting_at(1)
