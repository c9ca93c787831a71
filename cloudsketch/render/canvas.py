from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
import math

from PIL import Image, ImageDraw

from cloudsketch.shared.color import to_rgba

# Ellipses drawn in a rotated frame are rasterised as polygons with this many sides.
ELLIPSE_SEGMENTS = 28


@dataclass(frozen=True)
class Affine:
    """
    2D affine transform mapping (x, y) to (a*x + c*y + e, b*x + d*y + f).

    Composition follows the canvas convention: ``t.translate(...)`` and
    ``t.rotate(...)`` apply the new step in the local frame of ``t``.
    """

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "Affine":
        return cls()

    def translate(self, dx: float, dy: float) -> "Affine":
        return Affine(
            self.a,
            self.b,
            self.c,
            self.d,
            self.a * dx + self.c * dy + self.e,
            self.b * dx + self.d * dy + self.f,
        )

    def rotate(self, angle: float) -> "Affine":
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Affine(
            self.a * cos_a + self.c * sin_a,
            self.b * cos_a + self.d * sin_a,
            -self.a * sin_a + self.c * cos_a,
            -self.b * sin_a + self.d * cos_a,
            self.e,
            self.f,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    @property
    def is_axis_aligned(self) -> bool:
        return self.b == 0.0 and self.c == 0.0


class Canvas:
    """
    Drawing surface with a current transform.

    Callers pass local coordinates; subclasses map them through ``transform``
    when they rasterise or record a primitive.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.transform = Affine.identity()

    @contextmanager
    def scoped(self):
        saved = self.transform
        try:
            yield self
        finally:
            self.transform = saved

    def translate(self, dx: float, dy: float) -> None:
        self.transform = self.transform.translate(dx, dy)

    def rotate(self, angle: float) -> None:
        self.transform = self.transform.rotate(angle)

    def line(self, x0, y0, x1, y1, color, width=1) -> None:
        raise NotImplementedError

    def ellipse(self, cx, cy, w, h, fill, outline=None, width=1) -> None:
        raise NotImplementedError

    def polyline(self, points, colors, width=1) -> None:
        raise NotImplementedError


class RasterCanvas(Canvas):
    def __init__(self, width: int, height: int, background=(255, 255, 255)):
        super().__init__(width, height)
        self.image = Image.new("RGB", (self.width, self.height), to_rgba(background)[:3])
        # RGBA draw mode blends translucent fills onto the RGB image.
        self._draw = ImageDraw.Draw(self.image, "RGBA")

    def clear(self, color=(255, 255, 255)) -> None:
        self._draw.rectangle((0, 0, self.width, self.height), fill=to_rgba(color, 255))

    def line(self, x0, y0, x1, y1, color, width=1) -> None:
        rgba = to_rgba(color)
        if rgba[3] == 0:
            return
        p0 = self.transform.apply(x0, y0)
        p1 = self.transform.apply(x1, y1)
        self._draw.line([p0, p1], fill=rgba, width=max(1, int(round(width))))

    def ellipse(self, cx, cy, w, h, fill, outline=None, width=1) -> None:
        fill_rgba = to_rgba(fill) if fill is not None else None
        if fill_rgba is not None and fill_rgba[3] == 0:
            fill_rgba = None
        outline_rgba = to_rgba(outline) if outline is not None else None
        if outline_rgba is not None and outline_rgba[3] == 0:
            outline_rgba = None
        if fill_rgba is None and outline_rgba is None:
            return
        stroke = max(1, int(round(width)))

        t = self.transform
        if t.is_axis_aligned:
            px, py = t.apply(cx, cy)
            hw = abs(t.a) * w / 2.0
            hh = abs(t.d) * h / 2.0
            self._draw.ellipse(
                (px - hw, py - hh, px + hw, py + hh),
                fill=fill_rgba,
                outline=outline_rgba,
                width=stroke,
            )
            return

        pts = []
        for i in range(ELLIPSE_SEGMENTS):
            ang = 2.0 * math.pi * i / ELLIPSE_SEGMENTS
            pts.append(t.apply(cx + math.cos(ang) * w / 2.0, cy + math.sin(ang) * h / 2.0))
        self._draw.polygon(pts, fill=fill_rgba, outline=outline_rgba, width=stroke)

    def polyline(self, points, colors, width=1) -> None:
        """Stroke consecutive vertices; each segment uses the mean of its two vertex colours."""
        if len(points) != len(colors):
            raise ValueError("polyline needs one colour per vertex")
        stroke = max(1, int(round(width)))
        mapped = [self.transform.apply(x, y) for x, y in points]
        rgba = [to_rgba(c) for c in colors]
        for i in range(len(mapped) - 1):
            seg = tuple((rgba[i][k] + rgba[i + 1][k]) // 2 for k in range(4))
            if seg[3] == 0:
                continue
            self._draw.line([mapped[i], mapped[i + 1]], fill=seg, width=stroke)
