from __future__ import annotations

from cloudsketch.shared.color import lerp_color
from cloudsketch.shared.theme import DEFAULT_THEME

CROSS_HALF = 12
CROSS_COLOR = (255, 255, 255, 80)


def draw_sky(canvas, theme: dict | None = None) -> None:
    """Vertical gradient over the whole canvas, one line per pixel row."""
    theme = theme or {}
    top = theme.get("sky_top", DEFAULT_THEME["sky_top"])
    bottom = theme.get("sky_bottom", DEFAULT_THEME["sky_bottom"])
    span = max(1, canvas.height - 1)
    for y in range(canvas.height):
        canvas.line(0, y, canvas.width, y, lerp_color(top, bottom, y / span), width=1)


def draw_origin_cross(canvas) -> None:
    canvas.line(-CROSS_HALF, 0, CROSS_HALF, 0, CROSS_COLOR, width=2)
    canvas.line(0, -CROSS_HALF, 0, CROSS_HALF, CROSS_COLOR, width=2)
