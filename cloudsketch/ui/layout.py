from __future__ import annotations

MAX_CANVAS_WIDTH = 980


def canvas_size_for_viewport(viewport_width, max_width=MAX_CANVAS_WIDTH):
    """3:2 canvas that fits the viewport width, clamped so it doesn't get enormous."""
    viewport_width = int(viewport_width)
    if viewport_width <= 0:
        raise ValueError("viewport width must be positive")
    cw = min(viewport_width, int(max_width))
    ch = round(cw * 2 / 3)
    return cw, max(1, ch)
