from __future__ import annotations


def clamp_u8(v) -> int:
    try:
        iv = int(round(float(v)))
    except (TypeError, ValueError):
        return 0
    return max(0, min(255, iv))


def hex_to_rgb(value):
    value = (value or "").strip()
    if value.startswith("#"):
        value = value[1:]
    if len(value) != 6:
        return None
    try:
        return tuple(int(value[i : i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None


def to_rgba(color, alpha=None) -> tuple:
    """
    Normalize a colour to an (r, g, b, a) tuple of ints.

    Accepts '#rrggbb' strings, a single gray level, or 3/4 element sequences.
    An explicit alpha wins over one carried by the colour.
    """
    if isinstance(color, str):
        rgb = hex_to_rgb(color)
        if rgb is None:
            raise ValueError(f"invalid colour: {color!r}")
        r, g, b = rgb
        a = 255
    elif isinstance(color, (int, float)):
        r = g = b = color
        a = 255
    elif isinstance(color, (list, tuple)) and len(color) in (3, 4):
        r, g, b = color[0], color[1], color[2]
        a = color[3] if len(color) == 4 else 255
    else:
        raise ValueError(f"invalid colour: {color!r}")
    if alpha is not None:
        a = alpha
    return (clamp_u8(r), clamp_u8(g), clamp_u8(b), clamp_u8(a))


def lerp_color(c0, c1, t: float) -> tuple:
    t = max(0.0, min(1.0, float(t)))
    a = to_rgba(c0)
    b = to_rgba(c1)
    return tuple(clamp_u8(a[i] + (b[i] - a[i]) * t) for i in range(4))
