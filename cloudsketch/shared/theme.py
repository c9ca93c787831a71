from __future__ import annotations

import json
import os

from cloudsketch.shared.color import hex_to_rgb

DEFAULT_THEME = {
    "sky_top": (160, 205, 255),
    "sky_bottom": (235, 250, 255),
    # Viewport width is clamped to this before the 3:2 canvas is derived.
    "max_width": 980,
    "show_origin": False,
}

COLOR_KEYS = ("sky_top", "sky_bottom")


def _normalize(theme: dict) -> dict:
    for key in COLOR_KEYS:
        val = theme.get(key)
        if isinstance(val, str):
            rgb = hex_to_rgb(val)
            if rgb:
                theme[key] = rgb
            else:
                theme.pop(key)
        elif isinstance(val, list) and len(val) in (3, 4):
            # JSON color arrays become Python lists; PIL expects tuples.
            theme[key] = tuple(val)
    if "max_width" in theme:
        theme["max_width"] = int(theme["max_width"])
    if "show_origin" in theme:
        theme["show_origin"] = bool(theme["show_origin"])
    return theme


def load_theme(path) -> dict:
    if not path or not os.path.exists(path):
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return _normalize(dict(data))


def resolve_theme(theme: dict | None) -> dict:
    t = dict(DEFAULT_THEME)
    t.update(theme or {})
    return t
