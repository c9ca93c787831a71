from __future__ import annotations

import logging
import random

log = logging.getLogger(__name__)

FADE_IN_END = 0.14
FADE_OUT_START = 0.86


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def smoothstep(edge0: float, edge1: float, x: float) -> float:
    if edge1 <= edge0:
        raise ValueError("smoothstep needs edge0 < edge1")
    t = clamp((x - edge0) / (edge1 - edge0), 0.0, 1.0)
    return t * t * (3.0 - 2.0 * t)


def edge_fade(t: float) -> float:
    """Tip fade for a filament parameterised by t in [0, 1]."""
    return smoothstep(0.0, FADE_IN_END, t) * (1.0 - smoothstep(FADE_OUT_START, 1.0, t))


def sample_point_in_ellipse(rng: random.Random, rx: float, ry: float, max_tries: int = 1000):
    """
    Uniform point inside the ellipse x^2/rx^2 + y^2/ry^2 <= 1 by rejection sampling.

    Acceptance is about pi/4 per candidate, so the cap is never expected to trip;
    when it does the centre is returned.
    """
    if rx <= 0 or ry <= 0:
        raise ValueError("ellipse half-axes must be positive")
    for _ in range(max_tries):
        x = rng.uniform(-rx, rx)
        y = rng.uniform(-ry, ry)
        if (x * x) / (rx * rx) + (y * y) / (ry * ry) <= 1.0:
            return x, y
    log.warning("rejection sampling gave up after %d tries (rx=%.2f ry=%.2f)", max_tries, rx, ry)
    return 0.0, 0.0

