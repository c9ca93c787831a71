"""Cirrus drawing in local space: wavy filaments along the x axis plus haze."""
from __future__ import annotations

from cloudsketch.core.sampling import edge_fade, lerp
from cloudsketch.core.state import CirrusParams

FILAMENTS = 280
HAZE_DOTS = 1200

FILAMENT_MAX_ALPHA = 90
HAZE_MAX_ALPHA = 55
# Random overhang of each filament end beyond +-length/2.
END_JITTER = 40.0


def filament_vertices(session, length: float, thickness: float):
    """
    Sample one filament.

    Returns a list of (x, y, alpha) tuples; there are ``steps + 1`` vertices
    with ``steps`` in [30, 53].
    """
    rng = session.rng
    noise = session.noise

    y_base = rng.gauss(0.0, thickness * 0.28)
    x0 = -length * 0.5 + rng.uniform(-END_JITTER, END_JITTER)
    x1 = length * 0.5 + rng.uniform(-END_JITTER, END_JITTER)
    wav = rng.uniform(8.0, 26.0)
    steps = int(rng.uniform(30, 54))

    verts = []
    for s in range(steps + 1):
        t = s / steps
        x = lerp(x0, x1, t)
        n = noise((x + 5000.0) * 0.004, (y_base + 5000.0) * 0.02)
        y = y_base + (n - 0.5) * wav
        verts.append((x, y, FILAMENT_MAX_ALPHA * edge_fade(t)))
    return verts


def draw_cirrus_local(canvas, session, params: CirrusParams) -> None:
    length = params.length
    thickness = params.thickness
    rng = session.rng
    noise = session.noise

    for _ in range(FILAMENTS):
        verts = filament_vertices(session, length, thickness)
        canvas.polyline(
            [(x, y) for x, y, _a in verts],
            [(255, 255, 255, a) for _x, _y, a in verts],
            width=1,
        )

    for _ in range(HAZE_DOTS):
        x = rng.uniform(-length * 0.55, length * 0.55)
        y = rng.gauss(0.0, thickness * 0.35)
        n = noise((x + 7000.0) * 0.006, (y + 7000.0) * 0.02)
        alpha = lerp(0.0, HAZE_MAX_ALPHA, n)
        canvas.ellipse(x, y, rng.uniform(3.0, 12.0), rng.uniform(3.0, 10.0), fill=(255, 255, 255, alpha))
