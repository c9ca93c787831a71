"""
Cumulus drawing in local space.

The cloud is three overlapping puff clusters (underbelly shadow, body,
highlight) followed by a ring of faint mist dots that softens the edge.
Every position is relative to (0, 0); the caller places the frame.
"""
from __future__ import annotations

import math

from cloudsketch.core.sampling import lerp, sample_point_in_ellipse
from cloudsketch.core.state import CumulusParams

SHADOW_COLOR = (210, 225, 240, 120)
BODY_COLOR = (255, 255, 255, 170)
HIGHLIGHT_COLOR = (255, 255, 255, 150)

SHADOW_PUFFS = 260
BODY_PUFFS = 320
HIGHLIGHT_PUFFS = 200
MIST_DOTS = 1600

# Half-axes of the sampling ellipse relative to the cluster size.
CLUSTER_SPREAD = 0.52
PUFF_NOISE_SCALE = 0.006
PUFF_NOISE_BIAS = 1000.0
MIST_NOISE_SCALE = 0.01
MIST_NOISE_BIAS = 2000.0
MIST_MAX_ALPHA = 45


def draw_cumulus_local(canvas, session, params: CumulusParams) -> None:
    w = params.width
    h = params.height

    draw_puff_cluster_local(canvas, session, w * 0.98, h * 0.85, SHADOW_COLOR, SHADOW_PUFFS, 0.0, h * 0.10)
    draw_puff_cluster_local(canvas, session, w, h, BODY_COLOR, BODY_PUFFS, 0.0, 0.0)
    draw_puff_cluster_local(
        canvas, session, w * 0.75, h * 0.65, HIGHLIGHT_COLOR, HIGHLIGHT_PUFFS, -w * 0.06, -h * 0.16
    )
    soft_mist_local(canvas, session, w, h)


def draw_puff_cluster_local(canvas, session, w, h, color, count, offset_x, offset_y) -> None:
    rng = session.rng
    noise = session.noise
    for _ in range(count):
        x, y = sample_point_in_ellipse(rng, w * CLUSTER_SPREAD, h * CLUSTER_SPREAD)

        px = x + offset_x + rng.gauss(0.0, w * 0.03)
        py = y + offset_y + rng.gauss(0.0, h * 0.03)

        n = noise((px + PUFF_NOISE_BIAS) * PUFF_NOISE_SCALE, (py + PUFF_NOISE_BIAS) * PUFF_NOISE_SCALE)
        r = lerp(w * 0.06, w * 0.15, n) * rng.uniform(0.7, 1.15)

        canvas.ellipse(px, py, r * 1.25, r, fill=color)


def soft_mist_local(canvas, session, w, h) -> None:
    rng = session.rng
    noise = session.noise
    for _ in range(MIST_DOTS):
        ang = rng.uniform(0.0, math.tau)

        rr_x = rng.uniform(0.45, 0.75) * (w * 0.5)
        rr_y = rng.uniform(0.45, 0.75) * (h * 0.5)

        px = math.cos(ang) * rr_x + rng.gauss(0.0, w * 0.02)
        py = math.sin(ang) * rr_y + rng.gauss(0.0, h * 0.02)

        n = noise((px + MIST_NOISE_BIAS) * MIST_NOISE_SCALE, (py + MIST_NOISE_BIAS) * MIST_NOISE_SCALE)
        alpha = lerp(0.0, MIST_MAX_ALPHA, n)

        s = rng.uniform(6.0, 18.0)
        canvas.ellipse(px, py, s, s, fill=(255, 255, 255, alpha))
