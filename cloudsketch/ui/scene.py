from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Callable

from cloudsketch.core.state import CirrusParams, CloudKind, CumulusParams, Origin, RenderSession
from cloudsketch.ui.cirrus import draw_cirrus_local
from cloudsketch.ui.cumulus import draw_cumulus_local
from cloudsketch.ui.sky import draw_origin_cross, draw_sky

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneResult:
    kind: CloudKind
    seed: int
    origin: Origin
    params: Any


def sample_origin(rng, width: int, height: int) -> Origin:
    return Origin(
        x=rng.uniform(width * 0.25, width * 0.75),
        y=rng.uniform(height * 0.25, height * 0.55),
    )


def sample_cumulus_params(rng) -> CumulusParams:
    w = rng.uniform(320, 520)
    return CumulusParams(width=w, height=w * rng.uniform(0.35, 0.55))


def sample_cirrus_params(rng) -> CirrusParams:
    return CirrusParams(
        length=rng.uniform(520, 820),
        thickness=rng.uniform(40, 90),
        angle=rng.uniform(-0.25, 0.25),
    )


def _draw_cirrus_rotated(canvas, session: RenderSession, params: CirrusParams) -> None:
    canvas.rotate(params.angle)
    draw_cirrus_local(canvas, session, params)


def render_scene(
    canvas,
    session: RenderSession,
    kind: CloudKind,
    sample_params: Callable,
    draw_local: Callable,
    theme: dict | None = None,
) -> SceneResult:
    """
    One full render pass.

    Reseeds, paints the sky, picks an origin, then draws the cloud in a frame
    translated to that origin. Shape parameters are sampled after the origin
    so a given seed always reproduces the same picture.
    """
    seed = session.reseed()
    draw_sky(canvas, theme)

    origin = sample_origin(session.rng, canvas.width, canvas.height)
    with canvas.scoped():
        canvas.translate(origin.x, origin.y)
        if session.show_origin:
            draw_origin_cross(canvas)
        params = sample_params(session.rng)
        draw_local(canvas, session, params)

    log.info("rendered %s seed=%d origin=(%.1f, %.1f) %s", kind.value, seed, origin.x, origin.y, params)
    return SceneResult(kind=kind, seed=seed, origin=origin, params=params)


def render_cumulus(canvas, session: RenderSession, theme: dict | None = None) -> SceneResult:
    return render_scene(canvas, session, CloudKind.CUMULUS, sample_cumulus_params, draw_cumulus_local, theme)


def render_cirrus(canvas, session: RenderSession, theme: dict | None = None) -> SceneResult:
    return render_scene(canvas, session, CloudKind.CIRRUS, sample_cirrus_params, _draw_cirrus_rotated, theme)


RENDERERS = {
    CloudKind.CUMULUS: render_cumulus,
    CloudKind.CIRRUS: render_cirrus,
}
