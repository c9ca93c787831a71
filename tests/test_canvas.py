import math

import pytest

from cloudsketch.render.canvas import Affine, RasterCanvas


def test_affine_translate_then_rotate():
    t = Affine.identity().translate(100, 50).rotate(math.pi / 2)
    x, y = t.apply(10, 0)
    assert x == pytest.approx(100)
    assert y == pytest.approx(60)
    assert not t.is_axis_aligned
    assert Affine.identity().translate(3, 4).is_axis_aligned


def test_scoped_restores_transform_on_error():
    canvas = RasterCanvas(20, 20)
    with pytest.raises(RuntimeError):
        with canvas.scoped():
            canvas.translate(5, 5)
            canvas.rotate(0.3)
            raise RuntimeError("boom")
    assert canvas.transform == Affine.identity()


def test_scoped_nests():
    canvas = RasterCanvas(20, 20)
    with canvas.scoped():
        canvas.translate(5, 5)
        inner_start = canvas.transform
        with canvas.scoped():
            canvas.rotate(1.0)
        assert canvas.transform == inner_start
    assert canvas.transform == Affine.identity()


def test_canvas_size_must_be_positive():
    with pytest.raises(ValueError):
        RasterCanvas(0, 10)


def test_translucent_ellipse_blends():
    canvas = RasterCanvas(40, 40, background=(255, 255, 255))
    canvas.translate(20, 20)
    canvas.ellipse(0, 0, 20, 16, fill=(0, 0, 0, 128))
    r, g, b = canvas.image.getpixel((20, 20))
    assert 120 <= r <= 135
    assert r == g == b
    assert canvas.image.getpixel((1, 1)) == (255, 255, 255)


def test_rotated_ellipse_is_filled():
    canvas = RasterCanvas(40, 40, background=(255, 255, 255))
    canvas.translate(20, 20)
    canvas.rotate(0.2)
    canvas.ellipse(0, 0, 24, 12, fill=(0, 0, 255, 255))
    assert canvas.image.getpixel((20, 20)) == (0, 0, 255)


def test_zero_alpha_draws_nothing():
    canvas = RasterCanvas(30, 30, background=(10, 20, 30))
    canvas.ellipse(15, 15, 10, 10, fill=(255, 255, 255, 0))
    canvas.line(0, 15, 30, 15, (255, 255, 255, 0))
    canvas.polyline([(0, 5), (30, 5)], [(255, 255, 255, 0), (255, 255, 255, 0)])
    assert set(canvas.image.getdata()) == {(10, 20, 30)}


def test_polyline_segments_use_vertex_colours():
    canvas = RasterCanvas(40, 10, background=(0, 0, 0))
    canvas.polyline(
        [(0, 5), (20, 5), (39, 5)],
        [(255, 255, 255, 0), (255, 255, 255, 0), (255, 255, 255, 255)],
    )
    assert canvas.image.getpixel((10, 5)) == (0, 0, 0)
    assert canvas.image.getpixel((30, 5))[0] > 0


def test_polyline_needs_colour_per_vertex():
    canvas = RasterCanvas(10, 10)
    with pytest.raises(ValueError):
        canvas.polyline([(0, 0), (5, 5)], [(255, 255, 255)])


def test_clear_fills_canvas():
    canvas = RasterCanvas(8, 8)
    canvas.clear("#102030")
    assert set(canvas.image.getdata()) == {(16, 32, 48)}
