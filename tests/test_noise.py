import random

import pytest

from cloudsketch.core.noise import ValueNoise


def test_noise_range_and_determinism():
    a = ValueNoise(3)
    b = ValueNoise(3)
    rng = random.Random(0)
    for _ in range(500):
        x = rng.uniform(0, 60)
        y = rng.uniform(0, 60)
        v = a(x, y)
        assert 0.0 <= v < 1.0
        assert v == b(x, y)


def test_noise_differs_by_seed():
    a = ValueNoise(1)
    b = ValueNoise(2)
    pts = [(i * 0.37, i * 0.11) for i in range(50)]
    assert [a(x, y) for x, y in pts] != [b(x, y) for x, y in pts]


def test_noise_is_smooth():
    n = ValueNoise(5)
    for i in range(200):
        x = 6.0 + i * 0.01
        assert abs(n(x + 0.001, 20.0) - n(x, 20.0)) < 0.01


def test_noise_needs_an_octave():
    with pytest.raises(ValueError):
        ValueNoise(1, octaves=0)
