"""Seeded 2D value noise.

Lattice values come from a small linear congruential generator so the same
seed yields the same field on every platform, independent of ``random``.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field

YWRAPB = 4
YWRAP = 1 << YWRAPB
SIZE = 4095


def _scaled_cosine(i: float) -> float:
    return 0.5 * (1.0 - math.cos(i * math.pi))


@dataclass
class ValueNoise:
    seed: int = 0
    octaves: int = 4
    falloff: float = 0.5
    lattice: list = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.octaves < 1:
            raise ValueError("octaves must be >= 1")
        rng = self._lcg(self.seed)
        self.lattice = [next(rng) for _ in range(SIZE + 1)]

    @staticmethod
    def _lcg(seed: int):
        m = 4294967296
        a = 1664525
        c = 1013904223
        z = seed & 0xFFFFFFFF
        while True:
            z = (a * z + c) % m
            yield z / m

    def __call__(self, x: float, y: float = 0.0) -> float:
        return self.noise(x, y)

    def noise(self, x: float, y: float = 0.0) -> float:
        x = abs(x)
        y = abs(y)
        xi = int(math.floor(x))
        yi = int(math.floor(y))
        xf = x - xi
        yf = y - yi

        p = self.lattice
        r = 0.0
        ampl = 0.5
        for _ in range(self.octaves):
            of = xi + (yi << YWRAPB)
            rxf = _scaled_cosine(xf)
            ryf = _scaled_cosine(yf)

            n1 = p[of & SIZE]
            n1 += rxf * (p[(of + 1) & SIZE] - n1)
            n2 = p[(of + YWRAP) & SIZE]
            n2 += rxf * (p[(of + YWRAP + 1) & SIZE] - n2)
            n1 += ryf * (n2 - n1)

            r += n1 * ampl
            ampl *= self.falloff

            xi <<= 1
            xf *= 2
            yi <<= 1
            yf *= 2
            if xf >= 1.0:
                xi += 1
                xf -= 1
            if yf >= 1.0:
                yi += 1
                yf -= 1
        return r
