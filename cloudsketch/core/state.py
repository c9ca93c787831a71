from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import random

from cloudsketch.core.noise import ValueNoise


class CloudKind(str, Enum):
    CUMULUS = "cumulus"
    CIRRUS = "cirrus"


@dataclass(frozen=True)
class CumulusParams:
    width: float
    height: float


@dataclass(frozen=True)
class CirrusParams:
    length: float
    thickness: float
    angle: float  # radians, applied to the local frame before drawing


@dataclass(frozen=True)
class Origin:
    x: float
    y: float


@dataclass
class RenderSession:
    # Incremented before every render; the incremented value seeds both generators.
    seed: int = 1
    show_origin: bool = False
    rng: random.Random = field(init=False, repr=False)
    noise: ValueNoise = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.seed < 0:
            raise ValueError("seed must be >= 0")
        self._apply(self.seed)

    @classmethod
    def starting_at(cls, seed: int, show_origin: bool = False) -> "RenderSession":
        """Session whose next render uses exactly ``seed``."""
        if seed < 1:
            raise ValueError("seed must be >= 1")
        return cls(seed=seed - 1, show_origin=show_origin)

    def _apply(self, seed: int) -> None:
        self.rng = random.Random(seed)
        self.noise = ValueNoise(seed)

    def reseed(self) -> int:
        self.seed += 1
        self._apply(self.seed)
        return self.seed
