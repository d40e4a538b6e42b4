"""Seedable random source for the generator.

Wraps a local ``random.Random`` so external use of the module-level ``random``
functions never perturbs a generation run, and adds 2D coherent noise
(Ken Perlin's improved gradient noise) whose permutation table is derived from
the same seed. Noise output is mapped to ``[0, 1]`` with 0.5 at lattice points.
"""

from __future__ import annotations

import math
import random
from typing import List, Sequence, TypeVar

T = TypeVar("T")

# Gradient directions for 2D improved noise (the 3D edge set projected onto x/y)
_GRADIENTS = (
    (1.0, 1.0),
    (-1.0, 1.0),
    (1.0, -1.0),
    (-1.0, -1.0),
    (1.0, 0.0),
    (-1.0, 0.0),
    (0.0, 1.0),
    (0.0, -1.0),
)


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


class PerlinNoise:
    def __init__(self, seed: int):
        perm = list(range(256))
        random.Random(seed).shuffle(perm)
        self._perm: List[int] = perm + perm

    def _grad(self, h: int, x: float, y: float) -> float:
        gx, gy = _GRADIENTS[h & 7]
        return gx * x + gy * y

    def raw(self, x: float, y: float) -> float:
        """Signed noise, roughly within [-1, 1]."""
        xi = math.floor(x)
        yi = math.floor(y)
        xf = x - xi
        yf = y - yi
        xi &= 255
        yi &= 255
        p = self._perm
        aa = p[p[xi] + yi]
        ab = p[p[xi] + yi + 1]
        ba = p[p[xi + 1] + yi]
        bb = p[p[xi + 1] + yi + 1]
        u = _fade(xf)
        v = _fade(yf)
        x1 = _lerp(self._grad(aa, xf, yf), self._grad(ba, xf - 1, yf), u)
        x2 = _lerp(self._grad(ab, xf, yf - 1), self._grad(bb, xf - 1, yf - 1), u)
        return _lerp(x1, x2, v)

    def __call__(self, x: float, y: float) -> float:
        value = (self.raw(x, y) + 1.0) * 0.5
        if value < 0.0:
            return 0.0
        if value > 1.0:
            return 1.0
        return value


class RandomSource:
    """Deterministic sampler + noise bound to one seed.

    Integer ranges follow ``randrange`` semantics (upper bound exclusive) except
    ``randint`` which is inclusive on both ends.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)
        self._noise = PerlinNoise(seed)

    def reseed(self, seed: int) -> None:
        self.seed = seed
        self._rng.seed(seed)
        self._noise = PerlinNoise(seed)

    def value(self) -> float:
        return self._rng.random()

    def uniform(self, lo: float, hi: float) -> float:
        return self._rng.uniform(lo, hi)

    def randrange(self, lo: int, hi: int) -> int:
        return self._rng.randrange(lo, hi)

    def randint(self, lo: int, hi: int) -> int:
        return self._rng.randint(lo, hi)

    def choice(self, items: Sequence[T]) -> T:
        return items[self._rng.randrange(len(items))]

    def noise(self, x: float, y: float) -> float:
        return self._noise(x, y)


__all__ = ["RandomSource", "PerlinNoise"]
