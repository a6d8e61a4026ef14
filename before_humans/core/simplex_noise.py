"""
Seeded 2D simplex noise with fractal Brownian motion.

The permutation table is derived from the seed with an integer hash that
follows JavaScript number semantics (int32 bit operations, IEEE double
multiplication), so a given seed always produces the same noise field.
"""

import math
from typing import List, Tuple

GRAD3: Tuple[Tuple[int, int, int], ...] = (
    (1, 1, 0), (-1, 1, 0), (1, -1, 0), (-1, -1, 0),
    (1, 0, 1), (-1, 0, 1), (1, 0, -1), (-1, 0, -1),
    (0, 1, 1), (0, -1, 1), (0, 1, -1), (0, -1, -1),
)

F2 = 0.5 * (math.sqrt(3) - 1)
G2 = (3 - math.sqrt(3)) / 6

_HASH_MULTIPLIER = 0x45D9F3B


def _to_int32(value) -> int:
    """ToInt32: truncate toward zero, wrap to a signed 32-bit integer."""
    n = int(value) & 0xFFFFFFFF
    return n - 0x100000000 if n & 0x80000000 else n


def _hash(a, b) -> int:
    """Integer avalanche hash of ``a`` mixed with ``b``."""
    a = _to_int32(a)
    a = float((a >> 16) ^ a) * _HASH_MULTIPLIER
    a = _to_int32(a)
    a = float((a >> 16) ^ a) * _HASH_MULTIPLIER
    a = _to_int32(a)
    a = (a >> 16) ^ a
    return a ^ _to_int32(b)


class SimplexNoise:
    """Simplex noise generator seeded from an integer."""

    def __init__(self, seed: int):
        """
        Initialize the permutation and gradient tables.

        Args:
            seed: Integer seed; seed 0 is a regular seed
        """
        self.seed = seed
        self.perm: List[int] = [0] * 512
        self.grad_p: List[Tuple[int, int, int]] = [GRAD3[0]] * 512
        self._build_tables(seed)

    def _build_tables(self, seed: int) -> None:
        seed = _to_int32(math.floor(seed))
        if seed < 256:
            seed = _to_int32(seed | (seed << 8))

        p = []
        for i in range(256):
            if i & 1:
                p.append(_hash(i, seed) & 255)
            else:
                p.append(_hash(seed, i) & 255)

        for i in range(512):
            self.perm[i] = p[i & 255]
            self.grad_p[i] = GRAD3[self.perm[i] % 12]

    def noise2d(self, x: float, y: float) -> float:
        """
        Evaluate 2D simplex noise.

        Returns:
            Noise value, roughly in [-1, 1]
        """
        perm = self.perm
        grad_p = self.grad_p

        # Skew the input space to find the simplex cell
        s = (x + y) * F2
        i = math.floor(x + s)
        j = math.floor(y + s)
        t = (i + j) * G2

        x0 = x - (i - t)
        y0 = y - (j - t)

        # Lower or upper triangle of the rhombus
        if x0 > y0:
            i1, j1 = 1, 0
        else:
            i1, j1 = 0, 1

        x1 = x0 - i1 + G2
        y1 = y0 - j1 + G2
        x2 = x0 - 1 + 2 * G2
        y2 = y0 - 1 + 2 * G2

        i &= 255
        j &= 255

        gi0 = grad_p[i + perm[j]]
        gi1 = grad_p[i + i1 + perm[j + j1]]
        gi2 = grad_p[i + 1 + perm[j + 1]]

        n0 = n1 = n2 = 0.0

        t0 = 0.5 - x0 * x0 - y0 * y0
        if t0 >= 0:
            t0 *= t0
            n0 = t0 * t0 * (gi0[0] * x0 + gi0[1] * y0)

        t1 = 0.5 - x1 * x1 - y1 * y1
        if t1 >= 0:
            t1 *= t1
            n1 = t1 * t1 * (gi1[0] * x1 + gi1[1] * y1)

        t2 = 0.5 - x2 * x2 - y2 * y2
        if t2 >= 0:
            t2 *= t2
            n2 = t2 * t2 * (gi2[0] * x2 + gi2[1] * y2)

        return 70 * (n0 + n1 + n2)

    def fbm(
        self,
        x: float,
        y: float,
        octaves: int = 4,
        lacunarity: float = 2.0,
        persistence: float = 0.5,
    ) -> float:
        """
        Fractal Brownian motion: multi-octave simplex noise.

        Args:
            x, y: Sample coordinates
            octaves: Number of noise layers to sum
            lacunarity: Frequency multiplier between octaves
            persistence: Amplitude multiplier between octaves

        Returns:
            Amplitude-normalized noise value, roughly in [-1, 1]
        """
        value = 0.0
        amplitude = 1.0
        frequency = 1.0
        max_value = 0.0

        for _ in range(octaves):
            value += self.noise2d(x * frequency, y * frequency) * amplitude
            max_value += amplitude
            amplitude *= persistence
            frequency *= lacunarity

        return value / max_value
