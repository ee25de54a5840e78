"""
Simplex gradient noise for grunge.

Provides the seeded 2D simplex noise function every other generator is built
on. Lattice corners are combined with the seed through a stateless integer
hash, so no permutation table has to be built or stored per seed and any two
seeds give unrelated fields.
"""

import math

from .. import constants as cte


# 8-direction 2D gradient vectors
GRADIENTS_2D = (
    (1, 1), (-1, 1), (1, -1), (-1, -1),  # Diagonal gradients
    (1, 0), (-1, 0), (0, 1), (0, -1),    # Axis-aligned gradients
)


def wrap_seed(seed: int) -> int:
    """Reduce a seed to the unsigned 32-bit range (wraparound arithmetic)."""
    return seed & cte.SEED_MASK


def hash_lattice(i: int, j: int, seed: int) -> int:
    """
    Hash a lattice point together with a seed.

    Args:
        i, j: Integer lattice coordinates (may be negative)
        seed: Unsigned 32-bit seed

    Returns:
        int: Well-mixed unsigned 32-bit hash
    """
    h = (0x9E3779B9 ^ seed) & cte.SEED_MASK
    h = (h ^ (i * 0x85EBCA6B) ^ (j * 0xC2B2AE35)) & cte.SEED_MASK
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & cte.SEED_MASK
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & cte.SEED_MASK
    h ^= h >> 16
    return h


def _corner(hash_val: int, dx: float, dy: float) -> float:
    """Contribution of one simplex corner with radial falloff."""
    t = 0.5 - dx * dx - dy * dy
    if t <= 0.0:
        return 0.0
    t *= t
    gx, gy = GRADIENTS_2D[hash_val & 7]  # Lower 3 bits select the gradient
    return t * t * (gx * dx + gy * dy)


def snoise_2d(point, seed: int) -> float:
    """
    Evaluate 2D simplex noise at a point.

    The plane is split into equilateral triangles; the three corners of the
    triangle containing the point each contribute a gradient ramp multiplied
    by a (0.5 - r^2)^4 kernel, which vanishes before reaching the neighbouring
    cells and keeps the field continuous across lattice boundaries.

    Args:
        point: (x, y) coordinate, any 2-sequence of real numbers
        seed: Noise seed, reduced modulo 2**32

    Returns:
        float: Noise value within [-1, 1]. Coordinates whose skewed form is
        not finite or exceeds 2**53 in magnitude evaluate to 0.0.
    """
    x, y = point
    seed = wrap_seed(seed)

    # Skew the input space to find the containing simplex cell
    s = (x + y) * cte.F2
    xs = x + s
    ys = y + s
    if not (abs(xs) < cte.SIMPLEX_MAX_COORD and abs(ys) < cte.SIMPLEX_MAX_COORD):
        return 0.0
    i = math.floor(xs)
    j = math.floor(ys)

    # Unskew the cell origin back to (x, y) space
    t = (i + j) * cte.G2
    x0 = x - (i - t)
    y0 = y - (j - t)

    # Lower or upper triangle of the cell
    if x0 > y0:
        i1, j1 = 1, 0
    else:
        i1, j1 = 0, 1

    x1 = x0 - i1 + cte.G2
    y1 = y0 - j1 + cte.G2
    x2 = x0 - 1.0 + 2.0 * cte.G2
    y2 = y0 - 1.0 + 2.0 * cte.G2

    n = 0.0
    n += _corner(hash_lattice(i, j, seed), x0, y0)
    n += _corner(hash_lattice(i + i1, j + j1, seed), x1, y1)
    n += _corner(hash_lattice(i + 1, j + 1, seed), x2, y2)

    return cte.SIMPLEX_SCALE_2D * n
