"""
Fractal noise generators for grunge.

PinkNoise and BillowNoise sum a number of `octaves` of simplex noise, each
sampled at a higher frequency and weighted by a smaller amplitude than the
last. PinkNoise keeps the signed samples and gives smooth, self-similar
variation; BillowNoise folds each sample with an absolute value for a puffy,
cloud-like look.

Both generators validate their octave count when evaluated, not when built,
so parameters can be freely adjusted after construction.
"""

import numbers
from typing import Optional

from .. import constants as cte
from ..primitives import NoiseModule, NoiseErrorKind, NoiseResult, snoise_2d, wrap_seed


def check_octaves(octaves: int) -> Optional[NoiseErrorKind]:
    """
    Return the error kind for an unusable octave count, or None.

    Raises:
        TypeError: If octaves is not an integer
    """
    if isinstance(octaves, bool) or not isinstance(octaves, numbers.Integral):
        raise TypeError(f"octaves must be an integer, got {type(octaves).__name__}")
    if octaves < cte.MIN_OCTAVES:
        return NoiseErrorKind.TOO_FEW_OCTAVES
    if octaves > cte.MAX_OCTAVES:
        return NoiseErrorKind.TOO_MANY_OCTAVES
    return None


class FractalNoise(NoiseModule):
    """
    Shared octave loop of the fractal generators.

    Subclasses define how one octave is sampled and how the final sum is
    scaled. Octave k uses the seed `seed + k` (wrapping at 2**32).
    """

    def __init__(self, seed: int = 0):
        self.seed = seed
        self.frequency = cte.DEFAULT_FREQUENCY
        self.persistence = cte.DEFAULT_PERSISTENCE
        self.lacunarity = cte.DEFAULT_LACUNARITY
        self.octaves = cte.DEFAULT_OCTAVES

    @classmethod
    def new(cls, seed: int):
        """Create a generator with seed `seed` and default parameters."""
        return cls(seed)

    @classmethod
    def default(cls):
        return cls(0)

    def _octave_sample(self, point, seed: int) -> float:
        raise NotImplementedError

    def _finish(self, total: float) -> float:
        raise NotImplementedError

    def generate(self, point) -> NoiseResult:
        error = check_octaves(self.octaves)
        if error is not None:
            return NoiseResult.err(error)

        x, y = point
        result = 0.0
        sample = (x * self.frequency, y * self.frequency)
        amplitude = 1.0

        for octave in range(self.octaves):
            result += amplitude * self._octave_sample(sample, wrap_seed(self.seed + octave))
            sample = (sample[0] * self.lacunarity, sample[1] * self.lacunarity)
            amplitude *= self.persistence

        return NoiseResult.ok(self._finish(result))

    def __repr__(self):
        return (
            f"{type(self).__name__}(seed={self.seed}, frequency={self.frequency}, "
            f"persistence={self.persistence}, lacunarity={self.lacunarity}, "
            f"octaves={self.octaves})"
        )


class PinkNoise(FractalNoise):
    """
    Sum of self-similar octaves of simplex noise.

    Output takes the form

        M(x) = N(f x) + p N(f l x) + ... + p^(n-1) N(f l^(n-1) x)

    scaled by 0.25, where p, f, l are persistence, frequency and lacunarity
    and N is the seeded simplex function.

    Attributes:
        seed: Ensures reproducibility and variation of the output
        frequency: Scale of the noise, equivalent to scaling all input coordinates
        persistence: Amplitude falloff between successive octaves (0.5 weights
                     the octaves 1.0, 0.5, 0.25, ...)
        lacunarity: Frequency multiplier between successive octaves
        octaves: Number of summed layers, i.e. the level of detail (2..30)
    """

    def _octave_sample(self, point, seed: int) -> float:
        return snoise_2d(point, seed)

    def _finish(self, total: float) -> float:
        return total * cte.PINKNOISE_SCALE


class BillowNoise(FractalNoise):
    """
    Like PinkNoise, but sums `|N + offset|` per octave.

    The absolute value makes every octave non-negative, so the sum is remapped
    with `total * 0.25 * 2 - 1` to bring it back towards [-1, 1].

    Attributes:
        offset: Shift applied before the absolute value, reducing the creases
                where the noise crosses zero
    """

    def __init__(self, seed: int = 0):
        super().__init__(seed)
        self.offset = cte.DEFAULT_BILLOW_OFFSET

    def _octave_sample(self, point, seed: int) -> float:
        return abs(snoise_2d(point, seed) + self.offset)

    def _finish(self, total: float) -> float:
        return total * cte.BILLOWNOISE_SCALE * 2.0 - 1.0

    def __repr__(self):
        return super().__repr__()[:-1] + f", offset={self.offset})"
