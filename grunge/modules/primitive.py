"""Module wrapper around the bare simplex function."""

from .. import constants as cte
from ..primitives import NoiseModule, NoiseResult, snoise_2d


class SimplexNoise(NoiseModule):
    """
    A single octave of seeded simplex noise.

    Attributes:
        seed: Noise seed
        frequency: Input coordinate multiplier
    """

    def __init__(self, seed: int = 0, frequency: float = cte.DEFAULT_FREQUENCY):
        self.seed = seed
        self.frequency = frequency

    @classmethod
    def new(cls, seed: int) -> "SimplexNoise":
        return cls(seed)

    def generate(self, point) -> NoiseResult:
        x, y = point
        return NoiseResult.ok(snoise_2d((x * self.frequency, y * self.frequency), self.seed))

    def __repr__(self):
        return f"SimplexNoise(seed={self.seed}, frequency={self.frequency})"
