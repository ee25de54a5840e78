"""
Common interface for every noise-producing object in grunge.

A NoiseModule maps a 2D coordinate to a NoiseResult. Generators, geometric
sources and modifier wrappers all implement it, so they can be swapped for one
another and chained through the builder methods defined here.
"""

from abc import ABC, abstractmethod

from .results import NoiseResult


class NoiseModule(ABC):
    """Abstract base class for 2D noise modules."""

    @abstractmethod
    def generate(self, point) -> NoiseResult:
        """
        Evaluate the module at a coordinate.

        Args:
            point: (x, y) coordinate

        Returns:
            NoiseResult: The sampled value, or the reason none could be produced
        """

    def generate_2d(self, x: float, y: float) -> NoiseResult:
        """Evaluate the module at (x, y)."""
        return self.generate((x, y))

    def value(self, point) -> float:
        """Evaluate and unwrap, raising NoiseGenerationError on failure."""
        return self.generate(point).unwrap()

    # Modifier builders. Each returns a new module owning `self`.

    def scalebias(self, scale: float, bias: float):
        """Wrap this module so its output becomes `value * scale + bias`."""
        from ..modifiers.modifiers import ScaleBias
        return ScaleBias(self, scale, bias)

    def clamp(self, lower: float, upper: float):
        """Wrap this module so its output is limited to [lower, upper]."""
        from ..modifiers.modifiers import Clamp
        return Clamp(self, lower, upper)

    def invert(self):
        """Wrap this module so its output is negated."""
        from ..modifiers.modifiers import Invert
        return Invert(self)

    def abs(self):
        """Wrap this module so its output is the absolute value."""
        from ..modifiers.modifiers import Abs
        return Abs(self)
