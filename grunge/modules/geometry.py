"""
Geometric noise sources for grunge.

Simple deterministic patterns that satisfy the NoiseModule interface, useful
as inputs to modifier chains or for checking a pipeline end to end.
"""

import math

from ..primitives import NoiseModule, NoiseResult


class ConstNoise(NoiseModule):
    """Outputs the same value everywhere."""

    def __init__(self, value: float):
        self.constant = value

    @classmethod
    def new(cls, value: float) -> "ConstNoise":
        return cls(value)

    def generate(self, point) -> NoiseResult:
        return NoiseResult.ok(self.constant)

    def __repr__(self):
        return f"ConstNoise({self.constant!r})"


class CylinderNoise(NoiseModule):
    """
    Concentric rings centred on the origin.

    The output is 1.0 on every ring of radius k / frequency and falls linearly
    to -1.0 halfway between two rings.

    Attributes:
        frequency: Number of rings per unit distance
    """

    def __init__(self, frequency: float = 1.0):
        self.frequency = frequency

    @classmethod
    def new(cls, frequency: float) -> "CylinderNoise":
        return cls(frequency)

    def generate(self, point) -> NoiseResult:
        x, y = point
        dist = math.hypot(x, y) * self.frequency
        inner = dist - math.floor(dist)
        outer = 1.0 - inner
        nearest = min(inner, outer)
        return NoiseResult.ok(1.0 - nearest * 4.0)

    def __repr__(self):
        return f"CylinderNoise(frequency={self.frequency!r})"
