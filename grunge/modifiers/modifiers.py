"""
Output modifiers for grunge noise modules.

A modifier owns exactly one source module. On `generate` it evaluates the
source first; error results are handed back unchanged and successful values
go through the modifier's transform. Modifiers are NoiseModules themselves,
so chains such as `PinkNoise(0).scalebias(0.5, 0.5).clamp(0.0, 1.0)` nest
to any depth, innermost module evaluated first.
"""

from ..primitives import NoiseModule, NoiseResult


class Modifier(NoiseModule):
    """
    Base class for single-source output transforms.

    Args:
        source: The wrapped module
    """

    def __init__(self, source: NoiseModule):
        if not isinstance(source, NoiseModule):
            raise TypeError(f"source must be a NoiseModule, got {type(source).__name__}")
        self.source = source

    def transform(self, value: float) -> float:
        raise NotImplementedError

    def generate(self, point) -> NoiseResult:
        return self.source.generate(point).map(self.transform)


class ScaleBias(Modifier):
    """Outputs `value * scale + bias`."""

    def __init__(self, source: NoiseModule, scale: float, bias: float):
        super().__init__(source)
        self.scale = scale
        self.bias = bias

    def transform(self, value: float) -> float:
        return value * self.scale + self.bias

    def __repr__(self):
        return f"ScaleBias({self.source!r}, scale={self.scale!r}, bias={self.bias!r})"


class Clamp(Modifier):
    """Limits the output to the closed range [lower, upper]."""

    def __init__(self, source: NoiseModule, lower: float, upper: float):
        if lower > upper:
            raise ValueError(f"lower bound {lower} must not exceed upper bound {upper}")
        super().__init__(source)
        self.lower = lower
        self.upper = upper

    def transform(self, value: float) -> float:
        return max(self.lower, min(self.upper, value))

    def __repr__(self):
        return f"Clamp({self.source!r}, lower={self.lower!r}, upper={self.upper!r})"


class Invert(Modifier):
    """Negates the output."""

    def transform(self, value: float) -> float:
        return -value

    def __repr__(self):
        return f"Invert({self.source!r})"


class Abs(Modifier):
    """Outputs the absolute value."""

    def transform(self, value: float) -> float:
        return abs(value)

    def __repr__(self):
        return f"Abs({self.source!r})"
