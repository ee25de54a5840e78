"""
Modifier composition for grunge.

Wrappers that post-process the output of any NoiseModule while remaining
NoiseModules themselves. Usually reached through the builder methods every
module carries (`scalebias`, `clamp`, `invert`, `abs`).

Available Modifiers:
- ScaleBias: value * scale + bias
- Clamp: value limited to [lower, upper]
- Invert: -value
- Abs: |value|
"""

from .modifiers import Modifier, ScaleBias, Clamp, Invert, Abs

__all__ = ["Modifier", "ScaleBias", "Clamp", "Invert", "Abs"]
