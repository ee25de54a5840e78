"""
Primitive building blocks for grunge.

Provides the seeded simplex noise function, the NoiseModule interface shared
by every generator and modifier, and the result/error types returned by
`NoiseModule.generate`.

Usage:
    from grunge.primitives import snoise_2d

    value = snoise_2d((0.5, 0.25), seed=0)
"""

from .simplex import snoise_2d, hash_lattice, wrap_seed, GRADIENTS_2D
from .results import NoiseErrorKind, NoiseGenerationError, NoiseResult
from .noise_module import NoiseModule

__all__ = [
    "snoise_2d", "hash_lattice", "wrap_seed", "GRADIENTS_2D",
    "NoiseErrorKind", "NoiseGenerationError", "NoiseResult",
    "NoiseModule",
]
