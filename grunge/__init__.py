"""
grunge: seeded 2D coherent noise.

Deterministic, seed-reproducible noise fields for procedural textures and
terrain. Noise modules map a coordinate to a NoiseResult and can be chained
through modifiers.

Subpackages:
- primitives: simplex noise function, NoiseModule interface, result types
- modules: SimplexNoise, PinkNoise, BillowNoise and geometric sources
- modifiers: ScaleBias, Clamp, Invert, Abs wrappers
- misc: grid sampling into numpy arrays
- cli: command line entry points

Usage:
    import grunge as gr

    noise = gr.modules.PinkNoise(seed=0).scalebias(0.5, 0.5).clamp(0.0, 1.0)
    result = noise.generate((0.05, 0.05))
    if result.is_ok():
        print(result.value)
"""

__version__ = "0.1.0"

from . import constants
from . import primitives
from . import modules
from . import modifiers
from . import misc
from .primitives import (
    snoise_2d,
    NoiseModule,
    NoiseResult,
    NoiseErrorKind,
    NoiseGenerationError,
)
from .modules import SimplexNoise, PinkNoise, BillowNoise, ConstNoise, CylinderNoise
from .modifiers import ScaleBias, Clamp, Invert, Abs
from .misc import sample_grid
from .logging_config import setup_logging

__all__ = [
    "__version__",
    "constants", "primitives", "modules", "modifiers", "misc",
    "snoise_2d", "NoiseModule", "NoiseResult", "NoiseErrorKind", "NoiseGenerationError",
    "SimplexNoise", "PinkNoise", "BillowNoise", "ConstNoise", "CylinderNoise",
    "ScaleBias", "Clamp", "Invert", "Abs",
    "sample_grid", "setup_logging",
]
