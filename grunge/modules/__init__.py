"""
Noise generators for grunge.

Every class here implements NoiseModule and can be wrapped with modifiers.

Generators:
- SimplexNoise: One octave of the seeded simplex function
- PinkNoise: Signed fractal sum of simplex octaves
- BillowNoise: Absolute-valued fractal sum for cloud-like output
- ConstNoise, CylinderNoise: Deterministic geometric sources

Usage:
    import grunge as gr

    clouds = gr.modules.BillowNoise(seed=3)
    clouds.octaves = 8
    value = clouds.generate((0.5, 0.25)).unwrap()
"""

from .primitive import SimplexNoise
from .fractal import FractalNoise, PinkNoise, BillowNoise, check_octaves
from .geometry import ConstNoise, CylinderNoise

__all__ = [
    "SimplexNoise",
    "FractalNoise", "PinkNoise", "BillowNoise", "check_octaves",
    "ConstNoise", "CylinderNoise",
]
