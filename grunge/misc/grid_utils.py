"""
Grid sampling utilities for grunge.

Evaluates a noise module over a regular 2D lattice and collects the values in
a numpy array, the usual starting point for building textures or heightmaps.
"""

import logging

import numpy as np

from ..primitives import NoiseModule

logger = logging.getLogger(__name__)


def sample_grid(module: NoiseModule, nx: int, ny: int, x0: float = 0.0,
                y0: float = 0.0, dx: float = 1.0) -> np.ndarray:
    """
    Sample a noise module on a regular grid.

    Args:
        module: Any NoiseModule
        nx: Number of samples in x direction
        ny: Number of samples in y direction
        x0, y0: Coordinate of the first sample (default: origin)
        dx: Spacing between neighbouring samples (default: 1.0)

    Returns:
        numpy.ndarray: float64 array of shape (ny, nx) where element [j, i]
        is the module evaluated at (x0 + i * dx, y0 + j * dx)

    Raises:
        ValueError: If the grid dimensions or spacing are invalid
        NoiseGenerationError: If the module reports an error; sampling stops
            at the first failed evaluation

    Example:
        terrain = sample_grid(PinkNoise(seed=3), 256, 256, dx=1.0 / 64)
    """
    if nx < 1 or ny < 1:
        raise ValueError(f"Grid dimensions must be positive. Got ({ny}, {nx})")
    if dx <= 0:
        raise ValueError("dx must be > 0")

    logger.debug("Sampling %r on a %dx%d grid (x0=%s, y0=%s, dx=%s)",
                 module, ny, nx, x0, y0, dx)

    xs = x0 + np.arange(nx, dtype=np.float64) * dx
    ys = y0 + np.arange(ny, dtype=np.float64) * dx
    out = np.empty((ny, nx), dtype=np.float64)

    for j in range(ny):
        y = float(ys[j])
        for i in range(nx):
            out[j, i] = module.generate((float(xs[i]), y)).unwrap()

    logger.debug("Grid sampled: min=%.6f max=%.6f", out.min(), out.max())
    return out
