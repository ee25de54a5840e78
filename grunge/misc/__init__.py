"""
Miscellaneous Utilities for grunge

Helpers that sit around the noise modules rather than inside them.

Available Functions:
- sample_grid: Evaluate a noise module over a regular grid into a numpy array
"""

from .grid_utils import sample_grid

# Export public API
__all__ = [
    "sample_grid"
]
