"""
Numerical constants for grunge.

Holds the values that make up the observable contract of the generators:
octave bounds, output scale factors, default parameters and the simplex
lattice skew factors. Changing any of these changes every reference output.
"""

import math

# Octave count accepted by the fractal generators (inclusive bounds)
MIN_OCTAVES = 2
MAX_OCTAVES = 30

# Output scale factors applied after the octave sum
PINKNOISE_SCALE = 0.25
BILLOWNOISE_SCALE = 0.25

# Default fractal parameters
DEFAULT_FREQUENCY = 1.0
DEFAULT_PERSISTENCE = 0.5
DEFAULT_LACUNARITY = 2.0
DEFAULT_OCTAVES = 6
DEFAULT_BILLOW_OFFSET = 0.2

# Seeds live in the unsigned 32-bit range; seed + octave wraps around
SEED_MASK = 0xFFFFFFFF

# 2D simplex skew / unskew factors
F2 = 0.5 * (math.sqrt(3.0) - 1.0)
G2 = (3.0 - math.sqrt(3.0)) / 6.0

# Normalises the summed corner contributions to roughly [-1, 1]
SIMPLEX_SCALE_2D = 70.0

# Beyond this magnitude skewed coordinates have no fractional part left
SIMPLEX_MAX_COORD = 2.0 ** 53
