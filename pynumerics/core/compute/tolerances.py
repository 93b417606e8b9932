"""
Default tolerances and iteration caps.

Every iterative kernel takes its tolerance and cap as keyword arguments;
the defaults live here so the façade, the kernels and the test suite agree.
"""

from pynumerics.core.compute.precision import EPSILON_64


# Classical Jacobi: stop once max |A(p, q)| <= tol * ||A||_F
DEFAULT_JACOBI_TOLERANCE = 4 * EPSILON_64
DEFAULT_JACOBI_MAX_ITERATIONS = 1000

# Real Schur deflation: |H(i, i-1)| <= tol * (|H(i, i)| + |H(i-1, i-1)|)
DEFAULT_SCHUR_TOLERANCE = EPSILON_64

# Francis steps allowed per unit of dimension, with a floor on the dimension
SCHUR_ITERATIONS_PER_DIMENSION = 30
SCHUR_MINIMUM_DIMENSION = 10

# Rayleigh quotient iteration
RAYLEIGH_QUOTIENT_MAX_ITERATIONS = 10
RAYLEIGH_QUOTIENT_RESIDUAL_FACTOR = 2

# Incremental projection: relative Gram defect below which a basis
# element is considered to lie in the span of its predecessors
BASIS_DROP_THRESHOLD = 2.0 ** -24

# The façade's 'auto' representation picks fixed containers up to this size
FIXED_REPRESENTATION_MAX_DIMENSION = 4


def default_schur_max_iterations(dimension: int) -> int:
    """Cap on Francis steps for a matrix of the given dimension."""
    return SCHUR_ITERATIONS_PER_DIMENSION * max(SCHUR_MINIMUM_DIMENSION, dimension)

