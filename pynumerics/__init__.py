"""
PyNumerics: dense numerical linear algebra kernels for Python.

Vectors and matrices come in two representations sharing one set of
algorithms: fixed-size containers whose dimensions are part of their type,
and unbounded containers sized at run time.

Submodules:
    arrays: Containers, views and elementary algebra
    matrix_computations: Householder and Jacobi transformations,
        factorizations, linear solve and eigenvalue algorithms
    dense: NumPy-facing façade returning Result-based solutions
    root_finders: Quadratic equation, bisection and Brent's method
    projection: Incremental orthogonal projection onto a growing basis
"""

__version__ = "0.1.0"

from pynumerics import arrays
from pynumerics import matrix_computations
from pynumerics import dense
from pynumerics import root_finders
from pynumerics import projection

__all__ = [
    "__version__",
    "arrays",
    "matrix_computations",
    "dense",
    "root_finders",
    "projection",
]
