"""
Dense matrix computations on NumPy input.

Validates arrays once, runs the container kernels in a fixed-size or
unbounded representation, and returns DenseSolution objects carrying
timing, warnings and provenance.
"""

from pynumerics.dense.design import DenseDesign
from pynumerics.dense.solution import DenseParams, DenseSolution
from pynumerics.dense.solvers import (
    cholesky,
    hessenberg,
    linear_solve,
    real_eigenvalues,
    symmetric_eigen,
)

__all__ = [
    "DenseDesign",
    "DenseParams",
    "DenseSolution",
    "linear_solve",
    "cholesky",
    "symmetric_eigen",
    "real_eigenvalues",
    "hessenberg",
]
