"""
Dense matrix decompositions and the transformations they are built from.

Every entry point allocates its results through the generator of its input,
so the same code serves fixed-size and unbounded containers. None of them
raises for numerical reasons: degeneracy and non-convergence are reported
with DegeneracyWarning / ConvergenceWarning and NaN or Inf propagate.

Transformations:
    compute_householder_reflection, premultiply, post_multiply,
    premultiply_by_transpose, symmetric_schur_decomposition_2by2
Factorizations and solves:
    cholesky_decomposition, rdr_decomposition, back_substitution,
    forward_substitution, solve
Eigenvalues:
    hessenberg_decomposition, francis_qr_step, real_schur_decomposition,
    compute_2by2_eigenvalues, classical_jacobi, rayleigh_quotient,
    rayleigh_quotient_iteration
"""

from pynumerics.matrix_computations.transformations import (
    HouseholderReflection,
    JacobiRotation,
    compute_householder_reflection,
    householder_matrix,
    post_multiply,
    premultiply,
    premultiply_by_transpose,
    symmetric_schur_decomposition_2by2,
)
from pynumerics.matrix_computations._triangular import (
    back_substitution,
    cholesky_decomposition,
    forward_substitution,
    rdr_decomposition,
)
from pynumerics.matrix_computations._lu import solve
from pynumerics.matrix_computations._eigen import (
    classical_jacobi,
    compute_2by2_eigenvalues,
    francis_qr_step,
    hessenberg_decomposition,
    rayleigh_quotient,
    rayleigh_quotient_iteration,
    real_schur_decomposition,
)
from pynumerics.matrix_computations.results import (
    ClassicalJacobiResult,
    HessenbergDecompositionResult,
    RayleighQuotientIterationResult,
    RDRDecompositionResult,
    RealSchurDecompositionResult,
)

__all__ = [
    # Transformations
    "HouseholderReflection",
    "JacobiRotation",
    "compute_householder_reflection",
    "householder_matrix",
    "premultiply",
    "post_multiply",
    "premultiply_by_transpose",
    "symmetric_schur_decomposition_2by2",
    # Factorizations and solves
    "cholesky_decomposition",
    "rdr_decomposition",
    "back_substitution",
    "forward_substitution",
    "solve",
    # Eigenvalues
    "hessenberg_decomposition",
    "francis_qr_step",
    "real_schur_decomposition",
    "compute_2by2_eigenvalues",
    "classical_jacobi",
    "rayleigh_quotient",
    "rayleigh_quotient_iteration",
    # Results
    "RDRDecompositionResult",
    "HessenbergDecompositionResult",
    "RealSchurDecompositionResult",
    "ClassicalJacobiResult",
    "RayleighQuotientIterationResult",
]
