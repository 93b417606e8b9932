"""
Solver dispatch for dense matrix computations.

Entry points: linear_solve(), cholesky(), symmetric_eigen(),
real_eigenvalues(), hessenberg().
"""

from __future__ import annotations

from typing import Literal
from numpy.typing import ArrayLike

from pynumerics.core.compute.tolerances import (
    DEFAULT_JACOBI_MAX_ITERATIONS,
    FIXED_REPRESENTATION_MAX_DIMENSION,
)
from pynumerics.core.exceptions import ValidationError
from pynumerics.core.representations import (
    ALL_REPRESENTATIONS,
    REPRESENTATION_AUTO,
    REPRESENTATION_FIXED,
    REPRESENTATION_UNBOUNDED,
)
from pynumerics.core.validation import check_symmetric
from pynumerics.dense.design import DenseDesign
from pynumerics.dense.solution import DenseSolution
from pynumerics.dense.backends.cpu import CPUDenseBackend


RepresentationChoice = Literal['auto', 'fixed', 'unbounded']


def _ensure_design(A: ArrayLike | DenseDesign,
                   b: ArrayLike | None = None) -> DenseDesign:
    """Convert raw arrays to DenseDesign if needed."""
    if isinstance(A, DenseDesign):
        if b is not None:
            return DenseDesign.from_array(A.A, b)
        return A
    return DenseDesign.from_array(A, b)


def _get_backend(representation: RepresentationChoice,
                 design: DenseDesign) -> CPUDenseBackend:
    """Select the container representation for a design."""
    if representation == REPRESENTATION_AUTO:
        if design.n <= FIXED_REPRESENTATION_MAX_DIMENSION:
            return CPUDenseBackend(REPRESENTATION_FIXED)
        return CPUDenseBackend(REPRESENTATION_UNBOUNDED)

    if representation in ALL_REPRESENTATIONS:
        return CPUDenseBackend(representation)

    raise ValidationError(f"Unknown representation: {representation!r}")


def linear_solve(
    A: ArrayLike | DenseDesign,
    b: ArrayLike | None = None,
    *,
    representation: RepresentationChoice = 'auto',
) -> DenseSolution:
    """
    Solve A x = b by LU factorization with partial pivoting.

    Parameters
    ----------
    A : array-like or DenseDesign
        Square matrix, or a design that already carries b.
    b : array-like, optional
        Right-hand side. Required unless A is a DenseDesign with b.
    representation : str
        'auto' (fixed-size containers for n ≤ 4), 'fixed', 'unbounded'.

    Returns
    -------
    DenseSolution with solution populated. A singular A yields Inf/NaN
    entries and a DegeneracyWarning rather than an exception.
    """
    design = _ensure_design(A, b)
    if not design.has_rhs:
        raise ValidationError("linear_solve requires a right-hand side b")
    be = _get_backend(representation, design)
    result = be.solve(design, compute='linear_solve')
    return DenseSolution(_result=result, _design=design)


def cholesky(
    A: ArrayLike | DenseDesign,
    *,
    representation: RepresentationChoice = 'auto',
) -> DenseSolution:
    """
    Upper-triangular R with A = ᵗR R.

    Only the upper triangle of A is read. A matrix that is not positive
    definite gives NaN entries and a recorded warning.
    """
    design = _ensure_design(A)
    be = _get_backend(representation, design)
    result = be.solve(design, compute='cholesky')
    return DenseSolution(_result=result, _design=design)


def symmetric_eigen(
    A: ArrayLike | DenseDesign,
    *,
    max_iterations: int = DEFAULT_JACOBI_MAX_ITERATIONS,
    tol: float | None = None,
    representation: RepresentationChoice = 'auto',
) -> DenseSolution:
    """
    Eigenvalues and eigenvectors of a symmetric matrix (classical Jacobi).

    Parameters
    ----------
    A : array-like or DenseDesign
        Symmetric square matrix.
    max_iterations : int
        Cap on Jacobi rotations; reaching it emits a ConvergenceWarning.
    tol : float, optional
        Off-diagonal threshold relative to ‖A‖_F. Default 4 ε.
    representation : str
        'auto', 'fixed', 'unbounded'.

    Returns
    -------
    DenseSolution with eigenvalues (ascending) and eigenvectors (columns).

    Raises
    ------
    ValidationError
        If A is not symmetric, or max_iterations is not positive.
    """
    design = _ensure_design(A)
    check_symmetric(design.A, 'A')
    if max_iterations < 1:
        raise ValidationError(
            f"max_iterations: expected a positive integer, got {max_iterations}"
        )
    be = _get_backend(representation, design)
    result = be.solve(design, compute='symmetric_eigen',
                      max_iterations=max_iterations, tol=tol)
    return DenseSolution(_result=result, _design=design)


def real_eigenvalues(
    A: ArrayLike | DenseDesign,
    *,
    tol: float | None = None,
    representation: RepresentationChoice = 'auto',
) -> DenseSolution:
    """
    Distinct real eigenvalues of a general square matrix.

    Uses the Hessenberg reduction followed by Francis double-shift QR
    steps. Complex conjugate pairs are omitted.
    """
    design = _ensure_design(A)
    be = _get_backend(representation, design)
    result = be.solve(design, compute='real_eigenvalues', tol=tol)
    return DenseSolution(_result=result, _design=design)


def hessenberg(
    A: ArrayLike | DenseDesign,
    *,
    representation: RepresentationChoice = 'auto',
) -> DenseSolution:
    """Upper-Hessenberg matrix orthogonally similar to A."""
    design = _ensure_design(A)
    be = _get_backend(representation, design)
    result = be.solve(design, compute='hessenberg')
    return DenseSolution(_result=result, _design=design)
