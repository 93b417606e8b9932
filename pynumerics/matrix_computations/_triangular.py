"""
Symmetric factorizations and triangular solves.

The factorizations read only the upper triangle of a symmetric matrix,
stored in an upper-triangular container. None of these functions raises for
numerical reasons: a matrix that is not positive definite gives NaN, a zero
pivot gives Inf or NaN, and the caller inspects the result.
"""

from typing import Any

from pynumerics.arrays import generator_for
from pynumerics.core.compute.precision import sqrt, additive_identity
from pynumerics.matrix_computations._floating_point import silent_floating_point
from pynumerics.matrix_computations.results import RDRDecompositionResult


@silent_floating_point
def cholesky_decomposition(A: Any) -> Any:
    """
    Upper-triangular R with A = ᵗR R (Higham, algorithm 10.2).

    Args:
        A: Symmetric positive-definite matrix, upper triangle stored

    Returns:
        Upper-triangular matrix of the same representation and dtype as A.
        NaN entries appear from the first non-positive pivot on if A is not
        positive definite.
    """
    n = A.columns
    zero = additive_identity(A.dtype)
    R = generator_for(A).upper_triangular(n, uninitialized=True, dtype=A.dtype)
    for j in range(n):
        for i in range(j):
            sum_rki_rkj = zero
            for k in range(i):
                sum_rki_rkj += R[k, i] * R[k, j]
            R[i, j] = (A[i, j] - sum_rki_rkj) / R[i, i]
        sum_rkj_squared = zero
        for k in range(j):
            sum_rkj_squared += R[k, j] * R[k, j]
        R[j, j] = sqrt(A[j, j] - sum_rkj_squared)
    return R


@silent_floating_point
def rdr_decomposition(A: Any) -> RDRDecompositionResult:
    """
    A = ᵗR D R with R unit upper-triangular and D diagonal.

    Follows formulæ (10) and (11) of Kaas-Petersen & Mathiesen (2013). This
    is the square-root-free relative of the Cholesky decomposition and also
    applies to symmetric indefinite matrices with nonzero leading minors.

    Args:
        A: Symmetric matrix, upper triangle stored

    Returns:
        RDRDecompositionResult with R (unit diagonal, float unless A holds
        objects) and the vector D of A's dtype. A zero D[i] propagates
        Inf/NaN into row i of R.
    """
    n = A.columns
    zero = additive_identity(A.dtype)
    generator = generator_for(A)
    R = generator.upper_triangular(
        n, uninitialized=True, dtype=object if A.dtype == object else None)
    D = generator.vector(n, uninitialized=True, dtype=A.dtype)
    for i in range(n):
        sum_rki_squared_dk = zero
        for k in range(i):
            sum_rki_squared_dk += R[k, i] * R[k, i] * D[k]
        D[i] = A[i, i] - sum_rki_squared_dk
        for j in range(i + 1, n):
            sum_rki_rkj_dk = zero
            for k in range(i):
                sum_rki_rkj_dk += R[k, i] * R[k, j] * D[k]
            R[i, j] = (A[i, j] - sum_rki_rkj_dk) / D[i]
        R[i, i] = 1
    return RDRDecompositionResult(R=R, D=D)


@silent_floating_point
def back_substitution(U: Any, b: Any) -> Any:
    """
    x with U x = b for upper-triangular U (Higham, algorithm 8.1).

    The result is allocated through the generator of U and b.
    """
    n = b.size
    assert U.columns == n, f"{U.rows}×{U.columns} system with {n} right-hand sides"
    x = generator_for(U, b).vector(n, uninitialized=True,
                                   dtype=_result_dtype(U, b))
    if n == 0:
        return x
    last = n - 1
    x[last] = b[last] / U[last, last]
    for i in range(last - 1, -1, -1):
        s = b[i]
        for j in range(i + 1, n):
            s -= U[i, j] * x[j]
        x[i] = s / U[i, i]
    return x


@silent_floating_point
def forward_substitution(L: Any, b: Any) -> Any:
    """x with L x = b for lower-triangular L."""
    n = b.size
    assert L.rows == n, f"{L.rows}×{L.columns} system with {n} right-hand sides"
    x = generator_for(L, b).vector(n, uninitialized=True,
                                   dtype=_result_dtype(L, b))
    if n == 0:
        return x
    x[0] = b[0] / L[0, 0]
    for i in range(1, n):
        s = b[i]
        for j in range(i):
            s -= L[i, j] * x[j]
        x[i] = s / L[i, i]
    return x


def _result_dtype(matrix: Any, vector: Any):
    if matrix.dtype == object or vector.dtype == object:
        return object
    return None
