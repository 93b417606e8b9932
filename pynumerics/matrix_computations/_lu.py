"""
Dense linear solve by LU factorization with partial pivoting.
"""

import warnings
from typing import Any

from pynumerics.arrays import generator_for
from pynumerics.core.compute.precision import additive_identity
from pynumerics.core.exceptions import DegeneracyWarning
from pynumerics.matrix_computations._floating_point import silent_floating_point
from pynumerics.matrix_computations._triangular import (
    back_substitution,
    forward_substitution,
)


@silent_floating_point
def solve(A: Any, b: Any) -> Any:
    """
    x with A x = b.

    Doolittle's method writes P A = L U, with the row permutation P applied
    to b as the factorization proceeds (Higham, algorithm 9.2). The pivot of
    column k is the candidate with the largest magnitude among the reduced
    entries A(i, k) - Σⱼ L(i, j) U(j, k), i ≥ k; ties go to the last row.

    A and b are copied; the inputs are not modified. A zero pivot emits a
    DegeneracyWarning and the computation continues, so a singular A gives
    Inf or NaN entries rather than an exception.

    Args:
        A: Square matrix
        b: Right-hand side, of size A.rows

    Returns:
        Solution vector, fixed-size if A and b are both fixed-size
    """
    assert A.rows == A.columns, f"{A.rows}×{A.columns} matrix is not square"
    assert A.rows == b.size, (
        f"{A.rows}×{A.columns} system with right-hand side of size {b.size}"
    )
    A = A.copy()
    b = b.copy()
    n = A.rows
    generator = generator_for(A, b)

    # L and U are kept apart so that each can carry its own scalar type.
    L = generator.lower_triangular(
        n, uninitialized=True, dtype=object if A.dtype == object else None)
    U = generator.upper_triangular(n, uninitialized=True, dtype=A.dtype)
    zero = additive_identity(A.dtype)

    for k in range(n):
        # Partial pivoting.
        r = -1
        largest = abs(zero)
        for i in range(k, n):
            candidate = A[i, k]
            for j in range(k):
                candidate -= L[i, j] * U[j, k]
            if abs(candidate) >= largest:
                r = i
                largest = abs(candidate)
        if r < 0:
            # Every candidate is NaN.
            r = k

        if r != k:
            for j in range(n):
                A[k, j], A[r, j] = A[r, j], A[k, j]
            for j in range(k):
                L[k, j], L[r, j] = L[r, j], L[k, j]
            b[k], b[r] = b[r], b[k]

        for j in range(k, n):
            u_kj = A[k, j]
            for i in range(k):
                u_kj -= L[k, i] * U[i, j]
            U[k, j] = u_kj

        if U[k, k] == zero:
            warnings.warn(
                f"Matrix does not have a unique LU decomposition: "
                f"zero pivot in column {k}",
                DegeneracyWarning,
                stacklevel=3,  # caller of the decorated kernel
            )

        for i in range(k + 1, n):
            l_ik = A[i, k]
            for j in range(k):
                l_ik -= L[i, j] * U[j, k]
            L[i, k] = l_ik / U[k, k]
        L[k, k] = 1

    # L y = P b, then U x = y.
    y = forward_substitution(L, b)
    return back_substitution(U, y)
