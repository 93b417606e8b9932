"""
Eigenvalue algorithms.

hessenberg_decomposition      Householder reduction to upper-Hessenberg form
francis_qr_step               one implicit double-shift QR step
real_schur_decomposition      deflating Francis iteration, real eigenvalues
classical_jacobi              symmetric eigen-decomposition by rotations
rayleigh_quotient_iteration   refinement of one eigenpair

Golub & Van Loan, Matrix Computations, 4th edition, chapters 7 and 8.
"""

import math
import warnings
from typing import Any

from pynumerics.arrays import (
    BlockView,
    ColumnView,
    FixedVector,
    TransposedView,
    generator_for,
)
from pynumerics.core.compute.precision import (
    EPSILON_64,
    additive_identity,
    scalar_converter,
)
from pynumerics.core.compute.tolerances import (
    DEFAULT_JACOBI_MAX_ITERATIONS,
    DEFAULT_JACOBI_TOLERANCE,
    DEFAULT_SCHUR_TOLERANCE,
    RAYLEIGH_QUOTIENT_MAX_ITERATIONS,
    RAYLEIGH_QUOTIENT_RESIDUAL_FACTOR,
    default_schur_max_iterations,
)
from pynumerics.core.exceptions import ConvergenceWarning, DegeneracyWarning
from pynumerics.matrix_computations._floating_point import silent_floating_point
from pynumerics.matrix_computations._lu import solve
from pynumerics.matrix_computations.results import (
    ClassicalJacobiResult,
    HessenbergDecompositionResult,
    RayleighQuotientIterationResult,
    RealSchurDecompositionResult,
)
from pynumerics.matrix_computations.transformations import (
    compute_householder_reflection,
    post_multiply,
    premultiply,
    premultiply_by_transpose,
    symmetric_schur_decomposition_2by2,
)
from pynumerics.root_finders import solve_quadratic_equation


def compute_2by2_eigenvalues(block: Any) -> tuple:
    """
    Real eigenvalues of a 2×2 block, sorted and without repetition.

    The roots of λ² - (a + d) λ + (ad - bc); a complex pair gives ().
    """
    a = block[0, 0]
    b = block[0, 1]
    c = block[1, 0]
    d = block[1, 1]
    solutions = solve_quadratic_equation(0, a * d - b * c, -a - d, 1)
    return tuple(sorted(set(solutions)))


@silent_floating_point
def francis_qr_step(H: Any) -> None:
    """
    One Francis implicit double-shift QR step on H, in place.

    Golub & Van Loan, algorithm 7.5.1: the shifts are the eigenvalues of the
    trailing 2×2 block, the first column of H² - sH + tI seeds a 3-element
    Householder bulge that is chased down the subdiagonal, and a 2-element
    reflection closes the step. H must be unreduced upper Hessenberg with
    at least 2 rows. The orthogonal transformation is not accumulated.
    """
    n = H.rows
    assert n >= 2, "Francis step needs at least a 2×2 matrix"
    m = n - 1
    s = H[m - 1, m - 1] + H[n - 1, n - 1]
    t = H[m - 1, m - 1] * H[n - 1, n - 1] - H[m - 1, n - 1] * H[n - 1, m - 1]
    x = H[0, 0] * H[0, 0] + H[0, 1] * H[1, 0] - s * H[0, 0] + t
    y = H[1, 0] * (H[0, 0] + H[1, 1] - s)
    z = H[1, 0] * H[2, 1] if n > 2 else additive_identity(H.dtype)

    for k in range(n - 2):
        P = compute_householder_reflection(FixedVector[3]([x, y, z]))
        q = max(1, k)
        premultiply(P, BlockView(matrix=H,
                                 first_row=k,
                                 last_row=k + 2,
                                 first_column=q - 1,
                                 last_column=n - 1))
        r = min(k + 4, n)
        post_multiply(BlockView(matrix=H,
                                first_row=0,
                                last_row=r - 1,
                                first_column=k,
                                last_column=k + 2), P)
        x = H[k + 1, k]
        y = H[k + 2, k]
        if k < n - 3:
            z = H[k + 3, k]

    P = compute_householder_reflection(FixedVector[2]([x, y]))
    premultiply(P, BlockView(matrix=H,
                             first_row=n - 2,
                             last_row=n - 1,
                             first_column=max(0, n - 3),
                             last_column=n - 1))
    post_multiply(BlockView(matrix=H,
                            first_row=0,
                            last_row=n - 1,
                            first_column=n - 2,
                            last_column=n - 1), P)


@silent_floating_point
def hessenberg_decomposition(A: Any) -> HessenbergDecompositionResult:
    """
    Upper-Hessenberg H similar to A (Golub & Van Loan, algorithm 7.4.2).

    n - 2 Householder reflections, each applied to the rows below and the
    columns right of the column it clears. Entries below the subdiagonal
    are only zero up to rounding. A is not modified.
    """
    assert A.rows == A.columns, f"{A.rows}×{A.columns} matrix is not square"
    H = A.copy()
    n = H.rows
    for k in range(n - 2):
        P = compute_householder_reflection(
            ColumnView(matrix=H, first_row=k + 1, last_row=n - 1, column=k))
        premultiply(P, BlockView(matrix=H,
                                 first_row=k + 1,
                                 last_row=n - 1,
                                 first_column=k,
                                 last_column=n - 1))
        post_multiply(BlockView(matrix=H,
                                first_row=0,
                                last_row=n - 1,
                                first_column=k + 1,
                                last_column=n - 1), P)
    return HessenbergDecompositionResult(H=H)


@silent_floating_point
def real_schur_decomposition(
    A: Any,
    epsilon: float = DEFAULT_SCHUR_TOLERANCE,
    max_iterations: int | None = None,
) -> RealSchurDecompositionResult:
    """
    Quasi-upper-triangular form and real eigenvalues of A.

    Golub & Van Loan, algorithm 7.5.2. Starting from the Hessenberg form,
    each pass zeroes the subdiagonal entries with
    |H(i, i-1)| ≤ ε (|H(i, i)| + |H(i-1, i-1)|), finds the largest trailing
    quasi-triangular block (q rows), stops if it covers the matrix, and
    otherwise applies one Francis step to the unreduced block just above it.

    The Francis steps are applied to the active block only, so the
    off-diagonal blocks of T are not those of a Schur form of A; the
    diagonal blocks, and therefore the eigenvalues, are.

    Args:
        A: Square matrix
        epsilon: Deflation tolerance
        max_iterations: Cap on Francis steps, 30·max(10, n) by default;
            reaching it emits a ConvergenceWarning

    Returns:
        RealSchurDecompositionResult. Real eigenvalues come from the 1×1
        diagonal blocks and from the 2×2 blocks whose characteristic
        polynomial has real roots; complex pairs are omitted.
        When the cap is reached, only the deflated trailing rows contribute.
    """
    H = hessenberg_decomposition(A).H
    n = H.rows
    zero = additive_identity(H.dtype)
    epsilon = scalar_converter(H)(epsilon)
    if max_iterations is None:
        max_iterations = default_schur_max_iterations(n)

    iterations = 0
    while True:
        for i in range(1, n):
            if abs(H[i, i - 1]) <= epsilon * (abs(H[i, i]) + abs(H[i - 1, i - 1])):
                H[i, i - 1] = zero

        # Upper quasi-triangular means no two consecutive nonzero
        # subdiagonal entries, ending on a zero.
        has_subdiagonal_element = False
        q = 0
        for i in range(1, n + 1):
            # i == n is a zero sentinel left of the first diagonal entry.
            if i == n or H[n - i, n - i - 1] == zero:
                q = i
                has_subdiagonal_element = False
            elif has_subdiagonal_element:
                break
            else:
                has_subdiagonal_element = True

        if q == n:
            break
        if iterations >= max_iterations:
            warnings.warn(
                f"Real Schur decomposition did not converge in "
                f"{iterations} Francis steps; {n - q} rows are not deflated",
                ConvergenceWarning,
                stacklevel=3,  # caller of the decorated kernel
            )
            break

        p = n - q - 1
        while p > 0:
            if H[p, p - 1] == zero:
                break
            p -= 1

        francis_qr_step(BlockView(matrix=H,
                                  first_row=p,
                                  last_row=n - q - 1,
                                  first_column=p,
                                  last_column=n - q - 1))
        iterations += 1

    # A 2×2 block may have real roots too. Rows above the deflated trailing
    # block are only present when the iteration did not converge.
    real_eigenvalues = set()
    first = n - q
    i = first
    while i < n:
        if i == n - 1:
            if i == first or H[i, i - 1] == zero:
                real_eigenvalues.add(H[i, i])
            break
        if H[i + 1, i] == zero:
            real_eigenvalues.add(H[i, i])
            i += 1
            continue
        block = BlockView(matrix=H,
                          first_row=i,
                          last_row=i + 1,
                          first_column=i,
                          last_column=i + 1)
        real_eigenvalues.update(compute_2by2_eigenvalues(block))
        # The block is processed on its first index.
        i += 2

    return RealSchurDecompositionResult(
        T=H, real_eigenvalues=tuple(sorted(real_eigenvalues)))


@silent_floating_point
def classical_jacobi(
    A: Any,
    max_iterations: int = DEFAULT_JACOBI_MAX_ITERATIONS,
    epsilon: float = DEFAULT_JACOBI_TOLERANCE,
) -> ClassicalJacobiResult:
    """
    Eigen-decomposition of a symmetric matrix (Golub & Van Loan,
    algorithm 8.5.2).

    Each iteration scans for the off-diagonal entry of largest magnitude
    (the last one on ties) and annihilates it with a Jacobi rotation. The
    iteration stops once that entry is at most ε ‖A‖_F. Hitting
    max_iterations emits a ConvergenceWarning and returns the current
    iterate.

    Returns:
        ClassicalJacobiResult with the float rotation V and the eigenvalues
        (A's dtype) such that V diag(eigenvalues) ᵗV ≈ A
    """
    assert A.rows == A.columns, f"{A.rows}×{A.columns} matrix is not square"
    generator = generator_for(A)
    n = A.rows
    zero = additive_identity(A.dtype)
    V = generator.identity(n, n)
    threshold = scalar_converter(A)(epsilon) * A.frobenius_norm()
    diagonalized_A = A.copy()

    for k in range(max_iterations):
        max_Apq = abs(zero)
        max_p = -1
        max_q = -1

        # Find the largest off-diagonal element and exit if it's small.
        for p in range(n):
            for q in range(p + 1, n):
                abs_Apq = abs(diagonalized_A[p, q])
                if abs_Apq >= max_Apq:
                    max_Apq = abs_Apq
                    max_p = p
                    max_q = q
        if max_Apq <= threshold:
            break

        J = symmetric_schur_decomposition_2by2(diagonalized_A, max_p, max_q)

        # A = ᵗJ A J
        post_multiply(diagonalized_A, J)
        premultiply_by_transpose(J, diagonalized_A)

        # V = V J
        post_multiply(V, J)
        if k == max_iterations - 1:
            warnings.warn(
                f"Difficult diagonalization: largest off-diagonal entry "
                f"{max_Apq} after {max_iterations} rotations",
                ConvergenceWarning,
                stacklevel=3,  # caller of the decorated kernel
            )

    eigenvalues = generator.vector(n, uninitialized=True, dtype=A.dtype)
    for i in range(n):
        eigenvalues[i] = diagonalized_A[i, i]
    return ClassicalJacobiResult(rotation=V, eigenvalues=eigenvalues)


def rayleigh_quotient(A: Any, x: Any) -> Any:
    """ᵗx A x / ᵗx x (Golub & Van Loan, section 8.2.3)."""
    return TransposedView(x) * (A * x) / (TransposedView(x) * x)


@silent_floating_point
def rayleigh_quotient_iteration(A: Any, x: Any) -> RayleighQuotientIterationResult:
    """
    Eigenpair of A near the initial guess x (Golub & Van Loan, section 8.2.3).

    At most RAYLEIGH_QUOTIENT_MAX_ITERATIONS inverse iterations shifted by
    the Rayleigh quotient. Converged when ‖(A - μI) x‖ falls below a small
    multiple of machine epsilon. Otherwise, or when A - μI is singular to
    working precision so that no further iterate can be formed, a
    ConvergenceWarning is emitted and the last iterate returned.
    """
    x_k = x / x.norm()
    mu_k = None
    for _ in range(RAYLEIGH_QUOTIENT_MAX_ITERATIONS):
        mu_k = rayleigh_quotient(A, x_k)
        A_minus_mu_k_I = A.copy()
        for i in range(A.rows):
            A_minus_mu_k_I[i, i] -= mu_k
        residual = (A_minus_mu_k_I * x_k).norm()
        # TODO: scale the convergence threshold by a norm of A.
        if residual < RAYLEIGH_QUOTIENT_RESIDUAL_FACTOR * EPSILON_64:
            return RayleighQuotientIterationResult(eigenvector=x_k,
                                                   eigenvalue=mu_k)
        with warnings.catch_warnings():
            # A zero pivot is detected below through the solution norm.
            warnings.simplefilter('ignore', DegeneracyWarning)
            z_k_plus_1 = solve(A_minus_mu_k_I, x_k)
        z_norm = z_k_plus_1.norm()
        if not 0 < z_norm < math.inf:
            warnings.warn(
                f"Rayleigh quotient iteration stopped: A - μI is singular "
                f"to working precision at μ = {mu_k}",
                ConvergenceWarning,
                stacklevel=3,  # caller of the decorated kernel
            )
            return RayleighQuotientIterationResult(eigenvector=x_k,
                                                   eigenvalue=mu_k)
        x_k = z_k_plus_1 / z_norm

    warnings.warn(
        f"Unconverged Rayleigh quotient iteration after "
        f"{RAYLEIGH_QUOTIENT_MAX_ITERATIONS} iterations",
        ConvergenceWarning,
        stacklevel=3,  # caller of the decorated kernel
    )
    return RayleighQuotientIterationResult(eigenvector=x_k, eigenvalue=mu_k)
