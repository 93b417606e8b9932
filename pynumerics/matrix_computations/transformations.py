"""
Elementary orthogonal transformations.

HouseholderReflection  I - β v ᵗv, built to zero all but the first entry of a
                       vector (Golub & Van Loan, section 5.1.3)
JacobiRotation         J(p, q, θ), the identity with a 2×2 rotation embedded at
                       rows and columns p, q (Golub & Van Loan, section 8.5.1)

Neither is ever materialized. Applying a reflection costs O(rows · columns)
and applying a rotation touches only two rows or two columns.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from pynumerics.arrays import TransposedView, UnboundedVector, normalize
from pynumerics.core.compute.precision import scalar_converter
from pynumerics.matrix_computations._floating_point import silent_floating_point


@dataclass(frozen=True)
class HouseholderReflection:
    v: UnboundedVector
    beta: float


@dataclass(frozen=True)
class JacobiRotation:
    cos: float
    sin: float
    p: int
    q: int


@silent_floating_point
def compute_householder_reflection(x: Any) -> HouseholderReflection:
    """
    Reflection P with P x parallel to the first unit vector.

    x is normalized first, which makes the algorithm independent of the
    scale (and unit) of its entries and fixes μ = ‖x‖ = 1. The sign choice
    for v₁ avoids cancellation. v is scaled so that v₁ = 1.

    When the entries after the first vanish, P is the identity (β = 0) for
    x₁ ≥ 0 and the reflection of the first coordinate (β = 2) for x₁ < 0;
    Golub & Van Loan write β = -2 there, which does not give an orthogonal P.
    A zero x yields the identity.

    v and β are float64 whatever the scalar type of x; they are converted
    to the scalar type of the matrix they are applied to.
    """
    if x.norm() == 0:
        v = UnboundedVector(x.size)
        v[0] = 1
        return HouseholderReflection(v=v, beta=0.0)

    v = UnboundedVector(normalize(x), dtype=np.float64)
    x1 = v[0]
    trailing = v.copy()
    trailing[0] = 0
    sigma = trailing.norm2()
    v[0] = 1
    if sigma == 0:
        beta = 2.0 if x1 < 0 else 0.0
        return HouseholderReflection(v=v, beta=beta)

    mu = 1
    if x1 <= 0:
        v1 = x1 - mu
    else:
        v1 = -sigma / (x1 + mu)
    v1_squared = v1 * v1
    beta = float(2 * v1_squared / (sigma + v1_squared))
    v[0] = v1
    v /= v1
    return HouseholderReflection(v=v, beta=beta)


@silent_floating_point
def symmetric_schur_decomposition_2by2(A: Any, p: int, q: int) -> JacobiRotation:
    """
    Rotation diagonalizing the symmetric 2×2 submatrix of A at rows and
    columns p < q (Golub & Van Loan, algorithm 8.5.1).

    Uses the τ, t formulation rather than an arctangent; t is the smaller
    root of t² + 2τt - 1 = 0, so |θ| ≤ π/4.
    """
    assert 0 <= p < q < A.rows, f"invalid rotation plane ({p}, {q})"
    if A[p, q] != 0:
        tau = float((A[q, q] - A[p, p]) / (2 * A[p, q]))
        if tau >= 0:
            t = 1 / (tau + np.sqrt(1 + tau * tau))
        else:
            t = 1 / (tau - np.sqrt(1 + tau * tau))
        c = 1 / np.sqrt(1 + t * t)
        s = t * c
    else:
        c = 1.0
        s = 0.0
    return JacobiRotation(cos=float(c), sin=float(s), p=p, q=q)


def premultiply(P: Any, A: Any) -> None:
    """A becomes P A, in place."""
    if isinstance(P, JacobiRotation):
        _rotate_rows(A, P.cos, P.sin, P.p, P.q)
        return
    v, beta = _reflection_in_scalar_type_of(P, A)
    # A -= β v ᵗ(ᵗA v), without forming P.
    transposed_A_v = TransposedView(A) * v
    A -= (beta * v) * TransposedView(transposed_A_v)


def premultiply_by_transpose(J: JacobiRotation, A: Any) -> None:
    """A becomes ᵗJ A, in place."""
    _rotate_rows(A, J.cos, -J.sin, J.p, J.q)


def post_multiply(A: Any, P: Any) -> None:
    """A becomes A P, in place."""
    if isinstance(P, JacobiRotation):
        convert = scalar_converter(A)
        c, s, p, q = convert(P.cos), convert(P.sin), P.p, P.q
        for i in range(A.rows):
            tau1 = A[i, p]
            tau2 = A[i, q]
            A[i, p] = c * tau1 - s * tau2
            A[i, q] = s * tau1 + c * tau2
        return
    v, beta = _reflection_in_scalar_type_of(P, A)
    # A -= (A v) ᵗ(β v)
    A -= (A * v) * TransposedView(beta * v)


def _reflection_in_scalar_type_of(P: HouseholderReflection, A: Any) -> tuple:
    convert = scalar_converter(A)
    if A.dtype == P.v.dtype:
        return P.v, convert(P.beta)
    v = UnboundedVector([convert(entry) for entry in P.v], dtype=A.dtype)
    return v, convert(P.beta)


def _rotate_rows(A: Any, c: float, s: float, p: int, q: int) -> None:
    convert = scalar_converter(A)
    c = convert(c)
    s = convert(s)
    for j in range(A.columns):
        tau1 = A[p, j]
        tau2 = A[q, j]
        A[p, j] = c * tau1 + s * tau2
        A[q, j] = -s * tau1 + c * tau2


def householder_matrix(P: HouseholderReflection, generator: Any) -> Any:
    """
    I - β v ᵗv as a dense matrix.

    Only for inspection and tests; the algorithms never form it.
    """
    n = P.v.size
    result = generator.identity(n, n)
    result -= (P.beta * P.v) * TransposedView(P.v)
    return result
