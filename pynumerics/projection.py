"""
Orthogonal projection onto a basis that grows on demand.

The projection follows Kudryavtsev (2007), section 2: the basis is
orthonormalized incrementally (a Gram-Schmidt process whose coefficients α
are kept in a lower-triangular matrix), so that adding elements never
requires redoing the work already done. Elements are any values supporting
`+`, `-` and multiplication by a float (NumPy arrays of samples, series
objects); the inner product is supplied by the caller.
"""

import warnings
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Sequence

from pynumerics.arrays import UnboundedLowerTriangularMatrix, UnboundedVector
from pynumerics.core.compute.precision import sqrt
from pynumerics.core.compute.tolerances import BASIS_DROP_THRESHOLD
from pynumerics.core.exceptions import DegeneracyWarning, ValidationError

BasisCalculator = Callable[[Any], Iterable[Any] | None]
InnerProduct = Callable[[Any, Any], Any]


@dataclass(frozen=True)
class ProjectionResult:
    """
    Attributes:
        coefficients: Coordinates of the projection in `basis`
        basis: Elements retained, in order; dropped elements are absent
        residual: function minus its projection
    """
    coefficients: UnboundedVector
    basis: tuple
    residual: Any

    @property
    def approximation(self) -> Any:
        """Σᵢ coefficients[i] basis[i]."""
        result = self.coefficients[0] * self.basis[0]
        for i in range(1, len(self.basis)):
            result = result + self.coefficients[i] * self.basis[i]
        return result


def incremental_projection(
    function: Any,
    basis_calculator: BasisCalculator,
    dot: InnerProduct,
) -> ProjectionResult:
    """
    Project `function` onto a basis extended until the calculator stops.

    basis_calculator is called with the function, then with the residual
    after each round of projection; it returns the elements to append, or
    None to stop. A new element whose Gram defect is negative or below
    BASIS_DROP_THRESHOLD relative to its norm lies numerically in the span
    of its predecessors; it is dropped with a DegeneracyWarning.

    Args:
        function: Value to project
        basis_calculator: residual -> new basis elements, or None
        dot: Inner product of two values

    Returns:
        ProjectionResult

    Raises:
        ValidationError: If the calculator supplies no initial basis
    """
    initial = basis_calculator(function)
    basis = [] if initial is None else list(initial)
    if not basis:
        raise ValidationError("basis_calculator returned no initial basis")
    basis_size = len(basis)

    alpha = UnboundedLowerTriangularMatrix(basis_size, uninitialized=True)

    # Only indices 0 to m - 1 are used in this vector. At the beginning of
    # iteration m it contains the coefficients of the projection onto the
    # first m elements.
    A = UnboundedVector(basis_size, uninitialized=True)

    F0 = dot(function, basis[0])
    Q00 = dot(basis[0], basis[0])
    alpha[0, 0] = 1 / sqrt(Q00)
    A[0] = F0 / Q00

    # At the beginning of iteration m this is the residual of the projection
    # onto the first m elements.
    f = function - A[0] * basis[0]

    m_begin = 1
    while True:
        m = m_begin
        while m < basis_size:
            F = dot(f, basis[m])
            Q = [dot(basis[m], basis[j]) for j in range(m + 1)]

            B = UnboundedVector(m, uninitialized=True)
            for j in range(m):
                sum_alpha_js_Q_s = 0.0
                for s in range(j + 1):
                    sum_alpha_js_Q_s += alpha[j, s] * Q[s]
                B[j] = -sum_alpha_js_Q_s

            sum_B_squared = B.norm2()
            Q_m = Q[m]
            if (Q_m <= sum_B_squared or
                    (Q_m - sum_B_squared) / max(Q_m, sum_B_squared)
                    < BASIS_DROP_THRESHOLD):
                warnings.warn(
                    f"Dropping basis element {m}: Q[m] = {Q_m}, "
                    f"Σ B² = {sum_B_squared}, "
                    f"difference = {Q_m - sum_B_squared}",
                    DegeneracyWarning,
                    stacklevel=2,
                )
                remaining = basis_size - m - 1
                del basis[m]
                alpha.erase_to_end(m)
                alpha.extend(remaining, uninitialized=True)
                A.erase_to_end(m)
                A.extend(remaining, uninitialized=True)
                basis_size -= 1
                continue

            alpha[m, m] = 1 / sqrt(Q_m - sum_B_squared)
            for j in range(m):
                sum_B_s_alpha_sj = 0.0
                for s in range(j, m):
                    sum_B_s_alpha_sj += B[s] * alpha[s, j]
                alpha[m, j] = alpha[m, m] * sum_B_s_alpha_sj

            A[m] = alpha[m, m] * alpha[m, m] * F
            for j in range(m):
                A[j] += alpha[m, m] * alpha[m, j] * F

            orthonormal_m = alpha[m, 0] * basis[0]
            for i in range(1, m + 1):
                orthonormal_m = orthonormal_m + alpha[m, i] * basis[i]
            f = f - alpha[m, m] * F * orthonormal_m
            m += 1

        extension = basis_calculator(f)
        if extension is None:
            return ProjectionResult(coefficients=A, basis=tuple(basis),
                                    residual=f)
        extension = list(extension)
        basis.extend(extension)
        alpha.extend(len(extension), uninitialized=True)
        A.extend(len(extension), uninitialized=True)
        m_begin = basis_size
        basis_size += len(extension)


def projection(
    function: Any,
    basis: Sequence[Any],
    dot: InnerProduct,
) -> ProjectionResult:
    """Project `function` onto a fixed basis in a single round."""
    pending = [list(basis)]

    def calculator(residual: Any):
        return pending.pop() if pending else None

    return incremental_projection(function, calculator, dot)
