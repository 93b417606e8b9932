"""
Tests for the eigenvalue algorithms.

Reference values come from numpy.linalg.
"""

import warnings
from decimal import Decimal

import numpy as np
import pytest

from pynumerics.arrays import FixedMatrix, FixedVector, UnboundedMatrix, UnboundedVector
from pynumerics.core.exceptions import ConvergenceWarning, NumericsWarning
from pynumerics.matrix_computations import (
    classical_jacobi,
    compute_2by2_eigenvalues,
    francis_qr_step,
    hessenberg_decomposition,
    rayleigh_quotient,
    rayleigh_quotient_iteration,
    real_schur_decomposition,
)


@pytest.fixture
def real_spectrum_matrix(rng):
    """Non-symmetric 5×5 matrix with eigenvalues 1, 2, 3, 4, 5."""
    S = rng.standard_normal((5, 5)) + 5 * np.eye(5)
    return S @ np.diag([1.0, 2.0, 3.0, 4.0, 5.0]) @ np.linalg.inv(S)


@pytest.fixture
def decimal_symmetric():
    """3×3 symmetric matrix of Decimals and its float counterpart."""
    A = np.array([[4.0, 1.0, 2.0],
                  [1.0, 3.0, 1.0],
                  [2.0, 1.0, 5.0]])
    return UnboundedMatrix([[Decimal(int(v)) for v in row] for row in A],
                           dtype=object), A


def _sorted_eigenvalues(A):
    return np.sort_complex(np.linalg.eigvals(A))


# ═══════════════════════════════════════════════════════════════════════
# 2×2 blocks
# ═══════════════════════════════════════════════════════════════════════


class TestTwoByTwoEigenvalues:

    def test_distinct_real(self):
        result = compute_2by2_eigenvalues(FixedMatrix[2, 2]([[2, 1], [1, 2]]))
        np.testing.assert_allclose(result, (1.0, 3.0))

    def test_double(self):
        assert compute_2by2_eigenvalues(FixedMatrix[2, 2]([[1, 1], [0, 1]])) == (1.0,)

    def test_complex_pair(self):
        assert compute_2by2_eigenvalues(FixedMatrix[2, 2]([[0, -1], [1, 0]])) == ()


# ═══════════════════════════════════════════════════════════════════════
# Hessenberg and Francis
# ═══════════════════════════════════════════════════════════════════════


class TestHessenberg:

    def test_structure(self, rng):
        A = rng.standard_normal((6, 6))
        H = hessenberg_decomposition(UnboundedMatrix(A)).H.to_numpy()
        np.testing.assert_allclose(np.tril(H, k=-2), 0.0, atol=1e-13)

    def test_similarity_invariants(self, rng):
        A = rng.standard_normal((6, 6))
        H = hessenberg_decomposition(UnboundedMatrix(A)).H.to_numpy()
        assert np.trace(H) == pytest.approx(np.trace(A))
        assert np.linalg.det(H) == pytest.approx(np.linalg.det(A))
        assert np.linalg.norm(H) == pytest.approx(np.linalg.norm(A))

    def test_input_unchanged(self, rng):
        A = UnboundedMatrix(rng.standard_normal((4, 4)))
        before = A.to_numpy()
        hessenberg_decomposition(A)
        np.testing.assert_array_equal(A.to_numpy(), before)

    def test_fixed_representation(self):
        A = FixedMatrix[3, 3]([[1, 2, 3], [4, 5, 6], [7, 8, 10]])
        H = hessenberg_decomposition(A).H
        assert type(H) is FixedMatrix[3, 3]
        assert abs(H[2, 0]) < 1e-13

    def test_decimal_entries(self, decimal_symmetric):
        A, reference = decimal_symmetric
        H = hessenberg_decomposition(A).H
        assert isinstance(H[1, 1], Decimal)
        assert abs(H[2, 0]) < Decimal("1e-14")
        np.testing.assert_allclose(
            np.sort(np.linalg.eigvals(H.to_numpy().astype(np.float64)).real),
            np.linalg.eigvalsh(reference), rtol=1e-10)


class TestFrancisStep:

    def test_preserves_eigenvalues(self, rng):
        A = rng.standard_normal((5, 5))
        H = hessenberg_decomposition(UnboundedMatrix(A)).H
        before = H.to_numpy()
        francis_qr_step(H)
        after = H.to_numpy()
        np.testing.assert_allclose(_sorted_eigenvalues(after),
                                   _sorted_eigenvalues(before), atol=1e-10)
        np.testing.assert_allclose(np.tril(after, k=-2), 0.0, atol=1e-12)

    def test_two_by_two(self):
        H = UnboundedMatrix([[1, 2], [3, 4]])
        francis_qr_step(H)
        assert np.trace(H.to_numpy()) == pytest.approx(5.0)
        assert np.linalg.det(H.to_numpy()) == pytest.approx(-2.0)


# ═══════════════════════════════════════════════════════════════════════
# Real Schur
# ═══════════════════════════════════════════════════════════════════════


class TestRealSchur:

    def test_symmetric(self, symmetric_matrix):
        result = real_schur_decomposition(UnboundedMatrix(symmetric_matrix))
        np.testing.assert_allclose(result.real_eigenvalues,
                                   np.linalg.eigvalsh(symmetric_matrix),
                                   rtol=1e-8, atol=1e-10)

    def test_non_symmetric_real_spectrum(self, real_spectrum_matrix):
        result = real_schur_decomposition(UnboundedMatrix(real_spectrum_matrix))
        np.testing.assert_allclose(result.real_eigenvalues,
                                   [1.0, 2.0, 3.0, 4.0, 5.0], rtol=1e-8)

    def test_complex_pair_omitted(self):
        result = real_schur_decomposition(UnboundedMatrix([[0, -1], [1, 0]]))
        assert result.real_eigenvalues == ()

    def test_mixed_spectrum(self):
        # Rotation block (eigenvalues ±i) plus a real eigenvalue 2.
        A = np.array([[0.0, -1.0, 0.0],
                      [1.0, 0.0, 0.0],
                      [0.0, 0.0, 2.0]])
        result = real_schur_decomposition(UnboundedMatrix(A))
        np.testing.assert_allclose(result.real_eigenvalues, [2.0])

    def test_repeated_eigenvalues_reported_once(self):
        result = real_schur_decomposition(UnboundedMatrix(np.diag([2.0, 1.0, 2.0])))
        assert result.real_eigenvalues == (1.0, 2.0)

    def test_sorted(self):
        result = real_schur_decomposition(FixedMatrix[3, 3](np.diag([3.0, 1.0, 2.0])))
        assert result.real_eigenvalues == (1.0, 2.0, 3.0)

    def test_iteration_cap_warns(self, rng):
        A = UnboundedMatrix(rng.standard_normal((5, 5)))
        with pytest.warns(ConvergenceWarning, match="did not converge"):
            real_schur_decomposition(A, max_iterations=0)

    def test_stalled_iteration_reports_only_deflated_rows(self):
        # Francis steps cycle on the 3×3 cyclic permutation, so that block
        # never deflates; the trailing 1×1 block does.
        A = np.zeros((4, 4))
        A[:3, :3] = [[0, 0, 1],
                     [1, 0, 0],
                     [0, 1, 0]]
        A[3, 3] = 2.0
        with pytest.warns(ConvergenceWarning, match="3 rows are not deflated"):
            result = real_schur_decomposition(UnboundedMatrix(A))
        assert result.real_eigenvalues == (2.0,)

    def test_stalled_iteration_reports_nothing_unconfirmed(self):
        A = UnboundedMatrix([[0, 0, 1], [1, 0, 0], [0, 1, 0]])
        with pytest.warns(ConvergenceWarning, match="did not converge"):
            result = real_schur_decomposition(A)
        assert result.real_eigenvalues == ()

    def test_decimal_entries(self, decimal_symmetric):
        A, reference = decimal_symmetric
        result = real_schur_decomposition(A, epsilon=1e-12)
        assert all(isinstance(value, Decimal)
                   for value in result.real_eigenvalues)
        np.testing.assert_allclose(
            [float(value) for value in result.real_eigenvalues],
            np.linalg.eigvalsh(reference), rtol=1e-8)

    def test_quasi_triangular(self, real_spectrum_matrix):
        T = real_schur_decomposition(UnboundedMatrix(real_spectrum_matrix)).T
        subdiagonal = np.diag(T.to_numpy(), k=-1)
        consecutive = (subdiagonal[:-1] != 0) & (subdiagonal[1:] != 0)
        assert not np.any(consecutive)


# ═══════════════════════════════════════════════════════════════════════
# Classical Jacobi
# ═══════════════════════════════════════════════════════════════════════


class TestClassicalJacobi:

    def test_reconstruction(self, symmetric_matrix):
        result = classical_jacobi(UnboundedMatrix(symmetric_matrix))
        V = result.rotation.to_numpy()
        d = result.eigenvalues.to_numpy()
        np.testing.assert_allclose(V @ np.diag(d) @ V.T, symmetric_matrix,
                                   atol=1e-12)

    def test_orthogonal(self, symmetric_matrix):
        V = classical_jacobi(UnboundedMatrix(symmetric_matrix)).rotation.to_numpy()
        np.testing.assert_allclose(V.T @ V, np.eye(6), atol=1e-13)

    def test_eigenvalues(self, symmetric_matrix):
        result = classical_jacobi(UnboundedMatrix(symmetric_matrix))
        np.testing.assert_allclose(np.sort(result.eigenvalues.to_numpy()),
                                   np.linalg.eigvalsh(symmetric_matrix),
                                   atol=1e-12)

    def test_fixed_representation(self):
        A = FixedMatrix[2, 2]([[2, 1], [1, 2]])
        result = classical_jacobi(A)
        assert type(result.rotation) is FixedMatrix[2, 2]
        assert type(result.eigenvalues) is FixedVector[2]
        np.testing.assert_allclose(np.sort(result.eigenvalues.to_numpy()), [1, 3])

    def test_diagonal_input(self):
        result = classical_jacobi(UnboundedMatrix(np.diag([3.0, -1.0])))
        np.testing.assert_array_equal(result.rotation.to_numpy(), np.eye(2))
        np.testing.assert_array_equal(result.eigenvalues.to_numpy(), [3, -1])

    def test_input_unchanged(self, symmetric_matrix):
        A = UnboundedMatrix(symmetric_matrix)
        classical_jacobi(A)
        np.testing.assert_array_equal(A.to_numpy(), symmetric_matrix)

    def test_decimal_entries(self, decimal_symmetric):
        A, reference = decimal_symmetric
        result = classical_jacobi(A)
        assert all(isinstance(result.eigenvalues[i], Decimal) for i in range(3))
        assert result.rotation.dtype == np.float64
        np.testing.assert_allclose(
            np.sort(result.eigenvalues.to_numpy().astype(np.float64)),
            np.linalg.eigvalsh(reference), rtol=1e-12)

    def test_iteration_cap_warns(self, symmetric_matrix):
        with pytest.warns(ConvergenceWarning, match="Difficult diagonalization"):
            classical_jacobi(UnboundedMatrix(symmetric_matrix), max_iterations=1)


# ═══════════════════════════════════════════════════════════════════════
# Rayleigh quotient
# ═══════════════════════════════════════════════════════════════════════


class TestRayleighQuotient:

    def test_quotient(self):
        A = FixedMatrix[2, 2]([[2, 0], [0, 4]])
        assert rayleigh_quotient(A, FixedVector[2]([1, 1])) == 3.0

    def test_scale_invariant(self):
        A = UnboundedMatrix([[2, 1], [1, 3]])
        x = UnboundedVector([1.0, 2.0])
        assert rayleigh_quotient(A, x) == pytest.approx(rayleigh_quotient(A, 10 * x))

    def test_exact_eigenvector(self):
        A = FixedMatrix[3, 3](np.diag([1.0, 2.0, 3.0]))
        result = rayleigh_quotient_iteration(A, FixedVector[3]([0, 5, 0]))
        assert result.eigenvalue == 2.0
        np.testing.assert_array_equal(result.eigenvector.to_numpy(), [0, 1, 0])

    def test_converges_to_nearby_eigenpair(self):
        A = UnboundedMatrix([[2, 1], [1, 2]])
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", NumericsWarning)
            result = rayleigh_quotient_iteration(A, UnboundedVector([1.0, 0.9]))
        assert result.eigenvalue == pytest.approx(3.0, abs=1e-10)
        x = result.eigenvector.to_numpy()
        np.testing.assert_allclose(np.abs(x), [2 ** -0.5, 2 ** -0.5], atol=1e-8)

    def test_exact_shift_keeps_last_iterate(self):
        # The second quotient is exactly 3, so A - 3I is singular and no
        # further iterate can be formed.
        A = UnboundedMatrix([[2, 1], [1, 2]])
        with pytest.warns(ConvergenceWarning, match="singular"):
            result = rayleigh_quotient_iteration(A, UnboundedVector([1.0, 0.9]))
        assert result.eigenvalue == 3.0
        x = result.eigenvector.to_numpy()
        assert np.all(np.isfinite(x))
        np.testing.assert_allclose(x, [2 ** -0.5, 2 ** -0.5], atol=1e-8)

    def test_cycling_start_warns(self):
        # x alternates between the two unit vectors with μ = 0.
        A = UnboundedMatrix([[0, 1], [1, 0]])
        with pytest.warns(ConvergenceWarning, match="Unconverged"):
            result = rayleigh_quotient_iteration(A, UnboundedVector([1.0, 0.0]))
        assert result.eigenvalue == 0.0
