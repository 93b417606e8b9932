"""
Tests for the fixed-size and unbounded containers.

Validates:
    - Construction, indexing and packed triangular layouts
    - Type identity of fixed-size classes
    - Arithmetic and the representation of results
    - Object dtype (Decimal) support
"""

from decimal import Decimal

import numpy as np
import pytest

from pynumerics.arrays import (
    FIXED_GENERATOR,
    UNBOUNDED_GENERATOR,
    FixedLowerTriangularMatrix,
    FixedMatrix,
    FixedStrictlyLowerTriangularMatrix,
    FixedUpperTriangularMatrix,
    FixedVector,
    TransposedView,
    UnboundedLowerTriangularMatrix,
    UnboundedMatrix,
    UnboundedUpperTriangularMatrix,
    UnboundedVector,
)


# ═══════════════════════════════════════════════════════════════════════
# Fixed-size classes
# ═══════════════════════════════════════════════════════════════════════


class TestFixedClasses:
    """Subscripting returns cached subclasses."""

    def test_class_is_cached(self):
        assert FixedVector[3] is FixedVector[3]
        assert FixedMatrix[2, 3] is FixedMatrix[2, 3]
        assert FixedVector[3] is not FixedVector[4]

    def test_subclass(self):
        assert issubclass(FixedVector[3], FixedVector)
        assert isinstance(FixedMatrix[2, 2](), FixedMatrix)

    def test_zero_initialized(self):
        v = FixedVector[3]()
        np.testing.assert_array_equal(v.to_numpy(), [0.0, 0.0, 0.0])
        assert v.dtype == np.float64

    def test_integers_promoted(self):
        v = FixedVector[3]([1, 2, 3])
        assert v.dtype == np.float64
        assert v[2] == 3.0

    def test_matrix_from_rows(self):
        M = FixedMatrix[2, 3]([[1, 2, 3], [4, 5, 6]])
        assert M.rows == 2
        assert M.columns == 3
        assert M[1, 0] == 4.0

    def test_matrix_from_flat(self):
        M = FixedMatrix[2, 2]([1, 2, 3, 4])
        np.testing.assert_array_equal(M.to_numpy(), [[1, 2], [3, 4]])

    def test_identity(self):
        np.testing.assert_array_equal(FixedMatrix[3, 3].identity().to_numpy(),
                                      np.eye(3))

    def test_generator(self):
        assert FixedVector[2]().generator is FIXED_GENERATOR

    def test_repr(self):
        assert repr(FixedVector[2]([1.0, 2.0])) == "FixedVector[2]([1.0, 2.0])"


# ═══════════════════════════════════════════════════════════════════════
# Unbounded classes
# ═══════════════════════════════════════════════════════════════════════


class TestUnboundedClasses:

    def test_vector_from_size(self):
        v = UnboundedVector(4)
        assert v.size == 4
        assert len(v) == 4
        assert v.generator is UNBOUNDED_GENERATOR

    def test_vector_from_data(self):
        v = UnboundedVector([1.0, 2.0])
        assert list(v) == [1.0, 2.0]

    def test_uninitialized_shape(self):
        M = UnboundedMatrix(2, 3, uninitialized=True)
        assert (M.rows, M.columns) == (2, 3)

    def test_square_from_size(self):
        M = UnboundedMatrix(3)
        assert (M.rows, M.columns) == (3, 3)

    def test_square_from_flat_data(self):
        M = UnboundedMatrix([1, 2, 3, 4])
        np.testing.assert_array_equal(M.to_numpy(), [[1, 2], [3, 4]])

    def test_identity_rectangular(self):
        np.testing.assert_array_equal(
            UnboundedMatrix.identity(2, 3).to_numpy(), np.eye(2, 3))

    def test_data_is_copied(self):
        data = np.array([1.0, 2.0])
        v = UnboundedVector(data)
        v[0] = 10.0
        assert data[0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Triangular layouts
# ═══════════════════════════════════════════════════════════════════════


class TestTriangular:

    def test_lower(self):
        L = FixedLowerTriangularMatrix[3]([1,
                                           2, 3,
                                           4, 5, 6])
        np.testing.assert_array_equal(
            L.to_numpy(), [[1, 0, 0], [2, 3, 0], [4, 5, 6]])
        assert L[2, 1] == 5.0
        assert L.size == 6

    def test_upper_from_row_major(self):
        U = FixedUpperTriangularMatrix[3]([1, 2, 3,
                                              4, 5,
                                                 6])
        np.testing.assert_array_equal(
            U.to_numpy(), [[1, 2, 3], [0, 4, 5], [0, 0, 6]])
        assert U[1, 2] == 5.0

    def test_strictly_lower(self):
        S = FixedStrictlyLowerTriangularMatrix[3]([1,
                                                   2, 3])
        np.testing.assert_array_equal(
            S.to_numpy(), [[0, 0, 0], [1, 0, 0], [2, 3, 0]])

    def test_transpose_lower_upper(self):
        L = UnboundedLowerTriangularMatrix([1, 2, 3])
        U = L.transpose()
        assert isinstance(U, UnboundedUpperTriangularMatrix)
        np.testing.assert_array_equal(U.to_numpy(), L.to_numpy().T)
        np.testing.assert_array_equal(U.transpose().to_numpy(), L.to_numpy())

    def test_fixed_transpose_keeps_representation(self):
        U = FixedUpperTriangularMatrix[2]([1, 2, 3])
        assert isinstance(U.transpose(), FixedLowerTriangularMatrix)

    def test_outside_triangle_asserts(self):
        L = UnboundedLowerTriangularMatrix(3)
        with pytest.raises(AssertionError):
            L[0, 1]

    def test_triangular_times_vector(self):
        U = FixedUpperTriangularMatrix[2]([1, 2, 3])
        x = FixedVector[2]([1, 1])
        np.testing.assert_array_equal((U * x).to_numpy(), [3.0, 3.0])

    def test_frobenius(self):
        L = UnboundedLowerTriangularMatrix([3, 0, 4])
        assert L.frobenius_norm() == pytest.approx(5.0)

    def test_subtract_dense(self):
        L = UnboundedLowerTriangularMatrix([1, 2, 3])
        L -= UnboundedMatrix([[1, 0], [1, 1]])
        np.testing.assert_array_equal(L.to_numpy(), [[0, 0], [1, 2]])


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_sub(self):
        a = FixedVector[2]([1, 2])
        b = FixedVector[2]([3, 5])
        np.testing.assert_array_equal((a + b).to_numpy(), [4, 7])
        np.testing.assert_array_equal((b - a).to_numpy(), [2, 3])

    def test_scalar(self):
        a = UnboundedVector([1.0, -2.0])
        np.testing.assert_array_equal((2 * a).to_numpy(), [2, -4])
        np.testing.assert_array_equal((a * 2).to_numpy(), [2, -4])
        np.testing.assert_array_equal((a / 2).to_numpy(), [0.5, -1])
        np.testing.assert_array_equal((-a).to_numpy(), [-1, 2])

    def test_in_place(self):
        a = UnboundedVector([1.0, 2.0])
        a += UnboundedVector([1.0, 1.0])
        a *= 3
        a /= 2
        np.testing.assert_array_equal(a.to_numpy(), [3.0, 4.5])

    def test_division_by_zero_silent(self):
        a = UnboundedVector([1.0, 0.0])
        with np.errstate(all='raise'):
            result = a / 0.0
        assert np.isinf(result[0])
        assert np.isnan(result[1])

    def test_equality(self):
        assert FixedVector[2]([1, 2]) == FixedVector[2]([1, 2])
        assert FixedVector[2]([1, 2]) != FixedVector[2]([1, 3])
        assert FixedVector[2]([1, 2]) != UnboundedVector([1, 2])

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(UnboundedVector(2))

    def test_matrix_vector_fixed(self):
        M = FixedMatrix[2, 2]([[1, 2], [3, 4]])
        x = FixedVector[2]([1, 1])
        y = M * x
        assert type(y) is FixedVector[2]
        np.testing.assert_array_equal(y.to_numpy(), [3, 7])

    def test_mixed_gives_unbounded(self):
        M = FixedMatrix[2, 2]([[1, 2], [3, 4]])
        x = UnboundedVector([1.0, 1.0])
        assert isinstance(M * x, UnboundedVector)
        assert isinstance(UnboundedMatrix([[1, 0], [0, 1]]) * FixedVector[2](),
                          UnboundedVector)

    def test_matrix_product(self, rng):
        A = rng.standard_normal((3, 4))
        B = rng.standard_normal((4, 2))
        product = UnboundedMatrix(A) * UnboundedMatrix(B)
        np.testing.assert_allclose(product.to_numpy(), A @ B)

    def test_matmul_operator(self):
        M = UnboundedMatrix([[1, 2], [3, 4]])
        x = UnboundedVector([1.0, 0.0])
        np.testing.assert_array_equal((M @ x).to_numpy(), [1, 3])

    def test_dimension_mismatch_asserts(self):
        with pytest.raises(AssertionError):
            UnboundedMatrix(2, 3) * UnboundedVector(2)

    def test_norms(self):
        v = FixedVector[2]([3, 4])
        assert v.norm2() == 25.0
        assert v.norm() == 5.0
        assert UnboundedMatrix([[1, 1], [1, 1]]).frobenius_norm() == 2.0

    def test_outer_product(self):
        u = FixedVector[2]([1, 2])
        v = FixedVector[3]([1, 0, -1])
        outer = u * TransposedView(v)
        assert type(outer) is FixedMatrix[2, 3]
        np.testing.assert_array_equal(outer.to_numpy(), np.outer([1, 2], [1, 0, -1]))

    def test_matrix_transpose(self):
        M = FixedMatrix[2, 3]([[1, 2, 3], [4, 5, 6]])
        assert type(M.transpose()) is FixedMatrix[3, 2]
        np.testing.assert_array_equal(M.transpose().to_numpy(), M.to_numpy().T)

    def test_numpy_ufunc_refused(self):
        with pytest.raises(TypeError):
            np.ones(2) + UnboundedVector(2)


class TestDecimal:
    """Containers carry arbitrary scalar types in object dtype."""

    def test_object_dtype(self):
        v = UnboundedVector([Decimal(3), Decimal(4)])
        assert v.dtype == object
        assert v.norm2() == Decimal(25)
        assert v.norm() == Decimal(5)

    def test_explicit_object_allocation(self):
        v = FIXED_GENERATOR.vector(2, dtype=object)
        v[0] = Decimal("1.5")
        assert v[0] == Decimal("1.5")
