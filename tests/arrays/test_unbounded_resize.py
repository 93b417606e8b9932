"""
Tests for growing and shrinking unbounded containers.
"""

import numpy as np

from pynumerics.arrays import (
    UnboundedLowerTriangularMatrix,
    UnboundedUpperTriangularMatrix,
    UnboundedVector,
)


class TestVectorResize:

    def test_extend_zero(self):
        v = UnboundedVector([1.0, 2.0])
        v.extend(2)
        np.testing.assert_array_equal(v.to_numpy(), [1, 2, 0, 0])

    def test_extend_data(self):
        v = UnboundedVector([1.0])
        v.extend([2.0, 3.0])
        np.testing.assert_array_equal(v.to_numpy(), [1, 2, 3])

    def test_erase_to_end(self):
        v = UnboundedVector([1.0, 2.0, 3.0])
        v.erase_to_end(1)
        np.testing.assert_array_equal(v.to_numpy(), [1])

    def test_erase_everything(self):
        v = UnboundedVector([1.0, 2.0])
        v.erase_to_end(0)
        assert v.size == 0


class TestLowerResize:

    def test_extend_rows(self):
        L = UnboundedLowerTriangularMatrix([1,
                                            2, 3])
        L.extend([4, 5, 6])
        assert L.rows == 3
        np.testing.assert_array_equal(
            L.to_numpy(), [[1, 0, 0], [2, 3, 0], [4, 5, 6]])

    def test_extend_count(self):
        L = UnboundedLowerTriangularMatrix([1])
        L.extend(2)
        assert L.rows == 3
        assert L[0, 0] == 1.0
        assert L[2, 2] == 0.0

    def test_erase_keeps_leading_rows(self):
        L = UnboundedLowerTriangularMatrix([1, 2, 3, 4, 5, 6])
        L.erase_to_end(2)
        np.testing.assert_array_equal(L.to_numpy(), [[1, 0], [2, 3]])


class TestUpperResize:

    def test_extend_columns(self):
        U = UnboundedUpperTriangularMatrix([1, 2,
                                               3])
        U.extend([4,
                  5,
                  6])
        np.testing.assert_array_equal(
            U.to_numpy(), [[1, 2, 4], [0, 3, 5], [0, 0, 6]])

    def test_extend_two_columns(self):
        U = UnboundedUpperTriangularMatrix([1])
        # Row 0: columns 1, 2; row 1: columns 1, 2; row 2: column 2.
        U.extend([2, 3,
                  4, 5,
                     6])
        np.testing.assert_array_equal(
            U.to_numpy(), [[1, 2, 3], [0, 4, 5], [0, 0, 6]])

    def test_erase_keeps_leading_columns(self):
        U = UnboundedUpperTriangularMatrix([1, 2, 3, 4, 5, 6])
        U.erase_to_end(2)
        np.testing.assert_array_equal(U.to_numpy(), [[1, 2], [0, 4]])
