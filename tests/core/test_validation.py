"""
Tests for input validators.
"""

import numpy as np
import pytest

from pynumerics.core.exceptions import DimensionError, ValidationError
from pynumerics.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_consistent_length,
    check_finite,
    check_square,
    check_symmetric,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_converted(self):
        result = check_array([[1, 2], [3, 4]], "A")
        assert isinstance(result, np.ndarray)
        assert result.dtype == np.float64

    def test_float32_kept(self):
        result = check_array(np.ones(3, dtype=np.float32), "b")
        assert result.dtype == np.float32

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="A"):
            check_array(["a", "b"], "A")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array(np.array([1 + 2j]), "A")

    def test_mixed_rejected(self):
        with pytest.raises(ValidationError):
            check_array(np.array([1, "x", None], dtype=object), "A")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_finite(self):
        check_finite(np.array([1.0, 2.0]), "b")
        with pytest.raises(ValidationError, match="1 NaN, 1 Inf"):
            check_finite(np.array([np.nan, np.inf, 1.0]), "b")

    def test_check_1d(self):
        check_1d(np.zeros(3), "b")
        with pytest.raises(DimensionError) as info:
            check_1d(np.zeros((3, 1)), "b")
        assert info.value.expected == 1
        assert info.value.actual == 2

    def test_check_2d(self):
        with pytest.raises(DimensionError):
            check_2d(np.zeros(3), "A")

    def test_check_square(self):
        check_square(np.zeros((3, 3)), "A")
        with pytest.raises(DimensionError, match="square"):
            check_square(np.zeros((3, 4)), "A")

    def test_check_square_empty(self):
        with pytest.raises(DimensionError, match="empty"):
            check_square(np.zeros((0, 0)), "A")

    def test_consistent_length(self):
        check_consistent_length(np.zeros((3, 3)), np.zeros(3), names=("A", "b"))
        with pytest.raises(DimensionError, match="A=3, b=2"):
            check_consistent_length(np.zeros((3, 3)), np.zeros(2),
                                    names=("A", "b"))

    def test_consistent_length_name_count(self):
        with pytest.raises(ValueError):
            check_consistent_length(np.zeros(3), names=("a", "b"))


class TestCheckSymmetric:

    def test_symmetric_passes(self, symmetric_matrix):
        check_symmetric(symmetric_matrix, "A")

    def test_asymmetric_rejected(self):
        with pytest.raises(ValidationError, match="symmetric"):
            check_symmetric(np.array([[1.0, 2.0], [0.0, 1.0]]), "A")
