"""
Free functions of vectors and matrices.

These accept any container or view that satisfies VectorLike / MatrixLike
and allocate results through generator_for().
"""

from typing import Any

from pynumerics.arrays._summation import dot_product
from pynumerics.arrays.generators import generator_for
from pynumerics.arrays.transposed import TransposedView


def inner_product(left: Any, right: Any) -> Any:
    """ᵗleft right."""
    return TransposedView(left) * right


def normalize(vector: Any) -> Any:
    """
    vector / ‖vector‖.

    Views are copied out into an unbounded vector. A zero vector yields NaN
    entries.
    """
    return vector / vector.norm()


def bilinear_form(left: Any, matrix: Any, right: Any) -> Any:
    """ᵗleft matrix right."""
    return TransposedView(left) * (matrix * right)


def symmetric_product(left: Any, right: Any) -> Any:
    """
    (left ᵗright + right ᵗleft) / 2 as a dense matrix.
    """
    assert left.size == right.size
    return (left * TransposedView(right) + right * TransposedView(left)) / 2


def symmetric_square(vector: Any) -> Any:
    """vector ᵗvector as a dense matrix."""
    return vector * TransposedView(vector)


def diagonal(matrix: Any) -> Any:
    """Vector of the diagonal entries of a square matrix."""
    assert matrix.rows == matrix.columns
    n = matrix.rows
    result = generator_for(matrix).vector(n, uninitialized=True,
                                          dtype=matrix.dtype)
    for i in range(n):
        result[i] = matrix[i, i]
    return result


__all__ = [
    'dot_product',
    'inner_product',
    'normalize',
    'bilinear_form',
    'symmetric_product',
    'symmetric_square',
    'diagonal',
]
