"""
Logical transpose of a vector, a matrix or a view.

A TransposedView never copies. Its multiplication operators carry the
duality that lets the same reflection code run on rows and on columns:

    TransposedView(u) * v    ->  scalar (dot product)
    v * TransposedView(u)    ->  matrix (outer product), see the vector types
    TransposedView(M) * v    ->  vector with entries Σᵢ M[i, j] v[i]
"""

from typing import Any

from pynumerics.arrays._summation import dot_product


class TransposedView:
    """Swapped-index window over `transpose`, which it borrows."""

    __array_ufunc__ = None
    __hash__ = None

    def __init__(self, transpose: Any):
        self.transpose = transpose

    @property
    def ndim(self) -> int:
        return self.transpose.ndim

    @property
    def generator(self):
        return self.transpose.generator

    @property
    def dtype(self):
        return self.transpose.dtype

    @property
    def size(self) -> int:
        assert self.ndim == 1
        return self.transpose.size

    @property
    def rows(self) -> int:
        assert self.ndim == 2
        return self.transpose.columns

    @property
    def columns(self) -> int:
        assert self.ndim == 2
        return self.transpose.rows

    def __getitem__(self, index):
        if self.ndim == 1:
            return self.transpose[index]
        row, column = index
        return self.transpose[column, row]

    def __setitem__(self, index, value) -> None:
        if self.ndim == 1:
            self.transpose[index] = value
        else:
            row, column = index
            self.transpose[column, row] = value

    def _values(self):
        return self.transpose._values().T

    def __mul__(self, right):
        if getattr(right, 'ndim', 0) == 0:
            return TransposedView(self.transpose * right)
        assert not isinstance(right, TransposedView), (
            "product of two transposed views"
        )
        if self.ndim == 1:
            assert right.ndim == 1, "row vector times matrix is not supported"
            return dot_product(self.transpose, right)
        generator = self.generator.combine(right.generator)
        if right.ndim == 1:
            assert self.columns == right.size
            return generator.vector_from_array(self._values() @ right._values())
        assert self.columns == right.rows
        return generator.matrix_from_array(self._values() @ right._values())

    __matmul__ = __mul__

    def __rmul__(self, left):
        assert getattr(left, 'ndim', 0) == 0
        return TransposedView(left * self.transpose)

    def __truediv__(self, right):
        assert getattr(right, 'ndim', 0) == 0
        return TransposedView(self.transpose / right)

    def __neg__(self):
        return TransposedView(-self.transpose)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TransposedView):
            return NotImplemented
        return self.transpose == other.transpose

    def __repr__(self) -> str:
        return f"TransposedView({self.transpose!r})"
