"""
Non-owning windows into a dense matrix.

A view stores the matrix it borrows together with inclusive index bounds.
Reads and writes go straight to the matrix storage, so an algorithm can run
in place on a column segment or a sub-block without copying. Packed
triangular storage has no dense array to slice, so in-place arithmetic on a
view of a triangular matrix goes entry by entry through its indexing.
Views may be nested (a BlockView of a BlockView) and must not outlive the
matrix they borrow.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np

from pynumerics.arrays._base import Matrix
from pynumerics.arrays._summation import dot_product
from pynumerics.arrays.transposed import TransposedView
from pynumerics.arrays.unbounded import UnboundedVector, UNBOUNDED_GENERATOR
from pynumerics.core.compute.precision import sqrt


def _slices_storage(matrix: Any) -> bool:
    """Whether matrix._values() aliases the storage of the owning container."""
    if isinstance(matrix, (ColumnView, BlockView)):
        return _slices_storage(matrix.matrix)
    if isinstance(matrix, TransposedView):
        return _slices_storage(matrix.transpose)
    return isinstance(matrix, Matrix)


@dataclass(eq=False)
class ColumnView:
    """Rows first_row..last_row (inclusive) of one column of `matrix`."""

    matrix: Any
    first_row: int
    last_row: int
    column: int

    __array_ufunc__ = None
    __hash__ = None
    ndim = 1
    generator = UNBOUNDED_GENERATOR

    def _values(self) -> np.ndarray:
        return self.matrix._values()[self.first_row:self.last_row + 1,
                                     self.column]

    @property
    def dtype(self) -> np.dtype:
        return self.matrix.dtype

    @property
    def size(self) -> int:
        return self.last_row - self.first_row + 1

    def __getitem__(self, index: int):
        assert 0 <= index <= self.last_row - self.first_row
        return self.matrix[self.first_row + index, self.column]

    def __setitem__(self, index: int, value) -> None:
        assert 0 <= index <= self.last_row - self.first_row
        self.matrix[self.first_row + index, self.column] = value

    def norm2(self):
        return dot_product(self, self)

    def norm(self):
        return sqrt(self.norm2())

    def to_unbounded(self) -> UnboundedVector:
        """Copy the viewed entries into an owned vector."""
        return UnboundedVector(self._values().copy())

    def __truediv__(self, right) -> UnboundedVector:
        return self.to_unbounded() / right

    def __itruediv__(self, right):
        with np.errstate(divide='ignore', invalid='ignore'):
            if _slices_storage(self.matrix):
                values = self._values()
                values /= right
            else:
                for i in range(self.size):
                    self[i] = self[i] / right
        return self

    def __str__(self) -> str:
        return '{' + ', '.join(str(self[i]) for i in range(self.size)) + '}'


@dataclass(eq=False)
class BlockView:
    """Rows first_row..last_row and columns first_column..last_column
    (inclusive) of `matrix`, indexed from the block origin."""

    matrix: Any
    first_row: int
    last_row: int
    first_column: int
    last_column: int

    __array_ufunc__ = None
    __hash__ = None
    ndim = 2
    generator = UNBOUNDED_GENERATOR

    def _values(self) -> np.ndarray:
        return self.matrix._values()[self.first_row:self.last_row + 1,
                                     self.first_column:self.last_column + 1]

    @property
    def dtype(self) -> np.dtype:
        return self.matrix.dtype

    @property
    def rows(self) -> int:
        return self.last_row - self.first_row + 1

    @property
    def columns(self) -> int:
        return self.last_column - self.first_column + 1

    def __getitem__(self, index: tuple[int, int]):
        row, column = index
        assert 0 <= row <= self.last_row - self.first_row
        assert 0 <= column <= self.last_column - self.first_column
        return self.matrix[self.first_row + row, self.first_column + column]

    def __setitem__(self, index: tuple[int, int], value) -> None:
        row, column = index
        assert 0 <= row <= self.last_row - self.first_row
        assert 0 <= column <= self.last_column - self.first_column
        self.matrix[self.first_row + row, self.first_column + column] = value

    def __isub__(self, right):
        assert right.rows == self.rows and right.columns == self.columns, (
            f"{self.rows}×{self.columns} block minus "
            f"{right.rows}×{right.columns} matrix"
        )
        right_values = right._values()
        if _slices_storage(self.matrix):
            values = self._values()
            values -= right_values
            return self
        for i in range(self.rows):
            for j in range(self.columns):
                self[i, j] = self[i, j] - right_values[i, j]
        return self

    def __mul__(self, right):
        if isinstance(right, TransposedView) or getattr(right, 'ndim', 0) != 1:
            return NotImplemented
        assert self.columns == right.size, (
            f"{self.rows}×{self.columns} block times vector of size {right.size}"
        )
        return UNBOUNDED_GENERATOR.vector_from_array(
            self._values() @ right._values())

    __matmul__ = __mul__

    def to_unbounded(self):
        """Copy the viewed entries into an owned matrix."""
        return UNBOUNDED_GENERATOR.matrix_from_array(self._values().copy())
