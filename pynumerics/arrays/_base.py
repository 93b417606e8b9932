"""
Storage and arithmetic shared by the fixed and unbounded containers.

Every container owns a NumPy array `_data`:

    vectors              1-D, length n
    matrices             2-D, shape (rows, columns), row-major
    lower triangular     1-D packed rows,          a(i, j) at i(i+1)/2 + j
    upper triangular     1-D packed columns,       a(i, j) at j(j+1)/2 + i
    strictly lower       1-D packed rows,          a(i, j) at i(i-1)/2 + j

Triangular data is accepted in row-major triangle order and repacked; the
upper triangle is stored by columns so that extending it appends at the end.
Accessing the other half of a triangular matrix is a precondition violation
checked by assert only.

The representation modules bind `generator` on each concrete class. Binary
operations allocate their results through the combined generator of their
operands, so fixed operands give fixed results and anything else gives
unbounded ones.
"""

import math
from typing import Any

import numpy as np

from pynumerics.arrays._summation import dot_product, sum_of_squares
from pynumerics.arrays.transposed import TransposedView
from pynumerics.core.compute.precision import sqrt

DEFAULT_DTYPE = np.float64


def _is_scalar(value: Any) -> bool:
    return getattr(value, 'ndim', 0) == 0


def allocate(shape, uninitialized: bool = False, dtype=None) -> np.ndarray:
    """Zero-filled (or, on request, uninitialized) storage."""
    dtype = np.dtype(DEFAULT_DTYPE if dtype is None else dtype)
    if uninitialized:
        return np.empty(shape, dtype=dtype)
    return np.zeros(shape, dtype=dtype)


def storage_from(data: Any, dtype=None) -> np.ndarray:
    """
    Copy user data into owned storage.

    Integer and boolean input is promoted to float64; object input (Decimal,
    quantities) stays object.
    """
    if hasattr(data, '_values'):
        data = data._values()
    if dtype is not None:
        return np.array(data, dtype=dtype)
    result = np.array(data)
    if result.dtype.kind in 'biu':
        result = result.astype(DEFAULT_DTYPE)
    return result


def flatten_rows(data: Any) -> list:
    """Flatten a nested row sequence; flat sequences pass through."""
    if hasattr(data, '_values'):
        data = data._values()
    items = list(data)
    if items and np.ndim(items[0]) > 0:
        return [value for row in items for value in row]
    return items


def triangle_dimension(length: int) -> int:
    """n such that n(n+1)/2 == length."""
    n = (math.isqrt(8 * length + 1) - 1) // 2
    assert n * (n + 1) // 2 == length, (
        f"{length} entries do not form a triangle"
    )
    return n


def square_dimension(length: int) -> int:
    """n such that n² == length."""
    n = math.isqrt(length)
    assert n * n == length, f"{length} entries do not form a square matrix"
    return n


def upper_from_row_major(data: Any, current_columns: int,
                         new_columns: int, dtype) -> np.ndarray:
    """
    Repack a row-major trapezoid into column-major upper-triangular storage.

    `data` holds, row by row, the entries a(i, j) for 0 ≤ i < new_columns
    and max(i, current_columns) ≤ j < new_columns. The result is the packed
    storage of columns current_columns..new_columns-1.
    """
    offset = current_columns * (current_columns + 1) // 2
    count = new_columns * (new_columns + 1) // 2 - offset
    assert len(data) == count, (
        f"expected {count} entries for columns {current_columns}.."
        f"{new_columns - 1}, got {len(data)}"
    )
    result = np.empty(count, dtype=dtype)
    position = 0
    for i in range(new_columns):
        for j in range(max(i, current_columns), new_columns):
            result[j * (j + 1) // 2 + i - offset] = data[position]
            position += 1
    return result


class DenseArray:
    """Common behaviour of all owning containers."""

    __array_ufunc__ = None
    __hash__ = None

    generator = None
    _data: np.ndarray

    @classmethod
    def _wrap(cls, data: np.ndarray):
        result = cls.__new__(cls)
        result._data = data
        return result

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def _values(self) -> np.ndarray:
        return self._data

    def to_numpy(self) -> np.ndarray:
        """Copy of the contents as an ordinary NumPy array."""
        return np.array(self._values(), copy=True)

    def copy(self):
        return type(self)._wrap(self._data.copy())

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self._data.shape == other._data.shape
                and bool(np.array_equal(self._data, other._data)))

    def __neg__(self):
        return type(self)._wrap(-self._data)

    def __pos__(self):
        return self.copy()

    def __add__(self, right):
        if type(right) is not type(self):
            return NotImplemented
        assert self._data.shape == right._data.shape
        return type(self)._wrap(self._data + right._data)

    def __sub__(self, right):
        if type(right) is not type(self):
            return NotImplemented
        assert self._data.shape == right._data.shape
        return type(self)._wrap(self._data - right._data)

    def _scale(self, factor):
        return type(self)._wrap(self._data * factor)

    def __rmul__(self, left):
        if not _is_scalar(left):
            return NotImplemented
        return type(self)._wrap(left * self._data)

    def __truediv__(self, right):
        if not _is_scalar(right):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            return type(self)._wrap(self._data / right)

    def __iadd__(self, right):
        values = right._values()
        assert values.shape == self._values().shape
        self._data += self._storage_of(right)
        return self

    def __isub__(self, right):
        values = right._values()
        assert values.shape == self._values().shape
        self._data -= self._storage_of(right)
        return self

    def __imul__(self, right):
        if not _is_scalar(right):
            return NotImplemented
        self._data *= right
        return self

    def __itruediv__(self, right):
        if not _is_scalar(right):
            return NotImplemented
        with np.errstate(divide='ignore', invalid='ignore'):
            self._data /= right
        return self

    def _storage_of(self, other) -> np.ndarray:
        """`other` laid out like this container's storage."""
        return other._values()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values().tolist()!r})"


class Vector(DenseArray):
    """Column vector."""

    ndim = 1

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def __len__(self) -> int:
        return self.size

    def __iter__(self):
        return iter(self._data)

    def __getitem__(self, index: int):
        assert 0 <= index < self.size, f"index {index} out of range"
        return self._data[index]

    def __setitem__(self, index: int, value) -> None:
        assert 0 <= index < self.size, f"index {index} out of range"
        self._data[index] = value

    def norm2(self):
        """Square of the Euclidean norm, accumulated in one pass."""
        return dot_product(self, self)

    def norm(self):
        return sqrt(self.norm2())

    def transpose(self) -> TransposedView:
        return TransposedView(self)

    def __mul__(self, right):
        if _is_scalar(right):
            return self._scale(right)
        if isinstance(right, TransposedView) and right.ndim == 1:
            generator = self.generator.combine(right.generator)
            return generator.matrix_from_array(
                np.multiply.outer(self._data, right._values()))
        return NotImplemented

    __matmul__ = __mul__


class Matrix(DenseArray):
    """Dense row-major matrix."""

    ndim = 2

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    def __getitem__(self, index: tuple[int, int]):
        row, column = index
        assert 0 <= row < self.rows, f"row {row} out of range"
        assert 0 <= column < self.columns, f"column {column} out of range"
        return self._data[row, column]

    def __setitem__(self, index: tuple[int, int], value) -> None:
        row, column = index
        assert 0 <= row < self.rows, f"row {row} out of range"
        assert 0 <= column < self.columns, f"column {column} out of range"
        self._data[row, column] = value

    def frobenius_norm(self):
        return sqrt(sum_of_squares(self._data.flat))

    def transpose(self):
        return self.generator.matrix_from_array(self._data.T.copy())

    def __mul__(self, right):
        if _is_scalar(right):
            return self._scale(right)
        generator = self.generator.combine(right.generator)
        if right.ndim == 1:
            assert not isinstance(right, TransposedView), (
                "matrix times row vector is not supported"
            )
            assert self.columns == right.size, (
                f"{self.rows}×{self.columns} matrix times vector of size "
                f"{right.size}"
            )
            return generator.vector_from_array(self._data @ right._values())
        assert self.columns == right.rows, (
            f"{self.rows}×{self.columns} matrix times "
            f"{right.rows}×{right.columns} matrix"
        )
        return generator.matrix_from_array(self._data @ right._values())

    __matmul__ = __mul__


class TriangularMatrix(DenseArray):
    """Square matrix storing one packed triangle."""

    ndim = 2

    @property
    def rows(self) -> int:
        return triangle_dimension(self._data.shape[0])

    @property
    def columns(self) -> int:
        return self.rows

    @property
    def size(self) -> int:
        """Number of stored entries."""
        return self._data.shape[0]

    def _position(self, row: int, column: int) -> int:
        raise NotImplementedError

    def _triangle_indices(self, n: int) -> tuple[np.ndarray, np.ndarray]:
        """(rows, columns) of the stored entries, in storage order."""
        raise NotImplementedError

    def __getitem__(self, index: tuple[int, int]):
        return self._data[self._position(*index)]

    def __setitem__(self, index: tuple[int, int], value) -> None:
        self._data[self._position(*index)] = value

    def _values(self) -> np.ndarray:
        n = self.rows
        result = np.zeros((n, n), dtype=self.dtype)
        rows, columns = self._triangle_indices(n)
        result[rows, columns] = self._data
        return result

    def _storage_of(self, other) -> np.ndarray:
        if type(other) is type(self):
            return other._data
        rows, columns = self._triangle_indices(self.rows)
        return other._values()[rows, columns]

    def frobenius_norm(self):
        return sqrt(sum_of_squares(self._data))

    def __mul__(self, right):
        if _is_scalar(right):
            return self._scale(right)
        generator = self.generator.combine(right.generator)
        if right.ndim == 1:
            assert self.columns == right.size
            return generator.vector_from_array(self._values() @ right._values())
        assert self.columns == right.rows
        return generator.matrix_from_array(self._values() @ right._values())

    __matmul__ = __mul__


class LowerTriangularMatrix(TriangularMatrix):
    """Lower triangle, a(i, j) for 0 ≤ j ≤ i < rows."""

    def _position(self, row: int, column: int) -> int:
        assert 0 <= column <= row < self.rows, (
            f"({row}, {column}) is outside the lower triangle"
        )
        return row * (row + 1) // 2 + column

    def _triangle_indices(self, n: int):
        return np.tril_indices(n)

    def transpose(self):
        # Row-major lower and column-major upper packings coincide.
        return self.generator.upper_triangular_from_packed(self._data.copy())


class UpperTriangularMatrix(TriangularMatrix):
    """Upper triangle, a(i, j) for 0 ≤ i ≤ j < columns."""

    def _position(self, row: int, column: int) -> int:
        assert 0 <= row <= column < self.columns, (
            f"({row}, {column}) is outside the upper triangle"
        )
        return column * (column + 1) // 2 + row

    def _triangle_indices(self, n: int):
        columns, rows = np.tril_indices(n)
        return rows, columns

    def transpose(self):
        return self.generator.lower_triangular_from_packed(self._data.copy())


class StrictlyLowerTriangularMatrix(TriangularMatrix):
    """Strict lower triangle, a(i, j) for 0 ≤ j < i < rows."""

    _dimension: int | None = None

    @property
    def rows(self) -> int:
        return self._dimension

    def _position(self, row: int, column: int) -> int:
        assert 0 <= column < row < self.rows, (
            f"({row}, {column}) is outside the strict lower triangle"
        )
        return row * (row - 1) // 2 + column

    def _triangle_indices(self, n: int):
        return np.tril_indices(n, k=-1)
