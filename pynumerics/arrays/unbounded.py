"""
Containers whose dimensions are chosen at construction.

    UnboundedVector(3)                    zero vector of size 3
    UnboundedVector([1.0, 2.0, 3.0])
    UnboundedMatrix(2, 3, uninitialized=True)
    UnboundedMatrix([[1, 2], [3, 4]])
    UnboundedLowerTriangularMatrix([1,
                                    2, 3])

Vectors and triangular matrices grow with extend() and shrink with
erase_to_end(); existing entries are preserved. Views taken on a container
must not be used after it has been resized.
"""

from numbers import Integral

import numpy as np

from pynumerics.arrays._base import (
    Vector,
    Matrix,
    LowerTriangularMatrix,
    UpperTriangularMatrix,
    allocate,
    storage_from,
    flatten_rows,
    square_dimension,
    triangle_dimension,
    upper_from_row_major,
)
from pynumerics.core.representations import REPRESENTATION_UNBOUNDED


def _is_dimension(value) -> bool:
    return isinstance(value, (Integral, np.integer)) and not isinstance(value, bool)


def _triangle_growth(current: int, length: int) -> int:
    """Number of rows whose addition to a triangle of `current` rows adds
    `length` entries."""
    extra = 0
    added = 0
    while added < length:
        added += current + extra + 1
        extra += 1
    assert added == length, (
        f"{length} entries do not extend a triangle of {current} rows"
    )
    return extra


class UnboundedVector(Vector):

    def __init__(self, size_or_data, *, uninitialized: bool = False, dtype=None):
        if _is_dimension(size_or_data):
            self._data = allocate((int(size_or_data),), uninitialized, dtype)
        else:
            self._data = storage_from(flatten_rows(size_or_data), dtype)
            assert self._data.ndim == 1

    def extend(self, extra_or_data, *, uninitialized: bool = False) -> None:
        """Append `extra` entries (zero or uninitialized), or the given data."""
        if _is_dimension(extra_or_data):
            tail = allocate((int(extra_or_data),), uninitialized, self.dtype)
        else:
            tail = storage_from(flatten_rows(extra_or_data), self.dtype)
        self._data = np.concatenate([self._data, tail])

    def erase_to_end(self, begin: int) -> None:
        """Drop the entries at indices ≥ begin."""
        assert 0 <= begin <= self.size
        self._data = self._data[:begin].copy()


class UnboundedMatrix(Matrix):

    def __init__(self, rows_or_data, columns=None, *,
                 uninitialized: bool = False, dtype=None):
        if _is_dimension(rows_or_data):
            rows = int(rows_or_data)
            columns = rows if columns is None else int(columns)
            self._data = allocate((rows, columns), uninitialized, dtype)
            return
        data = storage_from(rows_or_data, dtype)
        if data.ndim == 1:
            # Flat row-major data describes a square matrix.
            n = square_dimension(data.shape[0])
            data = data.reshape((n, n))
        assert data.ndim == 2
        self._data = data

    @classmethod
    def identity(cls, rows: int, columns: int | None = None, dtype=None):
        columns = rows if columns is None else columns
        result = cls(rows, columns, dtype=dtype)
        for i in range(min(rows, columns)):
            result._data[i, i] = 1
        return result


class UnboundedLowerTriangularMatrix(LowerTriangularMatrix):

    def __init__(self, rows_or_data, *, uninitialized: bool = False, dtype=None):
        if _is_dimension(rows_or_data):
            n = int(rows_or_data)
            self._data = allocate((n * (n + 1) // 2,), uninitialized, dtype)
        else:
            self._data = storage_from(flatten_rows(rows_or_data), dtype)
            triangle_dimension(self._data.shape[0])

    def extend(self, extra_or_data, *, uninitialized: bool = False) -> None:
        """
        Append rows.

        Args:
            extra_or_data: Number of rows to append, or the row-major entries
                of the appended rows (row i holds columns 0..i)
            uninitialized: Leave appended rows uninitialized instead of zero
        """
        n = self.rows
        if _is_dimension(extra_or_data):
            new_rows = n + int(extra_or_data)
            tail = allocate((new_rows * (new_rows + 1) // 2 - self.size,),
                            uninitialized, self.dtype)
        else:
            tail = storage_from(flatten_rows(extra_or_data), self.dtype)
            _triangle_growth(n, tail.shape[0])
        self._data = np.concatenate([self._data, tail])

    def erase_to_end(self, begin_row: int) -> None:
        """Drop the rows at indices ≥ begin_row."""
        assert 0 <= begin_row <= self.rows
        self._data = self._data[:begin_row * (begin_row + 1) // 2].copy()


class UnboundedUpperTriangularMatrix(UpperTriangularMatrix):

    def __init__(self, columns_or_data, *, uninitialized: bool = False,
                 dtype=None):
        if _is_dimension(columns_or_data):
            n = int(columns_or_data)
            self._data = allocate((n * (n + 1) // 2,), uninitialized, dtype)
        else:
            row_major = storage_from(flatten_rows(columns_or_data), dtype)
            n = triangle_dimension(row_major.shape[0])
            self._data = upper_from_row_major(row_major, 0, n, row_major.dtype)

    def extend(self, extra_or_data, *, uninitialized: bool = False) -> None:
        """
        Append columns.

        Args:
            extra_or_data: Number of columns to append, or the row-major
                entries of the new columns: for each row i of the extended
                matrix, the entries in the new columns j ≥ i
            uninitialized: Leave appended columns uninitialized instead of zero
        """
        n = self.columns
        if _is_dimension(extra_or_data):
            new_columns = n + int(extra_or_data)
            tail = allocate((new_columns * (new_columns + 1) // 2 - self.size,),
                            uninitialized, self.dtype)
        else:
            row_major = storage_from(flatten_rows(extra_or_data), self.dtype)
            new_columns = n + _triangle_growth(n, row_major.shape[0])
            tail = upper_from_row_major(row_major, n, new_columns, self.dtype)
        self._data = np.concatenate([self._data, tail])

    def erase_to_end(self, begin_column: int) -> None:
        """Drop the columns at indices ≥ begin_column."""
        assert 0 <= begin_column <= self.columns
        self._data = self._data[:begin_column * (begin_column + 1) // 2].copy()


class UnboundedArrayGenerator:
    """Allocates unbounded results; dimensions are runtime values."""

    name = REPRESENTATION_UNBOUNDED

    def vector(self, size: int, *, uninitialized: bool = False, dtype=None):
        return UnboundedVector(size, uninitialized=uninitialized, dtype=dtype)

    def matrix(self, rows: int, columns: int, *, uninitialized: bool = False,
               dtype=None):
        return UnboundedMatrix(rows, columns, uninitialized=uninitialized,
                               dtype=dtype)

    def lower_triangular(self, rows: int, *, uninitialized: bool = False,
                         dtype=None):
        return UnboundedLowerTriangularMatrix(rows, uninitialized=uninitialized,
                                              dtype=dtype)

    def upper_triangular(self, columns: int, *, uninitialized: bool = False,
                         dtype=None):
        return UnboundedUpperTriangularMatrix(columns,
                                              uninitialized=uninitialized,
                                              dtype=dtype)

    def identity(self, rows: int, columns: int, *, dtype=None):
        return UnboundedMatrix.identity(rows, columns, dtype=dtype)

    def vector_from_array(self, data: np.ndarray):
        return UnboundedVector._wrap(data)

    def matrix_from_array(self, data: np.ndarray):
        return UnboundedMatrix._wrap(data)

    def lower_triangular_from_packed(self, data: np.ndarray):
        return UnboundedLowerTriangularMatrix._wrap(data)

    def upper_triangular_from_packed(self, data: np.ndarray):
        return UnboundedUpperTriangularMatrix._wrap(data)

    def combine(self, other):
        """Unbounded absorbs every other representation."""
        return self

    def __repr__(self) -> str:
        return 'UnboundedArrayGenerator()'


UNBOUNDED_GENERATOR = UnboundedArrayGenerator()

for _container in (UnboundedVector, UnboundedMatrix,
                   UnboundedLowerTriangularMatrix,
                   UnboundedUpperTriangularMatrix):
    _container.generator = UNBOUNDED_GENERATOR
del _container
