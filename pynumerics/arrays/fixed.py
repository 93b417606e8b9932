"""
Containers whose dimensions are part of their type.

    FixedVector[3]()                      zero vector of size 3
    FixedVector[3]([1, 2, 3])
    FixedMatrix[2, 3](uninitialized=True)
    FixedUpperTriangularMatrix[3]([1, 2, 3,
                                      4, 5,
                                         6])

Subscripting returns a cached subclass, so FixedVector[3] is FixedVector[3]
and containers of different shapes never compare equal.
"""

import functools

import numpy as np

from pynumerics.arrays._base import (
    Vector,
    Matrix,
    LowerTriangularMatrix,
    UpperTriangularMatrix,
    StrictlyLowerTriangularMatrix,
    allocate,
    storage_from,
    flatten_rows,
    upper_from_row_major,
    triangle_dimension,
)
from pynumerics.core.representations import REPRESENTATION_FIXED


class FixedVector(Vector):
    _size: int | None = None

    def __class_getitem__(cls, size: int):
        return _fixed_vector_class(int(size))

    def __init__(self, data=None, *, uninitialized: bool = False, dtype=None):
        assert self._size is not None, "use FixedVector[size]"
        if data is None:
            self._data = allocate((self._size,), uninitialized, dtype)
        else:
            self._data = storage_from(flatten_rows(data), dtype)
            assert self._data.shape == (self._size,), (
                f"{type(self).__name__} given {self._data.shape[0]} entries"
            )


class FixedMatrix(Matrix):
    _shape: tuple[int, int] | None = None

    def __class_getitem__(cls, shape: tuple[int, int]):
        rows, columns = shape
        return _fixed_matrix_class(int(rows), int(columns))

    def __init__(self, data=None, *, uninitialized: bool = False, dtype=None):
        assert self._shape is not None, "use FixedMatrix[rows, columns]"
        if data is None:
            self._data = allocate(self._shape, uninitialized, dtype)
        else:
            flat = storage_from(flatten_rows(data), dtype)
            assert flat.shape == (self._shape[0] * self._shape[1],), (
                f"{type(self).__name__} given {flat.shape[0]} entries"
            )
            self._data = flat.reshape(self._shape)

    @classmethod
    def identity(cls, dtype=None):
        result = cls(dtype=dtype)
        for i in range(min(cls._shape)):
            result._data[i, i] = 1
        return result


class FixedLowerTriangularMatrix(LowerTriangularMatrix):
    _dimension: int | None = None

    def __class_getitem__(cls, rows: int):
        return _fixed_lower_class(int(rows))

    def __init__(self, data=None, *, uninitialized: bool = False, dtype=None):
        assert self._dimension is not None, "use FixedLowerTriangularMatrix[rows]"
        n = self._dimension
        if data is None:
            self._data = allocate((n * (n + 1) // 2,), uninitialized, dtype)
        else:
            self._data = storage_from(flatten_rows(data), dtype)
            assert self._data.shape == (n * (n + 1) // 2,), (
                f"{type(self).__name__} given {self._data.shape[0]} entries"
            )

    @property
    def rows(self) -> int:
        return self._dimension


class FixedUpperTriangularMatrix(UpperTriangularMatrix):
    _dimension: int | None = None

    def __class_getitem__(cls, columns: int):
        return _fixed_upper_class(int(columns))

    def __init__(self, data=None, *, uninitialized: bool = False, dtype=None):
        assert self._dimension is not None, "use FixedUpperTriangularMatrix[columns]"
        n = self._dimension
        if data is None:
            self._data = allocate((n * (n + 1) // 2,), uninitialized, dtype)
        else:
            row_major = storage_from(flatten_rows(data), dtype)
            self._data = upper_from_row_major(row_major, 0, n, row_major.dtype)

    @property
    def rows(self) -> int:
        return self._dimension


class FixedStrictlyLowerTriangularMatrix(StrictlyLowerTriangularMatrix):

    def __class_getitem__(cls, rows: int):
        return _fixed_strictly_lower_class(int(rows))

    def __init__(self, data=None, *, uninitialized: bool = False, dtype=None):
        assert self._dimension is not None, (
            "use FixedStrictlyLowerTriangularMatrix[rows]"
        )
        n = self._dimension
        if data is None:
            self._data = allocate((n * (n - 1) // 2,), uninitialized, dtype)
        else:
            self._data = storage_from(flatten_rows(data), dtype)
            assert self._data.shape == (n * (n - 1) // 2,), (
                f"{type(self).__name__} given {self._data.shape[0]} entries"
            )


@functools.lru_cache(maxsize=None)
def _fixed_vector_class(size: int) -> type:
    return type(f'FixedVector[{size}]', (FixedVector,), {'_size': size})


@functools.lru_cache(maxsize=None)
def _fixed_matrix_class(rows: int, columns: int) -> type:
    return type(f'FixedMatrix[{rows}, {columns}]', (FixedMatrix,),
                {'_shape': (rows, columns)})


@functools.lru_cache(maxsize=None)
def _fixed_lower_class(rows: int) -> type:
    return type(f'FixedLowerTriangularMatrix[{rows}]',
                (FixedLowerTriangularMatrix,), {'_dimension': rows})


@functools.lru_cache(maxsize=None)
def _fixed_upper_class(columns: int) -> type:
    return type(f'FixedUpperTriangularMatrix[{columns}]',
                (FixedUpperTriangularMatrix,), {'_dimension': columns})


@functools.lru_cache(maxsize=None)
def _fixed_strictly_lower_class(rows: int) -> type:
    return type(f'FixedStrictlyLowerTriangularMatrix[{rows}]',
                (FixedStrictlyLowerTriangularMatrix,), {'_dimension': rows})


class FixedArrayGenerator:
    """Allocates fixed-size results; dimensions become part of the type."""

    name = REPRESENTATION_FIXED

    def vector(self, size: int, *, uninitialized: bool = False, dtype=None):
        return FixedVector[size](uninitialized=uninitialized, dtype=dtype)

    def matrix(self, rows: int, columns: int, *, uninitialized: bool = False,
               dtype=None):
        return FixedMatrix[rows, columns](uninitialized=uninitialized,
                                          dtype=dtype)

    def lower_triangular(self, rows: int, *, uninitialized: bool = False,
                         dtype=None):
        return FixedLowerTriangularMatrix[rows](uninitialized=uninitialized,
                                                dtype=dtype)

    def upper_triangular(self, columns: int, *, uninitialized: bool = False,
                         dtype=None):
        return FixedUpperTriangularMatrix[columns](uninitialized=uninitialized,
                                                   dtype=dtype)

    def identity(self, rows: int, columns: int, *, dtype=None):
        return FixedMatrix[rows, columns].identity(dtype=dtype)

    def vector_from_array(self, data: np.ndarray):
        return FixedVector[data.shape[0]]._wrap(data)

    def matrix_from_array(self, data: np.ndarray):
        return FixedMatrix[data.shape]._wrap(data)

    def lower_triangular_from_packed(self, data: np.ndarray):
        return FixedLowerTriangularMatrix[_packed_dimension(data)]._wrap(data)

    def upper_triangular_from_packed(self, data: np.ndarray):
        return FixedUpperTriangularMatrix[_packed_dimension(data)]._wrap(data)

    def combine(self, other):
        """Generator for a result mixing this representation with `other`."""
        return self if other is self else other

    def __repr__(self) -> str:
        return 'FixedArrayGenerator()'


def _packed_dimension(data: np.ndarray) -> int:
    return triangle_dimension(data.shape[0])


FIXED_GENERATOR = FixedArrayGenerator()

for _container in (FixedVector, FixedMatrix, FixedLowerTriangularMatrix,
                   FixedUpperTriangularMatrix,
                   FixedStrictlyLowerTriangularMatrix):
    _container.generator = FIXED_GENERATOR
del _container
