"""
DenseDesign: validated input of the dense linear-algebra façade.

Wraps a square matrix and an optional right-hand side, checked once at
construction. Follows the pynumerics Design pattern: validate at the
boundary, then hand plain arrays to a backend.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pynumerics.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_2d,
    check_square,
    check_consistent_length,
)


@dataclass(frozen=True)
class DenseDesign:
    """
    Design for dense matrix computations.

    Holds a square, finite, real matrix A (n × n) and optionally a vector
    b of length n. Immutable after construction.

    Construction:
        DenseDesign.from_array(A)
        DenseDesign.from_array(A, b)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]] | None
    _n: int

    @classmethod
    def from_array(cls, A: ArrayLike, b: ArrayLike | None = None) -> DenseDesign:
        """
        Build DenseDesign from array-like data.

        Parameters
        ----------
        A : array-like
            Square 2D matrix.
        b : array-like, optional
            Right-hand side, 1D of length A.shape[0].

        Raises
        ------
        ValidationError
            If the data is non-numeric, complex or not finite.
        DimensionError
            If A is not a non-empty square matrix, or b does not match it.
        """
        A_array = check_array(A, 'A')
        check_2d(A_array, 'A')
        check_square(A_array, 'A')
        check_finite(A_array, 'A')

        b_array = None
        if b is not None:
            b_array = check_array(b, 'b')
            check_1d(b_array, 'b')
            check_finite(b_array, 'b')
            check_consistent_length(A_array, b_array, names=('A', 'b'))

        return cls(
            _A=np.array(A_array, dtype=np.float64),
            _b=None if b_array is None else np.array(b_array, dtype=np.float64),
            _n=A_array.shape[0],
        )

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Matrix (n × n)."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]] | None:
        """Right-hand side (n,), or None."""
        return self._b

    @property
    def n(self) -> int:
        """Dimension of A."""
        return self._n

    @property
    def has_rhs(self) -> bool:
        return self._b is not None

    def is_symmetric(self, rtol: float = 1e-10, atol: float = 1e-12) -> bool:
        """Whether A equals its transpose within tolerance."""
        return bool(np.allclose(self._A, self._A.T, rtol=rtol, atol=atol))

    def __repr__(self) -> str:
        rhs = ", rhs" if self.has_rhs else ""
        return f"DenseDesign(n={self._n}{rhs})"
