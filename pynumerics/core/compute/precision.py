"""
Numerical precision constants and scalar utilities.

Provides machine epsilon and the handful of scalar operations the kernels
need (square root, additive identity) in a form that works both for NumPy
floating dtypes and for object dtype carrying arbitrary scalar types such as
decimal.Decimal.
"""

import numbers

import numpy as np
from numpy.typing import NDArray
from typing import Any, Callable


# Machine epsilon for float64
EPSILON_64: float = np.finfo(np.float64).eps  # ~2.22e-16


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Object dtype has no intrinsic precision; float64 epsilon is returned.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    dtype = np.dtype(dtype)
    if not np.issubdtype(dtype, np.inexact):
        return EPSILON_64
    return float(np.finfo(dtype).eps)


def sqrt(x: Any) -> Any:
    """
    Square root of a scalar that lets NaN propagate silently.

    Scalars exposing their own sqrt() (decimal.Decimal, quantity types)
    use it; everything else goes through numpy with invalid-operation
    reporting suppressed, so sqrt of a negative float is NaN without a
    RuntimeWarning.
    """
    own_sqrt = getattr(x, 'sqrt', None)
    if callable(own_sqrt) and not isinstance(x, np.generic):
        return own_sqrt()
    with np.errstate(invalid='ignore'):
        return np.sqrt(x)


def additive_identity(dtype: np.dtype | type) -> Any:
    """Zero of the given dtype; plain int 0 for object dtype."""
    dtype = np.dtype(dtype)
    if dtype == object:
        return 0
    return dtype.type(0)


def scalar_converter(array: Any) -> Callable[[Any], Any]:
    """
    Conversion of dimensionless float factors (reflection and rotation
    coefficients, tolerances) to the scalar type of the entries of `array`.

    NumPy dtypes convert to their own scalar type. For object dtype the
    first non-integral entry decides: exact number types (decimal.Decimal,
    fractions.Fraction) convert to their own type, so that arithmetic stays
    in that type, and anything else (floats, unit-tagged quantities) takes
    the float as is.
    """
    dtype = np.dtype(array.dtype)
    if dtype != object:
        return dtype.type
    for entry in np.asarray(array._values()).flat:
        if isinstance(entry, numbers.Integral):
            continue
        if isinstance(entry, numbers.Number) and not isinstance(
                entry, (float, complex, np.generic)):
            scalar_type = type(entry)
            return lambda value: scalar_type(float(value))
        break
    return lambda value: value


def condition_number(matrix: NDArray[np.floating[Any]]) -> float:
    """
    2-norm condition number of a dense matrix.

    Args:
        matrix: 2D array

    Returns:
        Ratio of largest to smallest singular value; inf if singular
    """
    singular_values = np.linalg.svd(matrix, compute_uv=False)
    if singular_values[-1] == 0:
        return float('inf')
    return float(singular_values[0] / singular_values[-1])
