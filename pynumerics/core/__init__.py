"""
Core infrastructure for PyNumerics.

This module provides shared abstractions and utilities used by the array
containers, the numerical kernels and the dense façade.

Key components:
    protocols: VectorLike, MatrixLike, ArrayGenerator, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception and warning hierarchy
    validation: Input validators
    compute: Precision helpers, tolerances, timing
"""

from pynumerics.core.protocols import VectorLike, MatrixLike, ArrayGenerator, Backend
from pynumerics.core.result import Result
from pynumerics.core.exceptions import (
    PyNumericsError,
    ValidationError,
    DimensionError,
    NumericsWarning,
    DegeneracyWarning,
    ConvergenceWarning,
)

__all__ = [
    # Protocols
    "VectorLike",
    "MatrixLike",
    "ArrayGenerator",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyNumericsError",
    "ValidationError",
    "DimensionError",
    # Warnings
    "NumericsWarning",
    "DegeneracyWarning",
    "ConvergenceWarning",
]
