"""
Exception and warning hierarchy for PyNumerics.

All exceptions inherit from PyNumericsError to allow catching any
library-specific error. Exceptions are reserved for invalid user input at
the public entry points; the numerical kernels never raise for numerical
reasons.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Numerical degeneracy (singular pivots, NaN from non positive-definite
      input) and non-convergence are reported as warnings, never raised;
      the floating-point result (possibly NaN/Inf) is returned to the caller
"""


class PyNumericsError(Exception):
    """Base exception for all PyNumerics errors."""
    pass


class ValidationError(PyNumericsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.

    Attributes:
        expected: Expected shape or length, if known
        actual: Actual shape or length, if known
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NumericsWarning(RuntimeWarning):
    """Base category for diagnostics emitted by the numerical kernels."""
    pass


class DegeneracyWarning(NumericsWarning):
    """
    The computation met a degenerate configuration and continued.

    Examples: a zero pivot during LU factorization, a basis element that is
    numerically in the span of its predecessors. The result may contain
    NaN or Inf values.
    """
    pass


class ConvergenceWarning(NumericsWarning):
    """
    An iterative method reached its iteration cap.

    The last iterate is returned; the caller decides whether it is usable.
    """
    pass
