"""
Generic result container for PyNumerics façade computations.

The Result class provides a standardized envelope that all user-facing
computations use. This enables shared tooling for timing, diagnostics and
reproducibility while allowing each computation to define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (representation, iterations, dimension)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, Any]:
    """Library versions that produced a result."""
    import numpy as np
    import scipy
    from pynumerics import __version__

    return {
        'pynumerics_version': __version__,
        'numpy_version': np.__version__,
        'scipy_version': scipy.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for numerical computations.

    Type Parameters:
        P: The computation-specific parameter payload type

    Attributes:
        params: Computation-specific payload (factors, eigenvalues, solution)
        info: Structured metadata (method, representation, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Versions and algorithm identifiers

    Examples:
        >>> Result(
        ...     params=DenseParams(solution=x),
        ...     info={'method': 'lu', 'n': 3},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_unbounded'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, Any] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
