"""
Result aggregates of the decompositions.

Plain immutable records; the containers they hold are owned by the caller.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RDRDecompositionResult:
    """A = ᵗR D R with R unit upper-triangular and D the diagonal."""
    R: Any
    D: Any


@dataclass(frozen=True)
class HessenbergDecompositionResult:
    """Upper-Hessenberg matrix similar to the input."""
    H: Any


@dataclass(frozen=True)
class RealSchurDecompositionResult:
    """
    Quasi-upper-triangular iterate and the real eigenvalues read off it.

    real_eigenvalues is sorted and holds each value once.
    """
    T: Any
    real_eigenvalues: tuple


@dataclass(frozen=True)
class ClassicalJacobiResult:
    """
    Accumulated rotation V and eigenvalues, with ᵗV A V ≈ diag(eigenvalues).

    eigenvalues[i] is associated with column i of V; they are not sorted.
    """
    rotation: Any
    eigenvalues: Any


@dataclass(frozen=True)
class RayleighQuotientIterationResult:
    eigenvector: Any
    eigenvalue: Any
