"""
Dense linear-algebra solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pynumerics.core.result import Result

if TYPE_CHECKING:
    from pynumerics.dense.design import DenseDesign


@dataclass(frozen=True)
class DenseParams:
    """
    Parameter payload for dense computations.

    All fields are optional (None if not computed); each entry point
    populates only its own fields. Arrays are plain NumPy copies of the
    container results.
    """
    # Linear solve: shape (n,)
    solution: NDArray[np.floating[Any]] | None = None

    # Cholesky: upper-triangular R with A = ᵗR R, shape (n, n)
    cholesky_factor: NDArray[np.floating[Any]] | None = None

    # Symmetric eigen-decomposition: (n,) and columns of (n, n)
    eigenvalues: NDArray[np.floating[Any]] | None = None
    eigenvectors: NDArray[np.floating[Any]] | None = None

    # Real Schur: sorted real eigenvalues and the quasi-triangular iterate
    real_eigenvalues: NDArray[np.floating[Any]] | None = None
    schur_form: NDArray[np.floating[Any]] | None = None

    # Hessenberg reduction, shape (n, n)
    hessenberg: NDArray[np.floating[Any]] | None = None


@dataclass
class DenseSolution:
    """
    User-facing dense computation results.

    Wraps Result[DenseParams] and provides convenient accessors.
    """
    _result: Result[DenseParams]
    _design: 'DenseDesign'

    # --- Payload ---

    @property
    def solution(self) -> NDArray[np.floating[Any]] | None:
        """x with A x = b."""
        return self._result.params.solution

    @property
    def cholesky_factor(self) -> NDArray[np.floating[Any]] | None:
        """Upper-triangular R with A = ᵗR R; NaN if A is not positive definite."""
        return self._result.params.cholesky_factor

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]] | None:
        """Eigenvalues of a symmetric A, in ascending order."""
        return self._result.params.eigenvalues

    @property
    def eigenvectors(self) -> NDArray[np.floating[Any]] | None:
        """Orthonormal eigenvectors as columns, matching eigenvalues."""
        return self._result.params.eigenvectors

    @property
    def real_eigenvalues(self) -> NDArray[np.floating[Any]] | None:
        """Distinct real eigenvalues of A, ascending."""
        return self._result.params.real_eigenvalues

    @property
    def schur_form(self) -> NDArray[np.floating[Any]] | None:
        """Quasi-upper-triangular iterate of the Schur decomposition."""
        return self._result.params.schur_form

    @property
    def hessenberg(self) -> NDArray[np.floating[Any]] | None:
        """Upper-Hessenberg matrix similar to A."""
        return self._result.params.hessenberg

    # --- Metadata ---

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def representation(self) -> str:
        """Container representation the computation ran on."""
        return self._result.info['representation']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def _computed(self) -> list[str]:
        params = self._result.params
        names = [
            'solution', 'cholesky_factor', 'eigenvalues', 'eigenvectors',
            'real_eigenvalues', 'schur_form', 'hessenberg',
        ]
        return [name for name in names if getattr(params, name) is not None]

    def summary(self) -> str:
        """Plain-text summary of what was computed."""
        lines = [
            f"Dense {self._result.info.get('method', 'computation')} "
            f"(n={self.n}, representation={self.representation})",
        ]
        if self.solution is not None:
            lines.append("Solution:")
            lines.extend(f"  x[{i}] = {value:.10g}"
                         for i, value in enumerate(self.solution))
        if self.eigenvalues is not None:
            lines.append("Eigenvalues:")
            lines.extend(f"  {value:.10g}" for value in self.eigenvalues)
        if self.real_eigenvalues is not None:
            lines.append("Real eigenvalues:")
            if len(self.real_eigenvalues) == 0:
                lines.append("  (none)")
            lines.extend(f"  {value:.10g}" for value in self.real_eigenvalues)
        if self.cholesky_factor is not None:
            positive_definite = not np.any(np.isnan(self.cholesky_factor))
            lines.append(f"Cholesky factor computed "
                         f"(positive definite: {positive_definite})")
        if self.hessenberg is not None:
            lines.append("Hessenberg form computed")
        if self.warnings:
            lines.append("Warnings:")
            lines.extend(f"  {message}" for message in self.warnings)
        return "\n".join(lines)

    def __repr__(self) -> str:
        computed = ", ".join(self._computed()) or "none"
        return (f"DenseSolution(n={self.n}, "
                f"representation={self.representation!r}, "
                f"computed=[{computed}])")
