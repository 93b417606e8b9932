"""
CPU backend for dense matrix computations.

Converts the design into fixed-size or unbounded containers and runs the
pynumerics kernels on them. Diagnostics emitted by the kernels are both
re-emitted to the caller and recorded in Result.warnings.
"""

from __future__ import annotations

import warnings
from typing import Any
import numpy as np

from pynumerics.arrays import get_generator
from pynumerics.core.compute.precision import condition_number
from pynumerics.core.compute.timing import Timer
from pynumerics.core.compute.tolerances import (
    DEFAULT_JACOBI_MAX_ITERATIONS,
    DEFAULT_JACOBI_TOLERANCE,
    DEFAULT_SCHUR_TOLERANCE,
)
from pynumerics.core.exceptions import NumericsWarning, ValidationError
from pynumerics.core.result import Result
from pynumerics.dense.design import DenseDesign
from pynumerics.dense.solution import DenseParams
from pynumerics.matrix_computations import (
    cholesky_decomposition,
    classical_jacobi,
    hessenberg_decomposition,
    real_schur_decomposition,
    solve,
)

_ALGORITHMS = {
    'linear_solve': 'lu_partial_pivoting',
    'cholesky': 'cholesky_higham_10.2',
    'symmetric_eigen': 'classical_jacobi',
    'real_eigenvalues': 'francis_double_shift_qr',
    'hessenberg': 'householder_hessenberg',
}


class CPUDenseBackend:
    """CPU backend running the container kernels in one representation."""

    def __init__(self, representation: str):
        self._representation = representation
        self._generator = get_generator(representation)

    @property
    def name(self) -> str:
        return f'cpu_{self._representation}'

    @property
    def representation(self) -> str:
        return self._representation

    def solve(
        self,
        design: DenseDesign,
        *,
        compute: str,
        max_iterations: int = DEFAULT_JACOBI_MAX_ITERATIONS,
        tol: float | None = None,
    ) -> Result[DenseParams]:
        """
        Run one dense computation.

        Parameters
        ----------
        design : DenseDesign
        compute : str
            One of 'linear_solve', 'cholesky', 'symmetric_eigen',
            'real_eigenvalues', 'hessenberg'.
        max_iterations : int
            Rotation cap for 'symmetric_eigen'.
        tol : float or None
            Convergence tolerance for the iterative computations; the
            kernel default when None.
        """
        if compute not in _ALGORITHMS:
            raise ValidationError(
                f"Unknown computation: {compute!r}. "
                f"Expected one of {sorted(_ALGORITHMS)}"
            )

        timer = Timer()
        timer.start()
        warnings_list: list[str] = []
        info: dict[str, Any] = {
            'method': compute,
            'n': design.n,
            'representation': self._representation,
        }

        with timer.section('conversion'):
            A = self._generator.matrix_from_array(design.A.copy())
            b = None
            if design.b is not None:
                b = self._generator.vector_from_array(design.b.copy())

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always')
            with timer.section(compute):
                params = self._compute(compute, design, A, b,
                                       max_iterations, tol, info)

        for warning in caught:
            if issubclass(warning.category, NumericsWarning):
                warnings_list.append(str(warning.message))
            warnings.warn_explicit(warning.message, warning.category,
                                   warning.filename, warning.lineno)

        if params.cholesky_factor is not None and np.any(
                np.isnan(params.cholesky_factor)):
            warnings_list.append(
                "Matrix is not positive definite: "
                "Cholesky factor contains NaN"
            )
            info['positive_definite'] = False
        elif params.cholesky_factor is not None:
            info['positive_definite'] = True

        timer.stop()

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
            provenance={'algorithm': _ALGORITHMS[compute],
                        'representation': self._representation},
        )

    def _compute(self, compute: str, design: DenseDesign, A: Any, b: Any,
                 max_iterations: int, tol: float | None,
                 info: dict[str, Any]) -> DenseParams:
        if compute == 'linear_solve':
            if b is None:
                raise ValidationError("linear_solve requires a right-hand side b")
            info['condition_number'] = condition_number(design.A)
            x = solve(A, b)
            return DenseParams(solution=x.to_numpy().astype(np.float64))

        if compute == 'cholesky':
            R = cholesky_decomposition(self._upper_triangle(design.A))
            return DenseParams(cholesky_factor=R.to_numpy().astype(np.float64))

        if compute == 'symmetric_eigen':
            epsilon = DEFAULT_JACOBI_TOLERANCE if tol is None else tol
            result = classical_jacobi(A, max_iterations=max_iterations,
                                      epsilon=epsilon)
            eigenvalues = result.eigenvalues.to_numpy().astype(np.float64)
            order = np.argsort(eigenvalues, kind='stable')
            eigenvectors = result.rotation.to_numpy().astype(np.float64)
            return DenseParams(eigenvalues=eigenvalues[order],
                               eigenvectors=eigenvectors[:, order])

        if compute == 'real_eigenvalues':
            epsilon = DEFAULT_SCHUR_TOLERANCE if tol is None else tol
            result = real_schur_decomposition(A, epsilon=epsilon)
            real = np.array(result.real_eigenvalues, dtype=np.float64)
            info['n_real_eigenvalues'] = len(real)
            return DenseParams(real_eigenvalues=real,
                               schur_form=result.T.to_numpy().astype(np.float64))

        H = hessenberg_decomposition(A).H
        return DenseParams(hessenberg=H.to_numpy().astype(np.float64))

    def _upper_triangle(self, array: np.ndarray) -> Any:
        n = array.shape[0]
        U = self._generator.upper_triangular(n)
        for j in range(n):
            for i in range(j + 1):
                U[i, j] = array[i, j]
        return U
