"""
Scalar root finding.

solve_quadratic_equation: real roots of a quadratic around an origin
bisect: bisection down to adjacent floating-point values
brent: Brent's zero-finding procedure, via scipy.optimize.brentq
"""

import warnings
from typing import Any, Callable

import numpy as np
from scipy import optimize

from pynumerics.core.compute.precision import sqrt
from pynumerics.core.exceptions import ValidationError, ConvergenceWarning

# Brent iterations before giving up; the procedure normally needs far fewer.
BRENT_MAX_ITERATIONS = 200


def solve_quadratic_equation(origin: Any, a0: Any, a1: Any, a2: Any) -> tuple:
    """
    Real solutions of a2 (x - origin)² + a1 (x - origin) + a0 = 0.

    The roots are computed without cancellation: with
    q = -(a1 + sign(a1) √Δ) / 2 they are q / a2 and a0 / q.

    Args:
        origin: Point around which the polynomial is expanded
        a0, a1, a2: Coefficients

    Returns:
        Sorted tuple of 0, 1 or 2 roots. A vanishing a2 reduces to the
        linear equation; a vanishing a2 and a1 has no roots.
    """
    if a2 == 0:
        if a1 == 0:
            return ()
        return (origin - a0 / a1,)

    discriminant = a1 * a1 - 4 * a0 * a2
    if discriminant < 0:
        return ()
    if discriminant == 0:
        return (origin - a1 / (2 * a2),)

    root = sqrt(discriminant)
    if a1 >= 0:
        q = -(a1 + root) / 2
    else:
        q = -(a1 - root) / 2
    x1 = q / a2
    x2 = a0 / q
    if x2 < x1:
        x1, x2 = x2, x1
    return (origin + x1, origin + x2)


def _check_bracket(f_lower: Any, f_upper: Any, lower: Any, upper: Any) -> None:
    if (f_lower > 0 and f_upper > 0) or (f_lower < 0 and f_upper < 0):
        raise ValidationError(
            f"f({lower}) = {f_lower} and f({upper}) = {f_upper} "
            f"do not bracket a root"
        )


def bisect(f: Callable[[Any], Any], lower: Any, upper: Any) -> Any:
    """
    Root of `f` between `lower` and `upper` by bisection.

    The result is less than one ULP from a root of any continuous function
    agreeing with `f` on floating-point arguments.

    Raises:
        ValidationError: If f(lower) and f(upper) are nonzero and have the
            same sign
    """
    f_lower = f(lower)
    f_upper = f(upper)
    if f_lower == 0:
        return lower
    if f_upper == 0:
        return upper
    _check_bracket(f_lower, f_upper, lower, upper)

    while True:
        middle = lower + (upper - lower) / 2
        if middle == lower or middle == upper:
            return middle
        f_middle = f(middle)
        if f_middle == 0:
            return middle
        if (f_middle > 0) == (f_lower > 0):
            lower, f_lower = middle, f_middle
        else:
            upper = middle


def brent(f: Callable[[float], float], lower: float, upper: float) -> float:
    """
    Root of `f` between `lower` and `upper` by Brent's procedure.

    The absolute tolerance is the smallest positive normal float, so the
    bracket shrinks to a few ULPs. Non-convergence within
    BRENT_MAX_ITERATIONS emits a ConvergenceWarning and returns the last
    estimate.

    Raises:
        ValidationError: If f(lower) and f(upper) are nonzero and have the
            same sign
    """
    f_lower = f(lower)
    f_upper = f(upper)
    if f_lower == 0:
        return lower
    if f_upper == 0:
        return upper
    _check_bracket(f_lower, f_upper, lower, upper)

    root, info = optimize.brentq(
        f, lower, upper,
        xtol=np.finfo(np.float64).tiny,
        maxiter=BRENT_MAX_ITERATIONS,
        full_output=True,
        disp=False,
    )
    if not info.converged:
        warnings.warn(
            f"Brent root finding did not converge in {info.iterations} "
            f"iterations on [{lower}, {upper}]",
            ConvergenceWarning,
            stacklevel=2,
        )
    return root
