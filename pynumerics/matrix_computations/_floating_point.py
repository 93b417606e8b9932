"""
Floating-point error reporting inside the kernels.
"""

import functools

import numpy as np


def silent_floating_point(function):
    """
    Run `function` with NumPy floating-point error reporting disabled.

    Division by zero, invalid operations and overflow produce Inf/NaN in the
    result without a RuntimeWarning; the kernels report degeneracy through
    their own warning categories instead.
    """
    @functools.wraps(function)
    def wrapper(*args, **kwargs):
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return function(*args, **kwargs)
    return wrapper
