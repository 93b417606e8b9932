"""
Shared compute infrastructure for PyNumerics.

Precision helpers, default tolerances and timing utilities used by the
kernels and the dense façade.

Submodules:
    precision: Machine epsilon and scalar helpers
    tolerances: Default tolerances and iteration caps
    timing: Execution timing utilities
"""

from pynumerics.core.compute.precision import (
    EPSILON_64,
    machine_epsilon,
    sqrt,
    additive_identity,
)
from pynumerics.core.compute.timing import Timer, timed

__all__ = [
    "EPSILON_64",
    "machine_epsilon",
    "sqrt",
    "additive_identity",
    "Timer",
    "timed",
]
