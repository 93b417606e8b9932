"""
Representation string constants for PyNumerics.

This module is the SINGLE SOURCE OF TRUTH for representation strings.
Import from here, never use raw strings.

Usage:
    from pynumerics.core.representations import (
        REPRESENTATION_FIXED,
        REPRESENTATION_UNBOUNDED,
    )

    if generator.name == REPRESENTATION_FIXED:
        ...
"""

# Dimensions bound at class level (FixedVector[3], FixedMatrix[3, 3])
REPRESENTATION_FIXED = 'fixed'

# Dimensions chosen at construction, extensible where supported
REPRESENTATION_UNBOUNDED = 'unbounded'

# Let the façade choose from the problem size
REPRESENTATION_AUTO = 'auto'

# All concrete representations as a frozenset for validation
ALL_REPRESENTATIONS = frozenset({
    REPRESENTATION_FIXED,
    REPRESENTATION_UNBOUNDED,
})

__all__ = [
    'REPRESENTATION_FIXED',
    'REPRESENTATION_UNBOUNDED',
    'REPRESENTATION_AUTO',
    'ALL_REPRESENTATIONS',
]
