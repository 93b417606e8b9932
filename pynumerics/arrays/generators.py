"""
Selection of the result allocator for an operation.

Algorithms ask generator_for(inputs...) for the allocator of their results,
which keeps a single algorithm body for both representations: fixed-size
inputs give fixed-size results, anything else gives unbounded results.
"""

from typing import Any

from pynumerics.arrays.fixed import FixedArrayGenerator, FIXED_GENERATOR
from pynumerics.arrays.unbounded import UnboundedArrayGenerator, UNBOUNDED_GENERATOR
from pynumerics.core.representations import (
    REPRESENTATION_FIXED,
    REPRESENTATION_UNBOUNDED,
)

_GENERATORS = {
    REPRESENTATION_FIXED: FIXED_GENERATOR,
    REPRESENTATION_UNBOUNDED: UNBOUNDED_GENERATOR,
}


def generator_for(*operands: Any):
    """
    Allocator for results computed from `operands`.

    The fixed generator is returned only when every container operand is
    fixed-size; views, mixed operands and an empty argument list give the
    unbounded generator. Scalars are ignored.
    """
    generator = None
    for operand in operands:
        operand_generator = getattr(operand, 'generator', None)
        if operand_generator is None:
            continue
        if generator is None:
            generator = operand_generator
        else:
            generator = generator.combine(operand_generator)
    return UNBOUNDED_GENERATOR if generator is None else generator


def get_generator(representation: str):
    """
    Allocator for a representation name.

    Raises:
        ValueError: If the name is not a known representation
    """
    try:
        return _GENERATORS[representation]
    except KeyError:
        raise ValueError(
            f"Unknown representation: {representation!r}. "
            f"Expected one of {sorted(_GENERATORS)}"
        ) from None


__all__ = [
    'FixedArrayGenerator',
    'UnboundedArrayGenerator',
    'FIXED_GENERATOR',
    'UNBOUNDED_GENERATOR',
    'generator_for',
    'get_generator',
]
