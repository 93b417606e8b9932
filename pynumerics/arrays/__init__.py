"""
Dense vector and matrix containers, views and their algebra.

Two representations share every algorithm:
    fixed:      FixedVector[n], FixedMatrix[r, c], Fixed*TriangularMatrix[n]
    unbounded:  UnboundedVector(n), UnboundedMatrix(r, c),
                Unbounded*TriangularMatrix(n), growable with extend()

Views (ColumnView, BlockView, TransposedView) borrow a container and let
algorithms update sub-regions in place.
"""

from pynumerics.arrays.fixed import (
    FixedVector,
    FixedMatrix,
    FixedLowerTriangularMatrix,
    FixedUpperTriangularMatrix,
    FixedStrictlyLowerTriangularMatrix,
)
from pynumerics.arrays.unbounded import (
    UnboundedVector,
    UnboundedMatrix,
    UnboundedLowerTriangularMatrix,
    UnboundedUpperTriangularMatrix,
)
from pynumerics.arrays.transposed import TransposedView
from pynumerics.arrays.views import ColumnView, BlockView
from pynumerics.arrays.generators import (
    FixedArrayGenerator,
    UnboundedArrayGenerator,
    FIXED_GENERATOR,
    UNBOUNDED_GENERATOR,
    generator_for,
    get_generator,
)
from pynumerics.arrays.algebra import (
    dot_product,
    inner_product,
    normalize,
    bilinear_form,
    symmetric_product,
    symmetric_square,
    diagonal,
)

__all__ = [
    # Fixed
    "FixedVector",
    "FixedMatrix",
    "FixedLowerTriangularMatrix",
    "FixedUpperTriangularMatrix",
    "FixedStrictlyLowerTriangularMatrix",
    # Unbounded
    "UnboundedVector",
    "UnboundedMatrix",
    "UnboundedLowerTriangularMatrix",
    "UnboundedUpperTriangularMatrix",
    # Views
    "TransposedView",
    "ColumnView",
    "BlockView",
    # Generators
    "FixedArrayGenerator",
    "UnboundedArrayGenerator",
    "FIXED_GENERATOR",
    "UNBOUNDED_GENERATOR",
    "generator_for",
    "get_generator",
    # Algebra
    "dot_product",
    "inner_product",
    "normalize",
    "bilinear_form",
    "symmetric_product",
    "symmetric_square",
    "diagonal",
]
