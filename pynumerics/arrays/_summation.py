"""
Accumulating reductions shared by containers and views.
"""

from typing import Any


def dot_product(left: Any, right: Any) -> Any:
    """
    Σ left[i] * right[i] in a single accumulating pass.

    The sum starts from the first product rather than from a literal zero so
    that the result carries the product type of the operands (numpy scalar,
    Decimal, quantity). An empty pair yields 0.0.
    """
    assert left.size == right.size, (
        f"dot product of sizes {left.size} and {right.size}"
    )
    size = left.size
    if size == 0:
        return 0.0
    result = left[0] * right[0]
    for i in range(1, size):
        result += left[i] * right[i]
    return result


def sum_of_squares(values: Any) -> Any:
    """Σ x² over an iterable of scalars, accumulated in one pass."""
    result = None
    for value in values:
        square = value * value
        result = square if result is None else result + square
    return 0.0 if result is None else result
