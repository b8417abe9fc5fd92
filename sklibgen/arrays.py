"""Flattening of N-dimensional arrays into one C dimension."""

import math
from collections.abc import Sequence


def flatten(array_dimension_sizes: Sequence[int]) -> int:
    """Get the size of an N-dimensional array stored as one dimension.

    E.g. ``foo[3][3]`` becomes ``foo[9]``.
    """
    return math.prod(array_dimension_sizes)


def index_expr(array_dimension_sizes: Sequence[int], flat_idx: int) -> str:
    """Get the native subscript addressing a flat array index.

    For 2-D arrays the row is ``flat_idx // rows`` and the column is
    ``flat_idx % cols``. The row divisor is the row count, not the column
    count, so only square arrays follow row-major order.

    Args:
        array_dimension_sizes: Declared dimension sizes, outermost first
        flat_idx: Index into the flattened array

    Returns:
        Subscript text such as ``"[1][1]"`` or ``"[3]"``
    """
    if len(array_dimension_sizes) == 2:
        r = array_dimension_sizes[0]
        c = array_dimension_sizes[1]
        return f"[{flat_idx // r}][{flat_idx % c}]"
    return f"[{flat_idx}]"
