"""Owned two-dimensional buffers.

``make_matrix`` returns a freshly allocated ``numpy`` array. The array owns its
storage; rows and the row index are released together when the last reference
goes away, so there is no explicit release call.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from spgraph.errors import InvalidArgumentError


def make_matrix(rows: int, cols: int, fill: Any = 0, dtype: Any = int) -> np.ndarray:
    """Allocate a ``rows x cols`` matrix initialised to ``fill``.

    Args:
        rows: Number of rows. Must be non-negative.
        cols: Number of columns. Must be non-negative.
        fill: Initial value of every cell.
        dtype: numpy dtype of the buffer. Use ``object`` for arbitrary Python
            values such as tuples.

    Returns:
        np.ndarray: A C-contiguous array of shape ``(rows, cols)``.

    Raises:
        InvalidArgumentError: If either dimension is negative or not an integer.
    """
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidArgumentError(f"{name} must be an integer, got {value!r}")
        if value < 0:
            raise InvalidArgumentError(f"{name} must be non-negative, got {value}")

    matrix = np.empty((rows, cols), dtype=dtype)
    matrix.fill(fill)
    return matrix
