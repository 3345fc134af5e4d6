"""Library utilities for spgraph.

Small helpers shared by the algorithms that are not graph types themselves.
"""

from spgraph.lib.matrix import make_matrix

__all__ = [
    "make_matrix",
]
