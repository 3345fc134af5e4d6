"""Exception hierarchy for spgraph.

Every error raised by the package derives from ``SpGraphError``. The concrete
classes also inherit from the matching built-in (``ValueError`` or
``KeyError``) so callers can catch them the usual way.

Unreachable targets are not errors; the solver returns an empty path instead.
"""

from __future__ import annotations


class SpGraphError(Exception):
    """Base class for all spgraph errors."""


class InvalidArgumentError(SpGraphError, ValueError):
    """An argument failed validation before any state was touched.

    Raised for negative edge weights, negative knapsack weights, values or
    capacity, malformed vertex ids, and malformed matrices or documents.
    """


class EdgeExistsError(SpGraphError, ValueError):
    """An edge between the same unordered vertex pair is already present."""

    def __init__(self, u: object, v: object) -> None:
        super().__init__(u, v)
        self.u = u
        self.v = v

    def __str__(self) -> str:
        return f"edge already exists: ({self.u}, {self.v})"


class EdgeNotFoundError(SpGraphError, KeyError):
    """A mandatory edge lookup found no edge."""

    def __init__(self, u: object, v: object) -> None:
        super().__init__(u, v)
        self.u = u
        self.v = v

    def __str__(self) -> str:
        return f"edge not found: ({self.u}, {self.v})"


class PathValidationError(SpGraphError):
    """A computed path failed its self-check against the graph."""
