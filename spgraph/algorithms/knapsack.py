"""0/1 knapsack by dynamic programming.

Given a capacity and items with a weight and a value, pick a subset whose total
weight fits the capacity and whose total value is maximal. Each item is taken
at most once.

``dp[i][w]`` is the best value using the first ``i`` items with capacity ``w``:

    dp[0][w] = 0
    dp[i][w] = max(dp[i-1][w], dp[i-1][w - weight_i] + value_i)  if weight_i <= w

`solve` fills the full table, `solve_optimized` keeps one row and walks
capacities downward so an item cannot be counted twice, and `select` backtracks
through the table to recover the chosen items.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Any, Iterable, List, Sequence, Tuple, Union

import numpy as np

from spgraph.errors import InvalidArgumentError
from spgraph.lib.matrix import make_matrix


@dataclass(frozen=True)
class Item:
    """A knapsack item.

    Raises:
        InvalidArgumentError: If weight or value is negative or not an integer.
    """

    weight: int
    value: int

    def __post_init__(self) -> None:
        for name in ("weight", "value"):
            amount = getattr(self, name)
            if isinstance(amount, bool) or not isinstance(amount, Integral):
                raise InvalidArgumentError(f"Item {name} must be an integer, got {amount!r}")
            if amount < 0:
                raise InvalidArgumentError("Weight and value must be non-negative")


ItemLike = Union[Item, Tuple[int, int]]


def _as_items(items: Iterable[ItemLike]) -> List[Item]:
    return [item if isinstance(item, Item) else Item(*item) for item in items]


def _check_capacity(capacity: Any) -> None:
    if isinstance(capacity, bool) or not isinstance(capacity, Integral):
        raise InvalidArgumentError(f"Capacity must be an integer, got {capacity!r}")
    if capacity < 0:
        raise InvalidArgumentError("Capacity must be non-negative")


_INT64_MAX = int(np.iinfo(np.int64).max)


def _fill_table(items: Sequence[Item], capacity: int) -> np.ndarray:
    # Values that could overflow int64 fall back to Python ints.
    dtype = np.int64 if sum(item.value for item in items) <= _INT64_MAX else object
    dp = make_matrix(len(items) + 1, capacity + 1, fill=0, dtype=dtype)
    for i, item in enumerate(items, start=1):
        dp[i] = dp[i - 1]
        if item.weight <= capacity:
            taken = dp[i - 1, : capacity + 1 - item.weight] + item.value
            dp[i, item.weight :] = np.maximum(dp[i, item.weight :], taken)
    return dp


def solve(items: Iterable[ItemLike], capacity: int) -> int:
    """Return the maximum total value that fits into ``capacity``.

    Args:
        items: `Item` objects or ``(weight, value)`` pairs.
        capacity: Knapsack capacity.

    Raises:
        InvalidArgumentError: On a negative capacity, weight or value. Raised
            before any computation.
    """
    items = _as_items(items)
    _check_capacity(capacity)
    if not items or capacity == 0:
        return 0
    return int(_fill_table(items, capacity)[len(items), capacity])


def solve_optimized(items: Iterable[ItemLike], capacity: int) -> int:
    """Same as `solve`, keeping a single row of the table."""
    items = _as_items(items)
    _check_capacity(capacity)
    if not items or capacity == 0:
        return 0

    dp = [0] * (capacity + 1)
    for item in items:
        # Downward so dp[w - weight] still excludes the current item.
        for w in range(capacity, item.weight - 1, -1):
            dp[w] = max(dp[w], dp[w - item.weight] + item.value)
    return dp[capacity]


def select(items: Iterable[ItemLike], capacity: int) -> List[int]:
    """Return the indices of an optimal item subset, in ascending order.

    Item ``i`` is taken when ``dp[i][w] != dp[i-1][w]`` while walking back from
    ``dp[n][capacity]``.
    """
    items = _as_items(items)
    _check_capacity(capacity)
    if not items or capacity == 0:
        return []

    dp = _fill_table(items, capacity)
    selected: List[int] = []
    w = capacity
    for i in range(len(items), 0, -1):
        if dp[i, w] != dp[i - 1, w]:
            selected.append(i - 1)
            w -= items[i - 1].weight
    selected.reverse()
    return selected
