"""
Ground-truth answers for checking the algorithms.

Python's built-in `sorted()` is the oracle for both full sorts and order
statistics: it is deterministic, portable, and independent of every routine
in `sortengine.algorithms`.

Public API (stable):
    ORACLE_NAME
    oracle_sort(a) -> list
    equals_oracle(a, out) -> bool
    oracle_select(a, k) -> element

Conventions:
- The oracle never mutates its input.
- Comparison with the oracle is by value (`==`). For a tagged element type
  whose `==` ignores the tag, ties compare equal no matter which tagged copy
  landed where; tie-break checks belong in dedicated tests.
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")

ORACLE_NAME: str = "python_sorted_timsort"

__all__ = ["ORACLE_NAME", "oracle_sort", "equals_oracle", "oracle_select"]


def oracle_sort(a: Sequence[T]) -> List[T]:
    """Return a new list with the elements of `a` in nondecreasing order."""
    return sorted(a)


def equals_oracle(a: Sequence[T], out: Sequence[T]) -> bool:
    """
    Check whether an algorithm's output matches the oracle exactly.

    Parameters
    ----------
    a : sequence
        The original input.
    out : sequence
        The algorithm's output.

    Returns
    -------
    bool
        True iff `list(out) == oracle_sort(a)`.
    """
    return list(out) == oracle_sort(a)


def oracle_select(a: Sequence[T], k: int) -> T:
    """Return the kth smallest (0-based) element of `a`; IndexError if k is out of range."""
    if not 0 <= k < len(a):
        raise IndexError(f"k out of range: {k} not in [0, {len(a)})")
    return sorted(a)[k]
