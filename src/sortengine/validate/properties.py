"""
Property helpers for validating sorting and selection results.

Public API (stable):
    is_nondecreasing(xs) -> bool
    first_nondecreasing_violation_index(xs) -> int | None
    is_permutation(a, b) -> bool
    permutation_counter_diff(a, b) -> dict
    assert_no_mutation(before, after) -> None
    is_partitioned_at(xs, k) -> bool

Notes
-----
- Order checks use only `<`, the same contract the algorithms rely on, so they
  work for any element type with a strict total order.
- Multiset checks (`is_permutation`, `permutation_counter_diff`) need hashable
  elements.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Hashable, Optional, Sequence

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "permutation_counter_diff",
    "assert_no_mutation",
    "is_partitioned_at",
]


def is_nondecreasing(xs: Sequence[Any]) -> bool:
    """Return True iff no xs[i+1] < xs[i]."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[Any]) -> Optional[int]:
    """
    Return the first index i where xs[i+1] < xs[i], or None if nondecreasing.

    Useful for precise error messages:
        i = first_nondecreasing_violation_index(out)
        assert i is None, f"out of order at i={i}: {out[i]!r} > {out[i+1]!r}"
    """
    for i in range(len(xs) - 1):
        if xs[i + 1] < xs[i]:
            return i
    return None


def is_permutation(a: Sequence[Hashable], b: Sequence[Hashable]) -> bool:
    """Return True iff `a` and `b` hold exactly the same multiset of values."""
    if len(a) != len(b):
        return False
    return Counter(a) == Counter(b)


def permutation_counter_diff(a: Sequence[Hashable], b: Sequence[Hashable]) -> Dict[Hashable, int]:
    """
    Return value -> (count in a - count in b) for every value whose counts differ.

    An empty dict means identical multiplicities.
    """
    diff = Counter(a)
    diff.subtract(Counter(b))
    return {k: d for k, d in diff.items() if d != 0}


def assert_no_mutation(before: Sequence[Any], after: Sequence[Any]) -> None:
    """
    Assert that two sequences are element-wise equal; used to check that a
    copying adapter left its input alone.

    Raises AssertionError naming the first differing index.
    """
    if len(before) != len(after):
        raise AssertionError(f"Input mutated: length changed from {len(before)} to {len(after)}")
    for i, (x, y) in enumerate(zip(before, after)):
        if x != y:
            raise AssertionError(f"Input mutated at index {i}: before={x!r}, after={y!r}")


def is_partitioned_at(xs: Sequence[Any], k: int) -> bool:
    """
    Return True iff nothing before index k is greater than xs[k] and nothing
    after it is less, i.e. the state quick select leaves behind.
    """
    pivot = xs[k]
    return all(not (pivot < x) for x in xs[:k]) and all(not (x < pivot) for x in xs[k + 1:])
