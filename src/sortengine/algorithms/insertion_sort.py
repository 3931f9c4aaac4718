"""
Insertion sort.

Public API (stable):
    insertion_sort(seq, *, less=None) -> None      # in place
    sort(a, *, config=None) -> list                # benchmark adapter, copies `a`
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, TypeVar

from ._primitives import Less, insertion_sort_range, reject_unknown_keys, resolve_less

T = TypeVar("T")

__all__ = ["insertion_sort", "sort"]


def insertion_sort(seq: MutableSequence[T], *, less: Optional[Less] = None) -> None:
    """
    Sort `seq` in place into non-descending order.

    For each i >= 1 that precedes its left neighbour, the sorted prefix is
    shifted right until the insertion point is found. O(n^2) comparisons,
    O(1) extra space.

    Parameters
    ----------
    seq : mutable sequence
        Elements to sort. Empty and single-element sequences are left as is.
    less : callable, optional
        Strict total order `less(a, b)`; defaults to `a < b`.
    """
    insertion_sort_range(seq, 0, len(seq) - 1, resolve_less(less))


def sort(a: List[T], *, config: Optional[Dict[str, Any]] = None) -> List[T]:
    reject_unknown_keys("insertion_sort", config)
    out = list(a)
    insertion_sort(out)
    return out
