"""
Selection sort.

Public API (stable):
    selection_sort(seq, *, less=None) -> None
    sort(a, *, config=None) -> list
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, TypeVar

from ._primitives import Less, reject_unknown_keys, resolve_less, swap

T = TypeVar("T")

__all__ = ["selection_sort", "sort"]


def selection_sort(seq: MutableSequence[T], *, less: Optional[Less] = None) -> None:
    """
    Sort `seq` in place: for each position i, swap the minimum of seq[i:] into i.

    O(n^2) comparisons, at most n - 1 swaps.
    """
    lt = resolve_less(less)
    n = len(seq)
    for i in range(n - 1):
        smallest = i
        for k in range(i + 1, n):
            if lt(seq[k], seq[smallest]):
                smallest = k
        if smallest != i:
            swap(seq, i, smallest)


def sort(a: List[T], *, config: Optional[Dict[str, Any]] = None) -> List[T]:
    reject_unknown_keys("selection_sort", config)
    out = list(a)
    selection_sort(out)
    return out
