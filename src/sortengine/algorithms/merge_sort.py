"""
Top-down merge sort for random-access sequences.

Public API (stable):
    merge_sort(seq, *, less=None) -> None
    sort(a, *, config=None) -> list

Tie-break:
    When merging, the left run's head is taken only if it is strictly less
    than the right run's head. On ties the right element goes first, so equal
    elements do NOT keep their input order. For [2a, 1, 2b] the result is
    [1, 2b, 2a].
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, TypeVar

from ._primitives import Less, reject_unknown_keys, resolve_less

T = TypeVar("T")

__all__ = ["merge_sort", "sort"]


def merge_sort(seq: MutableSequence[T], *, less: Optional[Less] = None) -> None:
    """
    Sort `seq` in place with a recursive merge sort.

    One scratch list of len(seq) is allocated per call and shared by every
    recursive step, so auxiliary space is O(n) and recursion depth O(log n).
    """
    n = len(seq)
    if n < 2:
        return
    scratch: List[Any] = [None] * n
    _merge_sort_range(seq, 0, n - 1, scratch, resolve_less(less))


def _merge_sort_range(seq: MutableSequence[T], left: int, right: int, scratch: List[Any], less: Less) -> None:
    if left >= right:
        return
    mid = (left + right) // 2
    _merge_sort_range(seq, left, mid, scratch, less)
    _merge_sort_range(seq, mid + 1, right, scratch, less)
    _merge_runs(seq, left, mid, right, scratch, less)


def _merge_runs(seq: MutableSequence[T], left: int, mid: int, right: int, scratch: List[Any], less: Less) -> None:
    """Merge sorted runs seq[left..mid] and seq[mid+1..right] through scratch."""
    out = left
    lpos, rpos = left, mid + 1
    while lpos <= mid and rpos <= right:
        if less(seq[lpos], seq[rpos]):
            scratch[out] = seq[lpos]
            lpos += 1
        else:
            scratch[out] = seq[rpos]
            rpos += 1
        out += 1
    while lpos <= mid:
        scratch[out] = seq[lpos]
        lpos += 1
        out += 1
    while rpos <= right:
        scratch[out] = seq[rpos]
        rpos += 1
        out += 1
    for idx in range(left, right + 1):
        seq[idx] = scratch[idx]


def sort(a: List[T], *, config: Optional[Dict[str, Any]] = None) -> List[T]:
    reject_unknown_keys("merge_sort", config)
    out = list(a)
    merge_sort(out)
    return out
