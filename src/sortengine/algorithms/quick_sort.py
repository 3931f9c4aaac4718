"""
Quick sort with median-of-three pivots and an insertion-sort cutoff.

Public API (stable):
    quick_sort(seq, *, less=None, cutoff=CUTOFF) -> None
    sort(a, *, config=None) -> list     # config keys: "cutoff"

Subranges with right - left < cutoff (by default fewer than 11 elements) are
finished with insertion sort. Larger ranges are split by `partition`, the
same routine quick select uses.
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, TypeVar

from ._primitives import (
    CUTOFF,
    Less,
    insertion_sort_range,
    partition,
    reject_unknown_keys,
    resolve_less,
    validate_cutoff,
)

T = TypeVar("T")

__all__ = ["quick_sort", "sort"]


def quick_sort(seq: MutableSequence[T], *, less: Optional[Less] = None, cutoff: int = CUTOFF) -> None:
    """
    Sort `seq` in place.

    Parameters
    ----------
    seq : mutable sequence
        Elements to sort.
    less : callable, optional
        Strict total order `less(a, b)`; defaults to `a < b`.
    cutoff : int
        Ranges with right - left below this value use insertion sort.
        Must be >= 2 (the partition scans rely on three sentinel positions).

    Raises
    ------
    ValueError
        If `cutoff` is not an int >= 2.
    """
    validate_cutoff(cutoff)
    _quick_sort_range(seq, 0, len(seq) - 1, resolve_less(less), cutoff)


def _quick_sort_range(seq: MutableSequence[T], left: int, right: int, less: Less, cutoff: int) -> None:
    # Recurse into the smaller side, loop on the larger: depth stays O(log n).
    while right - left >= cutoff:
        i = partition(seq, left, right, less)
        if i - left < right - i:
            _quick_sort_range(seq, left, i - 1, less, cutoff)
            left = i + 1
        else:
            _quick_sort_range(seq, i + 1, right, less, cutoff)
            right = i - 1
    insertion_sort_range(seq, left, right, less)


def sort(a: List[T], *, config: Optional[Dict[str, Any]] = None) -> List[T]:
    cfg = reject_unknown_keys("quick_sort", config, allowed=("cutoff",))
    out = list(a)
    quick_sort(out, cutoff=cfg.get("cutoff", CUTOFF))
    return out
