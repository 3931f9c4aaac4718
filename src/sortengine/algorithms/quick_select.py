"""
Quick select: place the kth smallest element (0-based) at index k.

Public API (stable):
    quick_select(seq, k, *, less=None, cutoff=CUTOFF) -> None
    select(a, k, *, config=None) -> element    # copies `a`, returns the kth smallest

Only the side of each partition that holds index k is processed further.
Elements other than seq[k] end up partially ordered: everything left of k is
not greater than seq[k] and everything right of it is not less.
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

__all__ = ["quick_select", "select"]


def quick_select(seq: MutableSequence[T], k: int, *, less: Optional[Less] = None, cutoff: int = CUTOFF) -> None:
    """
    Rearrange `seq` so that seq[k] is its kth smallest element.

    Parameters
    ----------
    seq : mutable sequence
        Elements to search; modified in place.
    k : int
        Zero-based rank, 0 <= k < len(seq). Negative indices are not accepted.
    less : callable, optional
        Strict total order `less(a, b)`; defaults to `a < b`.
    cutoff : int
        Ranges with right - left below this value are insertion-sorted.

    Raises
    ------
    IndexError
        If k is outside [0, len(seq)).
    ValueError
        If `cutoff` is not an int >= 2.
    """
    n = len(seq)
    if not 0 <= k < n:
        raise IndexError(f"k out of range: {k} not in [0, {n})")
    validate_cutoff(cutoff)
    lt = resolve_less(less)

    left, right = 0, n - 1
    while right - left >= cutoff:
        i = partition(seq, left, right, lt)
        if k < i:
            right = i - 1
        elif k > i:
            left = i + 1
        else:
            return
    # TODO: stop once position k is settled instead of sorting the whole tail range
    insertion_sort_range(seq, left, right, lt)


def select(a: List[T], k: int, *, config: Optional[Dict[str, Any]] = None) -> T:
    cfg = reject_unknown_keys("quick_select", config, allowed=("cutoff",))
    out = list(a)
    quick_select(out, k, cutoff=cfg.get("cutoff", CUTOFF))
    return out[k]
