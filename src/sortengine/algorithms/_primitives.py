"""
Shared building blocks for the in-place algorithms.

Everything here works on index ranges of a mutable sequence and takes the
comparison as a `less(a, b)` callable. Quick sort and quick select both go
through `partition`, so the pivot/cursor arithmetic lives in one place.

Conventions:
- Ranges are inclusive on both ends: [left, right].
- `less` must be a strict total order; `resolve_less(None)` gives `operator.lt`.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, MutableSequence, Optional, TypeVar

T = TypeVar("T")
Less = Callable[[Any, Any], bool]

# Subranges with right - left below this are finished with insertion sort.
CUTOFF = 10
# The unguarded partition scans need at least three elements.
MIN_CUTOFF = 2

__all__ = [
    "CUTOFF",
    "MIN_CUTOFF",
    "Less",
    "resolve_less",
    "validate_cutoff",
    "reject_unknown_keys",
    "swap",
    "insertion_sort_range",
    "choose_pivot",
    "partition",
]


def resolve_less(less: Optional[Less]) -> Less:
    return operator.lt if less is None else less


def validate_cutoff(cutoff: int) -> int:
    if not isinstance(cutoff, int) or isinstance(cutoff, bool):
        raise ValueError(f"cutoff must be an int; got {cutoff!r}")
    if cutoff < MIN_CUTOFF:
        raise ValueError(f"cutoff must be >= {MIN_CUTOFF}; got {cutoff}")
    return cutoff


def reject_unknown_keys(algo: str, config: Optional[Dict[str, Any]], allowed: tuple = ()) -> Dict[str, Any]:
    """Normalize an adapter config dict, raising ValueError on unexpected keys."""
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"{algo}: config must be a dict if provided")
    unknown = sorted(set(config) - set(allowed))
    if unknown:
        raise ValueError(f"{algo}: unsupported config keys {unknown}; allowed: {list(allowed)}")
    return config


def swap(seq: MutableSequence[T], i: int, j: int) -> None:
    seq[i], seq[j] = seq[j], seq[i]


def insertion_sort_range(seq: MutableSequence[T], left: int, right: int, less: Less) -> None:
    """Insertion sort of seq[left..right] (inclusive), shifting instead of swapping."""
    for i in range(left + 1, right + 1):
        if less(seq[i], seq[i - 1]):
            tmp = seq[i]
            j = i
            while j > left and less(tmp, seq[j - 1]):
                seq[j] = seq[j - 1]
                j -= 1
            seq[j] = tmp


def choose_pivot(seq: MutableSequence[T], left: int, right: int, less: Less) -> T:
    """
    Median-of-three pivot selection.

    Arranges seq[left] <= seq[mid] <= seq[right], then parks the median at
    seq[right - 1] and returns it. seq[left] and seq[right] act as sentinels
    for the partition scans.
    """
    mid = (left + right) // 2
    if less(seq[mid], seq[left]):
        swap(seq, left, mid)
    if less(seq[right], seq[left]):
        swap(seq, left, right)
    if less(seq[right], seq[mid]):
        swap(seq, mid, right)
    swap(seq, mid, right - 1)
    return seq[right - 1]


def partition(seq: MutableSequence[T], left: int, right: int, less: Less) -> int:
    """
    Partition seq[left..right] around a median-of-three pivot.

    Requires right - left >= MIN_CUTOFF. Returns the final pivot index i:
    everything in [left, i) is not greater than the pivot and everything in
    (i, right] is not less than it.
    """
    pivot = choose_pivot(seq, left, right, less)
    i, j = left, right - 1
    while True:
        i += 1
        while less(seq[i], pivot):
            i += 1
        j -= 1
        while less(pivot, seq[j]):
            j -= 1
        if i < j:
            swap(seq, i, j)
        else:
            break
    swap(seq, i, right - 1)
    return i
