"""
Shell sort with the halving gap sequence n//2, n//4, ..., 1.

Public API (stable):
    shell_sort(seq, *, less=None) -> None
    gaps(n) -> list[int]
    sort(a, *, config=None) -> list
"""

from __future__ import annotations

from typing import Any, Dict, List, MutableSequence, Optional, TypeVar

from ._primitives import Less, reject_unknown_keys, resolve_less

T = TypeVar("T")

__all__ = ["gaps", "shell_sort", "sort"]


def gaps(n: int) -> List[int]:
    """Return the gap sequence used for a sequence of length n (empty if n < 2)."""
    out: List[int] = []
    gap = n // 2
    while gap > 0:
        out.append(gap)
        gap //= 2
    return out


def shell_sort(seq: MutableSequence[T], *, less: Optional[Less] = None) -> None:
    """
    Sort `seq` in place by gapped insertion sort over successively halved gaps.

    The final pass always runs with gap 1, so correctness does not depend on
    the earlier passes; they only shorten long-distance moves.
    """
    lt = resolve_less(less)
    n = len(seq)
    for gap in gaps(n):
        for i in range(gap, n):
            tmp = seq[i]
            j = i
            while j >= gap and lt(tmp, seq[j - gap]):
                seq[j] = seq[j - gap]
                j -= gap
            seq[j] = tmp


def sort(a: List[T], *, config: Optional[Dict[str, Any]] = None) -> List[T]:
    reject_unknown_keys("shell_sort", config)
    out = list(a)
    shell_sort(out)
    return out
