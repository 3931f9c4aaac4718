"""
Merge sort for singly-linked lists.

Public API (stable):
    merge_sort_list(head, *, less=None) -> ListNode | None
    sort(a, *, config=None) -> list     # builds a chain from `a`, sorts, flattens

The merge takes the first list's head only when it is strictly less than the
second's; ties splice the second list's node in first, matching the array
merge sort.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TypeVar

from ._primitives import Less, reject_unknown_keys, resolve_less
from .linked_list import ListNode, from_iterable, to_list

T = TypeVar("T")

__all__ = ["merge_sort_list", "sort"]


def merge_sort_list(head: Optional[ListNode[T]], *, less: Optional[Less] = None) -> Optional[ListNode[T]]:
    """
    Sort the chain starting at `head` and return the new head.

    Parameters
    ----------
    head : ListNode or None
        First node of the list. The caller should drop its old reference and
        use the returned head; the old head is still a node of the result but
        is usually no longer first.
    less : callable, optional
        Strict total order `less(a, b)`; defaults to `a < b`.

    Returns
    -------
    ListNode or None
        Head of the sorted chain, built from the original nodes only.
    """
    return _sort_chain(head, resolve_less(less))


def _sort_chain(head: Optional[ListNode[T]], less: Less) -> Optional[ListNode[T]]:
    if head is None or head.next is None:
        return head
    # slow stops at the last node of the first half
    slow, fast = head, head.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = slow.next
    slow.next = None
    return _merge_chains(_sort_chain(head, less), _sort_chain(second, less), less)


def _merge_chains(a: Optional[ListNode[T]], b: Optional[ListNode[T]], less: Less) -> Optional[ListNode[T]]:
    """Splice two sorted chains into one; iterative, so depth does not grow with length."""
    if a is None:
        return b
    if b is None:
        return a
    if less(a.val, b.val):
        head, a = a, a.next
    else:
        head, b = b, b.next
    tail = head
    while a is not None and b is not None:
        if less(a.val, b.val):
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return head


def sort(a: List[T], *, config: Optional[Dict[str, Any]] = None) -> List[T]:
    reject_unknown_keys("list_merge_sort", config)
    return to_list(merge_sort_list(from_iterable(a)))
