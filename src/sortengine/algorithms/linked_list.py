"""
Singly-linked list nodes and helpers.

A list is a chain of `ListNode` objects ending in `next is None`; the empty
list is `None`. Sorting routines rewire `next` links and hand back a new
head; they never create or copy nodes.

Public API (stable):
    ListNode
    from_iterable(values) -> ListNode | None
    iter_values(head) -> Iterator
    to_list(head) -> list
    length(head) -> int
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

__all__ = ["ListNode", "from_iterable", "iter_values", "to_list", "length"]


class ListNode(Generic[T]):
    __slots__ = ("val", "next")

    def __init__(self, val: T, next: Optional["ListNode[T]"] = None) -> None:
        self.val = val
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def from_iterable(values: Iterable[T]) -> Optional[ListNode[T]]:
    """Build a chain holding `values` in order; returns None for no values."""
    head: Optional[ListNode[T]] = None
    tail: Optional[ListNode[T]] = None
    for v in values:
        node = ListNode(v)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def _iter_nodes(head: Optional[ListNode[T]]) -> Iterator[ListNode[T]]:
    node = head
    while node is not None:
        yield node
        node = node.next


def iter_values(head: Optional[ListNode[T]]) -> Iterator[T]:
    for node in _iter_nodes(head):
        yield node.val


def to_list(head: Optional[ListNode[T]]) -> List[T]:
    return list(iter_values(head))


def length(head: Optional[ListNode[T]]) -> int:
    return sum(1 for _ in _iter_nodes(head))
