"""
Algorithms package public API.

In-place operations:
    insertion_sort, selection_sort, shell_sort, merge_sort, quick_sort
    merge_sort_list   (singly-linked lists, returns the new head)
    quick_select      (kth smallest at index k)

Benchmark adapters:
    ALGORITHMS maps a name to a `sort(a, *, config=None) -> list` callable
    that copies its input. `get_sorter(name)` looks one up.
"""

from typing import Callable, Dict

from . import (
    insertion_sort as _insertion,
    list_merge_sort as _list_merge,
    merge_sort as _merge,
    quick_sort as _quick,
    selection_sort as _selection,
    shell_sort as _shell,
)
from ._primitives import CUTOFF
from .insertion_sort import insertion_sort
from .linked_list import ListNode, from_iterable, iter_values, length, to_list
from .list_merge_sort import merge_sort_list
from .merge_sort import merge_sort
from .quick_select import quick_select, select
from .quick_sort import quick_sort
from .selection_sort import selection_sort
from .shell_sort import shell_sort

ALGORITHMS: Dict[str, Callable[..., list]] = {
    "insertion_sort": _insertion.sort,
    "selection_sort": _selection.sort,
    "shell_sort": _shell.sort,
    "merge_sort": _merge.sort,
    "list_merge_sort": _list_merge.sort,
    "quick_sort": _quick.sort,
}


def get_sorter(name: str) -> Callable[..., list]:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unknown algorithm: {name!r}. Supported: {sorted(ALGORITHMS)}") from None


__all__ = [
    "ALGORITHMS",
    "CUTOFF",
    "ListNode",
    "from_iterable",
    "get_sorter",
    "insertion_sort",
    "iter_values",
    "length",
    "merge_sort",
    "merge_sort_list",
    "quick_select",
    "quick_sort",
    "select",
    "selection_sort",
    "shell_sort",
    "to_list",
]
