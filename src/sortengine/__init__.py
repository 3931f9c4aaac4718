"""
sortengine: comparison sorts, linked-list merge sort and quick select.

    from sortengine import quick_sort, quick_select
    data = [8, 79, 6, 56, 2, 0, 5, 44, 29, 31, 157]
    quick_sort(data)

Subpackages:
    sortengine.algorithms  - the in-place algorithms and benchmark adapters
    sortengine.validate    - oracle and property checks
    sortengine.datasets    - seeded integer dataset generators
    sortengine.bench       - timing harness and YAML-driven experiment runner
"""

from .algorithms import (
    ALGORITHMS,
    CUTOFF,
    ListNode,
    from_iterable,
    get_sorter,
    insertion_sort,
    iter_values,
    length,
    merge_sort,
    merge_sort_list,
    quick_select,
    quick_sort,
    select,
    selection_sort,
    shell_sort,
    to_list,
)

__version__ = "0.1.0"

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
