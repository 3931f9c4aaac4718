"""Element types and sample data shared by the tests."""

from __future__ import annotations

from functools import total_ordering

SAMPLE = [8, 79, 6, 56, 2, 0, 5, 44, 29, 31, 157]
SAMPLE_SORTED = [0, 2, 5, 6, 8, 29, 31, 44, 56, 79, 157]


@total_ordering
class Tagged:
    """Orders and compares by `key` only; `origin` records the input index."""

    __slots__ = ("key", "origin")

    def __init__(self, key, origin):
        self.key = key
        self.origin = origin

    def __lt__(self, other):
        return self.key < other.key

    def __eq__(self, other):
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return f"Tagged({self.key!r}, origin={self.origin})"


def tag(values):
    return [Tagged(v, i) for i, v in enumerate(values)]


class CountingLess:
    """A `less` callable that counts its calls."""

    def __init__(self):
        self.calls = 0

    def __call__(self, a, b):
        self.calls += 1
        return a < b
