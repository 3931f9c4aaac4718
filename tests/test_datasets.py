"""
Tests for the seeded dataset generators.
"""

from __future__ import annotations

import numpy as np
import pytest

from sortengine.datasets import SUPPORTED_DISTS, make_dataset


def _rng(seed: int = 7) -> np.random.Generator:
    return np.random.default_rng(seed)


def test_supported_dists() -> None:
    assert SUPPORTED_DISTS == {
        "random",
        "nearly_sorted",
        "few_uniques",
        "small_range",
        "reversed",
        "sorted",
        "all_equal",
    }


def test_random_inclusive_range_and_reproducible() -> None:
    spec = {"dist": "random", "params": {"range": [-3, 3]}}
    a = make_dataset(500, spec, _rng())
    assert len(a) == 500
    assert min(a) == -3 and max(a) == 3
    assert all(isinstance(x, int) for x in a)
    assert make_dataset(500, spec, _rng()) == a


def test_nearly_sorted_is_a_permutation_of_range() -> None:
    a = make_dataset(200, {"dist": "nearly_sorted", "params": {"swap_frac": 0.05}}, _rng())
    assert sorted(a) == list(range(200))
    assert make_dataset(50, {"dist": "nearly_sorted", "params": {"swap_frac": 0.0}}, _rng()) == list(range(50))


def test_few_uniques_limits_distinct_values() -> None:
    a = make_dataset(300, {"dist": "few_uniques", "params": {"k": 4, "range": [10, 1000]}}, _rng())
    assert len(a) == 300
    assert 1 <= len(set(a)) <= 4
    assert all(10 <= x <= 1000 for x in a)


def test_few_uniques_capped_by_span() -> None:
    a = make_dataset(100, {"dist": "few_uniques", "params": {"k": 50, "range": [0, 2]}}, _rng())
    assert set(a) <= {0, 1, 2}


def test_small_range_defaults_to_bytes() -> None:
    a = make_dataset(1000, {"dist": "small_range"}, _rng())
    assert all(0 <= x <= 255 for x in a)
    b = make_dataset(100, {"dist": "small_range", "params": {"min_val": 5, "max_val": 6}}, _rng())
    assert set(b) <= {5, 6}


@pytest.mark.parametrize(
    "dist, params, expected",
    [
        ("reversed", {}, [4, 3, 2, 1, 0]),
        ("sorted", {}, [0, 1, 2, 3, 4]),
        ("all_equal", {"value": 9}, [9] * 5),
        ("all_equal", {}, [0] * 5),
    ],
)
def test_deterministic_dists(dist, params, expected) -> None:
    assert make_dataset(5, {"dist": dist, "params": params}, _rng()) == expected


@pytest.mark.parametrize("dist", sorted(SUPPORTED_DISTS - {"random", "few_uniques"}))
def test_zero_length(dist) -> None:
    assert make_dataset(0, {"dist": dist}, _rng()) == []


@pytest.mark.parametrize(
    "n, spec, match",
    [
        (-1, {"dist": "sorted"}, "nonnegative"),
        (2.0, {"dist": "sorted"}, "must be an int"),
        (3, ["random"], "spec must be a dict"),
        (3, {"dist": "gaussian"}, "Unsupported dataset dist"),
        (3, {"dist": "random", "params": {}}, "range must be provided"),
        (3, {"dist": "random", "params": {"range": [5, 1]}}, "min > max"),
        (3, {"dist": "random", "params": {"range": [1, 2, 3]}}, "2-element"),
        (3, {"dist": "random", "params": {"range": [0.5, 2]}}, "must be integers"),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": 2}}, "swap_frac"),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": "lots"}}, "swap_frac"),
        (3, {"dist": "few_uniques", "params": {}}, "k must be an integer"),
        (3, {"dist": "small_range", "params": {"min_val": 9, "max_val": 1}}, "min > max"),
        (3, {"dist": "all_equal", "params": {"value": "x"}}, "must be an integer"),
        (0, {"dist": "random", "params": {}}, "range must be provided"),
    ],
)
def test_invalid_inputs(n, spec, match) -> None:
    with pytest.raises(ValueError, match=match):
        make_dataset(n, spec, _rng())
