"""
Integer dataset generators for exercising and benchmarking the algorithms.

Distributions (spec["dist"]):
- "random":        uniform integers from params["range"] = [lo, hi] (inclusive, required)
- "nearly_sorted": [0..n-1] degraded by ceil(swap_frac * n) random index swaps
                   (params["swap_frac"], default 0.05)
- "few_uniques":   up to params["k"] distinct values drawn from an optional
                   inclusive params["range"] (default [0, 2**32 - 1])
- "small_range":   uniform integers from [min_val, max_val] (default [0, 255]),
                   or from params["range"] if given
- "reversed":      [n-1, ..., 0]
- "sorted":        [0, ..., n-1]; the idempotence case
- "all_equal":     n copies of params["value"] (default 0)

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

The deterministic distributions ignore `rng`. Every result is a plain Python
`list[int]` so the algorithms stay NumPy-agnostic.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

__all__ = ["SUPPORTED_DISTS", "make_dataset"]

Params = Dict[str, Any]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset of length `n` according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements, >= 0.
    spec : dict
        {"dist": <name>, "params": {...}}; see the module docstring.
    rng : numpy.random.Generator
        Caller-owned, seeded upstream for reproducibility.

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        On a negative or non-int `n`, an unknown distribution, or bad params.
    """
    if not isinstance(n, int) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    gen = _GENERATORS.get(dist)  # type: ignore[arg-type]
    if gen is None:
        raise ValueError(f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}")

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    # Params are validated even for n == 0 so a bad config fails on the first size.
    return gen(n, params, rng)


# ------------------------- distributions ------------------------- #


def _random(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _parse_range(params["range"], "random")
    return _uniform(rng, lo, hi, n)


def _nearly_sorted(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    raw = params.get("swap_frac", 0.05)
    try:
        frac = float(raw)
    except (TypeError, ValueError) as e:
        raise ValueError(f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {raw!r}") from e
    if not 0.0 <= frac <= 1.0:
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {frac}")

    out = list(range(n))
    swaps = int(np.ceil(frac * n))
    if n == 0 or swaps == 0:
        return out
    # i == j pairs are no-ops, so the effective number of swaps may be lower
    pairs = rng.integers(0, n, size=(swaps, 2))
    for i, j in pairs.tolist():
        out[i], out[j] = out[j], out[i]
    return out


def _few_uniques(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params["range"], "few_uniques") if "range" in params else (0, 2**32 - 1)
    if n == 0:
        return []

    want = min(k, n, hi - lo + 1)
    # Rejection-sample distinct values with the caller's rng; k is small next to the span.
    values: List[int] = []
    seen = set()
    while len(values) < want:
        for v in _uniform(rng, lo, hi, 2 * (want - len(values))):
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == want:
                    break
    picks = rng.integers(0, want, size=n)
    return [values[p] for p in picks.tolist()]


def _small_range(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    if "range" in params:
        lo, hi = _parse_range(params["range"], "small_range")
    else:
        lo, hi = params.get("min_val", 0), params.get("max_val", 255)
        if not _is_int_like(lo) or not _is_int_like(hi):
            raise ValueError("small_range params.min_val/max_val must be integers")
        lo, hi = int(lo), int(hi)
        if lo > hi:
            raise ValueError(f"small_range invalid: min > max ({lo} > {hi})")
    return _uniform(rng, lo, hi, n)


def _reversed(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _sorted(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    return list(range(n))


def _all_equal(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    value = params.get("value", 0)
    if not _is_int_like(value):
        raise ValueError(f"all_equal.params.value must be an integer; got {value!r}")
    return [int(value)] * n


_GENERATORS: Dict[str, Callable[[int, Params, np.random.Generator], List[int]]] = {
    "random": _random,
    "nearly_sorted": _nearly_sorted,
    "few_uniques": _few_uniques,
    "small_range": _small_range,
    "reversed": _reversed,
    "sorted": _sorted,
    "all_equal": _all_equal,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #


def _uniform(rng: np.random.Generator, lo: int, hi: int, size: int) -> List[int]:
    if size == 0:
        return []
    # Generator.integers is half-open; endpoint=True makes hi inclusive.
    return rng.integers(lo, hi, size=size, dtype=np.int64, endpoint=True).tolist()


def _parse_range(spec: Any, dist: str) -> Tuple[int, int]:
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo, hi = spec
    if not _is_int_like(lo) or not _is_int_like(hi):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo), int(hi)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _is_int_like(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
