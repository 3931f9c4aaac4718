"""
Timing harness for the benchmark adapters.

One sample is exactly one call of `sort_fn(a, config=...)`, timed with
`time.perf_counter_ns`. Copying the input, GC collection and warmup all happen
outside the timed block.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "repeats": int,
        "samples_ns": list[int],            # elapsed ns per completed sample
        "status": "ok" | "timeout" | "error",
        "error": str | None,                # set when status == "error"
        "timed_out_on_repeat": int | None,  # 0-based repeat index of the timeout
        "output": list | None,              # result of the last completed call
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    algo_name: str,
    sort_fn: Callable[..., List[Any]],
    a: List[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    defensive_copy: bool = True,
) -> Dict[str, Any]:
    """
    Time repeated calls to `sort_fn(a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Registry name of the algorithm, echoed into the result.
    sort_fn : callable
        Adapter with the signature sort(a, *, config=None) -> list.
    a : list
        Input data. Adapters copy before sorting, but `defensive_copy` guards
        against one that does not.
    config : dict | None
        Passed through unchanged.
    repeats : int
        Number of timed samples (>= 0).
    warmup : bool
        Make one untimed call first.
    disable_gc : bool
        Collect, then disable the cyclic GC for the timed loop; the previous
        state is restored afterwards.
    timeout_seconds : float
        A single sample slower than this marks the run "timeout" and stops it.
    defensive_copy : bool
        Copy `a` before every call, outside the timed block.

    Returns
    -------
    dict
        See the module docstring.

    Raises
    ------
    ValueError
        On negative `repeats` or non-positive `timeout_seconds`.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "repeats": repeats,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
        "output": None,
    }

    def _arg() -> List[Any]:
        return list(a) if defensive_copy else a

    if warmup and repeats > 0:
        try:
            sort_fn(_arg(), config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result

    gc_was_enabled = gc.isenabled()
    if disable_gc:
        gc.collect()
        gc.disable()
    try:
        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            arg = _arg()
            try:
                t0 = time.perf_counter_ns()
                out = sort_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = t1 - t0
            result["samples_ns"].append(elapsed)
            result["output"] = out
            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        # A caller that had GC disabled keeps it disabled.
        if disable_gc and gc_was_enabled:
            gc.enable()

    return result
