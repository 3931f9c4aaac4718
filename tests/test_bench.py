"""
Tests for the timing harness and the YAML experiment runner.
"""

from __future__ import annotations

import gc
import json
from pathlib import Path

import pandas as pd
import pytest
import yaml

from sortengine.algorithms import get_sorter
from sortengine.bench.measure import time_sort_call
from sortengine.bench.runner import main, run_experiment


def _time(sort_fn, a, **overrides):
    kwargs = dict(
        algo_name="x",
        sort_fn=sort_fn,
        a=a,
        config=None,
        repeats=3,
        warmup=True,
        disable_gc=True,
        timeout_seconds=5.0,
    )
    kwargs.update(overrides)
    return time_sort_call(**kwargs)


# ------------------------- measure ------------------------- #

def test_time_sort_call_ok() -> None:
    res = _time(get_sorter("quick_sort"), [3, 1, 2])
    assert res["status"] == "ok"
    assert len(res["samples_ns"]) == 3
    assert all(isinstance(t, int) and t >= 0 for t in res["samples_ns"])
    assert res["output"] == [1, 2, 3]
    assert gc.isenabled()


def test_time_sort_call_records_errors() -> None:
    def broken(a, *, config=None):
        raise RuntimeError("nope")

    res = _time(broken, [1], warmup=False)
    assert res["status"] == "error"
    assert "repeat 0" in res["error"]

    res = _time(broken, [1], warmup=True)
    assert res["status"] == "error"
    assert res["error"].startswith("warmup failed")


def test_time_sort_call_timeout_stops_sampling() -> None:
    res = _time(get_sorter("insertion_sort"), list(range(300, 0, -1)), timeout_seconds=1e-9, repeats=5)
    assert res["status"] == "timeout"
    assert res["timed_out_on_repeat"] == 0
    assert len(res["samples_ns"]) == 1


def test_time_sort_call_defensive_copy() -> None:
    seen = []

    def in_place(a, *, config=None):
        seen.append(a)
        a.sort()
        return a

    data = [3, 2, 1]
    _time(in_place, data, warmup=False, repeats=2)
    assert data == [3, 2, 1]
    assert all(s is not data for s in seen)


@pytest.mark.parametrize("overrides", [{"repeats": -1}, {"timeout_seconds": 0}])
def test_time_sort_call_validates_arguments(overrides) -> None:
    with pytest.raises(ValueError):
        _time(get_sorter("shell_sort"), [1], **overrides)


# ------------------------- runner ------------------------- #

def _write_config(tmp_path: Path, **overrides) -> Path:
    cfg = {
        "experiment_name": "unit",
        "output_dir": str(tmp_path / "runs"),
        "seed": 123,
        "repeats": 2,
        "warmup": False,
        "disable_gc": False,
        "timeout_seconds": 30.0,
        "dataset": {"dist": "random", "params": {"range": [-50, 50]}},
        "sizes": [0, 5, 40],
        "algorithms": [
            {"name": "merge_sort"},
            {"name": "list_merge_sort"},
            {"name": "quick_sort", "config": {"cutoff": 3}},
        ],
    }
    cfg.update(overrides)
    path = tmp_path / "experiment.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_run_experiment_writes_outputs(tmp_path: Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path))

    for name in ("results.jsonl", "summary.csv", "meta.json", "config_resolved.yaml"):
        assert (run_dir / name).exists(), name

    lines = [json.loads(s) for s in (run_dir / "results.jsonl").read_text().splitlines()]
    assert len(lines) == 3 * 3 * 2
    assert all("status" not in rec for rec in lines)

    summary = pd.read_csv(run_dir / "summary.csv")
    assert list(summary.columns) == ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]
    assert set(summary["algo"]) == {"merge_sort", "list_merge_sort", "quick_sort"}
    assert (summary["samples_ok"] == 2).all()

    meta = json.loads((run_dir / "meta.json").read_text())
    assert meta["sortengine"]
    assert yaml.safe_load((run_dir / "config_resolved.yaml").read_text())["experiment_name"] == "unit"


def test_run_experiment_flags_invalid_output(tmp_path: Path, monkeypatch) -> None:
    import sortengine.bench.runner as runner

    def wrong(a, *, config=None):
        return list(a)

    real = runner.get_sorter
    monkeypatch.setattr(runner, "get_sorter", lambda name: wrong if name == "merge_sort" else real(name))
    run_dir = run_experiment(_write_config(tmp_path, dataset={"dist": "reversed"}, sizes=[4, 8]))

    lines = [json.loads(s) for s in (run_dir / "results.jsonl").read_text().splitlines()]
    flagged = [rec for rec in lines if rec.get("status") == "invalid"]
    assert len(flagged) == 1
    assert flagged[0]["algo"] == "merge_sort" and flagged[0]["n"] == 4
    assert flagged[0]["violation_index"] == 0
    assert not any(rec["algo"] == "merge_sort" and rec["n"] == 8 for rec in lines)


@pytest.mark.parametrize(
    "overrides, match",
    [
        ({"algorithms": [{"name": "bogo_sort"}]}, "Unknown algorithm"),
        ({"algorithms": [{"name": "merge_sort"}, {"name": "merge_sort"}]}, "Duplicate"),
        ({"sizes": []}, "sizes"),
        ({"sizes": [4, -1]}, "sizes"),
        ({"dataset": {"dist": "gaussian"}}, "Unsupported dataset dist"),
    ],
)
def test_run_experiment_rejects_bad_config(tmp_path: Path, overrides, match) -> None:
    with pytest.raises(ValueError, match=match):
        run_experiment(_write_config(tmp_path, **overrides))


def test_run_experiment_missing_keys(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"experiment_name": "x"}), encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config keys"):
        run_experiment(path)


def test_main_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.yaml")])


def test_main_runs_config(tmp_path: Path) -> None:
    main([str(_write_config(tmp_path, sizes=[3]))])
    assert len(list((tmp_path / "runs").iterdir())) == 1
