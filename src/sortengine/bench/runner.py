"""
Experiment runner: sweep dataset sizes and algorithms from a YAML config.

Usage (from repo root):
    sortengine-bench experiments/configs/01_random_scaling.yaml
    python -m sortengine.bench.runner experiments/configs/01_random_scaling.yaml

Config keys:
    experiment_name, output_dir, seed, repeats, warmup, disable_gc,
    timeout_seconds, dataset, sizes, algorithms      (required)
    validate                                         (optional, default true)

Each entry of `algorithms` is {"name": <registry name>, "config": {...}}.

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, libs, cpu/ram, git commit)
    - results.jsonl           # one line per timing sample, plus status lines
    - summary.csv             # median + IQR + min/max per (algo, n)

Behaviour:
- For each size n ONE dataset is generated and every algorithm gets a copy.
- With `validate`, the last output of each algorithm is compared against the
  oracle; a mismatch is recorded as status "invalid".
- After a timeout, error or invalid result at size n, larger sizes are
  skipped for that algorithm.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import json
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from sortengine import __version__
from sortengine.algorithms import get_sorter
from sortengine.bench.measure import time_sort_call
from sortengine.datasets import make_dataset
from sortengine.validate import equals_oracle, first_nondecreasing_violation_index

__all__ = ["AlgoSpec", "REQUIRED_KEYS", "run_experiment", "main"]

REQUIRED_KEYS = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
)
SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]

_console = Console()


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Callable[..., List[Any]]
    config: Dict[str, Any]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must be a YAML mapping")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{stamp}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "sortengine": __version__,
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        if not isinstance(entry, dict):
            raise ValueError(f"Algorithm entries must be mappings; got {entry!r}")
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        specs.append(AlgoSpec(name=name, sort_fn=get_sorter(name), config=config))
    return specs


def _check_sizes(sizes: Any) -> List[int]:
    if not isinstance(sizes, list) or not sizes:
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    for n in sizes:
        if not isinstance(n, int) or isinstance(n, bool) or n < 0:
            raise ValueError(f"Config 'sizes' entries must be nonnegative integers; got {n!r}")
    return list(sizes)


# ------------------------- helpers: summary ------------------------- #

def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    out = (
        df.groupby(["algo", "n"], as_index=False)
        .agg(
            samples_ok=("time_ns", "count"),
            median_ns=("time_ns", "median"),
            q1=("time_ns", lambda s: s.quantile(0.25)),
            q3=("time_ns", lambda s: s.quantile(0.75)),
            min_ns=("time_ns", "min"),
            max_ns=("time_ns", "max"),
        )
    )
    out["iqr_ns"] = out["q3"] - out["q1"]
    out = out.drop(columns=["q1", "q3"])
    out[["n", "median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[
        ["n", "median_ns", "iqr_ns", "min_ns", "max_ns"]
    ].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    ordered = sorted(set(sizes))
    picks: List[Tuple[str, int]] = []
    for n in (ordered[0], ordered[len(ordered) // 2], ordered[-1]):
        if all(n != p for _, p in picks):
            picks.append((f"n={n}", n))
    for hdr, _ in picks:
        table.add_column(hdr, justify="right")

    def _format_cell(median_ns: int, iqr_ns: int) -> str:
        return f"{median_ns / 1e6:.2f} ± {iqr_ns / 1e6:.2f}"

    for algo in summary["algo"].unique():
        row = [str(algo)]
        for _, npick in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == npick)]
            if s.empty:
                row.append("—")
            else:
                row.append(_format_cell(int(s["median_ns"].iloc[0]), int(s["iqr_ns"].iloc[0])))
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path) -> Path:
    """
    Run the sweep described by `config_path` and return the new run directory.

    Raises
    ------
    ValueError
        If required keys are missing or any value is malformed (including an
        unknown algorithm name or dataset distribution).
    """
    cfg = _load_yaml(Path(config_path))

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    sizes = _check_sizes(cfg["sizes"])
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    validate = bool(cfg.get("validate", True))
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])
    algos = _resolve_algorithms(list(cfg["algorithms"]))

    # Fail on a bad dataset spec before any files are written.
    make_dataset(0, dataset_spec, np.random.default_rng(0))

    run_dir = _ensure_run_dir(Path(cfg["output_dir"]), experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    skip = {a.name: False for a in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")

    for n in tqdm(sizes, desc="Sizes", unit="n"):
        base_a = make_dataset(n, dataset_spec, rng)

        for spec in algos:
            if skip[spec.name]:
                continue

            res = time_sort_call(
                algo_name=spec.name,
                sort_fn=spec.sort_fn,
                a=base_a,
                config=spec.config,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
            )

            for trial, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": spec.name,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial,
                        "time_ns": int(t_ns),
                        "config": spec.config,
                    },
                    results_path,
                )

            status = res["status"]
            record: Dict[str, Any] = {"algo": spec.name, "n": n, "status": status, "config": spec.config}
            if status == "ok" and validate and res["output"] is not None and not equals_oracle(base_a, res["output"]):
                status = record["status"] = "invalid"
                record["violation_index"] = first_nondecreasing_violation_index(res["output"])
            elif status == "timeout":
                record["timed_out_on_repeat"] = res["timed_out_on_repeat"]
            elif status == "error":
                record["error"] = res["error"]

            if status != "ok":
                skip[spec.name] = True
                _append_jsonl(record, results_path)
                _console.print(f"[yellow]{spec.name}[/yellow] stopped at n={n}: {status}")

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_summary(summary_df, sizes)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run a sorting benchmark experiment from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
