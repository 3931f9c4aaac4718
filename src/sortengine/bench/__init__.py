"""
Benchmark harness.

    sortengine.bench.measure.time_sort_call   - time repeated adapter calls
    sortengine.bench.runner.run_experiment    - YAML-driven sweep over sizes/algorithms
"""
