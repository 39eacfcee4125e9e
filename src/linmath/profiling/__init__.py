"""
linmath Profiling Package

Benchmarking utilities for the Mat4 kernel:

- profile: Per-batch timing markers (perf_marker, enable_profiling, get_profile_results)
- runner: Timed runs of kernel operations (run_benchmark, TimingResult, BenchmarkResult)

Quick usage:
    from linmath.profiling import run_benchmark, print_comparison_table

    results = run_benchmark(iterations=1000, repeats=3)
    print_comparison_table(results)
"""

# Re-export from profile module
from .profile import (
    enable_profiling,
    is_profiling_enabled,
    reset_profile,
    get_profile_results,
    perf_marker,
    _PROFILING_COMPILED_OUT,
)

# Re-export from runner module
from .runner import (
    TimingResult,
    BenchmarkResult,
    default_operations,
    run_operation,
    run_warmup,
    run_benchmark,
    assert_performance,
    print_benchmark_result,
    print_comparison_table,
    format_time,
)

__all__ = [
    # Batch markers
    'enable_profiling',
    'is_profiling_enabled',
    'reset_profile',
    'get_profile_results',
    'perf_marker',
    '_PROFILING_COMPILED_OUT',
    # Benchmark utilities
    'TimingResult',
    'BenchmarkResult',
    'default_operations',
    'run_operation',
    'run_warmup',
    'run_benchmark',
    'assert_performance',
    'print_benchmark_result',
    'print_comparison_table',
    'format_time',
]
