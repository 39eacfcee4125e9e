"""
Benchmarking utilities for linmath kernel operations.

This module provides shared timing, benchmarking, and reporting utilities
for performance regression testing.

Usage:
    from linmath.profiling import run_benchmark, print_comparison_table

    # Benchmark the default operation set
    results = run_benchmark(iterations=2000, repeats=3)
    print_comparison_table(results)

    # Benchmark one operation
    results = run_benchmark({'inverse': lambda: inverse(m)})
    print(f"Median: {results['inverse'].median_us_per_call}us per call")
"""

import math
import os
import statistics
import sys
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from linmath.mathutils.vec3 import Vec3
from linmath.mathutils import mat4 as M4
from .profile import perf_marker


# =============================================================================
# Terminal Color Support
# =============================================================================

def supports_color() -> bool:
    """Check if terminal supports color output."""
    if os.environ.get('NO_COLOR'):
        return False
    if os.environ.get('FORCE_COLOR'):
        return True
    if not hasattr(sys.stdout, 'isatty') or not sys.stdout.isatty():
        return False
    return sys.platform != 'win32'


# ANSI color codes - set at import time
if supports_color():
    RESET = "\033[0m"
    BOLD = "\033[1m"
    YELLOW = "\033[33m"
    GREEN = "\033[32m"
    RED = "\033[91m"
    GRAY = "\033[90m"
else:
    RESET = BOLD = YELLOW = GREEN = RED = GRAY = ""


def time_color(us: float) -> str:
    """Get ANSI color based on per-call time thresholds."""
    if us >= 100:
        return RED
    elif us >= 20:
        return YELLOW
    else:
        return GREEN


def format_time(ms: float) -> str:
    """Format milliseconds for human-readable display."""
    if ms >= 1000:
        return f"{ms/1000:.2f}s"
    elif ms >= 1:
        return f"{ms:.2f}ms"
    else:
        return f"{ms*1000:.1f}µs"


# =============================================================================
# Data Classes
# =============================================================================

@dataclass
class TimingResult:
    """Timing for one batch of calls to a single operation."""
    name: str
    iterations: int
    total_ms: float = 0.0

    @property
    def us_per_call(self) -> float:
        if self.iterations == 0:
            return 0.0
        return self.total_ms * 1000.0 / self.iterations


@dataclass
class BenchmarkResult:
    """Repeated timings of one operation."""
    name: str
    iterations: int
    runs: List[TimingResult] = field(default_factory=list)

    @property
    def median_ms(self) -> float:
        return statistics.median(r.total_ms for r in self.runs) if self.runs else 0.0

    @property
    def min_ms(self) -> float:
        return min(r.total_ms for r in self.runs) if self.runs else 0.0

    @property
    def max_ms(self) -> float:
        return max(r.total_ms for r in self.runs) if self.runs else 0.0

    @property
    def median_us_per_call(self) -> float:
        if not self.runs or self.iterations == 0:
            return 0.0
        return self.median_ms * 1000.0 / self.iterations


# =============================================================================
# Workloads
# =============================================================================

def default_operations() -> Dict[str, Callable[[], Any]]:
    """One representative call per kernel operation family."""
    eye = Vec3(3.0, 4.0, 5.0)
    center = Vec3(0.0, 0.0, 0.0)
    up = Vec3.j()
    axis = Vec3(1.0, 2.0, 3.0)
    point = Vec3(1.0, -2.0, 0.5)

    rigid = M4.translate3(1.0, 2.0, 3.0, M4.make_rotate(0.7, axis))
    general = M4.scale3(2.0, 3.0, 0.5, rigid)
    proj = M4.make_perspective(60.0, 1.5, 0.1, 100.0)

    return {
        'mul': lambda: M4.mul(proj, general),
        'mul_affine': lambda: M4.mul_affine(rigid, general),
        'transform': lambda: M4.transform(proj, point),
        'inverse': lambda: M4.inverse(general),
        'inverse_orthonormal': lambda: M4.inverse_orthonormal(rigid),
        'transpose': lambda: M4.transpose(general),
        'make_perspective': lambda: M4.make_perspective(60.0, 1.5, 0.1, 100.0),
        'make_look_at': lambda: M4.make_look_at(eye, center, up),
        'rotate': lambda: M4.rotate(0.3, axis, general),
        'translate3': lambda: M4.translate3(1.0, 2.0, 3.0, general),
        'from_list': lambda: M4.make_from_list(general.to_list()),
    }


# =============================================================================
# Running
# =============================================================================

def run_operation(name: str, func: Callable[[], Any], iterations: int) -> TimingResult:
    """Call func iterations times under a perf marker and time the batch."""
    start = time.perf_counter()
    with perf_marker(name):
        for _ in range(iterations):
            func()
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return TimingResult(name=name, iterations=iterations, total_ms=elapsed_ms)


def run_warmup(func: Callable[[], Any], runs: int = 50):
    """Run a few untimed calls first."""
    for _ in range(runs):
        func()


def run_benchmark(
    operations: Optional[Dict[str, Callable[[], Any]]] = None,
    iterations: int = 1000,
    repeats: int = 3,
    warmup: bool = True,
) -> Dict[str, BenchmarkResult]:
    """
    Time each operation.

    Args:
        operations: Mapping of name -> zero-argument callable. Defaults to
            default_operations().
        iterations: Calls per timed batch.
        repeats: Timed batches per operation.
        warmup: Run untimed calls before timing.

    Returns:
        Dict of name -> BenchmarkResult, in the order given.
    """
    if iterations <= 0 or repeats <= 0:
        raise ValueError("iterations and repeats must be positive")
    if operations is None:
        operations = default_operations()

    results: Dict[str, BenchmarkResult] = {}
    for name, func in operations.items():
        if warmup:
            run_warmup(func)
        result = BenchmarkResult(name=name, iterations=iterations)
        for _ in range(repeats):
            result.runs.append(run_operation(name, func, iterations))
        results[name] = result
    return results


def assert_performance(result: BenchmarkResult, baseline_us: float, threshold: float = 1.2):
    """
    Assert that the median per-call time is within threshold * baseline.

    Raises:
        AssertionError: On regression.
    """
    limit = baseline_us * threshold
    actual = result.median_us_per_call
    if not math.isfinite(actual) or actual > limit:
        raise AssertionError(
            f"{result.name}: {actual:.2f}us per call exceeds "
            f"{limit:.2f}us ({threshold:.0%} of {baseline_us:.2f}us baseline)"
        )


# =============================================================================
# Reporting
# =============================================================================

def print_benchmark_result(result: BenchmarkResult):
    us = result.median_us_per_call
    print(f"  {result.name:<22} {time_color(us)}{us:>9.2f}µs{RESET}"
          f"  {GRAY}(median of {len(result.runs)} x {result.iterations}, "
          f"batch {format_time(result.median_ms)}){RESET}")


def print_comparison_table(results: Dict[str, BenchmarkResult]):
    """Print all results sorted by per-call time, slowest first."""
    print(f"{BOLD}  {'operation':<22} {'per call':>11}{RESET}")
    ordered = sorted(results.values(), key=lambda r: r.median_us_per_call, reverse=True)
    for result in ordered:
        print_benchmark_result(result)
