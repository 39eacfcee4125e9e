"""
Tests for linmath.profiling markers and the benchmark runner.
"""
import os
import subprocess
import sys
import time
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).parent.parent.parent / "src"


def _run_python(code, *flags, **env_overrides):
    """Run code in a fresh interpreter that can import linmath from src."""
    env = os.environ.copy()
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    env.update(env_overrides)
    return subprocess.run(
        [sys.executable, *flags, "-c", code],
        capture_output=True,
        text=True,
        env=env,
    )


class TestProfilingCompiledOut:
    """Tests for the zero-overhead compile-out feature."""

    def test_normal_mode_not_compiled_out(self):
        """In normal mode (no -O flag, no env var), profiling should NOT be compiled out."""
        if os.environ.get("LINMATH_NO_PROFILING"):
            pytest.skip("LINMATH_NO_PROFILING is set for this run")
        from linmath.profiling import _PROFILING_COMPILED_OUT
        assert _PROFILING_COMPILED_OUT is False

    def test_optimized_mode_compiled_out(self):
        """When running with python -O, profiling should be compiled out."""
        result = _run_python(
            "from linmath.profiling import _PROFILING_COMPILED_OUT; "
            "print(_PROFILING_COMPILED_OUT)",
            "-O",
        )
        assert result.returncode == 0, f"Failed: {result.stderr}"
        assert "True" in result.stdout

    def test_env_var_compiles_out(self):
        """When LINMATH_NO_PROFILING=1, profiling should be compiled out."""
        result = _run_python(
            "from linmath.profiling import _PROFILING_COMPILED_OUT; "
            "print(_PROFILING_COMPILED_OUT)",
            LINMATH_NO_PROFILING="1",
        )
        assert result.returncode == 0, f"Failed: {result.stderr}"
        assert "True" in result.stdout

    def test_compiled_out_mode_has_noop_functions(self):
        """When compiled out, enabling is ignored and markers record nothing."""
        code = """
from linmath.profiling import (
    enable_profiling, is_profiling_enabled, reset_profile,
    get_profile_results, perf_marker, run_benchmark
)

enable_profiling()
assert not is_profiling_enabled()
reset_profile()

with perf_marker("test"):
    pass

results = run_benchmark({"noop": lambda: None}, iterations=3, repeats=2, warmup=False)
assert len(results["noop"].runs) == 2
assert get_profile_results() == {}

print("OK")
"""
        result = _run_python(code, LINMATH_NO_PROFILING="1")
        assert result.returncode == 0, f"Failed: {result.stderr}"
        assert "OK" in result.stdout


@pytest.fixture
def profiling():
    from linmath.profiling import _PROFILING_COMPILED_OUT, enable_profiling, reset_profile
    if _PROFILING_COMPILED_OUT:
        pytest.skip("profiling compiled out")
    reset_profile()
    enable_profiling()
    yield


class TestProfilingFunctionality:
    """Tests for per-batch marker tallies."""

    def test_disabled_by_default_records_nothing(self):
        from linmath.profiling import enable_profiling, perf_marker, get_profile_results, reset_profile

        enable_profiling(False)
        reset_profile()

        with perf_marker("ignored"):
            pass

        assert get_profile_results() == {}

    def test_perf_marker_records_timing(self, profiling):
        from linmath.profiling import perf_marker, get_profile_results

        with perf_marker("test_marker"):
            time.sleep(0.01)

        results = get_profile_results()

        assert "test_marker" in results
        assert results["test_marker"]["count"] == 1
        assert results["test_marker"]["total_ms"] >= 5
        assert results["test_marker"]["min_ms"] == results["test_marker"]["max_ms"]

    def test_tally_fields(self, profiling):
        from linmath.profiling import perf_marker, get_profile_results

        with perf_marker("batch"):
            time.sleep(0.002)
        with perf_marker("batch"):
            time.sleep(0.01)

        stats = get_profile_results()["batch"]
        assert set(stats) == {"count", "total_ms", "avg_ms", "min_ms", "max_ms"}
        assert stats["count"] == 2
        assert stats["min_ms"] < stats["max_ms"]
        assert stats["min_ms"] <= stats["avg_ms"] <= stats["max_ms"]

    def test_nested_markers_tally_independently(self, profiling):
        """Markers are flat: nesting just records both names."""
        from linmath.profiling import perf_marker, get_profile_results

        with perf_marker("outer"):
            with perf_marker("inner"):
                time.sleep(0.002)

        results = get_profile_results()
        assert list(results) == ["outer", "inner"]
        assert results["outer"]["total_ms"] >= results["inner"]["total_ms"]

    def test_unnamed_marker(self, profiling):
        from linmath.profiling import perf_marker, get_profile_results

        with perf_marker():
            pass

        assert get_profile_results()["unnamed"]["count"] == 1

    def test_marker_does_not_swallow_exceptions(self, profiling):
        from linmath.profiling import perf_marker, get_profile_results

        with pytest.raises(ZeroDivisionError):
            with perf_marker("failing"):
                1 / 0

        assert get_profile_results()["failing"]["count"] == 1

    def test_multiple_calls_accumulate(self, profiling):
        from linmath.profiling import perf_marker, get_profile_results

        for _ in range(5):
            with perf_marker("repeated"):
                pass

        assert get_profile_results()["repeated"]["count"] == 5

    def test_disabling_stops_recording(self, profiling):
        from linmath.profiling import enable_profiling, perf_marker, get_profile_results

        with perf_marker("kept"):
            pass
        enable_profiling(False)
        with perf_marker("kept"):
            pass
        with perf_marker("dropped"):
            pass

        results = get_profile_results()
        assert results["kept"]["count"] == 1
        assert "dropped" not in results

    def test_reset_clears_data(self, profiling):
        from linmath.profiling import reset_profile, perf_marker, get_profile_results

        with perf_marker("before_reset"):
            pass

        assert "before_reset" in get_profile_results()

        reset_profile()

        assert get_profile_results() == {}


class TestBenchmarkRunner:
    """Tests for the benchmark runner used by scripts/benchmark.py."""

    def test_default_operations_are_callable(self):
        from linmath.profiling import default_operations

        operations = default_operations()
        assert "inverse" in operations
        assert "mul" in operations
        for func in operations.values():
            func()

    def test_run_benchmark_shape(self):
        from linmath.profiling import run_benchmark

        results = run_benchmark(
            {"noop": lambda: None, "sum": lambda: sum(range(10))},
            iterations=10,
            repeats=2,
            warmup=False,
        )
        assert list(results) == ["noop", "sum"]
        assert len(results["sum"].runs) == 2
        assert results["sum"].iterations == 10
        assert results["sum"].min_ms <= results["sum"].median_ms <= results["sum"].max_ms

    def test_run_benchmark_rejects_bad_counts(self):
        from linmath.profiling import run_benchmark

        with pytest.raises(ValueError):
            run_benchmark({"noop": lambda: None}, iterations=0)
        with pytest.raises(ValueError):
            run_benchmark({"noop": lambda: None}, repeats=-1)

    def test_batches_recorded_as_markers(self, profiling):
        from linmath.profiling import run_benchmark, get_profile_results

        run_benchmark({"noop": lambda: None}, iterations=5, repeats=3, warmup=False)
        assert get_profile_results()["noop"]["count"] == 3

    def test_assert_performance(self):
        from linmath.profiling import BenchmarkResult, TimingResult, assert_performance

        result = BenchmarkResult("op", iterations=1000, runs=[TimingResult("op", 1000, total_ms=10.0)])
        assert result.median_us_per_call == 10.0
        assert_performance(result, baseline_us=10.0)
        with pytest.raises(AssertionError, match="op"):
            assert_performance(result, baseline_us=5.0)

    def test_format_time(self):
        from linmath.profiling import format_time

        assert format_time(2500) == "2.50s"
        assert format_time(12.5) == "12.50ms"
        assert format_time(0.5) == "500.0µs"
