"""
Performance tests for linmath kernel operations.

This package contains performance regression tests that ensure
the matrix kernel doesn't slow down over time.

Tests:
- test_perf_mat4.py - Per-call benchmarks for each kernel operation family
"""
