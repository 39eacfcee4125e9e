#!/usr/bin/env python
"""
Benchmark the linmath kernel operations and display per-call timings.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --iterations 5000 --repeats 5
    python scripts/benchmark.py --only inverse mul transform
    python scripts/benchmark.py --profile

Examples:
    python scripts/benchmark.py --only inverse inverse_orthonormal
    python scripts/benchmark.py --iterations 20000 --no-warmup
"""

import argparse
import sys
from pathlib import Path

# Add project paths for development
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from linmath.profiling import (
    default_operations,
    enable_profiling,
    get_profile_results,
    print_comparison_table,
    run_benchmark,
    format_time,
)


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark linmath kernel operations.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/benchmark.py
    python scripts/benchmark.py --only inverse mul --iterations 10000
    python scripts/benchmark.py --profile
        """
    )

    parser.add_argument("-i", "--iterations", type=int, default=2000, help="Calls per timed batch (default: 2000)")
    parser.add_argument("-r", "--repeats", type=int, default=3, help="Timed batches per operation (default: 3)")
    parser.add_argument("--only", nargs="+", metavar="OP", help="Only benchmark these operations")
    parser.add_argument("--no-warmup", action="store_true", help="Skip warmup calls")
    parser.add_argument("--profile", action="store_true", help="Also print perf marker totals")

    args = parser.parse_args()

    operations = default_operations()
    if args.only:
        unknown = [name for name in args.only if name not in operations]
        if unknown:
            print(f"Error: Unknown operations: {', '.join(unknown)}")
            print(f"Available: {', '.join(operations)}")
            return 1
        operations = {name: operations[name] for name in args.only}

    if args.profile:
        enable_profiling()

    try:
        results = run_benchmark(
            operations,
            iterations=args.iterations,
            repeats=args.repeats,
            warmup=not args.no_warmup,
        )
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print_comparison_table(results)

    if args.profile:
        print()
        for name, stats in get_profile_results().items():
            print(f"  {name:<22} {stats['count']:>4} batches  total {format_time(stats['total_ms'])}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
