#!/usr/bin/env python3
"""
mapjoin Core Benchmarks

Measures join throughput for each join type at different scales.
Run with: uv run python benchmarks/bench_core.py

Results are printed as a table and optionally saved to benchmarks/results.json
"""

import json
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict

# Add py-mapjoin to path
sys.path.insert(0, str(Path(__file__).parent.parent / "py-mapjoin"))

from mapjoin import JoinType, from_iterable, get_discarded_values, join, pack  # type: ignore


@dataclass
class BenchmarkResult:
    name: str
    rows: int
    time_ms: float
    rows_per_sec: float

    def to_dict(self):
        return {
            "name": self.name,
            "rows": self.rows,
            "time_ms": round(self.time_ms, 2),
            "rows_per_sec": round(self.rows_per_sec, 0),
        }


@contextmanager
def timer():
    """Context manager that yields elapsed time in milliseconds."""
    start = time.perf_counter()
    result: dict[str, float] = {"elapsed_ms": 0.0}
    yield result
    result["elapsed_ms"] = (time.perf_counter() - start) * 1000


def generate_mapping(num_rows: int, key_offset: int = 0, seed: int = 42) -> Dict[int, dict]:
    """Generate a mapping of id -> row with numeric and string fields."""
    import random

    random.seed(seed)

    categories = ["A", "B", "C", "D", "E"]
    rows = (
        {
            "id": i + key_offset,
            "value": random.randint(1, 1000),
            "category": random.choice(categories),
        }
        for i in range(num_rows)
    )
    return from_iterable(rows, lambda row, index: row["id"])


class Benchmarks:
    """Collection of benchmark functions."""

    def __init__(self):
        self.results: list[BenchmarkResult] = []

    def run_benchmark(
        self,
        name: str,
        rows: int,
        fn: Callable[[], None],
        warmup: int = 1,
        iterations: int = 3,
    ) -> BenchmarkResult:
        """Run a benchmark with warmup and multiple iterations."""
        # Warmup
        for _ in range(warmup):
            fn()

        # Timed runs
        times = []
        for _ in range(iterations):
            with timer() as t:
                fn()
            times.append(t["elapsed_ms"])

        avg_time = sum(times) / len(times)
        rows_per_sec = (rows / avg_time) * 1000 if avg_time > 0 else 0

        result = BenchmarkResult(
            name=name,
            rows=rows,
            time_ms=avg_time,
            rows_per_sec=rows_per_sec,
        )
        self.results.append(result)
        return result

    # =========================================================================
    # Benchmark: Join
    # =========================================================================

    def bench_join(self, join_type: JoinType, num_rows: int) -> BenchmarkResult:
        """Benchmark one join type over half-overlapping mappings."""
        left = generate_mapping(num_rows)
        right = generate_mapping(num_rows, key_offset=num_rows // 2, seed=43)

        def run():
            for _ in join(left, right, join_type, pack):
                pass

        total_rows = len(left) + len(right)
        return self.run_benchmark(f"{join_type}_{num_rows}", total_rows, run)

    def bench_discarded(self, num_rows: int) -> BenchmarkResult:
        """Benchmark computing the discarded values of an inner join."""
        left = generate_mapping(num_rows)
        right = generate_mapping(num_rows, key_offset=num_rows // 2, seed=43)

        def run():
            joined = join(left, right, JoinType.INNER, pack)
            for _ in get_discarded_values(joined):
                pass

        total_rows = len(left) + len(right)
        return self.run_benchmark(f"discarded_{num_rows}", total_rows, run)

    # =========================================================================
    # Benchmark: Map building
    # =========================================================================

    def bench_from_iterable(self, num_rows: int) -> BenchmarkResult:
        """Benchmark building a mapping from a list of rows."""
        rows = [{"id": i % (num_rows // 2), "value": i} for i in range(num_rows)]

        def run():
            from_iterable(rows, lambda row, index: row["id"], "override")

        return self.run_benchmark(f"from_iterable_{num_rows}", num_rows, run)


def print_results(results: list[BenchmarkResult]) -> None:
    """Print results as a formatted table."""
    print("\n" + "=" * 70)
    print("BENCHMARK RESULTS")
    print("=" * 70)
    print(f"{'Benchmark':<30} {'Rows':>10} {'Time (ms)':>12} {'Rows/sec':>15}")
    print("-" * 70)

    for r in results:
        rows_sec_str = f"{r.rows_per_sec:,.0f}"
        print(f"{r.name:<30} {r.rows:>10,} {r.time_ms:>12.2f} {rows_sec_str:>15}")

    print("=" * 70)


def save_results(results: list[BenchmarkResult], path: str) -> None:
    """Save results to JSON file."""
    data = {
        "timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
        "results": [r.to_dict() for r in results],
    }
    with open(path, "w") as f:
        json.dump(data, f, indent=2)
    print(f"\nResults saved to {path}")


def main():
    """Run all benchmarks."""
    print("mapjoin Performance Benchmarks")
    print("=" * 70)

    # Sizes to test
    small = 10_000
    medium = 100_000
    large = 1_000_000

    bench = Benchmarks()

    print("\n[1/3] Running join benchmarks...")
    for join_type in JoinType:
        bench.bench_join(join_type, small)
        bench.bench_join(join_type, medium)
    bench.bench_join(JoinType.FULL, large)

    print("[2/3] Running discarded-values benchmarks...")
    bench.bench_discarded(small)
    bench.bench_discarded(medium)

    print("[3/3] Running from_iterable benchmarks...")
    bench.bench_from_iterable(small)
    bench.bench_from_iterable(medium)
    bench.bench_from_iterable(large)

    # Print results
    print_results(bench.results)

    # Save results
    results_path = Path(__file__).parent / "results.json"
    save_results(bench.results, str(results_path))


if __name__ == "__main__":
    main()
