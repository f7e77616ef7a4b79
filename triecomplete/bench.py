"""Micro-benchmarks for dictionary loading and prefix queries.

Each query is timed call-by-call with ``time.perf_counter`` after a
warmup phase.  The timings are summarised with numpy, and the peak
memory allocated by a single call is taken from ``tracemalloc``.
"""

from __future__ import annotations

import logging
import time
import tracemalloc
from dataclasses import dataclass
from typing import Callable

import numpy as np

from triecomplete.constants import BENCH_ITERATIONS, BENCH_WARMUP
from triecomplete.dictionary import Dictionary

logger = logging.getLogger("triecomplete.bench")


@dataclass
class BenchResult:
    name: str
    input: str
    iterations: int
    mean_us: float
    median_us: float
    std_us: float
    min_us: float
    max_us: float
    ops_per_sec: float
    memory_bytes: int
    result_count: int = 0


def measure(
    name: str,
    func: Callable[[str], list[str]],
    arg: str,
    iterations: int = BENCH_ITERATIONS,
    warmup: int = BENCH_WARMUP,
) -> BenchResult:
    """Time ``func(arg)`` over ``iterations`` calls after ``warmup`` calls."""
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    if warmup < 0:
        raise ValueError(f"warmup must not be negative, got {warmup}")

    for _ in range(warmup):
        func(arg)

    samples = np.empty(iterations, dtype=np.float64)
    for i in range(iterations):
        t0 = time.perf_counter()
        func(arg)
        samples[i] = time.perf_counter() - t0
    samples *= 1e6  # seconds -> microseconds

    tracemalloc.start()
    try:
        result = func(arg)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()

    mean = float(np.mean(samples))
    bench = BenchResult(
        name=name,
        input=arg,
        iterations=iterations,
        mean_us=mean,
        median_us=float(np.median(samples)),
        std_us=float(np.std(samples)),
        min_us=float(np.min(samples)),
        max_us=float(np.max(samples)),
        ops_per_sec=1e6 / mean if mean > 0 else float("inf"),
        memory_bytes=int(peak),
        result_count=len(result),
    )
    logger.debug(
        "BENCH %s(%r): mean=%.2fus  median=%.2fus  (%d runs)",
        name, arg, bench.mean_us, bench.median_us, iterations,
    )
    return bench


def load(path: str | None = None) -> Dictionary:
    """Build a dictionary and log how long it took."""
    t0 = time.perf_counter()
    dictionary = Dictionary(path)
    elapsed_ms = (time.perf_counter() - t0) * 1000
    logger.info("Compiled dictionary in %d ms", elapsed_ms)
    return dictionary


def bench_completions(
    dictionary: Dictionary,
    prefix: str,
    iterations: int = BENCH_ITERATIONS,
    warmup: int = BENCH_WARMUP,
) -> BenchResult:
    return measure("completions", dictionary.completions, prefix, iterations, warmup)


def bench_search(
    dictionary: Dictionary,
    prefix: str,
    iterations: int = BENCH_ITERATIONS,
    warmup: int = BENCH_WARMUP,
) -> BenchResult:
    return measure("search", dictionary.search, prefix, iterations, warmup)


def format_result(result: BenchResult) -> str:
    """Console table for one benchmark run."""
    width = 78
    lines = [
        "=" * width,
        f" {'Name':<12} {'ips':>12} {'average':>11} {'median':>11} {'deviation':>10} {'memory':>12}",
        "-" * width,
        (
            f" {result.name:<12} {result.ops_per_sec:>12,.1f} "
            f"{_fmt_us(result.mean_us):>11} {_fmt_us(result.median_us):>11} "
            f"{_deviation(result):>10} {_fmt_bytes(result.memory_bytes):>12}"
        ),
        "=" * width,
        f" input: {result.input!r}   runs: {result.iterations}   "
        f"min: {_fmt_us(result.min_us)}   max: {_fmt_us(result.max_us)}",
    ]
    return "\n".join(lines)


def _deviation(result: BenchResult) -> str:
    if result.mean_us <= 0:
        return "±0.00%"
    return f"±{result.std_us / result.mean_us * 100:.2f}%"


def _fmt_us(us: float) -> str:
    if us >= 1000:
        return f"{us / 1000:.2f} ms"
    return f"{us:.2f} μs"


def _fmt_bytes(n: int) -> str:
    if n >= 1024 * 1024:
        return f"{n / (1024 * 1024):.2f} MB"
    if n >= 1024:
        return f"{n / 1024:.2f} KB"
    return f"{n} B"
