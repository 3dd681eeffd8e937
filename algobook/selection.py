"""Order statistics by randomized selection."""

from __future__ import annotations

import random
import time
from collections.abc import Iterable
from typing import Any

from algobook.sorting import RAND_MAX, BenchmarkResult, randomized_partition


def randomized_select(
    items: Iterable[Any], i: int, rng: random.Random | None = None
) -> Any:
    """Return the i-th smallest item (1-based) using randomized partitioning."""
    data = list(items)
    if not data:
        raise ValueError("cannot select from an empty sequence")
    if not 1 <= i <= len(data):
        raise ValueError(f"order statistic {i} out of range 1..{len(data)}")
    rng = rng or random.Random()
    low, high = 0, len(data) - 1
    while True:
        if low == high:
            return data[low]
        q = randomized_partition(data, low, high, rng)
        k = q - low + 1
        if i == k:
            return data[q]
        if i < k:
            high = q - 1
        else:
            low = q + 1
            i -= k


def run_benchmark(size: int = 10, rng: random.Random | None = None) -> BenchmarkResult:
    """Time selecting the minimum of random data and check it against min()."""
    rng = rng or random.Random()
    data = [rng.randrange(RAND_MAX + 1) for _ in range(size)]
    report = BenchmarkResult("selection")
    start = time.perf_counter()
    result = randomized_select(data, 1, rng)
    report.timings["Randomized selection"] = time.perf_counter() - start
    report.correct = result == min(data)
    return report