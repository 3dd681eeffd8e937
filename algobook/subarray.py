"""Maximum subarray by divide and conquer, brute force and Kadane's method."""

from __future__ import annotations

import random
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from itertools import accumulate

from algobook.sorting import BenchmarkResult


@dataclass(frozen=True)
class Subarray:
    """Inclusive index bounds of a subarray and the sum of its elements."""

    low: int
    high: int
    total: int


def _best_run(values: Sequence[int], indices: Iterable[int]) -> tuple[int, int]:
    best_index = best_total = None
    total = 0
    for i in indices:
        total += values[i]
        if best_total is None or total > best_total:
            best_index, best_total = i, total
    assert best_index is not None and best_total is not None
    return best_index, best_total


def find_max_crossing_subarray(values: Sequence[int], low: int, mid: int, high: int) -> Subarray:
    """Best subarray of values[low..high] that contains both mid and mid + 1."""
    if not 0 <= low <= mid < high < len(values):
        raise ValueError("need 0 <= low <= mid < high < len(values)")
    left, left_total = _best_run(values, range(mid, low - 1, -1))
    right, right_total = _best_run(values, range(mid + 1, high + 1))
    return Subarray(left, right, left_total + right_total)


def _find(values: Sequence[int], low: int, high: int) -> Subarray:
    if low == high:
        return Subarray(low, high, values[low])
    mid = (low + high) // 2
    left = _find(values, low, mid)
    right = _find(values, mid + 1, high)
    cross = find_max_crossing_subarray(values, low, mid, high)
    if left.total >= right.total and left.total >= cross.total:
        return left
    if right.total >= cross.total:
        return right
    return cross


def find_max_subarray(values: Sequence[int], low: int = 0, high: int | None = None) -> Subarray:
    """Best non-empty subarray of values[low..high] by divide and conquer."""
    if not values:
        raise ValueError("cannot search an empty sequence")
    if high is None:
        high = len(values) - 1
    if not 0 <= low <= high < len(values):
        raise ValueError("need 0 <= low <= high < len(values)")
    return _find(values, low, high)


def find_max_subarray_brute_force(values: Sequence[int]) -> Subarray:
    """Best non-empty subarray by trying every start and end (quadratic)."""
    if not values:
        raise ValueError("cannot search an empty sequence")
    best = Subarray(0, 0, values[0])
    for i in range(len(values)):
        for j, total in enumerate(accumulate(values[i:]), start=i):
            if total > best.total:
                best = Subarray(i, j, total)
    return best


def find_max_subarray_kadane(values: Iterable[int]) -> int:
    """Largest subarray sum, where the empty subarray counts with sum 0."""
    ending_here = best = 0
    for value in values:
        ending_here = max(0, ending_here + value)
        best = max(best, ending_here)
    return best


def run_benchmark(size: int = 1000, rng: random.Random | None = None) -> BenchmarkResult:
    """Time the three methods on random data and check that their sums agree."""
    rng = rng or random.Random()
    data = [rng.randrange(1000) - 500 for _ in range(size)]
    report = BenchmarkResult("maximal subarray")

    start = time.perf_counter()
    divided = find_max_subarray(data)
    report.timings["Find maximal subarray"] = time.perf_counter() - start

    start = time.perf_counter()
    brute = find_max_subarray_brute_force(data)
    report.timings["Find maximal subarray (brute force)"] = time.perf_counter() - start

    start = time.perf_counter()
    kadane = find_max_subarray_kadane(data)
    report.timings["Find maximal subarray (Kadane algorithm)"] = time.perf_counter() - start

    report.correct = divided.total == brute.total and kadane == max(0, divided.total)
    return report