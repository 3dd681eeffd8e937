"""Greedy activity selection."""

from __future__ import annotations

import time
from collections.abc import Sequence

from algobook.sorting import BenchmarkResult


def _check(starts: Sequence[int], finishes: Sequence[int]) -> None:
    if len(starts) != len(finishes):
        raise ValueError("start and finish sequences differ in length")


def _select_from(starts: Sequence[int], finishes: Sequence[int], k: int, n: int) -> list[int]:
    m = k + 1
    while m <= n and starts[m] < finishes[k]:
        m += 1
    if m > n:
        return []
    return [m, *_select_from(starts, finishes, m, n)]


def recursive_activity_selector(
    starts: Sequence[int], finishes: Sequence[int], k: int = 0, n: int | None = None
) -> list[int]:
    """Indices of a maximum set of compatible activities after activity k.

    Index 0 is a placeholder activity; activities 1..n must be sorted by finish
    time. An activity may start exactly when the previous one finishes.
    """
    _check(starts, finishes)
    if n is None:
        n = len(finishes) - 1
    return _select_from(starts, finishes, k, n)


def greedy_activity_selector(starts: Sequence[int], finishes: Sequence[int]) -> list[int]:
    """Iterative activity selection over activities 1..n sorted by finish time.

    Index 0 is a placeholder. An activity must start strictly after the
    previously chosen one finishes.
    """
    _check(starts, finishes)
    n = len(starts) - 1
    if n < 1:
        return []
    chosen = [1]
    k = 1
    for m in range(2, n + 1):
        if starts[m] > finishes[k]:
            k = m
            chosen.append(m)
    return chosen


STARTS = (0, 1, 3, 0, 5, 3, 5, 6, 8, 8, 2, 12)
FINISHES = (0, 4, 5, 6, 7, 9, 9, 10, 11, 12, 14, 16)


def run_benchmark() -> BenchmarkResult:
    """Time both selectors on the textbook data and check that they agree."""
    report = BenchmarkResult("Greedy")
    start = time.perf_counter()
    recursive = recursive_activity_selector(STARTS, FINISHES)
    report.timings["Recursive activity selector"] = time.perf_counter() - start
    start = time.perf_counter()
    iterative = greedy_activity_selector(STARTS, FINISHES)
    report.timings["Greedy activity selector"] = time.perf_counter() - start
    report.correct = recursive == iterative
    return report