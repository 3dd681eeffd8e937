"""Naive substring search over arbitrary sequences."""

from __future__ import annotations

import operator
import time
from collections.abc import Sequence
from typing import Any

from algobook.sorting import BenchmarkResult


def naive_string_matcher(text: Sequence[Any], pattern: Sequence[Any]) -> int:
    """Index of the first occurrence of pattern in text, or -1 if there is none.

    Tries every shift in turn; an empty pattern matches at 0.
    """
    m = len(pattern)
    for i in range(len(text) - m + 1):
        if all(map(operator.eq, text[i : i + m], pattern)):
            return i
    return -1


EXAMPLE_TEXT = (1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
EXAMPLE_PATTERN = (4, 5, 6, 7, 8, 9)


def run_benchmark() -> BenchmarkResult:
    """Time the naive matcher on a fixed example and check that it finds the pattern."""
    report = BenchmarkResult("substring")
    start = time.perf_counter()
    index = naive_string_matcher(EXAMPLE_TEXT, EXAMPLE_PATTERN)
    report.timings["Naive string matching"] = time.perf_counter() - start
    report.correct = (
        index >= 0 and EXAMPLE_TEXT[index : index + len(EXAMPLE_PATTERN)] == EXAMPLE_PATTERN
    )
    return report