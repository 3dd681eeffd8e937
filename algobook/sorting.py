"""Comparison and counting sorts, with a timing harness."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Callable, Iterable, Iterator, MutableSequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from itertools import accumulate
from typing import Any

RAND_MAX = 32767


@dataclass
class BenchmarkResult:
    """Timings of a family of algorithms and whether their outputs agreed."""

    title: str
    timings: dict[str, float] = field(default_factory=dict)
    correct: bool = False

    def __str__(self) -> str:
        lines = [f"{name}: {seconds * 1000:.3f} ms" for name, seconds in self.timings.items()]
        lines.append(f"All {self.title} algorithms are correct" if self.correct else "Error!")
        return "\n".join(lines)


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


@contextmanager
def _recursion_headroom(depth: int) -> Iterator[None]:
    old_limit = sys.getrecursionlimit()
    sys.setrecursionlimit(old_limit + depth)
    try:
        yield
    finally:
        sys.setrecursionlimit(old_limit)


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by straight insertion."""
    result = list(items)
    for j in range(1, len(result)):
        key = result[j]
        i = j - 1
        while i >= 0 and result[i] > key:
            result[i + 1] = result[i]
            i -= 1
        result[i + 1] = key
    return result


def _insert_prefix(items: list[Any], n: int) -> None:
    if n < 1:
        return
    _insert_prefix(items, n - 1)
    key = items[n]
    i = n - 1
    while i >= 0 and items[i] > key:
        items[i + 1] = items[i]
        i -= 1
    items[i + 1] = key


def insertion_sort_recursive(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by insertion, sorting each prefix recursively."""
    result = list(items)
    with _recursion_headroom(len(result)):
        _insert_prefix(result, len(result) - 1)
    return result


def shell_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted with Shell's halving step sequence."""
    result = list(items)
    step = len(result) // 2
    while step > 0:
        for i in range(len(result) - step):
            j = i
            while j >= 0 and result[j] > result[j + step]:
                _swap(result, j, j + step)
                j -= 1
        step //= 2
    return result


def bubble_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by bubble sort, stopping early once no swap occurs."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if result[j] > result[j + 1]:
                _swap(result, j, j + 1)
                swapped = True
        if not swapped:
            break
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by repeatedly selecting the minimum."""
    result = list(items)
    for i in range(len(result) - 1):
        min_index = i
        for j in range(i + 1, len(result)):
            if result[j] < result[min_index]:
                min_index = j
        _swap(result, i, min_index)
    return result


def _merge(items: list[Any], p: int, q: int, r: int) -> None:
    left = items[p : q + 1]
    right = items[q + 1 : r + 1]
    kl = kr = 0
    for k in range(p, r + 1):
        if kr >= len(right) or (kl < len(left) and left[kl] <= right[kr]):
            items[k] = left[kl]
            kl += 1
        else:
            items[k] = right[kr]
            kr += 1


def _merge_sort(items: list[Any], p: int, r: int) -> None:
    if p < r:
        q = (p + r) // 2
        _merge_sort(items, p, q)
        _merge_sort(items, q + 1, r)
        _merge(items, p, q, r)


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by top-down merge sort (stable)."""
    result = list(items)
    _merge_sort(result, 0, len(result) - 1)
    return result


def _max_heapify(items: list[Any], i: int, heap_size: int) -> None:
    while True:
        left = 2 * i + 1
        right = left + 1
        largest = i
        if left < heap_size and items[i] < items[left]:
            largest = left
        if right < heap_size and items[largest] < items[right]:
            largest = right
        if largest == i:
            return
        _swap(items, i, largest)
        i = largest


def heap_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by building a max-heap and extracting its root."""
    result = list(items)
    n = len(result)
    for i in range(n // 2 - 1, -1, -1):
        _max_heapify(result, i, n)
    for end in range(n - 1, 0, -1):
        _swap(result, 0, end)
        _max_heapify(result, 0, end)
    return result


def partition(items: MutableSequence[Any], low: int, high: int) -> int:
    """Partition items[low:high+1] in place around items[high]; return the pivot's index."""
    pivot = items[high]
    i = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            i += 1
            _swap(items, i, j)
    _swap(items, high, i + 1)
    return i + 1


def randomized_partition(
    items: MutableSequence[Any], low: int, high: int, rng: random.Random | None = None
) -> int:
    """Partition around a randomly chosen pivot; return the pivot's index."""
    rng = rng or random.Random()
    _swap(items, rng.randint(low, high), high)
    return partition(items, low, high)


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Return the items sorted by quicksort with the last element as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            q = partition(result, low, high)
            pending.append((q + 1, high))
            pending.append((low, q - 1))
    return result


def counting_sort(items: Iterable[int]) -> list[int]:
    """Return non-negative integers sorted by counting (stable)."""
    values = list(items)
    if not values:
        return []
    if min(values) < 0:
        raise ValueError("counting sort requires non-negative integers")
    counts = [0] * (max(values) + 1)
    for value in values:
        counts[value] += 1
    positions = list(accumulate(counts))
    output = [0] * len(values)
    for value in reversed(values):
        positions[value] -= 1
        output[positions[value]] = value
    return output


SORTS: dict[str, Callable[[Iterable[Any]], list[Any]]] = {
    "Insertion sort": insertion_sort,
    "Insertion recursive sort": insertion_sort_recursive,
    "Selection sort": selection_sort,
    "Merge sort": merge_sort,
    "Bubble sort": bubble_sort,
    "Heap sort": heap_sort,
    "Quick sort": quick_sort,
    "Counting sort": counting_sort,
    "Shell sort": shell_sort,
}


def run_benchmark(size: int = 1000, rng: random.Random | None = None) -> BenchmarkResult:
    """Time every sort on the same random data and check that all agree."""
    rng = rng or random.Random()
    data = [rng.randrange(RAND_MAX + 1) for _ in range(size)]
    report = BenchmarkResult("sortings")
    outputs: dict[str, list[Any]] = {}
    for name, sort in SORTS.items():
        start = time.perf_counter()
        outputs[name] = sort(data)
        report.timings[name] = time.perf_counter() - start
    reference = outputs["Selection sort"]
    report.correct = all(output == reference for output in outputs.values())
    return report