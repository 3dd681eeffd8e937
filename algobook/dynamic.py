"""Dynamic programming: rod cutting, longest common subsequence, Fibonacci and knapsack."""

from __future__ import annotations

import random
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, Hashable

from algobook.sorting import RAND_MAX, BenchmarkResult


def _check_rod(prices: Sequence[int], n: int) -> None:
    if n < 0:
        raise ValueError("rod length must be non-negative")
    if n >= len(prices):
        raise ValueError(f"no price given for rod length {n}")


def _cut_rod(prices: Sequence[int], n: int) -> int:
    if n == 0:
        return 0
    return max(prices[i] + _cut_rod(prices, n - i) for i in range(1, n + 1))


def cut_rod(prices: Sequence[int], n: int) -> int:
    """Best revenue for a rod of length n; prices[i] is the price of length i.

    Plain recursion, exponential in n.
    """
    _check_rod(prices, n)
    return _cut_rod(prices, n)


def memoized_cut_rod(prices: Sequence[int], n: int) -> int:
    """Best revenue for a rod of length n, top-down with a memo of sub-results."""
    _check_rod(prices, n)
    memo = {0: 0}

    def best(length: int) -> int:
        if length not in memo:
            memo[length] = max(prices[i] + best(length - i) for i in range(1, length + 1))
        return memo[length]

    return best(n)


def bottom_up_cut_rod(prices: Sequence[int], n: int) -> int:
    """Best revenue for a rod of length n, filling the table from short rods up."""
    _check_rod(prices, n)
    revenue = [0]
    for j in range(1, n + 1):
        revenue.append(max(prices[i] + revenue[j - i] for i in range(1, j + 1)))
    return revenue[n]


class Arrow(Enum):
    """Direction taken from a cell of the LCS table during reconstruction."""

    DIAGONAL = "\\"
    UP = "|"
    LEFT = "-"


def lcs_tables(
    x: Sequence[Hashable], y: Sequence[Hashable]
) -> tuple[list[list[int]], list[list[Arrow | None]]]:
    """Return the LCS length table and the arrow table for sequences x and y.

    Border cells of the arrow table hold None.
    """
    m, n = len(x), len(y)
    lengths = [[0] * (n + 1) for _ in range(m + 1)]
    arrows: list[list[Arrow | None]] = [[None] * (n + 1) for _ in range(m + 1)]
    for i, xi in enumerate(x):
        for j, yj in enumerate(y):
            if xi == yj:
                lengths[i + 1][j + 1] = lengths[i][j] + 1
                arrows[i + 1][j + 1] = Arrow.DIAGONAL
            elif lengths[i][j + 1] >= lengths[i + 1][j]:
                lengths[i + 1][j + 1] = lengths[i][j + 1]
                arrows[i + 1][j + 1] = Arrow.UP
            else:
                lengths[i + 1][j + 1] = lengths[i + 1][j]
                arrows[i + 1][j + 1] = Arrow.LEFT
    return lengths, arrows


def longest_common_subsequence(x: Sequence[Any], y: Sequence[Any]) -> list[Any]:
    """Return a longest common subsequence of x and y."""
    _, arrows = lcs_tables(x, y)
    i, j = len(x), len(y)
    reversed_result = []
    while i > 0 and j > 0:
        arrow = arrows[i][j]
        if arrow is Arrow.DIAGONAL:
            reversed_result.append(x[i - 1])
            i -= 1
            j -= 1
        elif arrow is Arrow.UP:
            i -= 1
        else:
            j -= 1
    return reversed_result[::-1]


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError("Fibonacci index must be non-negative")


def fibonacci_iterative(n: int) -> int:
    """Return the n-th Fibonacci number by iteration."""
    _check_index(n)
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def fibonacci_recursive(n: int) -> int:
    """Return the n-th Fibonacci number by naive recursion (exponential time)."""
    _check_index(n)
    if n < 1:
        return 0
    if n == 1:
        return 1
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


_KNOWN_FIBONACCI = [0, 1]


def fibonacci_top_down(n: int) -> int:
    """Return the n-th Fibonacci number, remembering every value computed so far."""
    _check_index(n)
    if n < len(_KNOWN_FIBONACCI):
        return _KNOWN_FIBONACCI[n]
    value = fibonacci_top_down(n - 1) + fibonacci_top_down(n - 2)
    _KNOWN_FIBONACCI.append(value)
    return value


@dataclass(frozen=True)
class KnapsackItem:
    """A kind of thing that can go into the knapsack."""

    size: int
    value: int


DEFAULT_ITEMS = (
    KnapsackItem(3, 4),
    KnapsackItem(4, 5),
    KnapsackItem(7, 10),
    KnapsackItem(8, 11),
    KnapsackItem(9, 13),
)


def _check_knapsack(items: Sequence[KnapsackItem], capacity: int, n: int | None) -> int:
    if capacity < 0:
        raise ValueError("knapsack capacity must be non-negative")
    if n is None:
        return len(items)
    if not 0 <= n <= len(items):
        raise ValueError(f"item count {n} out of range 0..{len(items)}")
    return n


def _knap(items: Sequence[KnapsackItem], capacity: int, n: int) -> int:
    if n == 0 or capacity == 0:
        return 0
    item = items[n - 1]
    skip = _knap(items, capacity, n - 1)
    if item.size > capacity:
        return skip
    return max(item.value + _knap(items, capacity - item.size, n - 1), skip)


def knapsack(items: Sequence[KnapsackItem], capacity: int, n: int | None = None) -> int:
    """Best total value of a 0/1 choice among the first n items within capacity.

    Plain recursion, exponential in n.
    """
    n = _check_knapsack(items, capacity, n)
    return _knap(items, capacity, n)


def knapsack_memoized(
    items: Sequence[KnapsackItem], capacity: int, n: int | None = None
) -> int:
    """Same as knapsack, remembering each (capacity, n) result."""
    n = _check_knapsack(items, capacity, n)
    frozen = tuple(items)

    @lru_cache(maxsize=None)
    def best(room: int, count: int) -> int:
        if count == 0 or room == 0:
            return 0
        item = frozen[count - 1]
        skip = best(room, count - 1)
        if item.size > room:
            return skip
        return max(item.value + best(room - item.size, count - 1), skip)

    return best(capacity, n)


FIBONACCI_INPUT = 30
KNAPSACK_CAPACITY = 17
_LCS_X = (0, 1, 2, 1, 3, 0, 1)
_LCS_Y = (1, 3, 2, 0, 1, 0)
_LCS_EXPECTED = [1, 2, 1, 0]


def run_benchmark(rng: random.Random | None = None) -> BenchmarkResult:
    """Time every dynamic-programming algorithm and check that alternatives agree."""
    rng = rng or random.Random()
    report = BenchmarkResult("DP")

    def timed(name: str, func: Callable[..., Any], *args: Any, repeat: int = 1) -> Any:
        start = time.perf_counter()
        for _ in range(repeat):
            result = func(*args)
        report.timings[name] = time.perf_counter() - start
        return result

    prices = [rng.randrange(RAND_MAX + 1) for _ in range(10)]
    rod = len(prices) - 1
    cr = timed("Cut-Rod", cut_rod, prices, rod)
    crm = timed("Memoized Cut-Rod", memoized_cut_rod, prices, rod)
    bucr = timed("Bottom-up Cut-Rod", bottom_up_cut_rod, prices, rod)
    lcs = timed("LCS-length", longest_common_subsequence, _LCS_X, _LCS_Y)
    fi = timed("Fibonacci iteration", fibonacci_iterative, FIBONACCI_INPUT)
    fi_rec = timed("Fibonacci recursive", fibonacci_recursive, FIBONACCI_INPUT)
    fi_dp = timed("Fibonacci top-down", fibonacci_top_down, FIBONACCI_INPUT)
    kn = timed(
        "Knapsack recursion", knapsack, DEFAULT_ITEMS, KNAPSACK_CAPACITY, repeat=10
    )
    kn_dp = timed(
        "Knapsack memoized", knapsack_memoized, DEFAULT_ITEMS, KNAPSACK_CAPACITY, repeat=10
    )

    report.correct = (
        cr == crm == bucr
        and lcs == _LCS_EXPECTED
        and fi == fi_rec == fi_dp
        and kn == kn_dp
    )
    return report