import random

import pytest

from algobook.dynamic import (
    DEFAULT_ITEMS,
    KnapsackItem,
    bottom_up_cut_rod,
    cut_rod,
    fibonacci_iterative,
    fibonacci_recursive,
    fibonacci_top_down,
    knapsack,
    knapsack_memoized,
    lcs_tables,
    longest_common_subsequence,
    memoized_cut_rod,
    run_benchmark,
)

PRICES = [0, 1, 5, 8, 9, 10, 17, 17, 20, 24, 30]


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


@pytest.mark.parametrize("n", range(len(PRICES)))
def test_cut_rod_variants_agree(n):
    plain = cut_rod(PRICES, n)
    assert memoized_cut_rod(PRICES, n) == plain
    assert bottom_up_cut_rod(PRICES, n) == plain


def test_cut_rod_base_cases():
    assert cut_rod(PRICES, 0) == 0
    assert memoized_cut_rod(PRICES, 0) == 0
    assert bottom_up_cut_rod(PRICES, 0) == 0
    assert cut_rod(PRICES, 1) == PRICES[1]
    assert memoized_cut_rod(PRICES, 1) == PRICES[1]
    assert bottom_up_cut_rod(PRICES, 1) == PRICES[1]


def test_cut_rod_never_worse_than_no_cut_and_superadditive():
    for revenue in (
        [cut_rod(PRICES, n) for n in range(len(PRICES))],
        [memoized_cut_rod(PRICES, n) for n in range(len(PRICES))],
        [bottom_up_cut_rod(PRICES, n) for n in range(len(PRICES))],
    ):
        for n in range(len(PRICES)):
            assert revenue[n] >= PRICES[n]
        for a in range(len(PRICES)):
            for b in range(len(PRICES) - a):
                assert revenue[a + b] >= revenue[a] + revenue[b]


def test_cut_rod_rejects_bad_length():
    with pytest.raises(ValueError):
        cut_rod(PRICES, len(PRICES))
    with pytest.raises(ValueError):
        cut_rod(PRICES, -1)
    with pytest.raises(ValueError):
        memoized_cut_rod(PRICES, len(PRICES))
    with pytest.raises(ValueError):
        memoized_cut_rod(PRICES, -1)
    with pytest.raises(ValueError):
        bottom_up_cut_rod(PRICES, len(PRICES))
    with pytest.raises(ValueError):
        bottom_up_cut_rod(PRICES, -1)


def test_lcs_example_from_source():
    x = [0, 1, 2, 1, 3, 0, 1]
    y = [1, 3, 2, 0, 1, 0]
    assert longest_common_subsequence(x, y) == [1, 2, 1, 0]


def test_lcs_table_length_matches_result():
    rng = random.Random(7)
    for _ in range(20):
        x = [rng.randrange(4) for _ in range(rng.randrange(12))]
        y = [rng.randrange(4) for _ in range(rng.randrange(12))]
        lengths, arrows = lcs_tables(x, y)
        result = longest_common_subsequence(x, y)
        assert lengths[len(x)][len(y)] == len(result)
        assert _is_subsequence(result, x)
        assert _is_subsequence(result, y)
        assert all(cell is None for cell in arrows[0])


def test_lcs_of_identical_and_empty():
    assert longest_common_subsequence("abc", "abc") == list("abc")
    assert longest_common_subsequence([], [1, 2]) == []


def test_fibonacci_base_cases():
    assert fibonacci_iterative(0) == 0
    assert fibonacci_recursive(0) == 0
    assert fibonacci_top_down(0) == 0
    assert fibonacci_iterative(1) == 1
    assert fibonacci_recursive(1) == 1
    assert fibonacci_top_down(1) == 1


def test_fibonacci_variants_agree_and_follow_recurrence():
    values = [fibonacci_iterative(n) for n in range(25)]
    assert values == [fibonacci_recursive(n) for n in range(25)]
    assert values == [fibonacci_top_down(n) for n in range(25)]
    for n in range(2, 25):
        assert values[n] == values[n - 1] + values[n - 2]


def test_fibonacci_thirty():
    assert fibonacci_top_down(30) == 832040


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci_iterative(-1)
    with pytest.raises(ValueError):
        fibonacci_recursive(-1)
    with pytest.raises(ValueError):
        fibonacci_top_down(-1)


def test_knapsack_default_items():
    assert knapsack(DEFAULT_ITEMS, 17) == 24
    assert knapsack_memoized(DEFAULT_ITEMS, 17) == 24


def test_knapsack_variants_agree_and_are_monotone():
    previous = 0
    for capacity in range(31):
        value = knapsack(DEFAULT_ITEMS, capacity)
        assert value == knapsack_memoized(DEFAULT_ITEMS, capacity)
        assert value >= previous
        previous = value
    assert knapsack(DEFAULT_ITEMS, 0) == 0


def test_knapsack_item_too_large_and_partial_count():
    big = [KnapsackItem(5, 10)]
    assert knapsack(big, 4) == 0
    assert knapsack(big, 5) == 10
    assert knapsack(DEFAULT_ITEMS, 17, 0) == 0
    assert knapsack_memoized(DEFAULT_ITEMS, 3, 1) == DEFAULT_ITEMS[0].value


def test_knapsack_errors():
    with pytest.raises(ValueError):
        knapsack(DEFAULT_ITEMS, -1)
    with pytest.raises(ValueError):
        knapsack_memoized(DEFAULT_ITEMS, 5, len(DEFAULT_ITEMS) + 1)


def test_run_benchmark_is_correct():
    report = run_benchmark(random.Random(3))
    assert report.correct
    assert "Fibonacci recursive" in report.timings
    assert str(report).endswith("All DP algorithms are correct")