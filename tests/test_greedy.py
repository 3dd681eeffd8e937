import pytest

from algobook.greedy import (
    FINISHES,
    STARTS,
    greedy_activity_selector,
    recursive_activity_selector,
    run_benchmark,
)


def test_textbook_selection():
    assert recursive_activity_selector(STARTS, FINISHES) == [1, 4, 8, 11]


def test_selectors_agree_on_textbook_data():
    assert greedy_activity_selector(STARTS, FINISHES) == recursive_activity_selector(
        STARTS, FINISHES
    )


@pytest.mark.parametrize("selector", [recursive_activity_selector, greedy_activity_selector])
def test_selected_activities_are_compatible(selector):
    chosen = selector(STARTS, FINISHES)
    assert chosen == sorted(chosen)
    for previous, current in zip(chosen, chosen[1:]):
        assert STARTS[current] >= FINISHES[previous]


def test_touching_intervals_differ_between_selectors():
    starts = [0, 1, 4]
    finishes = [0, 4, 6]
    assert recursive_activity_selector(starts, finishes) == [1, 2]
    assert greedy_activity_selector(starts, finishes) == [1]


def test_recursive_with_explicit_bounds():
    full = recursive_activity_selector(STARTS, FINISHES)
    partial = recursive_activity_selector(STARTS, FINISHES, 0, 5)
    assert partial == [i for i in full if i <= 5]


@pytest.mark.parametrize("selector", [recursive_activity_selector, greedy_activity_selector])
def test_no_activities(selector):
    assert selector([0], [0]) == []


@pytest.mark.parametrize("selector", [recursive_activity_selector, greedy_activity_selector])
def test_mismatched_lengths(selector):
    with pytest.raises(ValueError):
        selector([0, 1], [0])


def test_run_benchmark():
    report = run_benchmark()
    assert report.correct
    assert set(report.timings) == {"Recursive activity selector", "Greedy activity selector"}