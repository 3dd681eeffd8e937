import pytest

from algobook.examples import evaluate_postfix, infix_to_postfix, josephus, main


def test_josephus_every_second():
    assert josephus(2, 5) == 3


def test_josephus_classic_case():
    assert josephus(3, 7) == 4


@pytest.mark.parametrize("n", [1, 2, 5, 9])
def test_josephus_step_one_leaves_last(n):
    assert josephus(1, n) == n


def test_josephus_single_person():
    assert josephus(8, 1) == 1


def test_josephus_survivor_in_range():
    assert 1 <= josephus(8, 9) <= 9


@pytest.mark.parametrize("m, n", [(0, 5), (3, 0), (-1, 2)])
def test_josephus_rejects_non_positive(m, n):
    with pytest.raises(ValueError):
        josephus(m, n)


def test_evaluate_postfix_source_example():
    assert evaluate_postfix("598+46**7+*") == 2075


def test_evaluate_postfix_skips_spaces():
    assert evaluate_postfix("5 9 8 + 4 6 * * 7 + *") == 2075


def test_infix_to_postfix_source_example():
    assert infix_to_postfix("(5*(((9+8)*(4*6))+7))") == "598+46**7+*"


def test_round_trip_value():
    assert evaluate_postfix(infix_to_postfix("(5*(((9+8)*(4*6))+7))")) == 2075


@pytest.mark.parametrize("expression", ["", "+", "5*", "*5"])
def test_evaluate_postfix_malformed(expression):
    with pytest.raises(ValueError):
        evaluate_postfix(expression)


def test_infix_unbalanced():
    with pytest.raises(ValueError):
        infix_to_postfix("1)")


def test_main_runs_examples(capsys):
    assert main(["--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert "All data structures examples were launched!" in out
    assert "Postfix 598+46**7+* = 2075" in out


def test_main_with_benchmarks(capsys):
    main(["--seed", "1", "--benchmarks"])
    out = capsys.readouterr().out
    assert "All sortings algorithms are correct" in out
    assert "All Greedy algorithms are correct" in out


def test_main_rejects_bad_seed():
    with pytest.raises(SystemExit):
        main(["--seed", "x"])