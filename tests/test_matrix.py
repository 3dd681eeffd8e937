import pytest

from algobook.matrix import (
    inverse,
    least_squares_fit,
    lu_decomposition,
    multiply,
    run_benchmark,
    solve_lower_upper,
    solve_lu,
    transpose,
)

A = [
    [2, 3, 1, 5],
    [6, 13, 5, 19],
    [2, 19, 10, 23],
    [4, 10, 11, 31],
]


def assert_matrix_close(got, want, tol=1e-9):
    assert len(got) == len(want)
    for got_row, want_row in zip(got, want):
        assert got_row == pytest.approx(want_row, abs=tol)


def identity(n):
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def test_solve_lu_textbook_example():
    assert solve_lu(A, [1, 2, 3, 4]) == pytest.approx([175 / 8, -13 / 4, 32, -13])


def test_least_squares_textbook_example():
    coefficients = least_squares_fit([-1, 1, 2, 3, 5], [2, 1, 1, 0, 3])
    assert coefficients == pytest.approx([1.2, -0.757, 0.214], abs=1e-3)


def test_least_squares_recovers_exact_polynomial():
    xs = [-2, -1, 0, 1, 2, 3]
    ys = [3 - 2 * x + 0.5 * x * x for x in xs]
    assert least_squares_fit(xs, ys, 3) == pytest.approx([3, -2, 0.5], abs=1e-9)


def test_lu_factors_reproduce_matrix():
    lower, upper = lu_decomposition(A)
    assert_matrix_close(multiply(lower, upper), A)


def test_lu_factor_shapes():
    lower, upper = lu_decomposition(A)
    n = len(A)
    for i in range(n):
        assert lower[i][i] == 1.0
        for j in range(n):
            if j > i:
                assert lower[i][j] == 0.0
            if j < i:
                assert upper[i][j] == 0.0


def test_lu_does_not_modify_input():
    copy = [row[:] for row in A]
    lu_decomposition(A)
    assert A == copy


def test_solve_lower_upper_matches_product():
    lower, upper = lu_decomposition(A)
    x = solve_lower_upper(lower, upper, [5, -1, 2, 0])
    assert [sum(a * xi for a, xi in zip(row, x)) for row in A] == pytest.approx([5, -1, 2, 0])


def test_inverse_times_matrix_is_identity():
    inv = inverse(A)
    assert_matrix_close(multiply(A, inv), identity(4))
    assert_matrix_close(multiply(inv, A), identity(4))


def test_inverse_of_nonsymmetric_matrix_is_not_transposed():
    m = [[1, 2], [0, 1]]
    assert_matrix_close(multiply(m, inverse(m)), identity(2))


def test_transpose_twice_is_identity_and_swaps_shape():
    m = [[1, 2, 3], [4, 5, 6]]
    t = transpose(m)
    assert len(t) == 3 and len(t[0]) == 2
    assert t[2][0] == m[0][2]
    assert transpose(t) == m


def test_multiply_by_identity():
    m = [[1.5, -2.0, 3.0], [4.0, 0.0, 6.25]]
    assert multiply(m, identity(3)) == m
    assert multiply(identity(2), m) == m


def test_multiply_dimension_mismatch_raises():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_zero_pivot_raises():
    with pytest.raises(ValueError):
        lu_decomposition([[0, 1], [1, 0]])


def test_singular_matrix_raises_on_solve():
    with pytest.raises(ValueError):
        solve_lu([[1, 2], [2, 4]], [1, 1])


def test_non_square_matrix_raises():
    with pytest.raises(ValueError):
        lu_decomposition([[1, 2, 3], [4, 5, 6]])


def test_run_benchmark_reports_correct():
    report = run_benchmark()
    assert report.correct is True
    assert len(report.timings) == 2