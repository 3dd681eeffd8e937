"""Dense matrix routines: LU decomposition, linear solves, inverse and least squares."""

from __future__ import annotations

import math
import time
from collections.abc import Sequence

from algobook.sorting import BenchmarkResult

Matrix = list[list[float]]


def _check_square(a: Sequence[Sequence[float]]) -> int:
    n = len(a)
    if n == 0:
        raise ValueError("matrix is empty")
    if any(len(row) != n for row in a):
        raise ValueError("matrix is not square")
    return n


def _identity(n: int) -> Matrix:
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def lu_decomposition(a: Sequence[Sequence[float]]) -> tuple[Matrix, Matrix]:
    """Split a square matrix into unit lower L and upper U with A = LU (no pivoting)."""
    n = _check_square(a)
    work = [[float(v) for v in row] for row in a]
    lower = _identity(n)
    upper = [[0.0] * n for _ in range(n)]

    for k in range(n):
        pivot = work[k][k]
        upper[k][k] = pivot
        if k < n - 1 and pivot == 0:
            raise ValueError(f"zero pivot in row {k}; the matrix needs pivoting")
        for i in range(k + 1, n):
            lower[i][k] = work[i][k] / pivot
            upper[k][i] = work[k][i]
        for i in range(k + 1, n):
            factor = lower[i][k]
            for j in range(k + 1, n):
                work[i][j] -= factor * upper[k][j]
    return lower, upper


def solve_lower_upper(
    lower: Sequence[Sequence[float]], upper: Sequence[Sequence[float]], b: Sequence[float]
) -> list[float]:
    """Solve LUx = b by forward then back substitution."""
    n = len(lower)
    if len(upper) != n or len(b) != n:
        raise ValueError("dimensions of L, U and b disagree")

    y: list[float] = []
    for row, bi in zip(lower, b):
        y.append(bi - sum(l * yj for l, yj in zip(row, y)))

    x = [0.0] * n
    for i in reversed(range(n)):
        diagonal = upper[i][i]
        if diagonal == 0:
            raise ValueError("matrix is singular")
        tail = sum(upper[i][j] * x[j] for j in range(i + 1, n))
        x[i] = (y[i] - tail) / diagonal
    return x


def solve_lu(a: Sequence[Sequence[float]], b: Sequence[float]) -> list[float]:
    """Solve Ax = b through an LU decomposition of A."""
    lower, upper = lu_decomposition(a)
    return solve_lower_upper(lower, upper, b)


def transpose(a: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of a rectangular matrix."""
    if not a or not a[0]:
        raise ValueError("matrix is empty")
    width = len(a[0])
    if any(len(row) != width for row in a):
        raise ValueError("matrix rows differ in length")
    return [list(column) for column in zip(*a)]


def multiply(a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]) -> Matrix:
    """Return the matrix product AB."""
    if not a or not a[0] or not b or not b[0]:
        raise ValueError("matrix is empty")
    if len(a[0]) != len(b):
        raise ValueError(f"cannot multiply {len(a)}x{len(a[0])} by {len(b)}x{len(b[0])}")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def inverse(a: Sequence[Sequence[float]]) -> Matrix:
    """Return the inverse of a square matrix, one column per LU solve."""
    n = _check_square(a)
    lower, upper = lu_decomposition(a)
    columns = [solve_lower_upper(lower, upper, unit) for unit in _identity(n)]
    return transpose(columns)


def least_squares_fit(x: Sequence[float], y: Sequence[float], degree: int = 3) -> list[float]:
    """Coefficients c0..c(degree-1) of the polynomial best fitting (x, y) in least squares.

    Uses the pseudoinverse (A^T A)^-1 A^T of the matrix of powers of x.
    """
    if len(x) != len(y):
        raise ValueError("x and y differ in length")
    if degree < 1:
        raise ValueError("need at least one coefficient")
    powers = [[float(xi) ** j for j in range(degree)] for xi in x]
    powers_t = transpose(powers)
    pseudo = multiply(inverse(multiply(powers_t, powers)), powers_t)
    return [sum(p * yi for p, yi in zip(row, y)) for row in pseudo]


EXAMPLE_MATRIX = (
    (2, 3, 1, 5),
    (6, 13, 5, 19),
    (2, 19, 10, 23),
    (4, 10, 11, 31),
)
EXAMPLE_RHS = (1, 2, 3, 4)
EXAMPLE_SOLUTION = (175 / 8, -13 / 4, 32, -13)
FIT_X = (-1, 1, 2, 3, 5)
FIT_Y = (2, 1, 1, 0, 3)
FIT_COEFFICIENTS = (1.2, -0.757, 0.214)


def run_benchmark() -> BenchmarkResult:
    """Time the linear solve and the least-squares fit on textbook data."""
    report = BenchmarkResult("Matrix")

    start = time.perf_counter()
    solution = solve_lu(EXAMPLE_MATRIX, EXAMPLE_RHS)
    report.timings["LU-decomposition procedure"] = time.perf_counter() - start

    start = time.perf_counter()
    coefficients = least_squares_fit(FIT_X, FIT_Y)
    report.timings["Least-squares procedure"] = time.perf_counter() - start

    report.correct = all(
        math.isclose(got, want, rel_tol=1e-9) for got, want in zip(solution, EXAMPLE_SOLUTION)
    ) and all(
        math.isclose(got, want, abs_tol=1e-3) for got, want in zip(coefficients, FIT_COEFFICIENTS)
    )
    return report