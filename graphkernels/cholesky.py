"""In-place Cholesky factorisation, serial and task-parallel, with a self-check."""

from __future__ import annotations

import argparse
import math
import random
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from typing import Sequence

Matrix = list[list[float]]


def _check_square(matrix: Sequence[Sequence[float]]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def _take_root(matrix: Matrix, i: int) -> None:
    pivot = matrix[i][i]
    if pivot <= 0:
        raise ValueError(f"matrix is not positive definite (pivot {i} is {pivot})")
    matrix[i][i] = math.sqrt(pivot)


def _scale(matrix: Matrix, i: int, j: int) -> None:
    matrix[j][i] /= matrix[i][i]


def _update_row(matrix: Matrix, i: int, j: int) -> None:
    row = matrix[j]
    factor = row[i]
    for k in range(i + 1, j + 1):
        row[k] -= factor * matrix[k][i]


def cholesky_in_place(matrix: Matrix) -> None:
    """Overwrite the lower triangle of a symmetric positive-definite matrix with L."""
    size = _check_square(matrix)
    for i in range(size):
        _take_root(matrix, i)
        for j in range(i + 1, size):
            _scale(matrix, i, j)
        for j in range(i + 1, size):
            _update_row(matrix, i, j)


def cholesky_tasks(matrix: Matrix, workers: int | None = None) -> None:
    """Same factorisation, running each step's independent updates on a thread pool."""
    size = _check_square(matrix)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for i in range(size):
            _take_root(matrix, i)
            list(pool.map(partial(_scale, matrix, i), range(i + 1, size)))
            list(pool.map(partial(_update_row, matrix, i), range(i + 1, size)))


def random_lower_triangular(n: int, rng: random.Random | None = None) -> Matrix:
    """Build an n x n lower-triangular matrix with entries drawn from 1..10."""
    if n < 0:
        raise ValueError("size must be non-negative")
    rng = rng or random.Random()
    return [
        [float(rng.randrange(10) + 1) if j <= i else 0.0 for j in range(n)]
        for i in range(n)
    ]


def multiply_by_transpose(lower: Sequence[Sequence[float]]) -> Matrix:
    """Return lower @ lower.T."""
    return [
        [float(sum(x * y for x, y in zip(row_i, row_j))) for row_j in lower]
        for row_i in lower
    ]


def lower_matches(
    expected: Sequence[Sequence[float]],
    actual: Sequence[Sequence[float]],
    tolerance: float = 1e-7,
) -> bool:
    """Tell whether the lower triangles of two square matrices agree within tolerance."""
    if len(expected) != len(actual):
        raise ValueError("matrices differ in size")
    return all(
        abs(e - a) < tolerance
        for i, (row_e, row_a) in enumerate(zip(expected, actual))
        for e, a in zip(row_e[: i + 1], row_a[: i + 1])
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Factor L @ L.T for a random lower-triangular L and check the result."
    )
    parser.add_argument("--size", type=int, default=10, help="matrix dimension")
    parser.add_argument("--seed", type=int, default=1, help="random seed")
    parser.add_argument(
        "--workers", type=int, default=None, help="use the task-parallel version"
    )
    args = parser.parse_args(argv)

    lower = random_lower_triangular(args.size, random.Random(args.seed))
    product = multiply_by_transpose(lower)
    if args.workers is None:
        cholesky_in_place(product)
    else:
        cholesky_tasks(product, args.workers)
    print("Yes" if lower_matches(lower, product) else "No")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())