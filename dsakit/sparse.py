"""Triplet form of sparse matrices and matrix addition and multiplication."""

from __future__ import annotations

from typing import List, Sequence, Tuple

Matrix = List[List[int]]
Triplet = Tuple[int, int, int]


def _shape(matrix: Sequence[Sequence[int]]) -> Tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows differ in length")
    return rows, cols


def to_triplets(matrix: Sequence[Sequence[int]]) -> List[Triplet]:
    """Return the triplet form of ``matrix``.

    The first triplet is ``(rows, columns, non-zero count)``; each one after
    it is ``(row, column, value)`` for a non-zero entry in row-major order.
    """
    rows, cols = _shape(matrix)
    entries = [
        (i, j, value)
        for i, row in enumerate(matrix)
        for j, value in enumerate(row)
        if value != 0
    ]
    return [(rows, cols, len(entries)), *entries]


def transpose_triplets(triplets: Sequence[Triplet]) -> List[Triplet]:
    """Swap the row and column of every triplet, the header included."""
    return [(col, row, value) for row, col, value in triplets]


def add_matrices(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> Matrix:
    """Return the element-wise sum of two matrices of the same shape."""
    if _shape(first) != _shape(second):
        raise ValueError("addition is not possible: shapes differ")
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def multiply_matrices(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> Matrix:
    """Return the matrix product ``first`` times ``second``."""
    _, inner = _shape(first)
    second_rows, _ = _shape(second)
    if inner != second_rows:
        raise ValueError("multiplication is not possible: shapes do not match")
    columns = list(zip(*second))
    return [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in first]