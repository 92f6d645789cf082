"""Small numeric routines: counting, vector similarity, matrices and powers."""

from __future__ import annotations

import math
from collections.abc import Sequence

Matrix = list[list[int]]


def triangle_count(n: int) -> int:
    """Return n(n-1)(n-3)/6 for a convex polygon of ``n`` vertices, or 0 below 3."""
    if n < 3:
        return 0
    return n * (n - 1) * (n - 3) // 6


def _check_same_length(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(f"vectors differ in length: {len(a)} and {len(b)}")


def dot_product(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the dot product of two vectors of equal length."""
    _check_same_length(a, b)
    return float(sum(x * y for x, y in zip(a, b)))


def magnitude(a: Sequence[float]) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(sum(x * x for x in a))


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the cosine of the angle between two non-zero vectors."""
    denominator = magnitude(a) * magnitude(b)
    if denominator == 0:
        raise ValueError("cosine similarity is undefined for a zero vector")
    return dot_product(a, b) / denominator


def matrix_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the product of two matrices given as lists of rows."""
    if not a or not b:
        raise ValueError("matrices must not be empty")
    inner = len(a[0])
    if any(len(row) != inner for row in a) or any(len(row) != len(b[0]) for row in b):
        raise ValueError("matrix rows must all have the same length")
    if inner != len(b):
        raise ValueError("multiplication not allowed: inner dimensions differ")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def magic_square(n: int) -> Matrix:
    """Build an odd-order magic square with the Siamese method."""
    if n < 1 or n % 2 == 0:
        raise ValueError("magic square order must be a positive odd number")
    square = [[0] * n for _ in range(n)]
    row, col = 0, n // 2
    for number in range(1, n * n + 1):
        square[row][col] = number
        next_row, next_col = (row - 1) % n, (col + 1) % n
        if square[next_row][next_col]:
            row = (row + 1) % n
        else:
            row, col = next_row, next_col
    return square


def power(base: int, exponent: int) -> int:
    """Raise ``base`` to a non-negative integer ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    half = power(base, exponent // 2)
    result = half * half
    return base * result if exponent % 2 else result