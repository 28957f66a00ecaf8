"""Array and matrix exercises: averages, extremes, deviation and square matrices."""

from __future__ import annotations

import math
from collections.abc import Sequence

MAX_ITEMS = 100


def _checked(values: Sequence[float]) -> list[float]:
    items = list(values)
    if not 1 <= len(items) <= MAX_ITEMS:
        raise ValueError(f"number of values should be in range of (1 to {MAX_ITEMS})")
    return items


def _square(matrix: Sequence[Sequence[float]], name: str) -> list[list[float]]:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if not 1 <= size <= MAX_ITEMS:
        raise ValueError(f"matrix {name} size should be in range of (1 to {MAX_ITEMS})")
    if any(len(row) != size for row in rows):
        raise ValueError(f"matrix {name} must be square")
    return rows


def _same_square(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> tuple[list[list[float]], list[list[float]]]:
    first = _square(a, "a")
    second = _square(b, "b")
    if len(first) != len(second):
        raise ValueError("matrices must have the same size")
    return first, second


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of 1 to 100 values."""
    items = _checked(values)
    return sum(items) / len(items)


def largest(values: Sequence[float]) -> float:
    """Largest of 1 to 100 values."""
    return max(_checked(values))


def largest_nonnegative(values: Sequence[float]) -> float:
    """Largest value, where the search starts from zero; empty input gives 0."""
    return max([0, *values])


def standard_deviation(values: Sequence[float]) -> float:
    """Population standard deviation of 1 to 100 values."""
    items = _checked(values)
    mean = sum(items) / len(items)
    return math.sqrt(sum((value - mean) ** 2 for value in items) / len(items))


def add_matrices(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> list[list[float]]:
    """Element-wise sum of two square matrices of the same size."""
    first, second = _same_square(a, b)
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def multiply_elementwise(
    a: Sequence[Sequence[float]], b: Sequence[Sequence[float]]
) -> list[list[float]]:
    """Element-wise product of two square matrices of the same size."""
    first, second = _same_square(a, b)
    return [[x * y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def transpose(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Transpose of a square matrix."""
    rows = _square(matrix, "a")
    return [list(column) for column in zip(*rows)]