"""Matrix drills on lists of rows: display, sum, product, transpose, comparison."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def _shape(matrix: Matrix) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows differ in length")
    return rows, cols


def _require_same_shape(a: Matrix, b: Matrix) -> None:
    if _shape(a) != _shape(b):
        raise ValueError("matrices differ in shape")


def format_matrix(matrix: Matrix) -> str:
    """Render one row per line, elements separated by spaces."""
    return "\n".join(" ".join(str(value) for value in row) for row in matrix)


def add(a: Matrix, b: Matrix) -> list[list[int]]:
    """Element-wise sum."""
    _require_same_shape(a, b)
    return [[x + y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]


def multiply(a: Matrix, b: Matrix) -> list[list[int]]:
    """Matrix product a x b."""
    _, cols_a = _shape(a)
    rows_b, _ = _shape(b)
    if cols_a != rows_b:
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def transpose(matrix: Matrix) -> list[list[int]]:
    """Rows become columns."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def identical(a: Matrix, b: Matrix) -> bool:
    """True when every element matches."""
    _require_same_shape(a, b)
    return all(x == y for ra, rb in zip(a, b) for x, y in zip(ra, rb))


def difference(a: Matrix, b: Matrix) -> list[list[int]]:
    """Element-wise a - b; zero wherever the matrices agree."""
    _require_same_shape(a, b)
    return [[x - y for x, y in zip(ra, rb)] for ra, rb in zip(a, b)]