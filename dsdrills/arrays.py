"""One-dimensional array drills: statistics, searching, insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

DEFAULT_CAPACITY = 100


def format_array(values: Iterable[int]) -> str:
    """Render the elements separated by single spaces."""
    return " ".join(str(value) for value in values)


def mean(values: Sequence[float]) -> float:
    """Arithmetic mean of the elements."""
    if not values:
        raise ValueError("cannot take the mean of an empty array")
    return sum(values) / len(values)


def smallest_position(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest element and its 1-based position (first occurrence)."""
    if not values:
        raise ValueError("empty array has no smallest element")
    index, small = min(enumerate(values), key=lambda pair: pair[1])
    return small, index + 1


def second_largest(values: Sequence[int]) -> int | None:
    """Return the second largest element, or None when there is none.

    A single left-to-right scan is used, seeded from the first two elements,
    so the result follows that scan rather than a full sort.
    """
    if len(values) < 2:
        raise ValueError("need at least two elements")
    first, second, *rest = values
    large, runner_up = max(first, second), min(first, second)
    for value in rest:
        if value > large:
            runner_up, large = large, value
        elif runner_up < value < large:
            runner_up = value
    return None if large == runner_up else runner_up


def find_duplicates(values: Sequence[int]) -> list[tuple[int, int]]:
    """Every pair of indices (i, j), i < j, holding equal elements."""
    return [
        (i, j)
        for i, left in enumerate(values)
        for j, right in enumerate(values[i + 1:], start=i + 1)
        if left == right
    ]


def insert_at(
    values: Sequence[int],
    element: int,
    index: int,
    capacity: int = DEFAULT_CAPACITY,
) -> list[int]:
    """Return a new list with ``element`` inserted before position ``index``."""
    if len(values) >= capacity:
        raise OverflowError("array is full, cannot insert element")
    if not 0 <= index <= len(values):
        raise IndexError(f"invalid index {index}")
    return [*values[:index], element, *values[index:]]


def insert_sorted(values: Sequence[int], element: int) -> list[int]:
    """Insert ``element`` before the first larger element, or at the end."""
    index = next(
        (i for i, value in enumerate(values) if value > element), len(values)
    )
    return [*values[:index], element, *values[index:]]


def delete_at(values: Sequence[int], position: int) -> list[int]:
    """Return a new list without the element at 0-based ``position``."""
    if not 0 <= position < len(values):
        raise IndexError(f"invalid position {position}")
    return [*values[:position], *values[position + 1:]]


@dataclass(frozen=True)
class Student:
    """A row of the parallel name/age/grade table."""

    name: str
    age: int
    grade: int


def default_students() -> list[Student]:
    """The built-in sample roster."""
    return [
        Student("Shubham", 25, 85),
        Student("Piyush", 30, 90),
        Student("Ankit", 35, 95),
    ]


def format_students(students: Iterable[Student]) -> str:
    """Render the roster as a tab-separated table with a header."""
    lines = ["Name\t\tAge\tGrade", "-" * 30]
    lines.extend(f"{s.name}\t\t{s.age}\t{s.grade}" for s in students)
    return "\n".join(lines)


def find_grade(students: Iterable[Student], name: str) -> int:
    """Grade of the first student with exactly this name."""
    for student in students:
        if student.name == name:
            return student.grade
    raise KeyError(f"student not found: {name}")