"""Classic comparison and distribution sorts on lists of integers.

Every sort returns a new list and leaves its argument untouched.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence

DEFAULT_BUCKETS = 10


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Repeatedly swap adjacent out-of-order pairs."""
    result = list(values)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Grow a sorted prefix by sliding each new element into place."""
    result = list(values)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def smallest_index(values: Sequence[int], start: int = 0) -> int:
    """Index of the first smallest element at or after ``start``."""
    if not 0 <= start < len(values):
        raise IndexError(f"invalid start index {start}")
    return min(range(start, len(values)), key=values.__getitem__)


def selection_sort(values: Iterable[int]) -> list[int]:
    """Swap the smallest remaining element into each position in turn."""
    result = list(values)
    for i in range(len(result) - 1):
        pos = smallest_index(result, i)
        result[i], result[pos] = result[pos], result[i]
    return result


def partition(values: MutableSequence[int], beg: int, end: int) -> int:
    """Partition ``values[beg:end + 1]`` in place around ``values[beg]``.

    The pivot moves between the two ends until they meet; its final index
    is returned, with no larger element before it and no smaller one after.
    """
    if not 0 <= beg <= end < len(values):
        raise IndexError(f"invalid range {beg}..{end}")
    loc = left = beg
    right = end
    while True:
        while values[loc] <= values[right] and loc != right:
            right -= 1
        if loc == right:
            return loc
        values[loc], values[right] = values[right], values[loc]
        loc = right
        while values[loc] >= values[left] and loc != left:
            left += 1
        if loc == left:
            return loc
        values[loc], values[left] = values[left], values[loc]
        loc = left


def quick_sort(values: Iterable[int]) -> list[int]:
    """Sort by partitioning around the first element of each range."""
    result = list(values)
    pending = [(0, len(result) - 1)]
    while pending:
        beg, end = pending.pop()
        if beg < end:
            loc = partition(result, beg, end)
            pending.append((beg, loc - 1))
            pending.append((loc + 1, end))
    return result


def _merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[int]) -> list[int]:
    """Bottom-up merge sort: merge runs of width 1, 2, 4, ..."""
    result = list(values)
    n = len(result)
    width = 1
    while width < n:
        for left in range(0, n - 1, 2 * width):
            mid = min(left + width, n)
            right = min(left + 2 * width, n)
            result[left:right] = _merge(result[left:mid], result[mid:right])
        width *= 2
    return result


def shell_sort(values: Iterable[int]) -> list[int]:
    """Gap-halving exchange sort, finishing with gap 1 until no swap occurs."""
    result = list(values)
    n = len(result)
    gap = n
    swapped = True
    while gap > 1 or swapped:
        gap = max(gap // 2, 1)
        swapped = False
        for i in range(n - gap):
            if result[i] > result[i + gap]:
                result[i], result[i + gap] = result[i + gap], result[i]
                swapped = True
    return result


def bucket_sort(values: Iterable[int], buckets: int = DEFAULT_BUCKETS) -> list[int]:
    """Distribute by ``value // buckets``, insertion-sort each bucket, concatenate.

    Values must lie in ``0 <= value < buckets * buckets``.
    """
    if buckets < 1:
        raise ValueError("number of buckets must be positive")
    bins: list[list[int]] = [[] for _ in range(buckets)]
    for value in values:
        index = value // buckets
        if value < 0 or index >= buckets:
            raise ValueError(
                f"value {value} outside bucket range 0..{buckets * buckets - 1}"
            )
        bins[index].append(value)
    return [value for bin_ in bins for value in insertion_sort(bin_)]