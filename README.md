# dsdrills

A small collection of data-structure drills written as plain Python functions,
with a `dsdrills` command for displaying and sorting lists of integers.

- **Arrays** (`dsdrills.arrays`): `format_array`, `mean`,
  `smallest_position`, `second_largest`, `find_duplicates`, `insert_at`,
  `insert_sorted`, `delete_at`, and a tiny student table (`Student`,
  `default_students`, `format_students`, `find_grade`).
- **Matrices** (`dsdrills.matrices`): `format_matrix`, `add`, `multiply`,
  `transpose`, `identical` and `difference`, on matrices given as lists of rows.
- **Sorting** (`dsdrills.sorting`): `bubble_sort`, `insertion_sort`,
  `selection_sort` (with `smallest_index`), `quick_sort` (with the in-place
  `partition`), `merge_sort` (bottom-up), `shell_sort` and `bucket_sort`.
- **Recursion** (`dsdrills.recursion`): `factorial`, `fibonacci` and
  `fibonacci_series`.

It has no dependencies beyond the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from dsdrills import arrays, matrices, sorting, recursion

values = [5, 3, 9, 1, 7]

print(arrays.format_array(values))       # 5 3 9 1 7
print(arrays.mean(values))               # 5.0
print(arrays.smallest_position(values))  # (1, 4): value and 1-based position
print(arrays.second_largest(values))     # 7
print(arrays.insert_at(values, 4, 2))    # [5, 3, 4, 9, 1, 7]
print(arrays.delete_at(values, 0))       # [3, 9, 1, 7]

print(sorting.bubble_sort(values))       # [1, 3, 5, 7, 9]
print(sorting.merge_sort(values))
print(sorting.bucket_sort([42, 7, 19, 88, 3], 10))

a = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
b = [[9, 8, 7], [6, 5, 4], [3, 2, 1]]
print(matrices.format_matrix(matrices.add(a, b)))
print(matrices.format_matrix(matrices.multiply(a, b)))
print(matrices.transpose(a))
print(matrices.identical(a, b))          # False
print(matrices.difference(a, b))

print(recursion.factorial(5))            # 120
print(recursion.fibonacci_series(10))    # [0, 1, 1, 2, 3, 5, 8, 13, 21, 34]

students = arrays.default_students()
print(arrays.format_students(students))
print(arrays.find_grade(students, "Piyush"))  # 90
```

Functions that work on a list take it as an argument and return their result
rather than changing the list they were given; only `sorting.partition`
rearranges the list it is passed.

Errors are raised rather than printed:

- `mean` and `smallest_position` raise `ValueError` on an empty list;
  `second_largest` raises `ValueError` for fewer than two elements and returns
  `None` when there is no second largest element.
- `insert_at` raises `OverflowError` when the list already holds `capacity`
  elements (default 100) and `IndexError` for an index outside `0..len`;
  `delete_at` raises `IndexError` for a position outside the list.
- `find_grade` raises `KeyError` for an unknown name.
- The matrix functions raise `ValueError` for ragged matrices, for operands of
  different shape, and for a product whose inner dimensions do not match.
- `bucket_sort(values, buckets)` places each value in bucket
  `value // buckets`, so values must lie in `0 <= value < buckets * buckets`;
  others raise `ValueError`.
- `factorial` requires `n >= 1`; `fibonacci` and `fibonacci_series` require a
  non-negative argument. Both raise `ValueError` otherwise.

## Command line

Installing the package provides a `dsdrills` command with two subcommands:

```
dsdrills display 4 2 8
dsdrills sort 5 3 9 1 7
dsdrills sort --algorithm merge 5 3 9 1 7
```

`display` prints `The array elements are : ...` and `sort` prints
`Sorted array: ...`. The `-a/--algorithm` option of `sort` takes one of
`bubble` (the default), `bucket`, `insertion`, `merge`, `quick`, `selection`
or `shell`.

When no values are given on the command line, standard input is read instead:
a count followed by at least that many integers, of which the first `count`
are used.

```
echo "3 4 2 8" | dsdrills sort -a quick
```

Malformed input ends with a usage error. A value that `bucket` sort cannot
place is reported on standard error and the command exits with status 1.

## What it does not do

The command only displays and sorts one list of integers. The other drills
(array statistics, insertion and deletion, matrices, the student table,
factorial and Fibonacci) are available from Python only, and there is no
interactive, prompt-driven mode.