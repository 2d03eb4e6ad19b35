"""Command line: display or sort a list of integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from dsdrills.arrays import format_array
from dsdrills.sorting import (
    bubble_sort,
    bucket_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
    shell_sort,
)

ALGORITHMS: dict[str, Callable[[list[int]], list[int]]] = {
    "bubble": bubble_sort,
    "insertion": insertion_sort,
    "selection": selection_sort,
    "quick": quick_sort,
    "merge": merge_sort,
    "shell": shell_sort,
    "bucket": bucket_sort,
}


class _InputError(Exception):
    pass


def _read_counted(text: str) -> list[int]:
    """Parse a count followed by that many integers."""
    try:
        numbers = [int(token) for token in text.split()]
    except ValueError as exc:
        raise _InputError(f"not an integer: {exc}") from exc
    if not numbers:
        raise _InputError("expected the number of elements")
    count, *elements = numbers
    if count < 0:
        raise _InputError("number of elements must be non-negative")
    if len(elements) < count:
        raise _InputError(f"expected {count} elements, got {len(elements)}")
    return elements[:count]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsdrills",
        description=(
            "Display or sort integers. Without values on the command line, "
            "standard input supplies a count followed by that many integers."
        ),
    )
    commands = parser.add_subparsers(dest="command", required=True)

    display = commands.add_parser("display", help="print the array elements")
    display.add_argument("values", nargs="*", type=int)

    sort = commands.add_parser("sort", help="print the elements in ascending order")
    sort.add_argument("values", nargs="*", type=int)
    sort.add_argument(
        "-a",
        "--algorithm",
        choices=sorted(ALGORITHMS),
        default="bubble",
        help="sorting algorithm (default: bubble)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    values = args.values
    if not values:
        try:
            values = _read_counted(sys.stdin.read())
        except _InputError as exc:
            parser.error(str(exc))

    if args.command == "display":
        print(f"The array elements are : {format_array(values)}")
        return 0

    try:
        result = ALGORITHMS[args.algorithm](values)
    except ValueError as exc:
        print(f"dsdrills: {exc}", file=sys.stderr)
        return 1
    print(f"Sorted array: {format_array(result)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())