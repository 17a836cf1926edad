"""Binary search over sorted sequences, plus a small command-line driver."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import Any


def _bisect(items: Sequence[Any], target: Any, descending: bool) -> int | None:
    low, high = 0, len(items) - 1
    while low <= high:
        mid = low + (high - low) // 2
        value = items[mid]
        if value == target:
            return mid
        go_right = value > target if descending else value < target
        if go_right:
            low = mid + 1
        else:
            high = mid - 1
    return None


def binary_search(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in ascending ``items``, or None if absent."""
    return _bisect(items, target, descending=False)


def binary_search_descending(items: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in descending ``items``, or None if absent."""
    return _bisect(items, target, descending=True)


def main(argv: list[str] | None = None) -> int:
    """Read a count, that many integers and a target from stdin; report the target's index."""
    parser = argparse.ArgumentParser(
        prog="binary-search",
        description="Read N, N integers and a target from standard input.",
    )
    parser.add_argument(
        "--ascending",
        action="store_true",
        help="treat the numbers as sorted in ascending order (default: descending)",
    )
    args = parser.parse_args(argv)

    try:
        tokens = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        parser.error("input must consist of integers")
    if not tokens:
        parser.error("missing element count")
    count, rest = tokens[0], tokens[1:]
    if count < 0 or len(rest) < count + 1:
        parser.error("not enough numbers on input")
    items, target = rest[:count], rest[count]

    search = binary_search if args.ascending else binary_search_descending
    result = search(items, target)
    if result is None:
        print("Element is not present in array")
    else:
        print(f"Element is present at index {result}")
    return 0


if __name__ == "__main__":
    sys.exit(main())