"""Linear and Fibonacci search over sequences."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

SORTED_VALUES = (10, 22, 35, 40, 45, 50, 80, 90, 100, 120)
NOT_FOUND = -1

_DEFAULT_KEYS = {"fibonacci": 35, "linear": 36}


def linear_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of the first item equal to ``key``, or -1."""
    for index, item in enumerate(items):
        if item == key:
            return index
    return NOT_FOUND


def fibonacci_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of ``key`` in the sorted sequence ``items``, or -1.

    The search range is narrowed by stepping through Fibonacci numbers.
    """
    size = len(items)
    if size == 0:
        return NOT_FOUND

    fib_m2, fib_m1 = 0, 1
    fib_m = fib_m2 + fib_m1
    while fib_m < size:
        fib_m2, fib_m1 = fib_m1, fib_m
        fib_m = fib_m2 + fib_m1

    offset = -1
    while fib_m > 1:
        i = min(offset + fib_m2, size - 1)
        if items[i] < key:
            fib_m = fib_m1
            fib_m1 = fib_m2
            fib_m2 = fib_m - fib_m1
            offset = i
        elif items[i] > key:
            fib_m = fib_m2
            fib_m1 = fib_m1 - fib_m2
            fib_m2 = fib_m - fib_m1
        else:
            return i

    if fib_m1 and offset + 1 < size and items[offset + 1] == key:
        return offset + 1
    return NOT_FOUND


def main(argv: list[str] | None = None) -> int:
    """Search the sample array for a key and report where it was found."""
    parser = argparse.ArgumentParser(
        prog="aulaestructuras-search",
        description="Search a sorted sample array.",
    )
    parser.add_argument("key", nargs="?", type=int, help="value to look for")
    parser.add_argument(
        "--method",
        choices=tuple(_DEFAULT_KEYS),
        default="fibonacci",
        help="search algorithm to use",
    )
    args = parser.parse_args(argv)

    key = _DEFAULT_KEYS[args.method] if args.key is None else args.key
    search = fibonacci_search if args.method == "fibonacci" else linear_search
    index = search(SORTED_VALUES, key)

    if index != NOT_FOUND:
        print(f"Elemento encontrado en el índice {index}")
    else:
        print("Elemento no encontrado")
    return 0