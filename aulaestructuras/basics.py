"""Small numeric exercises: a running sum and arrays of random digits."""

from __future__ import annotations

import argparse
import random
import re
import sys

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def summation(n: int) -> int:
    """Return 1 + 2 + ... + n, or 0 when n is below 1."""
    return sum(range(1, n + 1))


def random_digits(count: int = 10, rng: random.Random | None = None) -> list[int]:
    """Return ``count`` random digits from 0 to 9."""
    if count < 0:
        raise ValueError("count must not be negative")
    source = rng if rng is not None else random.Random()
    return [source.randrange(10) for _ in range(count)]


def _format_row(values: list[int]) -> str:
    return "".join(f"{value}\t" for value in values)


def _parse_leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def main(argv: list[str] | None = None) -> int:
    """Run the 'sumatoria' or 'arreglos' exercise."""
    parser = argparse.ArgumentParser(
        prog="aulaestructuras-basics",
        description="Small numeric exercises.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    sum_parser = commands.add_parser("sumatoria", help="sum the numbers 1..n")
    sum_parser.add_argument("n", nargs="?", type=int, help="upper bound")

    arrays_parser = commands.add_parser("arreglos", help="print two random rows")
    arrays_parser.add_argument("--seed", type=int, help="random seed")

    args = parser.parse_args(argv)

    if args.command == "sumatoria":
        n = args.n
        if n is None:
            try:
                n = _parse_leading_int(input("Ingresa un valor para n: "))
            except (ValueError, EOFError) as error:
                print(f"Entrada inválida: {error}", file=sys.stderr)
                return 1
        print(f"El resultado es: {summation(n)}")
        return 0

    rng = random.Random(args.seed)
    first = random_digits(10, rng)
    second = random_digits(10, rng)
    print(_format_row(first))
    print(_format_row(second))
    return 0