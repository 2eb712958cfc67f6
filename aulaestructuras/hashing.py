"""A fixed-size hash table without collision resolution."""

from __future__ import annotations

import argparse

DEFAULT_SIZE = 9
SAMPLE_NUMBERS = (13, 5, 28, 9, 43, 39, 23, 27, 17)
EMPTY_MARK = -1


def hash_position(n: int, size: int = DEFAULT_SIZE) -> int:
    """Return the slot for ``n``: (2n + 3) mod size."""
    if size <= 0:
        raise ValueError("table size must be positive")
    return (2 * n + 3) % size


class HashTable:
    """Open table of ``size`` slots; a second value for a taken slot is rejected."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self.slots: list[int | None] = [None] * size

    def insert(self, n: int) -> int:
        """Store ``n`` in its slot and return the slot.

        Raises ValueError if the slot is already taken.
        """
        position = hash_position(n, self.size)
        if self.slots[position] is not None:
            raise ValueError(f"Colisión al insertar {n} en la posición {position}")
        self.slots[position] = n
        return position

    def render(self) -> str:
        """Return the table listing, one slot per line; empty slots show -1."""
        lines = ["Contenido del arreglo:"]
        lines.extend(
            f"Posición {index}: {EMPTY_MARK if value is None else value}"
            for index, value in enumerate(self.slots)
        )
        return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Insert numbers into a table, reporting collisions, then print it."""
    parser = argparse.ArgumentParser(
        prog="aulaestructuras-hashing",
        description="Insert numbers into a small hash table.",
    )
    parser.add_argument("numbers", nargs="*", type=int, help="values to insert")
    parser.add_argument("--size", type=int, default=DEFAULT_SIZE, help="table size")
    args = parser.parse_args(argv)

    if args.size <= 0:
        parser.error("--size must be positive")

    table = HashTable(args.size)
    for n in args.numbers or SAMPLE_NUMBERS:
        try:
            table.insert(n)
        except ValueError as error:
            print(error)
    print(table.render())
    return 0