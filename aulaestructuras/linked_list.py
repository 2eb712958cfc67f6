"""A singly linked list of values, with the classic node exercises."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

END_MARK = "NULL"


@dataclass
class _Node:
    value: Any
    next: Optional[_Node] = None


class LinkedList:
    """Singly linked list that appends at the tail and removes by value."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Link a new node holding ``value`` after the last node."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._length += 1

    def remove(self, value: Any) -> bool:
        """Unlink the first node equal to ``value``.

        Returns True if a node was removed, False if none matched.
        """
        previous: _Node | None = None
        current = self._head
        while current is not None and current.value != value:
            previous, current = current, current.next
        if current is None:
            return False
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        if current is self._tail:
            self._tail = previous
        self._length -= 1
        return True

    def __iter__(self) -> Iterator[Any]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def render(self) -> str:
        """Return the chain as 'a -> b -> ... -> NULL'."""
        return "".join(f"{value} -> " for value in self) + END_MARK


def _print_values(values: Iterable[Any]) -> None:
    for value in values:
        print(value)


def _demo_create() -> None:
    _print_values(LinkedList([5]))


def _demo_traverse_nodes() -> None:
    _print_values(LinkedList([5, 10, 15, 20]))


def _demo_add() -> None:
    chain = LinkedList([5])
    chain.append(100)
    _print_values(chain)


def _demo_insert() -> None:
    chain = LinkedList([5, 15, 25])
    chain.append(40)
    _print_values(chain)


def _demo_delete() -> None:
    chain = LinkedList([5, 15, 22, 30])
    print("Lista antes de eliminar el nodo con valor 22:")
    print(chain.render())
    chain.remove(22)
    print("Lista después de eliminar el nodo con valor 22:")
    print(chain.render())


def _demo_walk() -> None:
    print("Elementos:")
    _print_values(LinkedList([10, 20, 30]))


_DEMOS = {
    "crear": _demo_create,
    "recorrido": _demo_traverse_nodes,
    "agregar": _demo_add,
    "insertar": _demo_insert,
    "eliminar": _demo_delete,
    "recorrer": _demo_walk,
}


def main(argv: list[str] | None = None) -> int:
    """Run one of the linked list exercises."""
    parser = argparse.ArgumentParser(
        prog="aulaestructuras-linked-list",
        description="Linked list exercises.",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=tuple(_DEMOS),
        default="eliminar",
        help="exercise to run",
    )
    args = parser.parse_args(argv)
    _DEMOS[args.demo]()
    return 0