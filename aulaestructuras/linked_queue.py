"""A first-in, first-out queue with the classic enqueue and dequeue exercises."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

from aulaestructuras.linked_list import END_MARK


class EmptyQueueError(IndexError):
    """Raised when a value is taken from or looked up in an empty queue."""


class Queue:
    """Queue whose iteration and rendering run from the front to the rear."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: deque[Any] = deque()
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise EmptyQueueError("Cola vacía. No se puede hacer dequeue.")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the front value without removing it."""
        if not self._items:
            raise EmptyQueueError("Cola vacía. No hay elementos para mostrar.")
        return self._items[0]

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def render(self) -> str:
        """Return the values from the front as 'a -> b -> ... -> NULL'."""
        return "".join(f"{value} -> " for value in self) + END_MARK


def _demo_full() -> None:
    queue = Queue()
    for value in (10, 20, 30):
        queue.enqueue(value)
    print("Estado de la cola después de las inserciones:")
    print(f"Cola: {queue.render()}")
    print(f"Elemento en el frente de la cola: {queue.peek()}")
    print(f"Eliminando el elemento del frente: {queue.dequeue()}")
    print("Estado de la cola después de hacer dequeue:")
    print(f"Cola: {queue.render()}")
    print("Insertando un nuevo elemento (40) en la cola...")
    queue.enqueue(40)
    print("Estado de la cola después de insertar 40:")
    print(f"Cola: {queue.render()}")
    while not queue.is_empty():
        queue.dequeue()
    print("Cola vacía.")


def _demo_create() -> None:
    queue = Queue([5])
    print(f"Frente de la cola: {queue.peek()}")


def _demo_enqueue() -> None:
    queue = Queue()
    for value in (100, 200, 300):
        queue.enqueue(value)
    for value in queue:
        print(f"Frente de la cola: {value}")


def _demo_dequeue() -> None:
    queue = Queue([10, 20, 30])
    print("Estado inicial de la cola:")
    print(queue.render())
    print("Eliminando nodos de la cola...")
    while not queue.is_empty():
        queue.dequeue()
    print("Cola vacía.")


_DEMOS = {
    "cola": _demo_full,
    "crear": _demo_create,
    "insertar": _demo_enqueue,
    "eliminar": _demo_dequeue,
}


def main(argv: list[str] | None = None) -> int:
    """Run one of the queue exercises."""
    parser = argparse.ArgumentParser(
        prog="aulaestructuras-queue",
        description="Queue exercises.",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=tuple(_DEMOS),
        default="cola",
        help="exercise to run",
    )
    args = parser.parse_args(argv)
    _DEMOS[args.demo]()
    return 0