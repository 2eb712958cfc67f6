"""A last-in, first-out stack with the classic push and pop exercises."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Iterator
from typing import Any

from aulaestructuras.linked_list import END_MARK


class EmptyStackError(IndexError):
    """Raised when a value is taken from or looked up in an empty stack."""


class Stack:
    """Stack whose iteration and rendering run from the top down."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise EmptyStackError("Pila vacía. No se puede hacer pop.")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise EmptyStackError("Pila vacía. No hay elementos para mostrar.")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds no values."""
        return not self._items

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def render(self) -> str:
        """Return the values from the top as 'a -> b -> ... -> NULL'."""
        return "".join(f"{value} -> " for value in self) + END_MARK


def _demo_full() -> None:
    stack = Stack()
    for value in (10, 20, 30):
        stack.push(value)
    print("Estado de la pila después de las inserciones:")
    print(f"Pila: {stack.render()}")
    print(f"Elemento en la cima de la pila: {stack.peek()}")
    print(f"Eliminando el elemento superior: {stack.pop()}")
    print("Estado de la pila después de hacer pop:")
    print(f"Pila: {stack.render()}")
    print("Insertando un nuevo elemento (40) en la pila...")
    stack.push(40)
    print("Estado de la pila después de insertar 40:")
    print(f"Pila: {stack.render()}")
    while not stack.is_empty():
        stack.pop()
    print("Pila vacía.")


def _demo_create() -> None:
    stack = Stack([5])
    print(f"Cima de la pila: {stack.peek()}")


def _demo_push() -> None:
    stack = Stack()
    for value in (10, 20, 30):
        stack.push(value)
    while not stack.is_empty():
        print(f"Cima de la pila: {stack.pop()}")


def _demo_pop() -> None:
    stack = Stack([30, 20, 10])
    print("Estado inicial de la pila:")
    print(stack.render())
    print("Eliminando nodos de la pila...")
    while not stack.is_empty():
        stack.pop()
    print("Pila vacía.")


_DEMOS = {
    "pila": _demo_full,
    "crear": _demo_create,
    "insertar": _demo_push,
    "eliminar": _demo_pop,
}


def main(argv: list[str] | None = None) -> int:
    """Run one of the stack exercises."""
    parser = argparse.ArgumentParser(
        prog="aulaestructuras-stack",
        description="Stack exercises.",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=tuple(_DEMOS),
        default="pila",
        help="exercise to run",
    )
    args = parser.parse_args(argv)
    _DEMOS[args.demo]()
    return 0