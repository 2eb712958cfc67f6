"""Read personal records from prompts and print them back."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass

MAX_LEN = 100
DEFAULT_PEOPLE = 10

_MAX_FIELD = MAX_LEN - 2
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

Ask = Callable[[str], str]


@dataclass(frozen=True)
class Profile:
    """One person's full record."""

    name: str
    surname: str
    rut: str
    phone: str
    age: int


@dataclass(frozen=True)
class Person:
    """A short record: name and RUT."""

    name: str
    rut: str


def _field(text: str) -> str:
    return text.rstrip("\r\n")[:_MAX_FIELD]


def _parse_age(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"edad inválida: {text!r}")
    return int(match.group(1))


def read_profile(ask: Ask = input) -> Profile:
    """Ask for each field of a profile and return it."""
    name = _field(ask("Ingrese su nombre: "))
    surname = _field(ask("Ingrese su apellido: "))
    rut = _field(ask("Ingrese su RUT: "))
    phone = _field(ask("Ingrese su teléfono: "))
    age = _parse_age(ask("Ingrese su edad: "))
    return Profile(name, surname, rut, phone, age)


def format_profile(profile: Profile) -> str:
    """Return the listing of a profile."""
    return "\n".join(
        [
            "Datos ingresados:",
            f"Nombre: {profile.name}",
            f"Apellido: {profile.surname}",
            f"RUT: {profile.rut}",
            f"Teléfono: {profile.phone}",
            f"Edad: {profile.age}",
        ]
    )


def read_people(ask: Ask = input, count: int = DEFAULT_PEOPLE) -> list[Person]:
    """Ask for the name and RUT of ``count`` people."""
    if count < 0:
        raise ValueError("count must not be negative")
    people = []
    for number in range(1, count + 1):
        name = _field(ask(f"Ingrese el nombre de la persona {number}: "))
        rut = _field(ask(f"Ingrese el RUT de la persona {number}: "))
        people.append(Person(name, rut))
    return people


def format_people(people: Iterable[Person]) -> str:
    """Return the listing of several short records."""
    lines = ["Fichas ingresadas:"]
    for number, person in enumerate(people, start=1):
        lines.append(f"Persona {number}")
        lines.append(f"Nombre: {person.name}")
        lines.append(f"RUT: {person.rut}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run the 'ficha' or 'fichas' form."""
    parser = argparse.ArgumentParser(
        prog="aulaestructuras-forms",
        description="Read personal records from standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("ficha", help="one full record")
    people_parser = commands.add_parser("fichas", help="several short records")
    people_parser.add_argument("--count", type=int, default=DEFAULT_PEOPLE)
    args = parser.parse_args(argv)

    try:
        if args.command == "ficha":
            text = format_profile(read_profile(input))
        else:
            text = format_people(read_people(input, args.count))
    except EOFError:
        print("\nEntrada incompleta.", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"\n{error}", file=sys.stderr)
        return 1

    print()
    print(text)
    return 0