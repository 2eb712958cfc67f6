"""Generate a CSV of random seismic risk records for a list of cities."""

from __future__ import annotations

import argparse
import logging
import os
import random
from collections.abc import Iterator, Sequence

NUM_RECORDS = 1000
MAX_CITIES = 100
HEADER = "city_name,seismic_level,risk_percent"

log = logging.getLogger(__name__)

Row = tuple[str, int, "float | None"]


def load_cities(path: str | os.PathLike[str], limit: int = MAX_CITIES) -> list[str]:
    """Read one city per line, keeping at most ``limit`` of them."""
    cities: list[str] = []
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            cities.append(line.rstrip("\n"))
            if len(cities) >= limit:
                log.warning(
                    "Se alcanzó el número máximo de ciudades permitidas (%d).", limit
                )
                break
    return cities


def generate_rows(
    cities: Sequence[str],
    count: int = NUM_RECORDS,
    rng: random.Random | None = None,
) -> Iterator[Row]:
    """Yield ``count`` rows of (city, level 1-5, risk 10-100 or None).

    About one row in ten has no risk value.
    """
    if not cities:
        raise ValueError("no cities to choose from")
    source = rng if rng is not None else random.Random()
    for _ in range(count):
        city = cities[source.randrange(len(cities))]
        level = source.randrange(5) + 1
        risk = source.random() * 90.0 + 10.0 if source.randrange(10) < 9 else None
        yield city, level, risk


def write_csv(
    path: str | os.PathLike[str],
    cities: Sequence[str],
    count: int = NUM_RECORDS,
    rng: random.Random | None = None,
) -> int:
    """Write the header and ``count`` random rows to ``path``; return the row count."""
    rows = list(generate_rows(cities, count, rng))
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(HEADER + "\n")
        for city, level, risk in rows:
            risk_text = "" if risk is None else f"{risk:.2f}"
            handle.write(f"{city},{level},{risk_text}\n")
    return len(rows)


def main(argv: list[str] | None = None) -> int:
    """Read a city list and write a random CSV from it."""
    parser = argparse.ArgumentParser(
        prog="aulaestructuras-csvgen",
        description="Generate random seismic risk records.",
    )
    parser.add_argument("--cities", default="cities.txt", help="file with one city per line")
    parser.add_argument("--output", default="input.csv", help="CSV file to write")
    parser.add_argument("--count", type=int, default=NUM_RECORDS, help="number of rows")
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)

    try:
        cities = load_cities(args.cities)
    except OSError as error:
        print(f"Error al abrir el archivo de ciudades: {error}")
        return 1

    try:
        written = write_csv(args.output, cities, args.count, random.Random(args.seed))
    except OSError as error:
        print(f"Error al abrir el archivo para escritura: {error}")
        return 1
    except ValueError as error:
        print(f"Error: {error}")
        return 1

    print(f"Archivo '{args.output}' generado con {written} registros.")
    return 0