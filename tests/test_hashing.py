import pytest

from aulaestructuras.hashing import (
    DEFAULT_SIZE,
    SAMPLE_NUMBERS,
    HashTable,
    hash_position,
    main,
)


def test_hash_of_zero_is_three():
    assert hash_position(0, 9) == 3


@pytest.mark.parametrize("n", list(SAMPLE_NUMBERS) + [0, 1, 100, 12345])
def test_hash_is_within_table(n):
    assert 0 <= hash_position(n, DEFAULT_SIZE) < DEFAULT_SIZE


def test_hash_default_size_matches_explicit():
    for n in SAMPLE_NUMBERS:
        assert hash_position(n) == hash_position(n, DEFAULT_SIZE)


def test_hash_rejects_bad_size():
    with pytest.raises(ValueError):
        hash_position(4, 0)


def test_insert_places_value_at_hashed_slot():
    table = HashTable()
    position = table.insert(13)
    assert position == hash_position(13)
    assert table.slots[position] == 13


def test_collision_raises_and_keeps_first_value():
    table = HashTable()
    first = table.insert(5)
    other = 5 + DEFAULT_SIZE
    assert hash_position(other) == first
    with pytest.raises(ValueError, match="Colisión al insertar"):
        table.insert(other)
    assert table.slots[first] == 5


def test_table_rejects_bad_size():
    with pytest.raises(ValueError):
        HashTable(-3)


def test_render_shows_empty_slots_as_minus_one():
    table = HashTable(3)
    table.insert(0)
    lines = table.render().splitlines()
    assert lines[0] == "Contenido del arreglo:"
    assert len(lines) == 4
    assert lines[1 + hash_position(0, 3)] == f"Posición {hash_position(0, 3)}: 0"
    empty = [line for line in lines[1:] if line.endswith(": -1")]
    assert len(empty) == 2


def test_main_reports_collisions_and_table(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    collisions = [line for line in lines if line.startswith("Colisión")]
    header = lines.index("Contenido del arreglo:")
    slots = lines[header + 1:]
    assert len(slots) == DEFAULT_SIZE
    stored = [line for line in slots if not line.endswith(": -1")]
    assert len(stored) + len(collisions) == len(SAMPLE_NUMBERS)
    assert len(collisions) == 2


def test_main_with_custom_numbers(capsys):
    assert main(["--size", "4", "1", "3"]) == 0
    out = capsys.readouterr().out
    assert f"Colisión al insertar 3 en la posición {hash_position(1, 4)}" in out