import io
import random

import pytest

from aulaestructuras.basics import main, random_digits, summation


def test_summation_of_small_values():
    assert summation(0) == 0
    assert summation(1) == 1
    assert summation(-5) == 0


@pytest.mark.parametrize("n", [2, 5, 10, 37, 100])
def test_summation_steps_by_n(n):
    assert summation(n) - summation(n - 1) == n


@pytest.mark.parametrize("n", [1, 7, 50, 999])
def test_summation_closed_form(n):
    assert summation(n) * 2 == n * (n + 1)


def test_random_digits_shape():
    digits = random_digits(10, random.Random(7))
    assert len(digits) == 10
    assert all(0 <= d <= 9 for d in digits)


def test_random_digits_reproducible():
    first = random_digits(15, random.Random(42))
    assert len(first) == 15
    assert all(0 <= d <= 9 for d in first)
    second = random_digits(15, random.Random(42))
    assert second == first


def test_random_digits_default_count():
    assert len(random_digits()) == 10


def test_random_digits_negative_count():
    with pytest.raises(ValueError):
        random_digits(-1)


def test_main_sumatoria_argument(capsys):
    assert main(["sumatoria", "4"]) == 0
    assert capsys.readouterr().out == f"El resultado es: {summation(4)}\n"


def test_main_sumatoria_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("6\n"))
    assert main(["sumatoria"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Ingresa un valor para n: ")
    assert out.endswith(f"El resultado es: {summation(6)}\n")


def test_main_sumatoria_rejects_garbage(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main(["sumatoria"]) == 1
    assert "Entrada inválida" in capsys.readouterr().err


def test_main_arreglos_prints_two_rows(capsys):
    assert main(["arreglos", "--seed", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    for line in lines:
        assert line.endswith("\t")
        fields = line.split("\t")[:-1]
        assert len(fields) == 10
        assert all(field.isdigit() and len(field) == 1 for field in fields)


def test_main_arreglos_seed_is_reproducible(capsys):
    main(["arreglos", "--seed", "11"])
    first = capsys.readouterr().out
    main(["arreglos", "--seed", "11"])
    assert capsys.readouterr().out == first