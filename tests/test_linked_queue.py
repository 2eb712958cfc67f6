import pytest

from aulaestructuras.linked_queue import EmptyQueueError, Queue, main


def test_dequeue_returns_values_in_insertion_order():
    queue = Queue()
    for value in (10, 20, 30):
        queue.enqueue(value)
    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [10, 20, 30]
    assert queue.is_empty()


def test_initial_values_first_is_front():
    queue = Queue([1, 2, 3])
    assert queue.peek() == 1
    assert list(queue) == [1, 2, 3]


def test_peek_does_not_remove():
    queue = Queue([7, 8])
    assert queue.peek() == 7
    assert len(queue) == 2


def test_dequeue_empty_raises():
    with pytest.raises(EmptyQueueError, match="No se puede hacer dequeue"):
        Queue().dequeue()


def test_peek_empty_raises_index_error():
    with pytest.raises(IndexError):
        Queue().peek()


def test_queue_reusable_after_emptying():
    queue = Queue([1])
    assert queue.dequeue() == 1
    queue.enqueue(2)
    assert queue.peek() == 2
    assert len(queue) == 1


def test_render_from_front():
    assert Queue([10, 20, 30]).render() == "10 -> 20 -> 30 -> NULL"


def test_render_empty():
    assert Queue().render() == "NULL"


def test_main_full_demo(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "Cola: 10 -> 20 -> 30 -> NULL"
    assert lines[2] == "Elemento en el frente de la cola: 10"
    assert lines[3] == "Eliminando el elemento del frente: 10"
    assert lines[5] == "Cola: 20 -> 30 -> NULL"
    assert lines[8] == "Cola: 20 -> 30 -> 40 -> NULL"
    assert lines[-1] == "Cola vacía."


def test_main_create(capsys):
    assert main(["crear"]) == 0
    assert capsys.readouterr().out == "Frente de la cola: 5\n"


def test_main_enqueue(capsys):
    assert main(["insertar"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Frente de la cola: 100",
        "Frente de la cola: 200",
        "Frente de la cola: 300",
    ]


def test_main_dequeue(capsys):
    assert main(["eliminar"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Estado inicial de la cola:",
        "10 -> 20 -> 30 -> NULL",
        "Eliminando nodos de la cola...",
        "Cola vacía.",
    ]