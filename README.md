# aulaestructuras

Small, self-contained examples of classic data structures and algorithms.
Each module can be used as a library and also run as a console program.
The console programs print their messages in Spanish.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `aulaestructuras.search` | `linear_search` and `fibonacci_search`; both return the index found or `-1` |
| `aulaestructuras.hashing` | `hash_position(n, size)` = `(2n + 3) mod size`, and a fixed-size `HashTable` whose `insert` raises `ValueError` on a collision |
| `aulaestructuras.basics` | `summation(n)` of 1..n (0 when n < 1) and `random_digits(count, rng)` |
| `aulaestructuras.forms` | `read_profile`/`format_profile` for a `Profile`, `read_people`/`format_people` for a list of `Person` records |
| `aulaestructuras.csvgen` | `load_cities`, `generate_rows` and `write_csv` for a random seismic-risk CSV |
| `aulaestructuras.linked_list` | a singly linked `LinkedList` with `append`, `remove` and `render` |
| `aulaestructuras.stack` | a `Stack` with `push`, `pop`, `peek`, `is_empty`, `render` and `EmptyStackError` |
| `aulaestructuras.linked_queue` | a `Queue` with `enqueue`, `dequeue`, `peek`, `is_empty`, `render` and `EmptyQueueError` |

## Library use

```python
from aulaestructuras.search import linear_search, fibonacci_search
from aulaestructuras.basics import summation
from aulaestructuras.stack import Stack, EmptyStackError
from aulaestructuras.linked_queue import Queue
from aulaestructuras.linked_list import LinkedList

data = [10, 22, 35, 40, 45, 50, 80, 90, 100, 120]
linear_search(data, 35)      # 2
fibonacci_search(data, 35)   # 2
linear_search(data, 36)      # -1

summation(10)                # 55

stack = Stack()
stack.push(10)
stack.push(20)
stack.pop()                  # 20
stack.render()               # '10 -> NULL'

queue = Queue()
queue.enqueue(100)
queue.enqueue(200)
queue.dequeue()              # 100

numbers = LinkedList([5, 15, 22, 30])
numbers.remove(22)           # True
list(numbers)                # [5, 15, 30]
numbers.render()             # '5 -> 15 -> 30 -> NULL'
```

`pop` and `peek` on an empty `Stack` raise `EmptyStackError`; `dequeue` and
`peek` on an empty `Queue` raise `EmptyQueueError`. Both are subclasses of
`IndexError`. Iterating a `Stack` runs from the top down; iterating a `Queue`
runs from the front to the rear.

`fibonacci_search` expects a sorted sequence. `HashTable` does not resolve
collisions: a value whose slot is taken is rejected, and `render()` lists
empty slots as `-1`.

`csvgen.load_cities(path, limit=100)` reads one city per line and stops
(logging a warning) once `limit` cities are read. `write_csv` writes the header
`city_name,seismic_level,risk_percent` followed by one row per record: a random
city, a level from 1 to 5, and a risk between 10 and 100 with two decimals;
roughly one row in ten leaves the risk empty. Pass a `random.Random` to get
reproducible output.

## Console programs

| Command | Usage |
| --- | --- |
| `aula-search` | `aula-search [KEY] [--method fibonacci\|linear]` – search the sample array `10, 22, ..., 120` |
| `aula-hashing` | `aula-hashing [NUMBERS ...] [--size N]` – insert numbers (default: a sample list) into a table of 9 slots, report collisions and print the table |
| `aula-basics` | `aula-basics sumatoria [N]` – sum 1..N, asking for N if it is not given; `aula-basics arreglos [--seed S]` – print two rows of ten random digits |
| `aula-forms` | `aula-forms ficha` – ask for name, surname, RUT, phone and age; `aula-forms fichas [--count N]` – ask for the name and RUT of N people (default 10) |
| `aula-csvgen` | `aula-csvgen [--cities cities.txt] [--output input.csv] [--count 1000] [--seed S]` |
| `aula-linked-list` | `aula-linked-list [crear\|recorrido\|agregar\|insertar\|eliminar\|recorrer]` (default `eliminar`) |
| `aula-stack` | `aula-stack [pila\|crear\|insertar\|eliminar]` (default `pila`) |
| `aula-queue` | `aula-queue [cola\|crear\|insertar\|eliminar]` (default `cola`) |

`aula-forms` and `aula-basics sumatoria` read from standard input; the others
print a short demonstration of their data structure or algorithm.