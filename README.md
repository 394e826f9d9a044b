# practicas

Classic algorithm and systems exercises, bundled as one Python library with no
third-party dependencies.

## What is inside

- `practicas.maxsub` has two ways to find the maximum contiguous subsequence sum.
  `max_subsequence_sum_quadratic` tries every run and `max_subsequence_sum_linear` makes a single pass.
  Both return 0 when every sum is negative.
- `practicas.heap` has a binary min-heap, `MinHeap`, with `pop_min`, `is_empty`, `items`, `format_levels` and `len()`.
  - It also provides `heap_sort`, which sorts a list in place.
  - Building a heap with more values than its `capacity` (256000 by default) raises `HeapCapacityError`.
- `practicas.dijkstra` runs Dijkstra's algorithm from every node of an adjacency matrix.
  - `random_complete_graph` builds a random undirected complete graph with weights 1..1000.
  - `all_pairs_shortest` returns the distance matrix.
  - `format_matrix` prints one row per line.
- `practicas.cache` holds memory-access experiments:
  - `init_matrices`, `matmul` and `blocked_matmul` for plain and blocked matrix products;
  - `checksum_reset`, which sums a matrix and then zeroes it;
  - `column_sum`, which adds up a matrix in column order;
  - `gather_sum` and `fused_gather_sum`, the gather loop without and with loop fusion;
  - `cpu_times`, which gives the user and system CPU seconds of the process.
- `practicas.history` keeps a command history numbered from 1 in the class `History`.
  - It has `append`, `get`, `clear`, `format_all` and `format_first`.
  - `get` accepts a number, or text that starts with a number.
  - `get` raises `HistoryError` for a position that cannot be resolved.
- `practicas.commands` has the command names of a small shell and their help texts.
  - `command_names()` returns the names.
  - `help_text(name)` returns the text for one command.
  - `help_text()` with no argument returns the whole list.
  - An unknown name raises `KeyError`.
- `practicas.openfiles` has an open-file table, `OpenFileTable`.
  - Slots 0 to 2 hold the standard streams.
  - `add` fills the first free slot from 3 upwards and raises `TableFullError` when the table is full.
  - `remove`, `get`, `entries` and `format` are also available.
  - `parse_mode_flags` turns the words `cr ex ro wo rw ap tr` into `os.O_*` flags.
  - `mode_name` names the most significant flag that is set.

## What it does not do

- The package has no command-line programs. It does not start an interactive shell, and it does not run timing tables.
- The history, command and open-file modules are building blocks only. Nothing in the package reads commands from a terminal or executes them.
- No sorting algorithms other than `heap_sort` are included.
- No file commands (create, stat, list, delete) are included.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install .[test]
```

## Library use

```python
import os
import random

from practicas.maxsub import max_subsequence_sum_linear
from practicas.heap import MinHeap, heap_sort
from practicas.dijkstra import all_pairs_shortest, format_matrix
from practicas.cache import init_matrices, blocked_matmul, checksum_reset
from practicas.history import History
from practicas.openfiles import OpenFileTable, parse_mode_flags

print(max_subsequence_sum_linear([-9, 2, -5, -4, 6]))

values = [4, 1, 3]
heap_sort(values)            # sorts in place
print(values)

heap = MinHeap([7, 2, 5])
print(heap.pop_min(), len(heap))

graph = [
    [0, 1, 4, 7],
    [1, 0, 2, 8],
    [4, 2, 0, 3],
    [7, 8, 3, 0],
]
print(format_matrix(all_pairs_shortest(graph)))

a, b, c = init_matrices(64)
blocked_matmul(a, b, c, 16)
print(checksum_reset(c))

history = History()
history.append("hist\n")
print(history.get("1"), end="")

table = OpenFileTable()
descriptor = table.add("notes.txt", parse_mode_flags(["rw", "cr"]))
print(descriptor, table.get(descriptor))
print(table.format(), end="")
```

## Tests

```
pip install .[test]
pytest
```