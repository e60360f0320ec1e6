# graphkernels

This package provides two small numerical kernels. Each one has a command that checks it or benchmarks it.

- **Cholesky factorisation** (`graphkernels.cholesky`) works in place on a dense, square
  matrix stored as a list of rows. It comes in two versions:
  - a sequential version, `cholesky_in_place`;
  - a version that spreads the independent updates of each step across a thread pool, `cholesky_tasks`.
- **Triangle counting** (`graphkernels.triangles`) works on an undirected graph whose
  adjacency matrix is stored in CSR (compressed sparse row) form. It also comes in two versions:
  - a sequential version, `count_triangles`;
  - a version that runs one task per vertex on a thread pool, `count_triangles_parallel`.
- **Timing helpers** (`graphkernels.timing`) are built on the monotonic
  nanosecond performance counter.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `graphkernels-cholesky`

This command builds a random lower-triangular matrix `L` with entries from 1 to 10 and
forms `L @ L.T`. It factorises that product in place, then prints `Yes` if the lower
triangle of the result matches `L` within `1e-7`. Otherwise it prints `No`.

```
graphkernels-cholesky
graphkernels-cholesky --size 20 --seed 3 --workers 4
```

Options:

- `--size N` sets the matrix dimension. The default is 10.
- `--seed S` sets the random seed. The default is 1.
- `--workers W` switches to the task-parallel version, using a pool of `W` threads.

### `graphkernels-triangles`

This command reads a CSR graph from standard input and counts its triangles `RUNS` times.

The input is a list of whitespace-separated integers:

- the `vertices + 1` row offsets come first;
- the column indices follow them.

The command prints the count after each run. At the end it prints the average time per
run in nanoseconds.

```
cat graph_IA.txt graph_JA.txt | graphkernels-triangles 100 --vertices 6474
cat graph_IA.txt graph_JA.txt | graphkernels-triangles 10 --vertices 6474 --parallel --workers 8
```

Options:

- `RUNS` is the number of timed runs. It must be at least 1.
- `--vertices N` is the number of vertices. It is required.
- `--entries M` is the number of column indices to read. If it is not given, the last
  row offset is used.
- `--parallel` counts with the thread-pool version.
- `--workers W` sets the size of the thread pool.

The command exits with an error if the input is malformed or ends too early.

## Library use

### Triangle counting

```python
from graphkernels.triangles import CsrGraph, count_triangles, count_triangles_parallel

graph = CsrGraph.from_edges(4, [(0, 1), (1, 2), (0, 2), (2, 3)])
print(count_triangles(graph))                 # 1
print(count_triangles_parallel(graph, 4))     # 1
print(list(graph.neighbours(2)))              # [0, 1, 3]
print(graph.num_vertices)                     # 4
```

`CsrGraph(row_offsets, columns)` checks its arrays when it is built:

- the row offsets must be non-negative and non-decreasing;
- the row offsets must stay within the column array;
- every column index must be a valid vertex.

If a check fails, it raises `ValueError`.

`CsrGraph.from_edges` builds a symmetric graph with sorted neighbour lists. It rejects
self-loops and out-of-range edges.

`read_csr(stream, num_vertices, num_entries=None)` reads the same text format that the
command reads.

The counting routines expect neighbour lists with no duplicate entries. `from_edges`
always produces lists of that kind.

### Cholesky factorisation

```python
import random
from graphkernels.cholesky import (
    random_lower_triangular, multiply_by_transpose, cholesky_in_place, lower_matches,
)

lower = random_lower_triangular(10, random.Random(1))
product = multiply_by_transpose(lower)
cholesky_in_place(product)
print(lower_matches(lower, product, 1e-7))
```

Both factorisation functions overwrite the lower triangle of the matrix they are given
with `L`. They raise `ValueError` if the matrix is not square, or if a pivot is not
positive.

### Timing

`graphkernels.timing.CycleTimer` is a context manager that records the counter on entry
and on exit. Read the result with `elapsed(unit)`:

- `unit` is a member of `graphkernels.timing.Unit` (`NANO_SEC`, `MICRO_SEC`,
  `MILLI_SEC`, `SEC`) or a positive number of ticks.
- The default unit is nanoseconds.

`read_counter()` returns the raw counter value in nanoseconds. `counter_works()` reports
whether two consecutive reads show the counter moving forward.

## What it does not do

- The timers measure wall-clock nanoseconds, not CPU cycles.
- The parallel versions use threads, so under the global interpreter lock they show how
  the work splits into tasks rather than giving a speed-up.