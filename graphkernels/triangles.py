"""Triangle counting on undirected graphs stored in compressed sparse row form."""

from __future__ import annotations

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from functools import partial
from itertools import accumulate
from typing import Iterable, Sequence, TextIO

from graphkernels.timing import CycleTimer


@dataclass(frozen=True)
class CsrGraph:
    """Adjacency structure: the neighbours of v are columns[row_offsets[v]:row_offsets[v+1]]."""

    row_offsets: tuple[int, ...]
    columns: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "row_offsets", tuple(self.row_offsets))
        object.__setattr__(self, "columns", tuple(self.columns))
        offsets = self.row_offsets
        if not offsets:
            raise ValueError("row offsets must hold at least one entry")
        if offsets[0] < 0 or any(b < a for a, b in zip(offsets, offsets[1:])):
            raise ValueError("row offsets must be non-negative and non-decreasing")
        if offsets[-1] > len(self.columns):
            raise ValueError("row offsets reach past the column array")
        n = self.num_vertices
        if any(not 0 <= c < n for c in self.columns):
            raise ValueError("column index out of range")

    @property
    def num_vertices(self) -> int:
        return len(self.row_offsets) - 1

    def neighbours(self, vertex: int) -> tuple[int, ...]:
        """Return the neighbour list of a vertex."""
        if not 0 <= vertex < self.num_vertices:
            raise IndexError(f"vertex {vertex} out of range")
        return self.columns[self.row_offsets[vertex] : self.row_offsets[vertex + 1]]

    @classmethod
    def from_edges(cls, num_vertices: int, edges: Iterable[tuple[int, int]]) -> "CsrGraph":
        """Build a symmetric graph with sorted neighbour lists from undirected edges."""
        if num_vertices < 0:
            raise ValueError("vertex count must be non-negative")
        adjacency: list[set[int]] = [set() for _ in range(num_vertices)]
        for u, v in edges:
            if not (0 <= u < num_vertices and 0 <= v < num_vertices):
                raise ValueError(f"edge ({u}, {v}) out of range")
            if u == v:
                raise ValueError(f"self-loop at vertex {u}")
            adjacency[u].add(v)
            adjacency[v].add(u)
        rows = [sorted(neigh) for neigh in adjacency]
        offsets = (0, *accumulate(len(row) for row in rows))
        return cls(offsets, tuple(c for row in rows for c in row))


def read_csr(stream: TextIO, num_vertices: int, num_entries: int | None = None) -> CsrGraph:
    """Read num_vertices + 1 row offsets followed by the column indices."""
    tokens = stream.read().split()
    if len(tokens) < num_vertices + 1:
        raise ValueError("input ends before all row offsets were read")
    try:
        offsets = [int(t) for t in tokens[: num_vertices + 1]]
        if num_entries is None:
            num_entries = offsets[-1]
        column_tokens = tokens[num_vertices + 1 : num_vertices + 1 + num_entries]
        if len(column_tokens) < num_entries:
            raise ValueError("input ends before all column indices were read")
        columns = [int(t) for t in column_tokens]
    except ValueError as exc:
        raise ValueError(f"malformed CSR input: {exc}") from exc
    return CsrGraph(offsets, columns)


def _triangles_through(graph: CsrGraph, vertex: int) -> int:
    """Count triangles x < vertex < z that have vertex as their middle corner."""
    row = graph.neighbours(vertex)
    smaller = {u for u in row if u < vertex}
    if not smaller:
        return 0
    return sum(len(smaller.intersection(graph.neighbours(z))) for z in row if z > vertex)


def count_triangles(graph: CsrGraph) -> int:
    """Return the number of triangles in an undirected graph."""
    return sum(_triangles_through(graph, v) for v in range(1, graph.num_vertices - 1))


def count_triangles_parallel(graph: CsrGraph, workers: int | None = None) -> int:
    """Return the number of triangles, one task per middle vertex on a thread pool."""
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return sum(
            pool.map(partial(_triangles_through, graph), range(1, graph.num_vertices - 1))
        )


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Count triangles of a CSR graph read from standard input."
    )
    parser.add_argument("runs", type=_positive_int, help="number of timed runs")
    parser.add_argument("--vertices", type=int, required=True, help="number of vertices")
    parser.add_argument("--entries", type=int, default=None, help="number of column entries")
    parser.add_argument("--parallel", action="store_true", help="count with a thread pool")
    parser.add_argument("--workers", type=int, default=None, help="thread pool size")
    args = parser.parse_args(argv)

    try:
        graph = read_csr(sys.stdin, args.vertices, args.entries)
    except ValueError as exc:
        parser.error(str(exc))

    total = 0.0
    for _ in range(args.runs):
        with CycleTimer() as timer:
            if args.parallel:
                count = count_triangles_parallel(graph, args.workers)
            else:
                count = count_triangles(graph)
        print(count)
        total += timer.elapsed()
    print(f"Average Triangle Count time: {total / args.runs:f} ns")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())