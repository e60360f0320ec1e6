import io
import random
from itertools import combinations

import pytest

from graphkernels.triangles import (
    CsrGraph,
    count_triangles,
    count_triangles_parallel,
    main,
    read_csr,
)


def _complete(n, offset=0):
    return [(offset + a, offset + b) for a, b in combinations(range(n), 2)]


def _random_graph(seed, n=30, p=0.3):
    rng = random.Random(seed)
    edges = [(a, b) for a, b in combinations(range(n), 2) if rng.random() < p]
    return n, edges


def _to_text(graph):
    return (
        " ".join(map(str, graph.row_offsets))
        + "\n"
        + " ".join(map(str, graph.columns))
        + "\n"
    )


def test_single_triangle():
    assert count_triangles(CsrGraph.from_edges(3, _complete(3))) == 1


def test_complete_graph_on_four():
    assert count_triangles(CsrGraph.from_edges(4, _complete(4))) == 4


def test_path_has_no_triangles():
    graph = CsrGraph.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 4)])
    assert count_triangles(graph) == 0


def test_disjoint_union_adds_counts():
    k4 = count_triangles(CsrGraph.from_edges(4, _complete(4)))
    k3 = count_triangles(CsrGraph.from_edges(3, _complete(3)))
    union = CsrGraph.from_edges(7, _complete(4) + _complete(3, offset=4))
    assert count_triangles(union) == k4 + k3


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_relabelling_keeps_count(seed):
    n, edges = _random_graph(seed)
    reversed_edges = [(n - 1 - a, n - 1 - b) for a, b in edges]
    assert count_triangles(CsrGraph.from_edges(n, edges)) == count_triangles(
        CsrGraph.from_edges(n, reversed_edges)
    )


@pytest.mark.parametrize("workers", [1, 3, 8])
def test_parallel_matches_serial(workers):
    n, edges = _random_graph(11, n=40)
    graph = CsrGraph.from_edges(n, edges)
    assert count_triangles_parallel(graph, workers) == count_triangles(graph)


def test_adding_edge_never_decreases_count():
    n, edges = _random_graph(5)
    before = count_triangles(CsrGraph.from_edges(n, edges))
    missing = next(e for e in combinations(range(n), 2) if e not in set(edges))
    after = count_triangles(CsrGraph.from_edges(n, edges + [missing]))
    assert after >= before


def test_neighbours_sorted_and_symmetric():
    graph = CsrGraph.from_edges(4, [(2, 0), (0, 3), (1, 2)])
    assert graph.neighbours(0) == (2, 3)
    assert graph.neighbours(2) == (0, 1)
    with pytest.raises(IndexError):
        graph.neighbours(4)


def test_from_edges_rejects_self_loop_and_range():
    with pytest.raises(ValueError):
        CsrGraph.from_edges(3, [(1, 1)])
    with pytest.raises(ValueError):
        CsrGraph.from_edges(3, [(0, 3)])


def test_invalid_offsets_rejected():
    with pytest.raises(ValueError):
        CsrGraph((0, 2, 1), (1, 0))
    with pytest.raises(ValueError):
        CsrGraph((0, 5), (0,))


@pytest.mark.parametrize("explicit", [True, False])
def test_read_csr_round_trip(explicit):
    graph = CsrGraph.from_edges(*_random_graph(2, n=12))
    entries = len(graph.columns) if explicit else None
    assert read_csr(io.StringIO(_to_text(graph)), graph.num_vertices, entries) == graph


def test_read_csr_short_input():
    with pytest.raises(ValueError):
        read_csr(io.StringIO("0 1"), 3)
    with pytest.raises(ValueError):
        read_csr(io.StringIO("0 2 4\n1"), 2, 4)
    with pytest.raises(ValueError):
        read_csr(io.StringIO("0 x 2\n1 0"), 2)


@pytest.mark.parametrize("extra", [[], ["--parallel", "--workers", "2"]])
def test_main_prints_counts(monkeypatch, capsys, extra):
    graph = CsrGraph.from_edges(*_random_graph(4, n=15))
    monkeypatch.setattr("sys.stdin", io.StringIO(_to_text(graph)))
    argv = ["3", "--vertices", str(graph.num_vertices), "--entries", str(len(graph.columns))]
    assert main(argv + extra) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[:3] == [str(count_triangles(graph))] * 3
    assert lines[3].startswith("Average Triangle Count time:")