import itertools
import random
import time

import pytest

from src.dijkstra.alg import dijkstra
from src.dijkstra.exceptions import (
    InvalidAirportError,
    NegativeLegCostError,
    SearchTimeoutError,
)
from src.dijkstra.reconstruction import reconstruct_path


# -------------------------
# Fixtures
# -------------------------

@pytest.fixture
def run_dijkstra():
    def _run(edges, origin, destination, nodes=(), timeout=None):
        """edges: list of (from, to, cost); adjacency keeps list order."""
        adjacency = {node: [] for node in nodes}
        weights = {}
        for src, dst, cost in edges:
            adjacency.setdefault(src, []).append(dst)
            adjacency.setdefault(dst, [])
            weights[(src, dst)] = cost
        return dijkstra(
            adjacency,
            leg_cost=lambda a, b: weights[(a, b)],
            origin=origin,
            destination=destination,
            timeout=timeout,
        )

    return _run


def brute_force_min_cost(edges, origin, destination):
    """Cheapest simple path by exhaustive DFS, or None if unreachable."""
    adjacency = {}
    for src, dst, cost in edges:
        adjacency.setdefault(src, []).append((dst, cost))

    best = None

    def visit(node, cost, seen):
        nonlocal best
        if node == destination:
            best = cost if best is None else min(best, cost)
            return
        for nxt, leg in adjacency.get(node, ()):
            if nxt not in seen:
                visit(nxt, cost + leg, seen | {nxt})

    visit(origin, 0.0, {origin})
    return best


# -------------------------
# Tests
# -------------------------

def test_direct_edge(run_dijkstra):
    label = run_dijkstra([("A", "B", 5.0)], "A", "B")

    assert label is not None
    assert reconstruct_path(label) == ["A", "B"]
    assert label.cost == 5.0


def test_cheaper_two_hop_beats_direct(run_dijkstra):
    edges = [("A", "C", 10.0), ("A", "B", 3.0), ("B", "C", 3.0)]

    label = run_dijkstra(edges, "A", "C")

    assert reconstruct_path(label) == ["A", "B", "C"]
    assert label.cost == 6.0


def test_origin_equals_destination(run_dijkstra):
    label = run_dijkstra([("A", "B", 1.0)], "A", "A")

    assert reconstruct_path(label) == ["A"]
    assert label.cost == 0.0
    assert label.hops == 0


def test_unreachable_destination_returns_none(run_dijkstra):
    edges = [("A", "B", 1.0), ("C", "A", 1.0)]

    assert run_dijkstra(edges, "A", "C") is None


def test_isolated_destination_returns_none(run_dijkstra):
    assert run_dijkstra([("A", "B", 1.0)], "A", "Z", nodes=("Z",)) is None


def test_cycles_do_not_loop(run_dijkstra):
    edges = [("A", "B", 1.0), ("B", "A", 1.0), ("B", "C", 1.0)]

    label = run_dijkstra(edges, "A", "C")

    assert reconstruct_path(label) == ["A", "B", "C"]


@pytest.mark.parametrize(
    "first,second,expected",
    [
        ("B", "C", ["A", "B", "D"]),
        ("C", "B", ["A", "C", "D"]),
    ],
)
def test_equal_cost_tie_keeps_first_discovered(run_dijkstra, first, second, expected):
    edges = [
        ("A", first, 1.0),
        ("A", second, 1.0),
        ("B", "D", 1.0),
        ("C", "D", 1.0),
    ]

    label = run_dijkstra(edges, "A", "D")

    assert reconstruct_path(label) == expected
    assert label.cost == 2.0


def test_duplicate_edges_are_harmless(run_dijkstra):
    edges = [("A", "B", 2.0), ("A", "B", 2.0)]

    label = run_dijkstra(edges, "A", "B")

    assert reconstruct_path(label) == ["A", "B"]
    assert label.cost == 2.0


def test_zero_cost_edges(run_dijkstra):
    edges = [("A", "B", 0.0), ("B", "C", 0.0), ("A", "C", 1.0)]

    label = run_dijkstra(edges, "A", "C")

    assert label.cost == 0.0


def test_unknown_origin_raises(run_dijkstra):
    with pytest.raises(InvalidAirportError, match="origin"):
        run_dijkstra([("A", "B", 1.0)], "X", "B")


def test_unknown_destination_raises(run_dijkstra):
    with pytest.raises(InvalidAirportError) as exc_info:
        run_dijkstra([("A", "B", 1.0)], "A", "X")

    assert exc_info.value.airport == "X"


def test_negative_leg_cost_raises(run_dijkstra):
    with pytest.raises(NegativeLegCostError):
        run_dijkstra([("A", "B", -1.0)], "A", "B")


def test_timeout_raises():
    adjacency = {"A": ["B"], "B": ["C"], "C": ["D"], "D": []}

    def slow_cost(a, b):
        time.sleep(0.01)
        return 1.0

    with pytest.raises(SearchTimeoutError) as exc_info:
        dijkstra(adjacency, slow_cost, "A", "D", timeout=1e-6)

    assert exc_info.value.timeout == 1e-6


def test_no_timeout_by_default(run_dijkstra):
    edges = [(str(i), str(i + 1), 1.0) for i in range(50)]

    label = run_dijkstra(edges, "0", "50")

    assert label.cost == 50.0
    assert label.hops == 50


def test_leg_cost_called_with_codes():
    calls = []

    def cost(a, b):
        calls.append((a, b))
        return 1.0

    dijkstra({"A": ["B"], "B": []}, cost, "A", "B")

    assert calls == [("A", "B")]


@pytest.mark.parametrize("seed", range(10))
def test_matches_brute_force_on_random_graphs(run_dijkstra, seed):
    rng = random.Random(seed)
    nodes = [f"N{i}" for i in range(7)]
    edges = [
        (a, b, round(rng.uniform(0.0, 20.0), 3))
        for a, b in itertools.permutations(nodes, 2)
        if rng.random() < 0.35
    ]

    for origin, destination in itertools.permutations(nodes, 2):
        expected = brute_force_min_cost(edges, origin, destination)
        label = run_dijkstra(edges, origin, destination, nodes=nodes)

        if expected is None:
            assert label is None
        else:
            assert label is not None
            assert label.cost == pytest.approx(expected)
            path = reconstruct_path(label)
            assert path[0] == origin
            assert path[-1] == destination
            assert len(set(path)) == len(path)
