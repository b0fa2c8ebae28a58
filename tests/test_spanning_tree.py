"""Minimum spanning tree and forest (Kruskal)."""

from __future__ import annotations

import itertools
import random

import networkx as nx
import pytest

from bordergraph import DisconnectedGraphError, Graph, SpanningTree


def _brute_force_weight(nodes, rows) -> float:
    """Lightest subset of len(nodes) - 1 edges that connects every node."""
    best = None
    for subset in itertools.combinations(rows, len(nodes) - 1):
        check = nx.Graph()
        check.add_nodes_from(nodes)
        check.add_edges_from((a, b) for a, b, _ in subset)
        if nx.is_connected(check):
            weight = sum(d for _, _, d in subset)
            best = weight if best is None else min(best, weight)
    return best


def _random_connected_rows(seed: int, size: int = 6, extra: int = 5) -> list:
    rng = random.Random(seed)
    nodes = [f"N{i}" for i in range(size)]
    rows = [(nodes[i], nodes[i + 1], float(rng.randint(1, 9))) for i in range(size - 1)]
    while len(rows) < size - 1 + extra:
        a, b = rng.sample(nodes, 2)
        if not any({a, b} == {x, y} for x, y, _ in rows):
            rows.append((a, b, float(rng.randint(1, 9))))
    return rows


def test_triangle(triangle) -> None:
    tree = triangle.minimum_spanning_tree()
    assert isinstance(tree, SpanningTree)
    assert tree.edges == (("B", "C", 5.0), ("A", "C", 8.0))
    assert tree.total_weight == 13.0
    assert tree.to_dict() == {"edges": [("B", "C", 5.0), ("A", "C", 8.0)], "total_weight": 13.0}


def test_europe(europe) -> None:
    tree = europe.minimum_spanning_tree()
    assert tree.nb_edges == len(europe.nodes) - 1
    assert tree.total_weight == 435.0 + 503.0 + 523.0 + 685.0 + 690.0 + 1053.0
    assert ("France", "Spain", 1053.0) in tree.edges
    assert tree.nodes == europe.nodes


@pytest.mark.parametrize("seed", range(8))
def test_matches_brute_force(seed) -> None:
    rows = _random_connected_rows(seed)
    graph = Graph().create_edgelist(rows)
    tree = graph.minimum_spanning_tree()

    assert tree.nb_edges == len(graph.nodes) - 1
    assert tree.total_weight == pytest.approx(_brute_force_weight(graph.nodes, rows))

    oracle = nx.Graph()
    oracle.add_weighted_edges_from(rows)
    expected = nx.minimum_spanning_tree(oracle).size(weight="weight")
    assert tree.total_weight == pytest.approx(expected)

    # The selected edges form a tree over every node
    check = nx.Graph(list((a, b) for a, b, _ in tree.edges))
    assert nx.is_tree(check)
    assert set(check.nodes) == set(graph.nodes)


def test_ties_follow_input_order() -> None:
    square = [("A", "B", 1.0), ("B", "D", 1.0), ("A", "C", 1.0), ("C", "D", 1.0)]
    first = Graph().create_edgelist(square).minimum_spanning_tree()
    assert first.edges == (("A", "B", 1.0), ("B", "D", 1.0), ("A", "C", 1.0))

    rotated = square[3:] + square[:3]
    second = Graph().create_edgelist(rotated).minimum_spanning_tree()
    assert second.edges == (("C", "D", 1.0), ("A", "B", 1.0), ("B", "D", 1.0))
    assert first.total_weight == second.total_weight


def test_disconnected(disconnected) -> None:
    with pytest.raises(DisconnectedGraphError) as excinfo:
        disconnected.minimum_spanning_tree()
    assert excinfo.value.components == 2
    assert isinstance(excinfo.value, RuntimeError)


def test_forest(disconnected) -> None:
    forest = disconnected.minimum_spanning_forest()
    assert [tree.nodes for tree in forest] == [("A", "B", "C"), ("X", "Y")]
    assert [tree.total_weight for tree in forest] == [13.0, 12.0]
    assert forest[1].edges == (("X", "Y", 12.0),)


def test_forest_of_connected_graph(europe) -> None:
    forest = europe.minimum_spanning_forest()
    assert forest == [europe.minimum_spanning_tree()]


def test_tree_table(triangle) -> None:
    table = triangle.minimum_spanning_tree().to_polars()
    assert table.rows() == [("B", "C", 5.0), ("A", "C", 8.0)]


def test_summary(europe) -> None:
    assert europe.summary() == {
        "nodes": 7,
        "edges": 10,
        "components": 1,
        "total_distance": 7391.0,
        "duplicates": 2,
        "conflicts": 0,
    }


def test_summary_counts_conflicts() -> None:
    with pytest.warns(UserWarning):
        graph = Graph().create_edgelist([("X", "Y", 12.0), ("Y", "X", 14.0), ("Y", "Z", 1.0)])
    summary = graph.summary()
    assert summary["conflicts"] == 1
    assert summary["components"] == 1
    assert summary["total_distance"] == 13.0


def test_logging(capsys) -> None:
    graph = Graph({"main_print": True}).create_edgelist([("A", "B", 10.0), ("B", "C", 5.0), ("A", "C", 8.0)])
    graph.minimum_spanning_tree()
    out = capsys.readouterr().out
    assert "3 nodes and 3 edges" in out
    assert "Minimum spanning tree: 2 edges, total distance 13.0." in out
