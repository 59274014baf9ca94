from collections import Counter

import pytest

from pathforms.cayley_builder import build_cayley_graph, expected_node_count
from pathforms.graph_orchestrator import GraphOrchestrator
from pathforms.path_resolver import parse
from pathforms.words import Symbol

from conftest import reduced_words


def test_depth_five_node_count(graph):
    assert len(graph.nodes) == 1 + 4 * (3 ** 5 - 1) // 2 == 485
    assert expected_node_count(5) == 485
    assert len(graph.edges) == len(graph.nodes) - 1


def test_nodes_per_level(graph):
    per_depth = Counter(node.depth for node in graph.nodes.values())
    assert per_depth[0] == 1
    for depth in range(1, 6):
        assert per_depth[depth] == 4 * 3 ** (depth - 1)


def test_root_children_and_step_halving(graph):
    assert graph.origin.id == "0,0"
    assert graph.origin.step == 50
    expected = {"0,-50": Symbol.A, "0,50": Symbol.A_INV, "50,0": Symbol.B, "-50,0": Symbol.B_INV}
    for child_id, symbol in expected.items():
        assert graph.nodes[child_id].depth == 1
        assert graph.nodes[child_id].step == 25
        assert graph.edges[f"0,0->{child_id}"].symbol is symbol


def test_edges_follow_symbol_direction(graph):
    for edge in graph.edges.values():
        source = graph.nodes[edge.source]
        target = graph.nodes[edge.target]
        dx, dy = edge.symbol.direction
        assert (target.x - source.x, target.y - source.y) == (dx * source.step, dy * source.step)
        assert target.depth == source.depth + 1


def test_reduced_words_biject_with_nodes(graph):
    endpoints = set()
    count = 0
    for word in reduced_words(5):
        walk = parse(word, graph)
        assert walk.complete
        assert graph.nodes[walk.end_id].depth == len(word)
        endpoints.add(walk.end_id)
        count += 1
    assert count == len(graph.nodes)
    assert endpoints == set(graph.nodes)


def test_depth_zero_is_a_single_node():
    graph = build_cayley_graph(max_depth=0)
    assert list(graph.nodes) == ["0,0"]
    assert graph.edges == {}


def test_build_rejects_bad_arguments():
    with pytest.raises(ValueError):
        build_cayley_graph(max_depth=-1)
    with pytest.raises(ValueError):
        build_cayley_graph(max_depth=2, initial_step=0)


def test_orchestrator_get_or_create():
    orchestrator = GraphOrchestrator(max_depth=1, initial_step=8)
    first = orchestrator.add_or_get_node(0.0, 0.0, depth=0, step=8)
    again = orchestrator.add_or_get_node(0, 0, depth=3, step=1)
    assert again is first
    child = orchestrator.add_or_get_node(8.0, 0.0, depth=1, step=4)
    edge = orchestrator.add_edge(first.id, child.id, Symbol.B)
    assert orchestrator.add_edge(first.id, child.id, Symbol.B) is edge
    with pytest.raises(ValueError):
        orchestrator.add_edge(first.id, child.id, Symbol.A)
    with pytest.raises(ValueError):
        orchestrator.add_edge(first.id, "99,99", Symbol.B)
    assert len(orchestrator.to_json()["edges"]) == 1
