import pytest

from pathforms.cayley_builder import build_cayley_graph
from pathforms.exceptions import UnknownNodeError
from pathforms.graph_orchestrator import GraphOrchestrator
from pathforms.path_resolver import parse, resolve_shortest_path, shortest_path
from pathforms.words import Symbol, group_inverse, parse_word


def test_parse_reduced_word(graph):
    walk = parse(parse_word("ab"), graph)
    assert walk.complete
    assert walk.node_ids == ["0,0", "0,-50", "25,-50"]
    assert walk.edge_ids == ["0,0->0,-50", "0,-50->25,-50"]


def test_parse_empty_word_stays_at_origin(graph):
    walk = parse((), graph)
    assert walk.complete
    assert walk.node_ids == ["0,0"]
    assert walk.edge_ids == []


def test_parse_walks_back_along_the_arrival_edge(graph):
    walk = parse(parse_word("abb-"), graph)
    assert walk.complete
    assert walk.node_ids == ["0,0", "0,-50", "25,-50", "0,-50"]
    assert walk.edge_ids[1] == walk.edge_ids[2] == "0,-50->25,-50"


def test_parse_uses_the_current_node_step(graph):
    walk = parse(parse_word("aab"), graph)
    assert walk.node_ids == ["0,0", "0,-50", "0,-75", "12.5,-75"]


def test_parse_stops_at_the_tree_boundary(graph):
    word = parse_word("aaaaaab")
    walk = parse(word, graph)
    assert not walk.complete
    assert len(walk.node_ids) == 6
    assert len(walk.edge_ids) == 5


def test_shortest_path_to_every_node_parses_to_it(graph):
    for node in graph.nodes.values():
        word = shortest_path(graph.origin_id, node.id, graph)
        assert word is not None
        assert len(word) == node.depth
        walk = parse(word, graph)
        assert walk.complete
        assert walk.end_id == node.id


def test_shortest_path_between_inner_nodes(graph):
    word = shortest_path("0,-50", "50,0", graph)
    assert word == (Symbol.A_INV, Symbol.B)


def test_resolve_shortest_path_returns_walk(graph):
    walk = resolve_shortest_path("25,-50", graph)
    assert walk.word == parse_word("ab")
    assert walk.node_ids[-1] == "25,-50"


def test_shortest_path_unknown_node(graph):
    with pytest.raises(UnknownNodeError):
        shortest_path(graph.origin_id, "1,1", graph)


def test_shortest_path_unreachable_returns_none():
    orchestrator = GraphOrchestrator(max_depth=1, initial_step=4)
    orchestrator.add_or_get_node(0, 0, depth=0, step=4)
    orchestrator.add_or_get_node(4, 0, depth=1, step=2)
    assert shortest_path("0,0", "4,0", orchestrator.graph) is None
    assert resolve_shortest_path("4,0", orchestrator.graph) is None


@pytest.mark.parametrize("initial_step", [50, 0.1, 10 / 3, 7.3])
def test_every_node_walks_out_and_back(initial_step):
    graph = build_cayley_graph(max_depth=5, initial_step=initial_step)
    stranded = []
    for node in graph.nodes.values():
        word = shortest_path(graph.origin_id, node.id, graph)
        walk = parse(word + group_inverse(word), graph)
        if not walk.complete or walk.end_id != graph.origin_id:
            stranded.append(node.id)
    assert stranded == []


def test_backward_move_follows_recorded_parent():
    graph = build_cayley_graph(max_depth=2, initial_step=7.3)
    child = graph.nodes[parse(parse_word("ab"), graph).end_id]
    assert child.parent_id == parse(parse_word("a"), graph).end_id
    walk = parse(parse_word("abb-a-"), graph)
    assert walk.complete
    assert walk.node_ids[-1] == graph.origin_id
