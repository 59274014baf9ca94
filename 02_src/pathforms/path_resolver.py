"""Realising words as walks on the truncated tree, and geodesic search."""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from .exceptions import UnknownNodeError
from .graph_model import CayleyGraph, GraphEdge, GraphNode
from .words import Symbol, Word

logger = logging.getLogger(__name__)


@dataclass
class Walk:
    """Nodes and edges visited while reading a word from the origin.

    A walk shorter than ``len(word) + 1`` nodes means the word leaves the
    modelled region; it is not an error.
    """

    word: Word
    node_ids: List[str] = field(default_factory=list)
    edge_ids: List[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return len(self.edge_ids) == len(self.word) and len(self.node_ids) == len(self.word) + 1

    @property
    def end_id(self) -> str | None:
        return self.node_ids[-1] if self.node_ids else None


def step_from(graph: CayleyGraph, node: GraphNode, symbol: Symbol) -> Tuple[GraphNode, GraphEdge] | None:
    """Move one letter from ``node``, or return None if the move leaves the graph.

    Forward moves reach a child at ``node.step``; the inverse of the arrival
    letter returns to the parent recorded when the tree was built.
    """
    dx, dy = symbol.direction

    child = graph.node_at(node.x + dx * node.step, node.y + dy * node.step)
    if child is not None:
        edge = graph.edge_between(node.id, child.id)
        if edge is not None and edge.symbol is symbol:
            return child, edge

    if node.parent_id is not None:
        edge = graph.edge_between(node.parent_id, node.id)
        if edge is not None and edge.symbol is symbol.inverse:
            return graph.node(node.parent_id), edge

    return None


def parse(word: Iterable[Symbol], graph: CayleyGraph) -> Walk:
    walk = Walk(word=tuple(word))
    if graph.origin_id not in graph.nodes:
        return walk

    current = graph.origin
    walk.node_ids.append(current.id)
    for symbol in walk.word:
        move = step_from(graph, current, symbol)
        if move is None:
            break
        current, edge = move
        walk.node_ids.append(current.id)
        walk.edge_ids.append(edge.id)
    return walk


def shortest_path(origin_id: str, target_id: str, graph: CayleyGraph) -> Word | None:
    """Breadth-first geodesic from ``origin_id`` to ``target_id``; None if unreachable."""
    for node_id in (origin_id, target_id):
        if node_id not in graph.nodes:
            raise UnknownNodeError(node_id)

    adjacency = graph.adjacency()
    previous: Dict[str, Tuple[str, Symbol]] = {}
    visited = {origin_id}
    queue = deque([origin_id])
    found = False

    while queue:
        current = queue.popleft()
        if current == target_id:
            found = True
            break
        for neighbor_id, symbol in adjacency.get(current, []):
            if neighbor_id in visited:
                continue
            visited.add(neighbor_id)
            previous[neighbor_id] = (current, symbol)
            queue.append(neighbor_id)

    if not found:
        logger.debug("No path from %s to %s after visiting %s nodes", origin_id, target_id, len(visited))
        return None

    symbols: List[Symbol] = []
    cursor = target_id
    while cursor != origin_id:
        cursor, symbol = previous[cursor]
        symbols.append(symbol)
    symbols.reverse()
    return tuple(symbols)


def resolve_shortest_path(target_id: str, graph: CayleyGraph) -> Walk | None:
    """Geodesic from the graph origin to ``target_id`` together with its walk."""
    word = shortest_path(graph.origin_id, target_id, graph)
    if word is None:
        return None
    return parse(word, graph)
