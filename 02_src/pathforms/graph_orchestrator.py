"""Deterministic orchestrator for Cayley graph mutations."""

from typing import Any, Dict

from .graph_model import CayleyGraph, GraphEdge, GraphNode, coordinate_id, edge_id
from .words import Symbol


class GraphOrchestrator:
    """Owns identifiers and get-or-create updates of the graph under construction."""

    def __init__(self, max_depth: int, initial_step: float) -> None:
        self.graph = CayleyGraph(max_depth=max_depth, initial_step=initial_step)

    def add_or_get_node(
        self,
        x: float,
        y: float,
        depth: int,
        step: float,
        parent_id: str | None = None,
    ) -> GraphNode:
        node_id = coordinate_id(x, y)
        existing = self.graph.nodes.get(node_id)
        if existing is not None:
            return existing

        node = GraphNode(id=node_id, x=x, y=y, depth=depth, step=step, parent_id=parent_id)
        self.graph.nodes[node_id] = node
        return node

    def add_edge(self, source_id: str, target_id: str, symbol: Symbol) -> GraphEdge:
        if source_id not in self.graph.nodes:
            raise ValueError(f"Unknown source node: {source_id}")
        if target_id not in self.graph.nodes:
            raise ValueError(f"Unknown target node: {target_id}")

        signature = edge_id(source_id, target_id)
        existing = self.graph.edges.get(signature)
        if existing is not None:
            if existing.symbol is not symbol:
                raise ValueError(
                    f"Edge {signature} already labelled {existing.symbol.token}, not {symbol.token}"
                )
            return existing

        edge = GraphEdge(id=signature, source=source_id, target=target_id, symbol=symbol)
        self.graph.edges[signature] = edge
        return edge

    def to_json(self) -> Dict[str, Any]:
        return self.graph.to_json()
