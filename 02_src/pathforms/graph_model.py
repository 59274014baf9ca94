"""Truncated Cayley tree primitives."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .exceptions import UnknownNodeError
from .words import Symbol

Coordinate = Tuple[float, float]


def coordinate_id(x: float, y: float) -> str:
    return f"{_format_number(x)},{_format_number(y)}"


def edge_id(source_id: str, target_id: str) -> str:
    return f"{source_id}->{target_id}"


def _format_number(value: float) -> str:
    # Integral coordinates print without a trailing ".0".
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass
class GraphNode:
    id: str
    x: float
    y: float
    depth: int
    step: float
    parent_id: str | None = None

    @property
    def coordinate(self) -> Coordinate:
        return (self.x, self.y)


@dataclass
class GraphEdge:
    id: str
    source: str
    target: str
    symbol: Symbol


@dataclass
class CayleyGraph:
    max_depth: int
    initial_step: float
    nodes: Dict[str, GraphNode] = field(default_factory=dict)
    edges: Dict[str, GraphEdge] = field(default_factory=dict)
    origin_id: str = coordinate_id(0, 0)

    @property
    def origin(self) -> GraphNode:
        return self.node(self.origin_id)

    def node(self, node_id: str) -> GraphNode:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def node_at(self, x: float, y: float) -> GraphNode | None:
        return self.nodes.get(coordinate_id(x, y))

    def edge_between(self, source_id: str, target_id: str) -> GraphEdge | None:
        return self.edges.get(edge_id(source_id, target_id))

    def adjacency(self) -> Dict[str, List[Tuple[str, Symbol]]]:
        """Undirected neighbour lists; reverse traversal carries the inverse symbol."""
        adjacency: Dict[str, List[Tuple[str, Symbol]]] = {node_id: [] for node_id in self.nodes}
        for edge in self.edges.values():
            adjacency[edge.source].append((edge.target, edge.symbol))
            adjacency[edge.target].append((edge.source, edge.symbol.inverse))
        return adjacency

    def to_json(self) -> Dict[str, Any]:
        return {
            "max_depth": self.max_depth,
            "initial_step": self.initial_step,
            "origin_id": self.origin_id,
            "nodes": [
                {
                    "id": node.id,
                    "x": node.x,
                    "y": node.y,
                    "depth": node.depth,
                    "step": node.step,
                    "parent_id": node.parent_id,
                }
                for node in self.nodes.values()
            ],
            "edges": [
                {
                    "id": edge.id,
                    "source": edge.source,
                    "target": edge.target,
                    "symbol": edge.symbol.token,
                }
                for edge in self.edges.values()
            ],
        }
