"""Construction of the truncated Cayley tree of the free group F(a, b)."""

import logging

from .graph_model import CayleyGraph, GraphNode
from .graph_orchestrator import GraphOrchestrator
from .words import ALPHABET, Symbol

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 5
DEFAULT_INITIAL_STEP = 50.0


def expected_node_count(max_depth: int) -> int:
    """Root has four children, every other internal node three."""
    if max_depth <= 0:
        return 1
    return 1 + 4 * (3 ** max_depth - 1) // 2


def build_cayley_graph(
    max_depth: int = DEFAULT_MAX_DEPTH,
    initial_step: float = DEFAULT_INITIAL_STEP,
) -> CayleyGraph:
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")
    if initial_step <= 0:
        raise ValueError(f"initial_step must be positive, got {initial_step}")

    orchestrator = GraphOrchestrator(max_depth=max_depth, initial_step=float(initial_step))
    root = orchestrator.add_or_get_node(0.0, 0.0, depth=0, step=float(initial_step))
    _grow(orchestrator, root, max_depth, arrived_by=None)

    graph = orchestrator.graph
    logger.debug(
        "Built Cayley tree depth=%s nodes=%s edges=%s",
        max_depth,
        len(graph.nodes),
        len(graph.edges),
    )
    return graph


def _grow(
    orchestrator: GraphOrchestrator,
    parent: GraphNode,
    max_depth: int,
    arrived_by: Symbol | None,
) -> None:
    if parent.depth >= max_depth:
        return

    for symbol in ALPHABET:
        # Stepping back along the arrival edge would be a cancellation a·a⁻¹.
        if arrived_by is not None and symbol is arrived_by.inverse:
            continue
        dx, dy = symbol.direction
        child = orchestrator.add_or_get_node(
            parent.x + dx * parent.step,
            parent.y + dy * parent.step,
            depth=parent.depth + 1,
            step=parent.step / 2,
            parent_id=parent.id,
        )
        orchestrator.add_edge(parent.id, child.id, symbol)
        _grow(orchestrator, child, max_depth, arrived_by=symbol)
