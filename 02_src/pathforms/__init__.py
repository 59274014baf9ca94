"""Word and Cayley-tree engine for exploring the free group on a and b."""

from .cayley_builder import build_cayley_graph, expected_node_count
from .config import EngineConfig
from .generator import GenerationResult, generate
from .graph_model import CayleyGraph, GraphEdge, GraphNode
from .nielsen import NielsenReport, NielsenVerifier, check_nielsen_reduced
from .path_resolver import Walk, parse, resolve_shortest_path, shortest_path
from .session import ExplorerSession, SavedWord
from .words import (
    Symbol,
    concatenate,
    format_word,
    free_reduce,
    group_inverse,
    invert_per_symbol,
    invert_symbol,
    is_inverse,
    parse_word,
)

__all__ = [
    "Symbol",
    "parse_word",
    "format_word",
    "is_inverse",
    "invert_symbol",
    "free_reduce",
    "concatenate",
    "invert_per_symbol",
    "group_inverse",
    "GraphNode",
    "GraphEdge",
    "CayleyGraph",
    "build_cayley_graph",
    "expected_node_count",
    "Walk",
    "parse",
    "shortest_path",
    "resolve_shortest_path",
    "NielsenReport",
    "NielsenVerifier",
    "check_nielsen_reduced",
    "GenerationResult",
    "generate",
    "EngineConfig",
    "ExplorerSession",
    "SavedWord",
]
