"""Validation and QA phase."""

from typing import Any, Dict, List

from ..cayley_builder import expected_node_count
from ..pipeline import PipelinePhase
from ..session import ExplorerSession


class ValidationPhase(PipelinePhase):
    phase_name = "validation"
    requires = ("session",)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        session: ExplorerSession = context["session"]
        graph = session.graph
        expected_nodes = expected_node_count(graph.max_depth)
        warnings: List[str] = []

        if len(graph.nodes) != expected_nodes:
            warnings.append(f"node count {len(graph.nodes)} differs from expected {expected_nodes}")
        if len(graph.edges) != len(graph.nodes) - 1:
            warnings.append(f"edge count {len(graph.edges)} is not node count - 1")
        for index, saved in enumerate(session.saved):
            if not saved.complete:
                warnings.append(f"word {index} ({saved.text}) leaves the modelled region")

        qa_report = {
            "node_count": len(graph.nodes),
            "expected_node_count": expected_nodes,
            "edge_count": len(graph.edges),
            "saved_word_count": len(session.saved),
            "warnings": warnings,
        }
        return {"validation_report": qa_report}
