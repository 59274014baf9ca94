"""Graph construction phase."""

from typing import Any, Dict

from ..config import EngineConfig
from ..pipeline import PipelinePhase
from ..session import ExplorerSession


class GraphBuildPhase(PipelinePhase):
    phase_name = "build"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        config: EngineConfig = context.get("config") or EngineConfig()
        session = ExplorerSession.from_config(config)
        graph = session.graph
        return {
            "config": config,
            "session": session,
            "graph_output": {
                "max_depth": graph.max_depth,
                "initial_step": graph.initial_step,
                "node_count": len(graph.nodes),
                "edge_count": len(graph.edges),
            },
        }
