"""Nielsen reduced-form phase over every saved word."""

from typing import Any, Dict

from ..pipeline import PipelinePhase
from ..session import ExplorerSession


class NielsenCheckPhase(PipelinePhase):
    phase_name = "nielsen"
    requires = ("session",)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        session: ExplorerSession = context["session"]
        return {"nielsen_report": session.check_nielsen().to_json()}
