"""Word resolution phase: parses user words and geodesic targets onto the tree."""

import logging
from typing import Any, Dict, List

from ..exceptions import InvalidSelectionError, UnknownNodeError, WordSyntaxError
from ..pipeline import PipelinePhase
from ..session import ExplorerSession
from ..words import parse_word

logger = logging.getLogger(__name__)


class WordResolutionPhase(PipelinePhase):
    phase_name = "resolution"
    requires = ("session",)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        session: ExplorerSession = context["session"]
        rejected: List[Dict[str, Any]] = []

        for text in context.get("words", []):
            try:
                word = parse_word(str(text))
            except WordSyntaxError as error:
                rejected.append({"input": text, "reason": "syntax_error", "detail": str(error)})
                continue
            saved = session.add_word(word)
            if not saved.complete:
                logger.info("Word %s leaves the depth-%s tree", saved.text, session.graph.max_depth)

        for target_id in context.get("shortest_to", []):
            try:
                drawn = session.draw_shortest_path(str(target_id))
            except (UnknownNodeError, InvalidSelectionError) as error:
                rejected.append({"input": target_id, "reason": "invalid_target", "detail": str(error)})
                continue
            if drawn is None:
                rejected.append({"input": target_id, "reason": "unreachable", "detail": ""})

        saved_words = [saved.to_json() for saved in session.saved]
        resolution_output = {
            "saved_words": saved_words,
            "rejected": rejected,
            "summary": {
                "saved_count": len(saved_words),
                "complete_count": sum(1 for saved in saved_words if saved["complete"]),
                "rejected_count": len(rejected),
            },
        }
        return {"resolution_output": resolution_output}
