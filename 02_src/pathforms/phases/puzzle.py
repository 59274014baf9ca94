"""Puzzle seeding phase."""

from typing import Any, Dict

from ..pipeline import PipelinePhase
from ..session import ExplorerSession
from ..words import format_word


class PuzzleSeedPhase(PipelinePhase):
    phase_name = "puzzle"
    requires = ("session",)

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        if not context.get("puzzle"):
            return {"puzzle_output": {"active": False, "words": []}}

        session: ExplorerSession = context["session"]
        results = session.enter_puzzle()
        return {
            "puzzle_output": {
                "active": True,
                "words": [
                    {
                        "word": format_word(result.word),
                        "attempts": result.attempts,
                        "exhausted": result.exhausted,
                    }
                    for result in results
                ],
            }
        }
