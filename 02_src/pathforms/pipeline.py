"""Report phases and the sequential runner that threads their context."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Tuple

from .exceptions import PipelineError

logger = logging.getLogger(__name__)


class PipelinePhase(ABC):
    phase_name: str
    # Context keys that an earlier phase or the caller must have provided.
    requires: Tuple[str, ...] = ()

    @abstractmethod
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


class PipelineRunner:
    """Runs phases in order, merging each phase's output into one context.

    The returned context also carries ``completed_phases``, the names of the
    phases that ran, in order.
    """

    def __init__(self, phases: Iterable[PipelinePhase]) -> None:
        self.phases: List[PipelinePhase] = list(phases)
        names = [phase.phase_name for phase in self.phases]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise PipelineError(f"Duplicate phase names: {', '.join(duplicates)}")

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        current = dict(context)
        completed: List[str] = []
        for phase in self.phases:
            missing = [key for key in phase.requires if key not in current]
            if missing:
                raise PipelineError(
                    f"Phase '{phase.phase_name}' is missing context keys: {', '.join(missing)}"
                )
            logger.debug("[%s] running", phase.phase_name)
            phase_result = phase.run(current)
            if not isinstance(phase_result, dict):
                raise PipelineError(f"Phase '{phase.phase_name}' must return dict context.")
            current.update(phase_result)
            completed.append(phase.phase_name)
        current["completed_phases"] = completed
        return current
