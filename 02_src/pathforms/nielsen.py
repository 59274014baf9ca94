"""Nielsen reduced-form check (N0, N1, N2) for a list of words."""

import logging
from dataclasses import dataclass, field
from itertools import permutations
from typing import Any, Dict, Iterable, List, Sequence

from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from .words import Word, concatenate, format_word, free_reduce, group_inverse

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Success: The word list satisfies Nielsen Reduced Form!"
N0_FAILURE = "The word list does not satisfy N0."
N1_FAILURE = "The word list does not satisfy Nielsen condition N1. The words can be further shortened."
N2_FAILURE = "The word list does not satisfy N2."


class NielsenState(TypedDict, total=False):
    reduced: List[Word]
    n0: bool
    n1: bool
    n2: bool
    n0_violation: str
    n1_violation: str
    n2_violation: str
    message: str


@dataclass
class NielsenReport:
    n0: bool
    n1: bool
    n2: bool
    violations: List[str] = field(default_factory=list)
    message: str = ""

    @property
    def passed(self) -> bool:
        return self.n0 and self.n1 and self.n2

    def to_json(self) -> Dict[str, Any]:
        return {
            "n0": self.n0,
            "n1": self.n1,
            "n2": self.n2,
            "passed": self.passed,
            "violations": list(self.violations),
            "message": self.message,
        }


class NielsenVerifier:
    """Runs N0 -> N1 -> N2 -> summary as a linear workflow.

    Every condition is evaluated regardless of earlier failures, so the
    report always says which of the three conditions failed.
    """

    def __init__(self) -> None:
        self._workflow = self._build_workflow()

    def verify(self, words: Iterable[Sequence]) -> NielsenReport:
        reduced = [free_reduce(word) for word in words]
        final_state = self._workflow.invoke({"reduced": reduced})
        violations = [
            final_state[key]
            for key in ("n0_violation", "n1_violation", "n2_violation")
            if final_state.get(key)
        ]
        report = NielsenReport(
            n0=final_state["n0"],
            n1=final_state["n1"],
            n2=final_state["n2"],
            violations=violations,
            message=final_state["message"],
        )
        logger.debug("Nielsen check over %s words: %s", len(reduced), report.message)
        return report

    def _build_workflow(self):
        graph = StateGraph(NielsenState)
        graph.add_node("check_n0", self._check_n0)
        graph.add_node("check_n1", self._check_n1)
        graph.add_node("check_n2", self._check_n2)
        graph.add_node("summarize", self._summarize)
        graph.add_edge(START, "check_n0")
        graph.add_edge("check_n0", "check_n1")
        graph.add_edge("check_n1", "check_n2")
        graph.add_edge("check_n2", "summarize")
        graph.add_edge("summarize", END)
        return graph.compile()

    @staticmethod
    def _check_n0(state: NielsenState) -> Dict[str, Any]:
        for index, word in enumerate(state["reduced"]):
            if not word:
                return {"n0": False, "n0_violation": f"N0: word {index} reduces to the identity"}
        return {"n0": True, "n0_violation": ""}

    @staticmethod
    def _check_n1(state: NielsenState) -> Dict[str, Any]:
        reduced = state["reduced"]
        for i, j in permutations(range(len(reduced)), 2):
            first, second = reduced[i], reduced[j]
            bound = max(len(first), len(second))
            for label, product in (
                (f"w{i}*w{j}", concatenate(first, second)),
                (f"w{i}*w{j}^-1", concatenate(first, group_inverse(second))),
            ):
                if len(product) < bound:
                    return {
                        "n1": False,
                        "n1_violation": (
                            f"N1: {label} = {format_word(product)} has length {len(product)} < {bound}"
                        ),
                    }
        return {"n1": True, "n1_violation": ""}

    @staticmethod
    def _check_n2(state: NielsenState) -> Dict[str, Any]:
        reduced = state["reduced"]
        for i, j, k in permutations(range(len(reduced)), 3):
            first, middle, last = reduced[i], reduced[j], reduced[k]
            bound = len(first) - len(middle) + len(last)
            for middle_sign, middle_word in (("", middle), ("^-1", group_inverse(middle))):
                head = concatenate(first, middle_word)
                for last_sign, last_word in (("", last), ("^-1", group_inverse(last))):
                    product = concatenate(head, last_word)
                    if len(product) <= bound:
                        return {
                            "n2": False,
                            "n2_violation": (
                                f"N2: |w{i}*w{j}{middle_sign}*w{k}{last_sign}| = {len(product)} <= {bound}"
                            ),
                        }
        return {"n2": True, "n2_violation": ""}

    @staticmethod
    def _summarize(state: NielsenState) -> Dict[str, Any]:
        if state["n0"] and state["n1"] and state["n2"]:
            return {"message": SUCCESS_MESSAGE}
        failures = [
            text
            for passed, text in (
                (state["n0"], N0_FAILURE),
                (state["n1"], N1_FAILURE),
                (state["n2"], N2_FAILURE),
            )
            if not passed
        ]
        return {"message": "Failure: " + " ".join(failures)}


def check_nielsen_reduced(words: Iterable[Sequence]) -> NielsenReport:
    return NielsenVerifier().verify(words)
