"""Explicit per-user state for walking the tree and editing saved words."""

import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .cayley_builder import build_cayley_graph
from .config import EngineConfig
from .exceptions import InvalidSelectionError, UnknownNodeError
from .generator import DEFAULT_MAX_ATTEMPTS, GenerationResult, generate
from .graph_model import CayleyGraph
from .nielsen import NielsenReport, NielsenVerifier
from .path_resolver import parse, resolve_shortest_path, step_from
from .words import (
    GENERATORS,
    Symbol,
    Word,
    concatenate,
    format_word,
    free_reduce,
    invert_per_symbol,
    is_inverse,
)

logger = logging.getLogger(__name__)


@dataclass
class SavedWord:
    word: Word
    node_ids: List[str] = field(default_factory=list)
    edge_ids: List[str] = field(default_factory=list)

    @property
    def text(self) -> str:
        return format_word(self.word)

    @property
    def complete(self) -> bool:
        return len(self.edge_ids) == len(self.word)

    def to_json(self) -> Dict[str, object]:
        return {
            "word": self.text,
            "node_ids": list(self.node_ids),
            "edge_ids": list(self.edge_ids),
            "complete": self.complete,
        }


class ExplorerSession:
    def __init__(
        self,
        graph: CayleyGraph,
        rng: random.Random | None = None,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        self.graph = graph
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.saved: List[SavedWord] = []
        self.puzzle_active = False
        self.selected_node_id: str = graph.origin_id
        self._verifier = NielsenVerifier()
        self._walk_symbols: List[Symbol] = []
        self._walk_nodes: List[str] = [graph.origin_id]
        self._walk_edges: List[str] = []

    @classmethod
    def from_config(cls, config: EngineConfig) -> "ExplorerSession":
        graph = build_cayley_graph(config.max_depth, config.initial_step)
        return cls(graph, rng=random.Random(config.seed), max_attempts=config.max_attempts)

    # Current walk

    @property
    def current_word(self) -> Word:
        return tuple(self._walk_symbols)

    @property
    def current_node_ids(self) -> List[str]:
        return list(self._walk_nodes)

    @property
    def current_edge_ids(self) -> List[str]:
        return list(self._walk_edges)

    def step(self, symbol: Symbol) -> bool:
        """Extend the walk by one letter; the inverse of the last letter backtracks.

        Returns False, leaving the walk untouched, when the move leaves the graph.
        """
        if self._walk_symbols and is_inverse(self._walk_symbols[-1], symbol):
            self._walk_symbols.pop()
            self._walk_edges.pop()
            self._walk_nodes.pop()
            self.selected_node_id = self._walk_nodes[-1]
            return True

        move = step_from(self.graph, self.graph.node(self._walk_nodes[-1]), symbol)
        if move is None:
            return False
        node, edge = move
        self._walk_symbols.append(symbol)
        self._walk_nodes.append(node.id)
        self._walk_edges.append(edge.id)
        self.selected_node_id = node.id
        return True

    def select_node(self, node_id: str) -> None:
        if node_id not in self.graph.nodes:
            raise UnknownNodeError(node_id)
        self.selected_node_id = node_id

    def reset_walk(self) -> None:
        self._walk_symbols = []
        self._walk_nodes = [self.graph.origin_id]
        self._walk_edges = []
        self.selected_node_id = self.graph.origin_id

    def save_current(self) -> SavedWord:
        if not self._walk_symbols:
            raise InvalidSelectionError("There is no walked word to save")
        saved = SavedWord(
            word=self.current_word,
            node_ids=list(self._walk_nodes),
            edge_ids=list(self._walk_edges),
        )
        self.saved.append(saved)
        self.reset_walk()
        return saved

    # Saved words

    def add_word(self, word: Word) -> SavedWord:
        saved = self._resolve(tuple(word))
        self.saved.append(saved)
        return saved

    def invert_selected(self, index: int | None) -> SavedWord:
        position = self._require_index(index)
        flipped = self._resolve(invert_per_symbol(self.saved[position].word))
        self.saved[position] = flipped
        return flipped

    def remove(self, index: int | None) -> SavedWord:
        position = self._require_index(index)
        return self.saved.pop(position)

    def concatenate(self, first: int | None, second: int | None) -> SavedWord:
        """Replace word ``first`` with the reduced product; word ``second`` is kept."""
        first_position = self._require_index(first)
        second_position = self._require_index(second)
        if first_position == second_position:
            raise InvalidSelectionError("Cannot concatenate a word with itself")
        product = concatenate(
            free_reduce(self.saved[first_position].word),
            free_reduce(self.saved[second_position].word),
        )
        combined = self._resolve(product)
        self.saved[first_position] = combined
        return combined

    def clear(self) -> None:
        self.saved = []

    def draw_shortest_path(self, target_id: str | None = None) -> SavedWord | None:
        target = target_id if target_id is not None else self.selected_node_id
        if target not in self.graph.nodes:
            raise UnknownNodeError(target)
        if target == self.graph.origin_id:
            raise InvalidSelectionError("Target is the origin; there is no path to draw")

        walk = resolve_shortest_path(target, self.graph)
        if walk is None:
            logger.warning("Node %s is unreachable from the origin", target)
            return None
        saved = SavedWord(word=walk.word, node_ids=walk.node_ids, edge_ids=walk.edge_ids)
        self.saved.append(saved)
        return saved

    # Puzzle mode

    def enter_puzzle(self) -> List[GenerationResult]:
        results = [
            generate(target, self.graph, rng=self.rng, max_attempts=self.max_attempts)
            for target in GENERATORS
        ]
        self.saved = [self._resolve(result.word) for result in results]
        self.puzzle_active = True
        logger.info("Puzzle words: %s", ", ".join(saved.text for saved in self.saved))
        return results

    def exit_puzzle(self) -> None:
        self.puzzle_active = False
        self.saved = []

    def check_puzzle(self) -> bool:
        if not self.puzzle_active:
            raise InvalidSelectionError("Puzzle mode is not active")
        if len(self.saved) != 2:
            return False
        return sorted(saved.text for saved in self.saved) == ["a", "b"]

    # Reports

    def check_nielsen(self) -> NielsenReport:
        return self._verifier.verify(saved.word for saved in self.saved)

    def highlight_maps(self) -> Tuple[Dict[str, int], Dict[str, int]]:
        """Map node and edge ids to the first saved word that visits them."""
        node_owner: Dict[str, int] = {}
        edge_owner: Dict[str, int] = {}
        for index, saved in enumerate(self.saved):
            for node_id in saved.node_ids:
                node_owner.setdefault(node_id, index)
            for edge_id in saved.edge_ids:
                edge_owner.setdefault(edge_id, index)
        return node_owner, edge_owner

    def _resolve(self, word: Word) -> SavedWord:
        walk = parse(word, self.graph)
        return SavedWord(word=walk.word, node_ids=walk.node_ids, edge_ids=walk.edge_ids)

    def _require_index(self, index: int | None) -> int:
        if index is None:
            raise InvalidSelectionError("No word selected")
        if not 0 <= index < len(self.saved):
            raise InvalidSelectionError(
                f"Word index {index} out of range for {len(self.saved)} saved words"
            )
        return index
