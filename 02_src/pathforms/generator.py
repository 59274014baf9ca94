"""Random non-trivial words that reduce to a single known letter."""

import logging
import random
from dataclasses import dataclass

from .graph_model import CayleyGraph
from .path_resolver import parse
from .words import ALPHABET, GENERATORS, Symbol, Word, format_word, free_reduce

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 100
DEFAULT_MIN_LENGTH = 3
DEFAULT_MAX_LENGTH = 12


@dataclass(frozen=True)
class GenerationResult:
    word: Word
    attempts: int
    exhausted: bool = False


def fallback_word(target: Symbol) -> Word:
    """``target · g · g⁻¹`` with ``g`` the other generator, e.g. a b b⁻¹."""
    other = GENERATORS[1] if target.letter == "a" else GENERATORS[0]
    return (target, other, other.inverse)


def generate(
    target: Symbol,
    graph: CayleyGraph,
    rng: random.Random | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> GenerationResult:
    if max_attempts < 0:
        raise ValueError(f"max_attempts must be non-negative, got {max_attempts}")
    if not 1 <= min_length <= max_length:
        raise ValueError(f"Invalid length range [{min_length}, {max_length}]")

    rng = rng or random.Random()
    expected = (target,)

    for attempt in range(1, max_attempts + 1):
        length = rng.randint(min_length, max_length)
        candidate = (target,) + tuple(rng.choice(ALPHABET) for _ in range(length - 1))
        if free_reduce(candidate) != expected:
            continue
        if not parse(candidate, graph).complete:
            continue
        logger.debug("Generated %s for %s after %s attempts", format_word(candidate), target.token, attempt)
        return GenerationResult(word=candidate, attempts=attempt)

    fallback = fallback_word(target)
    if not parse(fallback, graph).complete:
        logger.warning(
            "Fallback word %s does not fit a depth-%s graph", format_word(fallback), graph.max_depth
        )
    logger.debug("Generation for %s exhausted %s attempts", target.token, max_attempts)
    return GenerationResult(word=fallback, attempts=max_attempts, exhausted=True)
