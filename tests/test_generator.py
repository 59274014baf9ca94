import random

import pytest

from pathforms.cayley_builder import build_cayley_graph
from pathforms.generator import fallback_word, generate
from pathforms.path_resolver import parse
from pathforms.words import Symbol, free_reduce


@pytest.mark.parametrize("target", [Symbol.A, Symbol.B])
def test_generated_words_reduce_to_target_and_fit(graph, target):
    for seed in range(25):
        result = generate(target, graph, rng=random.Random(seed))
        assert free_reduce(result.word) == (target,)
        assert parse(result.word, graph).complete
        assert result.word[0] is target
        assert 3 <= len(result.word) <= 12
        assert 1 <= result.attempts <= 100


def test_exhausted_generation_falls_back(graph):
    result = generate(Symbol.A, graph, rng=random.Random(0), max_attempts=0)
    assert result.exhausted
    assert result.word == (Symbol.A, Symbol.B, Symbol.B_INV)
    assert parse(result.word, graph).complete


def test_fallback_words_are_known_good(graph):
    for target in (Symbol.A, Symbol.B):
        word = fallback_word(target)
        assert free_reduce(word) == (target,)
        assert parse(word, graph).complete
    assert fallback_word(Symbol.B) == (Symbol.B, Symbol.A, Symbol.A_INV)


def test_fallback_is_returned_even_when_it_leaves_a_shallow_graph():
    shallow = build_cayley_graph(max_depth=1)
    result = generate(Symbol.B, shallow, rng=random.Random(3), max_attempts=0)
    assert result.exhausted
    assert not parse(result.word, shallow).complete


def test_invalid_length_range():
    with pytest.raises(ValueError):
        generate(Symbol.A, build_cayley_graph(2), min_length=5, max_length=4)
