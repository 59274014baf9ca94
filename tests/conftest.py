import itertools
import random

import pytest

from pathforms.cayley_builder import build_cayley_graph
from pathforms.words import ALPHABET, is_reduced


@pytest.fixture(scope="session")
def graph():
    return build_cayley_graph(max_depth=5, initial_step=50)


@pytest.fixture
def rng():
    return random.Random(20240601)


def reduced_words(max_length):
    for length in range(max_length + 1):
        for word in itertools.product(ALPHABET, repeat=length):
            if is_reduced(word):
                yield word


def random_word(rng, max_length=10):
    return tuple(rng.choice(ALPHABET) for _ in range(rng.randint(0, max_length)))
