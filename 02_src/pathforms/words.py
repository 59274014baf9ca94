"""Free-group word algebra over the letters a, a-, b, b-."""

import re
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from .exceptions import WordSyntaxError


class Symbol(Enum):
    A = "a"
    A_INV = "a-"
    B = "b"
    B_INV = "b-"

    @property
    def token(self) -> str:
        return self.value

    @property
    def inverse(self) -> "Symbol":
        return _INVERSES[self]

    @property
    def direction(self) -> Tuple[int, int]:
        """Unit step in screen coordinates (y grows downward)."""
        return _DIRECTIONS[self]

    @property
    def letter(self) -> str:
        return self.value[0]

    @classmethod
    def from_token(cls, token: str) -> "Symbol":
        try:
            return _TOKENS[token]
        except KeyError:
            raise WordSyntaxError(f"Unknown symbol token: {token!r}") from None

    def __str__(self) -> str:
        return self.value


_INVERSES = {
    Symbol.A: Symbol.A_INV,
    Symbol.A_INV: Symbol.A,
    Symbol.B: Symbol.B_INV,
    Symbol.B_INV: Symbol.B,
}

_DIRECTIONS = {
    Symbol.A: (0, -1),
    Symbol.A_INV: (0, 1),
    Symbol.B: (1, 0),
    Symbol.B_INV: (-1, 0),
}

_TOKENS = {
    "a": Symbol.A,
    "a-": Symbol.A_INV,
    "a^-1": Symbol.A_INV,
    "A": Symbol.A_INV,
    "b": Symbol.B,
    "b-": Symbol.B_INV,
    "b^-1": Symbol.B_INV,
    "B": Symbol.B_INV,
}

GENERATORS = (Symbol.A, Symbol.B)
ALPHABET = (Symbol.A, Symbol.A_INV, Symbol.B, Symbol.B_INV)
IDENTITY: Tuple[Symbol, ...] = ()

Word = Tuple[Symbol, ...]

_TOKEN_PATTERN = re.compile(r"a\^-1|b\^-1|a-|b-|[abAB]|\S")


def parse_word(text: str) -> Word:
    """Read a word written as concatenated tokens, e.g. ``"ab-a-"``.

    ``"e"`` and the empty string denote the identity.
    """
    stripped = "".join(text.split())
    if stripped in ("", "e"):
        return IDENTITY
    return tuple(Symbol.from_token(token) for token in _TOKEN_PATTERN.findall(stripped))


def format_word(word: Iterable[Symbol]) -> str:
    text = "".join(symbol.token for symbol in word)
    return text or "e"


def is_inverse(first: Symbol, second: Symbol) -> bool:
    return first.inverse is second


def invert_symbol(symbol: Symbol) -> Symbol:
    return symbol.inverse


def free_reduce(word: Iterable[Symbol]) -> Word:
    stack: List[Symbol] = []
    for symbol in word:
        if stack and is_inverse(stack[-1], symbol):
            stack.pop()
        else:
            stack.append(symbol)
    return tuple(stack)


def is_reduced(word: Sequence[Symbol]) -> bool:
    return all(not is_inverse(left, right) for left, right in zip(word, word[1:]))


def concatenate(first: Iterable[Symbol], second: Iterable[Symbol]) -> Word:
    """Reduce the raw concatenation, so cancellation cascades across the seam."""
    return free_reduce((*first, *second))


def invert_per_symbol(word: Iterable[Symbol]) -> Word:
    """Flip every letter in place without reversing the order.

    This is the user-facing "Inverse" action. It is the group inverse only
    for words of length one; use :func:`group_inverse` for algebra.
    """
    return tuple(symbol.inverse for symbol in word)


def group_inverse(word: Sequence[Symbol]) -> Word:
    return tuple(symbol.inverse for symbol in reversed(word))
