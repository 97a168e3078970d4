"""
Word/separator tokenizer.

Splits text into maximal runs of word characters and separator characters.
Concatenating the tokens returned from offset 0 reproduces the text exactly.
"""
from typing import Iterable, Iterator

from .models import Token, TokenKind, DEFAULT_SEPARATORS


class SeparatorClassifier:
    """Immutable set of separator characters."""

    __slots__ = ('_separators',)

    def __init__(self, separators: Iterable[str] = DEFAULT_SEPARATORS):
        self._separators = frozenset(separators)

    @property
    def separators(self) -> frozenset:
        return self._separators

    def is_separator(self, char: str) -> bool:
        """True if ``char`` is a separator; everything else is a word character."""
        return char in self._separators

    def classify(self, char: str) -> TokenKind:
        return TokenKind.SEPARATOR if char in self._separators else TokenKind.WORD

    def __eq__(self, other) -> bool:
        if not isinstance(other, SeparatorClassifier):
            return NotImplemented
        return self._separators == other._separators

    def __hash__(self) -> int:
        return hash(self._separators)

    def __repr__(self) -> str:
        return f"SeparatorClassifier({''.join(sorted(self._separators))!r})"


def next_token(text: str, position: int, classifier: SeparatorClassifier) -> Token:
    """
    Return the maximal word or separator run starting at ``position``.

    Args:
        text: Text to tokenize
        position: Start offset, ``0 <= position < len(text)``
        classifier: Separator set

    Returns:
        Token tagged with the classification of ``text[position]``

    Raises:
        IndexError: If position is outside the text
    """
    if not 0 <= position < len(text):
        raise IndexError(f"position {position} out of range for text of length {len(text)}")

    is_sep = classifier.is_separator(text[position])
    end = position + 1
    while end < len(text) and classifier.is_separator(text[end]) == is_sep:
        end += 1

    kind = TokenKind.SEPARATOR if is_sep else TokenKind.WORD
    return Token(text[position:end], kind, position)


def iter_tokens(text: str, classifier: SeparatorClassifier) -> Iterator[Token]:
    """Lazily yield the full token partition of ``text``."""
    position = 0
    while position < len(text):
        token = next_token(text, position, classifier)
        yield token
        position = token.end


class Tokenizer:
    """Tokenizer bound to one separator set."""

    def __init__(self, classifier: SeparatorClassifier = None):
        self.classifier = classifier or SeparatorClassifier()

    @classmethod
    def from_separators(cls, separators: str) -> 'Tokenizer':
        return cls(SeparatorClassifier(separators))

    def next_token(self, text: str, position: int) -> Token:
        return next_token(text, position, self.classifier)

    def tokens(self, text: str) -> Iterator[Token]:
        return iter_tokens(text, self.classifier)
