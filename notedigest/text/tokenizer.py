"""Text normalization and content-token extraction.

Every similarity and frequency computation in the pipeline works on
content tokens: lowercase ASCII alphanumerics with diacritics stripped,
excluding stopwords and tokens shorter than ``min_length``.
"""

import re
import unicodedata
from collections.abc import Iterable

# fmt: off
STOPWORDS: frozenset[str] = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "if", "then", "else", "for",
        "to", "of", "in", "on", "at", "by", "with", "from", "as", "is",
        "are", "was", "were", "be", "been", "being", "that", "this", "these",
        "those", "it", "its", "into", "about", "over", "under", "after",
        "before", "between", "through", "during", "without", "within", "i",
        "you", "he", "she", "we", "they", "them", "his", "her", "their",
        "our", "your", "my", "me", "us", "do", "does", "did", "doing", "done",
        "can", "could", "should", "would", "may", "might", "must", "will",
        "shall", "not", "no", "yes", "up", "down", "out", "so", "than", "too",
        "very", "just", "also", "only", "both", "each", "more", "most",
        "such", "own", "same",
    }
)
# fmt: on

_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")


def strip_diacritics(text: str) -> str:
    """Decompose ``text`` and drop combining marks (U+0300 to U+036F)."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not "\u0300" <= ch <= "\u036f")


class Tokenizer:
    """Splits text into normalized tokens and filters content tokens.

    Args:
        stopwords: Words never treated as content.
        min_length: Shortest token length that counts as content.
    """

    def __init__(
        self,
        stopwords: Iterable[str] = STOPWORDS,
        min_length: int = 3,
    ) -> None:
        self.stopwords = frozenset(stopwords)
        self.min_length = min_length

    def tokenize(self, text: str) -> list[str]:
        """Return every normalized token of ``text`` in order."""
        ascii_text = strip_diacritics(text).lower()
        return _NON_ALNUM_RE.sub(" ", ascii_text).split()

    def content_tokens(self, text: str) -> list[str]:
        """Return the ordered content tokens of ``text``."""
        return [
            tok
            for tok in self.tokenize(text)
            if len(tok) >= self.min_length and tok not in self.stopwords
        ]

    def token_set(self, text: str) -> frozenset[str]:
        """Return the distinct content tokens of ``text``."""
        return frozenset(self.content_tokens(text))

    def term_set(self, text: str) -> frozenset[str]:
        """Return the distinct non-stopword tokens of ``text`` of any length.

        Keeps short identifiers such as ``"y"`` or ``"a2"`` that content
        tokens discard.
        """
        return frozenset(t for t in self.tokenize(text) if t not in self.stopwords)


_default = Tokenizer()


def tokenize(text: str) -> list[str]:
    return _default.tokenize(text)


def content_tokens(text: str) -> list[str]:
    return _default.content_tokens(text)


def token_set(text: str) -> frozenset[str]:
    return _default.token_set(text)
