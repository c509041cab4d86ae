"""Keyphrase extraction by weighted n-gram frequency.

Unigrams, bigrams, and trigrams of content tokens accumulate weights
1, 2, and 3 per occurrence. Acronyms (``RSA``, ``QKD``) and letter-digit
terms (``A5``, ``H264``) found in the raw text receive flat boosts.
"""

import re
from collections import Counter

from notedigest.text.tokenizer import Tokenizer
from notedigest.utils.config import KeyphraseConfig
from notedigest.utils.logger import get_logger

logger = get_logger(__name__)

ACRONYM_RE = re.compile(r"\b[A-Z]{2,6}\b")
ALPHANUMERIC_RE = re.compile(r"\b[A-Za-z]\d+\b")

_NGRAM_WEIGHTS: tuple[int, ...] = (1, 2, 3)


class KeyphraseExtractor:
    """Ranks 1-3 word phrases and removes overlapping candidates.

    Args:
        config: Boost weights, phrase length limits, and default count.
        tokenizer: Tokenizer producing the content tokens.
    """

    def __init__(
        self,
        config: KeyphraseConfig | None = None,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        self.config = config or KeyphraseConfig()
        self.tokenizer = tokenizer or Tokenizer()

    def score(self, text: str) -> Counter[str]:
        """Build the phrase weight table for ``text``.

        Args:
            text: Source text; the raw form is scanned for acronyms.

        Returns:
            Mapping of phrase text to cumulative weight.
        """
        tokens = self.tokenizer.content_tokens(text)
        weights: Counter[str] = Counter()

        for i in range(len(tokens)):
            for size, weight in enumerate(_NGRAM_WEIGHTS, start=1):
                if i + size <= len(tokens):
                    weights[" ".join(tokens[i : i + size])] += weight

        for acronym in dict.fromkeys(ACRONYM_RE.findall(text)):
            weights[acronym.lower()] += self.config.acronym_boost
        for term in dict.fromkeys(ALPHANUMERIC_RE.findall(text)):
            weights[term.lower()] += self.config.alphanumeric_boost

        return weights

    def extract(self, text: str, top_k: int | None = None) -> list[str]:
        """Return up to ``top_k`` ranked, non-overlapping keyphrases.

        A candidate is skipped when it is a substring of, or contains, an
        already accepted phrase, so the highest-weighted member of each
        overlapping family wins. The check is quadratic in the number of
        accepted phrases, which stays in the tens.

        Args:
            text: Cleaned document text.
            top_k: Maximum number of phrases. Defaults to the configured count.

        Returns:
            Phrases ordered by descending weight.
        """
        limit = self.config.default_top_k if top_k is None else top_k
        if limit <= 0:
            return []

        weights = self.score(text)
        ranked = sorted(
            (
                phrase
                for phrase in weights
                if self.config.min_phrase_chars
                <= len(phrase)
                <= self.config.max_phrase_chars
            ),
            key=lambda phrase: weights[phrase],
            reverse=True,
        )

        accepted: list[str] = []
        for phrase in ranked:
            if any(phrase in prev or prev in phrase for prev in accepted):
                continue
            accepted.append(phrase)
            if len(accepted) >= limit:
                break

        logger.debug(
            "Selected %d keyphrases from %d candidates", len(accepted), len(ranked)
        )
        return accepted
