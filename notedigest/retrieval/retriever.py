"""Question-focused paragraph retrieval for prompt construction."""

import re
from dataclasses import dataclass

from notedigest.text.similarity import overlap_coefficient
from notedigest.text.tokenizer import Tokenizer
from notedigest.utils.config import RetrievalConfig
from notedigest.utils.logger import get_logger

logger = get_logger(__name__)

# Blank lines, or the start of a numbered item such as "12." or "3)".
PARAGRAPH_BOUNDARY_RE = re.compile(r"\n\s*\n|(?=^\s*\d{1,3}[.)]\s+)", re.MULTILINE)
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class ScoredParagraph:
    """A context paragraph with its relevance to a question."""

    text: str
    score: float
    position: int


def split_paragraphs(context: str) -> list[str]:
    """Split ``context`` into whitespace-normalized paragraphs.

    Args:
        context: Notes or document text.

    Returns:
        Non-empty paragraphs in order. A context without boundaries is
        returned as a single paragraph; a blank context yields none.
    """
    parts = [
        _WHITESPACE_RE.sub(" ", part).strip()
        for part in PARAGRAPH_BOUNDARY_RE.split(context)
    ]
    paragraphs = [p for p in parts if p]
    if paragraphs:
        return paragraphs
    whole = context.strip()
    return [whole] if whole else []


class RelevanceRetriever:
    """Ranks context paragraphs by token overlap with a question.

    The primary order is the overlap coefficient of content tokens,
    highest first. With ``tiebreak_short_terms`` on (the default), equal
    scores are further ordered by overlap of non-stopword terms of any
    length, so a question like ``"What is Y?"`` whose only term is too
    short to be a content token still prefers the paragraph naming
    ``Y``. This secondary key goes beyond plain document-order ties;
    turn the flag off to keep document order for every tie.

    Truncating the context to a prompt budget is the caller's job; see
    :meth:`notedigest.pipeline.DocumentPipeline.focus_context`.

    Args:
        config: Default number of paragraphs to return.
        tokenizer: Tokenizer producing question and paragraph token sets.
    """

    def __init__(
        self,
        config: RetrievalConfig | None = None,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        self.config = config or RetrievalConfig()
        self.tokenizer = tokenizer or Tokenizer()

    def rank(self, question: str, context: str) -> list[ScoredParagraph]:
        """Score every paragraph of ``context`` against ``question``.

        Paragraphs are ordered by the overlap coefficient of content
        tokens. Equal scores are ordered by overlap of short terms when
        ``tiebreak_short_terms`` is set, then by document order.

        Returns:
            All paragraphs, most relevant first.
        """
        query = self.tokenizer.token_set(question)
        query_terms = self.tokenizer.term_set(question)
        scored: list[tuple[ScoredParagraph, float]] = []
        for position, paragraph in enumerate(split_paragraphs(context)):
            entry = ScoredParagraph(
                text=paragraph,
                score=overlap_coefficient(query, self.tokenizer.token_set(paragraph)),
                position=position,
            )
            tiebreak = 0.0
            if self.config.tiebreak_short_terms:
                tiebreak = overlap_coefficient(
                    query_terms, self.tokenizer.term_set(paragraph)
                )
            scored.append((entry, tiebreak))

        scored.sort(key=lambda pair: (pair[0].score, pair[1]), reverse=True)
        return [entry for entry, _ in scored]

    def retrieve(
        self, question: str, context: str, top_k: int | None = None
    ) -> list[str]:
        """Return the ``top_k`` paragraphs most relevant to ``question``.

        Args:
            question: User question.
            context: Notes to search.
            top_k: Number of paragraphs. Defaults to the configured count.

        Returns:
            Paragraph texts, most relevant first.
        """
        limit = self.config.top_k if top_k is None else top_k
        if limit <= 0:
            return []
        ranked = self.rank(question, context)
        logger.debug(
            "Retrieved %d of %d paragraphs", min(limit, len(ranked)), len(ranked)
        )
        return [p.text for p in ranked[:limit]]

    def focus(self, question: str, context: str, top_k: int | None = None) -> str:
        """Join the retrieved paragraphs with blank lines for a prompt."""
        return "\n\n".join(self.retrieve(question, context, top_k))
