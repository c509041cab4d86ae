"""Extractive summarization by graph-centrality sentence ranking.

Sentences are nodes of a graph weighted by the overlap coefficient of
their content tokens. A damped PageRank-style iteration scores each
sentence, and the top sentences are returned in document order.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from notedigest.text.similarity import overlap_coefficient
from notedigest.text.tokenizer import Tokenizer
from notedigest.utils.config import SummarizerConfig
from notedigest.utils.logger import get_logger

logger = get_logger(__name__)

SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?])\s+")


@dataclass(frozen=True)
class SummaryResult:
    """Selected summary sentences and the full sentence split."""

    summary: tuple[str, ...]
    sentences: tuple[str, ...]


def split_sentences(text: str) -> list[str]:
    """Split on terminal punctuation followed by whitespace."""
    return [s.strip() for s in SENTENCE_BOUNDARY_RE.split(text) if s.strip()]


class ExtractiveSummarizer:
    """Selects the most central sentences of a text.

    Args:
        config: Damping factor, iteration bound, and convergence tolerance.
        tokenizer: Tokenizer producing sentence token sets.
    """

    def __init__(
        self,
        config: SummarizerConfig | None = None,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        self.config = config or SummarizerConfig()
        self.tokenizer = tokenizer or Tokenizer()

    def similarity_matrix(self, sentences: Sequence[str]) -> np.ndarray:
        """Build the symmetric pairwise overlap matrix with a zero diagonal.

        Args:
            sentences: Sentences to compare.

        Returns:
            ``n x n`` float array of similarity scores.
        """
        token_sets = [self.tokenizer.token_set(s) for s in sentences]
        n = len(sentences)
        sim = np.zeros((n, n), dtype=np.float64)
        for i in range(n):
            for j in range(i + 1, n):
                score = overlap_coefficient(token_sets[i], token_sets[j])
                sim[i, j] = score
                sim[j, i] = score
        return sim

    def rank(self, sim: np.ndarray) -> np.ndarray:
        """Score graph nodes by damped iterative centrality.

        Each node passes ``damping * score`` to its neighbours in
        proportion to edge weight. Rows summing to zero pass nothing.
        Iteration stops after ``max_iterations`` or once the total
        absolute change falls below ``tolerance``.

        Args:
            sim: Square similarity matrix with a zero diagonal.

        Returns:
            Score per node.
        """
        n = sim.shape[0]
        if n == 0:
            return np.zeros(0)

        damping = self.config.damping
        row_sums = sim.sum(axis=1)
        transition = np.divide(
            sim,
            row_sums[:, np.newaxis],
            out=np.zeros_like(sim),
            where=row_sums[:, np.newaxis] > 0,
        )

        scores = np.full(n, 1.0 / n)
        for iteration in range(1, self.config.max_iterations + 1):
            updated = (1.0 - damping) / n + damping * (transition.T @ scores)
            delta = float(np.abs(updated - scores).sum())
            scores = updated
            if delta < self.config.tolerance:
                logger.debug(
                    "Sentence ranking converged after %d iterations", iteration
                )
                break
        return scores

    def summarize(self, text: str, max_sentences: int | None = None) -> SummaryResult:
        """Pick up to ``max_sentences`` central sentences in document order.

        Args:
            text: Cleaned text to summarize.
            max_sentences: Sentence budget. Defaults to the configured count.

        Returns:
            Summary sentences plus every split sentence.
        """
        limit = (
            self.config.default_sentences if max_sentences is None else max_sentences
        )
        sentences = tuple(split_sentences(text))
        if limit <= 0:
            return SummaryResult(summary=(), sentences=sentences)
        if len(sentences) <= limit:
            return SummaryResult(summary=sentences, sentences=sentences)

        scores = self.rank(self.similarity_matrix(sentences))
        top = np.argsort(-scores, kind="stable")[:limit]
        chosen = sorted(int(i) for i in top)

        logger.info("Summarized %d sentences down to %d", len(sentences), len(chosen))
        return SummaryResult(
            summary=tuple(sentences[i] for i in chosen),
            sentences=sentences,
        )

    def extract(self, text: str, max_sentences: int | None = None) -> list[str]:
        """Return only the summary sentences of :meth:`summarize`."""
        return list(self.summarize(text, max_sentences).summary)
