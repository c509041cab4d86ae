"""Line-oriented cleaner for OCR-derived lecture and slide text.

Removes institutional headers, reference/bibliography blocks, short
prose fragments, and near-duplicate lines while keeping short domain
headings. The result feeds summarization, keyphrase extraction, and
question-focused retrieval.
"""

from dataclasses import dataclass, field

from notedigest.text.similarity import jaccard
from notedigest.text.tokenizer import Tokenizer
from notedigest.utils.config import CleanerConfig
from notedigest.utils.logger import get_logger

from .rules import (
    DIGIT_OR_QUESTION_RE,
    RuleSet,
    count_capitalized_words,
    normalize_line,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class LineDecision:
    """Why a normalized line was dropped during cleaning."""

    line: str
    reason: str


@dataclass(frozen=True)
class CleaningReport:
    """Outcome of cleaning a document.

    Attributes:
        text: Kept lines joined with newlines.
        kept_lines: Kept lines in document order.
        dropped: Dropped lines with the rule that removed each one.
    """

    text: str
    kept_lines: tuple[str, ...] = ()
    dropped: tuple[LineDecision, ...] = field(default_factory=tuple)


class TextCleaner:
    """Filters boilerplate and bibliographic noise out of raw OCR text.

    Lines are processed in order with a single references-block state
    flag, then near-duplicates are removed by Jaccard similarity of
    their content-token sets.

    Args:
        config: Cleaner thresholds and vocabulary lists.
        tokenizer: Tokenizer used for content-token counts and sets.
    """

    def __init__(
        self,
        config: CleanerConfig | None = None,
        tokenizer: Tokenizer | None = None,
    ) -> None:
        self.config = config or CleanerConfig()
        self.tokenizer = tokenizer or Tokenizer()
        self.rules = RuleSet.from_config(self.config)
        self.domain_terms = frozenset(t.lower() for t in self.config.domain_terms)

    def clean(self, text: str) -> str:
        """Return ``text`` with noise lines removed, one kept line per line."""
        return self.analyze(text).text

    def analyze(self, text: str) -> CleaningReport:
        """Clean ``text`` and report the reason each dropped line was removed.

        Args:
            text: Raw OCR or PDF-extracted text.

        Returns:
            Cleaning report with the cleaned text and per-line decisions.
        """
        if not text:
            return CleaningReport(text="")

        dropped: list[LineDecision] = []
        candidates = self._filter_lines(text, dropped)
        kept = self._deduplicate(candidates, dropped)

        logger.info(
            "Cleaning kept %d lines, dropped %d",
            len(kept),
            len(dropped),
        )
        return CleaningReport(
            text="\n".join(kept),
            kept_lines=tuple(kept),
            dropped=tuple(dropped),
        )

    def _filter_lines(self, text: str, dropped: list[LineDecision]) -> list[str]:
        """Apply the reference-block state machine and header filters."""
        kept: list[str] = []
        in_references = False

        for raw_line in text.splitlines():
            line = normalize_line(raw_line)
            if not line:
                continue

            if self.rules.is_reference_heading(line):
                in_references = True
                dropped.append(LineDecision(line, "reference_heading"))
                continue

            if in_references:
                if self.rules.is_topic_cue(line):
                    in_references = False
                else:
                    if self._is_reference_item(line):
                        dropped.append(LineDecision(line, "reference_item"))
                        continue
                    if (
                        len(self.tokenizer.content_tokens(line))
                        < self.config.reference_min_tokens
                    ):
                        dropped.append(LineDecision(line, "reference_residue"))
                        continue
                    in_references = False

            reason = self._header_reason(line)
            if reason:
                dropped.append(LineDecision(line, reason))
                continue

            stripped = self.rules.strip_tail(line)
            if not stripped:
                dropped.append(LineDecision(line, "empty_after_tail"))
                continue

            kept.append(stripped)

        return kept

    def _is_reference_item(self, line: str) -> bool:
        if self.rules.match_reference_item(line):
            return True
        # Title-case book lines: several capitalized words, little content.
        return (
            count_capitalized_words(line) >= 3
            and len(self.tokenizer.content_tokens(line))
            < self.config.reference_min_tokens
        )

    def _header_reason(self, line: str) -> str | None:
        """Return the header-noise classification of ``line``, if any."""
        if self.rules.match_header(line):
            return "institution_header"

        tokens = self.tokenizer.content_tokens(line)
        if (
            len(tokens) < self.config.header_min_tokens
            and not DIGIT_OR_QUESTION_RE.search(line)
            and not any(tok in self.domain_terms for tok in tokens)
        ):
            return "short_line"

        if self.rules.is_caps_institution(line):
            return "caps_institution"
        return None

    def _deduplicate(
        self, lines: list[str], dropped: list[LineDecision]
    ) -> list[str]:
        """Drop lines whose token set is a near-copy of an earlier kept line."""
        kept: list[str] = []
        seen: list[frozenset[str]] = []
        threshold = self.config.duplicate_threshold

        for line in lines:
            tokens = self.tokenizer.token_set(line)
            if any(jaccard(tokens, prev) >= threshold for prev in seen):
                dropped.append(LineDecision(line, "near_duplicate"))
                continue
            kept.append(line)
            seen.append(tokens)

        return kept
