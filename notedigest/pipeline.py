"""Unified note digest pipeline.

Wires the tokenizer, cleaner, keyphrase extractor, summarizer, and
retriever from a single configuration object. Instances hold only
read-only configuration and may be shared across threads.
"""

from dataclasses import dataclass

from notedigest.analysis.keyphrases import KeyphraseExtractor
from notedigest.analysis.summarizer import ExtractiveSummarizer
from notedigest.cleaning.cleaner import CleaningReport, TextCleaner
from notedigest.retrieval.retriever import RelevanceRetriever
from notedigest.text.tokenizer import STOPWORDS, Tokenizer
from notedigest.utils.config import AppConfig
from notedigest.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DigestResult:
    """Cleaned text with its summary and keyphrases."""

    cleaned_text: str
    summary: tuple[str, ...]
    keyphrases: tuple[str, ...]


class DocumentPipeline:
    """Text-in, text-out document intelligence pipeline.

    Args:
        config: Application configuration. Defaults are used when omitted.
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self.tokenizer = Tokenizer(
            stopwords=STOPWORDS | set(self.config.tokenizer.extra_stopwords),
            min_length=self.config.tokenizer.min_token_length,
        )
        self.cleaner = TextCleaner(self.config.cleaner, self.tokenizer)
        self.keyphrase_extractor = KeyphraseExtractor(
            self.config.keyphrases, self.tokenizer
        )
        self.summarizer = ExtractiveSummarizer(self.config.summarizer, self.tokenizer)
        self.retriever = RelevanceRetriever(self.config.retrieval, self.tokenizer)

    def clean(self, text: str) -> str:
        return self.cleaner.clean(text)

    def analyze(self, text: str) -> CleaningReport:
        return self.cleaner.analyze(text)

    def extract_summary(self, text: str, max_sentences: int | None = None) -> list[str]:
        return self.summarizer.extract(text, max_sentences)

    def extract_keyphrases(self, text: str, top_k: int | None = None) -> list[str]:
        return self.keyphrase_extractor.extract(text, top_k)

    def retrieve_relevant(
        self, question: str, context: str, top_k: int | None = None
    ) -> list[str]:
        return self.retriever.retrieve(question, context, top_k)

    def truncate(self, text: str) -> str:
        """Cap ``text`` at the configured context budget."""
        return text[: self.config.retrieval.max_context_chars]

    def digest(
        self,
        text: str,
        max_sentences: int | None = None,
        top_k: int | None = None,
    ) -> DigestResult:
        """Clean raw text, then summarize it and extract keyphrases.

        The cleaned text is truncated to ``max_context_chars`` before
        ranking, which bounds the summarizer's quadratic cost.

        Args:
            text: Raw OCR or PDF-extracted text.
            max_sentences: Summary sentence budget.
            top_k: Keyphrase budget.

        Returns:
            Digest with cleaned text, summary, and keyphrases.
        """
        cleaned = self.truncate(self.clean(text))
        result = DigestResult(
            cleaned_text=cleaned,
            summary=tuple(self.extract_summary(cleaned, max_sentences)),
            keyphrases=tuple(self.extract_keyphrases(cleaned, top_k)),
        )
        logger.info(
            "Digest produced %d summary sentences and %d keyphrases",
            len(result.summary),
            len(result.keyphrases),
        )
        return result

    def focus_context(
        self, question: str, context: str, top_k: int | None = None
    ) -> str:
        """Truncate ``context`` and join the paragraphs most relevant to ``question``.

        Returns:
            Retrieved paragraphs separated by blank lines, ready to be
            placed in a language-model prompt.
        """
        return self.retriever.focus(question, self.truncate(context), top_k)
