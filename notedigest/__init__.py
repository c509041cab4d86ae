"""Note digest: OCR text cleaning, summarization, and retrieval.

A pure text-processing core that turns noisy OCR-derived lecture notes
into cleaned text, an extractive summary, ranked keyphrases, and the
paragraphs most relevant to a question.
"""

from notedigest.pipeline import DigestResult, DocumentPipeline

__all__ = [
    "DigestResult",
    "DocumentPipeline",
    "clean",
    "extract_keyphrases",
    "extract_summary",
    "retrieve_relevant",
]

_pipeline = DocumentPipeline()


def clean(text: str) -> str:
    """Remove headers, reference blocks, and near-duplicate lines."""
    return _pipeline.clean(text)


def extract_summary(text: str, max_sentences: int = 5) -> list[str]:
    """Return up to ``max_sentences`` central sentences in document order."""
    return _pipeline.extract_summary(text, max_sentences)


def extract_keyphrases(text: str, top_k: int = 12) -> list[str]:
    """Return up to ``top_k`` ranked, non-overlapping keyphrases."""
    return _pipeline.extract_keyphrases(text, top_k)


def retrieve_relevant(question: str, context: str, top_k: int = 3) -> list[str]:
    """Return the ``top_k`` paragraphs of ``context`` most relevant to ``question``."""
    return _pipeline.retrieve_relevant(question, context, top_k)
