"""Tests for logging setup and the stage-summary records each component emits."""

import io
import logging
import re
from collections.abc import Iterator

import numpy as np
import pytest

from notedigest.analysis.keyphrases import KeyphraseExtractor
from notedigest.analysis.summarizer import ExtractiveSummarizer, split_sentences
from notedigest.cleaning.cleaner import TextCleaner
from notedigest.pipeline import DocumentPipeline
from notedigest.retrieval.retriever import RelevanceRetriever
from notedigest.utils.config import SummarizerConfig
from notedigest.utils.logger import PACKAGE_LOGGER, get_logger, setup_logging


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """Restore the package logger's handlers and level after each test."""
    pkg = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(pkg.handlers), pkg.level
    pkg.handlers.clear()
    yield pkg
    pkg.handlers[:] = handlers
    pkg.setLevel(level)


def _messages(caplog: pytest.LogCaptureFixture, name: str) -> list[str]:
    return [r.getMessage() for r in caplog.records if r.name == name]


class TestSetupLogging:
    """Tests for console logging configuration."""

    def test_writes_formatted_records_to_stream(
        self, package_logger: logging.Logger
    ) -> None:
        stream = io.StringIO()
        setup_logging("DEBUG", stream=stream)
        get_logger("notedigest.cleaning.cleaner").debug("kept %d", 3)

        line = stream.getvalue().strip()
        assert re.match(
            r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} - notedigest\.cleaning\.cleaner"
            r" - DEBUG - kept 3$",
            line,
        )

    def test_repeat_calls_reuse_handler_and_update_level(
        self, package_logger: logging.Logger
    ) -> None:
        setup_logging("INFO", stream=io.StringIO())
        count = len(package_logger.handlers)
        setup_logging("warning", stream=io.StringIO())
        assert len(package_logger.handlers) == count
        assert package_logger.level == logging.WARNING

    def test_unknown_level_means_info(self, package_logger: logging.Logger) -> None:
        setup_logging("CHATTY", stream=io.StringIO())
        assert package_logger.level == logging.INFO

    def test_root_logger_untouched(self, package_logger: logging.Logger) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        setup_logging("DEBUG", stream=io.StringIO())
        assert root.handlers == before


class TestStageRecords:
    """Each processing stage reports a one-line summary of its work."""

    @pytest.fixture(autouse=True)
    def _capture_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger=PACKAGE_LOGGER)

    def test_cleaner_reports_kept_and_dropped(
        self, caplog: pytest.LogCaptureFixture, noisy_lecture_text: str
    ) -> None:
        TextCleaner().analyze(noisy_lecture_text)
        assert _messages(caplog, "notedigest.cleaning.cleaner") == [
            "Cleaning kept 3 lines, dropped 8"
        ]

    def test_summarizer_reports_selection(
        self, caplog: pytest.LogCaptureFixture, ten_sentence_text: str
    ) -> None:
        ExtractiveSummarizer().summarize(ten_sentence_text, 3)
        assert "Summarized 10 sentences down to 3" in _messages(
            caplog, "notedigest.analysis.summarizer"
        )

    def test_summarizer_reports_convergence(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        summarizer = ExtractiveSummarizer(SummarizerConfig(tolerance=10.0))
        sentences = split_sentences("Apple banana. Apple grape. Banana kiwi.")
        summarizer.rank(summarizer.similarity_matrix(sentences))
        assert _messages(caplog, "notedigest.analysis.summarizer") == [
            "Sentence ranking converged after 1 iterations"
        ]

    def test_no_convergence_record_when_bound_hit(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        sim = np.array([[0.0, 1.0, 0.0], [1.0, 0.0, 1.0], [0.0, 1.0, 0.0]])
        ExtractiveSummarizer(SummarizerConfig(max_iterations=1)).rank(sim)
        assert _messages(caplog, "notedigest.analysis.summarizer") == []

    def test_keyphrase_selection_counts(self, caplog: pytest.LogCaptureFixture) -> None:
        phrases = KeyphraseExtractor().extract("RSA key exchange. RSA signatures.", 2)
        (message,) = _messages(caplog, "notedigest.analysis.keyphrases")
        match = re.fullmatch(
            r"Selected (\d+) keyphrases from (\d+) candidates", message
        )
        assert match is not None
        assert int(match.group(1)) == len(phrases)

    def test_retriever_reports_counts(self, caplog: pytest.LogCaptureFixture) -> None:
        RelevanceRetriever().retrieve(
            "handover", "Handover keeps calls alive.\n\nPower control.", 1
        )
        assert _messages(caplog, "notedigest.retrieval.retriever") == [
            "Retrieved 1 of 2 paragraphs"
        ]

    def test_digest_reports_output_sizes(
        self, caplog: pytest.LogCaptureFixture, noisy_lecture_text: str
    ) -> None:
        result = DocumentPipeline().digest(noisy_lecture_text)
        assert _messages(caplog, "notedigest.pipeline") == [
            f"Digest produced {len(result.summary)} summary sentences "
            f"and {len(result.keyphrases)} keyphrases"
        ]
        assert "Cleaning kept 3 lines, dropped 8" in _messages(
            caplog, "notedigest.cleaning.cleaner"
        )
