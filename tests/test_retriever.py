"""Tests for question-focused paragraph retrieval."""

from notedigest.retrieval.retriever import (
    RelevanceRetriever,
    ScoredParagraph,
    split_paragraphs,
)
from notedigest.utils.config import RetrievalConfig

NOTES = (
    "Frequency reuse assigns the same channel set to distant cells.\n\n"
    "Handoff transfers an ongoing call between base stations.\n\n"
    "Cell splitting subdivides congested cells to increase capacity.\n\n"
    "Sectoring replaces omnidirectional antennas with directional antennas."
)


class TestSplitParagraphs:
    """Tests for paragraph splitting."""

    def test_blank_lines(self) -> None:
        assert split_paragraphs("First part.\n\nSecond part.\n \nThird part.") == [
            "First part.",
            "Second part.",
            "Third part.",
        ]

    def test_numbered_items(self) -> None:
        text = "1. Alpha beta gamma\n2. Delta epsilon\n3) Zeta eta"
        assert split_paragraphs(text) == [
            "1. Alpha beta gamma",
            "2. Delta epsilon",
            "3) Zeta eta",
        ]

    def test_whitespace_normalized(self) -> None:
        assert split_paragraphs("Line one\ncontinues   here.") == [
            "Line one continues here."
        ]

    def test_no_boundary_single_paragraph(self) -> None:
        assert split_paragraphs("  just one block  ") == ["just one block"]

    def test_four_digit_marker_is_not_a_boundary(self) -> None:
        assert split_paragraphs("Intro\n2024. was a year") == ["Intro 2024. was a year"]

    def test_empty(self) -> None:
        assert split_paragraphs("") == []
        assert split_paragraphs("\n\n  \n") == []


class TestRelevanceRetriever:
    """Tests for the RelevanceRetriever class."""

    def setup_method(self) -> None:
        self.retriever = RelevanceRetriever()

    def test_short_identifier_question(self) -> None:
        context = "A1. X is true.\n\nA2. Y follows from X."
        result = self.retriever.retrieve("What is Y?", context, 2)
        assert result == ["A2. Y follows from X.", "A1. X is true."]

    def test_most_relevant_first(self) -> None:
        result = self.retriever.retrieve(
            "How does cell splitting increase capacity?", NOTES
        )
        assert result[0].startswith("Cell splitting")

    def test_default_k_is_three(self) -> None:
        assert len(self.retriever.retrieve("antennas", NOTES)) == 3

    def test_at_most_k(self) -> None:
        assert len(self.retriever.retrieve("cells", NOTES, 10)) == 4
        assert self.retriever.retrieve("cells", NOTES, 0) == []

    def test_scores_non_increasing(self) -> None:
        ranked = self.retriever.rank("directional antennas for cells", NOTES)
        scores = [p.score for p in ranked]
        assert scores == sorted(scores, reverse=True)
        assert all(isinstance(p, ScoredParagraph) for p in ranked)
        assert all(0.0 <= p.score <= 1.0 for p in ranked)

    def test_ties_keep_document_order(self) -> None:
        ranked = self.retriever.rank("quantum entanglement", NOTES)
        assert [p.position for p in ranked] == [0, 1, 2, 3]
        assert all(p.score == 0.0 for p in ranked)

    def test_tiebreak_disabled_keeps_document_order(self) -> None:
        retriever = RelevanceRetriever(RetrievalConfig(tiebreak_short_terms=False))
        context = "A1. X is true.\n\nA2. Y follows from X."
        assert retriever.retrieve("What is Y?", context, 2) == [
            "A1. X is true.",
            "A2. Y follows from X.",
        ]

    def test_empty_inputs(self) -> None:
        assert self.retriever.retrieve("question", "") == []
        ranked = self.retriever.rank("", NOTES)
        assert [p.score for p in ranked] == [0.0] * 4

    def test_focus_joins_with_blank_lines(self) -> None:
        focused = self.retriever.focus("handoff base stations", NOTES, 2)
        parts = focused.split("\n\n")
        assert len(parts) == 2
        assert parts[0].startswith("Handoff")
