"""Tests for the FastAPI REST endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from notedigest.api.app import app
from notedigest.pipeline import DocumentPipeline


@pytest.fixture
def client() -> TestClient:
    """Create a FastAPI test client."""
    return TestClient(app)


class TestHealthEndpoint:
    """Tests for the /health endpoint."""

    def test_health_returns_ok(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "version": "1.0.0"}


class TestCleanEndpoint:
    """Tests for the /clean endpoint."""

    def test_clean(self, client: TestClient, noisy_lecture_text: str) -> None:
        response = client.post("/clean", json={"text": noisy_lecture_text})
        assert response.status_code == 200
        data = response.json()
        assert "KUET" not in data["cleaned_text"]
        assert data["kept_lines"] == 3
        assert data["dropped_lines"] == 8

    def test_empty_text(self, client: TestClient) -> None:
        response = client.post("/clean", json={"text": ""})
        assert response.status_code == 200
        assert response.json()["cleaned_text"] == ""

    def test_internal_error(self, client: TestClient) -> None:
        with patch.object(
            DocumentPipeline, "analyze", side_effect=RuntimeError("boom")
        ):
            response = client.post("/clean", json={"text": "anything"})
        assert response.status_code == 500
        assert response.json()["detail"] == "boom"


class TestSummarizeEndpoint:
    """Tests for the /summarize endpoint."""

    def test_summarize(self, client: TestClient, ten_sentence_text: str) -> None:
        response = client.post(
            "/summarize", json={"text": ten_sentence_text, "max_sentences": 3}
        )
        assert response.status_code == 200
        data = response.json()
        assert len(data["summary"]) == 3
        assert data["sentence_count"] == 10

    def test_negative_budget_rejected(self, client: TestClient) -> None:
        response = client.post("/summarize", json={"text": "x", "max_sentences": -1})
        assert response.status_code == 422


class TestKeyphrasesEndpoint:
    """Tests for the /keyphrases endpoint."""

    def test_keyphrases(self, client: TestClient) -> None:
        response = client.post(
            "/keyphrases",
            json={"text": "RSA RSA RSA key exchange key exchange", "top_k": 2},
        )
        assert response.status_code == 200
        assert response.json()["keyphrases"] == ["rsa", "key exchange"]


class TestRetrieveEndpoint:
    """Tests for the /retrieve endpoint."""

    def test_retrieve(self, client: TestClient) -> None:
        response = client.post(
            "/retrieve",
            json={
                "question": "What is Y?",
                "context": "A1. X is true.\n\nA2. Y follows from X.",
                "top_k": 2,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["paragraphs"] == ["A2. Y follows from X.", "A1. X is true."]
        assert data["focused_context"] == "A2. Y follows from X.\n\nA1. X is true."

    def test_missing_question(self, client: TestClient) -> None:
        response = client.post("/retrieve", json={"context": "notes"})
        assert response.status_code == 422


class TestDigestEndpoint:
    """Tests for the /digest endpoint."""

    def test_digest(self, client: TestClient, noisy_lecture_text: str) -> None:
        response = client.post(
            "/digest", json={"text": noisy_lecture_text, "top_k": 3}
        )
        assert response.status_code == 200
        data = response.json()
        assert "Rappaport" not in data["cleaned_text"]
        assert len(data["keyphrases"]) <= 3
        assert data["summary"]
        assert data["processing_time_ms"] >= 0
