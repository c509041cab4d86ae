"""Pydantic request/response schemas for the FastAPI endpoints."""

from pydantic import BaseModel, Field


class TextRequest(BaseModel):
    """Request body carrying raw or cleaned document text."""

    text: str = ""


class CleanResponse(BaseModel):
    """Response schema for the cleaning endpoint."""

    cleaned_text: str
    kept_lines: int
    dropped_lines: int


class SummarizeRequest(TextRequest):
    """Request body for extractive summarization."""

    max_sentences: int | None = Field(default=None, ge=0)


class SummarizeResponse(BaseModel):
    """Response schema for extractive summarization."""

    summary: list[str]
    sentence_count: int


class KeyphraseRequest(TextRequest):
    """Request body for keyphrase extraction."""

    top_k: int | None = Field(default=None, ge=0)


class KeyphraseResponse(BaseModel):
    """Response schema for keyphrase extraction."""

    keyphrases: list[str]


class RetrieveRequest(BaseModel):
    """Request body for question-focused retrieval."""

    question: str
    context: str = ""
    top_k: int | None = Field(default=None, ge=0)


class RetrieveResponse(BaseModel):
    """Response schema for question-focused retrieval."""

    paragraphs: list[str]
    focused_context: str


class DigestRequest(TextRequest):
    """Request body for the combined clean/summarize/keyphrase run."""

    max_sentences: int | None = Field(default=None, ge=0)
    top_k: int | None = Field(default=None, ge=0)


class DigestResponse(BaseModel):
    """Response schema for the combined digest run."""

    cleaned_text: str
    summary: list[str]
    keyphrases: list[str]
    processing_time_ms: float


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
