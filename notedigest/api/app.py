"""FastAPI application exposing the note digest pipeline.

Provides REST endpoints for cleaning, summarization, keyphrase
extraction, question-focused retrieval, and health checks.
"""

import time

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from notedigest.pipeline import DocumentPipeline
from notedigest.utils.config import load_config
from notedigest.utils.logger import get_logger

from .schemas import (
    CleanResponse,
    DigestRequest,
    DigestResponse,
    HealthResponse,
    KeyphraseRequest,
    KeyphraseResponse,
    RetrieveRequest,
    RetrieveResponse,
    SummarizeRequest,
    SummarizeResponse,
    TextRequest,
)

logger = get_logger(__name__)

API_VERSION = "1.0.0"

app = FastAPI(
    title="Note Digest API",
    description="Clean, summarize, and query OCR-derived lecture notes",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_pipeline() -> DocumentPipeline:
    """Build a pipeline from the current configuration file."""
    return DocumentPipeline(load_config())


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return service health status."""
    return HealthResponse(status="healthy", version=API_VERSION)


@app.post("/clean", response_model=CleanResponse)
async def clean_text(request: TextRequest) -> CleanResponse:
    """Strip headers, reference blocks, and duplicate lines from raw text."""
    try:
        report = _get_pipeline().analyze(request.text)
    except Exception as exc:
        logger.error("Cleaning failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return CleanResponse(
        cleaned_text=report.text,
        kept_lines=len(report.kept_lines),
        dropped_lines=len(report.dropped),
    )


@app.post("/summarize", response_model=SummarizeResponse)
async def summarize_text(request: SummarizeRequest) -> SummarizeResponse:
    """Return the most central sentences of the text in document order."""
    try:
        result = _get_pipeline().summarizer.summarize(
            request.text, request.max_sentences
        )
    except Exception as exc:
        logger.error("Summarization failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return SummarizeResponse(
        summary=result.summary, sentence_count=len(result.sentences)
    )


@app.post("/keyphrases", response_model=KeyphraseResponse)
async def extract_keyphrases(request: KeyphraseRequest) -> KeyphraseResponse:
    """Return ranked, non-overlapping keyphrases."""
    try:
        phrases = _get_pipeline().extract_keyphrases(request.text, request.top_k)
    except Exception as exc:
        logger.error("Keyphrase extraction failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return KeyphraseResponse(keyphrases=phrases)


@app.post("/retrieve", response_model=RetrieveResponse)
async def retrieve_paragraphs(request: RetrieveRequest) -> RetrieveResponse:
    """Return the context paragraphs most relevant to the question.

    The context is truncated to the configured character budget first.
    """
    try:
        pipeline = _get_pipeline()
        paragraphs = pipeline.retrieve_relevant(
            request.question, pipeline.truncate(request.context), request.top_k
        )
    except Exception as exc:
        logger.error("Retrieval failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return RetrieveResponse(
        paragraphs=paragraphs, focused_context="\n\n".join(paragraphs)
    )


@app.post("/digest", response_model=DigestResponse)
async def digest_text(request: DigestRequest) -> DigestResponse:
    """Clean raw text, then summarize it and extract keyphrases."""
    start_time = time.time()
    try:
        result = _get_pipeline().digest(
            request.text, request.max_sentences, request.top_k
        )
    except Exception as exc:
        logger.error("Digest failed: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    return DigestResponse(
        cleaned_text=result.cleaned_text,
        summary=result.summary,
        keyphrases=result.keyphrases,
        processing_time_ms=(time.time() - start_time) * 1000,
    )
