"""Configuration management for the note digest pipeline.

Loads and validates YAML configuration with sensible defaults
for tokenizing, cleaning, keyphrase extraction, summarization,
and retrieval settings.
"""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class TokenizerConfig(BaseModel):
    """Configuration for content-token extraction."""

    min_token_length: int = Field(default=3, ge=1)
    extra_stopwords: list[str] = Field(default_factory=list)


class CleanerConfig(BaseModel):
    """Configuration for the OCR noise cleaner."""

    duplicate_threshold: float = Field(default=0.92, ge=0.0, le=1.0)
    header_min_tokens: int = Field(default=4, ge=0)
    reference_min_tokens: int = Field(default=6, ge=0)
    institution_abbreviations: list[str] = Field(default_factory=lambda: ["kuet"])
    publishers: list[str] = Field(
        default_factory=lambda: [
            "wiley",
            "mcgraw[- ]hill",
            "pearson",
            "prentice",
            "elsevier",
            "springer",
            "addison[- ]wesley",
            "academic press",
            "cambridge",
            "oxford",
            "artech",
            "crc press",
        ]
    )
    topic_cues: list[str] = Field(
        default_factory=lambda: [
            "definition",
            "frequency reuse",
            "interference",
            "types of",
            "co[-\\s]?channel",
            "adjacent channel",
            "capacity",
            "distance",
            "method",
            "approach",
            "concept",
            "cell splitting",
            "sectoring",
            "microcell",
            "femtocell",
            "advantages",
            "improving coverage",
            "signal to interference",
            "umbrella cell",
            "problem",
            "solution",
        ]
    )
    domain_terms: list[str] = Field(
        default_factory=lambda: [
            "cell",
            "cells",
            "hexagonal",
            "frequency",
            "reuse",
            "capacity",
            "interference",
            "channel",
            "adjacent",
            "sectoring",
            "splitting",
            "umbrella",
            "microcell",
            "femtocell",
            "qos",
            "sinr",
            "ratio",
            "distance",
            "path",
            "loss",
            "neighbor",
            "cluster",
            "assignment",
            "method",
            "definition",
            "concept",
            "coverage",
            "power",
            "antenna",
            "base",
            "station",
            "problem",
            "solution",
            "zone",
        ]
    )


class KeyphraseConfig(BaseModel):
    """Configuration for n-gram keyphrase ranking."""

    default_top_k: int = Field(default=12, ge=0)
    acronym_boost: int = 6
    alphanumeric_boost: int = 4
    min_phrase_chars: int = Field(default=3, ge=0)
    max_phrase_chars: int = Field(default=50, ge=1)


class SummarizerConfig(BaseModel):
    """Configuration for graph-centrality sentence ranking."""

    default_sentences: int = Field(default=5, ge=0)
    damping: float = Field(default=0.85, gt=0.0, lt=1.0)
    max_iterations: int = Field(default=30, ge=1)
    tolerance: float = Field(default=1e-4, gt=0.0)


class RetrievalConfig(BaseModel):
    """Configuration for question-focused paragraph retrieval."""

    top_k: int = Field(default=3, ge=0)
    max_context_chars: int = Field(default=12000, ge=1)
    tiebreak_short_terms: bool = True


class AppConfig(BaseModel):
    """Top-level application configuration."""

    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)
    cleaner: CleanerConfig = Field(default_factory=CleanerConfig)
    keyphrases: KeyphraseConfig = Field(default_factory=KeyphraseConfig)
    summarizer: SummarizerConfig = Field(default_factory=SummarizerConfig)
    retrieval: RetrievalConfig = Field(default_factory=RetrievalConfig)
    log_level: str = "INFO"


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.
            Defaults to configs/config.yaml.

    Returns:
        Validated application configuration.
    """
    if path is None:
        path = Path("configs/config.yaml")

    if path.exists():
        logger.info("Loading configuration from %s", path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        return AppConfig(**raw)

    logger.info("No config file found at %s, using defaults", path)
    return AppConfig()
