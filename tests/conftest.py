"""Shared test fixtures for the note digest test suite."""

from pathlib import Path

import pytest

from notedigest.pipeline import DocumentPipeline


@pytest.fixture
def noisy_lecture_text() -> str:
    """Raw OCR text of a lecture slide with headers and a reference block."""
    return "\n".join(
        [
            "Department of Electrical and Electronic Engineering, KUET",
            "Course Code: ECE 4107",
            "• Frequency reuse allows the same channels to be assigned to cells far apart.",
            "Cellular Concept",
            "Thank you",
            "References",
            "Wireless Communications by Theodore Rappaport",
            "Prentice Hall",
            "2nd edition",
            "Cell splitting increases capacity by subdividing congested cells "
            "into smaller cells.",
            "Frequency reuse allows the same channels to be assigned to cells far apart.",
        ]
    )


@pytest.fixture
def ten_sentence_text() -> str:
    """Ten sentences about cellular networks with overlapping vocabulary."""
    return " ".join(
        [
            "Cellular networks divide a service area into hexagonal cells.",
            "Each cell is served by a base station with its own antenna.",
            "Frequency reuse lets distant cells share the same channel set.",
            "Co-channel interference grows when reused cells sit too close together.",
            "Cell splitting divides congested cells into smaller cells to raise capacity.",
            "Sectoring uses directional antennas to reduce co-channel interference.",
            "The reuse distance depends on the cluster size and the cell radius.",
            "Handoff moves an active call from one base station to another.",
            "Umbrella cells cover fast moving users above a layer of microcells.",
            "Capacity planning balances interference, coverage, and channel reuse.",
        ]
    )


@pytest.fixture
def pipeline() -> DocumentPipeline:
    """Pipeline with default configuration."""
    return DocumentPipeline()


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root: Path) -> Path:
    """Return the configs directory path."""
    return project_root / "configs"
