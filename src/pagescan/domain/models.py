"""Framework-agnostic domain models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(str, Enum):
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_URL = "INVALID_URL"
    NETWORK_TIMEOUT = "NETWORK_TIMEOUT"
    RETRIEVAL_FAILED = "RETRIEVAL_FAILED"
    TOOL_NOT_FOUND = "TOOL_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(frozen=True)
class FetchedPage:
    url: str
    status: int
    html: str
    truncated: bool = False


@dataclass(frozen=True)
class DensityMetrics:
    url: str
    word_count: int
    image_count: int
    heading_count: int
    avg_paragraph_length: int
    scanability_score: int
    notes: tuple[str, ...]


@dataclass(frozen=True)
class AccessibilityMetrics:
    url: str
    h1_count: int
    images_missing_alt: int
    unlabeled_buttons: int
    heading_order_issues: int
    accessibility_score: int
    notes: tuple[str, ...]


@dataclass(frozen=True)
class PageReport:
    """Both analyses computed from a single retrieval."""

    url: str
    density: DensityMetrics
    accessibility: AccessibilityMetrics
