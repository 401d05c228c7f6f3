"""Domain-specific errors.

These errors are mapped to HTTP status codes in the transport layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class PageScanDomainError(Exception):
    """Base class for all domain errors."""


@dataclass(frozen=True)
class DomainErrorInfo:
    code: str
    message: str
    detail: Optional[str] = None


class InvalidInputError(PageScanDomainError):
    """Raised when request validation fails."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.info = DomainErrorInfo(code="INVALID_INPUT", message=message, detail=detail)


class InvalidURLError(PageScanDomainError):
    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.info = DomainErrorInfo(code="INVALID_URL", message=message, detail=detail)


class NetworkTimeoutError(PageScanDomainError):
    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.info = DomainErrorInfo(code="NETWORK_TIMEOUT", message=message, detail=detail)


class PageRetrievalError(PageScanDomainError):
    """The page answered with a non-success status. Scoring never starts."""

    def __init__(self, url: str, status: int, detail: str | None = None):
        super().__init__(f"Failed to fetch {url}: {status}")
        self.url = url
        self.status = status
        self.info = DomainErrorInfo(
            code="RETRIEVAL_FAILED",
            message=f"Failed to fetch {url}: {status}",
            detail=detail,
        )


class ToolNotFoundError(PageScanDomainError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name
        self.info = DomainErrorInfo(code="TOOL_NOT_FOUND", message=f"Unknown tool: {name}")
