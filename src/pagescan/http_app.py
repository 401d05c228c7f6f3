"""FastAPI app.

Exposes the analyses as discoverable tools plus a combined report endpoint.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel, Field

from .domain.errors import (
    InvalidInputError,
    InvalidURLError,
    NetworkTimeoutError,
    PageRetrievalError,
    PageScanDomainError,
    ToolNotFoundError,
)
from .domain.models import ErrorCode
from .lifespan import app_state
from .observability.logger import get_logger
from .services.payloads import serialize_report

logger = get_logger(__name__)

app = FastAPI(title="PageScan", version="0.1.0")


class AnalyzeRequest(BaseModel):
    url: str = Field(..., min_length=1)


def _error_detail(code: ErrorCode, exc: PageScanDomainError) -> dict:
    info = getattr(exc, "info", None)
    return {
        "errorCode": code.value,
        "errorMessage": str(exc),
        "detail": info.detail if info else None,
    }


def _to_http_exception(exc: PageScanDomainError) -> HTTPException:
    if isinstance(exc, PageRetrievalError):
        detail = _error_detail(ErrorCode.RETRIEVAL_FAILED, exc)
        detail["upstreamStatus"] = exc.status
        return HTTPException(status_code=502, detail=detail)
    if isinstance(exc, NetworkTimeoutError):
        return HTTPException(status_code=504, detail=_error_detail(ErrorCode.NETWORK_TIMEOUT, exc))
    if isinstance(exc, ToolNotFoundError):
        return HTTPException(status_code=404, detail=_error_detail(ErrorCode.TOOL_NOT_FOUND, exc))
    if isinstance(exc, InvalidURLError):
        return HTTPException(status_code=400, detail=_error_detail(ErrorCode.INVALID_URL, exc))
    if isinstance(exc, InvalidInputError):
        return HTTPException(status_code=400, detail=_error_detail(ErrorCode.INVALID_INPUT, exc))
    return HTTPException(status_code=500, detail=_error_detail(ErrorCode.INTERNAL_ERROR, exc))


def _require(key: str):
    value = app_state.get(key)
    if value is None:
        raise HTTPException(status_code=503, detail=f"{key}_unavailable")
    return value


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}


@app.get("/discovery")
async def discovery():
    return _require("tool_registry").discovery()


@app.post("/tools/{name}")
async def invoke_tool(name: str, payload: Optional[Dict[str, Any]] = Body(default=None)):
    registry = _require("tool_registry")

    # Accept both {"parameters": {...}} and a bare parameter object.
    payload = payload or {}
    parameters = payload.get("parameters", payload)
    if not isinstance(parameters, dict):
        raise HTTPException(status_code=400, detail="parameters_must_be_object")

    try:
        return await registry.invoke(name, parameters)
    except PageScanDomainError as exc:
        logger.warning("tool_failed", tool=name, error=str(exc))
        raise _to_http_exception(exc) from exc


@app.post("/api/v1/analyze")
async def analyze(payload: AnalyzeRequest):
    service = _require("analysis_service")
    try:
        report = await service.analyze_page(payload.url)
    except PageScanDomainError as exc:
        logger.warning("analysis_failed", url=payload.url, error=str(exc))
        raise _to_http_exception(exc) from exc
    return serialize_report(report)
