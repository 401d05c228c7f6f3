from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from pagescan.domain.errors import NetworkTimeoutError, PageRetrievalError
from pagescan.domain.models import FetchedPage
from pagescan.http_app import app
from pagescan.lifespan import app_state
from pagescan.scraping.page_fetcher import PageFetcher
from pagescan.services.analysis_service import PageAnalysisService
from pagescan.services.tool_registry import build_tool_registry

PAGES = {
    "https://example.com": '<h1>Title</h1><p>Hello <b>world</b></p><img src="a.png"><button></button>',
}


class StubFetcher:
    def __init__(self) -> None:
        self.calls: list[str] = []

    async def fetch_html(self, url: str) -> FetchedPage:
        self.calls.append(url)
        if url == "https://down.example.com":
            raise PageRetrievalError(url, 404)
        if url == "https://slow.example.com":
            raise NetworkTimeoutError(f"Network error while fetching {url}", detail="timeout")
        return FetchedPage(url=url, status=200, html=PAGES.get(url, ""))


def _install(fetcher) -> None:
    service = PageAnalysisService(fetcher=fetcher)
    app_state["analysis_service"] = service
    app_state["tool_registry"] = build_tool_registry(service)


@pytest.fixture
def fetcher():
    stub = StubFetcher()
    _install(stub)
    yield stub
    app_state.clear()


@pytest.fixture
def client(fetcher) -> TestClient:
    return TestClient(app)


def test_healthz(client: TestClient) -> None:
    assert client.get("/healthz").json() == {"status": "ok"}


def test_discovery_lists_tools(client: TestClient) -> None:
    functions = client.get("/discovery").json()["functions"]
    by_name = {f["name"]: f for f in functions}
    assert set(by_name) == {"content_density_evaluator", "accessibility_surface_check"}
    density = by_name["content_density_evaluator"]
    assert density["endpoint"] == "/tools/content_density_evaluator"
    assert density["http_method"] == "POST"
    assert density["parameters"] == [
        {"name": "url", "type": "string", "description": "URL to analyse", "required": True}
    ]


def test_density_tool_returns_camel_case_record(client: TestClient) -> None:
    resp = client.post("/tools/content_density_evaluator", json={"parameters": {"url": "https://example.com"}})
    assert resp.status_code == 200
    assert resp.json() == {
        "url": "https://example.com",
        "wordCount": 2,
        "imageCount": 1,
        "headingCount": 1,
        "avgParagraphLength": 2,
        "scanabilityScore": 100,
        "notes": [
            "Paragraph length seems reasonable.",
            "Contains imagery to break up text.",
            "Has headings to guide the reader.",
        ],
    }


def test_accessibility_tool_accepts_bare_parameters(client: TestClient) -> None:
    resp = client.post("/tools/accessibility_surface_check", json={"url": "https://example.com"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["h1Count"] == 1
    assert body["imagesMissingAlt"] == 1
    assert body["unlabeledButtons"] == 1
    assert body["headingOrderIssues"] == 0
    assert body["accessibilityScore"] == 95
    assert len(body["notes"]) == 4


def test_missing_parameter_is_bad_request(client: TestClient, fetcher: StubFetcher) -> None:
    resp = client.post("/tools/content_density_evaluator", json={"parameters": {}})
    assert resp.status_code == 400
    assert resp.json()["detail"]["errorCode"] == "INVALID_INPUT"
    assert fetcher.calls == []


def test_unknown_tool_is_not_found(client: TestClient) -> None:
    resp = client.post("/tools/sgc_greeting", json={"name": "x"})
    assert resp.status_code == 404
    assert resp.json()["detail"]["errorCode"] == "TOOL_NOT_FOUND"


def test_retrieval_failure_surfaces_status(client: TestClient) -> None:
    resp = client.post("/tools/content_density_evaluator", json={"url": "https://down.example.com"})
    assert resp.status_code == 502
    detail = resp.json()["detail"]
    assert detail["errorCode"] == "RETRIEVAL_FAILED"
    assert detail["upstreamStatus"] == 404
    assert detail["errorMessage"] == "Failed to fetch https://down.example.com: 404"


def test_network_error_is_gateway_timeout(client: TestClient) -> None:
    resp = client.post("/api/v1/analyze", json={"url": "https://slow.example.com"})
    assert resp.status_code == 504
    assert resp.json()["detail"]["errorCode"] == "NETWORK_TIMEOUT"


def test_analyze_returns_both_records_from_one_fetch(client: TestClient, fetcher: StubFetcher) -> None:
    resp = client.post("/api/v1/analyze", json={"url": "https://example.com"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["density"]["wordCount"] == 2
    assert body["accessibility"]["accessibilityScore"] == 95
    assert fetcher.calls == ["https://example.com"]


def test_invalid_url_is_bad_request() -> None:
    _install(PageFetcher(timeout_seconds=5, user_agent="t"))
    try:
        resp = TestClient(app).post("/tools/accessibility_surface_check", json={"url": "ftp://example.com"})
    finally:
        app_state.clear()
    assert resp.status_code == 400
    assert resp.json()["detail"]["errorCode"] == "INVALID_URL"


def test_service_unavailable_before_startup() -> None:
    app_state.clear()
    assert TestClient(app).get("/discovery").status_code == 503
