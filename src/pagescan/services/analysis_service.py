"""Page analysis orchestration service (business logic)."""

from __future__ import annotations

from ..analysis.accessibility import check_accessibility
from ..analysis.density import evaluate_density
from ..domain.errors import InvalidInputError
from ..domain.models import AccessibilityMetrics, DensityMetrics, PageReport
from ..observability.logger import get_logger
from ..scraping.page_fetcher import PageFetcher

logger = get_logger(__name__)


class PageAnalysisService:
    """Service layer for page analysis.

    Each call performs exactly one retrieval and then scores the markup
    synchronously. Retrieval errors propagate unchanged; nothing is scored.
    """

    def __init__(self, fetcher: PageFetcher):
        self._fetcher = fetcher

    async def _fetch(self, url: str) -> tuple[str, str]:
        url = (url or "").strip()
        if not url:
            raise InvalidInputError("url is required")
        page = await self._fetcher.fetch_html(url)
        return url, page.html

    async def evaluate_content_density(self, url: str) -> DensityMetrics:
        url, html = await self._fetch(url)
        metrics = evaluate_density(html, url=url)
        logger.info(
            "density_evaluated",
            url=url,
            word_count=metrics.word_count,
            scanability_score=metrics.scanability_score,
        )
        return metrics

    async def check_accessibility_surface(self, url: str) -> AccessibilityMetrics:
        url, html = await self._fetch(url)
        metrics = check_accessibility(html, url=url)
        logger.info(
            "accessibility_checked",
            url=url,
            h1_count=metrics.h1_count,
            accessibility_score=metrics.accessibility_score,
        )
        return metrics

    async def analyze_page(self, url: str) -> PageReport:
        url, html = await self._fetch(url)
        report = PageReport(
            url=url,
            density=evaluate_density(html, url=url),
            accessibility=check_accessibility(html, url=url),
        )
        logger.info(
            "page_analyzed",
            url=url,
            scanability_score=report.density.scanability_score,
            accessibility_score=report.accessibility.accessibility_score,
        )
        return report
