"""Application lifespan management (startup/shutdown hooks)."""

from __future__ import annotations

from contextlib import asynccontextmanager

from .config.settings import get_settings
from .observability.logger import configure_logging, get_logger
from .scraping.page_fetcher import PageFetcher
from .services.analysis_service import PageAnalysisService
from .services.tool_registry import build_tool_registry

logger = get_logger(__name__)

# Global app state populated during lifespan startup
app_state: dict = {}


@asynccontextmanager
async def lifespan_manager():
    """Manage application lifespan (startup and shutdown)."""
    settings = get_settings()

    configure_logging()
    logger.info("starting_application", service_name=settings.service_name)

    fetcher = PageFetcher(
        timeout_seconds=settings.fetch_timeout_seconds,
        user_agent=settings.fetch_user_agent,
        max_bytes=settings.max_page_bytes,
    )
    service = PageAnalysisService(fetcher=fetcher)

    app_state["analysis_service"] = service
    app_state["tool_registry"] = build_tool_registry(service)
    logger.info("application_started", tools=[t.name for t in app_state["tool_registry"].tools()])
    try:
        yield
    finally:
        await fetcher.close()
        app_state.clear()
        logger.info("application_shutdown_complete")
