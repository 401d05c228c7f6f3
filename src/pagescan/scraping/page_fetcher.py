"""aiohttp-based page fetcher."""

from __future__ import annotations

import asyncio
import codecs

import aiohttp

from ..domain.errors import InvalidURLError, NetworkTimeoutError, PageRetrievalError
from ..domain.models import FetchedPage
from ..observability.logger import get_logger
from ..utils.validators import is_valid_http_url

logger = get_logger(__name__)


def _resolve_encoding(charset: str | None) -> str:
    """Return a usable codec name, falling back to utf-8 for unknown charsets."""
    if not charset:
        return "utf-8"
    try:
        return codecs.lookup(charset).name
    except LookupError:
        logger.warning("unknown_charset", charset=charset)
        return "utf-8"


class PageFetcher:
    """Retrieval layer.

    Responsibilities:
    - GET a single URL and return its body as text
    - Turn any non-2xx status into PageRetrievalError (no retries)
    - Own one shared ClientSession, safe for concurrent fetches
    """

    def __init__(
        self,
        timeout_seconds: float,
        user_agent: str,
        *,
        max_bytes: int = 5 * 1024 * 1024,
        session: aiohttp.ClientSession | None = None,
    ):
        self._timeout = aiohttp.ClientTimeout(total=float(timeout_seconds))
        self._user_agent = user_agent
        self._max_bytes = int(max_bytes)
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "PageFetcher":
        self._get_session()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=self._timeout,
                headers={"User-Agent": self._user_agent},
            )
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def fetch_html(self, url: str) -> FetchedPage:
        if not is_valid_http_url(url):
            raise InvalidURLError("url must be an absolute http(s) URL", detail=url)

        session = self._get_session()
        try:
            async with session.get(url) as resp:
                if not 200 <= resp.status < 300:
                    logger.warning("page_fetch_failed", url=url, status=resp.status)
                    raise PageRetrievalError(url, resp.status, detail=resp.reason)

                chunks: list[bytes] = []
                size = 0
                truncated = False
                async for chunk in resp.content.iter_chunked(64 * 1024):
                    remaining = self._max_bytes - size
                    if len(chunk) > remaining:
                        chunks.append(chunk[:remaining])
                        truncated = True
                        break
                    chunks.append(chunk)
                    size += len(chunk)
                    if size >= self._max_bytes:
                        truncated = bool(await resp.content.read(1))
                        break

                encoding = _resolve_encoding(resp.charset)
                html = b"".join(chunks).decode(encoding, errors="replace")
                if truncated:
                    logger.warning("page_truncated", url=url, max_bytes=self._max_bytes)
                logger.info("page_fetched", url=url, status=resp.status, chars=len(html))
                return FetchedPage(url=url, status=resp.status, html=html, truncated=truncated)
        except (asyncio.TimeoutError, aiohttp.ClientError) as e:
            logger.warning("page_fetch_error", url=url, error=str(e))
            raise NetworkTimeoutError(f"Network error while fetching {url}", detail=str(e)) from e
