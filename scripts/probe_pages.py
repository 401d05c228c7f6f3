#!/usr/bin/env python3
"""Probe a few URLs and print their density + accessibility reports.

This is a dev helper to sanity-check the heuristics against live pages.
"""

from __future__ import annotations

import asyncio
import json
import sys

from pagescan.domain.errors import PageScanDomainError
from pagescan.scraping.page_fetcher import PageFetcher
from pagescan.services.analysis_service import PageAnalysisService
from pagescan.services.payloads import serialize_report


URLS = [
    "https://example.com",
    "https://www.python.org",
]


async def main(urls: list[str]) -> None:
    async with PageFetcher(timeout_seconds=15, user_agent="PageScan/0.1.0") as fetcher:
        service = PageAnalysisService(fetcher=fetcher)
        reports = await asyncio.gather(*(service.analyze_page(u) for u in urls), return_exceptions=True)
        for u, report in zip(urls, reports):
            if isinstance(report, PageScanDomainError):
                print(f"{u} ERROR {type(report).__name__}: {str(report)[:200]}")
                continue
            if isinstance(report, BaseException):
                raise report
            print(json.dumps(serialize_report(report), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1:] or URLS))
