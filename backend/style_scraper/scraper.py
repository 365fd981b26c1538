"""
Page Style Extractor
页面样式提取服务

流程：
1. 通过 HTTP 获取页面 HTML
2. 解析为 BeautifulSoup 文档树
3. 提取字体和主按钮样式（互不依赖，只读共享同一文档树）
4. 组装 ScraperResponse

Any failure while fetching, parsing or extracting is logged and re-raised as
ScrapeFailure. There is no partial result and no retry.
"""

import logging
from typing import Optional

import httpx
from bs4 import BeautifulSoup

from .buttons import extract_primary_button
from .config import ScraperConfig
from .errors import ScrapeFailure
from .fetcher import build_http_client, fetch_html
from .fonts import extract_fonts
from .models import ScraperResponse

logger = logging.getLogger(__name__)


class PageStyleExtractor:
    """
    Fetches a page and extracts its fonts and primary button style.

    Usage:
        async with PageStyleExtractor() as extractor:
            response = await extractor.scrape(url)
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or ScraperConfig()
        self.http_client = build_http_client(self.config, transport)

    async def close(self):
        """Close HTTP client."""
        await self.http_client.aclose()

    async def __aenter__(self) -> "PageStyleExtractor":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    def extract(self, html: str) -> ScraperResponse:
        """Run both extractions against an already fetched document."""
        soup = self.parse(html)
        return ScraperResponse(
            fonts=extract_fonts(soup),
            primary_button=extract_primary_button(soup),
        )

    async def scrape(self, url: str) -> ScraperResponse:
        """
        Fetch a URL and extract its styling metadata.

        Raises:
            ScrapeFailure: fetch or parse failed; the original error is chained
        """
        try:
            html = await fetch_html(self.http_client, url)
            response = self.extract(html)
        except Exception as e:
            logger.error(f"[StyleScraper] Error in scrape_url: {url[:80]} - {e!r}")
            raise ScrapeFailure(url, str(e)) from e

        logger.info(
            f"[StyleScraper] Success: {url[:60]}... "
            f"({len(response.fonts)} fonts)"
        )
        return response


async def scrape_url(url: str) -> ScraperResponse:
    """
    Scrape one page with a fresh extractor.

    Args:
        url: Page to fetch (must be a full http(s) URL)

    Returns:
        ScraperResponse with the page fonts and primary button style
    """
    async with PageStyleExtractor() as extractor:
        return await extractor.scrape(url)
