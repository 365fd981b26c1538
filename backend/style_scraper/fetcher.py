"""
Page Fetcher

Retrieves the HTML of a page over HTTP with an httpx.AsyncClient.
Errors are not handled here; they propagate to the caller.
"""

import logging
from typing import Optional

import httpx

from .config import ScraperConfig

logger = logging.getLogger(__name__)


def build_browser_headers(user_agent: str) -> dict:
    """Browser-like request headers."""
    return {
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }


def build_http_client(
    config: ScraperConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create the AsyncClient used for page retrieval.

    Args:
        config: Timeout / user agent / redirect settings
        transport: Optional transport override (e.g. httpx.MockTransport)
    """
    return httpx.AsyncClient(
        timeout=config.timeout,
        follow_redirects=config.follow_redirects,
        headers=build_browser_headers(config.user_agent),
        transport=transport,
    )


async def fetch_html(client: httpx.AsyncClient, url: str) -> str:
    """
    GET a page and return its body as text.

    Raises:
        httpx.HTTPError: network failure, timeout or non-success status
    """
    logger.info(f"[Fetcher] Fetching: {url[:80]}...")
    response = await client.get(url)
    response.raise_for_status()

    logger.debug(
        f"[Fetcher] {response.status_code} {response.headers.get('content-type', '')} "
        f"({len(response.content)} bytes)"
    )
    return response.text
