"""
Style Scraper Errors
"""

from typing import Optional

SCRAPE_FAILURE_PREFIX = "Failed to scrape the URL"


class ScrapeFailure(Exception):
    """Raised when a page cannot be fetched or parsed."""

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason or "Unknown error"
        super().__init__(f"{SCRAPE_FAILURE_PREFIX}: {self.reason}")
