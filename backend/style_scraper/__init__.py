"""
Style Scraper Module
页面样式抓取模块

Fetches one web page and extracts:
- Font families declared inline, in @font-face rules, or via Google Fonts
- The inline style of the first <button> (primary button)
"""

from .errors import ScrapeFailure
from .models import Font, PrimaryButton, ScraperResponse
from .scraper import PageStyleExtractor, scrape_url

__all__ = [
    "scrape_url",
    "PageStyleExtractor",
    "ScrapeFailure",
    "Font",
    "PrimaryButton",
    "ScraperResponse",
]
