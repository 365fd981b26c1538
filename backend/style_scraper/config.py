"""
Style Scraper Configuration
抓取配置
"""

from dataclasses import dataclass
from typing import Optional


# ============================================
# Configuration
# ============================================

DEFAULT_TARGET_URL = "https://growgrows.com/en-us/products/plentiful-planets-sleepsuit"
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
LOG_LEVEL = "INFO"

GOOGLE_FONTS_CSS_PREFIX = "https://fonts.googleapis.com/css"
GOOGLE_FONTS_CSS2_URL = "https://fonts.googleapis.com/css2?family={family}&display=swap"


@dataclass
class ScraperConfig:
    """Per-extractor HTTP settings."""
    timeout: Optional[float] = None      # Request timeout in seconds (None = wait indefinitely)
    user_agent: str = USER_AGENT
    follow_redirects: bool = True
