#!/usr/bin/env python3
"""
Scrape the default target page and print its fonts and primary button style.

    cd backend
    python -m style_scraper
"""

import asyncio
import json
import logging
import sys

from .config import DEFAULT_TARGET_URL, LOG_LEVEL
from .errors import ScrapeFailure
from .scraper import scrape_url


def print_response(response) -> None:
    data = response.model_dump(by_alias=True)

    print("=" * 70)
    print("Scrape Response:")
    print("=" * 70)
    print("Fonts:")
    print(json.dumps(data["fonts"], indent=2, ensure_ascii=False))
    print()
    print("Primary Button:")
    print(json.dumps(data["primaryButton"], indent=2, ensure_ascii=False))


async def main(url: str = DEFAULT_TARGET_URL) -> int:
    try:
        response = await scrape_url(url)
    except ScrapeFailure as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_response(response)
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(asyncio.run(main()))
