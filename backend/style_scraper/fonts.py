"""
Font Extractor
字体提取器

功能：
- 扫描所有元素的内联 style，读取 font-family / font-weight / letter-spacing
- 解析 <style> 中的 @font-face 规则
- 检测页面引用的 Google Fonts 样式表

Fonts are keyed by cleaned family name. The first occurrence wins: inline
styles are scanned before @font-face rules, and later duplicates are ignored
together with their weight and letter-spacing.
"""

import logging
import re
from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from .config import GOOGLE_FONTS_CSS_PREFIX
from .css import clean_font_family, find_declaration, google_fonts_css2_url
from .models import Font

logger = logging.getLogger(__name__)

DEFAULT_FONT_WEIGHT = "400"
DEFAULT_LETTER_SPACING = "normal"


class FontExtractor:
    """
    字体提取器
    Collects the font families a parsed page declares.

    One instance per document:
        fonts = FontExtractor(soup).extract()
    """

    # @font-face 规则（不支持嵌套大括号）
    FONT_FACE_PATTERN = re.compile(r"@font-face\s*\{[^}]+\}")
    FONT_FACE_FAMILY_PATTERN = re.compile(r"font-family:\s*(['\"])(.+?)\1")
    FONT_FACE_WEIGHT_PATTERN = re.compile(r"font-weight:\s*(\d+)")

    def __init__(self, soup: BeautifulSoup):
        self.soup = soup
        # cleaned family -> (weight, letter spacing)
        self._registry: Dict[str, tuple[str, str]] = {}

    def extract(self) -> List[Font]:
        """
        Scan the document and return fonts in first-seen order.

        Returns:
            List of Font, empty if the page declares none
        """
        self._registry.clear()
        self._scan_inline_styles()
        self._scan_font_faces()

        google_fonts_url = find_google_fonts_url(self.soup)
        fonts = [
            Font(
                family=family,
                variants=weight,
                letter_spacings=letter_spacing,
                font_weight=weight,
                url=google_fonts_url or google_fonts_css2_url(family),
            )
            for family, (weight, letter_spacing) in self._registry.items()
        ]

        logger.debug(
            f"[FontExtractor] Found {len(fonts)} font(s)"
            f"{' (Google Fonts link present)' if google_fonts_url else ''}"
        )
        return fonts

    def _register(
        self,
        family: str,
        weight: str = DEFAULT_FONT_WEIGHT,
        letter_spacing: str = DEFAULT_LETTER_SPACING,
    ) -> None:
        clean_family = clean_font_family(family)
        if clean_family in self._registry:
            return
        self._registry[clean_family] = (weight, letter_spacing)

    def _scan_inline_styles(self) -> None:
        for element in self.soup.find_all(True):
            style = element.get("style")
            if not style:
                continue

            family = find_declaration(style, "font-family")
            if family is None:
                continue

            self._register(
                family,
                find_declaration(style, "font-weight") or DEFAULT_FONT_WEIGHT,
                find_declaration(style, "letter-spacing") or DEFAULT_LETTER_SPACING,
            )

    def _scan_font_faces(self) -> None:
        for style_tag in self.soup.find_all("style"):
            css_text = style_tag.get_text()
            if not css_text:
                continue

            for font_face in self.FONT_FACE_PATTERN.findall(css_text):
                family_match = self.FONT_FACE_FAMILY_PATTERN.search(font_face)
                if not family_match:
                    continue
                weight_match = self.FONT_FACE_WEIGHT_PATTERN.search(font_face)
                self._register(
                    family_match.group(2),
                    weight_match.group(1) if weight_match else DEFAULT_FONT_WEIGHT,
                )


def find_google_fonts_url(soup: BeautifulSoup) -> str:
    """Return the href of the first Google Fonts stylesheet link, or ""."""
    link = soup.select_one(f'link[href^="{GOOGLE_FONTS_CSS_PREFIX}"]')
    if link is None:
        return ""
    href: Optional[str] = link.get("href")
    return href or ""


def extract_fonts(soup: BeautifulSoup) -> List[Font]:
    return FontExtractor(soup).extract()
