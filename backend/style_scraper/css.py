"""
CSS Helpers
内联样式工具函数

- find_declaration: 从 style 属性中读取单个属性值
- clean_font_family: 规范化 font-family 值
- google_fonts_css2_url: 生成 Google Fonts css2 链接
"""

import re
from functools import lru_cache
from typing import Optional
from urllib.parse import quote

from .config import GOOGLE_FONTS_CSS2_URL


@lru_cache(maxsize=32)
def _declaration_pattern(prop: str) -> "re.Pattern[str]":
    # Plain substring search: "color" also matches the tail of "background-color"
    return re.compile(rf"{re.escape(prop)}:\s*([^;]+)", re.IGNORECASE)


def find_declaration(style: str, prop: str) -> Optional[str]:
    """
    Look up one property in an inline style string.

    Args:
        style: Value of a style attribute, e.g. "color: red; font-size: 12px"
        prop: CSS property name, e.g. "font-size"

    Returns:
        The trimmed value of the first declaration, or None if absent
    """
    if not style:
        return None
    match = _declaration_pattern(prop).search(style)
    if not match:
        return None
    return match.group(1).strip()


def clean_font_family(font_family: str) -> str:
    """
    Strip quotes and keep only the first family of a font stack.

    "  'Helvetica Neue', Arial, sans-serif  " -> "Helvetica Neue"
    """
    unquoted = re.sub(r"['\"]", "", font_family).strip()
    return unquoted.split(",")[0].strip()


def google_fonts_css2_url(family: str) -> str:
    """Build a Google Fonts API v2 stylesheet URL for a single family."""
    encoded = "+".join(quote(part, safe="!*()'") for part in family.split())
    return GOOGLE_FONTS_CSS2_URL.format(family=encoded)
