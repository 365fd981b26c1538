"""
Primary Button Extractor
主按钮样式提取

Reads the inline style of the first <button> in document order. Properties
the button does not declare fall back to the PrimaryButton defaults.
"""

import logging
from typing import Dict

from bs4 import BeautifulSoup

from .css import clean_font_family, find_declaration
from .models import PrimaryButton

logger = logging.getLogger(__name__)

# PrimaryButton field -> CSS property
BUTTON_STYLE_PROPS: Dict[str, str] = {
    "font_family": "font-family",
    "font_size": "font-size",
    "line_height": "line-height",
    "letter_spacing": "letter-spacing",
    "text_transform": "text-transform",
    "text_decoration": "text-decoration",
    "text_align": "text-align",
    "background_color": "background-color",
    "color": "color",
    "border_color": "border-color",
    "border_width": "border-width",
    "border_radius": "border-radius",
}


def extract_primary_button(soup: BeautifulSoup) -> PrimaryButton:
    """
    Build the PrimaryButton record for a parsed page.

    Never fails: a page without a <button>, or a button without a style
    attribute, yields the all-defaults record.
    """
    button = soup.find("button")
    style = (button.get("style") or "") if button is not None else ""

    if button is None:
        logger.debug("[ButtonExtractor] No <button> found, using defaults")

    declared = {}
    for field_name, prop in BUTTON_STYLE_PROPS.items():
        value = find_declaration(style, prop)
        if value:
            declared[field_name] = value

    if "font_family" in declared:
        declared["font_family"] = clean_font_family(declared["font_family"])

    return PrimaryButton(**declared)
