"""
Style Scraper Data Models
定义数据结构和类型

包含：
- Font: 页面声明的字体
- PrimaryButton: 第一个 <button> 的样式
- ScraperResponse: 完整提取结果

Attributes are snake_case in Python; model_dump(by_alias=True) produces the
camelCase keys of the printed record.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import List


class Font(BaseModel):
    """
    页面字体
    One entry per cleaned family name.
    """
    family: str                  # Cleaned family name
    variants: str                # Font weight (single value)
    letter_spacings: str         # Letter spacing (single value)
    font_weight: str             # Weight used to build the entry
    url: str                     # Google Fonts stylesheet URL

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PrimaryButton(BaseModel):
    """
    主按钮样式
    Inline style of the first <button>, with fallbacks for undeclared properties.
    """
    # 文字
    font_family: str = ""
    font_size: str = "16px"
    line_height: str = "1.5"
    letter_spacing: str = "0.01em"
    text_transform: str = "uppercase"
    text_decoration: str = "underline"
    text_align: str = "left"

    # 颜色
    background_color: str = "#000"
    color: str = "#fff"

    # 边框
    border_color: str = "#000"
    border_width: str = "1px"
    border_radius: str = "4px"

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class ScraperResponse(BaseModel):
    """
    完整提取结果
    """
    fonts: List[Font] = []
    primary_button: PrimaryButton

    class Config:
        alias_generator = to_camel
        populate_by_name = True
