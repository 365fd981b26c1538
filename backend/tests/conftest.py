"""
Style Scraper 测试配置文件

这个文件包含 pytest fixtures（测试夹具）。
Fixtures 是测试的"准备工作"——在测试运行前创建所需的对象和环境。

网络请求全部通过 httpx.MockTransport 完成，测试不会访问真实网站。
"""

import pytest
import sys
from pathlib import Path

import httpx
from bs4 import BeautifulSoup

# 添加 backend 目录到 Python 路径
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

from style_scraper.config import ScraperConfig
from style_scraper.models import PrimaryButton
from style_scraper.scraper import PageStyleExtractor


# ============================================
# HTML Fixtures
# ============================================

SAMPLE_PAGE = """
<!DOCTYPE html>
<html>
<head>
  <link rel="stylesheet" href="/static/site.css">
  <style>
    @font-face {
      font-family: "Brand Serif";
      font-weight: 600;
      src: url("/fonts/brand-serif.woff2") format("woff2");
    }
  </style>
</head>
<body style="font-family: 'Open Sans', Arial, sans-serif; letter-spacing: 0.02em">
  <h1 style="font-family: Roboto; font-weight: 700">Title</h1>
  <button style="color: #ffffff; background-color: #ff5a00; border-radius: 999px; font-family: 'Open Sans', sans-serif">
    Add to cart
  </button>
  <button style="color: red">Secondary</button>
</body>
</html>
"""


@pytest.fixture
def make_soup():
    """
    解析 HTML 片段。

    使用方式：
    ```python
    def test_something(make_soup):
        soup = make_soup("<button>Go</button>")
    ```
    """
    def _make_soup(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")
    return _make_soup


@pytest.fixture
def sample_page():
    return SAMPLE_PAGE


# ============================================
# HTTP Fixtures
# ============================================

@pytest.fixture
def make_extractor():
    """
    创建使用 MockTransport 的 PageStyleExtractor。

    handler 接收 httpx.Request，返回 httpx.Response 或抛出异常。
    """
    def _make_extractor(handler) -> PageStyleExtractor:
        return PageStyleExtractor(
            config=ScraperConfig(timeout=5.0),
            transport=httpx.MockTransport(handler),
        )
    return _make_extractor


def html_response(html: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        text=html,
        headers={"content-type": "text/html; charset=utf-8"},
    )


# ============================================
# Helper Functions
# ============================================

def assert_button_defaults(button, except_fields=()):
    """
    断言按钮字段（除 except_fields 外）均为默认值。
    """
    defaults = PrimaryButton()
    for field_name in PrimaryButton.model_fields:
        if field_name in except_fields:
            continue
        assert getattr(button, field_name) == getattr(defaults, field_name), \
            f"{field_name} should be default '{getattr(defaults, field_name)}', got '{getattr(button, field_name)}'"
