"""Tests for the Markdown dialect and link gathering used to render pages."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from chanzero.config import SiteSettings
from chanzero.generator import MarkdownRenderer


@pytest.fixture(scope="module")
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()


def _render(renderer: MarkdownRenderer, body: str) -> tuple[str, list[str]]:
    links: list[str] = []
    html = renderer.render(body, SiteSettings(), links.append)
    return html, links


def test_links_are_reported_in_document_order(renderer: MarkdownRenderer) -> None:
    body = (
        "See [one](one.md), <https://example.com/a>, and "
        "http://bare.example/path for details.\n\n"
        "Then [two](sub/two.html) and [one again](one.md).\n"
    )
    html, links = _render(renderer, body)
    assert links == [
        "one.md",
        "https://example.com/a",
        "http://bare.example/path",
        "sub/two.html",
        "one.md",
    ]
    hrefs = [a["href"] for a in BeautifulSoup(html, "html.parser").find_all("a")]
    assert hrefs == links


def test_reference_links_are_reported(renderer: MarkdownRenderer) -> None:
    _html, links = _render(renderer, "Read the [guide][g].\n\n[g]: guide.md\n")
    assert links == ["guide.md"]


def test_bare_url_inside_link_label_is_not_nested(renderer: MarkdownRenderer) -> None:
    html, links = _render(renderer, "[http://a.example](http://a.example)\n")
    soup = BeautifulSoup(html, "html.parser")
    assert len(soup.find_all("a")) == 1
    assert links == ["http://a.example"]


def test_bare_url_excludes_trailing_punctuation(renderer: MarkdownRenderer) -> None:
    _html, links = _render(renderer, "Visit https://example.com/docs.\n")
    assert links == ["https://example.com/docs"]


def test_links_in_code_are_not_reported(renderer: MarkdownRenderer) -> None:
    _html, links = _render(renderer, "Use `[x](x.md)` literally.\n")
    assert links == []


def test_fragment_rendering_is_not_a_full_document(renderer: MarkdownRenderer) -> None:
    html, _links = _render(renderer, "# Title\n\nText.\n")
    assert "<html" not in html
    assert "<!DOCTYPE" not in html


def test_empty_body_renders_nothing(renderer: MarkdownRenderer) -> None:
    html, links = _render(renderer, "   \n")
    assert html == ""
    assert links == []


def test_smart_punctuation_and_dashes(renderer: MarkdownRenderer) -> None:
    html, _links = _render(renderer, 'Pages 1 -- 5 --- "quoted" text...\n')
    assert "&ndash;" in html
    assert "&mdash;" in html
    assert "&ldquo;" in html
    assert "&rdquo;" in html
    assert "&hellip;" in html


def test_fractions(renderer: MarkdownRenderer) -> None:
    html, _links = _render(renderer, "Add 1/2 cup, 3/4 spoon, and 3/8 pinch.\n")
    assert "&frac12;" in html
    assert "&frac34;" in html
    assert "<sup>3</sup>&frasl;<sub>8</sub>" in html


def test_dates_are_not_fractions(renderer: MarkdownRenderer) -> None:
    html, _links = _render(renderer, "Released 10/19/2026.\n")
    assert "10/19/2026" in html
    assert "&frasl;" not in html


def test_strikethrough(renderer: MarkdownRenderer) -> None:
    html, _links = _render(renderer, "This is ~~gone~~ now.\n")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.find("del").get_text() == "gone"


def test_tables(renderer: MarkdownRenderer) -> None:
    body = "| Name | Count |\n| ---- | ----- |\n| pages | 3 |\n"
    html, _links = _render(renderer, body)
    soup = BeautifulSoup(html, "html.parser")
    cells = [td.get_text() for td in soup.select("table td")]
    assert cells == ["pages", "3"]


def test_fenced_code_is_highlighted(renderer: MarkdownRenderer) -> None:
    body = "```python\nprint('hi')\n```\n"
    html, _links = _render(renderer, body)
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one(".codehilite")
    assert block is not None
    assert "print" in block.get_text()


def test_headers_get_ids_and_need_no_space(renderer: MarkdownRenderer) -> None:
    html, _links = _render(renderer, "# Getting Started\n\n##Tight Header\n")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.find("h1")["id"] == "getting-started"
    assert soup.find("h2").get_text() == "Tight Header"


def test_standalone_document_uses_settings(renderer: MarkdownRenderer) -> None:
    settings = SiteSettings({"Title": "Field Notes", "SiteCss": "css/site.css"})
    links: list[str] = []
    html = renderer.render(
        "# Home\n\n[About](about.md)\n", settings, links.append, standalone=True
    )
    soup = BeautifulSoup(html, "html.parser")
    assert html.startswith("<!DOCTYPE html>")
    assert soup.title.get_text() == "Field Notes"
    assert soup.find("link", rel="stylesheet")["href"] == "css/site.css"
    assert soup.body.find("h1").get_text() == "Home"
    assert links == ["about.md"]


def test_standalone_document_without_settings(renderer: MarkdownRenderer) -> None:
    html = renderer.render(
        "Body\n", SiteSettings(), lambda _target: None, standalone=True, title="index"
    )
    soup = BeautifulSoup(html, "html.parser")
    assert soup.title.get_text() == "index"
    assert soup.find("link", rel="stylesheet") is None


def test_email_autolink_is_reported_unobfuscated(renderer: MarkdownRenderer) -> None:
    _html, links = _render(renderer, "<foo@example.com>\n")
    assert links == ["mailto:foo@example.com"]


def test_fence_text_inside_code_block_is_kept(renderer: MarkdownRenderer) -> None:
    html, _links = _render(renderer, "~~~\n  ```js,ignore\n~~~\n")
    code = BeautifulSoup(html, "html.parser").select_one(".codehilite").get_text()
    assert "  ```js,ignore" in code
