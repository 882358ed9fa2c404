"""Python-Markdown extensions that complete chanzero's Markdown dialect.

Python-Markdown ships tables, fenced code, header ids, and smart punctuation.
The remaining pieces of the dialect live here:

* :class:`StrikethroughExtension` renders ``~~text~~`` as ``<del>``.
* :class:`FractionExtension` renders ``1/2`` as ``&frac12;`` and other simple
  fractions as ``<sup>n</sup>&frasl;<sub>m</sub>``.
* :class:`BareUrlExtension` turns bare ``http(s)://`` and ``ftp://`` URLs into
  anchors, the way ``<...>`` autolinks already are.
"""

from __future__ import annotations

import typing as typ
import xml.etree.ElementTree as etree

from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor, SimpleTagInlineProcessor
from markdown.util import AtomicString

if typ.TYPE_CHECKING:
    import re
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

STRIKETHROUGH_RE = r"(~{2})(.+?)~{2}"
FRACTION_RE = r"(?<![\w/.])(\d{1,4})/(\d{1,4})(?![\w/]|\.\d)"
BARE_URL_RE = r"(?<![\w<\"'=/(\[])((?:https?|ftp)://[^\s<>\"'()\[\]]*[^\s<>\"'()\[\].,;:!?])"

NAMED_FRACTIONS = {
    ("1", "2"): "&frac12;",
    ("1", "4"): "&frac14;",
    ("3", "4"): "&frac34;",
}


class StrikethroughExtension(Extension):
    """Render ``~~text~~`` as a ``<del>`` element."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the strikethrough inline pattern."""
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(STRIKETHROUGH_RE, "del"), "chanzero_del", 55
        )


class FractionInlineProcessor(InlineProcessor):
    """Replace ``n/m`` with typographic fraction markup."""

    def handleMatch(  # type: ignore[override]  # noqa: N802
        self, m: re.Match[str], data: str
    ) -> tuple[str, int, int]:
        """Stash the fraction markup so later patterns leave it alone."""
        numerator, denominator = m.group(1), m.group(2)
        html = NAMED_FRACTIONS.get((numerator, denominator))
        if html is None:
            html = f"<sup>{numerator}</sup>&frasl;<sub>{denominator}</sub>"
        return self.md.htmlStash.store(html), m.start(0), m.end(0)


class FractionExtension(Extension):
    """Typographic fractions, in the spirit of SmartyPants."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the fraction inline pattern."""
        md.inlinePatterns.register(
            FractionInlineProcessor(FRACTION_RE, md), "chanzero_fraction", 75
        )


class BareUrlInlineProcessor(InlineProcessor):
    """Link URLs that appear in running text without ``<...>`` markers."""

    # Link labels are already inside an anchor.
    ANCESTOR_EXCLUDES = ("a",)

    def handleMatch(  # type: ignore[override]  # noqa: N802
        self, m: re.Match[str], data: str
    ) -> tuple[Element, int, int]:
        """Return an anchor pointing at the matched URL."""
        url = m.group(1)
        el = etree.Element("a")
        el.set("href", url)
        el.text = AtomicString(url)
        return el, m.start(0), m.end(0)


class BareUrlExtension(Extension):
    """Autolink bare URLs found in paragraph text."""

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the bare URL inline pattern."""
        md.inlinePatterns.register(
            BareUrlInlineProcessor(BARE_URL_RE, md), "chanzero_bare_url", 115
        )


__all__ = [
    "BareUrlExtension",
    "FractionExtension",
    "StrikethroughExtension",
]
