"""Render Markdown bodies into HTML fragments or standalone documents.

:class:`MarkdownRenderer` owns the Markdown dialect used for every page:
smart punctuation with en/em dashes, fractions, tables, fenced and
highlighted code, bare URL autolinks, strikethrough, and header ids. ATX
headers do not need a space after the ``#`` marks. The root page is wrapped
in a complete HTML document built from ``standalone_page.jinja``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from .extensions import BareUrlExtension, FractionExtension, StrikethroughExtension
from .link_observer import LinkObserverExtension

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension

    from chanzero.config.models import SiteSettings

    from .link_observer import LinkObserver
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

STANDALONE_TEMPLATE = "standalone_page.jinja"


class MarkdownRenderer:
    """Convert Markdown with chanzero's extension set."""

    def __init__(
        self, pygments_style: str = "default", *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style used for fenced code blocks. Defaults to
            ``"default"``.
        templates_dir : Path, optional
            Directory containing ``standalone_page.jinja``; defaults to the
            package templates.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(STANDALONE_TEMPLATE)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render(
        self,
        body: str,
        settings: SiteSettings,
        link_observer: LinkObserver,
        *,
        standalone: bool = False,
        title: str | None = None,
    ) -> str:
        """Render ``body`` and report each link target to ``link_observer``.

        Parameters
        ----------
        body : str
            Markdown text without any settings header.
        settings : SiteSettings
            Site settings from the root page; the stylesheet and title are
            only used when ``standalone`` is true.
        link_observer : Callable[[str], None]
            Called synchronously with every link target, in document order,
            before this method returns.
        standalone : bool, optional
            Wrap the fragment in a complete HTML document.
        title : str, optional
            Fallback title used when ``settings`` does not declare one.

        Returns
        -------
        str
            The HTML fragment, or the full document when ``standalone``.
        """
        fragment = self.markdown(body, link_observer)
        if not standalone:
            return fragment
        html = self.template.render(
            title=settings.title or title or "",
            stylesheet=settings.stylesheet,
            pygments_css=self.stylesheet,
            settings=settings,
            body=fragment,
        )
        return html if html.endswith("\n") else f"{html}\n"

    def markdown(self, text: str, link_observer: LinkObserver | None = None) -> str:
        """Render markdown into an HTML fragment using the configured extensions."""
        if not text.strip():
            return ""
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "smarty",
            "toc",
            StrikethroughExtension(),
            FractionExtension(),
            BareUrlExtension(),
        ]
        if link_observer is not None:
            extensions.append(LinkObserverExtension(link_observer))
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                },
                "smarty": {
                    "smart_dashes": True,
                    "smart_quotes": True,
                    "smart_ellipses": True,
                },
            },
            output_format="html",
        )
        return md.convert(text)


__all__ = ["MarkdownRenderer"]
