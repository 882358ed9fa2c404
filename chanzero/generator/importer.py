"""Load a Markdown page from disk and render it.

:class:`PageImporter` reads a page's source, separates the settings header
when importing the root, and renders the body while collecting link targets.
The root import produces the :class:`SiteSettings` that every later import
receives; linked pages are never searched for a header.
"""

from __future__ import annotations

import codecs
import typing as typ

from chanzero.config.header import split_settings_header

from .models import PageReadError

if typ.TYPE_CHECKING:
    from chanzero.config.models import SiteSettings
    from chanzero.filesystem import FileSystem

    from .models import Page
    from .renderer import MarkdownRenderer


class PageImporter:
    """Populate :class:`Page` objects from their Markdown sources."""

    def __init__(self, filesystem: FileSystem, renderer: MarkdownRenderer) -> None:
        self.filesystem = filesystem
        self.renderer = renderer

    def import_root(self, page: Page) -> SiteSettings:
        """Import the root page as a standalone document.

        Parameters
        ----------
        page : Page
            The root page; its ``settings``, ``html``, and ``link_targets``
            are filled in.

        Returns
        -------
        SiteSettings
            Settings declared in the root header (empty when there is none).

        Raises
        ------
        PageReadError
            If the source cannot be read or is not valid UTF-8.
        """
        text = self._read_text(page)
        settings, body = split_settings_header(text)
        page.settings = settings
        self._render(page, body, settings, standalone=True)
        return settings

    def import_page(self, page: Page, settings: SiteSettings) -> None:
        """Import a linked page as an HTML fragment.

        Raises
        ------
        PageReadError
            If the source cannot be read or is not valid UTF-8.
        """
        self._render(page, self._read_text(page), settings, standalone=False)

    def _read_text(self, page: Page) -> str:
        try:
            raw = self.filesystem.read_all(page.source_path)
        except OSError as exc:
            raise PageReadError(page.source_path, exc.strerror or str(exc)) from exc
        if raw.startswith(codecs.BOM_UTF8):
            raw = raw[len(codecs.BOM_UTF8) :]
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            reason = f"not valid UTF-8 ({exc.reason})"
            raise PageReadError(page.source_path, reason) from exc

    def _render(
        self, page: Page, body: str, settings: SiteSettings, *, standalone: bool
    ) -> None:
        links: list[str] = []
        html = self.renderer.render(
            body,
            settings,
            links.append,
            standalone=standalone,
            title=page.source_path.stem,
        )
        page.html = html
        page.link_targets = links


__all__ = ["PageImporter"]
