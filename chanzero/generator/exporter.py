"""Discover and export every page reachable from a root Markdown file.

The exporter walks the page graph depth first. Each page is keyed by its path
relative to the root file's directory and is marked visited before it is
imported, so link cycles terminate and pages reached along several routes are
rendered once. Output mirrors the source tree one directory level up: with
the root at ``site/src/index.md`` the page ``src/guide/intro.md`` is written
to ``site/guide/intro.html``.

Link targets are always resolved against the root file's directory, never
against the directory of the page that contains the link.

Example
-------
>>> from pathlib import Path
>>> from chanzero.generator import export_site
>>> report = export_site(Path("site/src/index.md"))  # doctest: +SKIP
>>> [str(page.destination) for page in report.exported]  # doctest: +SKIP
['site/index.html', 'site/about.html']
"""

from __future__ import annotations

import collections.abc as cabc
import logging
import posixpath
import typing as typ
from urllib.parse import unquote, urlsplit

from chanzero._constants import OUTPUT_EXTENSION, SOURCE_EXTENSION
from chanzero.filesystem import LocalFileSystem

from .importer import PageImporter
from .models import (
    ExportedPage,
    ExportReport,
    Page,
    PageFailure,
    PageReadError,
    PageWriteError,
)
from .renderer import MarkdownRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

    from chanzero.config.models import SiteSettings
    from chanzero.filesystem import FileSystem

logger = logging.getLogger(__name__)

ProgressCallback = cabc.Callable[[ExportedPage | PageFailure], None]


def replace_extension(path: str, extension: str) -> str:
    """Return ``path`` with its final suffix replaced by ``extension``.

    >>> replace_extension("guide/intro.html", "md")
    'guide/intro.md'
    >>> replace_extension("about", "md")
    'about.md'
    """
    base, _suffix = posixpath.splitext(path)
    return f"{base}.{extension}"


def resolve_link_target(target: str) -> str | None:
    """Map a raw link target to a root-relative Markdown source path.

    Query strings and fragments are dropped, percent-escapes are decoded, the
    extension is rewritten to ``.md``, and the result is normalised. Targets
    with a scheme or host, absolute paths, empty paths, and paths that climb
    out of the root directory are not local and yield ``None``.

    >>> resolve_link_target("./guide/intro.html#setup")
    'guide/intro.md'
    >>> resolve_link_target("https://example.com/about.md") is None
    True
    """
    parts = urlsplit(target)
    if parts.scheme or parts.netloc:
        return None
    path = unquote(parts.path)
    if not path or path.startswith("/"):
        return None
    candidate = posixpath.normpath(replace_extension(path, SOURCE_EXTENSION))
    if candidate == ".." or candidate.startswith("../"):
        return None
    return candidate


class SiteExporter:
    """Render the page graph rooted at one Markdown file."""

    def __init__(
        self,
        *,
        filesystem: FileSystem | None = None,
        renderer: MarkdownRenderer | None = None,
        progress: ProgressCallback | None = None,
    ) -> None:
        """Initialize the exporter.

        Parameters
        ----------
        filesystem : FileSystem, optional
            Storage used for existence checks, reads, and writes; defaults to
            :class:`~chanzero.filesystem.LocalFileSystem`.
        renderer : MarkdownRenderer, optional
            Markdown renderer shared by every page.
        progress : Callable, optional
            Called with each :class:`ExportedPage` or :class:`PageFailure` as
            soon as that page has been handled.
        """
        self.filesystem = filesystem or LocalFileSystem()
        self.importer = PageImporter(self.filesystem, renderer or MarkdownRenderer())
        self.progress = progress

    def export(self, root_file: Path) -> ExportReport:
        """Export ``root_file`` and every local page it links to, transitively.

        Parameters
        ----------
        root_file : Path
            Markdown file at the root of the site. Its directory is the
            source root; the parent of that directory is the output root.

        Returns
        -------
        ExportReport
            Pages written and pages that failed, in traversal order.

        Raises
        ------
        PageReadError
            If the root file is missing or cannot be read. Failures on linked
            pages are recorded in the report instead.
        """
        root_file = root_file.absolute()
        root_dir = root_file.parent
        dest_root = root_dir.parent
        if not self.filesystem.exists(root_file):
            raise PageReadError(root_file, "no such file")

        report = ExportReport()
        visited: set[str] = set()

        root = self._new_page(root_file.name, root_dir, dest_root)
        visited.add(root.relative_path)
        logger.info("Exporting root %s -> %s", root.source_path, root.destination_path)
        settings = self.importer.import_root(root)
        self._store(root, report)

        # Children are pushed in reverse so pops follow discovery order.
        worklist = list(reversed(self._local_links(root, root_dir)))
        while worklist:
            relative = worklist.pop()
            if relative in visited:
                continue
            visited.add(relative)
            page = self._new_page(relative, root_dir, dest_root)
            if not self._export_page(page, settings, report):
                continue
            worklist.extend(reversed(self._local_links(page, root_dir)))
        return report

    def _export_page(
        self, page: Page, settings: SiteSettings, report: ExportReport
    ) -> bool:
        """Import and store a linked page; return ``False`` if it was unreadable."""
        logger.info("Exporting %s -> %s", page.source_path, page.destination_path)
        try:
            self.importer.import_page(page, settings)
        except PageReadError as exc:
            logger.warning("Skipping page: %s", exc)
            self._record(report, PageFailure(page.source_path, exc.reason))
            return False
        self._store(page, report)
        return True

    def _store(self, page: Page, report: ExportReport) -> None:
        try:
            self._write(page)
        except PageWriteError as exc:
            logger.error("%s", exc)
            self._record(report, PageFailure(page.source_path, exc.reason))
            return
        self._record(report, ExportedPage(page.source_path, page.destination_path))

    def _record(self, report: ExportReport, entry: ExportedPage | PageFailure) -> None:
        if isinstance(entry, PageFailure):
            report.failures.append(entry)
        else:
            report.exported.append(entry)
        if self.progress is not None:
            self.progress(entry)

    def _write(self, page: Page) -> None:
        """Write the page's HTML, replacing any previous output.

        Raises
        ------
        PageWriteError
            If the destination directory or file cannot be written.
        """
        destination = page.destination_path
        try:
            self.filesystem.ensure_directory(destination.parent)
            self.filesystem.write_all(destination, (page.html or "").encode("utf-8"))
        except OSError as exc:
            raise PageWriteError(destination, exc.strerror or str(exc)) from exc

    def _local_links(self, page: Page, root_dir: Path) -> list[str]:
        """Return the page's link targets that name existing local sources."""
        local: list[str] = []
        for target in page.link_targets:
            candidate = resolve_link_target(target)
            if candidate is None or not self.filesystem.exists(root_dir / candidate):
                logger.debug("Not following %r from %s", target, page.relative_path)
                continue
            local.append(candidate)
        return local

    @staticmethod
    def _new_page(relative: str, root_dir: Path, dest_root: Path) -> Page:
        return Page(
            relative_path=relative,
            source_path=root_dir / relative,
            destination_path=dest_root / replace_extension(relative, OUTPUT_EXTENSION),
        )


def export_site(
    root_file: Path,
    *,
    filesystem: FileSystem | None = None,
    renderer: MarkdownRenderer | None = None,
    progress: ProgressCallback | None = None,
) -> ExportReport:
    """Export the site rooted at ``root_file`` with a fresh :class:`SiteExporter`."""
    exporter = SiteExporter(filesystem=filesystem, renderer=renderer, progress=progress)
    return exporter.export(root_file)


__all__ = [
    "ProgressCallback",
    "SiteExporter",
    "export_site",
    "replace_extension",
    "resolve_link_target",
]
