"""Shared dataclasses and errors used by the export pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from chanzero.config.models import SiteSettings


class ExportError(RuntimeError):
    """Base class for failures raised while exporting a site."""


class PageReadError(ExportError):
    """Raised when a page's source cannot be read or decoded."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Couldn't load '{path}': {reason}")
        self.path = path
        self.reason = reason


class PageWriteError(ExportError):
    """Raised when a page's rendered output cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Couldn't write '{path}': {reason}")
        self.path = path
        self.reason = reason


@dc.dataclass(slots=True)
class Page:
    """One document in the site's link graph.

    Attributes
    ----------
    relative_path : str
        POSIX path of the source relative to the site root directory; this is
        the key recorded in the visited set.
    source_path : Path
        Full location of the Markdown source.
    destination_path : Path
        Full location of the rendered output.
    html : str or None
        Rendered content; ``None`` until the page has been imported.
    link_targets : list[str]
        Raw link targets in the order the renderer met them. May contain
        duplicates and targets that do not resolve to local pages.
    settings : SiteSettings
        Header settings; only populated for the root page.
    """

    relative_path: str
    source_path: Path
    destination_path: Path
    html: str | None = None
    link_targets: list[str] = dc.field(default_factory=list)
    settings: SiteSettings = dc.field(default_factory=SiteSettings)


@dc.dataclass(frozen=True, slots=True)
class ExportedPage:
    """Record of a page whose output was written."""

    source: Path
    destination: Path


@dc.dataclass(frozen=True, slots=True)
class PageFailure:
    """Record of a page that could not be read or written."""

    source: Path
    reason: str


@dc.dataclass(slots=True)
class ExportReport:
    """Outcome of a site export, in traversal order."""

    exported: list[ExportedPage] = dc.field(default_factory=list)
    failures: list[PageFailure] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return ``True`` when every discovered page was written."""
        return not self.failures


__all__ = [
    "ExportError",
    "ExportReport",
    "ExportedPage",
    "Page",
    "PageFailure",
    "PageReadError",
    "PageWriteError",
]
