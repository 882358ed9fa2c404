"""Import, render, and export the pages of a chanzero site."""

from .exporter import (
    ProgressCallback,
    SiteExporter,
    export_site,
    replace_extension,
    resolve_link_target,
)
from .importer import PageImporter
from .link_observer import LinkObserverExtension
from .models import (
    ExportedPage,
    ExportError,
    ExportReport,
    Page,
    PageFailure,
    PageReadError,
    PageWriteError,
)
from .renderer import MarkdownRenderer

__all__ = [
    "ExportError",
    "ExportReport",
    "ExportedPage",
    "LinkObserverExtension",
    "MarkdownRenderer",
    "Page",
    "PageFailure",
    "PageImporter",
    "PageReadError",
    "PageWriteError",
    "ProgressCallback",
    "SiteExporter",
    "export_site",
    "replace_extension",
    "resolve_link_target",
]
