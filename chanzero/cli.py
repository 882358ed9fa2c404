"""Cyclopts CLI entrypoint for building a chanzero site.

The ``chanzero`` console script takes the root Markdown file of a site,
exports every page reachable from it, and prints one line per written page.
The root option can also be supplied through ``CHANZERO_SRC``, and
``CHANZERO_LOG_LEVEL`` controls diagnostic logging (``WARNING`` by default).

Examples
--------
Build the site whose root page is ``site/src/index.md``:

>>> from chanzero.cli import app
>>> app(["--src", "site/src/index.md"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import os
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .generator import ExportError, PageFailure, export_site

if typ.TYPE_CHECKING:
    from .generator import ExportedPage

LOG_LEVEL_ENV = "CHANZERO_LOG_LEVEL"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(
    name="chanzero",
    help="Render a tree of linked Markdown pages into HTML.",
    config=cyclopts.config.Env("CHANZERO_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _print_progress(entry: ExportedPage | PageFailure) -> None:
    """Print one line for a page as soon as the exporter has handled it."""
    if isinstance(entry, PageFailure):
        print(f"failed {_format_path(entry.source)}: {entry.reason}", flush=True)
        return
    source, destination = _format_path(entry.source), _format_path(entry.destination)
    print(f"exported {source} -> {destination}", flush=True)


def _configure_logging() -> None:
    """Route diagnostics to stderr at the level named by ``CHANZERO_LOG_LEVEL``."""
    name = os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelNamesMapping().get(name, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


@app.default
def build(
    *,
    src: typ.Annotated[
        Path, Parameter(help="Path to root src file for site to build.")
    ],
) -> None:
    """Export the site rooted at ``src``.

    Parameters
    ----------
    src : Path
        Root Markdown file. Output is written one directory above the
        directory that contains it.

    Returns
    -------
    None
        Writes rendered pages and prints a line for each of them.

    Raises
    ------
    SystemExit
        With status 1 when the root file is missing or unreadable.
    """
    _configure_logging()
    if not src.is_file():
        print(f"Couldn't open file \"{src}\"", file=sys.stderr)
        raise SystemExit(1)

    print(f"Building site with root: {_format_path(src)}")
    try:
        export_site(src, progress=_print_progress)
    except ExportError as exc:
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc


def main() -> None:
    """Invoke the Cyclopts application that powers the ``chanzero`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
