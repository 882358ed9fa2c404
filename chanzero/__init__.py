"""Render a tree of interlinked Markdown pages into a mirrored HTML tree.

Starting from one root document, chanzero follows local links transitively,
renders each reachable page once, and writes the results one directory above
the root document's directory.

Exports
-------
- ``app``: Cyclopts application behind the ``chanzero`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``export_site``: Library entry point used by the CLI.

Examples
--------
>>> from chanzero import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .generator import export_site

__all__ = ["app", "export_site", "main"]
