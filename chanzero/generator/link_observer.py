"""Report every link target the Markdown converter emits.

Register :class:`LinkObserverExtension` on a ``markdown.Markdown`` instance and
pass a callback; the callback receives each anchor's ``href`` in document order
while the document is being converted. Explicit links, reference links,
``<...>`` autolinks, and bare URLs all end up as ``<a href>`` elements by the
time the observer runs, so they are reported alike. The rendered HTML is left
untouched.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from html import unescape

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from markdown.util import AMP_SUBSTITUTE

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

LinkObserver = cabc.Callable[[str], None]


def _raw_target(href: str) -> str:
    """Undo the entity obfuscation Python-Markdown applies to email autolinks."""
    if AMP_SUBSTITUTE not in href:
        return href
    return unescape(href.replace(AMP_SUBSTITUTE, "&"))


class LinkObserverExtension(Extension):
    """Invoke a callback for each hyperlink target in the converted document."""

    def __init__(self, observer: LinkObserver) -> None:
        self.observer = observer
        super().__init__()

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the link-observing treeprocessor on the Markdown instance."""
        processor = LinkObserverTreeprocessor(md, self.observer)
        # Runs after inline processing (20) has built every anchor.
        md.treeprocessors.register(processor, "chanzero_link_observer", 10)


class LinkObserverTreeprocessor(Treeprocessor):
    """Walk the element tree and report anchor targets."""

    def __init__(self, md: Markdown, observer: LinkObserver) -> None:
        super().__init__(md)
        self.observer = observer

    def run(self, root: Element) -> None:
        """Report the ``href`` of every anchor, in document order."""
        for element in root.iter("a"):
            href = element.get("href")
            if href is not None:
                self.observer(_raw_target(href))


__all__ = ["LinkObserver", "LinkObserverExtension", "LinkObserverTreeprocessor"]
