"""Filesystem access used by the exporter.

The exporter only needs four primitives, captured by :class:`FileSystem`.
:class:`LocalFileSystem` implements them with :mod:`pathlib`; tests can pass a
recording subclass to observe reads and writes. Failures surface as
``OSError`` and are interpreted by the caller.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


class FileSystem(typ.Protocol):
    """Primitives the exporter needs from storage."""

    def exists(self, path: Path) -> bool: ...

    def read_all(self, path: Path) -> bytes: ...

    def write_all(self, path: Path, data: bytes) -> None: ...

    def ensure_directory(self, path: Path) -> None: ...


class LocalFileSystem:
    """Read and write files on the local disk."""

    def exists(self, path: Path) -> bool:
        """Return ``True`` when ``path`` names an existing regular file.

        Paths that cannot be inspected (too long, permission denied) count as
        missing.
        """
        try:
            return path.is_file()
        except OSError:
            return False

    def read_all(self, path: Path) -> bytes:
        """Return the full contents of ``path``."""
        return path.read_bytes()

    def write_all(self, path: Path, data: bytes) -> None:
        """Replace the contents of ``path`` with ``data``."""
        path.write_bytes(data)

    def ensure_directory(self, path: Path) -> None:
        """Create ``path`` and any missing parents."""
        path.mkdir(parents=True, exist_ok=True)


__all__ = ["FileSystem", "LocalFileSystem"]
