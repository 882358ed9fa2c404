"""Typed dataclasses describing chanzero site settings."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from chanzero._constants import STYLESHEET_SETTING, TITLE_SETTING


@dc.dataclass(frozen=True, slots=True)
class SiteSettings:
    """Site-wide settings declared in the root document's header block.

    Attributes
    ----------
    values : Mapping[str, str]
        Every ``key: value`` pair found in the header, keyed by the trimmed
        setting name. Later duplicates have already replaced earlier ones.
    """

    values: typ.Mapping[str, str] = dc.field(default_factory=dict)

    @property
    def stylesheet(self) -> str | None:
        """Return the shared stylesheet reference, if the header set one."""
        return self.values.get(STYLESHEET_SETTING) or None

    @property
    def title(self) -> str | None:
        """Return the configured page title, if any."""
        return self.values.get(TITLE_SETTING) or None

    def get(self, key: str, default: str | None = None) -> str | None:
        """Look up an arbitrary setting by name."""
        return self.values.get(key, default)

    def __bool__(self) -> bool:
        return bool(self.values)


__all__ = ["SiteSettings"]
