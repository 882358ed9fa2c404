r"""Split the optional settings header off the root document.

The root Markdown file may begin with a block of ``key: value`` lines that is
terminated by a line of three or more slashes::

    Title: Field Notes
    SiteCss: css/site.css
    ///
    # Welcome

Everything above the separator configures the whole site; everything below it
is rendered as Markdown.

Example
-------
>>> from chanzero.config.header import split_settings_header
>>> settings, body = split_settings_header("Title: Notes\n///\n# Hi\n")
>>> settings.title, body
('Notes', '# Hi\n')
"""

from __future__ import annotations

from chanzero._constants import SETTINGS_SEPARATOR_PATTERN

from .models import SiteSettings


def parse_settings(header: str) -> dict[str, str]:
    """Parse ``key: value`` lines into a mapping.

    Parameters
    ----------
    header : str
        Raw header text (everything before the separator line).

    Returns
    -------
    dict[str, str]
        Settings keyed by trimmed name. Lines without a colon are ignored and
        later duplicate keys overwrite earlier ones. Values may contain further
        colons because only the first one splits the line.
    """
    settings: dict[str, str] = {}
    for line in header.splitlines():
        key, sep, value = line.partition(":")
        if not sep:
            continue
        settings[key.strip()] = value.strip()
    return settings


def split_settings_header(text: str) -> tuple[SiteSettings, str]:
    """Return the header settings and the Markdown body of ``text``.

    When no separator line is present the whole text is the body and the
    returned settings are empty.
    """
    match = SETTINGS_SEPARATOR_PATTERN.search(text)
    if match is None:
        return SiteSettings(), text

    header = text[: match.start()]
    body = text[match.end() :]
    if body.startswith("\n"):
        body = body[1:]
    return SiteSettings(parse_settings(header)), body


__all__ = ["parse_settings", "split_settings_header"]
