"""Common literal values used across chanzero.

File extensions, the settings-header separator, and recognised setting names
are kept here so the importer, exporter, and tests agree on them.

Examples
--------
>>> from chanzero import _constants
>>> _constants.SETTINGS_SEPARATOR_PATTERN.match("////") is not None
True
>>> _constants.OUTPUT_EXTENSION
'html'
"""

import re

SOURCE_EXTENSION = "md"
OUTPUT_EXTENSION = "html"

# A header block ends at the first line made of three or more slashes.
SETTINGS_SEPARATOR_PATTERN = re.compile(r"^[ \t]*/{3,}[ \t]*\r?$", re.MULTILINE)

STYLESHEET_SETTING = "SiteCss"
TITLE_SETTING = "Title"
