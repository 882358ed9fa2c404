"""Site settings for chanzero builds.

Settings are declared once, in a header block at the top of the root
document, and are then handed to every page import as a read-only
:class:`SiteSettings` value.

Examples
--------
>>> from chanzero.config import split_settings_header
>>> settings, _body = split_settings_header("SiteCss: site.css\n///\nBody")
>>> settings.stylesheet
'site.css'
"""

from .header import parse_settings, split_settings_header
from .models import SiteSettings

__all__ = ["SiteSettings", "parse_settings", "split_settings_header"]
