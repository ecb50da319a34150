"""Environment-driven defaults.

Values are read once at import. Callers that need different behaviour
per call pass explicit arguments (a timezone, a FormatContext, a
max_units) instead of changing these.
"""

from __future__ import annotations

import os

# Zone used when a caller passes no timezone. Unset means the system zone.
DEFAULT_TIMEZONE: str | None = os.getenv("DATEWISE_TIMEZONE") or None

# Differences smaller than this (in seconds) describe as "just now"
JUST_NOW_SECONDS = float(os.getenv("DATEWISE_JUST_NOW_SECONDS", "1.0"))

# Units a relative description shows before it turns approximate
RELATIVE_MAX_UNITS = int(os.getenv("DATEWISE_RELATIVE_MAX_UNITS", "1"))

# Locale identifier recorded on FormatContext; only the POSIX English
# tables ship with the library
DEFAULT_LOCALE = os.getenv("DATEWISE_LOCALE", "en_US_POSIX")


__all__ = [
    "DEFAULT_TIMEZONE",
    "JUST_NOW_SECONDS",
    "RELATIVE_MAX_UNITS",
    "DEFAULT_LOCALE",
]
