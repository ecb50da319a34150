"""Conversion utilities.

This module provides functions for converting Instants to and from
other representations:
    - Unix epoch conversions (seconds, milliseconds)
    - Standard library datetime interop
    - Wall-clock shifting by a zone's offset

Examples:
    >>> from datewise import Instant
    >>> from datewise.convert import to_datetime, from_datetime

    >>> i = Instant.from_timestamp(1_705_329_045)
    >>> from_datetime(to_datetime(i, "Europe/Rome")) == i
    True
"""

from __future__ import annotations

from datewise.convert.epoch import (
    from_datetime,
    from_unix_millis,
    from_unix_seconds,
    to_datetime,
    to_unix_millis,
    to_unix_seconds,
)
from datewise.convert.shift import shift_from_utc, shift_to_timezone, shift_to_utc

__all__ = [
    # Epoch
    "to_unix_seconds",
    "from_unix_seconds",
    "to_unix_millis",
    "from_unix_millis",
    # Standard library
    "to_datetime",
    "from_datetime",
    # Shifting
    "shift_to_utc",
    "shift_from_utc",
    "shift_to_timezone",
]
