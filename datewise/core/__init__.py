"""Core value types.

This module provides the fundamental types:
    - Instant: Absolute point in time with millisecond precision
    - FieldSet: Calendar fields of an Instant under a time zone
    - CalendarDelta: Signed amounts per calendar unit
    - decompose / recompose: The calendar field resolver
"""

from __future__ import annotations

from datewise.core.delta import CalendarDelta
from datewise.core.fieldset import FieldSet
from datewise.core.instant import Instant
from datewise.core.resolver import decompose, normalize, recompose

__all__: list[str] = [
    "CalendarDelta",
    "FieldSet",
    "Instant",
    "decompose",
    "normalize",
    "recompose",
]
