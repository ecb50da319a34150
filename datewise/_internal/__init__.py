"""Internal utilities for Datewise.

This module contains private implementation details:
    - Calendar math (leap years, ordinals, week fields)
    - Constants and magic numbers
    - Validation helpers
    - Decorators (@superseded_by)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datewise._internal.decorators import superseded_by
from datewise._internal.validation import (
    validate_fields,
    validate_month,
    validate_range,
)

__all__: list[str] = [
    "superseded_by",
    "validate_fields",
    "validate_month",
    "validate_range",
]
