"""Internal utilities for Tempotime.

This module contains private implementation details:
    - Calendar math (leap years, civil day numbers, weekdays)
    - Constants and magic numbers
    - Field validation helpers
    - The @memoize decorator

Note: This module is not part of the public API.
"""

from __future__ import annotations

from tempotime._internal.decorators import memoize
from tempotime._internal.validation import (
    validate_date,
    validate_day,
    validate_month,
    validate_range,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "memoize",
    "validate_date",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_time",
    "validate_year",
]
