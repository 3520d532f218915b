"""Calendar arithmetic on FieldTuples.

Operations (from tempotime.arithmetic.field_ops):
    - add_field: Add an amount of one unit, clamping the day for months/years
    - add_fields: Apply several unit amounts with a single clamp
    - start_of, end_of: Snap to the boundaries of a unit
    - calendar_diff: Signed distance between two FieldTuples in a unit
"""

from __future__ import annotations

from tempotime.arithmetic.field_ops import (
    add_field,
    add_fields,
    calendar_diff,
    end_of,
    start_of,
)

__all__ = [
    "add_field",
    "add_fields",
    "start_of",
    "end_of",
    "calendar_diff",
]
