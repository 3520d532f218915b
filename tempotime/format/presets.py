"""Named format presets for DateTime.to_locale_string().

Each preset is a plain pattern string for the token compiler, using the
fixed English name tables.
"""

from __future__ import annotations

from typing import Mapping

DATE_SHORT = "M/d/yyyy"
DATE_MED = "MMM d, yyyy"
DATE_FULL = "MMMM d, yyyy"
TIME_SIMPLE = "h:mm a"
TIME_WITH_SECONDS = "h:mm:ss a"
DATETIME_SHORT = "M/d/yyyy, h:mm a"
DATETIME_MED = "MMM d, yyyy, h:mm a"
DATETIME_FULL = "MMMM d, yyyy, h:mm a"

PRESETS: Mapping[str, str] = {
    "DATE_SHORT": DATE_SHORT,
    "DATE_MED": DATE_MED,
    "DATE_FULL": DATE_FULL,
    "TIME_SIMPLE": TIME_SIMPLE,
    "TIME_WITH_SECONDS": TIME_WITH_SECONDS,
    "DATETIME_SHORT": DATETIME_SHORT,
    "DATETIME_MED": DATETIME_MED,
    "DATETIME_FULL": DATETIME_FULL,
}


def resolve_preset(preset: str) -> str:
    """Return the pattern for a preset name, or ``preset`` itself.

    Names are matched case-insensitively; anything that is not a preset
    name is taken to be a pattern already.

    Examples:
        >>> resolve_preset("date_med")
        'MMM d, yyyy'
        >>> resolve_preset("yyyy")
        'yyyy'
    """
    return PRESETS.get(preset.upper(), preset)


__all__ = [
    "DATE_SHORT",
    "DATE_MED",
    "DATE_FULL",
    "TIME_SIMPLE",
    "TIME_WITH_SECONDS",
    "DATETIME_SHORT",
    "DATETIME_MED",
    "DATETIME_FULL",
    "PRESETS",
    "resolve_preset",
]
