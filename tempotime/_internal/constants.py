"""Internal constants for Tempotime.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions (the Instant resolution is one millisecond)
MS_PER_SECOND: int = 1_000
MS_PER_MINUTE: int = 60 * MS_PER_SECOND
MS_PER_HOUR: int = 60 * MS_PER_MINUTE
MS_PER_DAY: int = 24 * MS_PER_HOUR  # 86_400_000
MS_PER_WEEK: int = 7 * MS_PER_DAY

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Nominal lengths used when no anchor date is available
NOMINAL_DAYS_PER_MONTH: int = 30
NOMINAL_DAYS_PER_YEAR: int = 365

# Year limits (practical limits for the library)
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Days between 0000-03-01 and 1970-01-01 in the proleptic Gregorian calendar
CIVIL_EPOCH_SHIFT: int = 719_468
DAYS_PER_ERA: int = 146_097  # 400 Gregorian years

# Timezone offset limits (in seconds)
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR

# Default century for two-digit years
DEFAULT_TWO_DIGIT_YEAR_BASE: int = 2000


__all__ = [
    "MS_PER_SECOND",
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "MS_PER_WEEK",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "NOMINAL_DAYS_PER_MONTH",
    "NOMINAL_DAYS_PER_YEAR",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "CIVIL_EPOCH_SHIFT",
    "DAYS_PER_ERA",
    "MAX_UTC_OFFSET_SECONDS",
    "DEFAULT_TWO_DIGIT_YEAR_BASE",
]
