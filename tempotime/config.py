"""Process-wide settings for Tempotime.

Settings are a frozen pydantic model. The active object is replaced
wholesale by configure() / reset_settings() and never mutated, so a
reader always sees one consistent set of values.

Environment variables (read by load_settings):

    TEMPOTIME_TRAILING_INPUT      reject | ignore
    TEMPOTIME_TWO_DIGIT_YEAR_BASE century added to "yy" years, e.g. 1900
    TEMPOTIME_ZONE_BACKEND        static | zoneinfo
    TEMPOTIME_DEFAULT_ZONE        zone used by now() and from_format()
"""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tempotime._internal.constants import DEFAULT_TWO_DIGIT_YEAR_BASE
from tempotime.units.zones import StaticZoneResolver, ZoneInfoResolver, ZoneResolver

logger = logging.getLogger(__name__)

ENV_PREFIX = "TEMPOTIME_"


class TrailingInputPolicy(str, Enum):
    """What the pattern parser does with input left after the last directive."""
    REJECT = "reject"
    IGNORE = "ignore"


class ZoneBackend(str, Enum):
    """Zone resolver used when none is passed explicitly."""
    STATIC = "static"
    ZONEINFO = "zoneinfo"


class Settings(BaseModel):
    """Validated library settings."""
    trailing_input: TrailingInputPolicy = TrailingInputPolicy.REJECT
    two_digit_year_base: int = Field(DEFAULT_TWO_DIGIT_YEAR_BASE, ge=0, le=9900)
    zone_backend: ZoneBackend = ZoneBackend.STATIC
    default_zone: str = Field("UTC", min_length=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("two_digit_year_base")
    @classmethod
    def _whole_century(cls, value: int) -> int:
        if value % 100 != 0:
            raise ValueError("two_digit_year_base must be a multiple of 100")
        return value


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``TEMPOTIME_*`` environment variables.

    Unset variables keep their defaults. Values are validated by the
    model, so a bad value raises pydantic's ValidationError.

    Args:
        environ: Mapping to read instead of ``os.environ``.
    """
    source = os.environ if environ is None else environ
    data: dict[str, Any] = {}
    for name in Settings.model_fields:
        raw = source.get(ENV_PREFIX + name.upper())
        if raw is not None:
            data[name] = raw.strip()
    if data:
        logger.debug("settings overrides from environment: %s", sorted(data))
    return Settings.model_validate(data)


_active: Settings | None = None


def get_settings() -> Settings:
    """Return the active settings, loading them from the environment once."""
    global _active
    if _active is None:
        _active = load_settings()
    return _active


def configure(**overrides: Any) -> Settings:
    """Replace the active settings with a copy carrying ``overrides``.

    Examples:
        >>> configure(trailing_input="ignore").trailing_input.value
        'ignore'
    """
    merged = get_settings().model_dump()
    merged.update(overrides)
    settings = Settings.model_validate(merged)
    global _active
    _active = settings
    return settings


def reset_settings() -> None:
    """Drop the active settings; the next read reloads the environment."""
    global _active
    _active = None


_RESOLVERS: dict[ZoneBackend, ZoneResolver] = {
    ZoneBackend.STATIC: StaticZoneResolver(),
    ZoneBackend.ZONEINFO: ZoneInfoResolver(),
}


def get_zone_resolver(settings: Settings | None = None) -> ZoneResolver:
    """Return the resolver selected by ``zone_backend``."""
    settings = settings or get_settings()
    return _RESOLVERS[settings.zone_backend]


__all__ = [
    "ENV_PREFIX",
    "TrailingInputPolicy",
    "ZoneBackend",
    "Settings",
    "load_settings",
    "get_settings",
    "configure",
    "reset_settings",
    "get_zone_resolver",
]
