"""Runtime settings, read from environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from orderitems.domain.exceptions import ValidationError

TIMEZONE_VAR = "ORDERITEMS_TIMEZONE"
LOG_LEVEL_VAR = "ORDERITEMS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration.

    ``timezone`` of None means the host's local time zone.
    """

    timezone: ZoneInfo | None = None
    log_level: int = logging.WARNING

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        return Settings(
            timezone=_parse_timezone(env.get(TIMEZONE_VAR, "").strip()),
            log_level=_parse_log_level(env.get(LOG_LEVEL_VAR, DEFAULT_LOG_LEVEL).strip()),
        )


def _parse_timezone(name: str) -> ZoneInfo | None:
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValidationError(f"Unknown time zone in {TIMEZONE_VAR}: {name!r}") from exc


def _parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValidationError(f"Unknown log level in {LOG_LEVEL_VAR}: {name!r}")
    return level
