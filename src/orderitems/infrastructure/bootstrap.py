"""Composition root: wires configuration to concrete implementations.

This is the only place that decides which Clock the domain gets.  The
application embedding this package calls ``configure_logging`` once at
startup; the package itself never configures logging on import.
"""

from __future__ import annotations

import logging

from orderitems.domain.model.clock import SystemClock
from orderitems.infrastructure.config import Settings

PACKAGE_LOGGER = "orderitems"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it.

    A root handler is only installed when the host has none yet.
    """
    settings = settings or Settings.from_env()
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(settings.log_level)
    return package_logger


def clock(settings: Settings | None = None) -> SystemClock:
    settings = settings or Settings.from_env()
    return SystemClock(settings.timezone)
