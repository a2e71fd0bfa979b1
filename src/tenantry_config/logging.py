"""Logging setup shared by every entry point."""

import logging
import sys

from tenantry_config.settings import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings) -> int:
    """Configure application logging.

    Sets up console logging for the tenantry packages with:
    - Timestamps and module names
    - Configurable log level for tenantry modules (from settings)
    - WARNING level for noisy third-party libraries

    Returns the resolved numeric log level.
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("tenantry", "tenantry_auth", "tenantry_config"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    return log_level
