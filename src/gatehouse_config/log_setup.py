"""Logging configuration shared by gatehouse packages."""

import logging
import sys

from gatehouse_config.settings import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings) -> int:
    """Configure application logging.

    Sets up console output with timestamps and module names, applies the
    configured level to the gatehouse loggers and quiets noisy
    third-party loggers.

    Returns
    -------
    The numeric log level that was applied
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in ("gatehouse_auth", "gatehouse_identity", "gatehouse_config"):
        logging.getLogger(name).setLevel(log_level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)

    return log_level
