"""Logging configuration for applications built on the client."""

import logging
import os
import sys
from collections.abc import Iterable

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_level(level: str) -> int:
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


def _set_logger_levels(names: Iterable[str], level: int) -> None:
    for name in names:
        logging.getLogger(name).setLevel(level)


def configure_logging(level_name: str | None = None) -> None:
    """Configure process-wide logging to stdout only.

    The library itself never installs handlers; call this from an
    application entry point.

    Env vars:
      - LOG_LEVEL: DEBUG/INFO/WARNING/ERROR/CRITICAL (default INFO)
      - LOG_HTTP_WIRE: true/false, let urllib3 log at DEBUG (default false)

    :param level_name: Level override; takes precedence over LOG_LEVEL.
    :raises ValueError: If the level name is not a logging level.
    """
    level_name = level_name or os.environ.get("LOG_LEVEL", "INFO")
    level = _parse_level(level_name)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)

    wire_enabled = os.environ.get("LOG_HTTP_WIRE", "false").strip().lower() == "true"
    if not wire_enabled:
        _set_logger_levels(("urllib3", "requests"), level=max(level, logging.INFO))

    logging.getLogger(__name__).info("Logging configured: level=%s", level_name.upper())
