"""Logging configuration for the contribution ledger app.

Output goes to stdout with a level taken from the LOG_LEVEL environment
variable (default: INFO). Streamlit re-executes the page script on every
interaction, so setup only installs its handler once.
"""

from __future__ import annotations

import logging
import sys

from . import config

# Map string level names to logging constants
LOG_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_HANDLER_NAME = "contribution_ledger.stdout"


def get_log_level(level_name: str | None = None) -> int:
    """Resolve a level name to a logging constant.

    Args:
        level_name: Level name such as ``"DEBUG"``. Defaults to
            ``config.LOG_LEVEL``.

    Returns:
        Logging level constant (INFO when the name is unknown)
    """
    name = (level_name or config.LOG_LEVEL).upper()
    return LOG_LEVEL_MAP.get(name, logging.INFO)


def setup_logging(level_name: str | None = None) -> logging.Logger:
    """Configure the ``contribution_ledger`` logger hierarchy.

    Returns the package logger. Calling it again only updates the level.
    """
    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    log_level = get_log_level(level_name)

    package_logger = logging.getLogger("contribution_ledger")
    package_logger.setLevel(log_level)

    handler = next((h for h in package_logger.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    handler.setLevel(log_level)
    return package_logger
