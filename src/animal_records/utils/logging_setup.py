"""Centralized logging configuration.

Usage::

    from animal_records.utils.logging_setup import setup_logging

    setup_logging("DEBUG")

    # Then in any module:
    import logging
    logger = logging.getLogger(__name__)
    logger.debug("Something happened")

Logs always go to stderr so that command output on stdout stays clean.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER: str = "animal_records"

_HANDLER_NAME: str = "animal_records.stderr"


def setup_logging(log_level: str = "WARNING") -> logging.Logger:
    """Configure the package logger and return it.

    Calling this again replaces the handler installed by the previous
    call, so repeated CLI invocations in one process never duplicate
    log lines.

    Args:
        log_level: Minimum level to log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)
    return package_logger
